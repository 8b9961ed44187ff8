"""coinfolio - portfolio price aggregation backend."""

__version__ = "0.1.0"
