"""View models for price service outputs."""

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class FetchResult:
    """
    Outcome of one price lookup.

    prices is keyed by canonical ticker symbol. from_cache is True when no
    fresh provider data contributed to the result. errors carries validation
    messages and provider warnings in-band; None when the lookup was clean.
    """

    prices: dict[str, float] = field(default_factory=dict)
    from_cache: bool = False
    errors: Optional[list[str]] = None

    def add_error(self, message: str) -> None:
        if self.errors is None:
            self.errors = []
        if message not in self.errors:
            self.errors.append(message)

    @property
    def is_hard_miss(self) -> bool:
        """True when nothing could be priced and errors explain why."""
        return not self.prices and bool(self.errors)
