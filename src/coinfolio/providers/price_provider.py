"""Price provider protocol."""

from typing import Protocol


class PriceProvider(Protocol):
    """
    Protocol for external price sources.

    One call prices a batch of provider ids in a fixed quote currency.
    Implementations raise RateLimitedError when throttled and ProviderError
    for any other failure; they never degrade on their own.
    """

    name: str

    def get_prices(self, provider_ids: list[str]) -> dict[str, float]:
        """
        Fetch prices for a batch of provider ids.

        Returns dict mapping provider id -> price. Ids the provider does not
        price are omitted from the result.
        """
        ...
