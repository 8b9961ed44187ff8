"""Price fetcher: resolve, partition against the cache, fetch misses, degrade."""

import logging
from concurrent.futures import Future
from typing import Callable, Iterable, Optional, Union

from coinfolio.core.exceptions import ProviderError, RateLimitedError
from coinfolio.core.timezone import now_millis
from coinfolio.domain.views import FetchResult
from coinfolio.providers.price_provider import PriceProvider
from coinfolio.repositories.protocols import PriceCacheRepository
from coinfolio.services.inflight import InFlightRegistry
from coinfolio.services.symbol_resolver import SymbolResolver, parse_symbols

logger = logging.getLogger(__name__)

DEFAULT_TTL_MS = 300000
NO_VALID_SYMBOLS_MESSAGE = "No valid crypto symbols provided"
RATE_LIMIT_WARNING = "Rate limit reached, showing cached prices"


class PriceFetcher:
    """
    Orchestrates price lookups for raw ticker symbols.

    Unsupported symbols are dropped silently. Symbols with a fresh cached
    price are served from the cache; the rest go to the provider in one
    batched call. Provider failures never propagate: the result falls back to
    whatever the cache holds for the requested symbols (possibly stale) and
    reports the failure in FetchResult.errors.

    Concurrent callers share outbound lookups: an id already being fetched by
    another caller is awaited rather than requested again.
    """

    def __init__(
        self,
        provider: PriceProvider,
        cache: PriceCacheRepository,
        resolver: Optional[SymbolResolver] = None,
        cache_ttl_ms: int = DEFAULT_TTL_MS,
        clock: Callable[[], float] = now_millis,
        inflight: Optional[InFlightRegistry] = None,
    ):
        self._provider = provider
        self._cache = cache
        self._resolver = resolver or SymbolResolver()
        self._ttl_ms = cache_ttl_ms
        self._clock = clock
        self._inflight = inflight or InFlightRegistry()

    @property
    def cache_ttl_ms(self) -> int:
        return self._ttl_ms

    def fetch_prices(self, raw_symbols: Union[str, Iterable[str], None]) -> FetchResult:
        """
        Return prices keyed by canonical symbol.

        raw_symbols may be "btc,eth" or a list of such strings.
        """
        resolved: list[tuple[str, str]] = []
        for symbol in parse_symbols(raw_symbols):
            provider_id = self._resolver.resolve(symbol)
            if provider_id is not None:
                resolved.append((symbol, provider_id))

        if not resolved:
            return FetchResult(prices={}, from_cache=False, errors=[NO_VALID_SYMBOLS_MESSAGE])

        # Partition against one consistent view of the cache
        now = self._clock()
        entries, last_refreshed = self._cache.snapshot()
        cache_valid = now - last_refreshed < self._ttl_ms

        cached: dict[str, float] = {}
        uncached: list[tuple[str, str]] = []
        for symbol, provider_id in resolved:
            if cache_valid and provider_id in entries:
                cached[symbol] = entries[provider_id]
            else:
                uncached.append((symbol, provider_id))

        if not uncached:
            logger.debug("Serving %d prices from cache", len(cached))
            return FetchResult(prices=cached, from_cache=True)

        fetched, failures = self._fetch_uncached([pid for _, pid in uncached])

        result = FetchResult(prices=dict(cached))
        for provider_id, price in fetched.items():
            result.prices[self._resolver.reverse_lookup(provider_id)] = price
        missing = [(s, pid) for s, pid in uncached if pid not in fetched]

        if not failures:
            result.from_cache = False
            return result

        # Degrade: fill what the provider could not price from the cache,
        # even if the cache is past its freshness window.
        for symbol, provider_id in missing:
            stale = self._cache.get(provider_id)
            if stale is not None:
                result.prices[symbol] = stale
        result.from_cache = not fetched
        for failure in failures:
            result.add_error(_describe(failure))
        return result

    def get_supported_symbols(self) -> list[str]:
        return self._resolver.list_supported()

    def is_supported_crypto(self, symbol: Optional[str]) -> bool:
        return self._resolver.is_supported(symbol)

    def _fetch_uncached(self, provider_ids: list[str]) -> tuple[dict[str, float], list[ProviderError]]:
        """
        Fetch prices for provider_ids, sharing lookups already in flight.

        Returns (prices, failures). A successful lookup made by this caller is
        merged into the cache before waiting callers are released.
        """
        future, owned, joined = self._inflight.claim(provider_ids)
        fetched: dict[str, float] = {}
        failures: list[ProviderError] = []

        if future is not None:
            try:
                prices = self._call_provider(owned)
            except ProviderError as e:
                future.set_exception(e)
                failures.append(e)
            else:
                self._cache.bulk_put(prices, self._clock())
                future.set_result(prices)
                fetched.update({pid: prices[pid] for pid in owned if pid in prices})
            finally:
                if not future.done():
                    future.set_exception(ProviderError("Price lookup aborted"))
                self._inflight.release(owned, future)

        # Several joined ids may belong to the same outstanding lookup
        groups: list[tuple[Future, list[str]]] = []
        for provider_id, other in joined.items():
            for group_future, group_ids in groups:
                if group_future is other:
                    group_ids.append(provider_id)
                    break
            else:
                groups.append((other, [provider_id]))

        for other, group_ids in groups:
            logger.debug("Joining in-flight lookup for %s", ",".join(group_ids))
            try:
                prices = other.result()
            except ProviderError as e:
                if e not in failures:
                    failures.append(e)
            else:
                for provider_id in group_ids:
                    if provider_id in prices:
                        fetched[provider_id] = prices[provider_id]

        return fetched, failures

    def _call_provider(self, provider_ids: list[str]) -> dict[str, float]:
        """One batched provider call; any failure surfaces as ProviderError."""
        logger.debug(
            "Requesting %d prices from %s",
            len(provider_ids),
            getattr(self._provider, "name", "provider"),
        )
        try:
            return self._provider.get_prices(provider_ids)
        except RateLimitedError:
            logger.warning("Price provider rate limit reached, using cached data if available")
            raise
        except ProviderError as e:
            logger.error("Error fetching prices: %s", e.message)
            raise
        except Exception as e:
            logger.exception("Unexpected error from price provider")
            raise ProviderError(str(e) or e.__class__.__name__) from e


def _describe(failure: ProviderError) -> str:
    if isinstance(failure, RateLimitedError):
        return RATE_LIMIT_WARNING
    return failure.message
