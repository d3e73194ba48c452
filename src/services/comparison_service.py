# src/services/comparison_service.py

"""Fans a product search out to every store and compares the results."""

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Any

from src.api.base_api_service import BaseAPIService
from src.config.settings import Settings
from src.models.price_comparison import PriceComparison
from src.models.product import Product

logger = logging.getLogger("smart_cart.comparison")


@dataclass
class ComparisonResult:
    """Container for a completed comparison across stores."""

    query: str
    comparison: PriceComparison = field(default_factory=PriceComparison)
    errors: dict[str, str] = field(
        default_factory=lambda: dict[str, str]()
    )
    invalid_count: int = 0


def _best_listing(products: list[Product]) -> tuple[Product | None, int]:
    """Pick the cheapest valid listing and count the invalid ones."""
    valid = [p for p in products if p.is_valid()]
    invalid = len(products) - len(valid)
    if not valid:
        return None, invalid
    return min(valid, key=lambda p: p.price), invalid


class ComparisonService:
    """Coordinates per-store searches into a single PriceComparison."""

    def __init__(self, services: list[BaseAPIService]) -> None:
        self.settings = Settings()
        self.services = services

    async def _search_one(
        self,
        service: BaseAPIService,
        query: str,
        options: dict[str, Any] | None,
    ) -> list[Product]:
        """Run one blocking store search in a worker thread, with a deadline."""
        products: list[Product] = await asyncio.wait_for(
            asyncio.to_thread(service.search_products, query, options),
            timeout=self.settings.STORE_SEARCH_TIMEOUT,
        )
        return products

    async def compare(
        self,
        query: str,
        options: dict[str, Any] | None = None,
    ) -> ComparisonResult:
        """Search every active store concurrently and compare prices.

        A store that fails or times out is recorded in ``errors`` and
        skipped; the others still contribute to the comparison.
        """
        active = [s for s in self.services if s.store.is_active]
        result = ComparisonResult(query=query)

        batches = await asyncio.gather(
            *(self._search_one(s, query, options) for s in active),
            return_exceptions=True,
        )

        for service, batch in zip(active, batches):
            store_id = service.store.id or service.store.name
            if isinstance(batch, BaseException):
                if isinstance(batch, asyncio.TimeoutError):
                    message = (
                        "Timed out after "
                        f"{self.settings.STORE_SEARCH_TIMEOUT:.0f}s"
                    )
                else:
                    message = str(batch) or type(batch).__name__
                result.errors[store_id] = message
                logger.error(
                    "Store '%s' failed for query '%s': %s",
                    store_id,
                    query,
                    message,
                    exc_info=batch,
                )
                continue

            best, invalid = _best_listing(batch)
            result.invalid_count += invalid
            if invalid:
                logger.info(
                    "Dropped %d invalid listings from '%s'",
                    invalid,
                    store_id,
                )
            if best is not None:
                result.comparison.add_product(best)

        logger.info(
            "Compared '%s' across %d/%d stores (%d errors)",
            query,
            len(result.comparison),
            len(active),
            len(result.errors),
        )
        return result
