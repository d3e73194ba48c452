# src/models/price_comparison.py

"""Cross-store price comparison for a single logical product."""

import secrets
import string
from collections.abc import Iterable, Iterator
from datetime import datetime
from typing import Any

from src.config.settings import Settings
from src.models.product import Product

_ID_ALPHABET = string.digits + string.ascii_lowercase


def _generate_id() -> str:
    """Return an identifier like ``pc_k3j9x0a``."""
    suffix = "".join(secrets.choice(_ID_ALPHABET) for _ in range(7))
    return f"pc_{suffix}"


def _format_price(value: float) -> str:
    return f"{Settings.CURRENCY_SYMBOL}{value:.2f}"


class PriceComparison:
    """Collects one Product per store and derives comparison statistics.

    Products live in a single ordered list; ``_by_store`` maps each
    store name to its entry in that list.  Both are updated together
    in :meth:`add_product`, so enumeration order always matches the
    order in which stores first appeared.
    """

    def __init__(self, products: Iterable[Product] | None = None) -> None:
        self.comparison_id: str = _generate_id()
        self.created_at: datetime = datetime.now()
        self._products: list[Product] = []
        self._by_store: dict[str, Product] = {}
        for product in products or []:
            self.add_product(product)

    def __len__(self) -> int:
        return len(self._products)

    def __iter__(self) -> Iterator[Product]:
        return iter(list(self._products))

    @property
    def products(self) -> list[Product]:
        """Products in store insertion order (a copy)."""
        return list(self._products)

    def add_product(self, product: Product) -> None:
        """Add a listing, replacing any earlier one from the same store."""
        if not isinstance(product, Product):
            raise TypeError(
                f"Invalid product type: {type(product).__name__}"
            )

        if product.store in self._by_store:
            index = next(
                i
                for i, p in enumerate(self._products)
                if p.store == product.store
            )
            self._products[index] = product
        else:
            self._products.append(product)
        self._by_store[product.store] = product

    def get_product_by_store(self, store_name: str) -> Product | None:
        return self._by_store.get(store_name)

    def get_price_by_store(self, store_name: str) -> float | None:
        product = self._by_store.get(store_name)
        return product.price if product is not None else None

    def has_store(self, store_name: str) -> bool:
        return store_name in self._by_store

    def get_stores(self) -> list[str]:
        return list(self._by_store)

    def get_price_stats(self) -> dict[str, float]:
        """Return min, max, average, median and range of the prices.

        All values are 0 for an empty comparison.  The median of an
        even-sized set is the mean of the two middle prices.
        """
        if not self._products:
            return {
                "min": 0,
                "max": 0,
                "average": 0,
                "median": 0,
                "range": 0,
            }

        prices = sorted(p.price for p in self._products)
        count = len(prices)
        mid = count // 2
        if count % 2 == 0:
            median = (prices[mid - 1] + prices[mid]) / 2
        else:
            median = prices[mid]

        return {
            "min": prices[0],
            "max": prices[-1],
            "average": sum(prices) / count,
            "median": median,
            "range": prices[-1] - prices[0],
        }

    def get_cheapest_product(self) -> Product | None:
        """Lowest-priced product; the earliest one wins a tie."""
        if not self._products:
            return None
        cheapest = self._products[0]
        for product in self._products[1:]:
            if product.price < cheapest.price:
                cheapest = product
        return cheapest

    def get_most_expensive_product(self) -> Product | None:
        """Highest-priced product; the earliest one wins a tie."""
        if not self._products:
            return None
        priciest = self._products[0]
        for product in self._products[1:]:
            if product.price > priciest.price:
                priciest = product
        return priciest

    def get_potential_savings(self) -> float:
        cheapest = self.get_cheapest_product()
        most_expensive = self.get_most_expensive_product()
        if cheapest is None or most_expensive is None:
            return 0
        return most_expensive.price - cheapest.price

    def get_products_sorted_by_price(
        self, ascending: bool = True
    ) -> list[Product]:
        return sorted(
            self._products,
            key=lambda p: p.price,
            reverse=not ascending,
        )

    def get_store_breakdown(self) -> dict[str, dict[str, Any]]:
        """Per-store pricing details relative to the cheapest listing."""
        cheapest = self.get_cheapest_product()
        cheapest_price = cheapest.price if cheapest is not None else 0

        breakdown: dict[str, dict[str, Any]] = {}
        for store, product in self._by_store.items():
            difference = product.price - cheapest_price
            breakdown[store] = {
                "price": product.price,
                "priceFormatted": _format_price(product.price),
                "inStock": product.in_stock,
                "isOnSale": product.is_on_sale(),
                "discountPercentage": product.discount_percentage(),
                "differenceFromBest": difference,
                "percentageAboveBest": (
                    round(difference / cheapest_price * 100, 1)
                    if cheapest_price > 0
                    else 0.0
                ),
            }
        return breakdown

    def get_comparison_summary(self) -> dict[str, Any]:
        cheapest = self.get_cheapest_product()
        most_expensive = self.get_most_expensive_product()
        stats = self.get_price_stats()

        best_deal = None
        if cheapest is not None:
            best_deal = {
                "store": cheapest.store,
                "price": cheapest.price,
                "savings": self.get_potential_savings(),
            }
        worst_deal = None
        if most_expensive is not None:
            worst_deal = {
                "store": most_expensive.store,
                "price": most_expensive.price,
            }

        product_name = (
            self._products[0].name if self._products else ""
        )
        return {
            "productName": product_name or "Unknown Product",
            "storeCount": len(self._by_store),
            "priceRange": (
                f"{_format_price(stats['min'])} - "
                f"{_format_price(stats['max'])}"
            ),
            "averagePrice": _format_price(stats["average"]),
            "bestDeal": best_deal,
            "worstDeal": worst_deal,
            "stores": self.get_store_breakdown(),
        }

    def to_dict(self) -> dict[str, Any]:
        """Serialise for storage or transmission."""
        return {
            "comparisonId": self.comparison_id,
            "createdAt": self.created_at.isoformat(),
            "products": [p.to_dict() for p in self._products],
            "summary": self.get_comparison_summary(),
        }
