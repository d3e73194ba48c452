# src/models/product.py

"""Product data model: one item's price listing from one store."""

import math
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any


def _to_float(value: Any, default: float) -> float:
    """Coerce a loosely-typed numeric value, falling back on bad input."""
    if not value:
        return default
    try:
        return float(value)
    except (TypeError, ValueError):
        return default


def _to_str(value: Any, default: str) -> str:
    """Coerce a loosely-typed text value; numbers are stringified, other types dropped."""
    if not value:
        return default
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return default


def _to_optional_str(value: Any) -> str | None:
    return _to_str(value, "") or None


def _to_datetime(value: Any) -> datetime:
    """Accept a datetime or ISO-8601 string; anything else means 'now'."""
    if isinstance(value, datetime):
        return value
    if isinstance(value, str) and value:
        try:
            return datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError:
            pass
    return datetime.now()


@dataclass
class Product:
    """Represents a single grocery product listing from one store."""

    name: str = ""
    price: float = 0.0
    store: str = ""
    id: str | None = None
    brand: str = ""
    original_price: float = 0.0  # falls back to price
    store_id: str = ""
    image_url: str | None = None
    unit: str = "each"
    quantity: float = 1
    in_stock: bool = True
    category: str = ""
    upc: str | None = None
    sku: str | None = None
    last_updated: datetime = field(default_factory=datetime.now)

    def __post_init__(self) -> None:
        if not self.original_price:
            self.original_price = self.price
        if not self.quantity:
            self.quantity = 1

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> "Product":
        """Build a Product from a raw camelCase record.

        Missing or falsy values fall back to field defaults, and
        malformed numbers or text are treated as missing rather than
        raising. Numeric ids and names are kept as strings.
        """
        data = data or {}
        price = _to_float(data.get("price"), 0.0)
        in_stock = data.get("inStock")
        return cls(
            id=_to_optional_str(data.get("id")),
            name=_to_str(data.get("name"), ""),
            brand=_to_str(data.get("brand"), ""),
            price=price,
            original_price=_to_float(data.get("originalPrice"), price),
            store=_to_str(data.get("store"), ""),
            store_id=_to_str(data.get("storeId"), ""),
            image_url=_to_optional_str(data.get("imageUrl")),
            unit=_to_str(data.get("unit"), "each"),
            quantity=_to_float(data.get("quantity"), 1),
            in_stock=True if in_stock is None else bool(in_stock),
            category=_to_str(data.get("category"), ""),
            upc=_to_optional_str(data.get("upc")),
            sku=_to_optional_str(data.get("sku")),
            last_updated=_to_datetime(data.get("lastUpdated")),
        )

    def price_per_unit(self) -> float:
        """Price divided by quantity (or the plain price for quantity <= 0)."""
        return self.price / self.quantity if self.quantity > 0 else self.price

    def discount_percentage(self) -> int:
        """Whole-number discount off the original price, 0 when not on sale."""
        if self.original_price <= self.price:
            return 0
        pct = (self.original_price - self.price) / self.original_price * 100
        return math.floor(pct + 0.5)

    def is_on_sale(self) -> bool:
        return self.original_price > self.price

    def is_valid(self) -> bool:
        """A listing needs a name, a non-negative price and a store."""
        return bool(self.name) and self.price >= 0 and bool(self.store)

    def to_dict(self) -> dict[str, Any]:
        """Serialise to the canonical camelCase product record."""
        return {
            "id": self.id,
            "name": self.name,
            "brand": self.brand,
            "price": self.price,
            "originalPrice": self.original_price,
            "store": self.store,
            "storeId": self.store_id,
            "imageUrl": self.image_url,
            "unit": self.unit,
            "quantity": self.quantity,
            "inStock": self.in_stock,
            "category": self.category,
            "upc": self.upc,
            "sku": self.sku,
            "lastUpdated": self.last_updated.isoformat(),
        }
