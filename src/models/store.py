# src/models/store.py

"""Grocery store configuration model."""

from dataclasses import dataclass, field
from typing import Any


@dataclass
class APIConfig:
    """Connection details derived from a Store."""

    endpoint: str
    headers: dict[str, str]


@dataclass
class Store:
    """A grocery retailer and the API connection used to query it."""

    id: str = ""
    name: str = ""
    display_name: str = ""
    api_endpoint: str = ""
    api_key: str = field(default="", repr=False)
    logo_url: str = ""
    color: str = "#666"
    icon: str = "icon-store"
    is_active: bool = True

    def __post_init__(self) -> None:
        if not self.display_name:
            self.display_name = self.name

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> "Store":
        """Build a Store from a raw camelCase record with defaults."""
        data = data or {}
        is_active = data.get("isActive")
        return cls(
            id=data.get("id") or "",
            name=data.get("name") or "",
            display_name=data.get("displayName") or "",
            api_endpoint=data.get("apiEndpoint") or "",
            api_key=data.get("apiKey") or "",
            logo_url=data.get("logoUrl") or "",
            color=data.get("color") or "#666",
            icon=data.get("icon") or "icon-store",
            is_active=True if is_active is None else bool(is_active),
        )

    def get_api_config(self) -> APIConfig:
        return APIConfig(
            endpoint=self.api_endpoint,
            headers={
                "Authorization": f"Bearer {self.api_key}",
                "Content-Type": "application/json",
            },
        )

    def to_dict(self) -> dict[str, Any]:
        """Public view of the store; connection details are left out."""
        return {
            "id": self.id,
            "name": self.name,
            "displayName": self.display_name,
            "color": self.color,
            "icon": self.icon,
            "isActive": self.is_active,
        }
