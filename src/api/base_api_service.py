# src/api/base_api_service.py

"""Abstract base class for all store API clients."""

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any, TypeVar

from curl_cffi import requests as curl_requests

from src.api.errors import APIError, TransportError
from src.config.settings import Settings
from src.models.product import Product
from src.models.store import Store
from src.storage.ttl_cache import MISSING, TTLCache

T = TypeVar("T")


class BaseAPIService(ABC):
    """Contract every store-specific client implements.

    Subclasses translate the store's own JSON into :class:`Product`
    objects; the base class supplies authenticated requests against
    ``store.api_endpoint`` and a per-instance response cache.
    """

    def __init__(self, store: Store) -> None:
        self.store = store
        self.logger = logging.getLogger(
            f"smart_cart.api.{store.id or store.name}"
        )
        self.settings = Settings()
        api_config = store.get_api_config()
        self.base_url: str = api_config.endpoint
        self.headers: dict[str, str] = {
            **self.settings.DEFAULT_HEADERS,
            **api_config.headers,
        }
        self.api_key: str | None = store.api_key or None
        self.cache = TTLCache(
            ttl=self.settings.CACHE_TTL,
            max_entries=self.settings.CACHE_MAX_ENTRIES,
        )
        self.session = curl_requests.Session(
            impersonate=self.settings.IMPERSONATE_BROWSER
        )
        self._request_timeout: int = self.settings.REQUEST_TIMEOUT

    # ── Store-specific contract ──────────────────────────

    @abstractmethod
    def search_products(
        self,
        query: str,
        options: dict[str, Any] | None = None,
    ) -> list[Product]:
        """Search the store's catalogue and return matching products."""
        raise NotImplementedError(
            "search_products() must be implemented by subclass"
        )

    @abstractmethod
    def get_product_by_id(self, product_id: str) -> Product | None:
        """Fetch a single product by the store's own identifier."""
        raise NotImplementedError(
            "get_product_by_id() must be implemented by subclass"
        )

    @abstractmethod
    def transform_to_product(self, raw_data: dict[str, Any]) -> Product:
        """Convert one raw store record into a Product."""
        raise NotImplementedError(
            "transform_to_product() must be implemented by subclass"
        )

    # ── Shared plumbing ──────────────────────────────────

    def make_request(
        self,
        endpoint: str,
        method: str = "GET",
        headers: dict[str, str] | None = None,
        params: dict[str, Any] | None = None,
        json: Any = None,
    ) -> Any:
        """Call ``base_url + endpoint`` and return the decoded JSON body.

        Per-call headers override the store defaults.  A non-2xx
        status raises :class:`APIError`; network and decoding failures
        raise :class:`TransportError`.  Every failure is logged with
        the store name before it propagates.  No retries.
        """
        url = f"{self.base_url}{endpoint}"
        merged_headers = {**self.headers, **(headers or {})}

        try:
            resp = self.session.request(
                method,
                url,
                headers=merged_headers,
                params=params,
                json=json,
                timeout=self._request_timeout,
            )
            if not 200 <= resp.status_code < 300:
                raise APIError(resp.status_code, resp.reason or "", url)
            return resp.json()
        except APIError as exc:
            self.logger.error(
                "[%s] API error for %s %s: %s",
                self.store.name,
                method,
                url,
                exc,
            )
            raise
        except Exception as exc:
            self.logger.error(
                "[%s] Request to %s %s failed: %s",
                self.store.name,
                method,
                url,
                exc,
                exc_info=True,
            )
            raise TransportError(
                f"{method} {url} failed: {exc}"
            ) from exc

    def get_cached_or_fetch(self, key: str, fetch_function: Callable[[], T]) -> T:
        """Return the cached value for ``key`` or fetch and cache it."""
        cached = self.cache.get(key)
        if cached is not MISSING:
            self.logger.debug("[%s] Cache hit for: %s", self.store.name, key)
            return cached

        self.logger.debug(
            "[%s] Cache miss for: %s, fetching...", self.store.name, key
        )
        data = fetch_function()
        self.cache.set(key, data)
        return data

    def clear_cache(self) -> int:
        """Drop every cached response; returns the number removed."""
        return self.cache.clear()
