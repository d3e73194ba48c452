# src/config/settings.py

"""Central configuration for the smart_cart price comparison core."""

import json
import logging
import os
from pathlib import Path
from typing import Any

from curl_cffi.requests import BrowserTypeLiteral
from dotenv import load_dotenv

from src.models.store import Store

load_dotenv()

logger = logging.getLogger("smart_cart.config")


class Settings:
    """Central configuration for the smart_cart price comparison core."""

    # --- Requests ---
    REQUEST_TIMEOUT: int = 15           # Seconds before a request times out
    STORE_SEARCH_TIMEOUT: float = 30.0  # Deadline per store in a fan-out

    # --- Caching ---
    CACHE_TTL: float = 300.0            # 5 minutes
    CACHE_MAX_ENTRIES: int = 256        # Per store service, LRU beyond this

    # --- Presentation ---
    CURRENCY_SYMBOL: str = "$"

    # --- Browser Impersonation ---
    IMPERSONATE_BROWSER: BrowserTypeLiteral = "chrome131"
    DEFAULT_HEADERS: dict[str, str] = {
        "Accept": "application/json",
        "Accept-Language": "en-US,en;q=0.9",
    }

    # --- Paths ---
    BASE_DIR: Path = Path(__file__).resolve().parent.parent.parent
    STORES_PATH: Path = BASE_DIR / "src" / "config" / "stores.json"
    LOGS_DIR: Path = BASE_DIR / "logs"

    @staticmethod
    def api_key_env_var(store_id: str) -> str:
        """Return the env var holding a store's API key, e.g. ``FRESH_MART_API_KEY``."""
        return f"{store_id.upper().replace('-', '_')}_API_KEY"

    @classmethod
    def load_stores(cls, path: Path | None = None) -> list[Store]:
        """Build Store objects from the JSON registry.

        API keys never live in the registry; each one is read from the
        environment (or ``.env``) under :meth:`api_key_env_var`.
        """
        stores_path = path or cls.STORES_PATH
        with open(stores_path, encoding="utf-8") as f:
            raw_stores: list[dict[str, Any]] = json.load(f)

        stores: list[Store] = []
        for raw in raw_stores:
            store = Store.from_dict(
                {
                    **raw,
                    "apiKey": os.getenv(
                        cls.api_key_env_var(str(raw.get("id", ""))), ""
                    ),
                }
            )
            if not store.api_key:
                logger.debug(
                    "No API key configured for store '%s'", store.id
                )
            stores.append(store)

        logger.debug(
            "Loaded %d stores from %s", len(stores), stores_path
        )
        return stores
