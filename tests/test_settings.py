# tests/test_settings.py

"""Tests for the Settings configuration class."""

import json
import os
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from src.config.settings import Settings


class TestSettings(unittest.TestCase):
    """Verify Settings constants and the store registry."""

    def test_request_timeout_is_positive_int(self) -> None:
        """REQUEST_TIMEOUT must be a positive integer."""
        self.assertIsInstance(Settings.REQUEST_TIMEOUT, int)
        self.assertGreater(Settings.REQUEST_TIMEOUT, 0)

    def test_cache_ttl_is_five_minutes(self) -> None:
        """Cached responses live for five minutes."""
        self.assertEqual(Settings.CACHE_TTL, 300.0)

    def test_cache_is_bounded(self) -> None:
        """CACHE_MAX_ENTRIES must be >= 1."""
        self.assertGreaterEqual(Settings.CACHE_MAX_ENTRIES, 1)

    def test_store_search_timeout_exceeds_request_timeout(self) -> None:
        """The fan-out deadline leaves room for one full request."""
        self.assertGreater(
            Settings.STORE_SEARCH_TIMEOUT, Settings.REQUEST_TIMEOUT
        )

    def test_path_constants_are_paths(self) -> None:
        """Path-typed settings are Path instances."""
        self.assertIsInstance(Settings.BASE_DIR, Path)
        self.assertIsInstance(Settings.STORES_PATH, Path)
        self.assertIsInstance(Settings.LOGS_DIR, Path)

    def test_stores_path_exists(self) -> None:
        """The stores.json registry must exist on disk."""
        self.assertTrue(Settings.STORES_PATH.exists())

    def test_api_key_env_var(self) -> None:
        """Store ids map to upper-case env var names."""
        self.assertEqual(
            Settings.api_key_env_var("fresh-mart"), "FRESH_MART_API_KEY"
        )


class TestLoadStores(unittest.TestCase):
    """Settings.load_stores() behaviour."""

    def test_default_registry_loads(self) -> None:
        """The bundled registry has unique ids and endpoints."""
        stores = Settings.load_stores()
        ids = [s.id for s in stores]
        self.assertGreater(len(stores), 0)
        self.assertEqual(len(ids), len(set(ids)))
        for store in stores:
            with self.subTest(store=store.id):
                self.assertTrue(store.api_endpoint.startswith("https://"))

    def test_api_key_read_from_environment(self) -> None:
        """Keys come from <ID>_API_KEY, never from the file."""
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "stores.json"
            path.write_text(
                json.dumps(
                    [
                        {
                            "id": "corner-shop",
                            "name": "Corner",
                            "apiKey": "from-file",
                        },
                        {"id": "other", "name": "Other", "isActive": False},
                    ]
                ),
                encoding="utf-8",
            )
            with patch.dict(
                os.environ, {"CORNER_SHOP_API_KEY": "from-env"}, clear=False
            ):
                os.environ.pop("OTHER_API_KEY", None)
                stores = Settings.load_stores(path)

        self.assertEqual(stores[0].api_key, "from-env")
        self.assertEqual(stores[1].api_key, "")
        self.assertFalse(stores[1].is_active)


if __name__ == "__main__":
    unittest.main()
