# tests/test_store_model.py

"""Tests for the Store configuration model."""

import unittest

from src.models.store import APIConfig, Store


class TestStoreModel(unittest.TestCase):
    """Store defaults, API config and public view."""

    def test_defaults(self) -> None:
        """Presentation fields fall back to neutral defaults."""
        store = Store.from_dict({"id": "s1", "name": "Shop"})
        self.assertEqual(store.color, "#666")
        self.assertEqual(store.icon, "icon-store")
        self.assertTrue(store.is_active)
        self.assertEqual(store.display_name, "Shop")

    def test_explicit_inactive_preserved(self) -> None:
        """isActive=false is honoured."""
        store = Store.from_dict({"name": "Shop", "isActive": False})
        self.assertFalse(store.is_active)

    def test_display_name_kept_when_given(self) -> None:
        """An explicit display name is not overwritten."""
        store = Store(name="Shop", display_name="The Shop")
        self.assertEqual(store.display_name, "The Shop")

    def test_get_api_config(self) -> None:
        """Config carries the endpoint plus bearer and JSON headers."""
        store = Store(
            name="Shop",
            api_endpoint="https://api.shop.example",
            api_key="secret",
        )
        config = store.get_api_config()
        self.assertIsInstance(config, APIConfig)
        self.assertEqual(config.endpoint, "https://api.shop.example")
        self.assertEqual(
            config.headers,
            {
                "Authorization": "Bearer secret",
                "Content-Type": "application/json",
            },
        )

    def test_to_dict_is_redacted(self) -> None:
        """The public view never exposes connection details."""
        store = Store(
            id="s1",
            name="Shop",
            api_endpoint="https://api.shop.example",
            api_key="secret",
        )
        public = store.to_dict()
        self.assertEqual(
            set(public),
            {"id", "name", "displayName", "color", "icon", "isActive"},
        )
        self.assertNotIn("secret", str(public.values()))

    def test_repr_hides_api_key(self) -> None:
        """repr() does not leak the API key into logs."""
        store = Store(name="Shop", api_key="secret")
        self.assertNotIn("secret", repr(store))


if __name__ == "__main__":
    unittest.main()
