# tests/test_cli_runner.py

"""Tests for the headless CLI commands."""

import io
import json
import tempfile
import unittest
from contextlib import redirect_stdout
from pathlib import Path
from typing import Any

from src.cli.runner import build_comparison, load_listings, run_compare

LISTINGS: list[dict[str, Any]] = [
    {"name": "Oat Milk", "price": 4.29, "store": "FreshMart"},
    {"name": "Oat Milk", "price": 3.99, "originalPrice": 4.49, "store": "ValueGrocer"},
    {"name": "Oat Milk", "price": 4.79, "store": "CornerMarket", "inStock": False},
    {"name": "", "price": 1.00, "store": "Nameless"},
]


class TestRunCompare(unittest.TestCase):
    """run_compare() exit codes and output."""

    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.tmp = Path(self._tmp.name)

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def _write(self, name: str, content: str) -> Path:
        path = self.tmp / name
        path.write_text(content, encoding="utf-8")
        return path

    def test_json_output(self) -> None:
        """JSON mode prints the serialised comparison to stdout."""
        path = self._write("milk.json", json.dumps(LISTINGS))
        out = io.StringIO()
        with redirect_stdout(out):
            code = run_compare(str(path), "json")

        self.assertEqual(code, 0)
        data = json.loads(out.getvalue())
        self.assertEqual(data["summary"]["storeCount"], 3)
        self.assertEqual(data["summary"]["bestDeal"]["store"], "ValueGrocer")

    def test_table_output(self) -> None:
        """Table mode renders without error."""
        path = self._write("milk.json", json.dumps(LISTINGS))
        self.assertEqual(run_compare(str(path), "table"), 0)

    def test_table_output_with_markup_characters(self) -> None:
        """Brackets in names and stores are printed literally."""
        listings = [
            {"name": "Milk [/]", "price": 2.0, "store": "A[/b]"},
            {"name": "Milk [/]", "price": 3.0, "store": "[bold]B", "unit": "[/]"},
        ]
        path = self._write("markup.json", json.dumps(listings))
        out = io.StringIO()
        with redirect_stdout(out):
            code = run_compare(str(path), "table")

        self.assertEqual(code, 0)
        self.assertIn("A[/b]", out.getvalue())
        self.assertIn("[bold]B", out.getvalue())

    def test_table_output_with_numeric_store(self) -> None:
        """A numeric store name renders instead of crashing the table."""
        listings = [
            {"name": "Milk", "price": 1.0, "store": 7},
            {"name": "Milk", "price": 2.0, "store": "B"},
        ]
        path = self._write("numeric.json", json.dumps(listings))
        out = io.StringIO()
        with redirect_stdout(out):
            code = run_compare(str(path), "table")

        self.assertEqual(code, 0)
        self.assertIn("Best deal: 7", out.getvalue())

    def test_missing_file(self) -> None:
        """A missing listings file is a failure."""
        self.assertEqual(run_compare(str(self.tmp / "nope.json"), "json"), 1)

    def test_malformed_json(self) -> None:
        """Unparseable JSON is a failure."""
        path = self._write("bad.json", "{not json")
        self.assertEqual(run_compare(str(path), "json"), 1)

    def test_wrong_shape(self) -> None:
        """A JSON object instead of an array is rejected."""
        path = self._write("obj.json", json.dumps({"name": "Milk"}))
        with self.assertRaises(ValueError):
            load_listings(path)
        self.assertEqual(run_compare(str(path), "json"), 1)

    def test_no_valid_products(self) -> None:
        """Only invalid listings means nothing to compare."""
        path = self._write("empty.json", json.dumps([{"price": 1}]))
        self.assertEqual(run_compare(str(path), "json"), 1)


class TestBuildComparison(unittest.TestCase):
    """build_comparison() filtering."""

    def test_invalid_listings_skipped(self) -> None:
        """Listings failing is_valid() never reach the comparison."""
        with self.assertLogs("smart_cart.cli", "WARNING"):
            comparison = build_comparison(LISTINGS)
        self.assertEqual(
            comparison.get_stores(),
            ["FreshMart", "ValueGrocer", "CornerMarket"],
        )


if __name__ == "__main__":
    unittest.main()
