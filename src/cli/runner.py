# src/cli/runner.py

"""Headless CLI commands for building and inspecting price comparisons."""

import json
import logging
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from src.config.settings import Settings
from src.models.price_comparison import PriceComparison
from src.models.product import Product

logger = logging.getLogger("smart_cart.cli")

# Stderr console for status messages so stdout stays clean for JSON
_err = Console(stderr=True)


def load_listings(path: Path) -> list[dict[str, Any]]:
    """Read a JSON array of raw product records.

    Raises ``ValueError`` when the file does not hold a list of objects.
    """
    with open(path, encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, list) or not all(
        isinstance(item, dict) for item in data
    ):
        msg = f"{path} must contain a JSON array of product objects"
        raise ValueError(msg)
    return data


def build_comparison(records: list[dict[str, Any]]) -> PriceComparison:
    """Turn raw records into a comparison, skipping invalid listings."""
    comparison = PriceComparison()
    for record in records:
        product = Product.from_dict(record)
        if not product.is_valid():
            logger.warning(
                "Skipping invalid listing (name=%r, store=%r, price=%s)",
                product.name,
                product.store,
                product.price,
            )
            continue
        comparison.add_product(product)
    return comparison


def _print_table(comparison: PriceComparison) -> None:
    """Render a Rich table of the comparison to stdout."""
    summary = comparison.get_comparison_summary()
    breakdown = summary["stores"]
    table = Table(
        title=f"{escape(summary['productName'])} ({summary['priceRange']})",
        show_lines=True,
        title_style="bold cyan",
    )
    table.add_column("#", style="dim", width=4)
    table.add_column("Store", style="magenta")
    table.add_column("Price", justify="right", style="green")
    table.add_column("Unit price", justify="right")
    table.add_column("vs. best", justify="right")
    table.add_column("Sale", justify="center")
    table.add_column("Stock", justify="center")

    for idx, p in enumerate(comparison.get_products_sorted_by_price(), 1):
        row = breakdown[p.store]
        sale = (
            f"-{row['discountPercentage']}%" if row["isOnSale"] else "—"
        )
        table.add_row(
            str(idx),
            escape(p.store),
            row["priceFormatted"],
            f"{Settings.CURRENCY_SYMBOL}{p.price_per_unit():.2f}/{escape(p.unit)}",
            f"+{row['percentageAboveBest']}%",
            sale,
            "yes" if row["inStock"] else "no",
        )

    console = Console()
    console.print(table)
    best = summary["bestDeal"]
    if best is not None:
        console.print(
            f"[bold]Best deal:[/bold] {escape(best['store'])} "
            f"(save {Settings.CURRENCY_SYMBOL}{best['savings']:.2f}), "
            f"average {summary['averagePrice']}"
        )


def run_compare(listings_path: str, output_format: str) -> int:
    """Compare the listings in a JSON file; return an exit code (0=ok, 1=fail)."""
    path = Path(listings_path)
    try:
        records = load_listings(path)
    except (OSError, ValueError) as exc:
        logger.error("Could not load listings from %s: %s", path, exc)
        _err.print(
            f"[red]Could not load {escape(str(path))}: "
            f"{escape(str(exc))}[/red]"
        )
        return 1

    comparison = build_comparison(records)
    if not len(comparison):
        _err.print("[yellow]No valid products found.[/yellow]")
        return 1

    _err.print(
        f"[dim]Compared {len(comparison)} stores "
        f"from {len(records)} listings[/dim]"
    )
    if output_format == "table":
        _print_table(comparison)
    else:
        print(json.dumps(comparison.to_dict(), ensure_ascii=False, indent=2))
    return 0


def run_list_stores() -> int:
    """Print the configured stores (public view only)."""
    try:
        stores = Settings.load_stores()
    except (OSError, ValueError) as exc:
        logger.error("Could not load store registry: %s", exc)
        _err.print(
            "[red]Could not load store registry: "
            f"{escape(str(exc))}[/red]"
        )
        return 1

    table = Table(title="Configured stores", title_style="bold cyan")
    table.add_column("ID", style="dim")
    table.add_column("Name")
    table.add_column("Active", justify="center")
    table.add_column("API key", justify="center")
    for store in stores:
        public = store.to_dict()
        table.add_row(
            escape(public["id"]),
            f"[{public['color']}]{escape(public['displayName'])}[/]",
            "yes" if public["isActive"] else "no",
            "set" if store.api_key else "missing",
        )
    Console().print(table)
    return 0
