from __future__ import annotations

from typing import Any, Dict, Optional

from rich import box
from rich.console import Console
from rich.table import Table

from catalog.domain.models import CatalogStats
from catalog.orchestrator import ListingResult

NO_DATA = "N/A"


def _fmt_money(value: Optional[float]) -> str:
    if value is None:
        return NO_DATA
    return f"{value:,.2f}"


def _fmt_percent(value: Optional[float]) -> str:
    if value is None:
        return NO_DATA
    return f"{value:.2f}%"


def print_stats(stats: CatalogStats, console: Optional[Console] = None) -> None:
    """
    Render catalog statistics as rich tables.

    "No data" values of an empty catalog are shown as N/A.
    """
    console = console or Console()

    overview = Table(title="Catalog Overview", box=box.ROUNDED, show_header=False)
    overview.add_column("Metric", style="cyan", no_wrap=True)
    overview.add_column("Value", justify="right", style="magenta")
    overview.add_row("Products", str(stats.overview.total_products))
    overview.add_row("Categories", str(stats.overview.total_categories))
    overview.add_row("Total value", _fmt_money(stats.overview.total_value))
    overview.add_row("Average price", _fmt_money(stats.overview.average_price))
    overview.add_row("In stock", str(stats.stock_status.in_stock))
    overview.add_row("Out of stock", str(stats.stock_status.out_of_stock))
    overview.add_row("Stock percentage", _fmt_percent(stats.stock_status.stock_percentage))
    console.print(overview)

    prices = stats.price_analysis
    price_table = Table(title="Price Analysis", box=box.ROUNDED)
    price_table.add_column("Min", justify="right", style="green")
    price_table.add_column("Max", justify="right", style="green")
    price_table.add_column("Range", justify="right", style="yellow")
    price_table.add_column("Cheapest", style="cyan")
    price_table.add_column("Most expensive", style="cyan")
    price_table.add_row(
        _fmt_money(prices.min_price),
        _fmt_money(prices.max_price),
        _fmt_money(prices.price_range),
        prices.cheapest.name if prices.cheapest else NO_DATA,
        prices.most_expensive.name if prices.most_expensive else NO_DATA,
    )
    console.print(price_table)

    breakdown = Table(
        title="Categories",
        box=box.ROUNDED,
        caption="Sorted by category name",
    )
    breakdown.add_column("Category", style="cyan", no_wrap=True)
    breakdown.add_column("Products", justify="right", style="magenta")
    for category in stats.categories:
        breakdown.add_row(category, str(stats.category_breakdown.get(category, 0)))
    console.print(breakdown)


def print_listing(result: ListingResult, console: Optional[Console] = None) -> None:
    """Render one page of a product listing with its pagination footer."""
    console = console or Console()
    pagination: Dict[str, Any] = result["pagination"]

    if not result["data"]:
        console.print("[yellow]No products to display.[/yellow]")
        return

    filters = result["filters"]
    caption = (
        f"Page {pagination['currentPage']}/{pagination['totalPages']} "
        f"({pagination['totalItems']} items) | sorted by {filters['sortBy']} {filters['sortOrder']}"
    )
    table = Table(title="Products", box=box.ROUNDED, caption=caption)
    table.add_column("ID", style="dim", no_wrap=True)
    table.add_column("Name", style="cyan")
    table.add_column("Category", style="blue")
    table.add_column("Price", justify="right", style="bold green")
    table.add_column("In stock", justify="center")

    for product in result["data"]:
        table.add_row(
            product["id"],
            product["name"],
            product["category"],
            _fmt_money(product["price"]),
            "yes" if product["inStock"] else "[red]no[/red]",
        )

    console.print(table)


__all__ = ["print_listing", "print_stats"]
