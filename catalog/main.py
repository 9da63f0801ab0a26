from __future__ import annotations

import sys
from typing import Optional

import typer

from catalog.config import get_settings
from catalog.infrastructure.store import build_store
from catalog.orchestrator import list_products, product_stats
from catalog.reporter import print_listing, print_stats
from catalog.utils.logging import configure_logging

app = typer.Typer(help="Product catalog API CLI.")


@app.command()
def info() -> None:
    """
    Show effective configuration values.
    """
    settings = get_settings()
    typer.echo(
        f"env={settings.app_env} | listen={settings.host}:{settings.port} | "
        f"page_size={settings.default_page_size} | "
        f"seed={settings.catalog_seed_path or 'sample catalog'}"
    )


@app.command()
def serve(
    host: Optional[str] = typer.Option(None, "--host", help="Bind address (default from settings)."),
    port: Optional[int] = typer.Option(None, "--port", "-p", help="Bind port (default from settings)."),
    reload: bool = typer.Option(False, "--reload", help="Restart on code changes (development)."),
) -> None:
    """
    Run the HTTP API with uvicorn.
    """
    import uvicorn

    settings = get_settings()
    configure_logging(level=settings.log_level, json_logs=settings.log_json)
    bind_host = host or settings.host
    bind_port = port or settings.port
    typer.echo(f"Server is running on http://{bind_host}:{bind_port}")
    uvicorn.run(
        "catalog.api.server:create_app",
        factory=True,
        host=bind_host,
        port=bind_port,
        reload=reload,
        log_config=None,
    )


@app.command()
def stats(
    seed: Optional[str] = typer.Option(
        None,
        "--seed",
        "-s",
        help="JSON catalog to analyse (default: CATALOG_SEED_PATH or the sample catalog).",
    ),
) -> None:
    """
    Print catalog statistics.
    """
    settings = get_settings()
    configure_logging(level="WARNING")
    store = build_store(seed or settings.catalog_seed_path)
    print_stats(product_stats(store))


@app.command("list")
def list_command(
    category: Optional[str] = typer.Option(None, "--category", "-c", help="Category filter."),
    sort_by: str = typer.Option("name", "--sort-by", help="Field to sort by."),
    sort_order: str = typer.Option("asc", "--sort-order", help="asc or desc."),
    page: int = typer.Option(1, "--page", help="Page number (1-based)."),
    limit: Optional[int] = typer.Option(None, "--limit", "-l", help="Page size."),
    seed: Optional[str] = typer.Option(None, "--seed", "-s", help="JSON catalog to list."),
) -> None:
    """
    Print one page of the product listing.
    """
    settings = get_settings()
    configure_logging(level="WARNING")
    store = build_store(seed or settings.catalog_seed_path)
    params = {
        "category": category,
        "sortBy": sort_by,
        "sortOrder": sort_order,
        "page": page,
        "limit": limit,
    }
    print_listing(list_products(store, params, default_limit=settings.default_page_size))


def main() -> None:
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()
