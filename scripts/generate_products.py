"""
Synthetic catalog generator for the product catalog service.

Writes a deterministic pseudo-random JSON array of products that the service
can bootstrap from via `CATALOG_SEED_PATH`.
"""

from __future__ import annotations

import json
import random
import sys
import time
import uuid
from pathlib import Path
from typing import Any, Dict, List

import typer

app = typer.Typer(help="Generate a synthetic product catalog as JSON.")

_CATEGORIES = ["electronics", "kitchen", "books", "garden", "toys", "Sports"]
_ADJECTIVES = ["Compact", "Deluxe", "Portable", "Smart", "Classic", "Wireless", "Eco"]
_NOUNS = {
    "electronics": ["Headphones", "Monitor", "Tablet", "Speaker", "Keyboard"],
    "kitchen": ["Blender", "Kettle", "Toaster", "Knife Set", "Coffee Grinder"],
    "books": ["Cookbook", "Novel", "Atlas", "Field Guide", "Anthology"],
    "garden": ["Hose", "Planter", "Shovel", "Sprinkler", "Pruner"],
    "toys": ["Puzzle", "Robot Kit", "Board Game", "Kite", "Building Blocks"],
    "Sports": ["Yoga Mat", "Football", "Racket", "Dumbbell", "Helmet"],
}


def _generate_products(count: int, seed: int) -> List[Dict[str, Any]]:
    rng = random.Random(seed)
    products: List[Dict[str, Any]] = []
    for _ in range(count):
        category = rng.choice(_CATEGORIES)
        noun = rng.choice(_NOUNS[category])
        adjective = rng.choice(_ADJECTIVES)
        products.append(
            {
                "id": str(uuid.UUID(int=rng.getrandbits(128), version=4)),
                "name": f"{adjective} {noun}",
                "description": f"{adjective} {noun.lower()} for everyday use in the {category.lower()} aisle",
                "price": round(rng.uniform(1, 2_000), 2),
                "category": category,
                "inStock": rng.random() < 0.8,
            }
        )
    return products


def _write_catalog(path: Path, products: List[Dict[str, Any]]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as f:
        json.dump(products, f, indent=2)


@app.command()
def main(
    count: int = typer.Option(
        100,
        "--count",
        "-n",
        help="Number of products to generate.",
    ),
    seed: int = typer.Option(
        42,
        "--seed",
        help="Deterministic RNG seed.",
    ),
    output: Path = typer.Option(
        Path("data/catalog.json"),
        "--output",
        "-o",
        help="Where to write the JSON catalog.",
    ),
) -> None:
    """
    Generate a synthetic catalog and write it to disk.
    """
    start = time.perf_counter()
    typer.echo(f"Generating {count:,} products -> {output} (seed={seed})")
    products = _generate_products(count, seed=seed)
    _write_catalog(output, products)
    duration = time.perf_counter() - start
    typer.echo(f"Catalog written in {duration:.2f}s. Use CATALOG_SEED_PATH={output} to serve it.")


if __name__ == "__main__":
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)
