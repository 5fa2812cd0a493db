#!/usr/bin/env python3
"""Classify product names against the live keyword table.

Prints the winning category and the score of every matching category,
useful when tuning keywords.

Usage:
    python scripts/classify_product.py "Samsung Galaxy A55 5G" "เสื้อยืด oversize"
"""
import argparse
import asyncio
import sys

from catalog.config import get_settings
from catalog.db.connection import DatabaseManager
from catalog.services.classification import CategoryClassifier, DatabaseKeywordStore
from catalog.utils.logger import configure_logging


async def run(names: list[str], top: int) -> None:
    settings = get_settings()
    configure_logging(settings)
    await DatabaseManager.initialize(settings)

    try:
        classifier = CategoryClassifier(DatabaseKeywordStore())
        for name in names:
            ranked = await classifier.rank(name)
            print(f"\n📦 {name}")
            if not ranked:
                print("   → uncategorized")
                continue
            best = ranked[0]
            print(f"   → {best.category_name} (id={best.category_id}, score={best.score})")
            for scored in ranked[:top]:
                keywords = ", ".join(scored.matched_keywords)
                print(f"     {scored.score:>4}  {scored.category_name}: {keywords}")
    finally:
        await DatabaseManager.close()


def main() -> None:
    parser = argparse.ArgumentParser(description="Classify product names")
    parser.add_argument("names", nargs="+", help="Product names to classify")
    parser.add_argument(
        "--top",
        type=int,
        default=3,
        help="Number of scored categories to show (default: 3)",
    )
    args = parser.parse_args()

    try:
        asyncio.run(run(args.names, args.top))
    except Exception as e:
        print(f"\n❌ Classification failed: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
