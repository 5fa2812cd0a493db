#!/usr/bin/env python3
"""Auto-categorize saved products that have no category.

Processes uncategorized active products in batches until a short batch
shows the backlog is exhausted. Keyword snapshots are cached across batches.

Usage:
    python scripts/classify_unassigned.py
    python scripts/classify_unassigned.py --batch-size 500 --max-batches 4
"""
import argparse
import asyncio
import sys

from catalog.config import get_settings
from catalog.db.connection import DatabaseManager, get_session
from catalog.services.classification import (
    CachingKeywordStore,
    CategoryClassifier,
    DatabaseKeywordStore,
)
from catalog.services.product_service import ProductService
from catalog.utils.logger import configure_logging


async def run(batch_size: int, max_batches: int) -> None:
    settings = get_settings()
    configure_logging(settings)
    await DatabaseManager.initialize(settings)

    store = CachingKeywordStore(
        DatabaseKeywordStore(),
        ttl_seconds=settings.keyword_cache_ttl_seconds,
    )
    classifier = CategoryClassifier(store)

    assigned = 0
    last_id = 0
    try:
        for batch in range(1, max_batches + 1):
            async with get_session() as session:
                report = await ProductService(session, classifier).classify_unassigned(
                    batch_size, after_id=last_id
                )
            last_id = report.last_id
            assigned += report.assigned
            print(
                f"📦 Batch {batch}: scanned={report.scanned} "
                f"assigned={report.assigned} unmatched={report.unmatched}"
            )
            if report.scanned < batch_size:
                break
    finally:
        await DatabaseManager.close()

    print(f"✅ Assigned categories to {assigned} products")


def main() -> None:
    settings = get_settings()
    parser = argparse.ArgumentParser(description="Categorize uncategorized products")
    parser.add_argument(
        "--batch-size",
        type=int,
        default=settings.classification_batch_size,
        help=f"Products per batch (default: {settings.classification_batch_size})",
    )
    parser.add_argument(
        "--max-batches",
        type=int,
        default=10,
        help="Stop after this many batches (default: 10)",
    )
    args = parser.parse_args()

    try:
        asyncio.run(run(args.batch_size, args.max_batches))
    except Exception as e:
        print(f"\n❌ Bulk classification failed: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
