#!/usr/bin/env python3
"""Seed category_keywords with the default keyword sets.

Creates missing tables first, then upserts keywords for every active
category whose name matches a keyword set. Safe to re-run.

Usage:
    python scripts/seed_category_keywords.py
    python scripts/seed_category_keywords.py --dry-run
"""
import argparse
import asyncio
import sys

from catalog.config import get_settings
from catalog.db.connection import DatabaseManager, get_session
from catalog.services.keyword_seeder import KeywordSeeder
from catalog.utils.logger import configure_logging


async def run(dry_run: bool) -> int:
    settings = get_settings()
    configure_logging(settings)
    await DatabaseManager.initialize(settings)

    try:
        await DatabaseManager.create_schema()

        async with get_session() as session:
            seeder = KeywordSeeder(session)

            if dry_run:
                plan = await seeder.plan()
                print("🔍 DRY RUN - Keyword sets per active category:")
                for name, keyword_set in plan.items():
                    if keyword_set is None:
                        print(f"   ⚠️  {name}: no keyword set")
                    else:
                        print(f"   ✓ {name}: {keyword_set.key} ({len(keyword_set.entries())} keywords)")
                return 0

            report = await seeder.seed()

        print(f"✅ Seeded {report.total_keywords} keywords")
        for name, count in report.inserted.items():
            print(f"   {name}: {count}")
        if report.unmatched_categories:
            print(f"⚠️  No keyword set for: {', '.join(report.unmatched_categories)}")
        return 1 if report.failed else 0
    finally:
        await DatabaseManager.close()


def main() -> None:
    parser = argparse.ArgumentParser(description="Seed category keywords")
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Show which keyword set each category would get without writing",
    )
    args = parser.parse_args()

    try:
        sys.exit(asyncio.run(run(args.dry_run)))
    except Exception as e:
        print(f"\n❌ Seeding failed: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
