"""
Reset the notebook database (FSRS).

DANGEROUS: This deletes every learner's card states and review log!
Only use when you want to start fresh for testing.

Usage:
    python -m scripts.maintenance.reset_learning_db
    python -m scripts.maintenance.reset_learning_db --yes
"""

from __future__ import annotations

import argparse
import logging

from hanzi_srs.fsrs import database

logger = logging.getLogger(__name__)


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Drop and recreate the FSRS tables.")
    parser.add_argument(
        "--yes",
        action="store_true",
        help="Skip the interactive confirmation prompt",
    )
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    print("=" * 60)
    print("WARNING: Reset Notebook Database")
    print("=" * 60)
    print()
    print("This will DELETE for every learner:")
    print("  - All card states (stability, difficulty, next review)")
    print("  - All review events (logs of past reviews)")
    print()

    if not args.yes:
        response = input("Are you sure you want to reset? (type 'yes' to confirm): ")
        if response.lower() != "yes":
            print("\nCancelled. No changes made.")
            return 1

    logger.info("Resetting FSRS tables (test mode: %s)", database.is_test_mode())
    database.reset_db()
    print("Database reset complete. Tables are empty and ready for new reviews.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
