#!/usr/bin/env python3
"""
Seed categories and products from a JSON file

Usage:
    python3 seed_firestore.py [path/to/seed.json] [--dry-run]

Defaults to scripts/data/catalog_seed.json. Documents are written with the
JSON keys as ids, so running it twice overwrites instead of duplicating.

Author: BeerBro
Date: 2025-09-14
"""
import argparse
import logging
import os
import sys

# Add parent directory to path for imports
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '../..')))

from dotenv import load_dotenv

# backend/.env must be loaded before app settings are built
load_dotenv(os.path.join(os.path.dirname(__file__), '..', '..', '.env'))

from app.services.seed_service import DEFAULT_SEED_PATH, load_seed, seed_catalog

logging.basicConfig(level=logging.INFO, format='%(message)s')
logger = logging.getLogger(__name__)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description='Seed Firestore catalog data')
    parser.add_argument('path', nargs='?', default=str(DEFAULT_SEED_PATH), help='Seed JSON file')
    parser.add_argument('--dry-run', action='store_true', help='Show what would be written without making changes')
    args = parser.parse_args(argv)

    logger.info(f"Starting Firestore seeding from {args.path}...")

    try:
        seed = load_seed(args.path)
    except (OSError, ValueError) as e:
        logger.error(f"❌ Could not read seed file: {e}")
        return 1

    result = seed_catalog(seed, dry_run=args.dry_run)

    prefix = "[dry-run] would seed" if args.dry_run else "✅ Seeded"
    logger.info(f"{prefix} {result.categories} categories and {result.products} products")
    return 0


if __name__ == "__main__":
    sys.exit(main())
