#!/usr/bin/env python3
"""
Revoke the admin role custom claim from a Firebase Auth user

The claim is replaced with {"role": "user"}. The user keeps admin access
until their current ID token expires or they sign in again.

Usage:
    python3 remove_admin_claims.py someone@example.com
    python3 remove_admin_claims.py someone@example.com --yes

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

from firebase_admin import auth as firebase_auth

from app.services.admin_claims_service import remove_admin_claim

logging.basicConfig(level=logging.INFO, format='%(message)s')
logger = logging.getLogger(__name__)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description='Remove the admin custom claim from a Firebase Auth user')
    parser.add_argument('email', help='Email of the admin to demote')
    parser.add_argument('--yes', action='store_true', help='Skip the confirmation prompt')
    args = parser.parse_args(argv)

    if not args.yes:
        answer = input(f"Remove admin privileges from {args.email}? (yes/no): ")
        if answer.strip().lower() != 'yes':
            logger.info("❌ Operation cancelled.")
            return 1

    logger.info(f"🔍 Removing admin claims for: {args.email}")

    try:
        result = remove_admin_claim(args.email)
    except firebase_auth.UserNotFoundError:
        logger.error(f"❌ No Firebase Auth user with email {args.email}")
        return 1

    if not result.already_admin:
        logger.info("⚠️  User is not an admin, nothing to remove")
        logger.info(f"   UID: {result.uid}")
        logger.info(f"   Custom Claims: {result.claims}")
        return 0

    logger.info("✅ Admin privileges removed")
    logger.info(f"   UID: {result.uid}")
    logger.info(f"   Custom Claims: {result.claims}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
