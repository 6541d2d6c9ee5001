#!/usr/bin/env python3
"""
Grant the admin role custom claim to a Firebase Auth user

The API checks {"role": "admin"} in the ID token on every /api/admin
request. Claims only reach the token after the user signs in again.

Usage:
    python3 set_admin_claims.py someone@example.com

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

from app.services.admin_claims_service import set_admin_claim

logging.basicConfig(level=logging.INFO, format='%(message)s')
logger = logging.getLogger(__name__)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description='Set the admin custom claim on a Firebase Auth user')
    parser.add_argument('email', help='Email of the user to promote')
    args = parser.parse_args(argv)

    logger.info(f"🚀 Setting admin claims for: {args.email}")

    try:
        result = set_admin_claim(args.email)
    except firebase_auth.UserNotFoundError:
        logger.error(f"❌ No Firebase Auth user with email {args.email}")
        logger.error("")
        logger.error("The user must sign up first:")
        logger.error("   1. Open the storefront and create an account with this email")
        logger.error("   2. Run this script again")
        return 1

    if result.already_admin:
        logger.info("✅ User is already an admin!")
        logger.info(f"   UID: {result.uid}")
        logger.info(f"   Custom Claims: {result.claims}")
        return 0

    logger.info("✅ Admin role set")
    logger.info(f"   UID: {result.uid}")
    logger.info(f"   Custom Claims: {result.claims}")
    logger.info("")
    logger.info("⚠️  The user must sign out and sign in again for the claim to take effect.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
