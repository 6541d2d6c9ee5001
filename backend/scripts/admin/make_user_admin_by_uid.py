#!/usr/bin/env python3
"""
Set role = "admin" on a user profile document (users/{uid})

Usage:
    python3 make_user_admin_by_uid.py F6qic9mdF6fB9KPQB0QaUvekWRF2

Find the uid in Firebase Console -> Authentication -> Users, or with
list_users.py.

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

from app.services.admin_claims_service import promote_user_document

logging.basicConfig(level=logging.INFO, format='%(message)s')
logger = logging.getLogger(__name__)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description='Promote a user profile document to admin')
    parser.add_argument('uid', help='Firebase Auth uid of the user')
    args = parser.parse_args(argv)

    logger.info(f"🆔 User UID: {args.uid}")

    previous = promote_user_document(args.uid)
    if previous is None:
        logger.error("❌ User document not found in Firestore!")
        logger.error("")
        logger.error("The user needs a document in the \"users\" collection first.")
        logger.error("   1. Have the user sign up or log in to the storefront")
        logger.error("   2. Or create the document manually in Firebase Console")
        logger.error("   3. Then run this script again")
        return 1

    logger.info(f"👤 {previous.email or 'No email'} ({previous.display_name or 'No name'})")
    logger.info(f"✅ Role changed: {previous.role} -> admin")
    return 0


if __name__ == "__main__":
    sys.exit(main())
