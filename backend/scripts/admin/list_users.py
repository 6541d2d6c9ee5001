#!/usr/bin/env python3
"""
List user profile documents, newest first

Usage:
    python3 list_users.py

Author: BeerBro
Date: 2025-09-14
"""
import logging
import os
import sys

# Add parent directory to path for imports
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '../..')))

from dotenv import load_dotenv

# backend/.env must be loaded before app settings are built
load_dotenv(os.path.join(os.path.dirname(__file__), '..', '..', '.env'))

from app.services.admin_claims_service import list_users

logging.basicConfig(level=logging.INFO, format='%(message)s')
logger = logging.getLogger(__name__)


def main() -> int:
    users = list_users()
    if not users:
        logger.info("📭 No users found in Firestore.")
        logger.info("   Users appear here once they sign up through the storefront.")
        return 0

    logger.info(f"👥 Found {len(users)} users:")
    logger.info("")

    for index, user in enumerate(users, start=1):
        logger.info(f"{index}. {user.display_name or 'No name'}")
        logger.info(f"   📧 Email: {user.email}")
        logger.info(f"   🆔 UID: {user.id}")
        logger.info(f"   👑 Role: {user.role}")
        logger.info(f"   📅 Created: {user.created_at:%Y-%m-%d}")
        logger.info(f"   📱 Phone: {user.phone or 'Not provided'}")
        logger.info("")

    logger.info("💡 To make a user admin:")
    logger.info(f"   python3 make_user_admin_by_uid.py {users[0].id}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
