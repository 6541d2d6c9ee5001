#!/usr/bin/env python3
"""
Add a handful of sample orders for the admin dashboard

Usage:
    python3 add_sample_orders.py [--dry-run]

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

from app.domain.order import OrderCreate
from app.repositories.order_repository import OrderRepository

logging.basicConfig(level=logging.INFO, format='%(message)s')
logger = logging.getLogger(__name__)

SAMPLE_ORDERS = [
    {
        "userId": "sample-user-1",
        "userEmail": "customer1@example.com",
        "userName": "John Doe",
        "items": [
            {"productId": "beer-ipa-001", "productName": "Craft IPA Beer", "quantity": 2, "price": 12.99},
            {"productId": "beer-lager-002", "productName": "Premium Lager", "quantity": 1, "price": 10.99},
        ],
        "total": 36.97,
        "status": "pending",
        "shippingAddress": {
            "street": "123 Main St", "city": "New York", "state": "NY", "zipCode": "10001", "country": "USA",
        },
    },
    {
        "userId": "sample-user-2",
        "userEmail": "customer2@example.com",
        "userName": "Jane Smith",
        "items": [
            {"productId": "wine-red-001", "productName": "Cabernet Sauvignon", "quantity": 1, "price": 24.99},
        ],
        "total": 24.99,
        "status": "accepted",
        "shippingAddress": {
            "street": "456 Oak Ave", "city": "Los Angeles", "state": "CA", "zipCode": "90210", "country": "USA",
        },
    },
    {
        "userId": "sample-user-3",
        "userEmail": "customer3@example.com",
        "userName": "Bob Johnson",
        "items": [
            {"productId": "spirits-whiskey-001", "productName": "Single Malt Whiskey", "quantity": 1, "price": 89.99},
            {"productId": "beer-stout-003", "productName": "Stout Porter", "quantity": 3, "price": 14.99},
        ],
        "total": 134.96,
        "status": "rejected",
        "shippingAddress": {
            "street": "789 Pine St", "city": "Chicago", "state": "IL", "zipCode": "60601", "country": "USA",
        },
    },
]


def add_sample_orders(repository: OrderRepository, dry_run: bool = False) -> list:
    """Validate and write SAMPLE_ORDERS; returns the new order ids"""
    order_ids = []
    for raw in SAMPLE_ORDERS:
        order = OrderCreate(**raw)
        if dry_run:
            logger.info(f"[dry-run] {order.user_name}: {len(order.items)} items, total {order.total}")
            continue
        order_id = repository.create(order.to_document())
        logger.info(f"Added order with ID: {order_id}")
        order_ids.append(order_id)
    return order_ids


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description='Add sample orders to Firestore')
    parser.add_argument('--dry-run', action='store_true', help='Validate the orders without writing them')
    args = parser.parse_args(argv)

    logger.info("Adding sample orders to Firestore...")
    order_ids = add_sample_orders(OrderRepository(), dry_run=args.dry_run)
    if not args.dry_run:
        logger.info(f"✅ {len(order_ids)} sample orders added")
    return 0


if __name__ == "__main__":
    sys.exit(main())
