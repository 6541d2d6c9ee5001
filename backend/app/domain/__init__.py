"""
Domain Layer - Business Entities

This layer contains Pydantic models representing Firestore documents.
These models enforce type safety and validation across the application.

Author: BeerBro
Date: 2025-09-14
"""
from app.domain.product import Product
from app.domain.category import Category
from app.domain.order import Order, OrderItem, ShippingAddress
from app.domain.user import User
from app.domain.address import Address
from app.domain.location import ServiceLocation
from app.domain.payment import Payment
from app.domain.cart import Cart
from app.domain.stats import AdminStats, OrderStats

__all__ = [
    'Product',
    'Category',
    'Order',
    'OrderItem',
    'ShippingAddress',
    'User',
    'Address',
    'ServiceLocation',
    'Payment',
    'Cart',
    'AdminStats',
    'OrderStats',
]
