"""
Repository Layer - Data Access

This layer handles all Firestore queries and returns domain models.
Repositories keep collection names, field aliases and query shapes out of
the API handlers.

Author: BeerBro
Date: 2025-09-14
"""
from app.repositories.product_repository import ProductRepository
from app.repositories.category_repository import CategoryRepository
from app.repositories.order_repository import OrderRepository
from app.repositories.user_repository import UserRepository
from app.repositories.address_repository import AddressRepository
from app.repositories.location_repository import LocationRepository
from app.repositories.payment_repository import PaymentRepository

__all__ = [
    'ProductRepository',
    'CategoryRepository',
    'OrderRepository',
    'UserRepository',
    'AddressRepository',
    'LocationRepository',
    'PaymentRepository',
]
