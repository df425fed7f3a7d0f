"""
Known marketplace document collections.

Dependencies: enum
System role: Collection name constants for the convenience fetch surface
"""

from enum import Enum


class Collections(str, Enum):
    """Document collection names."""

    PRODUCTS = "products"
    SHOPS = "shops"
    CATEGORIES = "categories"
    USERS = "users"
    ORDERS = "orders"
    AUCTIONS = "auctions"
    COUPONS = "coupons"
    REVIEWS = "reviews"
