"""
Database models for the Shop Server.

All SQLAlchemy models are imported here so they register on Base.metadata.
"""

from shopapp.models.currency import Currency
from shopapp.models.category import Category
from shopapp.models.product import Product, LocalizedProduct
from shopapp.models.shop import Shop, OpeningHoursShop

__all__ = [
    "Currency",
    "Category",
    "Product",
    "LocalizedProduct",
    "Shop",
    "OpeningHoursShop",
]
