"""
Product and LocalizedProduct database models.
"""

from sqlalchemy import Column, Integer, Float, String, ForeignKey, Table, Index
from sqlalchemy.orm import relationship, validates

from shopapp.database import Base
from shopapp.models.currency import Currency

products_categories = Table(
    "products_categories",
    Base.metadata,
    Column("product_id", Integer, ForeignKey("products.id"), primary_key=True),
    Column("category_id", Integer, ForeignKey("categories.id"), primary_key=True),
)


class Product(Base):
    """Product sold by a shop, priced in euros."""

    __tablename__ = "products"
    __table_args__ = (
        Index("idx_product_shop", "shop_id"),
    )

    id = Column(Integer, primary_key=True, index=True)
    price = Column(Float, nullable=False, default=0.0)

    # Derived from price at write time, see _compute_derived_prices
    dollar_price = Column(Float, nullable=True)
    peso_price = Column(Float, nullable=True)
    yen_price = Column(Float, nullable=True)

    # Nullable: severed, not cascaded, when the shop is deleted
    shop_id = Column(Integer, ForeignKey("shops.id"), nullable=True)

    # Relationships
    shop = relationship("Shop", back_populates="products")
    categories = relationship(
        "Category", secondary=products_categories, back_populates="products"
    )
    localized_products = relationship(
        "LocalizedProduct",
        back_populates="product",
        cascade="all, delete-orphan",
        order_by="LocalizedProduct.id",
    )

    def __init__(self, **kwargs):
        # Rows loaded from the database bypass __init__, only new products are checked
        if not kwargs.get("localized_products"):
            raise ValueError("At least one name and one description must be provided")
        super().__init__(**kwargs)

    @validates("price")
    def _compute_derived_prices(self, key, price):
        if price is None or price < 0:
            raise ValueError("Price must be positive")
        self.dollar_price = Currency.DOL.convert(price)
        self.peso_price = Currency.PES.convert(price)
        self.yen_price = Currency.YEN.convert(price)
        return price


class LocalizedProduct(Base):
    """Name and description of a product in one locale."""

    __tablename__ = "localized_products"
    __table_args__ = (
        Index("idx_localized_product", "product_id"),
    )

    id = Column(Integer, primary_key=True, index=True)
    locale = Column(String(10), nullable=False, default="en")
    name = Column(String, nullable=False)
    description = Column(String, nullable=False)
    product_id = Column(Integer, ForeignKey("products.id"), nullable=False)

    # Relationships
    product = relationship("Product", back_populates="localized_products")
