"""
Shop and OpeningHoursShop database models.
"""

from datetime import date

from sqlalchemy import (
    Boolean,
    Column,
    Date,
    ForeignKey,
    Index,
    Integer,
    String,
    Time,
    func,
    select,
)
from sqlalchemy.orm import column_property, relationship

from shopapp.database import Base
from shopapp.models.product import Product


class Shop(Base):
    """Shop model with its weekly opening hours and products."""

    __tablename__ = "shops"
    __table_args__ = (
        Index("idx_shop_created_at", "created_at"),
    )

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    created_at = Column(Date, nullable=False, default=date.today)
    in_vacations = Column(Boolean, nullable=False, default=False)

    # Computed by the database; only populated once the row is (re)loaded
    nb_products = column_property(
        select(func.count(Product.id))
        .where(Product.shop_id == id)
        .correlate_except(Product)
        .scalar_subquery()
    )

    # Relationships
    opening_hours = relationship(
        "OpeningHoursShop",
        back_populates="shop",
        cascade="all, delete-orphan",
        order_by="OpeningHoursShop.id",
    )
    products = relationship("Product", back_populates="shop", order_by="Product.id")

    def __repr__(self):
        return f"<Shop id={self.id} name={self.name!r}>"


class OpeningHoursShop(Base):
    """A single opening slot: day of week (1 = Monday) and [open_at, close_at)."""

    __tablename__ = "opening_hours"
    __table_args__ = (
        Index("idx_opening_hours_shop", "shop_id"),
    )

    id = Column(Integer, primary_key=True, index=True)
    day = Column(Integer, nullable=False)
    open_at = Column(Time, nullable=False)
    close_at = Column(Time, nullable=False)
    shop_id = Column(Integer, ForeignKey("shops.id"), nullable=False)

    # Relationships
    shop = relationship("Shop", back_populates="opening_hours")
