"""
Category database model.
"""

from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship

from shopapp.database import Base


class Category(Base):
    """Category model for product categorization."""

    __tablename__ = "categories"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False, unique=True)

    # Relationships
    products = relationship(
        "Product", secondary="products_categories", back_populates="categories"
    )
