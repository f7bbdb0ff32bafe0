"""
Pytest configuration - shared fixtures
"""
import sys
import os
from datetime import date, time
from typing import Generator, List, Optional

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool

# Add backend directory to sys.path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "../backend"))

# Import models
from shopapp.database import Base
from shopapp.models.shop import Shop, OpeningHoursShop
from shopapp.models.product import Product, LocalizedProduct
from shopapp.models.category import Category
from shopapp.services.search_index import ShopSearchIndex
from shopapp.services.shop_service import ShopService


def make_hours(day: int, open_hour: int, close_hour: int) -> OpeningHoursShop:
    """Opening slot on ``day`` from ``open_hour``:00 to ``close_hour``:00."""
    return OpeningHoursShop(day=day, open_at=time(open_hour), close_at=time(close_hour))


def make_product(price: float, name: str = "Bread", **fields) -> Product:
    return Product(
        price=price,
        localized_products=[
            LocalizedProduct(locale="en", name=name, description=f"{name} description")
        ],
        **fields,
    )


def make_shop(
    name: str,
    created_at: date = date(2024, 3, 1),
    in_vacations: bool = False,
    opening_hours: Optional[List[OpeningHoursShop]] = None,
    shop_id: Optional[int] = None,
) -> Shop:
    shop = Shop(
        name=name,
        created_at=created_at,
        in_vacations=in_vacations,
        opening_hours=opening_hours or [],
    )
    if shop_id is not None:
        shop.id = shop_id
    return shop


@pytest.fixture
def test_db() -> Generator[Session, None, None]:
    """Create in-memory SQLite database (with the shop search index) for testing"""
    # StaticPool keeps a single connection so TestClient worker threads
    # see the same in-memory database
    engine = create_engine(
        "sqlite:///:memory:",
        echo=False,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    SessionLocal = sessionmaker(bind=engine)
    session = SessionLocal()
    ShopSearchIndex().ensure_index(session)
    session.commit()

    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(engine)
        engine.dispose()


@pytest.fixture
def db_session(test_db):
    """Alias for test_db for clarity"""
    return test_db


@pytest.fixture
def search_index() -> ShopSearchIndex:
    return ShopSearchIndex()


@pytest.fixture
def service(search_index) -> ShopService:
    return ShopService(search_index)


@pytest.fixture
def populated_db(test_db, service):
    """Database with sample shops, created through the service so they are indexed"""
    shops = [
        make_shop("Best Bakery", date(2023, 12, 31), in_vacations=False),
        make_shop("Bakery Deluxe", date(2024, 1, 1), in_vacations=True),
        make_shop("Corner Butcher", date(2024, 3, 1), in_vacations=True),
        make_shop("Alpha Market", date(2024, 6, 1), in_vacations=True),
        make_shop("Zen Tea House", date(2024, 3, 2), in_vacations=False,
                  opening_hours=[make_hours(1, 9, 12), make_hours(1, 14, 18)]),
    ]
    for shop in shops:
        service.create_shop(test_db, shop)

    category = Category(name="Bread")
    test_db.add(category)
    bakery = test_db.query(Shop).filter(Shop.name == "Best Bakery").one()
    butcher = test_db.query(Shop).filter(Shop.name == "Corner Butcher").one()
    test_db.add_all([
        make_product(2.5, "Baguette", shop=bakery, categories=[category]),
        make_product(4.0, "Croissant", shop=bakery, categories=[category]),
        make_product(12.0, "Steak", shop=butcher),
    ])
    test_db.commit()
    return test_db
