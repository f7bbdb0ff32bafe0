"""
Shop Service: lifecycle, listing and full-text search of shops.
"""

import logging
from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from shopapp.exceptions import NotFoundError, PersistenceFailure, ShopValidationError
from shopapp.models.shop import Shop
from shopapp.pagination import Page, PageRequest
from shopapp.services.opening_hours import find_conflicts
from shopapp.services.search_index import ShopSearchIndex, shop_search_index
from shopapp.services.shop_queries import ShopFilters, compose_shop_list

logger = logging.getLogger(__name__)


class ShopService:
    """
    Orchestrates shop writes against the relational store and keeps the
    search index in step. Each public write commits its own transaction.
    """

    def __init__(self, search_index: ShopSearchIndex):
        self.search_index = search_index

    def create_shop(self, db: Session, shop: Shop) -> Shop:
        """
        Validate opening hours, persist the shop and return it refreshed so
        that computed columns (``nb_products``) are populated.

        Raises:
            ShopValidationError: two opening-hour slots overlap
            PersistenceFailure: the store rejected the write
        """
        conflicts = find_conflicts(shop.opening_hours)
        if conflicts:
            logger.warning(
                f"Rejected shop {shop.name!r}: {len(conflicts)} overlapping opening-hour pair(s)"
            )
            raise ShopValidationError("Shop is already open in one time slot")

        try:
            new_shop = db.merge(shop)
            db.flush()
            db.refresh(new_shop)
            self.search_index.index_shop(db, new_shop)
            db.commit()
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Could not save shop {shop.name!r}: {e}")
            raise PersistenceFailure(str(e)) from None

        logger.info(f"Saved shop {new_shop.id} ({new_shop.name!r})")
        return new_shop

    def update_shop(self, db: Session, shop: Shop) -> Shop:
        """Replace an existing shop. Same rules as ``create_shop``."""
        self._get_shop(db, shop.id)
        return self.create_shop(db, shop)

    def delete_shop_by_id(self, db: Session, shop_id: int) -> None:
        """
        Delete a shop. Its products are kept: each one is detached from the
        shop and flushed on its own before the shop row goes away.
        """
        shop = self._get_shop(db, shop_id)
        try:
            for product in list(shop.products):
                product.shop = None
                db.flush()
            db.delete(shop)
            self.search_index.remove_shop(db, shop_id)
            db.commit()
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Could not delete shop {shop_id}: {e}")
            raise PersistenceFailure(str(e)) from None

        logger.info(f"Deleted shop {shop_id}")

    def get_shop_by_id(self, db: Session, shop_id: int) -> Shop:
        return self._get_shop(db, shop_id)

    def get_shop_list(
        self,
        db: Session,
        sort_by: Optional[str] = None,
        in_vacations: Optional[bool] = None,
        created_before: Optional[str] = None,
        created_after: Optional[str] = None,
        pageable: Optional[PageRequest] = None,
    ) -> Page[Shop]:
        """
        List shops. ``sort_by`` takes precedence and disables all filters;
        otherwise the present filters are combined, dates compared strictly.
        """
        if sort_by is not None:
            filters = ShopFilters()
        else:
            filters = ShopFilters.parse(in_vacations, created_before, created_after)
        return compose_shop_list(db, sort_by, filters, pageable or PageRequest())

    def search_shops_by_name(
        self,
        db: Session,
        name: str,
        in_vacations: Optional[bool] = None,
        created_before: Optional[str] = None,
        created_after: Optional[str] = None,
        pageable: Optional[PageRequest] = None,
    ) -> Page[Shop]:
        """
        Full-text search on the shop name, then keep the hits that satisfy
        every present filter. The total is the size of the filtered hit list.
        """
        pageable = pageable or PageRequest()
        filters = ShopFilters.parse(in_vacations, created_before, created_after)

        hits = self._load_in_order(db, self.search_index.match_name(db, name))
        filtered = [shop for shop in hits if filters.matches(shop)]
        logger.debug(f"Search {name!r}: {len(hits)} hit(s), {len(filtered)} after filters")

        content = filtered[pageable.offset:pageable.offset + pageable.size]
        return Page.of(content, pageable, len(filtered))

    def _get_shop(self, db: Session, shop_id: Optional[int]) -> Shop:
        shop = db.get(Shop, shop_id) if shop_id is not None else None
        if shop is None:
            raise NotFoundError(f"Shop with id {shop_id} not found")
        return shop

    def _load_in_order(self, db: Session, shop_ids: List[int]) -> List[Shop]:
        if not shop_ids:
            return []
        by_id = {s.id: s for s in db.query(Shop).filter(Shop.id.in_(shop_ids)).all()}
        # Index entries of rows deleted outside the service are skipped
        return [by_id[shop_id] for shop_id in shop_ids if shop_id in by_id]


shop_service = ShopService(shop_search_index)
