"""
Query composition for the shop listing.

The optional listing parameters are folded once into a ``ShopQueryIntent``
and every intent maps to exactly one ordering/filtering of the shops table.
"""

import enum
import logging
from dataclasses import dataclass
from datetime import date
from typing import Optional

from sqlalchemy.orm import Query, Session

from shopapp.models.shop import Shop
from shopapp.pagination import Page, PageRequest

logger = logging.getLogger(__name__)


class ShopQueryIntent(str, enum.Enum):
    SORT_BY_NAME = "sort_by_name"
    SORT_BY_CREATED_AT = "sort_by_created_at"
    SORT_BY_PRODUCT_COUNT = "sort_by_product_count"
    VACATIONS_CREATED_BETWEEN = "vacations_created_between"
    VACATIONS_CREATED_BEFORE = "vacations_created_before"
    VACATIONS_CREATED_AFTER = "vacations_created_after"
    VACATIONS = "vacations"
    CREATED_BETWEEN = "created_between"
    CREATED_BEFORE = "created_before"
    CREATED_AFTER = "created_after"
    ALL = "all"


@dataclass(frozen=True)
class ShopFilters:
    """Optional predicates shared by the listing and the name search."""

    in_vacations: Optional[bool] = None
    created_before: Optional[date] = None
    created_after: Optional[date] = None

    @classmethod
    def parse(
        cls,
        in_vacations: Optional[bool] = None,
        created_before: Optional[str] = None,
        created_after: Optional[str] = None,
    ) -> "ShopFilters":
        """Build filters from ISO ``YYYY-MM-DD`` strings.

        Raises:
            ValueError: if a date string is not a valid ISO date
        """
        return cls(
            in_vacations=in_vacations,
            created_before=date.fromisoformat(created_before) if created_before is not None else None,
            created_after=date.fromisoformat(created_after) if created_after is not None else None,
        )

    def matches(self, shop: Shop) -> bool:
        """In-memory counterpart of the SQL predicates: all present filters must hold."""
        if self.in_vacations is not None and shop.in_vacations != self.in_vacations:
            return False
        if self.created_after is not None and not shop.created_at > self.created_after:
            return False
        if self.created_before is not None and not shop.created_at < self.created_before:
            return False
        return True


SORT_INTENTS = {
    "name": ShopQueryIntent.SORT_BY_NAME,
    "createdAt": ShopQueryIntent.SORT_BY_CREATED_AT,
}

# (in_vacations present, created_before present, created_after present) -> intent
FILTER_INTENTS = {
    (True, True, True): ShopQueryIntent.VACATIONS_CREATED_BETWEEN,
    (True, True, False): ShopQueryIntent.VACATIONS_CREATED_BEFORE,
    (True, False, True): ShopQueryIntent.VACATIONS_CREATED_AFTER,
    (True, False, False): ShopQueryIntent.VACATIONS,
    (False, True, True): ShopQueryIntent.CREATED_BETWEEN,
    (False, True, False): ShopQueryIntent.CREATED_BEFORE,
    (False, False, True): ShopQueryIntent.CREATED_AFTER,
    (False, False, False): ShopQueryIntent.ALL,
}


def resolve_intent(sort_by: Optional[str], filters: ShopFilters) -> ShopQueryIntent:
    """Pick the query intent. A sort key wins over every filter."""
    if sort_by is not None:
        return SORT_INTENTS.get(sort_by, ShopQueryIntent.SORT_BY_PRODUCT_COUNT)
    key = (
        filters.in_vacations is not None,
        filters.created_before is not None,
        filters.created_after is not None,
    )
    return FILTER_INTENTS[key]


def build_shop_query(db: Session, intent: ShopQueryIntent, filters: ShopFilters) -> Query:
    """Return the ordered (and possibly filtered) query for ``intent``."""
    query = db.query(Shop)

    if intent is ShopQueryIntent.SORT_BY_NAME:
        return query.order_by(Shop.name.asc(), Shop.id.asc())
    if intent is ShopQueryIntent.SORT_BY_CREATED_AT:
        return query.order_by(Shop.created_at.asc(), Shop.id.asc())
    if intent is ShopQueryIntent.SORT_BY_PRODUCT_COUNT:
        return query.order_by(Shop.nb_products.asc(), Shop.id.asc())

    if intent in (
        ShopQueryIntent.VACATIONS_CREATED_BETWEEN,
        ShopQueryIntent.VACATIONS_CREATED_BEFORE,
        ShopQueryIntent.VACATIONS_CREATED_AFTER,
        ShopQueryIntent.VACATIONS,
    ):
        query = query.filter(Shop.in_vacations == filters.in_vacations)

    if intent in (
        ShopQueryIntent.VACATIONS_CREATED_BETWEEN,
        ShopQueryIntent.VACATIONS_CREATED_AFTER,
        ShopQueryIntent.CREATED_BETWEEN,
        ShopQueryIntent.CREATED_AFTER,
    ):
        query = query.filter(Shop.created_at > filters.created_after)

    if intent in (
        ShopQueryIntent.VACATIONS_CREATED_BETWEEN,
        ShopQueryIntent.VACATIONS_CREATED_BEFORE,
        ShopQueryIntent.CREATED_BETWEEN,
        ShopQueryIntent.CREATED_BEFORE,
    ):
        query = query.filter(Shop.created_at < filters.created_before)

    return query.order_by(Shop.id.asc())


def paginate(query: Query, pageable: PageRequest) -> Page[Shop]:
    """Run ``query`` for one page and count the full result."""
    total = query.order_by(None).count()
    content = query.offset(pageable.offset).limit(pageable.size).all()
    return Page.of(content, pageable, total)


def compose_shop_list(
    db: Session,
    sort_by: Optional[str],
    filters: ShopFilters,
    pageable: PageRequest,
) -> Page[Shop]:
    intent = resolve_intent(sort_by, filters)
    logger.debug(f"Listing shops with intent {intent.value} ({filters})")
    return paginate(build_shop_query(db, intent, filters), pageable)
