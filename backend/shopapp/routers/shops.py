"""
Shop API endpoints: CRUD, filtered listing and full-text search.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request, status
from sqlalchemy.orm import Session

from shopapp.config import settings
from shopapp.database import get_db
from shopapp.dependencies import get_page_request, limiter
from shopapp.models.shop import Shop, OpeningHoursShop
from shopapp.pagination import Page, PageRequest
from shopapp.schemas import ShopCreate, ShopPageResponse, ShopResponse, ShopUpdate
from shopapp.services.shop_service import shop_service

logger = logging.getLogger(__name__)

router = APIRouter()


def _to_model(payload: ShopCreate, shop_id: Optional[int] = None) -> Shop:
    shop = Shop(
        name=payload.name,
        in_vacations=payload.in_vacations,
        opening_hours=[
            OpeningHoursShop(day=h.day, open_at=h.open_at, close_at=h.close_at)
            for h in payload.opening_hours
        ],
    )
    if shop_id is not None:
        shop.id = shop_id
    if payload.created_at is not None:
        shop.created_at = payload.created_at
    return shop


def _to_page_response(page: Page[Shop]) -> ShopPageResponse:
    return ShopPageResponse(
        content=[ShopResponse.model_validate(shop) for shop in page.content],
        total_elements=page.total_elements,
        total_pages=page.total_pages,
        page=page.page,
        size=page.size,
    )


@router.get("", response_model=ShopPageResponse)
def list_shops(
    sort_by: Optional[str] = Query(None, alias="sortBy"),
    in_vacations: Optional[bool] = Query(None, alias="inVacations"),
    created_before: Optional[str] = Query(None, alias="createdBefore"),
    created_after: Optional[str] = Query(None, alias="createdAfter"),
    pageable: PageRequest = Depends(get_page_request),
    db: Session = Depends(get_db),
):
    """
    List shops. ``sortBy`` (name, createdAt, anything else = product count)
    overrides the filters.
    """
    try:
        page = shop_service.get_shop_list(
            db, sort_by, in_vacations, created_before, created_after, pageable
        )
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return _to_page_response(page)


@router.get("/search", response_model=ShopPageResponse)
@limiter.limit(settings.SEARCH_RATE_LIMIT)
def search_shops(
    request: Request,
    name: str = Query(..., min_length=1),
    in_vacations: Optional[bool] = Query(None, alias="inVacations"),
    created_before: Optional[str] = Query(None, alias="createdBefore"),
    created_after: Optional[str] = Query(None, alias="createdAfter"),
    pageable: PageRequest = Depends(get_page_request),
    db: Session = Depends(get_db),
):
    """Full-text search on shop names, narrowed by the listing filters."""
    try:
        page = shop_service.search_shops_by_name(
            db, name, in_vacations, created_before, created_after, pageable
        )
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return _to_page_response(page)


@router.get("/{shop_id}", response_model=ShopResponse)
def get_shop(shop_id: int, db: Session = Depends(get_db)):
    return ShopResponse.model_validate(shop_service.get_shop_by_id(db, shop_id))


@router.post("", response_model=ShopResponse, status_code=status.HTTP_201_CREATED)
def create_shop(payload: ShopCreate, db: Session = Depends(get_db)):
    shop = shop_service.create_shop(db, _to_model(payload))
    return ShopResponse.model_validate(shop)


@router.put("", response_model=ShopResponse)
def update_shop(payload: ShopUpdate, db: Session = Depends(get_db)):
    shop = shop_service.update_shop(db, _to_model(payload, shop_id=payload.id))
    return ShopResponse.model_validate(shop)


@router.delete("/{shop_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_shop(shop_id: int, db: Session = Depends(get_db)):
    shop_service.delete_shop_by_id(db, shop_id)
