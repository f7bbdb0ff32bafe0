from typing import List, Optional
from datetime import date, time
from pydantic import BaseModel, Field


# --- Shared ---
class PageResponse(BaseModel):
    total_elements: int
    total_pages: int
    page: int
    size: int


# --- Opening hours ---
class OpeningHoursSchema(BaseModel):
    day: int = Field(..., ge=1, le=7, description="1 = Monday .. 7 = Sunday")
    open_at: time
    close_at: time


class OpeningHoursResponse(OpeningHoursSchema):
    id: int

    class Config:
        from_attributes = True


# --- Shop ---
class ShopBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    in_vacations: bool = False
    opening_hours: List[OpeningHoursSchema] = []


class ShopCreate(ShopBase):
    created_at: Optional[date] = None


class ShopUpdate(ShopCreate):
    id: int


class ShopResponse(BaseModel):
    id: int
    name: str
    created_at: date
    in_vacations: bool
    nb_products: int = 0
    opening_hours: List[OpeningHoursResponse] = []

    class Config:
        from_attributes = True


class ShopPageResponse(PageResponse):
    content: List[ShopResponse]
