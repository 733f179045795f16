# backend/schemas/categories.py
from datetime import datetime
from typing import Optional, List

from pydantic import Field, constr

from schemas.common import CamelModel

CategoryName = constr(strip_whitespace=True, min_length=1, max_length=100)


class CategoryCreate(CamelModel):
    name: CategoryName
    description: Optional[str] = None
    icon: Optional[str] = None
    image: Optional[str] = None
    parent_id: Optional[int] = Field(default=None, gt=0)
    sort_order: int = 0


class CategoryUpdate(CamelModel):
    name: Optional[CategoryName] = None
    description: Optional[str] = None
    icon: Optional[str] = None
    image: Optional[str] = None
    parent_id: Optional[int] = Field(default=None, gt=0)
    sort_order: Optional[int] = None
    is_active: Optional[bool] = None


class CategorySummary(CamelModel):
    id: int
    name: str
    slug: str


class CategoryOut(CamelModel):
    id: int
    name: str
    slug: str
    description: Optional[str] = None
    icon: Optional[str] = None
    image: Optional[str] = None
    parent_id: Optional[int] = None
    sort_order: int = 0
    is_active: bool = True
    product_count: int = 0
    created_at: Optional[datetime] = None


class CategoryList(CamelModel):
    data: List[CategoryOut]
