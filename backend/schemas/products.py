# backend/schemas/products.py
from datetime import datetime
from typing import Optional, List, Literal

from pydantic import Field, constr

from schemas.common import CamelModel, Pagination
from schemas.categories import CategorySummary
from schemas.users import UserSummary

NameStr = constr(strip_whitespace=True, min_length=1, max_length=200)
DescriptionStr = constr(strip_whitespace=True, min_length=1, max_length=5000)
ShortDescription = constr(strip_whitespace=True, max_length=300)

PriceUnit = Literal[
    "per piece", "per kg", "per ton", "per meter",
    "per liter", "per set", "per lot", "per dozen",
]
MoqUnit = Literal["pieces", "kg", "tons", "meters", "liters", "sets", "lots", "dozens"]


class Specification(CamelModel):
    key: constr(strip_whitespace=True, min_length=1, max_length=100)
    value: constr(strip_whitespace=True, max_length=500) = ""


class ProductCreate(CamelModel):
    name: NameStr
    description: DescriptionStr
    short_description: Optional[ShortDescription] = None
    category_id: int = Field(gt=0)
    price_min: float = Field(ge=0)
    price_max: Optional[float] = Field(default=None, ge=0)
    price_unit: PriceUnit = "per piece"
    currency: str = Field(default="INR", min_length=3, max_length=3)
    moq: int = Field(default=1, ge=1)
    moq_unit: MoqUnit = "pieces"
    specifications: List[Specification] = []
    tags: List[str] = []
    images: List[str] = Field(default=[], max_length=5)


class ProductUpdate(CamelModel):
    name: Optional[NameStr] = None
    description: Optional[DescriptionStr] = None
    short_description: Optional[ShortDescription] = None
    category_id: Optional[int] = Field(default=None, gt=0)
    price_min: Optional[float] = Field(default=None, ge=0)
    price_max: Optional[float] = Field(default=None, ge=0)
    price_unit: Optional[PriceUnit] = None
    currency: Optional[str] = Field(default=None, min_length=3, max_length=3)
    moq: Optional[int] = Field(default=None, ge=1)
    moq_unit: Optional[MoqUnit] = None
    specifications: Optional[List[Specification]] = None
    tags: Optional[List[str]] = None
    images: Optional[List[str]] = Field(default=None, max_length=5)
    is_active: Optional[bool] = None
    seller_id: Optional[int] = Field(default=None, gt=0)   # admin override only


class ProductSummary(CamelModel):
    id: int
    name: str
    slug: Optional[str] = None
    images: List[str] = []
    price_min: float
    price_max: Optional[float] = None


class ProductOut(CamelModel):
    id: int
    name: str
    slug: Optional[str] = None
    description: str
    short_description: Optional[str] = None
    category_id: int
    category: Optional[CategorySummary] = None
    seller_id: int
    seller: Optional[UserSummary] = None
    images: List[str] = []
    price_min: float
    price_max: Optional[float] = None
    price_unit: str
    currency: str
    moq: int
    moq_unit: str
    specifications: List[Specification] = []
    tags: List[str] = []
    is_active: bool
    is_approved: bool
    is_featured: bool
    view_count: int
    inquiry_count: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class ProductList(CamelModel):
    data: List[ProductOut]
    pagination: Pagination


class ProductAction(CamelModel):
    message: str
    data: ProductOut
