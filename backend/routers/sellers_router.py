# backend/routers/sellers_router.py
from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from database.session import get_db
from schemas.products import ProductList, ProductOut
from schemas.users import SellerProfileOut
from services import product_service, seller_service

router = APIRouter(prefix="/sellers", tags=["sellers"])


def _profile(seller, product_count: int) -> SellerProfileOut:
    out = SellerProfileOut.model_validate(seller)
    out.product_count = product_count
    return out


# /featured must be declared before /{seller_id}
@router.get("/featured", response_model=List[SellerProfileOut])
def featured_sellers(db: Session = Depends(get_db)):
    return [_profile(s, n) for s, n in seller_service.featured(db)]


@router.get("/{seller_id}", response_model=SellerProfileOut)
def seller_profile(seller_id: int, db: Session = Depends(get_db)):
    seller, count = seller_service.get_public_seller(db, seller_id)
    return _profile(seller, count)


@router.get("/{seller_id}/products", response_model=ProductList)
def seller_products(
    seller_id: int,
    page: Optional[int] = Query(default=None),
    limit: Optional[int] = Query(default=None),
    db: Session = Depends(get_db),
):
    items, meta = product_service.list_for_seller(db, seller_id, page, limit)
    return ProductList(data=[ProductOut.model_validate(p) for p in items], pagination=meta)
