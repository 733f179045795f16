# backend/routers/products_router.py
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from database.session import get_db
from schemas.common import MessageOut
from schemas.products import ProductCreate, ProductUpdate, ProductOut, ProductList, ProductAction
from services import product_service
from services.actor import Actor, get_optional_actor, require_roles

router = APIRouter(prefix="/products", tags=["products"])

seller_only = require_roles("seller")
seller_or_admin = require_roles("seller", "admin")


# small helper for ORM -> schema
def _to_out(p) -> ProductOut:
    return ProductOut.model_validate(p)


@router.get("", response_model=ProductList)
def list_products(
    search: Optional[str] = Query(default=None),
    category: Optional[str] = Query(default=None, description="category id or slug"),
    min_price: Optional[float] = Query(default=None, alias="minPrice"),
    max_price: Optional[float] = Query(default=None, alias="maxPrice"),
    featured: Optional[str] = Query(default=None),
    sort: Optional[str] = Query(default=None),
    page: Optional[int] = Query(default=None),
    limit: Optional[int] = Query(default=None),
    db: Session = Depends(get_db),
):
    items, meta = product_service.list_public(
        db,
        search=search,
        category=category,
        min_price=min_price,
        max_price=max_price,
        featured=featured == "true",
        sort=sort,
        page=page,
        limit=limit,
    )
    return ProductList(data=[_to_out(p) for p in items], pagination=meta)


# must come before /{ident}
@router.get("/seller/my-products", response_model=ProductList)
def my_products(
    status: Optional[str] = Query(default=None),
    page: Optional[int] = Query(default=None),
    limit: Optional[int] = Query(default=None),
    actor: Actor = Depends(seller_only),
    db: Session = Depends(get_db),
):
    items, meta = product_service.list_own(db, actor, status, page, limit)
    return ProductList(data=[_to_out(p) for p in items], pagination=meta)


@router.get("/{ident}", response_model=ProductOut)
def get_product(ident: str, actor: Optional[Actor] = Depends(get_optional_actor), db: Session = Depends(get_db)):
    return _to_out(product_service.view_product(db, ident, actor))


@router.post("", response_model=ProductAction, status_code=201)
def create_product(body: ProductCreate, actor: Actor = Depends(seller_only), db: Session = Depends(get_db)):
    p = product_service.create_product(db, actor, body)
    return ProductAction(
        message="Product created successfully. Awaiting admin approval.",
        data=_to_out(p),
    )


@router.put("/{product_id}", response_model=ProductOut)
def update_product(product_id: int, body: ProductUpdate, actor: Actor = Depends(seller_or_admin),
                   db: Session = Depends(get_db)):
    return _to_out(product_service.update_product(db, actor, product_id, body))


@router.delete("/{product_id}", response_model=MessageOut)
def delete_product(product_id: int, actor: Actor = Depends(seller_or_admin), db: Session = Depends(get_db)):
    product_service.delete_product(db, actor, product_id)
    return MessageOut(message="Product deleted successfully")


@router.delete("/{product_id}/images/{image_index}", response_model=ProductOut)
def remove_product_image(product_id: int, image_index: int, actor: Actor = Depends(seller_or_admin),
                         db: Session = Depends(get_db)):
    return _to_out(product_service.remove_image(db, actor, product_id, image_index))
