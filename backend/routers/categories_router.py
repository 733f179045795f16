# backend/routers/categories_router.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from database.session import get_db
from schemas.categories import CategoryCreate, CategoryUpdate, CategoryOut, CategoryList
from schemas.common import MessageOut
from services import category_service
from services.actor import Actor, require_roles

router = APIRouter(prefix="/categories", tags=["categories"])

admin_only = require_roles("admin")


def _to_out(c, product_count: int = 0) -> CategoryOut:
    out = CategoryOut.model_validate(c)
    out.product_count = product_count
    return out


@router.get("", response_model=CategoryList)
def list_categories(db: Session = Depends(get_db)):
    cats = category_service.list_active(db)
    counts = category_service.product_counts(db, [c.id for c in cats])
    return CategoryList(data=[_to_out(c, counts.get(c.id, 0)) for c in cats])


@router.get("/{ident}", response_model=CategoryOut)
def get_category(ident: str, db: Session = Depends(get_db)):
    c = category_service.get_category(db, ident)
    counts = category_service.product_counts(db, [c.id])
    return _to_out(c, counts.get(c.id, 0))


@router.post("", response_model=CategoryOut, status_code=201)
def create_category(body: CategoryCreate, actor: Actor = Depends(admin_only), db: Session = Depends(get_db)):
    return _to_out(category_service.create_category(db, body))


@router.put("/{category_id}", response_model=CategoryOut)
def update_category(category_id: int, body: CategoryUpdate, actor: Actor = Depends(admin_only),
                    db: Session = Depends(get_db)):
    c = category_service.update_category(db, category_id, body)
    counts = category_service.product_counts(db, [c.id])
    return _to_out(c, counts.get(c.id, 0))


@router.delete("/{category_id}", response_model=MessageOut)
def delete_category(category_id: int, actor: Actor = Depends(admin_only), db: Session = Depends(get_db)):
    category_service.delete_category(db, category_id)
    return MessageOut(message="Category deleted")
