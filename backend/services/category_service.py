# backend/services/category_service.py
import logging
from typing import Dict, List, Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from models.category_model import Category
from models.product_model import Product
from schemas.categories import CategoryCreate, CategoryUpdate
from services.db_utils import commit
from services.errors import BusinessRuleViolation, NotFound
from services.slugs import slugify

logger = logging.getLogger(__name__)


def product_counts(db: Session, category_ids: List[int]) -> Dict[int, int]:
    """Publicly listed products per category."""
    if not category_ids:
        return {}
    rows = (
        db.query(Product.category_id, func.count(Product.id))
        .filter(
            Product.category_id.in_(category_ids),
            Product.is_active.is_(True),
            Product.is_approved.is_(True),
        )
        .group_by(Product.category_id)
        .all()
    )
    return {cid: n for cid, n in rows}


def list_active(db: Session) -> List[Category]:
    return (
        db.query(Category)
        .filter(Category.is_active.is_(True))
        .order_by(Category.sort_order.asc(), Category.name.asc())
        .all()
    )


def find_by_id_or_slug(db: Session, ident: str) -> Optional[Category]:
    q = db.query(Category)
    if str(ident).isdigit():
        c = q.filter(Category.id == int(ident)).first()
        if c:
            return c
    return q.filter(Category.slug == str(ident)).first()


def get_category(db: Session, ident: str) -> Category:
    c = find_by_id_or_slug(db, ident)
    if not c:
        raise NotFound("Category not found")
    return c


def _ensure_unique_name(db: Session, name: str, exclude_id: int = None) -> None:
    q = db.query(Category).filter(func.lower(Category.name) == name.lower())
    if exclude_id is not None:
        q = q.filter(Category.id != exclude_id)
    if q.first():
        raise BusinessRuleViolation("Category already exists")


def _ensure_parent(db: Session, parent_id: Optional[int], self_id: int = None) -> None:
    if parent_id is None:
        return
    if self_id is not None and parent_id == self_id:
        raise BusinessRuleViolation("A category cannot be its own parent")
    if not db.get(Category, parent_id):
        raise NotFound("Parent category not found")


def create_category(db: Session, body: CategoryCreate) -> Category:
    _ensure_unique_name(db, body.name)
    _ensure_parent(db, body.parent_id)

    c = Category(
        name=body.name,
        slug=slugify(body.name),
        description=body.description,
        icon=body.icon,
        image=body.image,
        parent_id=body.parent_id,
        sort_order=body.sort_order,
    )
    db.add(c)
    commit(db, c)
    logger.info(f"Category {c.id} created ({c.slug})")
    return c


def update_category(db: Session, category_id: int, body: CategoryUpdate) -> Category:
    c = db.get(Category, category_id)
    if not c:
        raise NotFound("Category not found")

    updates = body.model_dump(exclude_unset=True, exclude_none=True)
    if "name" in updates and updates["name"] != c.name:
        _ensure_unique_name(db, updates["name"], exclude_id=c.id)
        c.slug = slugify(updates["name"])
    if "parent_id" in updates:
        _ensure_parent(db, updates["parent_id"], self_id=c.id)

    for field, value in updates.items():
        setattr(c, field, value)
    commit(db, c)
    return c


def delete_category(db: Session, category_id: int) -> None:
    c = db.get(Category, category_id)
    if not c:
        raise NotFound("Category not found")

    # no dangling references: refuse while anything still points here
    in_use = db.query(Product.id).filter(Product.category_id == c.id).count()
    if in_use:
        raise BusinessRuleViolation(f"Category is used by {in_use} product(s) and cannot be deleted")
    if db.query(Category.id).filter(Category.parent_id == c.id).count():
        raise BusinessRuleViolation("Category has sub-categories and cannot be deleted")

    db.delete(c)
    commit(db)
    logger.info(f"Category {category_id} deleted")
