# backend/services/product_service.py
"""
Product catalogue: public listing and detail, seller CRUD.

A product is publicly listed only while is_active AND is_approved.
"""

import logging
from typing import Optional, Tuple, List

from sqlalchemy import case, or_
from sqlalchemy.orm import Session, joinedload

from models.category_model import Category
from models.product_model import Product
from models.user_model import User
from schemas.products import ProductCreate, ProductUpdate
from services import category_service
from services.actor import Actor
from services.db_utils import commit, increment
from services.errors import BusinessRuleViolation, NotAuthorized, NotFound, ValidationError
from services.pagination import paginate
from services.permissions import (
    can_create_product, can_view_unlisted_product, ensure_can_manage_product,
)
from services.slugs import product_slug

logger = logging.getLogger(__name__)

SORT_OPTIONS = {
    "price_asc": (Product.price_min.asc(),),
    "price_desc": (Product.price_min.desc(),),
    "popular": (Product.view_count.desc(),),
    "name": (Product.name.asc(),),
}
DEFAULT_SORT = (Product.created_at.desc(), Product.id.desc())


def clamp_price(price_min: float, price_max: Optional[float]) -> Optional[float]:
    """priceMax never ends up below priceMin."""
    if price_max is not None and price_max < price_min:
        return price_min
    return price_max


def _normalize_tags(tags: List[str]) -> List[str]:
    return [t.strip().lower() for t in tags if t and t.strip()]


def _with_relations(q):
    return q.options(joinedload(Product.category), joinedload(Product.seller))


def _search_rank(like: str):
    """Name hits first, then short description, then description only."""
    return case(
        (Product.name.ilike(like), 0),
        (Product.short_description.ilike(like), 1),
        else_=2,
    )


def public_query(db: Session):
    return db.query(Product).filter(Product.is_active.is_(True), Product.is_approved.is_(True))


def list_public(
    db: Session,
    search: Optional[str] = None,
    category: Optional[str] = None,
    min_price: Optional[float] = None,
    max_price: Optional[float] = None,
    featured: bool = False,
    sort: Optional[str] = None,
    page: Optional[int] = None,
    limit: Optional[int] = None,
) -> Tuple[List[Product], dict]:
    q = public_query(db)
    order = SORT_OPTIONS.get(sort, DEFAULT_SORT)

    if search:
        like = f"%{search.strip()}%"
        q = q.filter(or_(
            Product.name.ilike(like),
            Product.description.ilike(like),
            Product.short_description.ilike(like),
        ))
        if sort not in SORT_OPTIONS:
            order = (_search_rank(like),) + DEFAULT_SORT
    if category:
        cat = category_service.find_by_id_or_slug(db, category)
        # unknown category filters nothing, as the listing did before
        if cat:
            q = q.filter(Product.category_id == cat.id)
    if min_price is not None:
        q = q.filter(Product.price_min >= min_price)
    if max_price is not None:
        q = q.filter(Product.price_min <= max_price)
    if featured:
        q = q.filter(Product.is_featured.is_(True))

    q = _with_relations(q).order_by(*order)
    return paginate(q, page, limit, default_limit=12)


def list_for_seller(db: Session, seller_id: int, page=None, limit=None):
    q = _with_relations(public_query(db).filter(Product.seller_id == seller_id))
    return paginate(q.order_by(*DEFAULT_SORT), page, limit, default_limit=12)


def list_own(db: Session, actor: Actor, status: Optional[str] = None, page=None, limit=None):
    q = db.query(Product).filter(Product.seller_id == actor.id)
    if status == "active":
        q = q.filter(Product.is_active.is_(True), Product.is_approved.is_(True))
    elif status == "pending":
        q = q.filter(Product.is_approved.is_(False))
    elif status == "inactive":
        q = q.filter(Product.is_active.is_(False))
    q = q.options(joinedload(Product.category)).order_by(*DEFAULT_SORT)
    return paginate(q, page, limit)


def get_product(db: Session, product_id: int) -> Product:
    p = db.get(Product, product_id)
    if not p:
        raise NotFound("Product not found")
    return p


def find_by_id_or_slug(db: Session, ident: str) -> Optional[Product]:
    q = _with_relations(db.query(Product))
    if str(ident).isdigit():
        p = q.filter(Product.id == int(ident)).first()
        if p:
            return p
    return q.filter(Product.slug == str(ident).lower()).first()


def view_product(db: Session, ident: str, actor: Optional[Actor]) -> Product:
    """Detail page read; bumps the view counter."""
    p = find_by_id_or_slug(db, ident)
    if not p:
        raise NotFound("Product not found")
    if not p.is_public and not can_view_unlisted_product(actor, p):
        raise NotFound("Product not found")

    increment(db, Product, p.id, "view_count")
    commit(db)
    db.refresh(p)
    return p


def _ensure_category(db: Session, category_id: int) -> None:
    if not db.get(Category, category_id):
        raise NotFound("Category not found")


def create_product(db: Session, actor: Actor, body: ProductCreate) -> Product:
    if actor.role != "seller":
        raise NotAuthorized(f"User role '{actor.role}' is not authorized to access this route")
    if not can_create_product(actor):
        raise NotAuthorized("Your seller account is pending approval")
    _ensure_category(db, body.category_id)

    p = Product(
        name=body.name,
        slug=product_slug(body.name),
        description=body.description,
        short_description=body.short_description,
        category_id=body.category_id,
        seller_id=actor.id,
        images=list(body.images),
        price_min=body.price_min,
        price_max=clamp_price(body.price_min, body.price_max),
        price_unit=body.price_unit,
        currency=body.currency.upper(),
        moq=body.moq,
        moq_unit=body.moq_unit,
        specifications=[s.model_dump() for s in body.specifications],
        tags=_normalize_tags(body.tags),
        is_active=True,
        is_approved=False,
    )
    db.add(p)
    commit(db, p)
    logger.info(f"Product {p.id} created by seller {actor.id}, awaiting approval")
    return p


def update_product(db: Session, actor: Actor, product_id: int, body: ProductUpdate) -> Product:
    p = get_product(db, product_id)
    ensure_can_manage_product(actor, p, "update")

    updates = body.model_dump(exclude_unset=True, exclude_none=True)

    new_seller = updates.pop("seller_id", None)
    if new_seller is not None and new_seller != p.seller_id:
        if not actor.is_admin:
            raise NotAuthorized("Only an admin can reassign a product")
        target = db.get(User, new_seller)
        if not target:
            raise NotFound("Seller not found")
        if target.role != "seller":
            raise BusinessRuleViolation("Products can only be assigned to sellers")
        logger.info(f"Product {p.id} reassigned from seller {p.seller_id} to {new_seller} by admin {actor.id}")
        p.seller_id = new_seller

    if "category_id" in updates:
        _ensure_category(db, updates["category_id"])
    if "name" in updates and updates["name"] != p.name:
        p.slug = product_slug(updates["name"])
    if "tags" in updates:
        updates["tags"] = _normalize_tags(updates["tags"])
    if "currency" in updates:
        updates["currency"] = updates["currency"].upper()

    for field, value in updates.items():
        setattr(p, field, value)
    p.price_max = clamp_price(p.price_min, p.price_max)

    commit(db, p)
    return p


def delete_product(db: Session, actor: Actor, product_id: int) -> None:
    p = get_product(db, product_id)
    ensure_can_manage_product(actor, p, "delete")
    db.delete(p)
    commit(db)
    logger.info(f"Product {product_id} deleted by user {actor.id}")


def remove_image(db: Session, actor: Actor, product_id: int, index: int) -> Product:
    p = get_product(db, product_id)
    ensure_can_manage_product(actor, p, "update")

    images = list(p.images or [])
    if index < 0 or index >= len(images):
        raise ValidationError("Invalid image index")
    images.pop(index)
    # reassign so the JSON column registers the change
    p.images = images
    commit(db, p)
    return p
