# backend/services/moderation_service.py
"""
Admin moderation: seller approval, account activation, product approval.
"""

import logging
from datetime import datetime, timedelta
from typing import Optional

from sqlalchemy import or_
from sqlalchemy.orm import Session, joinedload

from models.category_model import Category
from models.inquiry_model import Inquiry
from models.product_model import Product
from models.user_model import User
from services.actor import Actor
from services.db_utils import commit
from services.errors import NotFound
from services.pagination import paginate
from services.permissions import ensure_admin, ensure_deactivatable, ensure_seller_target

logger = logging.getLogger(__name__)

RECENT_DAYS = 30


def analytics(db: Session, actor: Actor) -> dict:
    ensure_admin(actor)
    since = datetime.utcnow() - timedelta(days=RECENT_DAYS)

    users = db.query(User)
    products = db.query(Product)
    inquiries = db.query(Inquiry)

    return {
        "users": {
            "total_buyers": users.filter(User.role == "buyer").count(),
            "total_sellers": users.filter(User.role == "seller").count(),
            "pending_sellers": users.filter(User.role == "seller", User.is_approved.is_(False)).count(),
            "recent_signups": users.filter(User.created_at >= since).count(),
        },
        "products": {
            "total": products.count(),
            "pending": products.filter(Product.is_approved.is_(False)).count(),
            "active": products.filter(Product.is_active.is_(True), Product.is_approved.is_(True)).count(),
            "recently_added": products.filter(Product.created_at >= since).count(),
        },
        "inquiries": {
            "total": inquiries.count(),
            "pending": inquiries.filter(Inquiry.status == "pending").count(),
            "recent_inquiries": inquiries.filter(Inquiry.created_at >= since).count(),
        },
        "categories": db.query(Category).filter(Category.is_active.is_(True)).count(),
    }


def list_users(
    db: Session,
    actor: Actor,
    role: Optional[str] = None,
    approved: Optional[str] = None,
    search: Optional[str] = None,
    page=None,
    limit=None,
):
    ensure_admin(actor)
    q = db.query(User)
    if role:
        q = q.filter(User.role == role)
    if approved == "true":
        q = q.filter(User.is_approved.is_(True))
    elif approved == "false":
        q = q.filter(User.is_approved.is_(False))
    if search:
        like = f"%{search.strip()}%"
        q = q.filter(or_(User.name.ilike(like), User.email.ilike(like), User.company_name.ilike(like)))
    return paginate(q.order_by(User.created_at.desc(), User.id.desc()), page, limit)


def _user(db: Session, user_id: int) -> User:
    u = db.get(User, user_id)
    if not u:
        raise NotFound("User not found")
    return u


def approve_seller(db: Session, actor: Actor, user_id: int, approved: bool) -> User:
    ensure_admin(actor)
    u = _user(db, user_id)
    ensure_seller_target(u)

    u.is_approved = approved
    commit(db, u)
    logger.info(f"Seller {u.id} {'approved' if approved else 'approval revoked'} by admin {actor.id}")
    return u


def toggle_user_active(db: Session, actor: Actor, user_id: int) -> User:
    ensure_admin(actor)
    u = _user(db, user_id)
    ensure_deactivatable(u)

    u.is_active = not u.is_active
    commit(db, u)
    logger.info(f"User {u.id} {'activated' if u.is_active else 'deactivated'} by admin {actor.id}")
    return u


def list_products(
    db: Session,
    actor: Actor,
    status: Optional[str] = None,
    search: Optional[str] = None,
    page=None,
    limit=None,
):
    ensure_admin(actor)
    q = db.query(Product)
    if status == "pending":
        q = q.filter(Product.is_approved.is_(False))
    elif status == "approved":
        q = q.filter(Product.is_approved.is_(True))
    elif status == "inactive":
        q = q.filter(Product.is_active.is_(False))
    if search:
        q = q.filter(Product.name.ilike(f"%{search.strip()}%"))
    q = q.options(joinedload(Product.category), joinedload(Product.seller))
    return paginate(q.order_by(Product.created_at.desc(), Product.id.desc()), page, limit)


def _product(db: Session, product_id: int) -> Product:
    p = db.get(Product, product_id)
    if not p:
        raise NotFound("Product not found")
    return p


def approve_product(db: Session, actor: Actor, product_id: int, approved: bool) -> Product:
    """Approval and visibility move together: rejecting also deactivates."""
    ensure_admin(actor)
    p = _product(db, product_id)

    p.is_approved = approved
    p.is_active = approved
    commit(db, p)
    logger.info(f"Product {p.id} {'approved' if approved else 'rejected'} by admin {actor.id}")
    return p


def toggle_featured(db: Session, actor: Actor, product_id: int) -> Product:
    ensure_admin(actor)
    p = _product(db, product_id)
    p.is_featured = not p.is_featured
    commit(db, p)
    return p
