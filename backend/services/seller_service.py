# backend/services/seller_service.py
from typing import List, Tuple

from sqlalchemy import func
from sqlalchemy.orm import Session

from models.product_model import Product
from models.user_model import User
from services.errors import NotFound

FEATURED_LIMIT = 8


def _public_sellers(db: Session):
    return db.query(User).filter(
        User.role == "seller",
        User.is_active.is_(True),
        User.is_approved.is_(True),
    )


def public_product_count(db: Session, seller_id: int) -> int:
    return (
        db.query(func.count(Product.id))
        .filter(
            Product.seller_id == seller_id,
            Product.is_active.is_(True),
            Product.is_approved.is_(True),
        )
        .scalar()
    ) or 0


def get_public_seller(db: Session, seller_id: int) -> Tuple[User, int]:
    seller = _public_sellers(db).filter(User.id == seller_id).first()
    if not seller:
        raise NotFound("Seller not found")
    return seller, public_product_count(db, seller.id)


def featured(db: Session) -> List[Tuple[User, int]]:
    sellers = _public_sellers(db).order_by(User.created_at.asc(), User.id.asc()).limit(FEATURED_LIMIT).all()
    return [(s, public_product_count(db, s.id)) for s in sellers]
