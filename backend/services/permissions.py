# backend/services/permissions.py
"""
Access predicates, one per guarded operation.

Each predicate returns a bool; the ensure_* helpers raise the matching error
from services.errors so the call sites stay one line long.
"""

from models.inquiry_model import Inquiry
from models.product_model import Product
from models.user_model import User
from services.actor import Actor
from services.errors import BusinessRuleViolation, NotAuthorized


def can_create_product(actor: Actor) -> bool:
    return actor.role == "seller" and actor.is_approved


def can_manage_product(actor: Actor, product: Product) -> bool:
    return actor.id == product.seller_id or actor.is_admin


def can_view_unlisted_product(actor, product: Product) -> bool:
    return actor is not None and can_manage_product(actor, product)


def can_view_inquiry(actor: Actor, inquiry: Inquiry) -> bool:
    return actor.id in (inquiry.buyer_id, inquiry.seller_id) or actor.is_admin


def is_addressed_seller(actor: Actor, inquiry: Inquiry) -> bool:
    return actor.id == inquiry.seller_id


def is_self_inquiry(actor: Actor, product: Product) -> bool:
    return actor.id == product.seller_id


# ---------- raising helpers ----------

def ensure_can_manage_product(actor: Actor, product: Product, action: str = "update") -> None:
    if not can_manage_product(actor, product):
        raise NotAuthorized(f"Not authorized to {action} this product")


def ensure_can_view_inquiry(actor: Actor, inquiry: Inquiry) -> None:
    if not can_view_inquiry(actor, inquiry):
        raise NotAuthorized("Not authorized")


def ensure_addressed_seller(actor: Actor, inquiry: Inquiry, message: str = "Not authorized") -> None:
    if not is_addressed_seller(actor, inquiry):
        raise NotAuthorized(message)


def ensure_admin(actor: Actor) -> None:
    if not actor.is_admin:
        raise NotAuthorized(f"User role '{actor.role}' is not authorized to access this route")


def ensure_seller_target(target: User) -> None:
    if target.role != "seller":
        raise BusinessRuleViolation("User is not a seller")


def ensure_deactivatable(target: User) -> None:
    if target.role == "admin":
        raise BusinessRuleViolation("Cannot deactivate admin accounts")
