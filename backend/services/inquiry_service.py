# backend/services/inquiry_service.py
"""
Inquiry lifecycle.

    pending   --mark read-->  read
    pending   --respond---->  responded
    read      --respond---->  responded
    responded --respond---->  responded   (overwrites the previous response)
    any       --admin close-> closed     (terminal)

The buyer only ever creates; every later transition belongs to the seller the
inquiry was addressed to, or to an admin for closing.
"""

import logging
from datetime import datetime
from typing import Optional

from sqlalchemy.orm import Session, joinedload

from models.inquiry_model import Inquiry
from models.product_model import Product
from schemas.inquiries import InquiryCreate
from services.actor import Actor
from services.db_utils import commit, increment
from services.errors import BusinessRuleViolation, NotAuthorized, NotFound, ValidationError
from services.pagination import paginate
from services.permissions import (
    ensure_addressed_seller, ensure_admin, ensure_can_view_inquiry, is_self_inquiry,
)

logger = logging.getLogger(__name__)

RESPONSE_MAX_LENGTH = 2000


def _with_relations(q):
    return q.options(
        joinedload(Inquiry.product),
        joinedload(Inquiry.buyer),
        joinedload(Inquiry.seller),
    )


def _load(db: Session, inquiry_id: int) -> Inquiry:
    inq = _with_relations(db.query(Inquiry)).filter(Inquiry.id == inquiry_id).first()
    if not inq:
        raise NotFound("Inquiry not found")
    return inq


def create_inquiry(db: Session, actor: Actor, body: InquiryCreate) -> Inquiry:
    product = db.get(Product, body.product_id)
    if not product:
        raise NotFound("Product not found")

    # unlisted products take no inquiries
    if not product.is_public:
        raise NotFound("Product not found")
    if is_self_inquiry(actor, product):
        logger.warning(f"User {actor.id} tried to inquire on own product {product.id}")
        raise BusinessRuleViolation("You cannot send an inquiry for your own product")
    if actor.role != "buyer":
        raise NotAuthorized(f"User role '{actor.role}' is not authorized to access this route")

    inq = Inquiry(
        buyer_id=actor.id,
        seller_id=product.seller_id,
        product_id=product.id,
        subject=body.subject,
        message=body.message,
        quantity=body.quantity,
        quantity_unit=body.quantity_unit,
        buyer_phone=body.buyer_phone,
        buyer_company=body.buyer_company,
        delivery_location=body.delivery_location,
        status="pending",
    )
    db.add(inq)
    commit(db, inq)

    # best effort; the inquiry above is already committed
    increment(db, Product, product.id, "inquiry_count")
    commit(db)

    logger.info(f"Inquiry {inq.id} created by buyer {actor.id} for product {product.id} (seller {inq.seller_id})")
    return _load(db, inq.id)


def list_for_buyer(db: Session, actor: Actor, status: Optional[str] = None, page=None, limit=None):
    q = db.query(Inquiry).filter(Inquiry.buyer_id == actor.id)
    if status:
        q = q.filter(Inquiry.status == status)
    q = _with_relations(q).order_by(Inquiry.created_at.desc(), Inquiry.id.desc())
    return paginate(q, page, limit)


def list_for_seller(db: Session, actor: Actor, status: Optional[str] = None, page=None, limit=None):
    q = db.query(Inquiry).filter(Inquiry.seller_id == actor.id)
    if status:
        q = q.filter(Inquiry.status == status)
    q = _with_relations(q).order_by(Inquiry.created_at.desc(), Inquiry.id.desc())
    return paginate(q, page, limit)


def get_inquiry(db: Session, actor: Actor, inquiry_id: int) -> Inquiry:
    inq = _load(db, inquiry_id)
    ensure_can_view_inquiry(actor, inq)
    return inq


def respond(db: Session, actor: Actor, inquiry_id: int, response: Optional[str]) -> Inquiry:
    text = (response or "").strip()
    if not text:
        raise ValidationError("Response message is required")
    if len(text) > RESPONSE_MAX_LENGTH:
        raise ValidationError(f"Response cannot exceed {RESPONSE_MAX_LENGTH} characters")

    inq = _load(db, inquiry_id)
    ensure_addressed_seller(actor, inq, "Not authorized to respond to this inquiry")
    if inq.status == "closed":
        raise BusinessRuleViolation("This inquiry has been closed")

    # a second response replaces the first; no history is kept
    if inq.status == "responded":
        logger.info(f"Inquiry {inq.id} response overwritten by seller {actor.id}")

    inq.seller_response = text
    inq.status = "responded"
    inq.responded_at = datetime.utcnow()
    commit(db, inq)
    logger.info(f"Inquiry {inq.id} responded by seller {actor.id}")
    return inq


def mark_read(db: Session, actor: Actor, inquiry_id: int) -> Inquiry:
    """pending -> read; any other status is returned untouched."""
    inq = _load(db, inquiry_id)
    ensure_addressed_seller(actor, inq)

    if inq.status == "pending":
        inq.status = "read"
        commit(db, inq)
    return inq


def close(db: Session, actor: Actor, inquiry_id: int) -> Inquiry:
    ensure_admin(actor)
    inq = _load(db, inquiry_id)
    if inq.status != "closed":
        inq.status = "closed"
        commit(db, inq)
        logger.info(f"Inquiry {inq.id} closed by admin {actor.id}")
    return inq
