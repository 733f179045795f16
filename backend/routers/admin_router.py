# backend/routers/admin_router.py
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from database.session import get_db
from schemas.admin import ApprovalPayload, AnalyticsOut
from schemas.common import MessageOut
from schemas.inquiries import InquiryAction, InquiryOut
from schemas.products import ProductOut, ProductList, ProductAction
from schemas.users import UserOut, UserList, UserAction
from services import inquiry_service, moderation_service, product_service
from services.actor import Actor, require_roles

# every route here is admin only
admin_only = require_roles("admin")
router = APIRouter(prefix="/admin", tags=["admin"])


@router.get("/analytics", response_model=AnalyticsOut)
def get_analytics(actor: Actor = Depends(admin_only), db: Session = Depends(get_db)):
    return AnalyticsOut.model_validate(moderation_service.analytics(db, actor))


# ---------- users ----------

@router.get("/users", response_model=UserList)
def list_users(
    role: Optional[str] = Query(default=None),
    approved: Optional[str] = Query(default=None),
    search: Optional[str] = Query(default=None),
    page: Optional[int] = Query(default=None),
    limit: Optional[int] = Query(default=None),
    actor: Actor = Depends(admin_only),
    db: Session = Depends(get_db),
):
    items, meta = moderation_service.list_users(db, actor, role, approved, search, page, limit)
    return UserList(data=[UserOut.model_validate(u) for u in items], pagination=meta)


@router.put("/users/{user_id}/approve", response_model=UserAction)
def approve_seller(user_id: int, body: ApprovalPayload, actor: Actor = Depends(admin_only),
                   db: Session = Depends(get_db)):
    u = moderation_service.approve_seller(db, actor, user_id, body.approved)
    message = "Seller approved successfully" if body.approved else "Seller approval revoked"
    return UserAction(message=message, data=UserOut.model_validate(u))


@router.put("/users/{user_id}/toggle-active", response_model=UserAction)
def toggle_user_active(user_id: int, actor: Actor = Depends(admin_only), db: Session = Depends(get_db)):
    u = moderation_service.toggle_user_active(db, actor, user_id)
    message = "User activated" if u.is_active else "User deactivated"
    return UserAction(message=message, data=UserOut.model_validate(u))


# ---------- products ----------

@router.get("/products", response_model=ProductList)
def products_for_moderation(
    status: Optional[str] = Query(default=None),
    search: Optional[str] = Query(default=None),
    page: Optional[int] = Query(default=None),
    limit: Optional[int] = Query(default=None),
    actor: Actor = Depends(admin_only),
    db: Session = Depends(get_db),
):
    items, meta = moderation_service.list_products(db, actor, status, search, page, limit)
    return ProductList(data=[ProductOut.model_validate(p) for p in items], pagination=meta)


@router.put("/products/{product_id}/approve", response_model=ProductAction)
def approve_product(product_id: int, body: ApprovalPayload, actor: Actor = Depends(admin_only),
                    db: Session = Depends(get_db)):
    p = moderation_service.approve_product(db, actor, product_id, body.approved)
    message = "Product approved" if body.approved else "Product rejected"
    return ProductAction(message=message, data=ProductOut.model_validate(p))


@router.put("/products/{product_id}/feature", response_model=ProductAction)
def toggle_featured(product_id: int, actor: Actor = Depends(admin_only), db: Session = Depends(get_db)):
    p = moderation_service.toggle_featured(db, actor, product_id)
    message = "Product featured" if p.is_featured else "Product unfeatured"
    return ProductAction(message=message, data=ProductOut.model_validate(p))


@router.delete("/products/{product_id}", response_model=MessageOut)
def delete_product(product_id: int, actor: Actor = Depends(admin_only), db: Session = Depends(get_db)):
    product_service.delete_product(db, actor, product_id)
    return MessageOut(message="Product deleted")


# ---------- inquiries ----------

@router.put("/inquiries/{inquiry_id}/close", response_model=InquiryAction)
def close_inquiry(inquiry_id: int, actor: Actor = Depends(admin_only), db: Session = Depends(get_db)):
    inq = inquiry_service.close(db, actor, inquiry_id)
    return InquiryAction(message="Inquiry closed", data=InquiryOut.model_validate(inq))
