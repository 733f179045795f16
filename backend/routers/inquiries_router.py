# backend/routers/inquiries_router.py
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from database.session import get_db
from schemas.inquiries import InquiryCreate, InquiryRespond, InquiryOut, InquiryList, InquiryAction, InquiryStatus
from services import inquiry_service
from services.actor import Actor, get_current_actor, require_roles

router = APIRouter(prefix="/inquiries", tags=["inquiries"])

buyer_only = require_roles("buyer")
seller_only = require_roles("seller")


def _to_out(inq) -> InquiryOut:
    return InquiryOut.model_validate(inq)


# role is checked inside the service so a seller inquiring on their own
# product gets the business-rule answer rather than a plain 403
@router.post("", response_model=InquiryOut, status_code=201)
def create_inquiry(body: InquiryCreate, actor: Actor = Depends(get_current_actor), db: Session = Depends(get_db)):
    return _to_out(inquiry_service.create_inquiry(db, actor, body))


@router.get("/my-inquiries", response_model=InquiryList)
def my_inquiries(
    status: Optional[InquiryStatus] = Query(default=None),
    page: Optional[int] = Query(default=None),
    limit: Optional[int] = Query(default=None),
    actor: Actor = Depends(buyer_only),
    db: Session = Depends(get_db),
):
    items, meta = inquiry_service.list_for_buyer(db, actor, status, page, limit)
    return InquiryList(data=[_to_out(i) for i in items], pagination=meta)


@router.get("/seller-inquiries", response_model=InquiryList)
def seller_inquiries(
    status: Optional[InquiryStatus] = Query(default=None),
    page: Optional[int] = Query(default=None),
    limit: Optional[int] = Query(default=None),
    actor: Actor = Depends(seller_only),
    db: Session = Depends(get_db),
):
    items, meta = inquiry_service.list_for_seller(db, actor, status, page, limit)
    return InquiryList(data=[_to_out(i) for i in items], pagination=meta)


@router.put("/{inquiry_id}/respond", response_model=InquiryAction)
def respond_to_inquiry(inquiry_id: int, body: InquiryRespond, actor: Actor = Depends(seller_only),
                       db: Session = Depends(get_db)):
    inq = inquiry_service.respond(db, actor, inquiry_id, body.response)
    return InquiryAction(message="Response sent successfully", data=_to_out(inq))


@router.put("/{inquiry_id}/read", response_model=InquiryOut)
def mark_as_read(inquiry_id: int, actor: Actor = Depends(seller_only), db: Session = Depends(get_db)):
    return _to_out(inquiry_service.mark_read(db, actor, inquiry_id))


@router.get("/{inquiry_id}", response_model=InquiryOut)
def get_inquiry(inquiry_id: int, actor: Actor = Depends(get_current_actor), db: Session = Depends(get_db)):
    return _to_out(inquiry_service.get_inquiry(db, actor, inquiry_id))
