# backend/schemas/inquiries.py
from datetime import datetime
from typing import Optional, List, Literal

from pydantic import Field, constr

from schemas.common import CamelModel, Pagination
from schemas.products import ProductSummary
from schemas.users import InquiryParty

InquiryStatus = Literal["pending", "read", "responded", "closed"]

SubjectStr = constr(strip_whitespace=True, min_length=1, max_length=200)
MessageStr = constr(strip_whitespace=True, min_length=1, max_length=2000)


class InquiryCreate(CamelModel):
    product_id: int = Field(gt=0)
    subject: SubjectStr
    message: MessageStr
    quantity: Optional[int] = Field(default=None, ge=1)
    quantity_unit: Optional[constr(strip_whitespace=True, max_length=50)] = None
    buyer_phone: Optional[constr(strip_whitespace=True, max_length=32)] = None
    buyer_company: Optional[constr(strip_whitespace=True, max_length=255)] = None
    delivery_location: Optional[constr(strip_whitespace=True, max_length=255)] = None


class InquiryRespond(CamelModel):
    # emptiness is checked by the service so it reports the domain message
    response: Optional[str] = None


class InquiryOut(CamelModel):
    id: int
    buyer_id: int
    seller_id: int
    product_id: Optional[int] = None
    buyer: Optional[InquiryParty] = None
    seller: Optional[InquiryParty] = None
    product: Optional[ProductSummary] = None
    subject: str
    message: str
    quantity: Optional[int] = None
    quantity_unit: Optional[str] = None
    status: InquiryStatus
    seller_response: Optional[str] = None
    responded_at: Optional[datetime] = None
    buyer_phone: Optional[str] = None
    buyer_company: Optional[str] = None
    delivery_location: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class InquiryList(CamelModel):
    data: List[InquiryOut]
    pagination: Pagination


class InquiryAction(CamelModel):
    message: str
    data: InquiryOut
