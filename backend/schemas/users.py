# backend/schemas/users.py
from datetime import datetime
from typing import Optional, List

from pydantic import EmailStr, Field, constr

from schemas.common import CamelModel, Pagination

# helper types
PersonName = constr(strip_whitespace=True, min_length=1, max_length=100)
Password = constr(min_length=6, max_length=128)


# ---------- requests ----------

class RegisterPayload(CamelModel):
    name: PersonName
    email: EmailStr
    password: Password
    role: Optional[str] = None          # "seller" or anything else -> buyer
    phone: Optional[str] = None
    company_name: Optional[str] = None


class LoginPayload(CamelModel):
    email: EmailStr
    password: str = Field(min_length=1)


class ProfileUpdate(CamelModel):
    name: Optional[PersonName] = None
    phone: Optional[str] = None
    avatar: Optional[str] = None
    # seller only
    company_name: Optional[str] = None
    company_description: Optional[str] = None
    company_address: Optional[str] = None
    gst_number: Optional[str] = None
    website: Optional[str] = None
    established_year: Optional[int] = Field(default=None, ge=1800, le=2100)
    employee_count: Optional[str] = None
    annual_turnover: Optional[str] = None


class PasswordChange(CamelModel):
    current_password: Optional[str] = None
    new_password: Optional[str] = None


# ---------- responses ----------

class UserOut(CamelModel):
    id: int
    name: str
    email: str
    role: str
    phone: Optional[str] = None
    avatar: Optional[str] = None
    company_name: Optional[str] = None
    company_description: Optional[str] = None
    company_address: Optional[str] = None
    gst_number: Optional[str] = None
    website: Optional[str] = None
    established_year: Optional[int] = None
    employee_count: Optional[str] = None
    annual_turnover: Optional[str] = None
    is_approved: bool
    is_active: bool
    created_at: Optional[datetime] = None


class UserSummary(CamelModel):
    """Seller block embedded in product payloads."""
    id: int
    name: str
    company_name: Optional[str] = None
    company_address: Optional[str] = None


class InquiryParty(CamelModel):
    """Buyer/seller block embedded in inquiry payloads."""
    id: int
    name: str
    email: Optional[str] = None
    phone: Optional[str] = None
    company_name: Optional[str] = None


class PublicUserOut(CamelModel):
    id: int
    name: str
    role: str
    company_name: Optional[str] = None
    company_description: Optional[str] = None
    company_address: Optional[str] = None
    avatar: Optional[str] = None
    established_year: Optional[int] = None
    created_at: Optional[datetime] = None


class SellerProfileOut(PublicUserOut):
    phone: Optional[str] = None
    email: Optional[str] = None
    website: Optional[str] = None
    employee_count: Optional[str] = None
    product_count: int = 0


class AuthResponse(CamelModel):
    message: Optional[str] = None
    user: UserOut
    token: str


class TokenResponse(CamelModel):
    message: str
    token: str


class UserList(CamelModel):
    data: List[UserOut]
    pagination: Pagination


class UserAction(CamelModel):
    message: str
    data: UserOut
