# backend/schemas/admin.py
from schemas.common import CamelModel


class ApprovalPayload(CamelModel):
    approved: bool


class UserCounts(CamelModel):
    total_buyers: int
    total_sellers: int
    pending_sellers: int
    recent_signups: int


class ProductCounts(CamelModel):
    total: int
    pending: int
    active: int
    recently_added: int


class InquiryCounts(CamelModel):
    total: int
    pending: int
    recent_inquiries: int


class AnalyticsOut(CamelModel):
    users: UserCounts
    products: ProductCounts
    inquiries: InquiryCounts
    categories: int
