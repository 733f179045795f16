# backend/schemas/__init__.py

from .common import CamelModel, Pagination, MessageOut

# users
from .users import (
    RegisterPayload, LoginPayload, ProfileUpdate, PasswordChange,
    UserOut, UserSummary, InquiryParty, PublicUserOut, SellerProfileOut,
    AuthResponse, TokenResponse, UserList, UserAction,
)

# categories
from .categories import CategoryCreate, CategoryUpdate, CategorySummary, CategoryOut, CategoryList

# products
from .products import (
    Specification, ProductCreate, ProductUpdate, ProductSummary,
    ProductOut, ProductList, ProductAction,
)

# inquiries
from .inquiries import InquiryCreate, InquiryRespond, InquiryOut, InquiryList, InquiryAction

# admin
from .admin import ApprovalPayload, AnalyticsOut

__all__ = [
    "CamelModel", "Pagination", "MessageOut",
    "RegisterPayload", "LoginPayload", "ProfileUpdate", "PasswordChange",
    "UserOut", "UserSummary", "InquiryParty", "PublicUserOut", "SellerProfileOut",
    "AuthResponse", "TokenResponse", "UserList", "UserAction",
    "CategoryCreate", "CategoryUpdate", "CategorySummary", "CategoryOut", "CategoryList",
    "Specification", "ProductCreate", "ProductUpdate", "ProductSummary",
    "ProductOut", "ProductList", "ProductAction",
    "InquiryCreate", "InquiryRespond", "InquiryOut", "InquiryList", "InquiryAction",
    "ApprovalPayload", "AnalyticsOut",
]
