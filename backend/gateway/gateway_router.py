# backend/gateway/gateway_router.py
from fastapi import APIRouter

# one router per resource, all mounted under /api by main.py
from routers.auth_router import router as auth_router
from routers.users_router import router as users_router
from routers.sellers_router import router as sellers_router
from routers.categories_router import router as categories_router
from routers.products_router import router as products_router
from routers.inquiries_router import router as inquiries_router
from routers.admin_router import router as admin_router

gateway_router = APIRouter()

gateway_router.include_router(auth_router)          # /api/auth/...
gateway_router.include_router(users_router)         # /api/users/...
gateway_router.include_router(sellers_router)       # /api/sellers/...
gateway_router.include_router(categories_router)    # /api/categories/...
gateway_router.include_router(products_router)      # /api/products/...
gateway_router.include_router(inquiries_router)     # /api/inquiries/...
gateway_router.include_router(admin_router)         # /api/admin/...
