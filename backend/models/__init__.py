# backend/models/__init__.py
from .user_model import User
from .category_model import Category
from .product_model import Product
from .inquiry_model import Inquiry

__all__ = ["User", "Category", "Product", "Inquiry"]
