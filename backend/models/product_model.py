# backend/models/product_model.py
from datetime import datetime

from sqlalchemy import Column, Integer, Float, Boolean, DateTime, ForeignKey, JSON
from sqlalchemy.types import Unicode, UnicodeText
from sqlalchemy.orm import relationship

from database.session import Base

PRICE_UNITS = (
    "per piece", "per kg", "per ton", "per meter",
    "per liter", "per set", "per lot", "per dozen",
)
MOQ_UNITS = ("pieces", "kg", "tons", "meters", "liters", "sets", "lots", "dozens")


class Product(Base):
    __tablename__ = "products"

    id                = Column(Integer, primary_key=True, index=True)
    name              = Column(Unicode(200), nullable=False)
    slug              = Column(Unicode(255), index=True)
    description       = Column(UnicodeText, nullable=False)
    short_description = Column(Unicode(300))
    category_id       = Column(Integer, ForeignKey("categories.id"), nullable=False, index=True)
    seller_id         = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    images            = Column(JSON, nullable=False, default=list)   # stored file paths
    price_min         = Column(Float, nullable=False)
    price_max         = Column(Float)
    price_unit        = Column(Unicode(20), nullable=False, default="per piece")
    currency          = Column(Unicode(8), nullable=False, default="INR")
    moq               = Column(Integer, nullable=False, default=1)
    moq_unit          = Column(Unicode(20), nullable=False, default="pieces")
    specifications    = Column(JSON, nullable=False, default=list)   # [{"key":..., "value":...}]
    tags              = Column(JSON, nullable=False, default=list)
    is_active         = Column(Boolean, nullable=False, default=True)
    is_approved       = Column(Boolean, nullable=False, default=False)
    is_featured       = Column(Boolean, nullable=False, default=False)
    view_count        = Column(Integer, nullable=False, default=0)
    inquiry_count     = Column(Integer, nullable=False, default=0)
    created_at        = Column(DateTime, default=datetime.utcnow, index=True)
    updated_at        = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    category  = relationship("Category", back_populates="products")
    seller    = relationship("User", foreign_keys=[seller_id])
    inquiries = relationship("Inquiry", back_populates="product")

    @property
    def is_public(self) -> bool:
        return bool(self.is_active and self.is_approved)
