# backend/models/category_model.py
from datetime import datetime

from sqlalchemy import Column, Integer, Boolean, DateTime, ForeignKey
from sqlalchemy.types import Unicode, UnicodeText
from sqlalchemy.orm import relationship

from database.session import Base


class Category(Base):
    __tablename__ = "categories"

    id          = Column(Integer, primary_key=True, index=True)
    name        = Column(Unicode(100), unique=True, nullable=False)
    slug        = Column(Unicode(120), unique=True, nullable=False, index=True)
    description = Column(UnicodeText)
    icon        = Column(Unicode(100))
    image       = Column(Unicode(500))
    parent_id   = Column(Integer, ForeignKey("categories.id"), nullable=True)
    sort_order  = Column(Integer, nullable=False, default=0)
    is_active   = Column(Boolean, nullable=False, default=True)
    created_at  = Column(DateTime, default=datetime.utcnow)
    updated_at  = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    parent   = relationship("Category", remote_side=[id], back_populates="children")
    children = relationship("Category", back_populates="parent")
    products = relationship("Product", back_populates="category")
