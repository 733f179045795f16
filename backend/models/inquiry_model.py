# backend/models/inquiry_model.py
from datetime import datetime

from sqlalchemy import Column, Integer, DateTime, ForeignKey, CheckConstraint
from sqlalchemy.types import Unicode, UnicodeText
from sqlalchemy.orm import relationship

from database.session import Base

INQUIRY_STATUSES = ("pending", "read", "responded", "closed")


class Inquiry(Base):
    __tablename__ = "inquiries"

    id                = Column(Integer, primary_key=True, index=True)
    buyer_id          = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    # copied from the product at creation and never re-synchronised
    seller_id         = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    product_id        = Column(Integer, ForeignKey("products.id", ondelete="SET NULL"), nullable=True, index=True)
    subject           = Column(Unicode(200), nullable=False)
    message           = Column(UnicodeText, nullable=False)
    quantity          = Column(Integer)
    quantity_unit     = Column(Unicode(50))
    status            = Column(Unicode(20), nullable=False, default="pending", index=True)
    seller_response   = Column(UnicodeText)
    responded_at      = Column(DateTime)
    buyer_phone       = Column(Unicode(32))
    buyer_company     = Column(Unicode(255))
    delivery_location = Column(Unicode(255))
    created_at        = Column(DateTime, default=datetime.utcnow, index=True)
    updated_at        = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    __table_args__ = (
        CheckConstraint(
            "status in ('pending','read','responded','closed')",
            name="ck_inquiries_status",
        ),
    )

    buyer   = relationship("User", foreign_keys=[buyer_id])
    seller  = relationship("User", foreign_keys=[seller_id])
    product = relationship("Product", back_populates="inquiries")
