# backend/models/user_model.py
from datetime import datetime

from sqlalchemy import Column, Integer, Boolean, DateTime
from sqlalchemy.types import Unicode, UnicodeText

from database.session import Base

ROLES = ("buyer", "seller", "admin")


class User(Base):
    __tablename__ = "users"

    id                  = Column(Integer, primary_key=True, index=True)
    name                = Column(Unicode(100), nullable=False)
    email               = Column(Unicode(255), unique=True, nullable=False, index=True)
    password_hash       = Column(Unicode(255), nullable=False)
    role                = Column(Unicode(20), nullable=False, default="buyer")  # buyer / seller / admin
    phone               = Column(Unicode(32))
    avatar              = Column(Unicode(500))

    # seller company metadata, display only
    company_name        = Column(Unicode(255))
    company_description = Column(UnicodeText)
    company_address     = Column(Unicode(500))
    gst_number          = Column(Unicode(32))
    website             = Column(Unicode(255))
    established_year    = Column(Integer)
    employee_count      = Column(Unicode(32))
    annual_turnover     = Column(Unicode(64))

    is_approved         = Column(Boolean, nullable=False, default=True)
    is_active           = Column(Boolean, nullable=False, default=True)
    created_at          = Column(DateTime, default=datetime.utcnow)
    updated_at          = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    def __repr__(self):
        return f"<User id={self.id} role={self.role} email={self.email}>"
