# backend/services/auth_service.py
import logging
from typing import Tuple

from sqlalchemy import func
from sqlalchemy.orm import Session

from models.user_model import User
from schemas.users import RegisterPayload, ProfileUpdate, PasswordChange
from services.actor import Actor
from services.db_utils import commit
from services.errors import BusinessRuleViolation, NotAuthenticated, NotFound, ValidationError
from services.security import create_token, hash_password, verify_password

logger = logging.getLogger(__name__)

BASE_PROFILE_FIELDS = ("name", "phone", "avatar")
SELLER_PROFILE_FIELDS = (
    "company_name", "company_description", "company_address",
    "gst_number", "website", "established_year",
    "employee_count", "annual_turnover",
)


def _find_by_email(db: Session, email: str):
    return db.query(User).filter(func.lower(User.email) == email.lower()).first()


def register(db: Session, body: RegisterPayload) -> Tuple[User, str]:
    if _find_by_email(db, body.email):
        raise BusinessRuleViolation("An account with this email already exists")

    u = User(
        name=body.name,
        email=body.email.lower(),
        password_hash=hash_password(body.password),
        phone=body.phone,
    )
    # admin accounts are never self-registered
    if body.role == "seller":
        u.role = "seller"
        u.company_name = body.company_name
        u.is_approved = False
    else:
        u.role = "buyer"
        u.is_approved = True

    db.add(u)
    commit(db, u)
    logger.info(f"Registered {u.role} account {u.id}")
    return u, create_token(u.id, u.role)


def login(db: Session, email: str, password: str) -> Tuple[User, str]:
    u = _find_by_email(db, email)
    if not u:
        raise NotAuthenticated("Invalid email or password")
    if not u.is_active:
        raise NotAuthenticated("Your account has been deactivated. Please contact support.")
    if not verify_password(password, u.password_hash):
        logger.warning(f"Failed login for user {u.id}")
        raise NotAuthenticated("Invalid email or password")
    return u, create_token(u.id, u.role)


def get_user(db: Session, user_id: int) -> User:
    u = db.get(User, user_id)
    if not u:
        raise NotFound("User not found")
    return u


def update_profile(db: Session, actor: Actor, body: ProfileUpdate) -> User:
    u = get_user(db, actor.id)
    allowed = list(BASE_PROFILE_FIELDS)
    if actor.role == "seller":
        allowed.extend(SELLER_PROFILE_FIELDS)

    updates = body.model_dump(exclude_unset=True)
    for field in allowed:
        if field in updates:
            setattr(u, field, updates[field])
    commit(db, u)
    return u


def change_password(db: Session, actor: Actor, body: PasswordChange) -> str:
    if not body.current_password or not body.new_password:
        raise ValidationError("Please provide current and new password")
    if len(body.new_password) < 6:
        raise ValidationError("New password must be at least 6 characters")

    u = get_user(db, actor.id)
    if not verify_password(body.current_password, u.password_hash):
        raise NotAuthenticated("Current password is incorrect")

    u.password_hash = hash_password(body.new_password)
    commit(db)
    return create_token(u.id, u.role)
