# backend/services/actor.py
"""
Per-request actor context.

The actor is rebuilt from the bearer token on every request and handed to the
services explicitly; nothing about the caller is kept between requests.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from database.session import get_db
from models.user_model import User
from services.errors import NotAuthenticated, NotAuthorized
from services.security import decode_token

logger = logging.getLogger(__name__)

_bearer = HTTPBearer(auto_error=False)


@dataclass(frozen=True)
class Actor:
    id: int
    role: str
    is_approved: bool = True
    is_active: bool = True

    @classmethod
    def from_user(cls, user: User) -> "Actor":
        return cls(
            id=user.id,
            role=user.role,
            is_approved=bool(user.is_approved),
            is_active=bool(user.is_active),
        )

    @property
    def is_admin(self) -> bool:
        return self.role == "admin"


def _resolve(credentials: Optional[HTTPAuthorizationCredentials], db: Session) -> Optional[User]:
    if credentials is None or not credentials.credentials:
        return None
    data = decode_token(credentials.credentials)
    if data is None:
        raise NotAuthenticated("Not authorized, token failed")
    user = db.get(User, data.get("sub"))
    if user is None:
        raise NotAuthenticated("User no longer exists")
    if not user.is_active:
        raise NotAuthenticated("Your account has been deactivated. Please contact support.")
    return user


def get_current_actor(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(_bearer),
    db: Session = Depends(get_db),
) -> Actor:
    user = _resolve(credentials, db)
    if user is None:
        raise NotAuthenticated("Not authorized, no token")
    return Actor.from_user(user)


def get_optional_actor(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(_bearer),
    db: Session = Depends(get_db),
) -> Optional[Actor]:
    """Like get_current_actor, but anonymous requests yield None."""
    user = _resolve(credentials, db)
    return Actor.from_user(user) if user else None


def require_roles(*roles: str):
    def _checker(actor: Actor = Depends(get_current_actor)) -> Actor:
        if actor.role not in roles:
            logger.warning(f"Role {actor.role} rejected for user {actor.id}, needs one of {roles}")
            raise NotAuthorized(f"User role '{actor.role}' is not authorized to access this route")
        return actor
    return _checker
