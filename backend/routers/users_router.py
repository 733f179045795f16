# backend/routers/users_router.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from database.session import get_db
from schemas.users import PublicUserOut
from services import auth_service

router = APIRouter(prefix="/users", tags=["users"])


@router.get("/{user_id}", response_model=PublicUserOut)
def get_user_profile(user_id: int, db: Session = Depends(get_db)):
    """Public profile card; never exposes contact or moderation fields."""
    return PublicUserOut.model_validate(auth_service.get_user(db, user_id))
