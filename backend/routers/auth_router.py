# backend/routers/auth_router.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from database.session import get_db
from schemas.users import (
    RegisterPayload, LoginPayload, ProfileUpdate, PasswordChange,
    AuthResponse, TokenResponse, UserOut,
)
from services import auth_service
from services.actor import Actor, get_current_actor

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/register", response_model=AuthResponse, status_code=201)
def register(body: RegisterPayload, db: Session = Depends(get_db)):
    u, token = auth_service.register(db, body)
    message = (
        "Seller account created. Awaiting admin approval."
        if u.role == "seller" else "Account created successfully"
    )
    return AuthResponse(message=message, user=UserOut.model_validate(u), token=token)


@router.post("/login", response_model=AuthResponse)
def login(body: LoginPayload, db: Session = Depends(get_db)):
    u, token = auth_service.login(db, body.email, body.password)
    return AuthResponse(user=UserOut.model_validate(u), token=token)


@router.get("/me", response_model=UserOut)
def me(actor: Actor = Depends(get_current_actor), db: Session = Depends(get_db)):
    return UserOut.model_validate(auth_service.get_user(db, actor.id))


@router.put("/profile", response_model=UserOut)
def update_profile(body: ProfileUpdate, actor: Actor = Depends(get_current_actor), db: Session = Depends(get_db)):
    return UserOut.model_validate(auth_service.update_profile(db, actor, body))


@router.put("/change-password", response_model=TokenResponse)
def change_password(body: PasswordChange, actor: Actor = Depends(get_current_actor), db: Session = Depends(get_db)):
    token = auth_service.change_password(db, actor, body)
    return TokenResponse(message="Password changed successfully", token=token)
