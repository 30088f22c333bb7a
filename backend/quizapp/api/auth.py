"""Signup, login, and account listing routes."""

import logging
from datetime import timedelta

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from quizapp.api.deps import get_current_user, require_admin
from quizapp.config import settings
from quizapp.core.security import create_access_token, hash_password, verify_password
from quizapp.db.models import RoleEnum, User
from quizapp.db.session import get_db
from quizapp.schemas.user import AuthResponse, UserCreate, UserLogin, UserRead

logger = logging.getLogger(__name__)
router = APIRouter()


def _user_read(user: User) -> UserRead:
    return UserRead(
        id=user.id,
        name=user.name,
        email=user.email,
        role=user.role.value,
        created_at=user.created_at,
    )


def _issue_token(user: User, minutes: int) -> str:
    return create_access_token(
        data={"sub": str(user.id), "role": user.role.value},
        expires_delta=timedelta(minutes=minutes),
    )


@router.post("/signup", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def signup(body: UserCreate, db: Session = Depends(get_db)):
    """Create a student or admin account and return a short-lived token."""
    existing = db.query(User).filter(User.email == body.email).first()
    if existing:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Email already registered",
        )

    role = RoleEnum(body.role.value)
    try:
        user = User(
            name=body.name,
            email=body.email,
            hashed_password=hash_password(body.password),
            role=role,
            hashed_admin_key=(
                hash_password(body.admin_key) if role == RoleEnum.ADMIN else None
            ),
        )
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
    db.add(user)
    db.commit()
    db.refresh(user)
    logger.info("Registered %s account %s", user.role.value, user.email)

    token = _issue_token(user, settings.SIGNUP_TOKEN_EXPIRE_MINUTES)
    return AuthResponse(access_token=token, user=_user_read(user))


@router.post("/login", response_model=AuthResponse)
def login(body: UserLogin, db: Session = Depends(get_db)):
    """Authenticate and return a JWT access token + user profile.

    Admins must also present the admin key they chose at signup.
    """
    user = db.query(User).filter(User.email == body.email).first()
    if not user or not verify_password(body.password, user.hashed_password):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid email or password",
        )
    if user.role == RoleEnum.ADMIN and not verify_password(
        body.admin_key or "", user.hashed_admin_key
    ):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid admin key",
        )

    token = _issue_token(user, settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    return AuthResponse(access_token=token, user=_user_read(user))


@router.get("/me", response_model=UserRead)
def me(current_user: User = Depends(get_current_user)):
    """Return the authenticated user's profile."""
    return _user_read(current_user)


@router.get("/all", response_model=list[UserRead])
def list_users(
    db: Session = Depends(get_db),
    _admin: User = Depends(require_admin),
):
    """Every account, oldest first (admin only)."""
    users = db.query(User).order_by(User.created_at).all()
    return [_user_read(u) for u in users]
