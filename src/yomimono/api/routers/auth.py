"""Authentication router for sign-up and sign-in.

Issues JWT bearer tokens used by the story endpoints.
"""

from datetime import datetime

from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel, EmailStr, Field
from sqlalchemy import or_, select

from yomimono.api.deps import CurrentUser, DBSession
from yomimono.core.config import get_settings
from yomimono.core.security import create_access_token, hash_password, verify_password
from yomimono.models.user import User

router = APIRouter()


# =============================================================================
# Schemas
# =============================================================================


class RegisterRequest(BaseModel):
    """User registration request."""

    username: str = Field(..., min_length=3, max_length=100)
    email: EmailStr
    password: str = Field(..., min_length=8, max_length=128)
    display_name: str = Field(default="", max_length=255)


class SigninRequest(BaseModel):
    """User sign-in request."""

    username: str
    password: str


class TokenResponse(BaseModel):
    """JWT token response."""

    access_token: str
    token_type: str = "bearer"
    expires_in: int


class UserResponse(BaseModel):
    """User info response."""

    id: int
    username: str
    email: str
    display_name: str
    is_active: bool
    created_at: datetime

    class Config:
        from_attributes = True


def _token_response(user: User) -> TokenResponse:
    settings = get_settings()
    return TokenResponse(
        access_token=create_access_token(user.id),
        expires_in=settings.access_token_expire_minutes * 60,
    )


# =============================================================================
# Endpoints
# =============================================================================


@router.post("/register", response_model=TokenResponse, status_code=status.HTTP_201_CREATED)
async def register(
    request: RegisterRequest,
    db: DBSession,
) -> TokenResponse:
    """Register a new user.

    Raises:
        HTTPException: If username or email already exists
    """
    result = await db.execute(
        select(User).where(or_(User.username == request.username, User.email == request.email))
    )
    if result.scalar_one_or_none():
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Username or email already registered",
        )

    user = User(
        username=request.username,
        email=request.email,
        display_name=request.display_name or request.username,
        hashed_password=hash_password(request.password),
        is_active=True,
    )
    db.add(user)
    await db.commit()
    await db.refresh(user)

    return _token_response(user)


@router.post("/signin", response_model=TokenResponse)
async def signin(
    request: SigninRequest,
    db: DBSession,
) -> TokenResponse:
    """Sign in with username and password.

    Raises:
        HTTPException: If credentials are invalid
    """
    result = await db.execute(select(User).where(User.username == request.username))
    user = result.scalar_one_or_none()

    if not user or not verify_password(request.password, user.hashed_password):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid username or password",
            headers={"WWW-Authenticate": "Bearer"},
        )

    if not user.is_active:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="User account is disabled",
        )

    return _token_response(user)


@router.get("/me", response_model=UserResponse)
async def get_me(user: CurrentUser) -> User:
    """Get the current user's profile."""
    return user
