"""Authentication routes."""
from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.security import get_current_user
from app.db.sessions import get_db
from app.models.user import User
from app.schemas.auth import LoginRequest, MessageResponse
from app.services.auth_service import AuthService


router = APIRouter(prefix="/auth", tags=["Authentication"])


def get_auth_service(db: Session = Depends(get_db)) -> AuthService:
    return AuthService(db)


@router.post("/login", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
def login(
    request: LoginRequest,
    response: Response,
    auth_service: AuthService = Depends(get_auth_service)
):
    """
    Login with email and password.

    - Validates credentials
    - Sets the signed token as an HTTP-only cookie
    """
    identity = auth_service.validate_user(request.email, request.password)
    if identity is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Wrong email or password"
        )

    response.set_cookie(
        key=settings.COOKIE_NAME,
        value=auth_service.login(identity),
        max_age=settings.ACCESS_TOKEN_EXPIRE_MINUTES * 60,
        httponly=True,
        secure=settings.COOKIE_SECURE,
        samesite=settings.COOKIE_SAMESITE,
    )
    return MessageResponse(message="Login successful")


@router.post("/logout", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
def logout(response: Response, current_user: User = Depends(get_current_user)):
    """Clear the session cookie. Protected endpoint."""
    response.delete_cookie(
        key=settings.COOKIE_NAME,
        httponly=True,
        secure=settings.COOKIE_SECURE,
        samesite=settings.COOKIE_SAMESITE,
    )
    return MessageResponse(message="Logout successful")
