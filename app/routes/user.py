"""User routes."""
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.core.security import get_current_user
from app.db.sessions import get_db
from app.models.user import User
from app.schemas.user import ProfileResponse, RegisterRequest, UserResponse
from app.services.user_service import UserService


router = APIRouter(prefix="/user", tags=["Users"])


def get_user_service(db: Session = Depends(get_db)) -> UserService:
    return UserService(db)


@router.post("/register", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def register(request: RegisterRequest, user_service: UserService = Depends(get_user_service)):
    """
    Register a new user.

    The password is stored as a bcrypt hash and never echoed back.
    """
    return user_service.create(request)


@router.get("/profile", response_model=ProfileResponse)
def get_profile(current_user: User = Depends(get_current_user)):
    """Return id, email and username of the authenticated user."""
    return current_user
