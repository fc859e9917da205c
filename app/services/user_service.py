"""User accounts."""
import logging
from typing import Optional

from app.core.exceptions import ConflictError, NotFoundError
from app.core.security import get_password_hash
from app.models import User
from app.schemas.user import RegisterRequest
from app.services.base import BaseService

logger = logging.getLogger(__name__)


class UserService(BaseService):
    def create(self, data: RegisterRequest) -> User:
        """Register a user, rejecting an email or username that is taken."""
        if self.find_by_email(data.email) is not None:
            raise ConflictError("Email already registered")
        if self.db.query(User).filter(User.username == data.username).first() is not None:
            raise ConflictError("Username already taken")

        with self.handle_database_operation("Failed to create user"):
            user = User(
                username=data.username,
                email=data.email,
                password_hash=get_password_hash(data.password)
            )
            self.db.add(user)
            self.db.commit()
            self.db.refresh(user)

        logger.info("Registered user %s", user.id)
        return user

    def find_by_email(self, email: str) -> Optional[User]:
        return self.db.query(User).filter(User.email == email).first()

    def find_one(self, user_id) -> User:
        user = self.db.get(User, user_id)
        if user is None:
            raise NotFoundError(f"User with ID {user_id} not found")
        return user
