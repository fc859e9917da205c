"""Credential checks and token issuance."""
import logging
from typing import Optional

from sqlalchemy.orm import Session

from app.core.security import create_access_token, pwd_context, verify_password
from app.schemas.auth import UserIdentity
from app.services.user_service import UserService

logger = logging.getLogger(__name__)


class AuthService:
    def __init__(self, db: Session, users: Optional[UserService] = None):
        self.users = users or UserService(db)

    def validate_user(self, email: str, password: str) -> Optional[UserIdentity]:
        """Return the identity for matching credentials, ``None`` otherwise.

        An unknown email and a wrong password are indistinguishable to the
        caller, in outcome and in time spent hashing.
        """
        user = self.users.find_by_email(email)
        if user is None:
            pwd_context.dummy_verify()
            return None

        try:
            matches = verify_password(password, user.password_hash)
        except ValueError:
            logger.warning("Stored password hash for user %s is unreadable", user.id)
            return None

        if not matches:
            return None
        return UserIdentity(id=user.id, email=user.email)

    def login(self, identity: UserIdentity) -> str:
        return create_access_token(data={"sub": str(identity.id), "email": identity.email})
