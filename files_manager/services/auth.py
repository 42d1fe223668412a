# files_manager/services/auth.py
from typing import Optional

from sqlalchemy.orm import Session
from werkzeug.security import check_password_hash

from files_manager.core.errors import Unauthorized
from files_manager.models.user import User
from files_manager.services.sessions import SessionStore


class AuthResolver:
    """Turns basic credentials or a session token into a User."""

    def __init__(self, db: Session, sessions: SessionStore):
        self.db = db
        self.sessions = sessions

    def connect(self, email: Optional[str], password: Optional[str]) -> str:
        """Verify basic credentials and open a session; returns the token."""
        if not email or password is None:
            raise Unauthorized()

        user = self.db.query(User).filter(User.email == email).first()

        # one error for "no such user" and "wrong password"
        if not user or not check_password_hash(user.password, password):
            raise Unauthorized()

        return self.sessions.create_session(user.id)

    def user_from_token(self, token: Optional[str]) -> User:
        user = self.optional_user_from_token(token)
        if user is None:
            raise Unauthorized()
        return user

    def optional_user_from_token(self, token: Optional[str]) -> Optional[User]:
        user_id = self.sessions.resolve(token)
        if not user_id:
            return None
        return self.db.query(User).filter(User.id == user_id).first()

    def disconnect(self, token: Optional[str]) -> None:
        self.user_from_token(token)
        self.sessions.destroy(token)
