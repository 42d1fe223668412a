# files_manager/services/users.py
from typing import Optional

from loguru import logger
from sqlalchemy.orm import Session
from werkzeug.security import generate_password_hash

from files_manager.core.errors import ValidationError
from files_manager.models.user import User


def create_user(db: Session, email: Optional[str], password: Optional[str]) -> User:
    if not email or not isinstance(email, str):
        raise ValidationError("Missing email")
    if not password or not isinstance(password, str):
        raise ValidationError("Missing password")

    # Check if user exists
    existing_user = db.query(User).filter(User.email == email).first()
    if existing_user:
        raise ValidationError("Already exist")

    user = User(email=email, password=generate_password_hash(password))
    db.add(user)
    db.commit()
    db.refresh(user)

    logger.info(f"User {user.id} created")
    return user


def get_user(db: Session, user_id: str) -> Optional[User]:
    return db.query(User).filter(User.id == user_id).first()
