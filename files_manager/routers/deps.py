# files_manager/routers/deps.py
from typing import Optional

from fastapi import Depends, Header, Request
from sqlalchemy.orm import Session

from files_manager.models.user import User
from files_manager.services.auth import AuthResolver
from files_manager.services.file_tree import FileTree
from files_manager.services.storage import FileStorageEngine


# DB session dependency
def get_db(request: Request):
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()


def get_auth(request: Request, db: Session = Depends(get_db)) -> AuthResolver:
    return AuthResolver(db, request.app.state.sessions)


def get_file_tree(request: Request, db: Session = Depends(get_db)) -> FileTree:
    return FileTree(db, FileStorageEngine(request.app.state.settings.folder_path))


# --- helper: resolve the caller from the X-Token header ---
def get_current_user(
    x_token: Optional[str] = Header(default=None),
    auth: AuthResolver = Depends(get_auth),
) -> User:
    return auth.user_from_token(x_token)


def get_optional_user(
    x_token: Optional[str] = Header(default=None),
    auth: AuthResolver = Depends(get_auth),
) -> Optional[User]:
    return auth.optional_user_from_token(x_token)
