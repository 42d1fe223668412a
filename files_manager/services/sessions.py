# files_manager/services/sessions.py
from typing import Optional
from uuid import uuid4

from loguru import logger

from files_manager.core.errors import Unauthorized

SESSION_TTL = 24 * 60 * 60
KEY_PREFIX = "auth_"


class SessionStore:
    """Maps opaque session tokens to user ids in a TTL cache."""

    def __init__(self, cache, ttl: int = SESSION_TTL):
        self._cache = cache
        self._ttl = ttl

    @staticmethod
    def _key(token: str) -> str:
        return f"{KEY_PREFIX}{token}"

    def create_session(self, user_id: str) -> str:
        token = str(uuid4())
        if not self._cache.set(self._key(token), user_id, self._ttl):
            # a token nobody can resolve is no session at all
            raise Unauthorized()
        logger.info(f"Session created for user {user_id}")
        return token

    def resolve(self, token: Optional[str]) -> Optional[str]:
        # no renewal on read
        if not token:
            return None
        return self._cache.get(self._key(token))

    def destroy(self, token: str) -> None:
        self._cache.delete(self._key(token))
        logger.info("Session destroyed")
