# files_manager/services/cache.py
from typing import Optional

import redis
from loguru import logger


class RedisCache:
    """
    TTL key-value cache backed by Redis.

    Errors never escape: a failed read looks like a miss, a failed write
    reports False and a failed delete is logged and dropped, so an unreachable
    Redis reads as "no session".
    """

    def __init__(self, client: redis.Redis):
        self._redis = client

    @classmethod
    def from_url(cls, url: str) -> "RedisCache":
        return cls(redis.Redis.from_url(url, decode_responses=True))

    def is_alive(self) -> bool:
        try:
            return bool(self._redis.ping())
        except redis.RedisError as e:
            logger.warning(f"Redis ping failed: {e}")
            return False

    def get(self, key: str) -> Optional[str]:
        try:
            return self._redis.get(key)
        except redis.RedisError as e:
            logger.warning(f"Failed to read {key} from cache: {e}")
            return None

    def set(self, key: str, value: str, ttl: int) -> bool:
        try:
            self._redis.setex(key, ttl, value)
        except redis.RedisError as e:
            logger.warning(f"Failed to write {key} to cache: {e}")
            return False
        return True

    def delete(self, key: str) -> None:
        try:
            self._redis.delete(key)
        except redis.RedisError as e:
            logger.warning(f"Failed to delete {key} from cache: {e}")
