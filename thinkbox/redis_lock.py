"""A distributed lock kept in Redis, renewed in the background while held."""

from __future__ import annotations

import functools
import logging
import math
import threading
from typing import Any

import redis

logger = logging.getLogger(__name__)

INCR_LUA = """
if redis.call('get', KEYS[1]) == ARGV[1] then
  return redis.call('expire', KEYS[1],ARGV[2])
 else
   return '0'
end"""

DEFAULT_EXPIRE = 30.0
_LOCK_VALUE = 1


class LockError(RuntimeError):
    """Raised when a lock cannot be created, taken or released."""


@functools.lru_cache(maxsize=None)
def redis_client(host: str = "127.0.0.1", port: int = 6379, db: int = 0) -> redis.Redis:
    """Return a shared, pinged client for the given server and database."""
    pool = redis.ConnectionPool(
        host=host,
        port=port,
        db=db,
        max_connections=15,
        socket_connect_timeout=5,
        socket_timeout=3,
    )
    client = redis.Redis(connection_pool=pool)
    pong = client.ping()
    logger.info("%s", "PONG" if pong is True else pong)
    return client


class Locker:
    """A lock on ``key`` that expires after ``expire`` seconds unless renewed.

    While held, the expiry is pushed back every two thirds of ``expire``.
    """

    def __init__(
        self, key: str, expire: float = DEFAULT_EXPIRE, client: Any | None = None
    ) -> None:
        if expire <= 0:
            raise LockError("lock expire error")
        self.key = key
        self.expire = expire
        self.unlocked = False
        self._client = client
        self._stop = threading.Event()

    @property
    def client(self) -> Any:
        if self._client is None:
            self._client = redis_client()
        return self._client

    def lock(self) -> Locker:
        """Take the lock or raise :class:`LockError`; returns ``self``."""
        try:
            taken = self.client.set(
                self.key, _LOCK_VALUE, nx=True, px=max(1, int(self.expire * 1000))
            )
        except redis.RedisError:
            taken = False
        if not taken:
            raise LockError(f"lock error with key [{self.key}]")
        self.unlocked = False
        self._stop = threading.Event()
        self._renew_in_background(self._stop)
        return self

    def unlock(self) -> Locker:
        """Release the lock and stop renewing it; returns ``self``."""
        try:
            self.client.delete(self.key)
        except redis.RedisError as exc:
            raise LockError(f"unlock error with key [{self.key}]: {exc}") from exc
        self.unlocked = True
        self._stop.set()
        return self

    def _reset_expire(self) -> None:
        seconds = max(1, math.ceil(self.expire))
        try:
            outcome = self.client.eval(INCR_LUA, 1, self.key, _LOCK_VALUE, seconds)
            error = None
        except redis.RedisError as exc:
            outcome, error = None, exc
        logger.info("key=%s ,续期结果:%s,%s", self.key, error, outcome)

    def _renew_in_background(self, stop: threading.Event) -> None:
        interval = self.expire * 2 / 3

        def renew() -> None:
            while not stop.wait(interval):
                if self.unlocked:
                    break
                self._reset_expire()

        threading.Thread(target=renew, daemon=True).start()

    def __enter__(self) -> Locker:
        return self.lock()

    def __exit__(self, *args: object) -> None:
        self.unlock()