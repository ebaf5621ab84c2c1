import threading
import time
from unittest import mock

import pytest
import redis

from thinkbox.redis_lock import DEFAULT_EXPIRE, INCR_LUA, LockError, Locker, redis_client


class FakeRedis:
    def __init__(self):
        self.store = {}
        self.expired = []
        self.lock = threading.Lock()

    def set(self, key, value, nx=False, px=None):
        with self.lock:
            if nx and key in self.store:
                return None
            self.store[key] = str(value)
            return True

    def delete(self, key):
        with self.lock:
            return 1 if self.store.pop(key, None) is not None else 0

    def eval(self, script, numkeys, *keys_and_args):
        key, expected, seconds = keys_and_args
        with self.lock:
            self.expired.append((script, numkeys, key, seconds))
            if self.store.get(key) == str(expected):
                return 1
            return "0"


class BrokenRedis(FakeRedis):
    def delete(self, key):
        raise redis.ConnectionError("gone")


def test_expire_must_be_positive():
    with pytest.raises(LockError, match="lock expire error"):
        Locker("k", 0, client=FakeRedis())
    with pytest.raises(LockError):
        Locker("k", -1, client=FakeRedis())


def test_default_expire_is_thirty_seconds():
    assert Locker("k", client=FakeRedis()).expire == DEFAULT_EXPIRE == 30.0


def test_lock_holds_key_and_blocks_second_locker():
    fake = FakeRedis()
    first = Locker("lock1", 5, client=fake).lock()
    assert "lock1" in fake.store
    with pytest.raises(LockError, match=r"lock error with key \[lock1\]"):
        Locker("lock1", 5, client=fake).lock()
    first.unlock()
    assert "lock1" not in fake.store
    assert first.unlocked is True


def test_relock_after_unlock():
    fake = FakeRedis()
    locker = Locker("k", 5, client=fake)
    locker.lock().unlock()
    locker.lock()
    assert fake.store["k"] == "1"
    assert locker.unlocked is False
    locker.unlock()


def test_context_manager_releases_on_exit():
    fake = FakeRedis()
    with Locker("ctx", 5, client=fake) as held:
        assert "ctx" in fake.store
        assert held.key == "ctx"
    assert "ctx" not in fake.store


def test_context_manager_releases_on_error():
    fake = FakeRedis()
    with pytest.raises(KeyError):
        with Locker("ctx", 5, client=fake):
            raise KeyError("boom")
    assert fake.store == {}


def test_renewal_runs_script_until_unlocked():
    fake = FakeRedis()
    locker = Locker("renew", 0.06, client=fake).lock()
    time.sleep(0.3)
    assert len(fake.expired) >= 2
    script, numkeys, key, seconds = fake.expired[0]
    assert script == INCR_LUA
    assert (numkeys, key) == (1, "renew")
    assert seconds >= 1
    locker.unlock()
    time.sleep(0.1)
    count = len(fake.expired)
    time.sleep(0.2)
    assert len(fake.expired) == count


def test_unlock_error_is_raised():
    fake = BrokenRedis()
    locker = Locker("k", 5, client=fake).lock()
    with pytest.raises(LockError, match=r"unlock error with key \[k\]"):
        locker.unlock()
    locker._stop.set()


def test_redis_client_is_shared_and_pooled():
    with mock.patch.object(redis.Redis, "ping", return_value=True):
        first = redis_client("127.0.0.1", 6391, 0)
        second = redis_client("127.0.0.1", 6391, 0)
    assert first is second
    assert first.connection_pool.max_connections == 15
    assert first.connection_pool.connection_kwargs["port"] == 6391


def test_redis_client_connection_failure():
    with mock.patch.object(redis.Redis, "ping", side_effect=redis.ConnectionError("down")):
        with pytest.raises(redis.ConnectionError):
            redis_client("127.0.0.1", 6392, 0)