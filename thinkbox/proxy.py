"""A login service behind a logging proxy, with decorator-based log sinks."""

from __future__ import annotations

from typing import Callable

Login = Callable[[str, str], None]


def log_to_mongo(login: Login) -> Login:
    """Wrap ``login`` so that it records to mongodb after running."""

    def wrapper(name: str, password: str) -> None:
        login(name, password)
        print("记录到mongodb")

    return wrapper


def log_to_mysql(login: Login) -> Login:
    """Wrap ``login`` so that it records to mysql after running."""

    def wrapper(name: str, password: str) -> None:
        login(name, password)
        print("记录到mysql")

    return wrapper


class UserService:
    def login(self, name: str, password: str) -> None:
        print("登录成功")


class UserProxy:
    """Logs before delegating to a :class:`UserService`."""

    def __init__(self, service: UserService) -> None:
        self.service = service

    def login(self, name: str, password: str) -> None:
        print("记录日志")
        self.service.login(name, password)

    def login_with(self, decorator: Callable[[Login], Login]) -> Login:
        """Return this proxy's login wrapped by ``decorator``."""
        return decorator(self.login)