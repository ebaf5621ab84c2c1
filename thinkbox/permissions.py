"""Combining permissions as bit flags."""

from __future__ import annotations

import enum


class Permission(enum.IntFlag):
    READ = 1
    CREATE = 2
    UPDATE = 4
    DELETE = 8


def has_permission(role: int, permission: int) -> bool:
    """Return whether ``role`` holds every bit of ``permission``."""
    return role & permission == permission


def show_permissions(role: int) -> list[Permission]:
    """List the single permissions held by ``role``, lowest bit first."""
    return [p for p in Permission if has_permission(role, p)]


def _flag(value: bool) -> str:
    return str(value).lower()


def main(argv: list[str] | None = None) -> int:
    """Demonstrate granting, checking and revoking permissions."""
    writer = Permission.CREATE | Permission.UPDATE | Permission.DELETE
    print(int(writer))
    print(format(int(writer), "b"))

    print(f"读权限：{_flag(has_permission(writer, Permission.READ))}")
    print(f"删除权限：{_flag(has_permission(writer, Permission.DELETE))}")

    writer ^= Permission.DELETE
    print(int(writer), format(int(writer), "b"))
    print(f"删除权限：{_flag(has_permission(writer, Permission.DELETE))}")

    print("[" + " ".join(str(int(p)) for p in show_permissions(writer)) + "]")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())