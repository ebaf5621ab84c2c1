"""Daily sign-ins stored as bits in Redis."""

from __future__ import annotations

import argparse
import sys
from typing import Any

import redis

SEGMENT_SIZE = 63


def _key(user_id: int, year: int) -> str:
    return f"user:{year}:{user_id}"


class SignInCalendar:
    """Records one bit per day for each user and year."""

    def __init__(self, client: Any) -> None:
        self.client = client

    def sign_in(self, key: str, day_offset: int) -> bool:
        """Set the day's bit; ``False`` if it failed or was already set."""
        try:
            previous = self.client.setbit(key, day_offset, 1)
        except redis.RedisError:
            return False
        return previous != 1

    def get_sign(self, key: str, day_offset: int) -> int:
        """Return the day's bit, or 0 when it cannot be read."""
        try:
            return int(self.client.getbit(key, day_offset))
        except redis.RedisError:
            return 0

    def sign_of_month(self, user_id: int, year: int, days: int, offset: int) -> list[bool]:
        """Return whether the user signed in on each of ``days`` days from ``offset``."""
        try:
            values = (
                self.client.bitfield(_key(user_id, year))
                .get(f"u{days}", offset)
                .execute()
            )
        except redis.RedisError as exc:
            raise RuntimeError(f"failed to get bitfield: {exc}") from exc
        if not values:
            raise ValueError("no result returned from BITFIELD command")
        bits = values[0]
        return [bool((bits >> (days - 1 - i)) & 1) for i in range(days)]

    def cumulative_days(self, user_id: int, year: int, day_of_year: int) -> int:
        """Count the days the user signed in during the first ``day_of_year`` days."""
        if day_of_year <= 0:
            return 0
        operations = self.client.bitfield(_key(user_id, year))
        for start in range(0, day_of_year, SEGMENT_SIZE):
            size = min(SEGMENT_SIZE, day_of_year - start)
            operations.get(f"u{size}", f"#{start}")
        try:
            values = operations.execute()
        except redis.RedisError as exc:
            raise RuntimeError(f"failed to get bitfield: {exc}") from exc

        total = 0
        for index, value in enumerate(values):
            if not value:
                continue
            size = SEGMENT_SIZE
            if (index + 1) * SEGMENT_SIZE > day_of_year:
                size = day_of_year % SEGMENT_SIZE
            total += bin(value & ((1 << size) - 1)).count("1")
        return total


def main(argv: list[str] | None = None) -> int:
    """Print a user's sign-ins for a month and the running total."""
    parser = argparse.ArgumentParser(description="Show sign-in statistics.")
    parser.add_argument("--host", default="localhost")
    parser.add_argument("--port", type=int, default=6379)
    parser.add_argument("--user", type=int, default=1)
    parser.add_argument("--year", type=int, default=2024)
    args = parser.parse_args(argv)

    calendar = SignInCalendar(redis.Redis(host=args.host, port=args.port, db=0))
    try:
        print(calendar.sign_of_month(args.user, args.year, 30, 0))
        print(calendar.cumulative_days(args.user, args.year, 10))
    except (RuntimeError, ValueError) as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())