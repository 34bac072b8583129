"""Demonstration of timed and concurrent fetches of user data."""

from __future__ import annotations

import argparse
import asyncio
from collections.abc import Sequence

from .core import TimeoutResultError
from .errors import CustomError, ResourceNotFound, from_timeout_result_error
from .timeout_with_result import timeout_with_result


async def get_posts(user_id: int) -> list[str]:
    """Return a user's posts after a delay of 1.1 seconds."""
    await asyncio.sleep(1.1)
    return [f"Post 1 for user {user_id}", f"Post 2 for user {user_id}"]


async def get_followers(user_id: int) -> list[str]:
    """Return a user's followers after a delay of 150 milliseconds."""
    await asyncio.sleep(0.15)
    return [f"Follower 1 of user {user_id}", f"Follower 2 of user {user_id}"]


async def get_data() -> int:
    """Return 100 after a delay of 1.5 seconds."""
    await asyncio.sleep(1.5)
    return 100


async def get_data_3(t: int) -> int:
    """Wait ``t`` milliseconds and return ``t``; 500 raises ResourceNotFound."""
    await asyncio.sleep(t / 1000)
    if t == 500:
        raise ResourceNotFound("123")
    return t


def process_data(posts: Sequence[str], followers: Sequence[str]) -> None:
    """Print a user's posts and followers."""
    print(f"User has {len(posts)} posts:")
    for post in posts:
        print(f"  - {post}")
    print(f"User has {len(followers)} followers:")
    for follower in followers:
        print(f"  - {follower}")


async def fetch_and_add() -> int:
    """Fetch data under a one-second deadline and add 100 to it.

    Raises a CustomError when the fetch fails or times out.
    """
    result = await timeout_with_result(1, get_data_3(1100))
    try:
        value = result.unwrap()
    except TimeoutResultError as err:
        raise from_timeout_result_error(err) from None
    return value + 100


def main(argv: Sequence[str] | None = None) -> int:
    """Run the timed fetch and print its outcome."""
    parser = argparse.ArgumentParser(
        prog="awaitkit",
        description="Fetch data under a deadline and print the outcome.",
    )
    parser.parse_args(argv)
    try:
        value = asyncio.run(fetch_and_add())
    except CustomError as err:
        print(f"error: {err}")
    else:
        print(f"result: {value}")
    return 0