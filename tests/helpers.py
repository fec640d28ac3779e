"""Test helpers (small, reusable generators and outcomes)."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any


def exploding_tail(head: list[Any]) -> Iterator[Any]:
    """Yield ``head`` then fail loudly if anything pulls one more element."""
    yield from head
    raise AssertionError("iteration continued past the first failure")


def tracking(items: list[Any], seen: list[int]) -> Iterator[Any]:
    """Yield ``items`` while recording the index of each one pulled."""
    for index, item in enumerate(items):
        seen.append(index)
        yield item
