"""Result classification for wrapped action calls."""
from __future__ import annotations

import asyncio
import inspect
from dataclasses import dataclass
from typing import Any, Union


@dataclass(slots=True, frozen=True)
class Immediate:
    value: Any


@dataclass(slots=True, frozen=True)
class Deferred:
    future: asyncio.Future


Outcome = Union[Immediate, Deferred]


def classify(result: Any) -> Outcome:
    """Awaitables become a future on the running loop; everything else is immediate.

    Raises ``RuntimeError`` when an awaitable comes back outside a running loop.
    """
    if isinstance(result, asyncio.Future):
        return Deferred(result)
    if not inspect.isawaitable(result):
        return Immediate(result)
    try:
        loop = asyncio.get_running_loop()
    except RuntimeError:
        if inspect.iscoroutine(result):
            result.close()
        raise RuntimeError("async actions must be called from a running event loop") from None
    return Deferred(asyncio.ensure_future(result, loop=loop))
