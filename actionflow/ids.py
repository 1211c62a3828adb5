"""Identifier helpers for action invocations and container instances."""
from __future__ import annotations

import itertools
import secrets

_COUNTERS: dict[str, itertools.count] = {}


def small_id(nbytes: int = 6) -> str:
    return secrets.token_hex(nbytes)


def typed_id(type_name: str) -> str:
    """Sequential id per type name, e.g. ``ActionCreators-3``."""
    counter = _COUNTERS.setdefault(type_name, itertools.count(1))
    return f"{type_name}-{next(counter)}"
