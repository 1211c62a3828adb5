# SPDX-License-Identifier: Apache-2.0
"""In-process synchronous dispatch channel."""
from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Optional

from .ids import small_id
from .messages import ActionPayload, HandlerRecord

log = logging.getLogger(__name__)

Subscriber = Callable[[ActionPayload], Optional[Callable[[], Any]]]


class Dispatcher:
    """Broadcasts every action to its subscribers in registration order.

    A subscriber may return a callable; it becomes the undo step run when the
    action is rolled back.
    """

    def __init__(self, name: str = "default"):
        self.name = name
        self._subscribers: Dict[str, tuple[str, Subscriber]] = {}

    def register(self, callback: Subscriber, name: str | None = None) -> str:
        token = small_id()
        if not name:
            name = getattr(callback, "__name__", token)
            if name == "<lambda>":
                name = token
        self._subscribers[token] = (name, callback)
        log.debug("dispatcher %s registered subscriber %s", self.name, token)
        return token

    def unregister(self, token: str) -> None:
        self._subscribers.pop(token, None)

    def dispatch(self, action: ActionPayload) -> ActionPayload:
        for sub_name, callback in list(self._subscribers.values()):
            undo = callback(action)
            if not action.internal:
                action.add_handler(HandlerRecord(subscriber=sub_name, action_type=action.type))
            if callable(undo):
                action.add_rollback(undo)
        return action


_DEFAULT: Dispatcher | None = None


def get_default() -> Dispatcher:
    global _DEFAULT
    if _DEFAULT is None:
        _DEFAULT = Dispatcher()
    return _DEFAULT


def reset_default(dispatcher: Dispatcher | None = None) -> Dispatcher:
    global _DEFAULT
    _DEFAULT = dispatcher or Dispatcher()
    return _DEFAULT
