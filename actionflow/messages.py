# SPDX-License-Identifier: Apache-2.0
"""Message envelope shared by the emitter, the dispatcher and subscribers."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Optional, Tuple

log = logging.getLogger(__name__)

ACTION_STARTING = "ACTION_STARTING"
ACTION_DONE = "ACTION_DONE"
ACTION_FAILED = "ACTION_FAILED"

PHASES = ("STARTING", "DONE", "FAILED")

_FIELDS = ("type", "internal", "id", "arguments", "handlers", "error")


def lifecycle_type(action_type: str, phase: str) -> str:
    if phase not in PHASES:
        raise ValueError(f"unknown lifecycle phase '{phase}'")
    return f"{action_type}_{phase}"


@dataclass(slots=True, frozen=True)
class HandlerRecord:
    """Descriptor of a subscriber that handled a dispatched action."""

    subscriber: str
    action_type: str


@dataclass(slots=True, eq=False)
class ActionPayload:
    """Canonical message sent through the dispatch channel.

    Doubles as the rollback handle: subscribers register undo callbacks with
    `add_rollback` and the originating action calls `rollback()` when it fails.
    """

    type: str
    id: Optional[str] = None
    internal: bool = False
    arguments: Tuple[Any, ...] = ()
    handlers: List[Any] = field(default_factory=list)
    error: Any = None
    annotations: Dict[str, Any] = field(default_factory=dict)
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    _rollbacks: List[Callable[[], Any]] = field(default_factory=list, init=False, repr=False)
    _rolled_back: bool = field(default=False, init=False, repr=False)

    @classmethod
    def from_fields(cls, values: Dict[str, Any]) -> "ActionPayload":
        """Build a payload from a flat mapping; unknown keys become annotations."""
        if "type" not in values:
            raise ValueError("action payload requires a type")
        known = {k: values[k] for k in _FIELDS if k in values}
        extra = {k: v for k, v in values.items() if k not in _FIELDS}
        if known.get("handlers") is None:
            known.pop("handlers", None)
        if "arguments" in known:
            known["arguments"] = tuple(known["arguments"])
        known["internal"] = bool(known.get("internal", False))
        return cls(annotations=extra, **known)

    def add_handler(self, record: Any) -> None:
        self.handlers.append(record)

    def add_rollback(self, callback: Callable[[], Any]) -> None:
        self._rollbacks.append(callback)

    @property
    def rolled_back(self) -> bool:
        return self._rolled_back

    def rollback(self) -> None:
        if self._rolled_back:
            return
        self._rolled_back = True
        for callback in reversed(self._rollbacks):
            try:
                callback()
            except Exception:
                log.exception("rollback callback failed for action %s (%s)", self.type, self.id)

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = dict(self.annotations)
        data["type"] = self.type
        data["internal"] = self.internal
        if self.id is not None:
            data["id"] = self.id
        if self.arguments:
            data["arguments"] = list(self.arguments)
        if self.handlers:
            data["handlers"] = self.handlers
        if self.error is not None:
            data["error"] = self.error
        return data
