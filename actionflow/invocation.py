# SPDX-License-Identifier: Apache-2.0
"""Per-call lifecycle of a wrapped action: STARTING, then DONE or FAILED."""
from __future__ import annotations

import asyncio
import enum
import functools
import logging
import time
from typing import Any, Callable, Dict, Mapping, Optional, Tuple

from .context import ActionContext
from .emitter import EventEmitter
from .errors import serialize_error
from .ids import small_id
from .messages import ACTION_DONE, ACTION_FAILED, ACTION_STARTING, lifecycle_type
from .metrics import ACTION_LATENCY, ACTIONS_DONE, ACTIONS_FAILED, ACTIONS_STARTED, ROLLBACKS
from .outcome import Deferred, classify
from .resolver import ResolvedAction, resolve, resolve_annotations

log = logging.getLogger(__name__)


class InvocationState(enum.Enum):
    IDLE = "idle"
    STARTING = "starting"
    RUNNING = "running"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


class ActionInvocation:
    """State for exactly one call of a wrapped action.

    ``creators`` is the owning container; it must expose ``dispatcher``,
    ``types``, ``get_action_type``, ``display_name`` and ``id``.
    """

    def __init__(self, creators: Any, func: Callable, name: str, action_type: Optional[str] = None):
        self.creators = creators
        self.func = func
        self.name = name
        self.state = InvocationState.IDLE
        self.action_id = small_id()
        self.handlers: list = []
        self.dispatched_action: Any = None
        if action_type is None:
            resolved = resolve(func, name, creators.types, creators.get_action_type)
        else:
            resolved = ResolvedAction(str(action_type), resolve_annotations(func))
        self.action_type = resolved.action_type
        self.annotations: Mapping[str, Any] = resolved.annotations
        self.silent = resolved.silent
        self._emitter = EventEmitter(creators.dispatcher)
        self._started_at = 0.0

    def run(self, args: Tuple[Any, ...], kwargs: Dict[str, Any]) -> Any:
        self._starting()
        self.state = InvocationState.RUNNING
        context = ActionContext(self.creators, self.dispatch)
        try:
            outcome = classify(self.func(context, *args, **kwargs))
        except BaseException as exc:
            self._failed(exc)
            raise
        if isinstance(outcome, Deferred):
            outcome.future.add_done_callback(self._settle)
            return outcome.future
        self._done()
        return outcome.value

    def dispatch(self, *args: Any) -> Any:
        """Send the action's data message; the latest handle is the one rolled back on failure."""
        self.dispatched_action = self._emitter.emit(
            {
                "id": self.action_id,
                "type": self.action_type,
                "handlers": self.handlers,
                "arguments": args,
            },
            self.annotations,
        )
        return self.dispatched_action

    def _settle(self, future: asyncio.Future) -> None:
        if future.cancelled():
            self._failed(asyncio.CancelledError())
            return
        exc = future.exception()
        if exc is None:
            self._done()
        else:
            self._failed(exc)

    def _starting(self) -> None:
        self.state = InvocationState.STARTING
        self._started_at = time.perf_counter()
        ACTIONS_STARTED.labels(self.action_type).inc()
        if self.silent:
            return
        self._emit(lifecycle_type(self.action_type, "STARTING"), {"id": self.action_id})
        self._emit(
            ACTION_STARTING,
            {
                "id": self.action_id,
                "type": self.action_type,
                "handlers": self.handlers,
                "annotations": self.annotations,
            },
        )

    def _done(self) -> None:
        if not self._finish(InvocationState.SUCCEEDED):
            return
        ACTIONS_DONE.labels(self.action_type).inc()
        if self.silent:
            return
        self._emit(lifecycle_type(self.action_type, "DONE"), {"id": self.action_id, "handlers": self.handlers})
        self._emit(ACTION_DONE, {"id": self.action_id, "handlers": self.handlers})

    def _failed(self, exc: BaseException) -> None:
        if not self._finish(InvocationState.FAILED):
            return
        ACTIONS_FAILED.labels(self.action_type).inc()
        error = serialize_error(exc)
        # FAILED ignores the silent annotation.
        self._emit(
            lifecycle_type(self.action_type, "FAILED"),
            {"error": error, "id": self.action_id, "handlers": self.handlers},
        )
        self._emit(ACTION_FAILED, {"error": error, "id": self.action_id, "handlers": self.handlers})
        if self.dispatched_action is not None:
            self.dispatched_action.rollback()
            self.dispatched_action.error = error
            ROLLBACKS.labels(self.action_type).inc()
        log.error(
            "An error occurred when dispatching a '%s' action in %s#%s",
            self.action_type,
            getattr(self.creators, "display_name", None) or getattr(self.creators, "id", ""),
            self.name,
            exc_info=exc,
        )

    def _finish(self, state: InvocationState) -> bool:
        if self.state is not InvocationState.RUNNING:
            log.warning("action %s (%s) already settled as %s", self.action_type, self.action_id, self.state.value)
            return False
        self.state = state
        ACTION_LATENCY.labels(self.action_type).observe((time.perf_counter() - self._started_at) * 1000)
        return True

    def _emit(self, event_type: str, argument: Dict[str, Any]) -> Any:
        return self._emitter.emit({"internal": True, "type": event_type, "arguments": [argument]}, self.annotations)


def wrap_action(creators: Any, func: Callable, name: str, action_type: Optional[str] = None) -> Callable[..., Any]:
    """Wrap ``func`` so each call runs its own ``ActionInvocation``.

    ``func`` receives an ``ActionContext`` as its first argument. A fixed
    ``action_type`` bypasses type resolution.
    """

    @functools.wraps(func)
    def action(*args: Any, **kwargs: Any) -> Any:
        return ActionInvocation(creators, func, name, action_type).run(args, kwargs)

    action.__name__ = name
    action.action_name = name  # type: ignore[attr-defined]
    return action
