# SPDX-License-Identifier: Apache-2.0
"""Action-dispatch lifecycle engine."""
from __future__ import annotations

from .context import ActionContext
from .creators import ActionCreators, CreatorOptions
from .dispatcher import Dispatcher, get_default, reset_default
from .emitter import EventEmitter
from .errors import ActionflowError, ConfigError, MissingActionTypeError, serialize_error
from .invocation import ActionInvocation, InvocationState, wrap_action
from .messages import ACTION_DONE, ACTION_FAILED, ACTION_STARTING, ActionPayload, HandlerRecord
from .resolver import annotate, derive_action_type, resolve

__all__ = [
    "ACTION_DONE",
    "ACTION_FAILED",
    "ACTION_STARTING",
    "ActionContext",
    "ActionCreators",
    "ActionInvocation",
    "ActionPayload",
    "ActionflowError",
    "ConfigError",
    "CreatorOptions",
    "Dispatcher",
    "EventEmitter",
    "HandlerRecord",
    "InvocationState",
    "MissingActionTypeError",
    "annotate",
    "derive_action_type",
    "get_default",
    "reset_default",
    "resolve",
    "serialize_error",
    "wrap_action",
]
