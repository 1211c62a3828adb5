# SPDX-License-Identifier: Apache-2.0
"""Exception types and transport-safe error serialization."""
from __future__ import annotations

import traceback
from typing import Any, Dict


class ActionflowError(Exception):
    """Base class for errors raised by the lifecycle engine itself."""


class MissingActionTypeError(ActionflowError):
    def __init__(self, name: str):
        super().__init__(f"unknown action type: annotations on '{name}' do not declare a type")
        self.name = name


class ConfigError(ActionflowError, ValueError):
    pass


def serialize_error(err: BaseException) -> Dict[str, Any]:
    """Plain-dict view of an exception that is safe to put on the wire.

    Never raises; unrenderable messages fall back to the exception's repr.
    """
    try:
        message = str(err)
    except Exception:
        message = repr(err)
    try:
        stack = "".join(traceback.format_exception(type(err), err, err.__traceback__))
    except Exception:
        stack = ""
    return {
        "name": type(err).__name__,
        "message": message,
        "stack": stack,
    }
