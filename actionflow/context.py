"""Receiver handed to action functions in place of the container."""
from __future__ import annotations

from types import MappingProxyType
from typing import Any, Callable


class ActionContext:
    """Read-only view of an action-creator container plus ``dispatch``.

    Public instance attributes are snapshotted when the invocation starts;
    anything else (class helpers, properties) is looked up on the container.
    """

    __slots__ = ("_creators", "_fields", "dispatch")

    def __init__(self, creators: Any, dispatch: Callable[..., Any]):
        fields = {k: v for k, v in vars(creators).items() if not k.startswith("_")}
        object.__setattr__(self, "_creators", creators)
        object.__setattr__(self, "_fields", MappingProxyType(fields))
        object.__setattr__(self, "dispatch", dispatch)

    def __getattr__(self, name: str) -> Any:
        fields = object.__getattribute__(self, "_fields")
        if name in fields:
            return fields[name]
        return getattr(object.__getattribute__(self, "_creators"), name)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"action context is read-only; cannot set '{name}'")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"action context is read-only; cannot delete '{name}'")

    def __repr__(self) -> str:
        return f"ActionContext({object.__getattribute__(self, '_creators')!r})"
