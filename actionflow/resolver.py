# SPDX-License-Identifier: Apache-2.0
"""Action type and annotation resolution for named actions."""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Callable, Mapping, Optional

from .errors import MissingActionTypeError

_CAMEL_BOUNDARY = re.compile(r"([a-z\d])([A-Z]+)")
_SEPARATORS = re.compile(r"[-\s]+")

_EMPTY: Mapping[str, Any] = MappingProxyType({})


def derive_action_type(name: str) -> str:
    """``loadUserProfile`` -> ``LOAD_USER_PROFILE``, ``fetch-user data`` -> ``FETCH_USER_DATA``."""
    name = _CAMEL_BOUNDARY.sub(r"\1_\2", name)
    return _SEPARATORS.sub("_", name).upper()


@dataclass(slots=True, frozen=True)
class ResolvedAction:
    action_type: str
    annotations: Mapping[str, Any] = field(default_factory=lambda: _EMPTY)

    @property
    def silent(self) -> bool:
        return bool(self.annotations.get("silent"))


def annotate(type: Optional[Any] = None, **annotations: Any) -> Callable[[Callable], Callable]:
    """Attach authored metadata to an action function.

    ``@annotate(type="SAVE_USER", silent=True)`` fixes the action type and marks
    the action silent. The type is mandatory once metadata is present; a missing
    one is reported when the action is first called.
    """
    metadata = dict(annotations)
    if type is not None:
        metadata["type"] = type

    def decorator(func: Callable) -> Callable:
        func.annotations = metadata  # type: ignore[attr-defined]
        return func

    return decorator


def resolve(
    func: Callable,
    name: str,
    types: Optional[Mapping[str, Any]] = None,
    namer: Callable[[str], str] = derive_action_type,
) -> ResolvedAction:
    metadata = getattr(func, "annotations", None)
    if metadata is not None:
        if not metadata.get("type"):
            raise MissingActionTypeError(name)
        rest = {k: v for k, v in metadata.items() if k != "type"}
        return ResolvedAction(str(metadata["type"]), MappingProxyType(rest))
    if types and types.get(name):
        return ResolvedAction(str(types[name]))
    return ResolvedAction(namer(name))


def resolve_annotations(func: Callable) -> Mapping[str, Any]:
    """Authored annotations only, for actions whose type is fixed up front."""
    metadata = getattr(func, "annotations", None)
    if metadata is None:
        return _EMPTY
    return MappingProxyType({k: v for k, v in metadata.items() if k != "type"})
