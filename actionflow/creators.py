# SPDX-License-Identifier: Apache-2.0
"""Action-creator containers: named groups of wrapped actions."""
from __future__ import annotations

import inspect
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Mapping, Optional

from . import config
from .dispatcher import get_default
from .ids import typed_id
from .invocation import wrap_action
from .resolver import derive_action_type

log = logging.getLogger(__name__)

FUNCTIONS_TO_NOT_WRAP = frozenset({"get_action_type", "dispatch"})


@dataclass(slots=True)
class CreatorOptions:
    dispatcher: Any = None
    types: Optional[Dict[str, Any]] = None
    display_name: Optional[str] = None
    context: Any = None


@dataclass(slots=True)
class CreatorState:
    """Private per-instance state; never exposed to action functions."""

    dispatcher: Any
    types: Dict[str, Any] = field(default_factory=dict)
    context: Any = None


def _forward(context, *args):
    context.dispatch(*args)


class ActionCreators:
    """Base class for action creators.

    Public functions defined in a subclass body are its actions. Each one
    receives an ``ActionContext`` as ``self`` and may call ``self.dispatch``::

        class UserActionCreators(ActionCreators):
            def load_user(self, user_id):
                self.dispatch(user_id)
    """

    action_table: Dict[str, Callable] = {}
    default_types: Dict[str, Any] = {}
    display_name: Optional[str] = None

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        declared_types = vars(cls).get("types")
        if isinstance(declared_types, Mapping):
            # a class-level type map would shadow the property
            delattr(cls, "types")
            cls.default_types = dict(declared_types)
        table: Dict[str, Callable] = {}
        for base in reversed(cls.__bases__):
            table.update(getattr(base, "action_table", {}))
        table.update(vars(cls).get("action_table", {}))
        for name, value in vars(cls).items():
            if name.startswith("_") or name in FUNCTIONS_TO_NOT_WRAP:
                continue
            if inspect.isfunction(value):
                table[name] = value
        cls.action_table = table

    def __init__(self, options: CreatorOptions | Mapping[str, Any] | None = None):
        if options is None and config.WARNINGS.missing_options:
            log.warning("options were not passed into %s's constructor", type(self).__name__)
        if options is None:
            options = CreatorOptions()
        elif isinstance(options, Mapping):
            options = CreatorOptions(**options)
        self.id = typed_id("ActionCreators")
        self._state = CreatorState(dispatcher=options.dispatcher or get_default(), context=options.context)
        if options.display_name:
            self.display_name = options.display_name
        for name, func in self.action_table.items():
            setattr(self, name, wrap_action(self, func, name))
        types = options.types if options.types is not None else self.default_types
        if types:
            self.types = types

    @property
    def types(self) -> Dict[str, Any]:
        return self._state.types

    @types.setter
    def types(self, value: Mapping[str, Any]) -> None:
        self._state.types = dict(value)
        for name, action_type in self._state.types.items():
            if not hasattr(self, name):
                setattr(self, name, wrap_action(self, _forward, name, str(action_type)))

    @property
    def dispatcher(self) -> Any:
        return self._state.dispatcher

    @property
    def context(self) -> Any:
        return self._state.context

    def get_action_type(self, name: str) -> str:
        return derive_action_type(name)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.display_name or self.id}>"
