# SPDX-License-Identifier: Apache-2.0
"""Adapter that turns lifecycle events into messages on the dispatch channel."""
from __future__ import annotations

from typing import Any, Mapping, Protocol

from .messages import ActionPayload


class Channel(Protocol):
    def dispatch(self, action: ActionPayload) -> Any:  # pragma: no cover - interface
        ...


class EventEmitter:
    def __init__(self, channel: Channel):
        self.channel = channel

    def emit(self, payload: Mapping[str, Any], annotations: Mapping[str, Any]) -> Any:
        """Send one message and return the channel's rollback handle.

        Annotations sit under the payload, so payload keys win on conflict.
        Channel errors are not caught here.
        """
        action = ActionPayload.from_fields({**annotations, **payload})
        handle = self.channel.dispatch(action)
        return action if handle is None else handle
