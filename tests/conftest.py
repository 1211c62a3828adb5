# SPDX-License-Identifier: Apache-2.0
"""Shared fixtures for lifecycle tests."""
from __future__ import annotations

from typing import Any, List

import pytest

from actionflow import config
from actionflow.dispatcher import Dispatcher, reset_default
from actionflow.messages import ActionPayload


class CaptureSubscriber:
    """Subscriber used in tests to record every dispatched action."""

    def __init__(self):
        self.actions: List[ActionPayload] = []

    def __call__(self, action: ActionPayload) -> None:
        self.actions.append(action)

    @property
    def types(self) -> List[str]:
        return [action.type for action in self.actions]

    def of_type(self, action_type: str) -> List[ActionPayload]:
        return [action for action in self.actions if action.type == action_type]

    def data(self) -> List[ActionPayload]:
        return [action for action in self.actions if not action.internal]


@pytest.fixture(autouse=True)
def isolated_defaults():
    """Fresh default dispatcher and warning settings per test."""
    reset_default()
    missing_options = config.WARNINGS.missing_options
    yield
    config.WARNINGS.missing_options = missing_options
    reset_default()


@pytest.fixture
def dispatcher() -> Dispatcher:
    return Dispatcher(name="test")


@pytest.fixture
def capture(dispatcher: Dispatcher) -> CaptureSubscriber:
    subscriber = CaptureSubscriber()
    dispatcher.register(subscriber, name="capture")
    return subscriber


@pytest.fixture
def options(dispatcher: Dispatcher) -> dict[str, Any]:
    return {"dispatcher": dispatcher, "display_name": "TestActionCreators"}
