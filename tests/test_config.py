"""YAML configuration loading."""
from __future__ import annotations

import pytest

from actionflow import ActionCreators, ConfigError
from actionflow import config
from actionflow.config import apply_warnings, load_config

SAMPLE = """
version: 1
logging:
  level: debug
warnings:
  missing_options: false
creators:
  users:
    display_name: UserActionCreators
    types:
      load_user: LOAD_USER
      save_user: SAVE_USER
  session:
"""


def _write(tmp_path, text):
    path = tmp_path / "actions.yaml"
    path.write_text(text)
    return path


def test_load_config(tmp_path):
    cfg = load_config(_write(tmp_path, SAMPLE))
    assert cfg.version == 1
    assert cfg.log_level == "DEBUG"
    assert cfg.warnings.missing_options is False
    assert cfg.creators["users"].display_name == "UserActionCreators"
    assert cfg.creators["users"].types == {"load_user": "LOAD_USER", "save_user": "SAVE_USER"}
    assert cfg.creators["session"].types == {}


def test_empty_file_uses_defaults(tmp_path):
    cfg = load_config(_write(tmp_path, ""))
    assert cfg.creators == {}
    assert cfg.warnings.missing_options is True
    assert cfg.log_level == "INFO"


@pytest.mark.parametrize(
    "text",
    [
        "version: 2\n",
        "- a\n- b\n",
        "creators: [1, 2]\n",
        "creators:\n  users: 3\n",
        "creators:\n  users:\n    types: [LOAD]\n",
        "warnings: true\n",
    ],
)
def test_invalid_config(tmp_path, text):
    with pytest.raises(ConfigError):
        load_config(_write(tmp_path, text))


def test_creator_options_from_config(tmp_path, dispatcher, capture):
    cfg = load_config(_write(tmp_path, SAMPLE))

    class UserActionCreators(ActionCreators):
        pass

    creators = UserActionCreators(cfg.creators["users"].to_options(dispatcher))
    assert creators.display_name == "UserActionCreators"
    creators.load_user(7)
    assert capture.data()[0].type == "LOAD_USER"
    assert capture.data()[0].arguments == (7,)

    session = cfg.creators["session"].to_options(dispatcher)
    assert session.display_name == "session"


def test_apply_warnings(tmp_path):
    apply_warnings(load_config(_write(tmp_path, SAMPLE)))
    assert config.WARNINGS.missing_options is False
