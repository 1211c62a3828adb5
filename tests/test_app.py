"""Command line entry point."""
from __future__ import annotations

import logging

from actionflow.app import main


def test_derive(capsys):
    assert main(["derive", "loadUserProfile", "fetch-user data"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == ["loadUserProfile -> LOAD_USER_PROFILE", "fetch-user data -> FETCH_USER_DATA"]


def test_types(tmp_path, capsys):
    path = tmp_path / "actions.yaml"
    path.write_text("creators:\n  users:\n    display_name: Users\n    types:\n      load: LOAD_USER\n  empty: {}\n")
    assert main(["types", "--config", str(path)]) == 0
    out = capsys.readouterr().out
    assert "Users:\n  load -> LOAD_USER\n" in out
    assert "empty:\n  (no declared types)\n" in out


def test_types_without_creators(tmp_path):
    path = tmp_path / "actions.yaml"
    path.write_text("version: 1\n")
    assert main(["types", "--config", str(path)]) == 1


def test_missing_config_file(tmp_path):
    assert main(["types", "--config", str(tmp_path / "nope.yaml")]) == 2


def test_invalid_config_file(tmp_path):
    path = tmp_path / "actions.yaml"
    path.write_text("version: 9\n")
    assert main(["types", "--config", str(path)]) == 2


def _actionflow_level(path, argv):
    logger = logging.getLogger("actionflow")
    previous = logger.level
    try:
        assert main(argv + ["types", "--config", str(path)]) == 0
        return logger.level
    finally:
        logger.setLevel(previous)


def test_types_applies_config_log_level(tmp_path):
    path = tmp_path / "actions.yaml"
    path.write_text("logging:\n  level: debug\ncreators:\n  users:\n    types:\n      load: LOAD_USER\n")
    assert _actionflow_level(path, []) == logging.DEBUG


def test_log_level_flag_overrides_config(tmp_path):
    path = tmp_path / "actions.yaml"
    path.write_text("logging:\n  level: debug\ncreators:\n  users:\n    types:\n      load: LOAD_USER\n")
    logging.getLogger("actionflow").setLevel(logging.NOTSET)
    assert _actionflow_level(path, ["--log-level", "warning"]) == logging.NOTSET
