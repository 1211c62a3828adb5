"""Configuration loader for action-creator declarations."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .errors import ConfigError

log = logging.getLogger(__name__)


@dataclass(slots=True)
class WarningSettings:
    missing_options: bool = True


WARNINGS = WarningSettings()


@dataclass(slots=True)
class CreatorConfig:
    name: str
    display_name: Optional[str] = None
    types: Dict[str, str] = field(default_factory=dict)

    def to_options(self, dispatcher: Any = None, context: Any = None):
        from .creators import CreatorOptions

        return CreatorOptions(
            dispatcher=dispatcher,
            types=dict(self.types),
            display_name=self.display_name or self.name,
            context=context,
        )


@dataclass(slots=True)
class ActionflowConfig:
    version: int
    warnings: WarningSettings
    creators: Dict[str, CreatorConfig]
    log_level: str = "INFO"


def _parse_warnings(data: Dict[str, Any]) -> WarningSettings:
    if not isinstance(data, dict):
        raise ConfigError("'warnings' must be a mapping")
    return WarningSettings(missing_options=bool(data.get("missing_options", True)))


def _parse_creators(items: Dict[str, Any]) -> Dict[str, CreatorConfig]:
    if not isinstance(items, dict):
        raise ConfigError("'creators' must be a mapping")
    creators: Dict[str, CreatorConfig] = {}
    for name, payload in items.items():
        payload = payload or {}
        if not isinstance(payload, dict):
            raise ConfigError(f"creator '{name}' must be a mapping")
        types = payload.get("types") or {}
        if not isinstance(types, dict):
            raise ConfigError(f"creator '{name}' types must be a mapping")
        creators[name] = CreatorConfig(
            name=name,
            display_name=payload.get("display_name"),
            types={str(k): str(v) for k, v in types.items()},
        )
    return creators


def load_config(path: str | Path) -> ActionflowConfig:
    raw = yaml.safe_load(Path(path).read_text()) or {}
    if not isinstance(raw, dict):
        raise ConfigError(f"{path}: top level must be a mapping")
    version = int(raw.get("version", 1))
    if version != 1:
        raise ConfigError(f"{path}: unsupported config version {version}")
    cfg = ActionflowConfig(
        version=version,
        warnings=_parse_warnings(raw.get("warnings", {})),
        creators=_parse_creators(raw.get("creators", {})),
        log_level=str((raw.get("logging") or {}).get("level", "INFO")).upper(),
    )
    log.debug("loaded %d creator declarations from %s", len(cfg.creators), path)
    return cfg


def apply_warnings(cfg: ActionflowConfig) -> None:
    WARNINGS.missing_options = cfg.warnings.missing_options
