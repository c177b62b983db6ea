from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

import yaml

from mvcbus.logger import parse_level

DEFAULT_CONFIG_NAME = "mvcbus.yaml"


@dataclass(frozen=True)
class LoggingConfig:
    """Project logger settings."""
    level: str = "INFO"

    @property
    def level_value(self) -> int:
        return parse_level(self.level)


@dataclass(frozen=True)
class DispatchConfig:
    """View dispatch settings."""
    trace_notifications: bool = False


@dataclass(frozen=True)
class FacadeConfig:
    """
    Root configuration for a Facade.

    Every field has a default, so an empty YAML file (or no file at all)
    gives a working configuration.
    """
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    dispatch: DispatchConfig = field(default_factory=DispatchConfig)


def _read_yaml(path: Path) -> Dict[str, Any]:
    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"{path.name} must contain a YAML mapping at the root")
    return data


def _resolve_config_path(path: Optional[str]) -> Tuple[Path, bool]:
    """
    Resolve the config file location.

    Priority:
    1) explicit ``path`` argument
    2) MVCBUS_CONFIG env var
    3) ./mvcbus.yaml in the current working directory

    Returns
    -------
    tuple of (Path, bool)
        The resolved path and whether it was asked for explicitly.
    """
    if path:
        return Path(path).expanduser().resolve(), True

    env = os.getenv("MVCBUS_CONFIG")
    if env:
        return Path(env).expanduser().resolve(), True

    return Path(DEFAULT_CONFIG_NAME).resolve(), False


def load_facade_config(path: Optional[str] = None) -> FacadeConfig:
    """
    Load facade configuration from YAML and convert it into typed config objects.

    Parameters
    ----------
    path
        Explicit path to a YAML file. If None, uses default resolution.

    Returns
    -------
    FacadeConfig
        Parsed and validated configuration. Defaults are returned when no
        explicit path was given and ./mvcbus.yaml does not exist.

    Raises
    ------
    FileNotFoundError
        If an explicitly requested file (argument or MVCBUS_CONFIG) does not exist.
    ValueError
        If the root is not a mapping or a value is invalid.
    """
    cfg_path, explicit = _resolve_config_path(path)
    if not cfg_path.exists():
        if explicit:
            raise FileNotFoundError(f"Config not found: {cfg_path}")
        return FacadeConfig()

    raw = _read_yaml(cfg_path)

    # ---- logging ----
    lg = raw.get("logging") or {}
    level = str(lg.get("level", "INFO")).upper()
    parse_level(level)

    # ---- dispatch ----
    d = raw.get("dispatch") or {}
    dispatch = DispatchConfig(trace_notifications=bool(d.get("trace_notifications", False)))

    return FacadeConfig(logging=LoggingConfig(level=level), dispatch=dispatch)
