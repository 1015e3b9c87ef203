from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from enum import Enum
from pathlib import Path
from typing import Any

import yaml
from dotenv import dotenv_values
from pydantic import Field
from pydantic import ValidationError as PydanticValidationError

from jsonmend.core.common.exceptions import ConfigurationError
from jsonmend.core.config.parameter_resolution import (
    ParameterResolution,
    ParameterSource,
    flatten_config,
)
from jsonmend.core.domain.model_bases import DomainModel

logger = logging.getLogger(__name__)

ENV_PREFIX = "JSONMEND_"


class LogLevel(str, Enum):
    """Log levels for configuration."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class RepairConfig(DomainModel):
    """Behaviour switches for the repair pipeline."""

    rules_literal_aware: bool = True
    """Apply correction rules only outside double-quoted literals."""

    balance_literal_aware: bool = False
    """Ignore brackets inside double-quoted literals while balancing.

    Off by default: the balancer counts every bracket character, which can
    misbalance text whose string values contain brackets.
    """

    wrap_top_level_sequence: bool = True
    """Wrap comma-separated top-level values in an array after balancing."""


class LoggingConfig(DomainModel):
    """Logging configuration."""

    level: LogLevel = LogLevel.WARNING
    log_file: str | None = None


class AppConfig(DomainModel):
    """Top-level configuration."""

    repair: RepairConfig = Field(default_factory=RepairConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def from_env(
        cls,
        environ: Mapping[str, str] | None = None,
        *,
        resolution: ParameterResolution | None = None,
    ) -> AppConfig:
        """Build a configuration from ``JSONMEND_*`` environment variables."""
        env = os.environ if environ is None else environ
        data: dict[str, Any] = {"repair": {}, "logging": {}}

        for field in RepairConfig.model_fields:
            name = f"{ENV_PREFIX}{field.upper()}"
            if name in env:
                value = _str_to_bool(env[name], name)
                data["repair"][field] = value
                if resolution is not None:
                    resolution.record(
                        f"repair.{field}", value, ParameterSource.ENVIRONMENT, origin=name
                    )

        for field, name in (
            ("level", f"{ENV_PREFIX}LOG_LEVEL"),
            ("log_file", f"{ENV_PREFIX}LOG_FILE"),
        ):
            value = env.get(name)
            if value:
                data["logging"][field] = value.upper() if field == "level" else value
                if resolution is not None:
                    resolution.record(
                        f"logging.{field}",
                        data["logging"][field],
                        ParameterSource.ENVIRONMENT,
                        origin=name,
                    )

        return _validate(data, origin="environment")


def _str_to_bool(value: str, name: str) -> bool:
    lowered = value.strip().lower()
    if lowered in ("true", "1", "yes", "on"):
        return True
    if lowered in ("false", "0", "no", "off"):
        return False
    raise ConfigurationError(
        message=f"Invalid boolean value for {name}: {value!r}",
        details={"variable": name, "value": value},
    )


def _validate(data: dict[str, Any], origin: str) -> AppConfig:
    try:
        return AppConfig.model_validate(data)
    except PydanticValidationError as e:
        raise ConfigurationError(
            message=f"Invalid configuration from {origin}: {e.error_count()} error(s)",
            details={"origin": origin, "errors": e.errors(include_url=False)},
        ) from e


def _merge_dicts(d1: dict[str, Any], d2: dict[str, Any]) -> dict[str, Any]:
    for k, v in d2.items():
        if k in d1 and isinstance(d1[k], dict) and isinstance(v, dict):
            _merge_dicts(d1[k], v)
        else:
            d1[k] = v
    return d1


def _set_by_path(target: dict[str, Any], path: str, value: Any) -> None:
    parts = path.split(".")
    current: dict[str, Any] = target
    for key in parts[:-1]:
        current = current.setdefault(key, {})
    current[parts[-1]] = value


def _read_config_file(path: Path) -> dict[str, Any]:
    if path.suffix.lower() not in (".yaml", ".yml"):
        raise ConfigurationError(
            message=f"Unsupported configuration file format: {path.suffix}. Use YAML (.yaml/.yml).",
            details={"path": str(path)},
        )
    try:
        with open(path, encoding="utf-8") as f:
            file_config = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise ConfigurationError(
            message=f"Error loading configuration file {path}: {e}",
            details={"path": str(path)},
        ) from e
    if not isinstance(file_config, dict):
        raise ConfigurationError(
            message=f"Configuration file {path} must contain a mapping",
            details={"path": str(path), "type": type(file_config).__name__},
        )
    return file_config


def load_config(
    config_path: str | Path | None = None,
    *,
    resolution: ParameterResolution | None = None,
    environ: Mapping[str, str] | None = None,
    dotenv_path: str | Path | None = None,
) -> AppConfig:
    """
    Load configuration from defaults, a YAML file and the environment.

    Later sources win: defaults, then the YAML file, then ``.env`` values,
    then real environment variables.

    Args:
        config_path: Optional path to a YAML configuration file
        resolution: Optional tracker recording where each value came from
        environ: Environment mapping; defaults to ``os.environ``
        dotenv_path: Optional ``.env`` file merged beneath ``environ``;
            skipped when it does not exist

    Returns:
        AppConfig instance
    """
    res = resolution or ParameterResolution()
    config_data: dict[str, Any] = AppConfig().model_dump(mode="json")

    if config_path:
        path = Path(config_path)
        if not path.exists():
            logger.warning("Configuration file not found: %s", config_path)
        else:
            file_config = _read_config_file(path)
            _merge_dicts(config_data, file_config)
            for name, value in flatten_config(file_config).items():
                res.record(name, value, ParameterSource.CONFIG_FILE, origin=str(path))

    env: dict[str, str] = {}
    if dotenv_path is not None and Path(dotenv_path).is_file():
        logger.debug("Reading environment file %s", dotenv_path)
        env.update(
            {k: v for k, v in dotenv_values(dotenv_path).items() if v is not None}
        )
    env.update(os.environ if environ is None else environ)

    env_config = AppConfig.from_env(environ=env, resolution=res)
    env_dump = env_config.model_dump(mode="json")
    for name in res.latest_by_source(ParameterSource.ENVIRONMENT):
        section, key = name.split(".", 1)
        _set_by_path(config_data, name, env_dump[section][key])

    config = _validate(config_data, origin=str(config_path or "defaults"))
    res.log(logger, config)
    return config
