"""Logging configuration for the rangemath package.

The library itself never installs handlers. Applications that want to see
the package's log records can build a :class:`LoggingConfig` (directly, from
a YAML file, or from environment variables) and pass it to
:func:`configure_logging`.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

ENV_PREFIX = "RANGEMATH_"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class LoggingConfig(BaseModel):
    """Configuration for package logging.

    Parameters
    ----------
    level : LogLevel
        Level applied to the ``rangemath`` logger.
    format : str
        Format string for the stream handler.

    Examples
    --------
    >>> config = LoggingConfig()
    >>> config.level
    'WARNING'
    >>> LoggingConfig(level="debug").level
    'DEBUG'
    """

    model_config = ConfigDict(extra="forbid")

    level: LogLevel = Field(default="WARNING", description="Logging level")
    format: str = Field(default=DEFAULT_FORMAT, description="Log record format")

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v: Any) -> Any:
        """Upper-case string levels before validation."""
        if isinstance(v, str):
            return v.strip().upper()
        return v

    @field_validator("format")
    @classmethod
    def validate_format(cls, v: str) -> str:
        """Validate format is non-empty.

        Raises
        ------
        ValueError
            If format is empty or contains only whitespace.
        """
        if not v or not v.strip():
            raise ValueError("format must be non-empty")
        return v


def load_yaml_file(path: Path | str) -> dict[str, Any]:
    """Load a YAML mapping from disk.

    Parameters
    ----------
    path : Path | str
        Path to the YAML file.

    Returns
    -------
    dict[str, Any]
        Parsed mapping (empty for an empty file).

    Raises
    ------
    FileNotFoundError
        If the file does not exist.
    ValueError
        If the document is not a mapping.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    with open(path) as f:
        data = yaml.safe_load(f)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must contain a mapping")
    return data


def load_from_env(environ: dict[str, str] | None = None) -> dict[str, str]:
    """Collect logging overrides from ``RANGEMATH_LOG_*`` variables."""
    environ = os.environ if environ is None else environ
    overrides: dict[str, str] = {}
    for key in ("level", "format"):
        value = environ.get(f"{ENV_PREFIX}LOG_{key.upper()}")
        if value:
            overrides[key] = value
    return overrides


def load_config(
    path: Path | str | None = None, environ: dict[str, str] | None = None
) -> LoggingConfig:
    """Build a logging configuration from YAML and the environment.

    Values from the ``logging`` section of the YAML file are applied first,
    then environment overrides.

    Parameters
    ----------
    path : Path | str | None
        Optional YAML file with a top-level ``logging`` section.
    environ : dict[str, str] | None
        Environment mapping (defaults to ``os.environ``).

    Returns
    -------
    LoggingConfig
        The merged configuration.

    Raises
    ------
    pydantic.ValidationError
        If the merged values are invalid.
    """
    values: dict[str, Any] = {}
    if path is not None:
        values.update(load_yaml_file(path).get("logging") or {})
    values.update(load_from_env(environ))
    return LoggingConfig.model_validate(values)


def configure_logging(config: LoggingConfig | None = None) -> logging.Logger:
    """Apply a logging configuration to the package logger.

    Replaces any handler installed by a previous call, so repeated calls
    do not duplicate output.

    Parameters
    ----------
    config : LoggingConfig | None
        Configuration to apply (defaults to ``LoggingConfig()``).

    Returns
    -------
    logging.Logger
        The configured ``rangemath`` logger.
    """
    config = config or LoggingConfig()
    package_logger = logging.getLogger("rangemath")
    package_logger.setLevel(getattr(logging, config.level))

    for handler in list(package_logger.handlers):
        if getattr(handler, "_rangemath_handler", False):
            package_logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(config.format))
    handler._rangemath_handler = True  # type: ignore[attr-defined]
    package_logger.addHandler(handler)
    return package_logger
