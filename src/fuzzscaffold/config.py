"""Environment-driven settings for fuzzscaffold.

Settings are read from ``FUZZSCAFFOLD_*`` environment variables each time
``load_settings`` is called, so tests can redirect them with ``monkeypatch``.

Example:
    >>> load_settings({"FUZZSCAFFOLD_FUZZ_BIN": " /opt/cargo-fuzz "}).fuzz_bin
    '/opt/cargo-fuzz'
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path

from pydantic import BaseModel, ConfigDict, field_validator

ENV_PREFIX = "FUZZSCAFFOLD_"
SCRATCH_DIR_ENV = f"{ENV_PREFIX}SCRATCH_DIR"
FUZZ_BIN_ENV = f"{ENV_PREFIX}FUZZ_BIN"
LOG_LEVEL_ENV = f"{ENV_PREFIX}LOG_LEVEL"
NO_COLOR_ENV = f"{ENV_PREFIX}NO_COLOR"

DEFAULT_FUZZ_BIN = "cargo-fuzz"
DEFAULT_LOG_LEVEL = "info"


class ScaffoldSettings(BaseModel):
    """Runtime settings for project scaffolding.

    Attributes:
        scratch_dir: Explicit scratch area; derived from the interpreter
            location when unset.
        fuzz_bin: Executable invoked for the ``fuzz`` subcommand.
        log_level: Name of the minimum log level.
        no_color: Disable colored terminal output.

    Example:
        >>> ScaffoldSettings(scratch_dir="  ").scratch_dir is None
        True
    """

    model_config = ConfigDict(frozen=True)

    scratch_dir: Path | None = None
    fuzz_bin: str = DEFAULT_FUZZ_BIN
    log_level: str = DEFAULT_LOG_LEVEL
    no_color: bool = False

    @field_validator("scratch_dir", mode="before")
    @classmethod
    def normalize_scratch_dir(cls, value: object) -> object:
        if value is None:
            return None
        if isinstance(value, str):
            normalized = value.strip()
            return normalized or None
        return value

    @field_validator("fuzz_bin", mode="before")
    @classmethod
    def normalize_fuzz_bin(cls, value: object) -> object:
        if value is None:
            return DEFAULT_FUZZ_BIN
        if isinstance(value, str):
            normalized = value.strip()
            return normalized or DEFAULT_FUZZ_BIN
        return value

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value: object) -> object:
        if value is None:
            return DEFAULT_LOG_LEVEL
        if isinstance(value, str):
            normalized = value.strip().lower()
            return normalized or DEFAULT_LOG_LEVEL
        return value

    @field_validator("no_color", mode="before")
    @classmethod
    def normalize_no_color(cls, value: object) -> object:
        if value is None:
            return False
        if isinstance(value, str):
            return bool(value.strip())
        return value


def load_settings(environ: Mapping[str, str] | None = None) -> ScaffoldSettings:
    """Build settings from environment variables.

    Args:
        environ: Mapping to read from; defaults to ``os.environ``.

    Returns:
        Validated ``ScaffoldSettings``.
    """
    source = os.environ if environ is None else environ
    no_color = source.get(NO_COLOR_ENV) or source.get("NO_COLOR")
    return ScaffoldSettings.model_validate(
        {
            "scratch_dir": source.get(SCRATCH_DIR_ENV),
            "fuzz_bin": source.get(FUZZ_BIN_ENV),
            "log_level": source.get(LOG_LEVEL_ENV),
            "no_color": no_color,
        }
    )
