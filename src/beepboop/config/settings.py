# Copyright 2026 BeepBoop Shell Contributors
# SPDX-License-Identifier: Apache-2.0

"""Shell configuration model and YAML loader."""

from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from beepboop.scanner.lexer import DEFAULT_OPERATORS
from beepboop.scanner.reader import INITIAL_STRING_SIZE

# ###############
# Public Interface
# ###############

CONFIG_FILE_NAME = ".beepboop.yaml"


class ConfigError(Exception):
    """Raised when a configuration file cannot be read or is invalid."""


class ShellConfig(BaseModel):
    """Settings for the scanner and the interactive loop.

    Attributes:
        prompt: Text printed before each line is read.
        initial_buffer_size: Starting capacity of the line reader's buffer.
        operators: Operator spellings the tokenizer splits out.
        color: Whether diagnostics are colored.
        farewell: Message printed when input ends, or None for silence.
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    prompt: str = "beepboop> "
    initial_buffer_size: int = Field(alias="initial-buffer-size", default=INITIAL_STRING_SIZE, ge=1)
    operators: list[str] = Field(default_factory=lambda: list(DEFAULT_OPERATORS))
    color: bool = True
    farewell: str | None = "Bye!"

    @field_validator("operators")
    @classmethod
    def check_operators(cls, value: list[str]) -> list[str]:
        for op in value:
            if not op:
                raise ValueError("operators must not be empty strings")
            if any(ch in _RESERVED_CHARS for ch in op):
                raise ValueError(f"operator {op!r} must not contain whitespace, quotes or backslashes")
        return value


def load_config(path: Path) -> ShellConfig:
    """Load and validate a shell configuration file.

    An empty file yields the default configuration.

    Args:
        path: Path to the YAML configuration file.

    Returns:
        A validated ShellConfig instance.

    Raises:
        ConfigError: If the file cannot be read, contains invalid YAML,
            or does not conform to the expected schema.
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise ConfigError(f"Config file not found: {path}") from None
    except OSError as exc:
        raise ConfigError(f"Cannot read config file '{path}': {exc}") from exc

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in config file '{path}': {exc}") from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"{path}: config must be a YAML mapping")

    try:
        return ShellConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid config file '{path}': {exc}") from exc


def find_config(directory: Path) -> ShellConfig:
    """Load ``.beepboop.yaml`` from *directory*, or return defaults if absent."""
    path = directory / CONFIG_FILE_NAME
    if not path.exists():
        return ShellConfig()
    return load_config(path)


# ################
# Implementation
# ################

_RESERVED_CHARS = ' \t"\\'
