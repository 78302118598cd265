# Copyright 2026 BeepBoop Shell Contributors
# SPDX-License-Identifier: Apache-2.0

"""Configuration for the BeepBoop shell."""

from beepboop.config.settings import CONFIG_FILE_NAME, ConfigError, ShellConfig, find_config, load_config

__all__ = [
    "CONFIG_FILE_NAME",
    "ConfigError",
    "ShellConfig",
    "find_config",
    "load_config",
]
