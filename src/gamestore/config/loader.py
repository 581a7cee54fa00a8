# Copyright 2026 Kezie Iwueke
# SPDX-License-Identifier: Apache-2.0

# src/gamestore/config/loader.py

import logging
import os
import yaml
from pathlib import Path
from pydantic import ValidationError

from .models import StoreConfig
from ..errors import ConfigError

log = logging.getLogger("gamestore")


def load_config(path: str | Path) -> StoreConfig:
    path = Path(path)
    try:
        raw = path.read_text()
    except OSError as e:
        raise ConfigError(f"Cannot read config {path}: {e}") from e

    # expand environment variables like ${HOME}
    expanded = os.path.expandvars(raw)

    try:
        data = yaml.safe_load(expanded)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"Config {path} must be a mapping, got {type(data).__name__}")

    try:
        cfg = StoreConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid config {path}:\n{e}") from e

    log.debug(f"Loaded config {path}: store={cfg.store} subscribers={len(cfg.subscribers)}")
    return cfg
