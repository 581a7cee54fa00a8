# Copyright 2026 Kezie Iwueke
# SPDX-License-Identifier: Apache-2.0

# src/gamestore/observers/factory.py
from __future__ import annotations

import logging
from typing import Any, Optional

from ..config.models import StoreConfig, SubscriberSpec
from .console import ConsoleSubscriber
from .dispatcher import GameStorePublisher
from .interface import GameStoreSubscriber
from .jsonfile import JsonFileSubscriber
from .logger import LoggerSubscriber


def build_subscriber(spec: SubscriberSpec, logger: logging.Logger) -> GameStoreSubscriber[Any]:
    if spec.kind == "console":
        return ConsoleSubscriber()
    if spec.kind == "logger":
        return LoggerSubscriber(logger, level=logging.getLevelName(spec.level))
    return JsonFileSubscriber(spec.path)


def build_publisher(cfg: StoreConfig, logger: Optional[logging.Logger] = None) -> GameStorePublisher:
    logger = logger or logging.getLogger("gamestore")
    subscribers = [build_subscriber(s, logger) for s in cfg.subscribers]
    return GameStorePublisher(subscribers, isolate_errors=cfg.isolate_errors, logger=logger)
