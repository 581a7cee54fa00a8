# Copyright 2026 Kezie Iwueke
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations
import logging
from .events import BaseNotification


class LoggerSubscriber:
    def __init__(self, logger: logging.Logger, level: int = logging.INFO):
        self.logger = logger
        self.level = level

    def handle(self, notification: BaseNotification) -> None:
        d = notification.dict()
        ntype = notification.__class__.__name__
        msg = ", ".join(f"{k}={v}" for k, v in d.items() if k not in ("ts",))

        self.logger.log(self.level, f"[NOTIFICATION] {ntype}: {msg}")
