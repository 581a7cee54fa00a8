# Copyright 2026 Kezie Iwueke
# SPDX-License-Identifier: Apache-2.0

# src/gamestore/observers/console.py
from __future__ import annotations
import sys
from typing import Optional, TextIO
from .events import BaseNotification


class ConsoleSubscriber:
    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream

    def handle(self, notification: BaseNotification) -> None:
        d = notification.dict()
        k = notification.__class__.__name__
        data = ", ".join(f"{x}={y}" for x, y in d.items() if x not in ("ts", "store"))
        print(f"[{d['ts']}] {k} store={d['store']} data={{{data}}}",
              file=self.stream if self.stream is not None else sys.stdout)
