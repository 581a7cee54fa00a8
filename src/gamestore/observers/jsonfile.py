# Copyright 2026 Kezie Iwueke
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations
import json
from pathlib import Path
from .events import BaseNotification

class JsonFileSubscriber:
    """Appends each notification as one JSON line."""

    def __init__(self, path: str | Path):
        self.path = Path(path).expanduser()
        self.path.parent.mkdir(parents=True, exist_ok=True)

    def handle(self, notification: BaseNotification) -> None:
        with self.path.open("a", encoding="utf-8") as f:
            json.dump({"type": notification.__class__.__name__, **notification.dict()}, f)
            f.write("\n")

    def __repr__(self) -> str:
        return f"JsonFileSubscriber(path={str(self.path)!r})"
