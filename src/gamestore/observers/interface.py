# Copyright 2026 Kezie Iwueke
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations
from typing import Protocol, TypeVar, runtime_checkable
from .events import BaseNotification

N_contra = TypeVar("N_contra", bound=BaseNotification, contravariant=True)


@runtime_checkable
class GameStoreSubscriber(Protocol[N_contra]):
    def handle(self, notification: N_contra) -> None: ...
