# Copyright 2026 Kezie Iwueke
# SPDX-License-Identifier: Apache-2.0

# src/gamestore/observers/discount.py
from __future__ import annotations
from typing import Callable, Optional
from .events import DiscountNotification

DiscountListener = Callable[[DiscountNotification], None]


def _noop(notification: DiscountNotification) -> None:
    pass


class DiscountSubscriber:
    """
    Forwards every discount notification to a listener callback.

    Listener errors are not caught; they reach whoever called handle().
    """

    def __init__(self, listener: Optional[DiscountListener] = None):
        self._listener: DiscountListener = listener if listener is not None else _noop

    @property
    def listener(self) -> DiscountListener:
        return self._listener

    def handle(self, notification: DiscountNotification) -> None:
        self._listener(notification)

    def __repr__(self) -> str:
        name = getattr(self._listener, "__qualname__", repr(self._listener))
        return f"DiscountSubscriber(listener={name})"
