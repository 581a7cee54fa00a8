# Copyright 2026 Kezie Iwueke
# SPDX-License-Identifier: Apache-2.0

# src/gamestore/observers/events.py

from __future__ import annotations
from dataclasses import dataclass, asdict
from typing import Dict, Any
from datetime import datetime, timezone
import math

from ..errors import InvalidNotificationError


# ---------------------------------------------------------------------
# Base context and helper
# ---------------------------------------------------------------------
@dataclass(frozen=True)
class BaseNotification:
    ts: str      # ISO timestamp
    store: str   # store front that published the notification

    def dict(self) -> Dict[str, Any]:
        return asdict(self)


def new_ctx(store: str) -> Dict[str, Any]:
    return {
        "ts": datetime.now(timezone.utc).isoformat(timespec="seconds").replace("+00:00", "Z"),
        "store": store,
    }


# ---------------------------------------------------------------------
# Discounts
# ---------------------------------------------------------------------
@dataclass(frozen=True)
class DiscountNotification(BaseNotification):
    game_id: str
    title: str
    original_price: float
    discounted_price: float
    currency: str = "USD"

    def dict(self) -> Dict[str, Any]:
        return {**asdict(self), "percent_off": self.percent_off}

    @property
    def percent_off(self) -> float:
        if not self.original_price:
            return 0.0
        saved = self.original_price - self.discounted_price
        return round(saved / self.original_price * 100, 2)


def discount(
    store: str,
    game_id: str,
    title: str,
    original_price: float,
    discounted_price: float,
    currency: str = "USD",
) -> DiscountNotification:
    """
    Build a DiscountNotification stamped with the current time.

    Raises InvalidNotificationError for non-finite or negative prices, or a
    "discount" that costs more than the original price.
    """
    if not (math.isfinite(original_price) and math.isfinite(discounted_price)):
        raise InvalidNotificationError(
            f"Prices for '{game_id}' must be finite "
            f"(original={original_price}, discounted={discounted_price})"
        )
    if original_price < 0 or discounted_price < 0:
        raise InvalidNotificationError(
            f"Prices for '{game_id}' must be non-negative "
            f"(original={original_price}, discounted={discounted_price})"
        )
    if discounted_price > original_price:
        raise InvalidNotificationError(
            f"Discounted price {discounted_price} for '{game_id}' exceeds "
            f"original price {original_price}"
        )
    return DiscountNotification(
        game_id=game_id,
        title=title,
        original_price=float(original_price),
        discounted_price=float(discounted_price),
        currency=currency,
        **new_ctx(store),
    )
