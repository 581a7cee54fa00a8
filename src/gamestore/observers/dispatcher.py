# Copyright 2026 Kezie Iwueke
# SPDX-License-Identifier: Apache-2.0

# src/gamestore/observers/dispatcher.py
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Iterable, List, Optional, Tuple

from .discount import DiscountListener, DiscountSubscriber
from .events import BaseNotification
from .interface import GameStoreSubscriber
from ..errors import SubscriberNotFoundError

log = logging.getLogger("gamestore")


@dataclass
class DispatchFailure:
    subscriber: GameStoreSubscriber[Any]
    error: BaseException


@dataclass
class DispatchReport:
    delivered: int = 0
    failures: List[DispatchFailure] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures

    def summary(self) -> str:
        return f"DELIVERED={self.delivered} FAILED={len(self.failures)}"


class GameStorePublisher:
    """
    Owns subscriber registration and dispatches notifications to them.

    By default the first subscriber failure propagates and stops dispatch.
    With isolate_errors=True failures are logged, recorded on the
    DispatchReport, and the remaining subscribers still get notified.
    """

    def __init__(
        self,
        subscribers: Optional[Iterable[GameStoreSubscriber[Any]]] = None,
        *,
        isolate_errors: bool = False,
        logger: Optional[logging.Logger] = None,
    ):
        self._subscribers: List[GameStoreSubscriber[Any]] = []
        self.isolate_errors = isolate_errors
        self.log = logger or log
        for sub in subscribers or []:
            self.subscribe(sub)

    # ---- registration ----
    def subscribe(self, subscriber: GameStoreSubscriber[Any]) -> GameStoreSubscriber[Any]:
        if not any(s is subscriber for s in self._subscribers):
            self._subscribers.append(subscriber)
            self.log.debug(f"Subscribed {subscriber!r}")
        return subscriber

    def subscribe_listener(self, listener: Optional[DiscountListener] = None) -> DiscountSubscriber:
        sub = DiscountSubscriber(listener)
        self.subscribe(sub)
        return sub

    def unsubscribe(self, subscriber: GameStoreSubscriber[Any]) -> None:
        for i, s in enumerate(self._subscribers):
            if s is subscriber:
                del self._subscribers[i]
                self.log.debug(f"Unsubscribed {subscriber!r}")
                return
        raise SubscriberNotFoundError(f"{subscriber!r} is not subscribed")

    @property
    def subscribers(self) -> Tuple[GameStoreSubscriber[Any], ...]:
        return tuple(self._subscribers)

    def __len__(self) -> int:
        return len(self._subscribers)

    def __contains__(self, subscriber: object) -> bool:
        return any(s is subscriber for s in self._subscribers)

    # ---- dispatch ----
    def notify(self, notification: BaseNotification) -> DispatchReport:
        report = DispatchReport()
        # snapshot: subscribers may (un)subscribe while handling
        for sub in list(self._subscribers):
            try:
                sub.handle(notification)
            except Exception as exc:
                if not self.isolate_errors:
                    raise
                self.log.exception(
                    f"Subscriber {sub!r} failed on {notification.__class__.__name__}"
                )
                report.failures.append(DispatchFailure(subscriber=sub, error=exc))
            else:
                report.delivered += 1
        self.log.debug(f"{notification.__class__.__name__} dispatched: {report.summary()}")
        return report
