# Copyright 2026 Kezie Iwueke
# SPDX-License-Identifier: Apache-2.0

# src/gamestore/errors.py
class GameStoreError(RuntimeError):
    """Base class for gamestore failures."""


class SubscriberNotFoundError(GameStoreError, LookupError):
    """Raised when unsubscribing a subscriber that was never registered."""


class InvalidNotificationError(GameStoreError, ValueError):
    """Raised when a notification cannot be built from the given values."""


class ConfigError(GameStoreError):
    """Raised when the store configuration is missing or invalid."""
