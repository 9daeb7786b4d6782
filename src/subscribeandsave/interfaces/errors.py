"""Errors raised by subscription storage backends.

Bad input (`InvalidArgumentError`) and absent records
(`SubscriptionNotFoundError`) are kept distinct from I/O failures, which
propagate as the underlying `OSError`.
"""

from __future__ import annotations

import os


class SubscriptionError(Exception):
    """Base class for all subscription storage errors."""


class InvalidArgumentError(SubscriptionError, ValueError):
    """Raised when a caller passes an unusable subscription or id."""


class SubscriptionNotFoundError(SubscriptionError, LookupError):
    """Raised when no stored subscription has the requested id."""

    def __init__(self, subscription_id: str) -> None:
        super().__init__(f"Subscription ({subscription_id}) not found")
        self.subscription_id = subscription_id


class MalformedRecordError(SubscriptionError):
    """Raised when a row of the backing file cannot be parsed."""

    def __init__(
        self, path: str | os.PathLike[str], line_number: int, reason: str
    ) -> None:
        super().__init__(f"{os.fspath(path)}:{line_number}: {reason}")
        self.path = path
        self.line_number = line_number
        self.reason = reason


class IdCollisionError(SubscriptionError):
    """Raised when the id generator keeps returning ids already in use."""

    def __init__(self, attempts: int) -> None:
        super().__init__(f"No unused subscription id after {attempts} attempts")
        self.attempts = attempts
