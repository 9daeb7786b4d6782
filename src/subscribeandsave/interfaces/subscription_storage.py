"""Subscription storage interface.

This module defines the backend-agnostic contract for persisting
`Subscription` records. Backends assign ids on creation, serve lookups by id,
and replace the mutable fields of an existing record on update. There is no
delete operation.

Errors
------
- `InvalidArgumentError`: unusable input (None record, missing id on update,
  unknown id on update).
- `SubscriptionNotFoundError`: `get_subscription_by_id` found no match.
- `IdCollisionError`: the id generator produced no unused id on create.
- `OSError`: the backing storage could not be read or written. Never retried.
"""

from __future__ import annotations

import abc
from typing import TYPE_CHECKING

from .errors import IdCollisionError, InvalidArgumentError

if TYPE_CHECKING:
    from collections.abc import Collection

    from .id_generator import IdGenerator
    from .subscription import Subscription

# Extra draws allowed beyond the number of ids already taken.
ID_RETRY_MARGIN = 16


class SubscriptionStorage(abc.ABC):
    """Abstract base class for subscription record stores."""

    # --- Core Operations ---

    @abc.abstractmethod
    def create_subscription(self, subscription: Subscription) -> Subscription:
        """Persist a new subscription under a freshly generated id.

        Any `subscription_id` already set on the input is ignored.

        Args:
            subscription: The record to store.

        Returns:
            Subscription: The stored record, including its assigned id.

        Raises:
            InvalidArgumentError: If `subscription` is None.
            IdCollisionError: If no unused id could be generated.
        """

    @abc.abstractmethod
    def get_subscription_by_id(self, subscription_id: str) -> Subscription:
        """Return the stored subscription with the given id.

        Raises:
            InvalidArgumentError: If `subscription_id` is None.
            SubscriptionNotFoundError: If no stored record has that id.
        """

    @abc.abstractmethod
    def update_subscription(self, subscription: Subscription) -> Subscription:
        """Replace the customer id, ASIN and frequency of an existing record.

        The stored id is never changed.

        Args:
            subscription: The record carrying the id to update and its new values.

        Returns:
            Subscription: The record as persisted.

        Raises:
            InvalidArgumentError: If `subscription` is None, its id is None, or
                no stored record has that id.
        """

    # --- Convenience Methods ---

    @abc.abstractmethod
    def list_subscriptions(self) -> list[Subscription]:
        """Return every stored subscription in storage order."""

    # --- Shared validation ---

    @staticmethod
    def _require_subscription(subscription: Subscription | None) -> Subscription:
        if subscription is None:
            raise InvalidArgumentError("subscription must not be None")
        return subscription

    @staticmethod
    def _require_id(subscription_id: str | None) -> str:
        if subscription_id is None:
            raise InvalidArgumentError("subscription id must not be None")
        return subscription_id

    @staticmethod
    def _unused_id(id_generator: IdGenerator, taken: Collection[str]) -> str:
        """Draw ids until one is not in `taken`.

        Raises:
            IdCollisionError: If every attempt returned an id already in use.
        """
        attempts = len(taken) + ID_RETRY_MARGIN
        for _ in range(attempts):
            candidate = id_generator.new_id()
            if candidate not in taken:
                return candidate
        raise IdCollisionError(attempts)
