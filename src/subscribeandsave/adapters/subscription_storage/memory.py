"""In-memory SubscriptionStorage implementation for testing purposes."""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable

from subscribeandsave.adapters.id_generators import UUIDv4Generator
from subscribeandsave.interfaces.errors import (
    InvalidArgumentError,
    SubscriptionNotFoundError,
)
from subscribeandsave.interfaces.id_generator import IdGenerator
from subscribeandsave.interfaces.subscription import Subscription
from subscribeandsave.interfaces.subscription_storage import SubscriptionStorage

logger = logging.getLogger(__name__)


class InMemorySubscriptionStorage(SubscriptionStorage):
    """Non-durable store keyed by subscription id.

    Records are kept in insertion order; an update keeps the record's position.
    """

    def __init__(
        self,
        subscriptions: Iterable[Subscription] = (),
        id_generator: IdGenerator | None = None,
    ) -> None:
        self._id_generator = id_generator or UUIDv4Generator()
        self._lock = threading.Lock()
        self._records: dict[str, Subscription] = {}
        for subscription in subscriptions:
            subscription_id = self._require_id(subscription.subscription_id)
            self._records[subscription_id] = subscription

    def create_subscription(self, subscription: Subscription) -> Subscription:
        subscription = self._require_subscription(subscription)
        with self._lock:
            created = subscription.with_id(
                self._unused_id(self._id_generator, self._records)
            )
            self._records[created.subscription_id] = created
        logger.debug("Created subscription %s in memory", created.subscription_id)
        return created

    def get_subscription_by_id(self, subscription_id: str) -> Subscription:
        subscription_id = self._require_id(subscription_id)
        with self._lock:
            try:
                return self._records[subscription_id]
            except KeyError:
                raise SubscriptionNotFoundError(subscription_id) from None

    def update_subscription(self, subscription: Subscription) -> Subscription:
        subscription = self._require_subscription(subscription)
        subscription_id = self._require_id(subscription.subscription_id)
        with self._lock:
            if subscription_id not in self._records:
                raise InvalidArgumentError(
                    f"Subscription ({subscription_id}) does not exist"
                )
            self._records[subscription_id] = subscription
        logger.debug("Updated subscription %s in memory", subscription_id)
        return subscription

    def list_subscriptions(self) -> list[Subscription]:
        with self._lock:
            return list(self._records.values())
