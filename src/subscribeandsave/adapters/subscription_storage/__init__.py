"""Subscription storage backends."""

from .file import SubscriptionFileStorage
from .memory import InMemorySubscriptionStorage

__all__ = ["InMemorySubscriptionStorage", "SubscriptionFileStorage"]
