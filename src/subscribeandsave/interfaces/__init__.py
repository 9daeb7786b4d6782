"""Interfaces (application boundary) for SUBSCRIBEANDSAVE.

Defines framework-free contracts: the `Subscription` value type, the
`SubscriptionStorage` and `IdGenerator` ABCs, and the error taxonomy shared by
adapters and entrypoints.

Dependency rule: this package is independent. Do not import from any other
`subscribeandsave.*` modules.
"""

from .errors import (
    IdCollisionError,
    InvalidArgumentError,
    MalformedRecordError,
    SubscriptionError,
    SubscriptionNotFoundError,
)
from .id_generator import IdGenerator
from .subscription import Subscription
from .subscription_storage import SubscriptionStorage

__all__ = [
    "IdCollisionError",
    "IdGenerator",
    "InvalidArgumentError",
    "MalformedRecordError",
    "Subscription",
    "SubscriptionError",
    "SubscriptionNotFoundError",
    "SubscriptionStorage",
]
