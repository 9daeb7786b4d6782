"""Subscription value type."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass

from .errors import InvalidArgumentError


def _check_text(name: str, value: object) -> None:
    if not isinstance(value, str) or not value:
        raise InvalidArgumentError(f"{name} must be a non-empty string")
    # lone surrogates cannot be written to the UTF-8 backing file
    try:
        value.encode("utf-8")
    except UnicodeEncodeError:
        raise InvalidArgumentError(f"{name} must be valid Unicode text") from None


@dataclass(frozen=True, slots=True)
class Subscription:
    """Immutable record of a customer's recurring order for a product.

    Conventions:
      - `customer_id` is an opaque customer identifier (e.g. "amzn1.account.…").
      - `asin` is an opaque product identifier (e.g. "B01BMDAVIY").
      - `frequency` is the positive delivery interval (e.g. in weeks).
      - `subscription_id` is assigned by the store on creation; None beforehand.
    """

    customer_id: str
    asin: str
    frequency: int
    subscription_id: str | None = None

    def __post_init__(self) -> None:
        _check_text("customer_id", self.customer_id)
        _check_text("asin", self.asin)
        # bool is an int subclass; True is not a frequency
        if isinstance(self.frequency, bool) or not isinstance(self.frequency, int):
            raise InvalidArgumentError("frequency must be an integer")
        if self.frequency < 1:
            raise InvalidArgumentError("frequency must be a positive integer")
        if self.subscription_id is not None:
            _check_text("subscription_id", self.subscription_id)

    def with_id(self, subscription_id: str) -> Subscription:
        """Return a copy of this subscription carrying `subscription_id`."""
        return dataclasses.replace(self, subscription_id=subscription_id)
