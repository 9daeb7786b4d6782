"""SUBSCRIBEANDSAVE subscription commands.

Thin wrappers over `SubscriptionFileStorage`: each command builds a store for
the configured file, performs one operation, and prints the resulting
record(s) as JSON on **stdout**. Human-oriented notices go to **stderr**.

Exit codes
- ``0`` success.
- ``1`` invalid input, unknown id, a malformed subscriptions file, or no
  unused id could be generated.
- ``74`` the subscriptions file could not be read or written (``EX_IOERR``).
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path

import click

from subscribeandsave.adapters.id_generators import build_id_generator
from subscribeandsave.adapters.subscription_storage import SubscriptionFileStorage
from subscribeandsave.interfaces.errors import SubscriptionError
from subscribeandsave.interfaces.subscription import Subscription

from .helpers import error, success, warn

logger = logging.getLogger(__name__)

EXIT_INVALID = 1
EXIT_IO_ERROR = 74


@dataclass(frozen=True, slots=True)
class StorageSettings:
    """Storage options collected by the top-level command."""

    path: Path
    id_generator: str

    def open(self) -> SubscriptionFileStorage:
        """Build a file store for these settings."""
        return SubscriptionFileStorage(self.path, build_id_generator(self.id_generator))


def subscription_to_dict(subscription: Subscription) -> dict[str, object]:
    """Return the JSON-ready representation of a subscription."""
    return {
        "id": subscription.subscription_id,
        "customer_id": subscription.customer_id,
        "asin": subscription.asin,
        "frequency": subscription.frequency,
    }


def _echo_json(payload: object) -> None:
    click.echo(json.dumps(payload, indent=2))


@contextmanager
def _reported_errors() -> Iterator[None]:
    """Translate store failures into a red stderr line and an exit code."""
    try:
        yield
    except SubscriptionError as e:
        logger.debug("Subscription command failed", exc_info=True)
        error(str(e))
        raise click.exceptions.Exit(EXIT_INVALID) from e
    except OSError as e:
        logger.debug("Subscriptions file unavailable", exc_info=True)
        error(f"Cannot access subscriptions file: {e}")
        raise click.exceptions.Exit(EXIT_IO_ERROR) from e


pass_settings = click.make_pass_decorator(StorageSettings)


@click.command()
@click.option("--customer-id", required=True, help="Customer identifier.")
@click.option("--asin", required=True, help="Product ASIN.")
@click.option(
    "--frequency",
    type=click.IntRange(min=1),
    required=True,
    help="Delivery frequency (positive integer).",
)
@pass_settings
def create(settings: StorageSettings, customer_id: str, asin: str, frequency: int) -> None:
    """Create a new subscription and print it."""
    with _reported_errors():
        storage = settings.open()
        created = storage.create_subscription(
            Subscription(customer_id=customer_id, asin=asin, frequency=frequency)
        )
    success(f"Created subscription {created.subscription_id}.")
    _echo_json(subscription_to_dict(created))


@click.command()
@click.argument("subscription_id")
@pass_settings
def get(settings: StorageSettings, subscription_id: str) -> None:
    """Print the subscription with SUBSCRIPTION_ID."""
    with _reported_errors():
        subscription = settings.open().get_subscription_by_id(subscription_id)
    _echo_json(subscription_to_dict(subscription))


@click.command()
@click.argument("subscription_id")
@click.option("--customer-id", default=None, help="New customer identifier.")
@click.option("--asin", default=None, help="New product ASIN.")
@click.option(
    "--frequency",
    type=click.IntRange(min=1),
    default=None,
    help="New delivery frequency (positive integer).",
)
@pass_settings
def update(
    settings: StorageSettings,
    subscription_id: str,
    customer_id: str | None,
    asin: str | None,
    frequency: int | None,
) -> None:
    """Change fields of the subscription with SUBSCRIPTION_ID.

    Fields that are not given keep their stored values.
    """
    if customer_id is None and asin is None and frequency is None:
        warn("Nothing to update; pass --customer-id, --asin or --frequency.")
    with _reported_errors():
        storage = settings.open()
        current = storage.get_subscription_by_id(subscription_id)
        updated = storage.update_subscription(
            Subscription(
                subscription_id=current.subscription_id,
                customer_id=current.customer_id if customer_id is None else customer_id,
                asin=current.asin if asin is None else asin,
                frequency=current.frequency if frequency is None else frequency,
            )
        )
    success(f"Updated subscription {updated.subscription_id}.")
    _echo_json(subscription_to_dict(updated))


@click.command(name="list")
@pass_settings
def list_(settings: StorageSettings) -> None:
    """Print every stored subscription as a JSON array."""
    with _reported_errors():
        subscriptions = settings.open().list_subscriptions()
    if not subscriptions:
        warn(f"No subscriptions stored in {settings.path}.")
    _echo_json([subscription_to_dict(s) for s in subscriptions])


COMMANDS = (create, get, update, list_)
