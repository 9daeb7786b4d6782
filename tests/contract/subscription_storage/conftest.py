"""Fixtures for SubscriptionStorage contract tests.

Provided fixtures
-----------------
- **storage**: Parametrized backend factory returning a **fresh** store seeded
  with the baseline subscriptions. Supports `"file"` (CSV on `tmp_path`) and
  `"memory"`. To exercise another backend, add its key to `params` and branch
  in the fixture body.
- **storage_with_ids**: Same backends, but a factory taking the `IdGenerator`
  the seeded store should use.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING

import pytest

from subscribeandsave.adapters.subscription_storage import (
    InMemorySubscriptionStorage,
    SubscriptionFileStorage,
)
from tests.fixtures.subscriptions import BASELINE_SUBSCRIPTIONS, restore_subscriptions

if TYPE_CHECKING:
    from pathlib import Path

    from subscribeandsave.interfaces.id_generator import IdGenerator
    from subscribeandsave.interfaces.subscription_storage import SubscriptionStorage


@pytest.fixture(params=["file", "memory"])
def storage(
    request: pytest.FixtureRequest, tmp_path: Path
) -> Iterable[SubscriptionStorage]:
    """Yield a freshly seeded store for the requested backend."""

    match request.param:
        case "file":
            yield SubscriptionFileStorage(
                restore_subscriptions(tmp_path / "subscriptions.csv")
            )
        case "memory":
            yield InMemorySubscriptionStorage(BASELINE_SUBSCRIPTIONS)
        case _:
            raise ValueError(f"unknown storage type: {request.param}")


@pytest.fixture(params=["file", "memory"])
def storage_with_ids(
    request: pytest.FixtureRequest, tmp_path: Path
) -> Callable[[IdGenerator], SubscriptionStorage]:
    """Factory for a seeded store that draws ids from the given generator."""

    def make(id_generator: IdGenerator) -> SubscriptionStorage:
        match request.param:
            case "file":
                return SubscriptionFileStorage(
                    restore_subscriptions(tmp_path / "subscriptions.csv"),
                    id_generator,
                )
            case "memory":
                return InMemorySubscriptionStorage(BASELINE_SUBSCRIPTIONS, id_generator)
            case _:
                raise ValueError(f"unknown storage type: {request.param}")

    return make
