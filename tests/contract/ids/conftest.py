"""Fixtures for IdGenerator contract tests."""

from collections.abc import Iterable

import pytest

from subscribeandsave.adapters.id_generators import (
    ID_GENERATOR_NAMES,
    build_id_generator,
)
from subscribeandsave.interfaces.id_generator import IdGenerator


@pytest.fixture(params=ID_GENERATOR_NAMES)
def id_generator(request: pytest.FixtureRequest) -> Iterable[IdGenerator]:
    """Yield a brand-new IdGenerator for every configurable name."""
    yield build_id_generator(request.param)
