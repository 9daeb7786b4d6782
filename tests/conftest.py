"""Global pytest fixtures and default marks for SUBSCRIBEANDSAVE tests."""

from pathlib import Path

import pytest

# pylint: disable=unused-argument

pytest_plugins = ["tests.fixtures.subscriptions"]

TESTS_ROOT = Path(__file__).parent.resolve()

# Every test below one of these directories gets the matching mark.
DIRECTORY_MARKS = {
    TESTS_ROOT / "unit": "unit",
    TESTS_ROOT / "contract": "contract",
    TESTS_ROOT / "integration": "integration",
    TESTS_ROOT / "functional": "functional",
}


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Add default directory marks (`unit`, `contract`, `integration`, ...)."""
    for item in items:
        parents = item.path.resolve().parents
        for root, marker_name in DIRECTORY_MARKS.items():
            if root in parents and not any(
                marker.name == marker_name for marker in item.iter_markers()
            ):
                item.add_marker(getattr(pytest.mark, marker_name))
