"""ID generators for subscription records."""

import threading
import uuid

from ulid import monotonic

from subscribeandsave.interfaces.id_generator import IdGenerator

# pylint: disable=too-few-public-methods

ID_GENERATOR_NAMES = ("uuid4", "ulid", "simple")


class UUIDv4Generator(IdGenerator):
    """UUIDv4 generator.

    The default for new subscriptions. UUIDv4 are randomly generated and carry
    no ordering. Uses Python's built-in `uuid` library.
    """

    def new_id(self) -> str:
        """Generate a new UUID."""
        return str(uuid.uuid4())


class ULIDGenerator(IdGenerator):
    """Thread-safe monotonic ULID generator.

    ULIDs are unique, lexicographically sortable identifiers made of a
    timestamp and a random component. Uses the `ulid-py` library.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()

    def new_id(self) -> str:
        """Generate a new ULID (serialized across threads)."""
        with self._lock:
            return str(monotonic.new())


class SimpleIdGenerator(IdGenerator):
    """Sequential, zero-padded ID generator.

    Note:
        Not suitable for production use; ids restart at 1 for every instance
        and will collide with records written by an earlier process.
    """

    def __init__(self, length: int = 26) -> None:
        self._counter = 0
        self._length = length
        self._lock = threading.Lock()

    def new_id(self) -> str:
        """Generate the next sequential identifier."""
        with self._lock:
            self._counter += 1
            return f"{self._counter:0{self._length}d}"


def build_id_generator(name: str) -> IdGenerator:
    """Return a fresh IdGenerator for a configuration name.

    Args:
        name: One of `ID_GENERATOR_NAMES` (case-insensitive).

    Raises:
        ValueError: If `name` is not a known generator.
    """
    match name.lower():
        case "uuid4":
            return UUIDv4Generator()
        case "ulid":
            return ULIDGenerator()
        case "simple":
            return SimpleIdGenerator()
        case _:
            raise ValueError(f"unknown id generator type: {name}")
