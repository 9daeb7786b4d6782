"""CSV file-backed SubscriptionStorage adapter.

The backing file holds one subscription per line, comma-delimited, with no
header row and the columns in fixed order::

    id,customerId,asin,frequency

Rows end in ``\\r\\n`` (the `csv` module default), so values containing a
line break are quoted. Rows ending in a bare ``\\n`` are read as well.

The file is the only source of truth: every call re-reads it. Creating a
subscription appends a row; updating one rewrites the whole file through a
temporary file that is atomically moved into place.
"""

from __future__ import annotations

import csv
import logging
import os
import stat
import tempfile
import threading
from collections.abc import Iterator
from pathlib import Path

from subscribeandsave.adapters.id_generators import UUIDv4Generator
from subscribeandsave.interfaces.errors import (
    InvalidArgumentError,
    MalformedRecordError,
    SubscriptionNotFoundError,
)
from subscribeandsave.interfaces.id_generator import IdGenerator
from subscribeandsave.interfaces.subscription import Subscription
from subscribeandsave.interfaces.subscription_storage import SubscriptionStorage

logger = logging.getLogger(__name__)

COLUMNS = ("id", "customerId", "asin", "frequency")
ENCODING = "utf-8"


class SubscriptionFileStorage(SubscriptionStorage):
    """SubscriptionStorage implementation backed by a single CSV file.

    A single instance serializes its own read/modify/write cycles. Separate
    instances or processes sharing one file are not coordinated, but every
    create re-reads the file, so a new id never repeats one already stored.
    """

    def __init__(
        self, path: str | os.PathLike[str], id_generator: IdGenerator | None = None
    ) -> None:
        self._path = Path(path)
        self._id_generator = id_generator or UUIDv4Generator()
        self._lock = threading.Lock()
        if not self._path.exists():
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.touch()
            logger.info("Created empty subscriptions file at %s", self._path)

    @property
    def path(self) -> Path:
        """Location of the backing CSV file."""
        return self._path

    # --- Core Operations ---

    def create_subscription(self, subscription: Subscription) -> Subscription:
        subscription = self._require_subscription(subscription)
        with self._lock:
            taken = {record.subscription_id for record in self._iter_records()}
            created = subscription.with_id(self._unused_id(self._id_generator, taken))
            self._ensure_trailing_newline()
            with self._path.open("a", encoding=ENCODING, newline="") as f:
                csv.writer(f).writerow(self._to_row(created))
        logger.info("Created subscription %s", created.subscription_id)
        return created

    def get_subscription_by_id(self, subscription_id: str) -> Subscription:
        subscription_id = self._require_id(subscription_id)
        logger.debug("Looking up subscription %s in %s", subscription_id, self._path)
        with self._lock:
            for subscription in self._iter_records():
                if subscription.subscription_id == subscription_id:
                    return subscription
        raise SubscriptionNotFoundError(subscription_id)

    def update_subscription(self, subscription: Subscription) -> Subscription:
        subscription = self._require_subscription(subscription)
        subscription_id = self._require_id(subscription.subscription_id)
        with self._lock:
            records = list(self._iter_records())
            for index, existing in enumerate(records):
                if existing.subscription_id == subscription_id:
                    records[index] = subscription
                    break
            else:
                raise InvalidArgumentError(
                    f"Subscription ({subscription_id}) does not exist"
                )
            self._rewrite(records)
        logger.info("Updated subscription %s", subscription_id)
        return subscription

    # --- Convenience Methods ---

    def list_subscriptions(self) -> list[Subscription]:
        with self._lock:
            return list(self._iter_records())

    # --- Internal Helpers ---

    def _iter_records(self) -> Iterator[Subscription]:
        with self._path.open("r", encoding=ENCODING, newline="") as f:
            reader = csv.reader(f)
            for row in reader:
                # only empty lines; a row of blank cells is malformed
                if not any(row):
                    continue
                yield self._from_row(row, line_number=reader.line_num)

    def _rewrite(self, records: list[Subscription]) -> None:
        """Replace the file contents with `records` via temp file + os.replace.

        The replacement keeps the permission bits of the original file. The
        temp file is removed if anything fails before it is moved into place.
        """
        mode = stat.S_IMODE(self._path.stat().st_mode)
        tmp = tempfile.NamedTemporaryFile(  # pylint: disable=consider-using-with
            "w",
            dir=self._path.parent,
            prefix=f".{self._path.name}.",
            encoding=ENCODING,
            newline="",
            delete=False,
        )
        tmp_path = Path(tmp.name)
        try:
            with tmp:
                writer = csv.writer(tmp)
                writer.writerows(self._to_row(record) for record in records)
            os.chmod(tmp_path, mode)
            os.replace(tmp_path, self._path)
        except BaseException:
            tmp_path.unlink(missing_ok=True)
            raise
        logger.debug("Rewrote %s with %d subscriptions", self._path, len(records))

    def _ensure_trailing_newline(self) -> None:
        """Terminate a last line that was written without a newline."""
        with self._path.open("rb+") as f:
            if f.seek(0, os.SEEK_END) == 0:
                return
            f.seek(-1, os.SEEK_END)
            if f.read(1) not in (b"\n", b"\r"):
                f.write(b"\r\n")

    def _from_row(self, row: list[str], line_number: int) -> Subscription:
        if len(row) != len(COLUMNS):
            raise MalformedRecordError(
                self._path,
                line_number,
                f"expected {len(COLUMNS)} columns, got {len(row)}",
            )
        subscription_id, customer_id, asin, frequency = row
        try:
            return Subscription(
                subscription_id=subscription_id,
                customer_id=customer_id,
                asin=asin,
                frequency=int(frequency),
            )
        except ValueError as e:
            raise MalformedRecordError(self._path, line_number, str(e)) from e

    @staticmethod
    def _to_row(subscription: Subscription) -> list[str]:
        return [
            subscription.subscription_id or "",
            subscription.customer_id,
            subscription.asin,
            str(subscription.frequency),
        ]
