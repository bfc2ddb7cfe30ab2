"""Mini README: File-backed persistence for the expense ledger.

Structure:
    * ExpenseStore - loads the whole ledger from one file and overwrites it on save.
    * load_ledger / save_ledger - one-shot helpers around ``ExpenseStore``.

Loading never fails: a missing file is created empty, while unreadable or
corrupt files are reported through the log and ``last_error`` and yield an
empty ledger, so a damaged store never blocks the user. Saving truncates and
rewrites the file; there is no locking and no atomic rename, so concurrent
runs race and the last writer wins.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

from ..errors import DecodeError, ExpenseTrackerError, StorageUnavailable
from ..ledger import ExpenseLedger, FeatureVariant
from ..logging_utils import get_logger
from .codec import decode_ledger, encode_ledger

LOGGER = get_logger(__name__)


class ExpenseStore:
    """Persist an ``ExpenseLedger`` to a single binary file."""

    def __init__(
        self,
        path: Union[str, Path],
        *,
        variant: FeatureVariant = FeatureVariant.FULL,
    ) -> None:
        self.path = Path(path)
        self.variant = FeatureVariant(variant)
        self.last_error: Optional[ExpenseTrackerError] = None

    def load(self) -> ExpenseLedger:
        """Read the stored ledger, falling back to an empty one on any failure."""

        self.last_error = None
        try:
            data = self._read_bytes()
        except StorageUnavailable as error:
            self._report(error)
            return self._empty()
        if not data:
            return self._empty()

        try:
            expenses = decode_ledger(data)
        except DecodeError as error:
            self._report(error)
            return self._empty()
        LOGGER.debug("Loaded %s expenses from %s", len(expenses), self.path)
        return ExpenseLedger(expenses, variant=self.variant)

    def save(self, ledger: ExpenseLedger) -> None:
        """Overwrite the store with the full ledger.

        Raises:
            StorageUnavailable: the file could not be opened or written.
        """

        payload = encode_ledger(ledger)
        try:
            with self.path.open("wb") as store_file:
                store_file.write(payload)
        except OSError as error:
            failure = StorageUnavailable(f"cannot write expenses file {self.path}: {error}")
            self.last_error = failure
            LOGGER.error("%s", failure)
            raise failure from error
        LOGGER.debug("Saved %s expenses to %s", len(ledger), self.path)

    def _read_bytes(self) -> bytes:
        try:
            if not self.path.exists():
                self.path.touch()
                LOGGER.info("Created empty expenses file %s", self.path)
                return b""
            return self.path.read_bytes()
        except OSError as error:
            raise StorageUnavailable(f"cannot access expenses file {self.path}: {error}") from error

    def _report(self, error: ExpenseTrackerError) -> None:
        self.last_error = error
        LOGGER.warning("%s; starting with an empty ledger", error)

    def _empty(self) -> ExpenseLedger:
        return ExpenseLedger(variant=self.variant)


def load_ledger(path: Union[str, Path], *, variant: FeatureVariant = FeatureVariant.FULL) -> ExpenseLedger:
    return ExpenseStore(path, variant=variant).load()


def save_ledger(ledger: ExpenseLedger, path: Union[str, Path]) -> None:
    ExpenseStore(path, variant=ledger.variant).save(ledger)
