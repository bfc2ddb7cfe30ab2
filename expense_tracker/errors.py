"""Mini README: Error kinds and informational signals for the expense tracker.

Structure:
    * ExpenseTrackerError - base class for genuine failures.
    * ValidationError - user supplied arguments were rejected.
    * StorageUnavailable - the store file could not be created, read or written.
    * DecodeError - the store file holds corrupt or foreign data.
    * LedgerNotice - base for informational signals (EmptyLedger, NoMatch).

Notices deliberately sit outside ``ExpenseTrackerError`` so a broad handler
for failures never hides "nothing to show" situations from the caller.
"""

from __future__ import annotations


class ExpenseTrackerError(Exception):
    """Base class for expense tracker failures."""


class ValidationError(ExpenseTrackerError, ValueError):
    """Raised when operation arguments fail validation; the ledger is unchanged."""


class StorageUnavailable(ExpenseTrackerError, OSError):
    """Raised when the store file cannot be accessed."""


class DecodeError(ExpenseTrackerError, ValueError):
    """Raised when persisted bytes cannot be decoded into expenses."""


class LedgerNotice(Exception):
    """Informational signal used purely for user messaging."""


class EmptyLedger(LedgerNotice):
    """The ledger holds no expenses."""

    def __init__(self, message: str = "No expenses recorded.") -> None:
        super().__init__(message)


class NoMatch(LedgerNotice):
    """A search found no expenses satisfying its criteria."""

    def __init__(self, message: str = "No expenses found matching the specified criteria.") -> None:
        super().__init__(message)
