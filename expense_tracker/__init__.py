"""Mini README: Core package initializer for the expense tracker.

The package keeps a single ordered ledger of named costs for one process run,
loads it from a compact binary store file and writes it back afterwards.
Convenience imports expose the pieces a command surface needs without
knowing the module layout.
"""

from .ledger import Expense, ExpenseLedger, SearchMode, SortOrder
from .logging_utils import get_logger
from .storage import ExpenseStore, load_ledger, save_ledger

__all__ = [
    "Expense",
    "ExpenseLedger",
    "ExpenseStore",
    "SearchMode",
    "SortOrder",
    "get_logger",
    "load_ledger",
    "save_ledger",
]
