"""Mini README: Expense records and the in-memory ledger.

The ledger is constructed once per run, optionally changed by a single
operation and then handed to the storage layer to be written back.
"""

from .ledger import Expense, ExpenseLedger, FeatureVariant, SearchMode, SortOrder

__all__ = ["Expense", "ExpenseLedger", "FeatureVariant", "SearchMode", "SortOrder"]
