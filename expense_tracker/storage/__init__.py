"""Mini README: Persistence for the expense ledger.

``codec`` turns expenses into a compact binary blob and back, while ``store``
owns the file: whole-ledger reads at startup and whole-file overwrites on save.
"""

from .codec import decode_ledger, encode_ledger
from .store import ExpenseStore, load_ledger, save_ledger

__all__ = ["ExpenseStore", "decode_ledger", "encode_ledger", "load_ledger", "save_ledger"]
