"""Mini README: Binary encoding of the persisted ledger.

Layout (little endian):
    * header  - magic ``b"EXPL"``, format byte, uint32 record count
    * records - uint32 name length, UTF-8 name bytes, float64 cost

The format is only ever read back by this program, so it favours strict
validation over extensibility: any mismatch raises ``DecodeError``.
"""

from __future__ import annotations

import struct
from typing import Iterable, List

from ..errors import DecodeError
from ..ledger import Expense

MAGIC = b"EXPL"
FORMAT_VERSION = 1

_HEADER = struct.Struct("<4sBI")
_NAME_LENGTH = struct.Struct("<I")
_COST = struct.Struct("<d")


def encode_ledger(expenses: Iterable[Expense]) -> bytes:
    """Serialise expenses in order into a single blob."""

    records = list(expenses)
    chunks = [_HEADER.pack(MAGIC, FORMAT_VERSION, len(records))]
    for expense in records:
        name = expense.name.encode("utf-8")
        chunks.append(_NAME_LENGTH.pack(len(name)))
        chunks.append(name)
        chunks.append(_COST.pack(expense.cost))
    return b"".join(chunks)


def decode_ledger(data: bytes) -> List[Expense]:
    """Rebuild the ordered expenses from a blob produced by ``encode_ledger``."""

    view = memoryview(data)
    if len(view) < _HEADER.size:
        raise DecodeError("store is shorter than its header")
    magic, version, count = _HEADER.unpack_from(view, 0)
    if magic != MAGIC:
        raise DecodeError("store does not start with the expected magic bytes")
    if version != FORMAT_VERSION:
        raise DecodeError(f"unsupported store format {version}")

    offset = _HEADER.size
    expenses: List[Expense] = []
    try:
        for _ in range(count):
            (length,) = _NAME_LENGTH.unpack_from(view, offset)
            offset += _NAME_LENGTH.size
            if offset + length > len(view):
                raise DecodeError("expense name runs past the end of the store")
            name = bytes(view[offset : offset + length]).decode("utf-8")
            offset += length
            (cost,) = _COST.unpack_from(view, offset)
            offset += _COST.size
            expenses.append(Expense(name=name, cost=cost))
    except struct.error as error:
        raise DecodeError("store ends in the middle of a record") from error
    except UnicodeDecodeError as error:
        raise DecodeError("expense name is not valid UTF-8") from error

    if offset != len(view):
        raise DecodeError(f"{len(view) - offset} unexpected trailing bytes in store")
    return expenses
