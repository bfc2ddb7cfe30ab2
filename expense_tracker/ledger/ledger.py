"""Mini README: In-memory expense ledger for a single tracker run.

Structure:
    * FeatureVariant - full feature set versus the basic, degraded one.
    * SortOrder - ascending/descending cost ordering tokens.
    * SearchMode - exact-name lookup versus criteria matching.
    * Expense - immutable dataclass holding a name and a cost.
    * ExpenseLedger - ordered collection with add/view/summarize/search/sort.

The ledger keeps insertion order until an explicit sort reorders it in place.
Records are never edited; sorting only moves them. Nothing here touches the
filesystem: loading and saving live in ``expense_tracker.storage``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator, List, Optional, Tuple

from ..errors import EmptyLedger, NoMatch, ValidationError
from ..logging_utils import get_logger

LOGGER = get_logger(__name__)


class FeatureVariant(str, Enum):
    """Feature sets the ledger can run with."""

    FULL = "full"
    BASIC = "basic"


class SortOrder(str, Enum):
    """Cost ordering applied by ``ExpenseLedger.sort_by_cost``."""

    ASCENDING = "asc"
    DESCENDING = "desc"

    @classmethod
    def from_str(cls, value: Optional[str]) -> "SortOrder":
        """Match ``asc``/``desc`` exactly; any other token means ascending."""

        try:
            return cls(str(value).strip())
        except ValueError:
            LOGGER.debug("Unrecognised sort order %r; using ascending", value)
            return cls.ASCENDING


class SearchMode(str, Enum):
    """How ``ExpenseLedger.search_expenses`` matches records."""

    EXACT = "exact"
    CRITERIA = "criteria"


@dataclass(frozen=True, slots=True)
class Expense:
    """A named cost entry."""

    name: str
    cost: float


class ExpenseLedger:
    """Ordered expenses plus the operations that read or reorder them."""

    def __init__(
        self,
        expenses: Optional[Iterable[Expense]] = None,
        *,
        variant: FeatureVariant = FeatureVariant.FULL,
    ) -> None:
        self._expenses: List[Expense] = list(expenses or [])
        self.variant = FeatureVariant(variant)
        LOGGER.debug(
            "Expense ledger initialised with %s expenses (%s variant)",
            len(self._expenses),
            self.variant.value,
        )

    def __len__(self) -> int:
        return len(self._expenses)

    def __iter__(self) -> Iterator[Expense]:
        return iter(self._expenses)

    @property
    def expenses(self) -> Tuple[Expense, ...]:
        """Snapshot of the current ordering."""

        return tuple(self._expenses)

    def add_expense(self, name: str, cost: float) -> Expense:
        """Append a new expense after validating its fields.

        Raises:
            ValidationError: ``name`` is empty or ``cost`` is not strictly positive.
        """

        if not name or not cost > 0:
            raise ValidationError("missing or invalid fields")
        expense = Expense(name=name, cost=float(cost))
        self._expenses.append(expense)
        LOGGER.info("Added expense %r (%.2f)", expense.name, expense.cost)
        return expense

    def view_expenses(self) -> Iterator[Expense]:
        """Iterate expenses in ledger order, signalling ``EmptyLedger`` when bare."""

        if not self._expenses:
            raise EmptyLedger()
        return iter(tuple(self._expenses))

    def summarize_expenses(self) -> float:
        """Return the total cost; an empty ledger signals ``EmptyLedger`` rather than 0."""

        if not self._expenses:
            raise EmptyLedger()
        total = 0.0
        for expense in self._expenses:
            total += expense.cost
        return total

    def search_expenses(
        self,
        name: str = "",
        min_cost: float = 0.0,
        max_cost: float = 0.0,
        *,
        mode: Optional[SearchMode] = None,
    ) -> List[Expense]:
        """Find expenses by exact name and/or cost range.

        Bounds that are zero or negative count as unbounded. In criteria mode
        every matching record is returned in ledger order. Exact mode without
        bounds stops at the first record whose name matches. The basic
        variant always searches in exact mode and ignores the bounds.

        Raises:
            ValidationError: no name and no positive bound were supplied.
            NoMatch: nothing satisfied the criteria.
        """

        if self.variant is FeatureVariant.BASIC:
            mode = SearchMode.EXACT
            min_cost = max_cost = 0.0
        elif mode is None:
            mode = SearchMode.CRITERIA

        if not name and min_cost <= 0 and max_cost <= 0:
            raise ValidationError("no search criteria")

        if mode is SearchMode.EXACT and min_cost <= 0 and max_cost <= 0:
            for expense in self._expenses:
                if expense.name == name:
                    return [expense]
            raise NoMatch()

        matches = [
            expense
            for expense in self._expenses
            if (not name or expense.name == name)
            and (min_cost <= 0 or expense.cost >= min_cost)
            and (max_cost <= 0 or expense.cost <= max_cost)
        ]
        if not matches:
            raise NoMatch()
        LOGGER.debug("Search for %r [%s, %s] matched %s expenses", name, min_cost, max_cost, len(matches))
        return matches

    def sort_by_cost(self, order: SortOrder | str = SortOrder.ASCENDING) -> None:
        """Stable in-place sort by cost; ties keep their prior relative order."""

        if self.variant is FeatureVariant.BASIC:
            LOGGER.debug("Sorting disabled in basic variant; keeping insertion order")
            return
        if not isinstance(order, SortOrder):
            order = SortOrder.from_str(order)
        # list.sort stays stable with reverse=True.
        self._expenses.sort(
            key=lambda expense: expense.cost,
            reverse=order is SortOrder.DESCENDING,
        )
        LOGGER.info("Sorted %s expenses by cost (%s)", len(self._expenses), order.value)
