"""Mini README: End-to-end tests for the expense command line.

Each test drives the Typer app with ``CliRunner`` against a temporary store
file, so consecutive invocations exercise the full load, act and save cycle.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterator

import pytest
from typer.testing import CliRunner

from expense_cli import cli
from expense_tracker.configuration import get_settings
from expense_tracker.ledger import Expense
from expense_tracker.storage import load_ledger

runner = CliRunner()


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    monkeypatch.delenv("EXPENSE_TRACKER_VARIANT", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture()
def store_path(tmp_path: Path) -> Path:
    return tmp_path / "expenses.dat"


def _invoke(store_path: Path, *args: str):
    return runner.invoke(cli, ["--data-file", str(store_path), *args])


def test_add_then_view(store_path: Path) -> None:
    added = _invoke(store_path, "--action", "add", "--name", "Coffee", "--cost", "4.5")
    assert added.exit_code == 0
    assert "Expense added: Coffee ($4.50)" in added.output

    viewed = _invoke(store_path)
    assert viewed.exit_code == 0
    assert "All Expenses:" in viewed.output
    assert "Coffee: $4.50" in viewed.output


def test_view_empty_store_reports_no_expenses(store_path: Path) -> None:
    result = _invoke(store_path, "--action", "view")

    assert result.exit_code == 0
    assert "No expenses recorded." in result.output
    assert store_path.exists()


def test_invalid_add_leaves_store_unchanged(store_path: Path) -> None:
    _invoke(store_path, "--action", "add", "--name", "Rent", "--cost", "900")

    result = _invoke(store_path, "--action", "add", "--name", "Coffee", "--cost", "0")

    assert result.exit_code == 0
    assert "Invalid expense details" in result.output
    assert load_ledger(store_path).expenses == (Expense("Rent", 900.0),)


def test_summarize_prints_total(store_path: Path) -> None:
    _invoke(store_path, "--action", "add", "--name", "A", "--cost", "10")
    _invoke(store_path, "--action", "add", "--name", "B", "--cost", "5.5")

    result = _invoke(store_path, "--action", "summarize")

    assert "Total Expenses: $15.50" in result.output


def test_search_accepts_original_flag_spelling(store_path: Path) -> None:
    for name, cost in [("A", "5"), ("B", "15"), ("A", "25")]:
        _invoke(store_path, "--action", "add", "--name", name, "--cost", cost)

    result = _invoke(store_path, "--action", "search", "--minCost", "10", "--maxCost", "20")

    assert "Expense found: B ($15.00)" in result.output
    assert "Expense found: A" not in result.output


def test_search_reports_missing_criteria_and_no_match(store_path: Path) -> None:
    _invoke(store_path, "--action", "add", "--name", "A", "--cost", "5")

    assert "Invalid search" in _invoke(store_path, "--action", "search").output
    assert "No expenses found" in _invoke(store_path, "--action", "search", "--name", "Z").output


def test_sort_persists_new_order(store_path: Path) -> None:
    for name, cost in [("A", "5"), ("B", "3"), ("C", "5"), ("D", "1")]:
        _invoke(store_path, "--action", "add", "--name", name, "--cost", cost)

    result = _invoke(store_path, "--action", "sort", "--sort-order", "desc")

    assert "Expenses sorted (desc)." in result.output
    assert [expense.name for expense in load_ledger(store_path)] == ["A", "C", "B", "D"]


def test_view_without_sort_order_keeps_insertion_order(store_path: Path) -> None:
    _invoke(store_path, "--action", "add", "--name", "Big", "--cost", "50")
    _invoke(store_path, "--action", "add", "--name", "Small", "--cost", "1")

    output = _invoke(store_path, "--action", "view").output
    assert output.index("Big") < output.index("Small")

    output = _invoke(store_path, "--action", "view", "--sortOrder", "asc").output
    assert output.index("Small") < output.index("Big")


def test_unknown_action_exits_without_saving(store_path: Path) -> None:
    result = _invoke(store_path, "--action", "delete")

    assert result.exit_code == 1
    assert "Invalid action" in result.output
    assert not store_path.exists()


def test_corrupt_store_does_not_block_add(store_path: Path) -> None:
    store_path.write_bytes(b"garbage")

    result = _invoke(store_path, "--action", "add", "--name", "Coffee", "--cost", "2")

    assert result.exit_code == 0
    assert load_ledger(store_path).expenses == (Expense("Coffee", 2.0),)


def test_basic_variant_search_returns_first_match(store_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EXPENSE_TRACKER_VARIANT", "basic")
    get_settings.cache_clear()
    _invoke(store_path, "--action", "add", "--name", "A", "--cost", "5")
    _invoke(store_path, "--action", "add", "--name", "A", "--cost", "25")

    result = _invoke(store_path, "--action", "search", "--name", "A")

    assert result.output.count("Expense found") == 1
    assert "Expense found: A ($5.00)" in result.output


def test_basic_variant_sort_reports_disabled(store_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EXPENSE_TRACKER_VARIANT", "basic")
    get_settings.cache_clear()
    _invoke(store_path, "--action", "add", "--name", "Big", "--cost", "50")
    _invoke(store_path, "--action", "add", "--name", "Small", "--cost", "1")

    result = _invoke(store_path, "--action", "sort", "--sort-order", "asc")

    assert "Sorting is disabled in the basic variant" in result.output
    assert "Expenses sorted" not in result.output
    assert [expense.name for expense in load_ledger(store_path)] == ["Big", "Small"]


def test_save_failure_is_reported_but_not_fatal(tmp_path: Path) -> None:
    """A store path that cannot be written reports the failure and still exits 0."""

    result = _invoke(tmp_path, "--action", "add", "--name", "Coffee", "--cost", "1")

    assert result.exit_code == 0
    assert "Expense added: Coffee ($1.00)" in result.output
    assert "Could not save expenses" in result.output


@pytest.mark.parametrize("action", ["ADD", "View", "Sort"])
def test_actions_are_case_sensitive(store_path: Path, action: str) -> None:
    result = _invoke(store_path, "--action", action, "--name", "Coffee", "--cost", "1")

    assert result.exit_code == 1
    assert "Invalid action" in result.output
    assert not store_path.exists()
