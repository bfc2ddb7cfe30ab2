"""Mini README: Entry point CLI for the personal expense tracker.

This script exposes a Typer CLI that loads the ledger from the store file,
runs exactly one action and writes the ledger back. Actions:

    * add       - record ``--name`` with ``--cost``
    * view      - list every expense (default action)
    * summarize - print the total of all costs
    * search    - match by ``--name`` and/or ``--min-cost``/``--max-cost``
    * sort      - reorder the stored ledger by cost (``--sort-order asc|desc``)

An unknown action prints usage and exits with status 1 without touching the
store file.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Optional

import typer

from expense_tracker.configuration import get_settings
from expense_tracker.errors import LedgerNotice, StorageUnavailable, ValidationError
from expense_tracker.ledger import Expense, ExpenseLedger, FeatureVariant, SortOrder
from expense_tracker.logging_utils import configure_root_logger
from expense_tracker.storage import ExpenseStore

ACTIONS = ("add", "view", "summarize", "search", "sort")

cli = typer.Typer(help="Record, list, total, search and sort personal expenses.")


def _format_cost(cost: float) -> str:
    return f"${cost:.2f}"


def _echo_expenses(expenses: Iterable[Expense]) -> None:
    typer.echo("All Expenses:")
    for expense in expenses:
        typer.echo(f"{expense.name}: {_format_cost(expense.cost)}")


def _dispatch(
    ledger: ExpenseLedger,
    action: str,
    *,
    name: str,
    cost: float,
    min_cost: float,
    max_cost: float,
    sort_order: Optional[str],
) -> None:
    """Run one ledger operation and print its outcome."""

    if action == "add":
        try:
            expense = ledger.add_expense(name, cost)
        except ValidationError as error:
            typer.echo(f"Invalid expense details: {error}. Both name and a positive cost are required.")
            return
        typer.echo(f"Expense added: {expense.name} ({_format_cost(expense.cost)})")
    elif action == "search":
        try:
            matches = ledger.search_expenses(name, min_cost, max_cost)
        except ValidationError as error:
            typer.echo(f"Invalid search: {error}. Provide --name, --min-cost or --max-cost.")
            return
        except LedgerNotice as notice:
            typer.echo(str(notice))
            return
        for expense in matches:
            typer.echo(f"Expense found: {expense.name} ({_format_cost(expense.cost)})")
    elif action == "sort":
        if ledger.variant is FeatureVariant.BASIC:
            typer.echo("Sorting is disabled in the basic variant; insertion order kept.")
            return
        order = SortOrder.from_str(sort_order or SortOrder.ASCENDING.value)
        ledger.sort_by_cost(order)
        typer.echo(f"Expenses sorted ({order.value}).")
    else:
        if sort_order is not None:
            ledger.sort_by_cost(sort_order)
        try:
            if action == "view":
                _echo_expenses(ledger.view_expenses())
            else:
                typer.echo(f"Total Expenses: {_format_cost(ledger.summarize_expenses())}")
        except LedgerNotice as notice:
            typer.echo(str(notice))


@cli.command()
def run(
    action: str = typer.Option("view", "--action", help="One of: add, view, summarize, search, sort."),
    name: str = typer.Option("", "--name", help="Expense name to add or search for."),
    cost: float = typer.Option(0.0, "--cost", help="Cost of the expense to add."),
    min_cost: float = typer.Option(
        0.0, "--min-cost", "--minCost", help="Lower cost bound for search (0 = unbounded)."
    ),
    max_cost: float = typer.Option(
        0.0, "--max-cost", "--maxCost", help="Upper cost bound for search (0 = unbounded)."
    ),
    sort_order: Optional[str] = typer.Option(
        None, "--sort-order", "--sortOrder", help="Cost order for sort/view/summarize: asc or desc."
    ),
    data_file: Optional[Path] = typer.Option(
        None, "--data-file", help="Store file to use instead of the configured one."
    ),
) -> None:
    """Load the ledger, run one action and save the ledger back."""

    settings = get_settings()
    configure_root_logger(settings.log_level)

    action = action.strip()
    if action not in ACTIONS:
        typer.echo(
            f"Invalid action '{action}'. Use one of: {', '.join(ACTIONS)}.",
            err=True,
        )
        raise typer.Exit(code=1)

    store = ExpenseStore((data_file or settings.data_file).expanduser(), variant=settings.variant)
    ledger = store.load()
    _dispatch(
        ledger,
        action,
        name=name,
        cost=cost,
        min_cost=min_cost,
        max_cost=max_cost,
        sort_order=sort_order,
    )
    try:
        store.save(ledger)
    except StorageUnavailable as error:
        typer.echo(f"Could not save expenses: {error}", err=True)


if __name__ == "__main__":
    cli()
