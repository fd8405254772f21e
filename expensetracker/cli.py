"""Command line interface for recording and reporting expenses."""

from __future__ import annotations

import argparse
import re
import sys
from collections.abc import Callable, Sequence
from contextlib import suppress
from os import PathLike
from pathlib import Path
from typing import Optional, Union

from .models import CreateExpense, Expenses, UpdateExpense
from .storage import load_from_file, save_to_file

DEFAULT_DATA_PATH = "data/expenses.json"
_VERSION = "0.1.0"
_UNSIGNED = re.compile(r"\+?[0-9]+")


def _unsigned(upper: int, label: str) -> Callable[[str], int]:
    def parse(text: str) -> int:
        if not _UNSIGNED.fullmatch(text) or int(text) > upper:
            raise argparse.ArgumentTypeError(f"invalid {label} value: {text!r}")
        return int(text)

    parse.__name__ = label
    return parse


_u32 = _unsigned(2**32 - 1, "u32")
_u8 = _unsigned(255, "u8")


def build_parser() -> argparse.ArgumentParser:
    """Return the argument parser for all subcommands."""
    parser = argparse.ArgumentParser(prog="expense-tracker")
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {_VERSION}")
    commands = parser.add_subparsers(dest="command", required=True, metavar="COMMAND")

    add = commands.add_parser("add", help="Add a new expense")
    add.add_argument("-d", "--description", required=True)
    add.add_argument("-c", "--category")
    add.add_argument("-a", "--amount", type=_u32, required=True)

    delete = commands.add_parser("delete", help="Delete an expense by ID")
    delete.add_argument("-i", "--id", type=_u32, required=True)

    update = commands.add_parser("update", help="Update an expense by ID")
    update.add_argument("-i", "--id", type=_u32, required=True)
    update.add_argument("-a", "--amount", type=_u32)
    update.add_argument("-d", "--description")
    update.add_argument("-c", "--category")

    listing = commands.add_parser("list", help="List all expenses")
    listing.add_argument("-c", "--category")

    summary = commands.add_parser("summary", help="Show monthly summary")
    summary.add_argument("-m", "--month", type=_u8)
    summary.add_argument("-y", "--year")

    export = commands.add_parser("export", help="Export data using file format")
    export.add_argument("-f", "--format")

    return parser


def _format_total(total: float) -> str:
    return repr(total).replace("e+", "e")


def _check_amount(amount: Optional[int]) -> None:
    if amount is not None and amount < 1:
        raise ValueError(f"Amount cannot be less than 1 got {amount}")


def _save(path: Path, expenses: Expenses) -> None:
    with suppress(OSError):
        save_to_file(path, expenses.to_dict())


def run(
    argv: Optional[Sequence[str]] = None,
    data_path: Union[str, "PathLike[str]"] = DEFAULT_DATA_PATH,
) -> None:
    """Execute one command against the expenses stored at ``data_path``.

    Raises ``ValueError`` for an amount below 1 or an unsupported export format.
    """
    args = build_parser().parse_args(argv)
    path = Path(data_path)

    try:
        expenses = Expenses.from_dict(load_from_file(path))
    except (OSError, ValueError):
        expenses = Expenses()

    match args.command:
        case "add":
            _check_amount(args.amount)
            message = expenses.add_expense(
                CreateExpense(
                    description=args.description,
                    amount=args.amount,
                    category=args.category,
                )
            )
            _save(path, expenses)
            print(message)

        case "delete":
            try:
                message = expenses.delete_expense(args.id)
            except KeyError:
                message = "No expense found with id"
            _save(path, expenses)
            print(f"{message}: {args.id}")

        case "list":
            print(f"{'ID':<3} {'Date':<10} {'Description':<20} {'Amount (NGN)':>6}")
            for expense in expenses.list_expenses(args.category):
                print(
                    f"{expense.id:<3} {expense.date_created.isoformat():<10} "
                    f"{expense.description:<20} {expense.amount:<5} NGN"
                )

        case "summary":
            total, name = expenses.summary(args.month, args.year)
            if name is not None:
                print(f"Total Expenses for {name}: NGN {_format_total(total)}")
            else:
                print(f"Total Expenses: NGN {_format_total(total)}")

        case "update":
            _check_amount(args.amount)
            try:
                message = expenses.update_expense(
                    UpdateExpense(
                        id=args.id,
                        description=args.description,
                        amount=args.amount,
                        category=args.category,
                    )
                )
            except KeyError:
                message = "No expense found with that id"
            _save(path, expenses)
            print(message)

        case "export":
            csv_path = path.with_suffix(".csv")
            try:
                expenses.export_data_using_file_format(args.format, csv_path)
            except OSError as exc:
                print(f"Failed to create CSV file: {exc}", file=sys.stderr)
            else:
                print(f"Data exported to {csv_path}")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the command line and return the process exit status."""
    try:
        run(argv)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())