"""Expense records and the collection that manages them."""

from __future__ import annotations

import math
import re
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from datetime import date
from os import PathLike
from typing import Any, Optional, Union

from .storage import export_as_csv

DEFAULT_CSV_PATH = "data/expenses.csv"

_U32_MAX = 2**32 - 1
_YEAR_PATTERN = re.compile(r"[+-]?[0-9]+")
_I32_RANGE = range(-(2**31), 2**31)

_MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


def month_name(month: int) -> str:
    """Return the English name of ``month`` (1-12), or ``"Unknown"``."""
    if 1 <= month <= 12:
        return _MONTH_NAMES[month - 1]
    return "Unknown"


def _u32(value: Any, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= _U32_MAX:
        raise ValueError(f"{name} must be an unsigned 32-bit integer, got {value!r}")
    return value


def _optional_str(value: Any, name: str) -> Optional[str]:
    if value is None or isinstance(value, str):
        return value
    raise ValueError(f"{name} must be a string or null, got {value!r}")


def _date(value: Any, name: str) -> date:
    if not isinstance(value, str):
        raise ValueError(f"{name} must be a date string, got {value!r}")
    return date.fromisoformat(value)


def _parse_year(text: str) -> Optional[int]:
    if not _YEAR_PATTERN.fullmatch(text):
        return None
    year = int(text)
    return year if year in _I32_RANGE else None


@dataclass
class Expense:
    """A single recorded expense."""

    id: int
    description: str
    amount: int
    category: Optional[str] = None
    date_created: date = field(default_factory=date.today)
    date_updated: Optional[date] = None

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-ready mapping with ISO formatted dates."""
        return {
            "id": self.id,
            "description": self.description,
            "amount": self.amount,
            "category": self.category,
            "date_created": self.date_created.isoformat(),
            "date_updated": self.date_updated.isoformat() if self.date_updated else None,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Expense":
        """Build an expense from a mapping; raise ``ValueError`` if it is malformed."""
        try:
            description = data["description"]
            if not isinstance(description, str):
                raise ValueError(f"description must be a string, got {description!r}")
            updated = data.get("date_updated")
            return cls(
                id=_u32(data["id"], "id"),
                description=description,
                amount=_u32(data["amount"], "amount"),
                category=_optional_str(data.get("category"), "category"),
                date_created=_date(data["date_created"], "date_created"),
                date_updated=None if updated is None else _date(updated, "date_updated"),
            )
        except KeyError as exc:
            raise ValueError(f"missing field {exc.args[0]!r}") from None
        except (TypeError, AttributeError) as exc:
            raise ValueError(f"malformed expense: {exc}") from None


@dataclass
class CreateExpense:
    """The fields supplied when recording a new expense."""

    description: str
    amount: int
    category: Optional[str] = None


@dataclass
class UpdateExpense:
    """A partial change to the expense with the given id."""

    id: int
    description: Optional[str] = None
    amount: Optional[int] = None
    category: Optional[str] = None


@dataclass
class Expenses:
    """An ordered collection of expenses."""

    expenses: list[Expense] = field(default_factory=list)

    def __iter__(self) -> Iterator[Expense]:
        return iter(self.expenses)

    def __len__(self) -> int:
        return len(self.expenses)

    def _next_id(self) -> int:
        return max((item.id for item in self.expenses), default=0) + 1

    def add_expense(self, data: CreateExpense) -> str:
        """Record a new expense dated today and return a confirmation."""
        self.expenses.append(
            Expense(
                id=self._next_id(),
                description=data.description,
                amount=data.amount,
                category=data.category,
                date_created=date.today(),
            )
        )
        return "Created successfully!"

    def list_expenses(self, category: Optional[str] = None) -> list[Expense]:
        """Return all expenses, or those whose category matches case-insensitively."""
        if category is None:
            return list(self.expenses)
        wanted = category.lower()
        return [
            expense
            for expense in self.expenses
            if expense.category is not None and expense.category.lower() == wanted
        ]

    def delete_expense(self, expense_id: int) -> str:
        """Remove every expense with ``expense_id``; raise ``KeyError`` if none exists."""
        kept = [expense for expense in self.expenses if expense.id != expense_id]
        if len(kept) == len(self.expenses):
            raise KeyError(expense_id)
        self.expenses = kept
        return "Deleted successfully"

    def update_expense(self, update: UpdateExpense) -> str:
        """Apply the given fields to the matching expense; raise ``KeyError`` if absent."""
        for expense in self.expenses:
            if expense.id == update.id:
                if update.amount is not None:
                    expense.amount = update.amount
                if update.description is not None:
                    expense.description = update.description
                if update.category is not None:
                    expense.category = update.category
                expense.date_updated = date.today()
                return "Updated successfully!"
        raise KeyError(update.id)

    def summary(
        self, month: Optional[int] = None, year: Optional[str] = None
    ) -> tuple[float, Optional[str]]:
        """Total the amounts created in the given month and/or year.

        Returns the total rounded up and the month's name.  The name is only
        given when a month was asked for and there is at least one expense.
        A year that is not an integer matches nothing.
        """
        total = 0.0
        name: Optional[str] = None
        parsed_year = None if year is None else _parse_year(str(year))

        for expense in self.expenses:
            matches = True
            if month is not None:
                name = month_name(month)
                if expense.date_created.month != month:
                    matches = False
            if year is not None and (
                parsed_year is None or expense.date_created.year != parsed_year
            ):
                matches = False
            if matches:
                total += expense.amount

        return float(math.ceil(total)), name

    def export_data_using_file_format(
        self,
        file_format: Optional[str],
        path: Union[str, "PathLike[str]"] = DEFAULT_CSV_PATH,
    ) -> None:
        """Export all expenses to ``path``; only ``"csv"`` is supported."""
        if file_format != "csv":
            raise ValueError("Invalid file format")
        export_as_csv(path, (expense.to_dict() for expense in self.expenses))

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-ready mapping of the whole collection."""
        return {"expenses": [expense.to_dict() for expense in self.expenses]}

    @classmethod
    def from_dict(cls, data: Any) -> "Expenses":
        """Build a collection from a mapping; raise ``ValueError`` if it is malformed."""
        if not isinstance(data, Mapping) or "expenses" not in data:
            raise ValueError("expected a mapping with an 'expenses' list")
        items = data["expenses"]
        if not isinstance(items, list):
            raise ValueError("'expenses' must be a list")
        return cls([Expense.from_dict(item) for item in items])