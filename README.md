# expensetracker

A small command-line expense tracker. Expenses are kept as JSON in
`data/expenses.json`, which is relative to the current directory. They can be
exported to `data/expenses.csv`. Amounts are whole numbers of Naira (NGN).

## Installation

```
pip install .
```

This installs the `expense-tracker` command.

## Usage

Each expense has an id, a description, an amount and an optional category. It
also records the date it was created and the date it was last updated. A new
expense gets an id one higher than the largest id in use.

If the data file is missing or cannot be read, the command starts from an
empty list of expenses. Commands that change data write the file back and
create `data/` if needed.

Add an expense. The amount must be at least 1.

```
expense-tracker add --description "Data plan" --amount 20 --category subscriptions
```

List all expenses, or only those in one category. The category match ignores case.

```
expense-tracker list
expense-tracker list --category subscriptions
```

Update an expense. Only the fields you give are changed, and the update date
is set to today. A new amount must be at least 1.

```
expense-tracker update --id 1 --amount 50 --description "Updated value"
```

Delete an expense:

```
expense-tracker delete --id 1
```

Show the total, rounded up. You can limit it to a month (a number such as 5
for May), a year, or both. A year that is not an integer matches nothing. The
month's name is printed only when at least one expense is stored.

```
expense-tracker summary
expense-tracker summary --month 5 --year 2025
```

Export every expense to `data/expenses.csv`. Only `csv` is supported, and any
other format is an error. The `data/` directory must already exist.

```
expense-tracker export --format csv
```

`expense-tracker --version` prints the version. Errors such as an amount below
1 or an unsupported format are printed to standard error, and the exit status
is 1.

Short options exist as well: `-d`, `-a`, `-c`, `-i`, `-m`, `-y` and `-f`.

## Library use

```python
from expensetracker.models import CreateExpense, Expenses, UpdateExpense

expenses = Expenses()
expenses.add_expense(CreateExpense(description="Data plan", amount=20, category="subscriptions"))
expenses.update_expense(UpdateExpense(id=1, amount=50))
total, month = expenses.summary(None, None)   # (50.0, None)
```

`delete_expense` and `update_expense` raise `KeyError` when no expense has the
given id. `Expenses.to_dict` and `Expenses.from_dict` convert to and from the
JSON layout. `export_data_using_file_format("csv", path)` writes a CSV file.

`expensetracker.storage` provides three functions:

- `save_to_file` writes indented JSON.
- `load_from_file` reads JSON. If the file is missing, it creates an empty one
  and then raises `ValueError`.
- `export_as_csv` writes mappings as CSV rows under a header.

`expensetracker.cli.run(argv, data_path)` runs one command against a chosen
data file.

## Limitations

The tracker has no budgets, no multiple currencies and no import from CSV.
Summaries give a single total and are not broken down by category.

## Tests

```
pip install ".[test]"
pytest
```