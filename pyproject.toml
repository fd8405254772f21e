[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "expensetracker"
version = "0.1.0"
description = "A small command-line tracker for personal expenses stored as JSON, with CSV export."
requires-python = ">=3.10"
dependencies = []
keywords = ["expenses", "budget", "finance", "cli", "json", "csv"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Accounting",
]

[project.optional-dependencies]
test = ["pytest", "freezegun"]

[project.scripts]
expense-tracker = "expensetracker.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["expensetracker"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
