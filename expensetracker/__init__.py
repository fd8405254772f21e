"""Track personal expenses from the command line, stored as JSON with CSV export."""

__version__ = "0.1.0"
__all__ = ["__version__"]