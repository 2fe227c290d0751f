"""A todo list for the terminal, stored in a CSV file."""

__version__ = "0.1.0"
__all__ = ["__version__"]