"""A timeline of the hours of the day with a dial at the current time."""

__version__ = "0.1.0"
__all__ = ["__version__"]