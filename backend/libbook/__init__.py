"""LibBook: library seat reservation backend."""

__version__ = "1.0.0"
