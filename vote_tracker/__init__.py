"""Congress vote tracker: Senate and House roll-call votes in one list."""

__version__ = "0.1.0"
