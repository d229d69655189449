"""timerfile - keep a text file updated with a running countdown."""

__version__ = "0.1.0"
