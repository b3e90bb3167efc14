"""Terminal Snake."""

__version__ = "0.1.0"
