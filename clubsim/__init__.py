"""Simulate a computer club's working day from an event log and report table revenue."""

__version__ = "1.0.0"
__all__ = ["__version__"]