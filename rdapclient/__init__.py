"""RDAP bootstrapping, a small RDAP object model and client error types."""

__version__ = "0.1.0"