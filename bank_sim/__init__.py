"""In-memory bank account simulation."""

__version__ = "0.1.0"
