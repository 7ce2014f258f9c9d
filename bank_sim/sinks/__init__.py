"""Output sinks for rendering account data."""

from bank_sim.sinks.console import ConsoleSink, format_summary, format_transaction

__all__ = ["ConsoleSink", "format_summary", "format_transaction"]
