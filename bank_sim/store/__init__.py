"""In-memory account registry."""

from bank_sim.store.registry import AccountRegistry

__all__ = ["AccountRegistry"]
