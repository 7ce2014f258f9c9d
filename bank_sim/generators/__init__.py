"""Synthetic account generators."""

from bank_sim.generators.account import DemoAccountGenerator
from bank_sim.generators.base import BaseGenerator

__all__ = ["BaseGenerator", "DemoAccountGenerator"]
