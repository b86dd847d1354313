"""
Strategies Package - Concrete strategy implementations.

Import this module to register all built-in strategies.
"""

from .exhaustive import ExhaustiveStrategy
from .parallel import ParallelStrategy
from .lookup import LookupStrategy

__all__ = [
    "ExhaustiveStrategy",
    "ParallelStrategy",
    "LookupStrategy",
]
