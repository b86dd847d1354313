"""
Strategy Factory Module - Registry and factory for strategy instantiation.
"""

import logging
from typing import Any, Dict, List, Type

from .base import SolverStrategy

logger = logging.getLogger(__name__)

DEFAULT_STRATEGY = "exhaustive"

# Global registry of strategies, filled at import time by @register_strategy
_STRATEGIES: Dict[str, Type[SolverStrategy]] = {}


def register_strategy(cls: Type[SolverStrategy]) -> Type[SolverStrategy]:
    """
    Decorator to register a strategy class.

    Usage:
        @register_strategy
        class MyStrategy(SolverStrategy):
            name = "my_strategy"
            ...

    Args:
        cls: Strategy class to register

    Returns:
        The same class (for decorator chaining)

    Raises:
        TypeError: If cls is not a SolverStrategy subclass
    """
    if not issubclass(cls, SolverStrategy):
        raise TypeError(f"{cls} must be a subclass of SolverStrategy")
    if cls.name in _STRATEGIES and _STRATEGIES[cls.name] is not cls:
        logger.warning(f"Strategy '{cls.name}' re-registered by {cls.__name__}")
    _STRATEGIES[cls.name] = cls
    return cls


def get_strategy_class(name: str) -> Type[SolverStrategy]:
    """
    Look up a registered strategy class.

    Raises:
        ValueError: If strategy name not found
    """
    if name not in _STRATEGIES:
        available = ", ".join(_STRATEGIES.keys())
        raise ValueError(f"Unknown strategy: {name}. Available: {available}")
    return _STRATEGIES[name]


def create_strategy(name: str = DEFAULT_STRATEGY, **kwargs: Any) -> SolverStrategy:
    """
    Create a strategy instance by name.

    Args:
        name: Strategy name (e.g., "exhaustive", "parallel", "lookup")
        **kwargs: Additional arguments passed to strategy constructor

    Returns:
        Strategy instance

    Raises:
        ValueError: If strategy name not found
    """
    return get_strategy_class(name)(**kwargs)


def get_strategy_names() -> List[str]:
    """List registered strategy names."""
    return list(_STRATEGIES.keys())


def get_strategy_info() -> List[Dict[str, str]]:
    """
    Get name and description for all registered strategies.

    Returns:
        List of dicts with 'name' and 'description' keys
    """
    return [
        {"name": cls.name, "description": cls.description}
        for cls in _STRATEGIES.values()
    ]


def get_default_strategy_name() -> str:
    """
    Get the default strategy name.

    Returns:
        "exhaustive" if available, else the first registered name
    """
    if DEFAULT_STRATEGY in _STRATEGIES:
        return DEFAULT_STRATEGY
    if _STRATEGIES:
        return next(iter(_STRATEGIES.keys()))
    return ""
