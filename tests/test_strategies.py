"""
Tests for the strategy registry and the built-in strategies.

Usage:
    pytest tests/test_strategies.py
"""

import sys
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from matchstick.solver import (
    SolutionContext,
    SolutionLookup,
    SolverStrategy,
    create_strategy,
    get_default_strategy_name,
    get_strategy_info,
    get_strategy_names,
    register_strategy,
)
from matchstick.solver.strategies import ExhaustiveStrategy, LookupStrategy, ParallelStrategy


def test_registered_strategies():
    names = get_strategy_names()
    assert {"exhaustive", "parallel", "lookup"} <= set(names)
    assert get_default_strategy_name() == "exhaustive"
    info = {entry["name"]: entry["description"] for entry in get_strategy_info()}
    assert info["exhaustive"].startswith("Exhaustive")


def test_create_strategy():
    assert isinstance(create_strategy(), ExhaustiveStrategy)
    assert isinstance(create_strategy("parallel", workers=2), ParallelStrategy)
    assert create_strategy("parallel", workers=3).workers == 3


def test_unknown_strategy():
    with pytest.raises(ValueError):
        create_strategy("greedy")


def test_register_rejects_non_strategy():
    with pytest.raises(TypeError):
        register_strategy(dict)


def test_strategy_base_is_abstract():
    with pytest.raises(TypeError):
        SolverStrategy()


@pytest.mark.parametrize("puzzle,options", [
    ("5+7=2", {}),
    ("6+4=4", {"allow_flip": False}),
    ("1=1+2", {"allow_prepend": True}),
    ("7+7=0", {"allow_append": True}),
])
def test_parallel_matches_exhaustive(puzzle, options):
    exhaustive = create_strategy("exhaustive").solve(SolutionContext(puzzle, **options))
    parallel = create_strategy("parallel", workers=2).solve(SolutionContext(puzzle, **options))
    assert parallel.solutions == exhaustive.solutions
    assert parallel.metrics.strategy_name == "parallel"


def test_parallel_already_solved():
    result = create_strategy("parallel", workers=2).solve(SolutionContext("1+1=2"))
    assert result.already_solved
    assert result.solutions == []


def test_cancelled_search_reports_partial_result():
    context = SolutionContext("5+3=5", max_moves=2)
    context.cancel()
    result = create_strategy("exhaustive").solve(context)
    assert result.was_cancelled


def test_timeout_stops_search():
    context = SolutionContext("5+3=5", max_moves=2, timeout_sec=0.0)
    result = create_strategy("exhaustive").solve(context)
    assert result.was_cancelled


def test_progress_reported():
    updates = []
    context = SolutionContext(
        "5+7=2", progress_callback=lambda percent, message: updates.append(percent)
    )
    create_strategy("exhaustive").solve(context)
    assert updates[0] == 0.0
    assert updates[-1] == 1.0


def test_context_remaining_time():
    assert SolutionContext("1=1").remaining_time() is None
    assert SolutionContext("1=1", timeout_sec=60).remaining_time() <= 60


def test_lookup_hit():
    expected = create_strategy("exhaustive").solve(SolutionContext("5+7=2")).solutions
    lookup = SolutionLookup(path=None)
    lookup.add("5+7=2", 1, True, expected)

    result = LookupStrategy(lookup=lookup).solve(SolutionContext("5 + 7 = 2"))
    assert result.metrics.cache_hit
    assert result.metrics.strategy_name == "lookup"
    assert result.solutions == expected


def test_lookup_miss_falls_back():
    strategy = LookupStrategy(lookup=SolutionLookup(path=None))
    result = strategy.solve(SolutionContext("5+7=2"))
    assert not result.metrics.cache_hit
    assert result.metrics.strategy_name == "exhaustive"
    assert "9-7=2" in result.equations()


def test_lookup_bypassed_for_padding():
    lookup = SolutionLookup(path=None)
    lookup.add("1=1+2", 1, True, [])
    result = LookupStrategy(lookup=lookup).solve(SolutionContext("1=1+2", allow_prepend=True))
    assert not result.metrics.cache_hit
    assert "-1=1-2" in result.equations()


def test_lookup_already_solved():
    result = LookupStrategy(lookup=SolutionLookup(path=None)).solve(SolutionContext("2=2"))
    assert result.already_solved
