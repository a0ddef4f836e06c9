"""Merge strategy selection."""

import os
from typing import TypeAlias

from distinct_line_counter.merge.frontier import HeapFrontier, ScanFrontier

FrontierClass: TypeAlias = type[HeapFrontier] | type[ScanFrontier]

# Environment variable to override the frontier strategy.
DLC_MERGE_STRATEGY_ENV = "DLC_MERGE_STRATEGY"

DEFAULT_STRATEGY = "heap"

STRATEGIES: dict[str, FrontierClass] = {
    "heap": HeapFrontier,
    "scan": ScanFrontier,
}


def resolve_strategy(name: str | None = None) -> str:
    """
    Pick the strategy name.

    Priority:
    1. Explicit `name` argument
    2. DLC_MERGE_STRATEGY env var ("heap" or "scan")
    3. "heap"
    """
    if not name:
        name = os.environ.get(DLC_MERGE_STRATEGY_ENV, "") or DEFAULT_STRATEGY

    name = name.lower()
    if name not in STRATEGIES:
        choices = ", ".join(sorted(STRATEGIES))
        raise ValueError(f"unknown merge strategy {name!r}, expected one of: {choices}")
    return name


def get_frontier_class(name: str | None = None) -> FrontierClass:
    return STRATEGIES[resolve_strategy(name)]
