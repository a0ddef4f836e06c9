"""K-way merge of sorted chunks with distinct counting."""

from distinct_line_counter.merge.fold import DistinctFold, count_distinct_sorted
from distinct_line_counter.merge.frontier import HeapFrontier, ScanFrontier
from distinct_line_counter.merge.merge import merge_count, merge_count_with_stats
from distinct_line_counter.merge.strategy import (
    DLC_MERGE_STRATEGY_ENV,
    STRATEGIES,
    get_frontier_class,
    resolve_strategy,
)
from distinct_line_counter.merge.types import MergeStats

__all__ = [
    "DLC_MERGE_STRATEGY_ENV",
    "STRATEGIES",
    "DistinctFold",
    "HeapFrontier",
    "MergeStats",
    "ScanFrontier",
    "count_distinct_sorted",
    "get_frontier_class",
    "merge_count",
    "merge_count_with_stats",
    "resolve_strategy",
]
