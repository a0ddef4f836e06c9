"""K-way merge over sorted chunks, counting distinct lines."""

import logging
from collections.abc import Sequence
from contextlib import ExitStack

from distinct_line_counter.chunks import ChunkHandle, ChunkStore
from distinct_line_counter.merge.fold import DistinctFold
from distinct_line_counter.merge.strategy import get_frontier_class
from distinct_line_counter.merge.types import MergeStats

logger = logging.getLogger(__name__)


def merge_count_with_stats(
    chunks: Sequence[ChunkHandle],
    store: ChunkStore,
    strategy: str | None = None,
) -> MergeStats:
    """
    Merge all chunks in sorted order and count distinct lines.

    Every chunk is opened at once. The frontier repeatedly yields the
    smallest line still unread, so the selected lines form the sorted union
    of all chunks; the fold counts value changes along that sequence.
    All readers are closed on every exit path.
    """
    frontier_class = get_frontier_class(strategy)
    fold = DistinctFold()

    with ExitStack() as stack:
        readers = [stack.enter_context(store.open_reader(chunk)) for chunk in chunks]
        frontier = frontier_class(readers)
        logger.debug("Merging %d chunks with %s", len(readers), frontier_class.__name__)

        while (entry := frontier.pop_min()) is not None:
            fold.observe(entry[0])

    return MergeStats(
        lines_merged=fold.observed,
        distinct_lines=fold.count,
        fan_in=len(chunks),
    )


def merge_count(
    chunks: Sequence[ChunkHandle],
    store: ChunkStore,
    strategy: str | None = None,
) -> int:
    """Return the number of distinct lines across all chunks."""
    return merge_count_with_stats(chunks, store, strategy).distinct_lines
