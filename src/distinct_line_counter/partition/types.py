"""Shared constants and metadata structures for partitioning."""

from dataclasses import dataclass

# Lines held in memory per chunk before it is sorted and spilled.
DEFAULT_CHUNK_SIZE = 1_000_000

# Whitespace trimmed from both ends of a line: ASCII whitespace plus the
# Unicode White_Space code points (NEL, NBSP, U+2000-U+200A, U+3000, ...).
WHITESPACE = (
    "\t\n\v\f\r \x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)


@dataclass
class PartitionStats:
    """Statistics from partition_to_chunks operation."""

    lines_read: int = 0
    empty_lines: int = 0
    lines_written: int = 0
    chunks_written: int = 0
