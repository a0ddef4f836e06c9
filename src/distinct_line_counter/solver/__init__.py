"""Two-pass orchestration: partition into sorted chunks, then merge and count."""

from distinct_line_counter.solver.solve import count_distinct_lines, main_solve, solve

__all__ = ["count_distinct_lines", "main_solve", "solve"]
