"""Distinct Line Counter - Count unique lines in files too large for memory."""

from distinct_line_counter.solver import count_distinct_lines, main_solve, solve

__all__ = ["count_distinct_lines", "main_solve", "solve"]
