"""Tests for merge strategy selection."""

import pytest

from distinct_line_counter.merge import strategy
from distinct_line_counter.merge.frontier import HeapFrontier, ScanFrontier


def test_explicit_strategy_wins(monkeypatch) -> None:
    monkeypatch.setenv(strategy.DLC_MERGE_STRATEGY_ENV, "heap")
    assert strategy.resolve_strategy("scan") == "scan"
    assert strategy.get_frontier_class("SCAN") is ScanFrontier


def test_env_override(monkeypatch) -> None:
    monkeypatch.setenv(strategy.DLC_MERGE_STRATEGY_ENV, "scan")
    assert strategy.get_frontier_class() is ScanFrontier

    monkeypatch.setenv(strategy.DLC_MERGE_STRATEGY_ENV, "heap")
    assert strategy.get_frontier_class() is HeapFrontier


def test_default_is_heap(monkeypatch) -> None:
    monkeypatch.delenv(strategy.DLC_MERGE_STRATEGY_ENV, raising=False)
    assert strategy.resolve_strategy() == "heap"

    monkeypatch.setenv(strategy.DLC_MERGE_STRATEGY_ENV, "")
    assert strategy.resolve_strategy() == "heap"


def test_unknown_strategy(monkeypatch) -> None:
    with pytest.raises(ValueError, match="unknown merge strategy"):
        strategy.resolve_strategy("bubble")

    monkeypatch.setenv(strategy.DLC_MERGE_STRATEGY_ENV, "bubble")
    with pytest.raises(ValueError):
        strategy.get_frontier_class()
