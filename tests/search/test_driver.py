"""Tests for lattice_discovery.search.driver."""

from __future__ import annotations

import logging

import pytest

from lattice_discovery.config.types import ExplorerConfig
from lattice_discovery.domain.snapshot import Snapshot
from lattice_discovery.search.driver import (
    RoundLimitExceededError,
    SearchResult,
    SnapshotAccumulator,
    collect,
    run_search,
    run_search_from_config,
)
from lattice_discovery.search.explorer import FrontierExplorer
from lattice_discovery.search.pacing import DrainPacing


def _snap(good=(), bad=(), waiting=(), max_coord=1, round_index=1, final=False) -> Snapshot:
    return Snapshot(
        good=tuple(good),
        bad=tuple(bad),
        waiting=tuple(waiting),
        max_coord=max_coord,
        round_index=round_index,
        final=final,
    )


class TestSnapshotAccumulator:
    def test_good_points_accumulate(self) -> None:
        acc = SnapshotAccumulator()
        acc.add(_snap(good=[(0, 0)], waiting=[(1, 0)]))
        acc.add(_snap(good=[(1, 0), (-1, 0)], round_index=2))
        assert acc.good == ((0, 0), (1, 0), (-1, 0))
        assert acc.rounds == 2

    def test_bad_points_accumulate_without_keep_bad(self) -> None:
        acc = SnapshotAccumulator(keep_bad=False)
        acc.add(_snap(bad=[(5, 0)]))
        acc.add(_snap(bad=[(6, 0)], round_index=2))
        assert acc.bad == ((5, 0), (6, 0))
        assert acc.shown_bad == ((6, 0),)
        assert "invalid: 2" in acc.counts_message()

    def test_terminal_snapshot_shows_every_bad_point(self) -> None:
        acc = SnapshotAccumulator(keep_bad=False)
        acc.add(_snap(bad=[(5, 0)]))
        acc.add(_snap(bad=[(6, 0)], round_index=2, final=True))
        assert acc.shown_bad == ((5, 0), (6, 0))

    def test_full_run_counts_match_run_search(self) -> None:
        acc = SnapshotAccumulator(keep_bad=False)
        for snapshot in FrontierExplorer(target=12):
            acc.add(snapshot)
        expected = run_search(target=12)
        assert acc.finished
        assert set(acc.bad) == set(expected.bad)
        assert len(acc.shown_bad) == len(expected.bad)
        assert acc.counts_message() == (
            f"valid: {len(expected.good)}, invalid: {len(expected.bad)}, waiting check: 0"
        )

    def test_bad_points_kept_with_keep_bad(self) -> None:
        acc = SnapshotAccumulator(keep_bad=True)
        acc.add(_snap(bad=[(5, 0)]))
        acc.add(_snap(bad=[(6, 0)], round_index=2))
        assert acc.bad == ((5, 0), (6, 0))
        assert acc.shown_bad == ((5, 0), (6, 0))

    def test_waiting_and_max_follow_latest(self) -> None:
        acc = SnapshotAccumulator()
        acc.add(_snap(waiting=[(1, 0), (2, 0)], max_coord=2))
        acc.add(_snap(waiting=[(3, 0)], max_coord=3, round_index=2))
        assert acc.waiting == ((3, 0),)
        assert acc.max_coord == 3

    def test_counts_message(self) -> None:
        acc = SnapshotAccumulator()
        acc.add(_snap(good=[(0, 0)], bad=[(1, 0), (-1, 0)], waiting=[(2, 0)]))
        assert acc.counts_message() == "valid: 1, invalid: 2, waiting check: 1"

    def test_rejects_snapshots_after_terminal(self) -> None:
        acc = SnapshotAccumulator()
        acc.add(_snap(final=True))
        assert acc.finished
        with pytest.raises(ValueError, match="terminal"):
            acc.add(_snap(round_index=2))


class TestCollect:
    def test_collects_until_terminal(self) -> None:
        result = collect(FrontierExplorer(target=1), target=1)
        assert isinstance(result, SearchResult)
        assert len(result.good) == 5
        assert len(result.bad) == 8

    def test_round_cap(self) -> None:
        with pytest.raises(RoundLimitExceededError, match="within 2 rounds"):
            collect(FrontierExplorer(target=20), target=20, max_rounds=2)

    def test_round_cap_not_hit_when_run_finishes_on_last_allowed_round(self) -> None:
        explorer = FrontierExplorer(target=4)
        rounds = len(list(FrontierExplorer(target=4)))
        result = collect(explorer, target=4, max_rounds=rounds)
        assert result.rounds == rounds

    def test_stream_without_terminal_snapshot(self) -> None:
        with pytest.raises(ValueError, match="without a terminal snapshot"):
            collect([_snap()], target=0)


class TestRunSearch:
    def test_summary(self) -> None:
        result = run_search(target=3)
        assert result.summary() == {
            "target": 3,
            "rounds": result.rounds,
            "good": 25,
            "bad": 16,
            "max": 4,
        }

    def test_pacing_passed_through(self) -> None:
        assert run_search(target=10, pacing=DrainPacing()).rounds == 2

    def test_max_rounds_must_be_positive(self) -> None:
        with pytest.raises(ValueError, match="max_rounds"):
            run_search(target=3, max_rounds=0)

    def test_round_limit(self) -> None:
        with pytest.raises(RoundLimitExceededError):
            run_search(target=19, max_rounds=3)

    def test_from_config(self) -> None:
        result = run_search_from_config(ExplorerConfig(target=2, pacing="fixed", batch_size=2))
        assert len(result.good) == 13
        assert result.max_coord == 3

    def test_logs_result(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.INFO, logger="lattice_discovery.search.driver"):
            run_search(target=2)
        assert any("13 good" in record.getMessage() for record in caplog.records)
