"""Tests for the Stats value type."""

import pytest

from results_to_slack.models.stats import EPOCH, Stats


def test_total_and_success_rate() -> None:
    """Derives total and rounded success rate from the counts."""
    stats = Stats(passed=2, failed=1, skipped=0)

    assert stats.total == 3
    assert stats.success_rate == 66.7
    assert stats.timestamp == EPOCH


def test_rejects_empty_result_set() -> None:
    """Requires at least one test."""
    with pytest.raises(ValueError, match="at least one test"):
        Stats(passed=0, failed=0, skipped=0)


def test_rejects_negative_counts() -> None:
    """Requires non-negative counts."""
    with pytest.raises(ValueError, match="skipped must be non-negative"):
        Stats(passed=3, failed=0, skipped=-1)
