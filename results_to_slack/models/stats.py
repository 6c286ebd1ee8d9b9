"""Aggregate statistics extracted from a test report."""

from dataclasses import dataclass
from datetime import datetime

# Naive local time for epoch zero, so ``EPOCH.timestamp() == 0``.
EPOCH = datetime.fromtimestamp(0)


@dataclass(frozen=True, kw_only=True)
class Stats:
    """Pass/fail/skip totals of a single test run.

    The counts are non-negative and at least one test was run. The timestamp
    is only used for display ordering.
    """

    passed: int
    failed: int
    skipped: int
    timestamp: datetime = EPOCH

    def __post_init__(self) -> None:
        for name in ("passed", "failed", "skipped"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be non-negative")
        if self.total == 0:
            raise ValueError("Stats require at least one test")

    @property
    def total(self) -> int:
        return self.passed + self.failed + self.skipped

    @property
    def success_rate(self) -> float:
        """Passed tests as a percentage of all tests, one decimal place."""
        return round(self.passed / self.total * 100, 1)
