"""Fixtures for integration tests."""

from pathlib import Path

import pytest
from pydantic import SecretStr

from results_to_slack.config import ActionConfig
from results_to_slack.testing.factories import AlertConfigFactory

WEBHOOK_URL = "http://slack.test/services/T000/B000/XXXX"


@pytest.fixture
def report_path(tmp_path: Path) -> Path:
    """Path of the report file inside a temporary directory."""
    return tmp_path / "output.xml"


@pytest.fixture
def config(report_path: Path) -> ActionConfig:
    """Create configuration posting to the test webhook."""
    return ActionConfig(
        report_path=report_path,
        webhook_url=SecretStr(WEBHOOK_URL),
        alerts=AlertConfigFactory.build(),
    )
