"""Read the test report from disk."""

import logging
from pathlib import Path

log = logging.getLogger(__name__)


class ReportUnavailableError(Exception):
    """Raised when the report file is missing or unreadable."""


def read_report(path: Path) -> str:
    """Read the report as UTF-8 text.

    Raises:
        ReportUnavailableError: The file is missing, unreadable or not UTF-8

    """
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ReportUnavailableError(f"Cannot read report {path}: {e}") from e

    log.info("Read report %s (%d characters)", path, len(text))
    return text
