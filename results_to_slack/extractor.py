"""Extract aggregate statistics from a Robot Framework ``output.xml``.

Only a narrow slice of the document is understood: ``<stat>`` elements and
their attributes, plus the document-level ``generated`` attribute. The rest of
the report is never parsed.
"""

import logging
import re
from collections.abc import Iterator, Mapping
from datetime import datetime

from results_to_slack.models.stats import EPOCH, Stats

log = logging.getLogger(__name__)

SUMMARY_LABEL = "All Tests"
COUNT_ATTRIBUTES = ("pass", "fail", "skip")
GENERATED_FORMAT = "%Y%m%d %H:%M:%S.%f"

_STAT_ELEMENT = re.compile(
    r"<stat(?P<attributes>(?:\s[^>]*)?)>(?P<label>[^<]*)</stat\s*>"
)
_ATTRIBUTE = re.compile(
    r"""(?P<name>[A-Za-z_][\w.:-]*)\s*=\s*(?:"(?P<dq>[^"]*)"|'(?P<sq>[^']*)')"""
)
_GENERATED = re.compile(r"""\sgenerated\s*=\s*(?:"([^"]*)"|'([^']*)')""")
_COUNT = re.compile(r"\d+")


class ExtractionError(Exception):
    """Raised when the report does not contain usable statistics."""


class MissingSummaryRecordError(ExtractionError):
    """Raised when no ``All Tests`` summary record exists."""

    def __init__(self) -> None:
        super().__init__(f"No '{SUMMARY_LABEL}' summary record found in report")


class MissingAttributeError(ExtractionError):
    """Raised when the summary record lacks a count attribute."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Summary record is missing the '{name}' attribute")
        self.name = name


class InvalidAttributeError(ExtractionError):
    """Raised when a count attribute is not a non-negative integer."""

    def __init__(self, name: str, value: str) -> None:
        super().__init__(
            f"Summary record attribute '{name}' is not a non-negative integer: "
            f"{value!r}"
        )
        self.name = name
        self.value = value


class EmptyResultSetError(ExtractionError):
    """Raised when the summary record counts zero tests."""

    def __init__(self) -> None:
        super().__init__("Summary record counts zero tests")


def parse_attributes(text: str) -> Mapping[str, str]:
    """Parse ``name="value"`` pairs from the inside of a start tag.

    Attribute order is irrelevant; when a name repeats the first one wins.
    """
    attributes: dict[str, str] = {}
    for match in _ATTRIBUTE.finditer(text):
        value = match.group("dq")
        if value is None:
            value = match.group("sq")
        attributes.setdefault(match.group("name"), value)
    return attributes


def iter_stat_records(report_text: str) -> Iterator[tuple[str, Mapping[str, str]]]:
    """Yield ``(label, attributes)`` for every ``<stat>`` element."""
    for match in _STAT_ELEMENT.finditer(report_text):
        yield match.group("label").strip(), parse_attributes(match.group("attributes"))


def find_summary_record(report_text: str) -> Mapping[str, str]:
    """Return the attributes of the ``All Tests`` record."""
    for label, attributes in iter_stat_records(report_text):
        if label == SUMMARY_LABEL:
            return attributes
    raise MissingSummaryRecordError()


def read_count(attributes: Mapping[str, str], name: str) -> int:
    """Read a non-negative integer attribute from a summary record."""
    if name not in attributes:
        raise MissingAttributeError(name)
    value = attributes[name].strip()
    if not _COUNT.fullmatch(value):
        raise InvalidAttributeError(name, attributes[name])
    return int(value)


def parse_generated(report_text: str) -> datetime:
    """Parse the report's ``generated`` timestamp.

    The value is naive local time in ``yyyyMMdd HH:mm:ss.SSS`` form. A missing
    or malformed value yields ``EPOCH``.
    """
    match = _GENERATED.search(report_text)
    if match is None:
        log.warning("Report has no 'generated' timestamp, using epoch")
        return EPOCH

    raw = match.group(1) if match.group(1) is not None else match.group(2)
    try:
        return datetime.strptime(raw.strip(), GENERATED_FORMAT)
    except ValueError:
        log.warning("Unparsable 'generated' timestamp %r, using epoch", raw)
        return EPOCH


def extract_stats(report_text: str) -> Stats:
    """Extract pass/fail/skip totals from report text.

    Raises:
        MissingSummaryRecordError: No ``All Tests`` record exists
        MissingAttributeError: A count attribute is absent
        InvalidAttributeError: A count attribute is not a non-negative integer
        EmptyResultSetError: All three counts are zero

    """
    record = find_summary_record(report_text)
    passed, failed, skipped = (read_count(record, name) for name in COUNT_ATTRIBUTES)

    if passed + failed + skipped == 0:
        raise EmptyResultSetError()

    stats = Stats(
        passed=passed,
        failed=failed,
        skipped=skipped,
        timestamp=parse_generated(report_text),
    )
    log.info(
        "Extracted stats: passed=%d failed=%d skipped=%d success_rate=%.1f%%",
        stats.passed,
        stats.failed,
        stats.skipped,
        stats.success_rate,
    )
    return stats
