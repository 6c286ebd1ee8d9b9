"""Decide whether a run is worth a notification and build the message."""

import logging

from results_to_slack.config import AlertConfig
from results_to_slack.extractor import ExtractionError
from results_to_slack.models.message import Attachment, AttachmentField, SlackMessage
from results_to_slack.models.outcome import Decision, Deliver, Failed, Skipped
from results_to_slack.models.stats import Stats

log = logging.getLogger(__name__)

GREEN = "#2EB67D"
AMBER = "#ECB22E"
RED = "#E01E5A"

MESSAGE_TITLE = "Robot Test Results"


def select_color(success_rate: float) -> str:
    """Return the attachment color band for a success rate.

    100 is green, above 80 is amber, 80 and below is red.
    """
    if success_rate == 100:
        return GREEN
    if success_rate > 80:
        return AMBER
    return RED


def message_title(config: AlertConfig) -> str:
    if config.run_number:
        return f"{MESSAGE_TITLE} #{config.run_number}"
    return MESSAGE_TITLE


def build_text_message(text: str, config: AlertConfig) -> SlackMessage:
    """Build a plain message without attachments."""
    return SlackMessage(
        channel=config.channel,
        username=config.username,
        icon_emoji=config.icon,
        text=text,
    )


def build_stats_message(stats: Stats, config: AlertConfig) -> SlackMessage:
    """Build the message reporting a run's statistics."""
    attachment = Attachment(
        color=select_color(stats.success_rate),
        text=config.header,
        ts=int(stats.timestamp.timestamp()),
        fields=(
            AttachmentField(title="*Passed:*", value=str(stats.passed)),
            AttachmentField(title="*Failed:*", value=str(stats.failed)),
            AttachmentField(title="*Skipped:*", value=str(stats.skipped)),
            AttachmentField(
                title="*Success Rate:*", value=f"{stats.success_rate}%"
            ),
        ),
    )
    return SlackMessage(
        channel=config.channel,
        username=config.username,
        icon_emoji=config.icon,
        text=message_title(config),
        attachments=(attachment,),
    )


def decide(report: Stats | ExtractionError | None, config: AlertConfig) -> Decision:
    """Apply the alert conditions to a run; the first matching rule wins.

    Args:
        report: Extracted stats, the extraction error, or None when no report
            could be read
        config: Alert conditions and display settings

    Returns:
        ``Deliver`` with the message to post, ``Skipped`` when nothing should
        be posted, or ``Failed`` when the report could not be understood

    """
    if report is None:
        if config.notify_on_no_output:
            return Deliver(
                kind="no-output",
                message=build_text_message(config.no_output_found_message, config),
            )
        return Skipped(reason="No report found and no-output alerts are disabled")

    if isinstance(report, ExtractionError):
        return Failed(reason=str(report))

    if report.success_rate == 100:
        if config.notify_on_success:
            return Deliver(kind="success", message=build_stats_message(report, config))
        return Skipped(reason="All tests passed and success alerts are disabled")

    if report.failed > 0:
        if config.notify_on_failure:
            return Deliver(kind="failure", message=build_stats_message(report, config))
        log.info("Failure alerts are disabled, checking skipped tests")

    if report.skipped > 0:
        if config.notify_on_skipped:
            return Deliver(kind="skipped", message=build_stats_message(report, config))
        return Skipped(reason="Skipped-test alerts are disabled")

    return Skipped(reason="No alert condition matched")
