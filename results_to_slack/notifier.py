"""Notifier coordinating extraction, policy and delivery for one run."""

import logging
from dataclasses import dataclass

from results_to_slack.config import AlertConfig
from results_to_slack.delivery.base import DeliveryError, MessageSender
from results_to_slack.extractor import ExtractionError, extract_stats
from results_to_slack.models.outcome import (
    Deliver,
    Failed,
    NotificationOutcome,
    Sent,
)
from results_to_slack.models.stats import Stats
from results_to_slack.policy import decide

log = logging.getLogger(__name__)


@dataclass(frozen=True, kw_only=True)
class ResultsNotifier:
    """Turns one report into at most one delivered message."""

    sender: MessageSender
    alerts: AlertConfig

    async def notify(self, report_text: str | None) -> NotificationOutcome:
        """Extract stats, apply the alert conditions and deliver the message.

        Args:
            report_text: Report contents, or None when no report was found

        Returns:
            ``Sent`` when a message was delivered, ``Skipped`` when the alert
            conditions did not ask for one, ``Failed`` when the report could
            not be understood or the delivery failed

        """
        report: Stats | ExtractionError | None = None
        if report_text is not None:
            try:
                report = extract_stats(report_text)
            except ExtractionError as e:
                log.error("Error getting stats from report: %s", e)
                report = e

        decision = decide(report, self.alerts)
        if not isinstance(decision, Deliver):
            return decision

        log.info("Sending %s notification", decision.kind)
        try:
            await self.sender.send(decision.message)
        except DeliveryError as e:
            log.error("Notification delivery failed: %s", e)
            return Failed(reason=str(e))

        return Sent(kind=decision.kind, message=decision.message)
