"""Message delivery to the notification endpoint."""

from results_to_slack.delivery.base import DeliveryError, MessageSender
from results_to_slack.delivery.slack import SlackWebhookSender

__all__ = ["DeliveryError", "MessageSender", "SlackWebhookSender"]
