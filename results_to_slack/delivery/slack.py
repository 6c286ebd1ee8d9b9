"""Slack incoming-webhook sender."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from dataclasses import dataclass, field

import aiohttp
from yarl import URL

from results_to_slack.config import ActionConfig
from results_to_slack.delivery.base import DeliveryError, MessageSender
from results_to_slack.models.message import SlackMessage

log = logging.getLogger(__name__)


@dataclass(frozen=True, kw_only=True)
class SlackWebhookSender(MessageSender):
    """Posts messages to a Slack incoming webhook."""

    webhook_url: URL = field(repr=False)
    session: aiohttp.ClientSession = field(repr=False)

    @classmethod
    @asynccontextmanager
    async def from_config(
        cls, config: ActionConfig
    ) -> AsyncGenerator["SlackWebhookSender", None]:
        """Create sender with managed session lifecycle."""
        timeout = aiohttp.ClientTimeout(total=config.request_timeout)
        async with aiohttp.ClientSession(timeout=timeout) as session:
            yield cls(
                webhook_url=URL(config.webhook_url.get_secret_value()),
                session=session,
            )

    async def send(self, message: SlackMessage) -> None:
        """Post the message; any non-2xx response is a delivery failure."""
        # The webhook path is a credential, only the host is logged
        log.info(
            "Posting message to webhook host=%s channel=%s",
            self.webhook_url.host,
            message.channel,
        )

        try:
            async with self.session.post(
                self.webhook_url, json=message.to_payload()
            ) as response:
                if not 200 <= response.status < 300:
                    text = await response.text(errors="replace")
                    raise DeliveryError(
                        f"Webhook rejected message: {response.status} {text}"
                    )
        except (aiohttp.ClientError, TimeoutError) as e:
            raise DeliveryError(f"Webhook request failed: {e}") from e

        log.info("Message delivered to channel %s", message.channel)
