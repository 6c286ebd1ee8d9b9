"""Slack incoming-webhook message payload."""

from collections.abc import Sequence
from typing import Any

from pydantic import Field

from results_to_slack.models.base import Model


class AttachmentField(Model):
    """Short title/value pair rendered inside an attachment."""

    title: str
    value: str
    short: bool = True


class Attachment(Model):
    """Colored attachment carrying the run statistics."""

    color: str = Field(..., description="Hex color of the attachment bar")
    text: str = Field(default="", description="Header text")
    mrkdwn_in: Sequence[str] = Field(default=("text", "fields"))
    ts: int = Field(default=0, description="Epoch seconds used for ordering")
    fields: Sequence[AttachmentField] = Field(default_factory=tuple)


class SlackMessage(Model):
    """Message envelope posted to the webhook."""

    channel: str
    username: str = ""
    icon_emoji: str = ""
    text: str
    attachments: Sequence[Attachment] = Field(default_factory=tuple)

    def to_payload(self) -> dict[str, Any]:
        """Return the JSON body, leaving out empty display overrides."""
        payload = self.model_dump(mode="json")
        for key in ("username", "icon_emoji"):
            if not payload[key]:
                del payload[key]
        return payload
