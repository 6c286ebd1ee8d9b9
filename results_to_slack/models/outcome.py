"""Results of the notification policy and of a whole run."""

from dataclasses import dataclass
from typing import Literal

from results_to_slack.models.message import SlackMessage

type MessageKind = Literal["success", "failure", "skipped", "no-output"]


@dataclass(frozen=True, kw_only=True)
class Skipped:
    """No notification is sent."""

    reason: str


@dataclass(frozen=True, kw_only=True)
class Deliver:
    """The policy asks for ``message`` to be delivered."""

    kind: MessageKind
    message: SlackMessage


@dataclass(frozen=True, kw_only=True)
class Sent:
    """The message was delivered."""

    kind: MessageKind
    message: SlackMessage


@dataclass(frozen=True, kw_only=True)
class Failed:
    """The run failed, either reading the report or delivering the message."""

    reason: str


type Decision = Skipped | Deliver | Failed
type NotificationOutcome = Skipped | Sent | Failed
