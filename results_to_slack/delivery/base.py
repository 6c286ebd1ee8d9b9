"""Abstract base class for message senders."""

from abc import ABC, abstractmethod

from results_to_slack.models.message import SlackMessage


class DeliveryError(Exception):
    """Raised when a message could not be delivered."""


class MessageSender(ABC):
    """Delivers a single message to its endpoint."""

    @abstractmethod
    async def send(self, message: SlackMessage) -> None:
        """Deliver the message.

        Raises:
            DeliveryError: The endpoint rejected the message or was unreachable

        """
