from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass
class OutgoingReply:
    """What we send to the guest."""

    host_id: str
    thread_id: str
    guest_name: str
    body: str
    delay_minutes: int = 0  # host's configured response delay


class MessageSender(ABC):
    """
    Port: how a finished reply reaches the guest.

    The pipeline depends ONLY on this interface.
    It doesn't know or care whether the reply goes through the
    platform messaging API or is printed on a console.
    """

    @abstractmethod
    async def send(self, reply: OutgoingReply) -> str:
        """
        Deliver the reply.
        Returns a tracking ID (platform message ID, console ID, etc.)
        """
        ...
