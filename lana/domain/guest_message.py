"""
GuestMessageGenerator port — hosts ask for a ready-made message
(welcome, check-in, mid-stay, checkout, ...) tailored to a guest.

Like the auto-reply generator it fails hard: GuestMessageError, never
placeholder text.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass

COMMUNICATION_STAGES: tuple[str, ...] = (
    "welcome", "checkin", "midstay", "checkout", "problem",
)


@dataclass
class GuestMessageRequest:
    """What the host wants written."""
    guest_name: str
    guest_type: str                   # "first-time", "business", "family", "couple"
    communication_stage: str          # one of COMMUNICATION_STAGES, free text allowed
    tone: str                         # e.g. "friendly", "professional"
    special_context: str | None = None


class GuestMessageError(RuntimeError):
    """The message could not be generated."""


class GuestMessageGenerator(ABC):

    @abstractmethod
    async def generate(self, request: GuestMessageRequest) -> str:
        """Return the message body, or raise GuestMessageError."""
        ...
