"""
SimulatorGuestMessageGenerator — template messages per stage for tests. No LLM calls.
"""

from lana.domain.guest_message import (
    GuestMessageError,
    GuestMessageGenerator,
    GuestMessageRequest,
)

_OPENERS = {
    "welcome": "Welcome! We're so happy you chose to stay with us.",
    "checkin": "Your check-in day is here, and everything is ready for you.",
    "midstay": "We hope you're enjoying your stay so far.",
    "checkout": "Thank you for staying with us. A quick reminder about checkout tomorrow.",
    "problem": "We're sorry to hear something isn't right, and we're on it.",
}


class SimulatorGuestMessageGenerator(GuestMessageGenerator):

    async def generate(self, request: GuestMessageRequest) -> str:
        if not request.guest_name.strip():
            raise GuestMessageError("Failed to generate message: guest name is required")

        opener = _OPENERS.get(
            request.communication_stage,
            f"Here is a quick {request.communication_stage} note for you.",
        )
        lines = [f"Hi {request.guest_name},", "", opener]
        if request.special_context:
            lines.append(f"We kept in mind: {request.special_context}.")
        lines += ["", "Let us know if there's anything we can do for you!"]
        return "\n".join(lines)
