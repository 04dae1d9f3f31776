import os

from .ports import MessageSender


def create_message_sender(channel: str | None = None) -> MessageSender:
    """
    Factory: create the right adapter based on config.

    The channel can be passed explicitly or read from the
    LANA_SEND_CHANNEL env var. Defaults to "console".
    """
    channel = channel or os.environ.get("LANA_SEND_CHANNEL", "console")

    if channel == "http":
        from .http_sender import HttpMessageSender

        return HttpMessageSender(
            base_url=os.environ["LANA_MESSAGING_URL"],
            api_token=os.environ["LANA_MESSAGING_TOKEN"],
            timeout=float(os.environ.get("LANA_MESSAGING_TIMEOUT", "10")),
        )

    if channel == "console":
        from .console_sender import ConsoleMessageSender

        return ConsoleMessageSender()

    raise ValueError(f"Unknown send channel: {channel!r}")
