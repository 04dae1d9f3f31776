import asyncio
import logging

import requests

from .ports import MessageSender, OutgoingReply

log = logging.getLogger(__name__)


def _message_id(resp: requests.Response) -> str:
    """Message ID from the response body; "" when the platform sends none."""
    try:
        data = resp.json()
    except ValueError:
        return ""
    if not isinstance(data, dict):
        return ""
    return str(data.get("id", ""))


class HttpMessageSender(MessageSender):
    """Adapter: post replies to the platform messaging API."""

    def __init__(self, base_url: str, api_token: str, timeout: float = 10.0):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = requests.Session()
        self.session.headers.update(
            {
                "Authorization": f"Bearer {api_token}",
                "Content-Type": "application/json",
                "Cache-Control": "no-cache",
            }
        )

    async def send(self, reply: OutgoingReply) -> str:
        url = f"{self.base_url}/threads/{reply.thread_id}/messages"
        # blocking HTTP call runs off the event loop
        resp = await asyncio.to_thread(
            self.session.post,
            url,
            json={
                "hostId": reply.host_id,
                "guestName": reply.guest_name,
                "message": reply.body,
                "delayMinutes": reply.delay_minutes,
            },
            timeout=self.timeout,
        )
        resp.raise_for_status()
        # delivered; the body may be empty or carry no id
        message_id = _message_id(resp)
        log.info("thread=%s reply posted id=%s", reply.thread_id, message_id or "?")
        return message_id
