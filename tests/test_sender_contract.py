"""
Adapter contract tests for MessageSender — console and HTTP.

The HTTP adapter runs against a mocked requests session; nothing
leaves the machine.
"""

import itertools
import threading
from unittest.mock import MagicMock

import pytest
import requests

from lana.communication.console_sender import ConsoleMessageSender
from lana.communication.factory import create_message_sender
from lana.communication.http_sender import HttpMessageSender
from lana.communication.ports import OutgoingReply
from tests.contracts.message_sender_contract import MessageSenderContract


def _ok_response(message_id) -> MagicMock:
    resp = MagicMock()
    resp.json.return_value = {"id": message_id}
    resp.raise_for_status.return_value = None
    return resp


def _mocked_http_sender() -> HttpMessageSender:
    sender = HttpMessageSender(base_url="https://messaging.example.com/api/", api_token="tok")
    ids = itertools.count(1)
    sender.session = MagicMock()
    sender.session.post.side_effect = lambda *a, **kw: _ok_response(next(ids))
    return sender


# ---------------------------------------------------------------------------
# Contract
# ---------------------------------------------------------------------------


class TestConsoleSenderContract(MessageSenderContract):

    def create_sender(self):
        return ConsoleMessageSender()


class TestHttpSenderContract(MessageSenderContract):

    def create_sender(self):
        return _mocked_http_sender()


# ---------------------------------------------------------------------------
# Adapter specifics
# ---------------------------------------------------------------------------


@pytest.mark.asyncio
async def test_console_sender_keeps_sent_replies(capsys):
    sender = ConsoleMessageSender()
    await sender.send(OutgoingReply("host-1", "t1", "Sophie", "Hello Sophie!", delay_minutes=5))

    assert [r.body for r in sender.sent] == ["Hello Sophie!"]
    out = capsys.readouterr().out
    assert "TO GUEST: Sophie" in out
    assert "DELAY: 5 min" in out


@pytest.mark.asyncio
async def test_http_sender_posts_json():
    sender = _mocked_http_sender()
    await sender.send(OutgoingReply("host-1", "t42", "Sophie", "Hello Sophie!", delay_minutes=3))

    args, kwargs = sender.session.post.call_args
    assert args[0] == "https://messaging.example.com/api/threads/t42/messages"
    assert kwargs["json"] == {
        "hostId": "host-1",
        "guestName": "Sophie",
        "message": "Hello Sophie!",
        "delayMinutes": 3,
    }
    assert kwargs["timeout"] == 10.0


@pytest.mark.asyncio
async def test_http_sender_raises_on_http_error():
    sender = _mocked_http_sender()
    failing = MagicMock()
    failing.raise_for_status.side_effect = requests.HTTPError("502 Bad Gateway")
    sender.session.post.side_effect = None
    sender.session.post.return_value = failing

    with pytest.raises(requests.HTTPError):
        await sender.send(OutgoingReply("host-1", "t1", "Sophie", "Hello"))



def _raw_response(status: int, body: bytes) -> requests.Response:
    resp = requests.Response()
    resp.status_code = status
    resp._content = body
    return resp


@pytest.mark.asyncio
async def test_http_sender_accepts_no_content():
    sender = _mocked_http_sender()
    sender.session.post.side_effect = None
    sender.session.post.return_value = _raw_response(204, b"")

    assert await sender.send(OutgoingReply("host-1", "t1", "Sophie", "Hello")) == ""


@pytest.mark.asyncio
async def test_http_sender_ignores_body_without_id():
    sender = _mocked_http_sender()
    sender.session.post.side_effect = None
    sender.session.post.return_value = _raw_response(200, b"[]")

    assert await sender.send(OutgoingReply("host-1", "t1", "Sophie", "Hello")) == ""


@pytest.mark.asyncio
async def test_http_sender_posts_off_the_event_loop_thread():
    sender = _mocked_http_sender()
    seen = []

    def post(*a, **kw):
        seen.append(threading.get_ident())
        return _ok_response("m-1")

    sender.session.post.side_effect = post

    assert await sender.send(OutgoingReply("host-1", "t1", "Sophie", "Hello")) == "m-1"
    assert seen and seen[0] != threading.get_ident()


def test_factory_defaults_to_console(monkeypatch):
    monkeypatch.delenv("LANA_SEND_CHANNEL", raising=False)
    assert isinstance(create_message_sender(), ConsoleMessageSender)


def test_factory_builds_http_sender(monkeypatch):
    monkeypatch.setenv("LANA_MESSAGING_URL", "https://messaging.example.com/api")
    monkeypatch.setenv("LANA_MESSAGING_TOKEN", "tok")
    sender = create_message_sender("http")
    assert isinstance(sender, HttpMessageSender)
    assert sender.session.headers["Authorization"] == "Bearer tok"


def test_factory_rejects_unknown_channel():
    with pytest.raises(ValueError):
        create_message_sender("carrier-pigeon")
