"""Pytest fixtures: fake settings and a recording Twilio transport."""

from urllib.parse import parse_qs

import httpx
import pytest
from fastapi.testclient import TestClient

from kjnotify.config import Settings
from kjnotify.main import create_app


class TwilioStub:
    """Stands in for the Twilio API and records every request it receives."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.status_code = 201
        self.payload = {"sid": "SM0123456789", "status": "queued"}
        self.error = None

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return httpx.Response(self.status_code, json=self.payload)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    def form(self, index: int = -1) -> dict:
        body = self.requests[index].content.decode()
        return {k: v[0] for k, v in parse_qs(body).items()}


@pytest.fixture
def settings():
    return Settings(
        _env_file=None,
        twilio_account_sid="AC123",
        twilio_auth_token="secret-token",
        twilio_phone_number="+15550000000",
        twilio_whatsapp_number="+15559999999",
        max_body_bytes=4096,
    )


@pytest.fixture
def twilio():
    return TwilioStub()


@pytest.fixture
def client(settings, twilio):
    return TestClient(create_app(settings, transport=twilio.transport))
