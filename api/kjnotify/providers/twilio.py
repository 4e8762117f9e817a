"""Twilio messaging provider (https://www.twilio.com/docs/messaging/api)."""

import logging
from typing import Optional

import httpx

from kjnotify.config import Settings
from kjnotify.exceptions import ConfigurationError
from kjnotify.messages import OutboundMessage
from kjnotify.providers.base import MessageProvider, ProviderResult

logger = logging.getLogger(__name__)

WHATSAPP_PREFIX = "whatsapp:"


def whatsapp_address(number: str) -> str:
    """Prefix a phone number for the WhatsApp channel, at most once."""
    if number.startswith(WHATSAPP_PREFIX):
        return number
    return f"{WHATSAPP_PREFIX}{number}"


class TwilioProvider(MessageProvider):
    """Send SMS and WhatsApp messages via the Twilio Messages REST API."""

    @property
    def provider_type(self) -> str:
        return "twilio"

    def __init__(
        self,
        account_sid: str,
        auth_token: str,
        api_base: str = "https://api.twilio.com/2010-04-01",
        timeout: float = 15,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.account_sid = account_sid
        self.auth_token = auth_token
        self.api_base = api_base.rstrip("/")
        self.timeout = timeout
        self.transport = transport

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> "TwilioProvider":
        return cls(
            account_sid=settings.twilio_account_sid,
            auth_token=settings.twilio_auth_token,
            api_base=settings.twilio_api_base,
            timeout=settings.twilio_timeout_seconds,
            transport=transport,
        )

    @property
    def messages_url(self) -> str:
        return f"{self.api_base}/Accounts/{self.account_sid}/Messages.json"

    async def send_message(self, message: OutboundMessage) -> ProviderResult:
        if not self.account_sid or not self.auth_token:
            raise ConfigurationError("Twilio account SID and auth token must be set")

        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            resp = await client.post(
                self.messages_url,
                auth=(self.account_sid, self.auth_token),
                data={
                    "To": message.to,
                    "From": message.from_,
                    "Body": message.body,
                },
            )

        logger.debug("Twilio responded %s for to=%s", resp.status_code, message.to)
        return ProviderResult(status_code=resp.status_code, payload=resp.json())
