"""
Notification flows.

Each flow runs one request through the same pipeline:
validate the body, render the text, send it through the provider and
describe the outcome as a DispatchResult. Nothing raised inside the pipeline
escapes; every failure becomes a result and a log entry.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Generic

from kjnotify.config import Settings
from kjnotify.exceptions import ConfigurationError, ValidationError
from kjnotify.messages import OutboundMessage
from kjnotify.messages.otp import render_otp
from kjnotify.messages.sms import render_order_status
from kjnotify.messages.whatsapp import render_notification
from kjnotify.providers.base import MessageProvider
from kjnotify.providers.twilio import whatsapp_address
from kjnotify.results import (
    Delivered,
    DispatchResult,
    InternalFailure,
    ProviderFailure,
    ValidationFailure,
)
from kjnotify.schemas.notification import (
    OrderSmsRequest,
    PhoneOtpRequest,
    RequestT,
    WhatsAppNotificationRequest,
    parse_request,
)

logger = logging.getLogger(__name__)


class NotificationFlow(ABC, Generic[RequestT]):
    """One notification endpoint: a request model, a template and a sender."""

    name: str
    request_model: type[RequestT]
    provider_error: str = "Failed to send SMS"

    def __init__(self, settings: Settings, provider: MessageProvider):
        self.settings = settings
        self.provider = provider

    def sender(self, number: str, variable: str) -> str:
        if not number:
            raise ConfigurationError(f"{variable} must be set to send {self.name} messages")
        return number

    @abstractmethod
    def build_message(self, request: RequestT) -> OutboundMessage:
        ...

    async def dispatch(self, body: Any) -> DispatchResult:
        try:
            request = parse_request(self.request_model, body)
        except ValidationError as exc:
            logger.warning("%s: rejected request: %s", self.name, exc.message)
            return ValidationFailure(message=exc.message, fields=exc.fields)

        try:
            message = self.build_message(request)
            result = await self.provider.send_message(message)
        except Exception:
            logger.exception("%s: send failed via %s", self.name, self.provider.provider_type)
            return InternalFailure()

        if not result.ok:
            logger.error(
                "%s: %s API error %s: %s",
                self.name,
                self.provider.provider_type,
                result.status_code,
                result.payload,
            )
            return ProviderFailure(
                status_code=result.status_code,
                error=self.provider_error,
                details=result.payload,
            )

        logger.info("%s: message sent: %s", self.name, result.sid)
        return Delivered(message_sid=result.sid, status=result.status)


class WhatsAppNotificationFlow(NotificationFlow[WhatsAppNotificationRequest]):
    name = "booking-notification"
    request_model = WhatsAppNotificationRequest
    provider_error = "Failed to send WhatsApp message"

    def build_message(self, request: WhatsAppNotificationRequest) -> OutboundMessage:
        return OutboundMessage(
            to=whatsapp_address(request.to),
            from_=whatsapp_address(
                self.sender(self.settings.twilio_whatsapp_number, "TWILIO_WHATSAPP_NUMBER")
            ),
            body=render_notification(request),
        )


class OrderSmsFlow(NotificationFlow[OrderSmsRequest]):
    name = "order-sms"
    request_model = OrderSmsRequest

    def build_message(self, request: OrderSmsRequest) -> OutboundMessage:
        return OutboundMessage(
            to=request.to,
            from_=self.sender(self.settings.twilio_phone_number, "TWILIO_PHONE_NUMBER"),
            body=render_order_status(request),
        )


class PhoneOtpFlow(NotificationFlow[PhoneOtpRequest]):
    name = "phone-otp"
    request_model = PhoneOtpRequest

    def build_message(self, request: PhoneOtpRequest) -> OutboundMessage:
        return OutboundMessage(
            to=request.phone,
            from_=self.sender(self.settings.twilio_phone_number, "TWILIO_PHONE_NUMBER"),
            body=render_otp(request.otp, self.settings.app_brand_name),
        )


def build_flows(settings: Settings, provider: MessageProvider) -> dict[str, NotificationFlow]:
    """Instantiate every flow against one settings object and provider."""
    flows = (
        WhatsAppNotificationFlow(settings, provider),
        OrderSmsFlow(settings, provider),
        PhoneOtpFlow(settings, provider),
    )
    return {flow.name: flow for flow in flows}
