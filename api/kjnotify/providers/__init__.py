"""Messaging provider abstraction layer."""

from kjnotify.providers.base import MessageProvider, ProviderResult
from kjnotify.providers.twilio import TwilioProvider, whatsapp_address

__all__ = [
    "MessageProvider",
    "ProviderResult",
    "TwilioProvider",
    "whatsapp_address",
]
