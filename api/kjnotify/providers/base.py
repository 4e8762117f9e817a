"""Base messaging provider interface."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Optional

from kjnotify.messages import OutboundMessage


@dataclass(frozen=True)
class ProviderResult:
    """Raw outcome of a provider call. Success is judged by the caller."""
    status_code: int
    payload: Any = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300

    @property
    def sid(self) -> Optional[str]:
        return self.payload.get("sid") if isinstance(self.payload, dict) else None

    @property
    def status(self) -> Optional[str]:
        return self.payload.get("status") if isinstance(self.payload, dict) else None


class MessageProvider(ABC):
    """
    Common interface for text message providers.
    Each provider implements send_message() using its own API.
    """

    @property
    @abstractmethod
    def provider_type(self) -> str:
        ...

    @abstractmethod
    async def send_message(self, message: OutboundMessage) -> ProviderResult:
        """Send one text message and return the provider's raw response."""
        ...
