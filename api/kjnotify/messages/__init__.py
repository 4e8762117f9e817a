"""Base types for outbound message renderers."""

from dataclasses import dataclass


@dataclass(frozen=True)
class OutboundMessage:
    """A rendered text message ready for the provider."""
    to: str
    from_: str
    body: str
