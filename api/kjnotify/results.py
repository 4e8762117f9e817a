"""Outcomes of a single notification dispatch.

Every request ends in exactly one of these. The router turns them into HTTP
responses via :func:`kjnotify.response.to_response`.
"""

from dataclasses import dataclass, field
from typing import Any, Optional, Union


@dataclass(frozen=True)
class Delivered:
    message_sid: Optional[str]
    status: Optional[str]


@dataclass(frozen=True)
class ValidationFailure:
    message: str
    fields: tuple[str, ...] = ()


@dataclass(frozen=True)
class ProviderFailure:
    status_code: int
    error: str
    details: Any = field(default_factory=dict)


@dataclass(frozen=True)
class InternalFailure:
    pass


DispatchResult = Union[Delivered, ValidationFailure, ProviderFailure, InternalFailure]
