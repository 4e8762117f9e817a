from typing import Any, ClassVar, Optional, TypeVar

from pydantic import BaseModel, Field, ValidationError as SchemaError, field_validator

from kjnotify.exceptions import ValidationError

_REQUEST_CONFIG = {
    "populate_by_name": True,
    "extra": "ignore",
    "coerce_numbers_to_str": True,
}


class NotificationRequest(BaseModel):
    """Base for inbound request bodies. Blank strings count as absent; other values are kept as sent."""

    model_config = _REQUEST_CONFIG

    # JSON field names that must be present, in the order they are reported
    required_fields: ClassVar[tuple[str, ...]] = ()
    missing_message: ClassVar[str] = ""

    @field_validator("*", mode="after")
    @classmethod
    def _blank_to_none(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value

    def missing(self) -> tuple[str, ...]:
        by_alias = self.model_dump(by_alias=True)
        return tuple(name for name in self.required_fields if by_alias.get(name) is None)


class WhatsAppNotificationRequest(NotificationRequest):
    required_fields: ClassVar[tuple[str, ...]] = ("to",)
    missing_message: ClassVar[str] = "Missing recipient phone number"

    type: Optional[str] = None
    to: Optional[str] = None
    order_number: Optional[str] = Field(None, alias="orderNumber")
    booking_number: Optional[str] = Field(None, alias="bookingNumber")
    status: Optional[str] = None
    scheduled_time: Optional[str] = Field(None, alias="scheduledTime")
    total: Optional[str] = None
    store_name: Optional[str] = Field(None, alias="storeName")
    message: Optional[str] = None


class OrderSmsRequest(NotificationRequest):
    required_fields: ClassVar[tuple[str, ...]] = ("to", "orderNumber", "status")
    missing_message: ClassVar[str] = "Missing required fields: to, orderNumber, status"

    to: Optional[str] = None
    order_number: Optional[str] = Field(None, alias="orderNumber")
    status: Optional[str] = None
    estimated_time: Optional[str] = Field(None, alias="estimatedTime")


class PhoneOtpRequest(NotificationRequest):
    required_fields: ClassVar[tuple[str, ...]] = ("phone", "otp")
    missing_message: ClassVar[str] = "Missing required fields: phone, otp"

    phone: Optional[str] = None
    otp: Optional[str] = None


RequestT = TypeVar("RequestT", bound=NotificationRequest)


def parse_request(model: type[RequestT], body: Any) -> RequestT:
    """
    Validate a decoded JSON body against a request model.

    Raises ValidationError when the body is not an object, a field holds a
    value that is not text or a number, or a required field is absent.
    """
    if not isinstance(body, dict):
        raise ValidationError("Invalid request body")

    try:
        request = model.model_validate(body)
    except SchemaError as exc:
        names = sorted({str(err["loc"][0]) for err in exc.errors() if err.get("loc")})
        raise ValidationError(f"Invalid field(s): {', '.join(names)}", tuple(names)) from exc

    missing = request.missing()
    if missing:
        raise ValidationError(model.missing_message, missing)
    return request
