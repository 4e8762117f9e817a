"""WhatsApp notification templates, keyed by notification type."""

from enum import Enum
from typing import Callable, Optional

from kjnotify.schemas.notification import WhatsAppNotificationRequest

DEFAULT_MESSAGE = "You have a new notification."


class NotificationType(str, Enum):
    ORDER_STATUS_UPDATE = "order_status_update"
    MERCHANT_NEW_ORDER = "merchant_new_order"
    DRIVER_DELIVERY_ASSIGNMENT = "driver_delivery_assignment"
    SERVICE_BOOKING_UPDATE = "service_booking_update"

    @classmethod
    def parse(cls, value: Optional[str]) -> Optional["NotificationType"]:
        """Return the matching member, or None for unknown values."""
        try:
            return cls(value)
        except ValueError:
            return None


def _order_status_update(req: WhatsAppNotificationRequest) -> str:
    lines = ["📦 Order Update", ""]
    if req.order_number:
        lines.append(f"Order: {req.order_number}")
    if req.status:
        lines.append(f"Status: {req.status.upper()}")
    if req.message:
        lines += ["", req.message]
    lines += ["", "Track your order in the app!"]
    return "\n".join(lines)


def _merchant_new_order(req: WhatsAppNotificationRequest) -> str:
    lines = ["🔔 NEW ORDER ALERT", ""]
    if req.order_number:
        lines.append(f"Order: {req.order_number}")
    if req.total:
        lines.append(f"Total: ${req.total}")
    lines += ["", "Please confirm and prepare the order."]
    return "\n".join(lines)


def _driver_delivery_assignment(req: WhatsAppNotificationRequest) -> str:
    lines = ["🚗 NEW DELIVERY ASSIGNMENT", ""]
    if req.order_number:
        lines.append(f"Order: {req.order_number}")
    if req.store_name:
        lines.append(f"Pickup from: {req.store_name}")
    lines += ["", "Please accept and start delivery."]
    return "\n".join(lines)


def _service_booking_update(req: WhatsAppNotificationRequest) -> str:
    lines = ["Service Booking Update", ""]
    if req.booking_number:
        lines.append(f"Booking: {req.booking_number}")
    if req.status:
        lines.append(f"Status: {req.status.upper()}")
    if req.scheduled_time:
        lines.append(f"Scheduled: {req.scheduled_time}")
    lines += ["", "Thank you for using our service!"]
    return "\n".join(lines)


_RENDERERS: dict[NotificationType, Callable[[WhatsAppNotificationRequest], str]] = {
    NotificationType.ORDER_STATUS_UPDATE: _order_status_update,
    NotificationType.MERCHANT_NEW_ORDER: _merchant_new_order,
    NotificationType.DRIVER_DELIVERY_ASSIGNMENT: _driver_delivery_assignment,
    NotificationType.SERVICE_BOOKING_UPDATE: _service_booking_update,
}


def render_notification(req: WhatsAppNotificationRequest) -> str:
    """
    Render the WhatsApp text for a notification request.

    Unknown or missing types fall back to the caller's free-text message,
    then to a generic line.
    """
    notification_type = NotificationType.parse(req.type)
    if notification_type is None:
        return req.message or DEFAULT_MESSAGE
    return _RENDERERS[notification_type](req)
