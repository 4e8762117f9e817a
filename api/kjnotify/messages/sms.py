"""Order status SMS templates."""

from enum import Enum

from kjnotify.schemas.notification import OrderSmsRequest


class OrderStatus(str, Enum):
    ACCEPTED = "accepted"
    PICKED_UP = "picked_up"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"


def render_order_status(req: OrderSmsRequest) -> str:
    """Render the SMS text for an order status change."""
    order = req.order_number
    try:
        status = OrderStatus(req.status)
    except ValueError:
        return f"Order {order} status update: {req.status}"

    if status is OrderStatus.ACCEPTED:
        text = f"Order {order} confirmed! Your order is being prepared."
        if req.estimated_time:
            text += f" Estimated delivery: {req.estimated_time}"
        return text
    if status is OrderStatus.PICKED_UP:
        return (
            f"Order {order} is out for delivery! Your order is on its way. "
            "Track your delivery in real-time."
        )
    if status is OrderStatus.DELIVERED:
        return f"Order {order} delivered! Thank you for choosing us. Enjoy your order!"
    return f"Order {order} has been cancelled. If you have questions, please contact support."
