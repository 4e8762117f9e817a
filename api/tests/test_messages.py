from kjnotify.messages.otp import render_otp
from kjnotify.messages.sms import render_order_status
from kjnotify.messages.whatsapp import NotificationType, render_notification
from kjnotify.schemas.notification import OrderSmsRequest, WhatsAppNotificationRequest


def _whatsapp(**fields) -> WhatsAppNotificationRequest:
    return WhatsAppNotificationRequest.model_validate({"to": "+15551234567", **fields})


def _sms(status: str, **fields) -> OrderSmsRequest:
    return OrderSmsRequest.model_validate(
        {"to": "+15551234567", "orderNumber": "ORD-42", "status": status, **fields}
    )


def test_order_status_update_with_all_fields():
    text = render_notification(
        _whatsapp(
            type="order_status_update",
            orderNumber="ORD-42",
            status="preparing",
            message="Your driver is nearby.",
        )
    )

    assert text == (
        "📦 Order Update\n\n"
        "Order: ORD-42\n"
        "Status: PREPARING\n\n"
        "Your driver is nearby.\n\n"
        "Track your order in the app!"
    )


def test_order_status_update_omits_absent_fields():
    text = render_notification(_whatsapp(type="order_status_update"))

    assert text == "📦 Order Update\n\n\nTrack your order in the app!"
    assert "Order:" not in text
    assert "Status:" not in text


def test_merchant_new_order_prefixes_total_with_currency():
    text = render_notification(
        _whatsapp(type="merchant_new_order", orderNumber="ORD-7", total=24.5)
    )

    assert text.startswith("🔔 NEW ORDER ALERT\n\n")
    assert "Order: ORD-7\n" in text
    assert "Total: $24.5\n" in text
    assert text.endswith("\n\nPlease confirm and prepare the order.")


def test_driver_delivery_assignment_includes_pickup_location():
    text = render_notification(
        _whatsapp(type="driver_delivery_assignment", orderNumber="ORD-9", storeName="Corner Deli")
    )

    assert text == (
        "🚗 NEW DELIVERY ASSIGNMENT\n\n"
        "Order: ORD-9\n"
        "Pickup from: Corner Deli\n\n"
        "Please accept and start delivery."
    )


def test_service_booking_update():
    text = render_notification(
        _whatsapp(
            type="service_booking_update",
            bookingNumber="BK-1",
            status="confirmed",
            scheduledTime="Mon 10:00",
        )
    )

    assert text == (
        "Service Booking Update\n\n"
        "Booking: BK-1\n"
        "Status: CONFIRMED\n"
        "Scheduled: Mon 10:00\n\n"
        "Thank you for using our service!"
    )


def test_service_booking_update_skips_missing_schedule():
    text = render_notification(_whatsapp(type="service_booking_update", bookingNumber="BK-1"))

    assert "Booking: BK-1" in text
    assert "Scheduled:" not in text
    assert "Status:" not in text


def test_unknown_type_falls_back_to_free_text():
    assert render_notification(_whatsapp(type="promo", message="20% off today")) == "20% off today"


def test_unknown_type_without_text_uses_default():
    assert render_notification(_whatsapp(type="promo")) == "You have a new notification."
    assert render_notification(_whatsapp()) == "You have a new notification."


def test_notification_type_parse():
    assert NotificationType.parse("merchant_new_order") is NotificationType.MERCHANT_NEW_ORDER
    assert NotificationType.parse("merchant-new-order") is None
    assert NotificationType.parse(None) is None


def test_sms_accepted_without_estimate():
    assert render_order_status(_sms("accepted")) == (
        "Order ORD-42 confirmed! Your order is being prepared."
    )


def test_sms_accepted_with_estimate():
    text = render_order_status(_sms("accepted", estimatedTime="25 min"))

    assert text == "Order ORD-42 confirmed! Your order is being prepared. Estimated delivery: 25 min"


def test_sms_fixed_statuses():
    assert render_order_status(_sms("picked_up")) == (
        "Order ORD-42 is out for delivery! Your order is on its way. "
        "Track your delivery in real-time."
    )
    assert render_order_status(_sms("delivered")) == (
        "Order ORD-42 delivered! Thank you for choosing us. Enjoy your order!"
    )
    assert render_order_status(_sms("cancelled")) == (
        "Order ORD-42 has been cancelled. If you have questions, please contact support."
    )


def test_sms_unknown_status_embeds_raw_value():
    assert render_order_status(_sms("foo")) == "Order ORD-42 status update: foo"


def test_sms_status_match_is_exact():
    assert render_order_status(_sms("Accepted")) == "Order ORD-42 status update: Accepted"


def test_otp_message():
    text = render_otp("123456", "KJ Delivery")

    assert text == "Your KJ Delivery verification code is: 123456. This code expires in 10 minutes."
    assert "123456" in text
    assert "10 minutes" in text


def test_padded_values_render_verbatim():
    text = render_notification(
        _whatsapp(type="driver_delivery_assignment", storeName="  Corner Deli  ")
    )

    assert "Pickup from:   Corner Deli  \n" in text
