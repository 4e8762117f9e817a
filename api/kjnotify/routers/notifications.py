import logging

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from kjnotify.flows import NotificationFlow
from kjnotify.response import to_response
from kjnotify.results import InternalFailure

logger = logging.getLogger(__name__)

router = APIRouter(tags=["notifications"])


def _flow(request: Request, name: str) -> NotificationFlow:
    return request.app.state.flows[name]


async def _run_flow(request: Request, name: str) -> JSONResponse:
    flow = _flow(request, name)
    try:
        body = await request.json()
    except ValueError:
        logger.warning("%s: request body is not valid JSON", name)
        return to_response(InternalFailure())
    return to_response(await flow.dispatch(body))


# OPTIONS on these paths is answered by CorsHeadersMiddleware before routing.


@router.api_route(
    "/send-booking-notification",
    methods=["POST"],
    summary="Send a WhatsApp order or booking notification",
)
async def send_booking_notification(request: Request):
    return await _run_flow(request, "booking-notification")


@router.api_route(
    "/send-order-sms",
    methods=["POST"],
    summary="Send an order status SMS",
)
async def send_order_sms(request: Request):
    return await _run_flow(request, "order-sms")


@router.api_route(
    "/send-phone-otp",
    methods=["POST"],
    summary="Send a verification code SMS",
)
async def send_phone_otp(request: Request):
    return await _run_flow(request, "phone-otp")
