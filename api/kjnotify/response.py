"""Standard response envelope for the notification endpoints."""

from fastapi.responses import JSONResponse

from kjnotify.results import (
    Delivered,
    DispatchResult,
    InternalFailure,
    ProviderFailure,
    ValidationFailure,
)

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "*",
}


def error_response(status_code: int, message: str, **extra) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"error": message, **extra},
        headers=CORS_HEADERS,
    )


def to_response(result: DispatchResult) -> JSONResponse:
    if isinstance(result, Delivered):
        return JSONResponse(
            status_code=200,
            content={
                "success": True,
                "messageSid": result.message_sid,
                "status": result.status,
            },
            headers=CORS_HEADERS,
        )
    if isinstance(result, ValidationFailure):
        return error_response(400, result.message, missing=list(result.fields))
    if isinstance(result, ProviderFailure):
        return error_response(result.status_code, result.error, details=result.details)
    if isinstance(result, InternalFailure):
        return error_response(500, "Internal server error")
    raise TypeError(f"Unknown dispatch result: {result!r}")
