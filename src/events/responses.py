import json
import logging
from typing import Any

from fastapi import Request
from fastapi.responses import JSONResponse

from src.events.errors import ErrorCode, PayloadValidationError, WorkflowError

logger = logging.getLogger(__name__)

SERVER_ERROR_MESSAGE = "Terjadi kesalahan server"

STATUS_CODES = {
    ErrorCode.VALIDATION_FAILED: 400,
    ErrorCode.EVENT_FULL: 400,
    ErrorCode.REGISTRATION_NOT_CONFIRMED: 400,
    ErrorCode.NOT_AUTHENTICATED: 401,
    ErrorCode.NOT_AUTHORIZED: 403,
    ErrorCode.EVENT_NOT_FOUND: 404,
    ErrorCode.REGISTRATION_NOT_FOUND: 404,
    ErrorCode.TICKET_NOT_FOUND: 404,
    ErrorCode.DUPLICATE_REGISTRATION: 409,
}


def error_response(status_code: int, error: str, headers: dict | None = None, **extra: Any) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "error": error, **extra},
        headers=headers,
    )


def workflow_error_response(error: WorkflowError) -> JSONResponse:
    extra = {}
    if isinstance(error, PayloadValidationError):
        extra["details"] = error.details
    return error_response(STATUS_CODES.get(error.code, 400), error.message, **extra)


def server_error_response() -> JSONResponse:
    return error_response(500, SERVER_ERROR_MESSAGE)


async def read_json_body(request: Request) -> Any:
    """Parsed JSON body, or ``None`` when it is missing or malformed."""
    body = await request.body()
    if not body:
        return None
    try:
        return json.loads(body)
    except ValueError:
        logger.debug(f"Malformed JSON body on {request.url.path}")
        return None
