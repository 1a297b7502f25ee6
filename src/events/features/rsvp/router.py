import logging

from fastapi import APIRouter, Depends, Request

from src.events.errors import PayloadValidationError, WorkflowError
from src.events.features.rsvp.write_model import RsvpWriteModel, SqlRsvpWriteModel
from src.events.responses import read_json_body, server_error_response, workflow_error_response
from src.events.schemas import RsvpResponse
from src.events.urls import RSVP_URL
from src.events.validation import RsvpPayload, validate_payload
from src.rate_limit import RateLimits, rate_limit

logger = logging.getLogger(__name__)

router = APIRouter()

INVALID_STATUS_MESSAGE = "Status kehadiran tidak valid"
RSVP_SUCCESS_MESSAGE = "Konfirmasi kehadiran berhasil disimpan"


def get_rsvp_write_model() -> RsvpWriteModel:
    return SqlRsvpWriteModel()


@router.post(
    RSVP_URL,
    response_model=RsvpResponse,
    dependencies=[Depends(rate_limit("event-rsvp", RateLimits.PUBLIC_FORM))],
)
async def submit_rsvp(
    request: Request,
    write_model: RsvpWriteModel = Depends(get_rsvp_write_model),
):
    """
    Attendance confirmation by ticket number.

    Only confirmed registrations can RSVP; a second call updates the status.
    """
    body = await read_json_body(request)
    payload, errors = validate_payload(RsvpPayload, body)
    if errors:
        message = None
        if set(errors) == {"status"} and body.get("status") is not None:
            message = INVALID_STATUS_MESSAGE
        return workflow_error_response(PayloadValidationError(errors, message))

    try:
        await write_model.submit_rsvp(payload.ticket_number, payload.status)
    except WorkflowError as e:
        return workflow_error_response(e)
    except Exception:
        logger.exception("Event RSVP failed")
        return server_error_response()

    return RsvpResponse(message=RSVP_SUCCESS_MESSAGE)
