import logging

from fastapi import APIRouter, Depends, Request

from src.email_service import get_notification_dispatcher
from src.events.errors import PayloadValidationError, WorkflowError
from src.events.features.register.write_model import RegisterWriteModel, SqlRegisterWriteModel
from src.events.responses import (
    read_json_body,
    server_error_response,
    workflow_error_response,
)
from src.events.schemas import RegisterResponse, RegistrationOut
from src.events.urls import REGISTER_URL
from src.events.validation import RegisterEventPayload, validate_payload
from src.rate_limit import RateLimits, rate_limit

logger = logging.getLogger(__name__)

router = APIRouter()

REGISTER_SUCCESS_MESSAGE = "Pendaftaran berhasil! Email konfirmasi telah dikirim."


def get_register_write_model() -> RegisterWriteModel:
    return SqlRegisterWriteModel(dispatcher=get_notification_dispatcher())


@router.post(
    REGISTER_URL,
    status_code=201,
    response_model=RegisterResponse,
    dependencies=[Depends(rate_limit("event-register", RateLimits.PUBLIC_FORM))],
)
async def register_for_event(
    request: Request,
    write_model: RegisterWriteModel = Depends(get_register_write_model),
):
    """
    Public registration for an event.

    The registration starts as pending. A confirmation email is sent once the
    row is stored; its failure does not affect the response.
    """
    payload, errors = validate_payload(RegisterEventPayload, await read_json_body(request))
    if errors:
        return workflow_error_response(PayloadValidationError(errors))

    try:
        registration = await write_model.register(payload)
    except WorkflowError as e:
        return workflow_error_response(e)
    except Exception:
        logger.exception("Event registration failed")
        return server_error_response()

    return RegisterResponse(
        registration=RegistrationOut.from_dto(registration),
        message=REGISTER_SUCCESS_MESSAGE,
    )
