import logging

from fastapi import APIRouter, Depends, Request

from src.auth.dependencies import get_current_user
from src.auth.dtos import CurrentUser
from src.events.errors import PayloadValidationError, WorkflowError
from src.events.features.cancel_registration.write_model import (
    CancelRegistrationWriteModel,
    SqlCancelRegistrationWriteModel,
)
from src.events.responses import read_json_body, server_error_response, workflow_error_response
from src.events.schemas import BatchResponse
from src.events.urls import CANCEL_URL
from src.events.validation import CancelPayload, validate_payload

logger = logging.getLogger(__name__)

router = APIRouter()


def get_cancel_registration_write_model() -> CancelRegistrationWriteModel:
    return SqlCancelRegistrationWriteModel()


@router.post(CANCEL_URL, response_model=BatchResponse)
async def cancel_registrations(
    request: Request,
    operator: CurrentUser = Depends(get_current_user),
    write_model: CancelRegistrationWriteModel = Depends(get_cancel_registration_write_model),
):
    payload, errors = validate_payload(CancelPayload, await read_json_body(request))
    if errors:
        return workflow_error_response(PayloadValidationError(errors))

    try:
        result = await write_model.cancel(payload.registration_ids, operator)
    except WorkflowError as e:
        return workflow_error_response(e)
    except Exception:
        logger.exception("Registration cancellation failed")
        return server_error_response()

    return BatchResponse.from_dto(result, f"Berhasil membatalkan {result.processed} pendaftaran.")
