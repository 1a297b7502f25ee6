import logging

from fastapi import APIRouter, Depends, Request

from src.auth.dependencies import get_current_user
from src.auth.dtos import CurrentUser
from src.email_service import get_notification_dispatcher
from src.events.errors import PayloadValidationError, WorkflowError
from src.events.features.approve.write_model import ApproveWriteModel, SqlApproveWriteModel
from src.events.responses import (
    error_response,
    read_json_body,
    server_error_response,
    workflow_error_response,
)
from src.events.schemas import BatchResponse
from src.events.urls import APPROVE_URL
from src.events.validation import ApprovePayload, validate_payload

logger = logging.getLogger(__name__)

router = APIRouter()

EMPTY_SELECTION_MESSAGE = "Tidak ada data pendaftaran yang dipilih"


def get_approve_write_model() -> ApproveWriteModel:
    return SqlApproveWriteModel(dispatcher=get_notification_dispatcher())


@router.post(APPROVE_URL, response_model=BatchResponse)
async def approve_registrations(
    request: Request,
    operator: CurrentUser = Depends(get_current_user),
    write_model: ApproveWriteModel = Depends(get_approve_write_model),
):
    """
    Confirm pending registrations and issue tickets.

    Partial success: ids that are not pending or belong to events the
    operator does not manage are counted as failed.
    """
    body = await read_json_body(request)
    if isinstance(body, dict) and body.get("registration_ids") == []:
        return error_response(400, EMPTY_SELECTION_MESSAGE)

    payload, errors = validate_payload(ApprovePayload, body)
    if errors:
        return workflow_error_response(PayloadValidationError(errors))

    try:
        result = await write_model.approve(payload.registration_ids, operator)
    except WorkflowError as e:
        return workflow_error_response(e)
    except Exception:
        logger.exception("Event approval failed")
        return server_error_response()

    return BatchResponse.from_dto(result, f"Berhasil menyetujui {result.processed} pendaftar.")
