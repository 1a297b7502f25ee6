import logging
from uuid import UUID

from fastapi import APIRouter, Depends

from src.auth.dependencies import get_current_user
from src.auth.dtos import CurrentUser
from src.events.errors import WorkflowError
from src.events.repository.read_models import EventReadModel, SqlEventReadModel
from src.events.responses import server_error_response, workflow_error_response
from src.events.schemas import RegistrationListResponse, RegistrationOut
from src.events.urls import LIST_REGISTRATIONS_URL
from src.rate_limit import RateLimits, rate_limit

logger = logging.getLogger(__name__)

router = APIRouter()


def get_event_read_model() -> EventReadModel:
    return SqlEventReadModel()


@router.get(
    LIST_REGISTRATIONS_URL,
    response_model=RegistrationListResponse,
    dependencies=[Depends(rate_limit("event-registrations", RateLimits.AUTHENTICATED))],
)
async def list_registrations(
    event_id: UUID,
    operator: CurrentUser = Depends(get_current_user),
    read_model: EventReadModel = Depends(get_event_read_model),
):
    """Registrations of an event for its organization admins, newest first."""
    try:
        registrations = await read_model.list_registrations(event_id, operator)
    except WorkflowError as e:
        return workflow_error_response(e)
    except Exception:
        logger.exception(f"Listing registrations of event {event_id} failed")
        return server_error_response()

    return RegistrationListResponse(
        registrations=[RegistrationOut.from_dto(registration) for registration in registrations]
    )
