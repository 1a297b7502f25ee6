import logging

from fastapi import APIRouter, Depends

from src.events.errors import TicketNotFoundError
from src.events.features.list_registrations.router import get_event_read_model
from src.events.repository.read_models import EventReadModel
from src.events.responses import server_error_response, workflow_error_response
from src.events.schemas import TicketOut, TicketResponse
from src.events.urls import GET_TICKET_URL
from src.rate_limit import RateLimits, rate_limit

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    GET_TICKET_URL,
    response_model=TicketResponse,
    dependencies=[Depends(rate_limit("event-ticket", RateLimits.PUBLIC_VIEW))],
)
async def get_ticket(
    ticket_number: str,
    read_model: EventReadModel = Depends(get_event_read_model),
):
    """Public ticket lookup used by the attendance page."""
    ticket_number = ticket_number.strip().upper()
    try:
        ticket = await read_model.get_ticket(ticket_number)
    except Exception:
        logger.exception(f"Ticket lookup for {ticket_number} failed")
        return server_error_response()

    if ticket is None:
        return workflow_error_response(TicketNotFoundError(ticket_number))
    return TicketResponse(ticket=TicketOut.from_dto(ticket))
