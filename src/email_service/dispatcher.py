"""Turns domain events into participant emails.

Delivery is attempted once. A failed send is logged and reported as ``False``
so that the workflow that produced the event is never rolled back by it.
"""

import logging

from src.config.settings import settings
from src.email_service.base import EmailServiceBase
from src.events.domain_events import (
    DomainEvent,
    RegistrationApprovedEvent,
    RegistrationSubmittedEvent,
)

logger = logging.getLogger(__name__)


class NotificationDispatcher:
    def __init__(self, email_service: EmailServiceBase):
        self.email_service = email_service

    async def dispatch(self, event: DomainEvent) -> bool:
        try:
            if isinstance(event, RegistrationSubmittedEvent):
                await self._registration_submitted(event)
            elif isinstance(event, RegistrationApprovedEvent):
                await self._registration_approved(event)
            else:
                logger.warning(f"No notification handler for {event.event_type}")
                return False
        except Exception:
            logger.exception(
                f"Failed to send notification for {event.event_type} "
                f"(registration {getattr(event, 'registration_id', None)})"
            )
            return False
        return True

    async def dispatch_all(self, events: list[DomainEvent]) -> int:
        """Dispatch sequentially, returning how many were delivered."""
        delivered = 0
        for event in events:
            if await self.dispatch(event):
                delivered += 1
        return delivered

    async def _registration_submitted(self, event: RegistrationSubmittedEvent) -> None:
        await self.email_service.send_registration_confirmation(
            to_address=event.participant_email,
            participant_name=event.participant_name,
            event=event.event,
            circle_url=settings.circle_url(event.event.organization_username),
            payment_proof_url=event.payment_proof_url,
            registration_id=event.registration_id,
        )

    async def _registration_approved(self, event: RegistrationApprovedEvent) -> None:
        await self.email_service.send_registration_approval(
            to_address=event.participant_email,
            participant_name=event.participant_name,
            event=event.event,
            ticket_number=event.ticket_number,
            circle_url=settings.circle_url(event.event.organization_username),
            registration_id=event.registration_id,
        )
