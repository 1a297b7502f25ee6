"""Write model for attendance confirmation (RSVP) by ticket number."""

import logging
from abc import ABC, abstractmethod
from functools import partial
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.config.database import async_session_manager
from src.events.dtos import RegistrationStatus, RsvpResultDTO, RsvpStatus
from src.events.errors import RegistrationNotConfirmedError, TicketNotFoundError
from src.events.repository.orm_models import EventRegistration, EventRsvp, EventTicket

logger = logging.getLogger(__name__)


class RsvpWriteModel(ABC):
    @abstractmethod
    async def submit_rsvp(self, ticket_number: str, status: RsvpStatus) -> RsvpResultDTO:
        """Record or update the attendance status of a ticket holder.

        Raises:
            TicketNotFoundError: no ticket with that number
            RegistrationNotConfirmedError: the registration is not confirmed
        """
        raise NotImplementedError


class SqlRsvpWriteModel(RsvpWriteModel):
    async_session_manager = staticmethod(partial(async_session_manager))

    def __init__(self, session_overwrite: AsyncSession | None = None) -> None:
        self.session_overwrite = session_overwrite

    async def submit_rsvp(self, ticket_number: str, status: RsvpStatus) -> RsvpResultDTO:
        try:
            return await self._upsert(ticket_number, status)
        except IntegrityError:
            # a concurrent first RSVP won the insert, the retry finds it and updates
            logger.info(f"RSVP for ticket {ticket_number} was inserted concurrently, retrying")
            return await self._upsert(ticket_number, status)

    async def _upsert(self, ticket_number: str, status: RsvpStatus) -> RsvpResultDTO:
        async with self.async_session_manager(session_overwrite=self.session_overwrite) as session:
            async with session.begin_nested():
                registration_id, created = await self._save(session, ticket_number, status)

        logger.info(f"RSVP {status.value!r} saved for ticket {ticket_number}")
        return RsvpResultDTO(registration_id=registration_id, status=status, created=created)

    async def _save(self, session, ticket_number: str, status: RsvpStatus) -> tuple[UUID, bool]:
        row = (
            await session.execute(
                select(EventTicket.registration_id, EventRegistration.status)
                .join(EventRegistration, EventRegistration.uuid == EventTicket.registration_id)
                .where(EventTicket.ticket_number == ticket_number)
            )
        ).first()
        if row is None:
            raise TicketNotFoundError(ticket_number)
        registration_id, registration_status = row
        if registration_status != RegistrationStatus.CONFIRMED:
            raise RegistrationNotConfirmedError()

        rsvp = await self._find_rsvp(session, registration_id)
        created = rsvp is None
        if created:
            session.add(EventRsvp(registration_id=registration_id, status=status))
        else:
            rsvp.status = status
        await session.flush()
        return registration_id, created

    async def _find_rsvp(self, session, registration_id: UUID) -> EventRsvp | None:
        result = await session.execute(select(EventRsvp).where(EventRsvp.registration_id == registration_id))
        return result.scalar_one_or_none()
