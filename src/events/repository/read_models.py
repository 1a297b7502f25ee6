import abc
from functools import partial
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.auth.dtos import CurrentUser
from src.config.database import async_session_manager
from src.events.dtos import EventDTO, RegistrationDTO, RegistrationStatus, TicketDTO
from src.events.errors import EventNotFoundError, NotAuthorizedError
from src.events.repository.orm_models import (
    Event,
    EventPaymentProof,
    EventRegistration,
    EventRsvp,
    EventTicket,
)
from src.events.repository.policies import can_manage_event
from src.models.organization import Organization


def event_to_dto(event: Event, organization: Organization | None) -> EventDTO:
    return EventDTO(
        uuid=event.uuid,
        organization_id=event.organization_id,
        title=event.title,
        event_date=event.event_date,
        event_time=event.event_time,
        type=event.type,
        max_participants=event.max_participants,
        location=event.location,
        zoom_link=event.zoom_link,
        organization_name=organization.name if organization else None,
        organization_username=organization.username if organization else None,
    )


def registration_to_dto(registration: EventRegistration, **extra) -> RegistrationDTO:
    return RegistrationDTO(
        uuid=registration.uuid,
        event_id=registration.event_id,
        user_id=registration.user_id,
        name=registration.name,
        email=registration.email,
        phone=registration.phone,
        institution=registration.institution,
        status=RegistrationStatus(registration.status),
        registered_at=registration.registered_at,
        **extra,
    )


async def get_event_with_organization(
    session, event_id: UUID
) -> tuple[Event, Organization | None] | None:
    stmt = (
        select(Event, Organization)
        .outerjoin(Organization, Organization.uuid == Event.organization_id)
        .where(Event.uuid == event_id)
    )
    row = (await session.execute(stmt)).first()
    if row is None:
        return None
    return row[0], row[1]


async def count_active_registrations(session, event_id: UUID) -> int:
    """Registrations that hold a seat: everything except cancelled."""
    stmt = (
        select(func.count(EventRegistration.uuid))
        .where(EventRegistration.event_id == event_id)
        .where(EventRegistration.status != RegistrationStatus.CANCELLED)
    )
    return (await session.execute(stmt)).scalar_one()


async def count_event_tickets(session, event_id: UUID) -> int:
    stmt = (
        select(func.count(EventTicket.uuid))
        .select_from(EventTicket)
        .join(EventRegistration, EventRegistration.uuid == EventTicket.registration_id)
        .where(EventRegistration.event_id == event_id)
    )
    return (await session.execute(stmt)).scalar_one()


async def ticket_number_exists(session, ticket_number: str) -> bool:
    result = await session.execute(
        select(EventTicket.uuid).where(EventTicket.ticket_number == ticket_number)
    )
    return result.first() is not None


class EventReadModel(abc.ABC):
    @abc.abstractmethod
    async def list_registrations(
        self, event_id: UUID, operator: CurrentUser
    ) -> list[RegistrationDTO]:
        """
        List an event's registrations, newest first, with payment proof,
        ticket number and RSVP status.
        Raises EventNotFoundError or NotAuthorizedError.
        """
        raise NotImplementedError

    @abc.abstractmethod
    async def get_ticket(self, ticket_number: str) -> TicketDTO | None:
        """Public ticket lookup by ticket number."""
        raise NotImplementedError


class SqlEventReadModel(EventReadModel):
    """SQL implementation of the event read model."""

    async_session_manager = staticmethod(partial(async_session_manager))

    def __init__(self, session_overwrite: AsyncSession | None = None) -> None:
        self.session_overwrite = session_overwrite

    async def list_registrations(
        self, event_id: UUID, operator: CurrentUser
    ) -> list[RegistrationDTO]:
        async with self.async_session_manager(session_overwrite=self.session_overwrite) as session:
            if await get_event_with_organization(session, event_id) is None:
                raise EventNotFoundError(event_id)
            if not await can_manage_event(session, operator, event_id):
                raise NotAuthorizedError()

            result = await session.execute(
                select(EventRegistration)
                .where(EventRegistration.event_id == event_id)
                .order_by(EventRegistration.registered_at.desc())
            )
            registrations = result.scalars().all()
            if not registrations:
                return []

            ids = [registration.uuid for registration in registrations]
            proofs = await session.execute(
                select(EventPaymentProof).where(EventPaymentProof.registration_id.in_(ids))
            )
            proof_urls = {proof.registration_id: proof.image_url for proof in proofs.scalars()}
            tickets = await session.execute(
                select(EventTicket).where(EventTicket.registration_id.in_(ids))
            )
            ticket_numbers = {t.registration_id: t.ticket_number for t in tickets.scalars()}
            rsvps = await session.execute(select(EventRsvp).where(EventRsvp.registration_id.in_(ids)))
            rsvp_statuses = {rsvp.registration_id: rsvp.status for rsvp in rsvps.scalars()}

            return [
                registration_to_dto(
                    registration,
                    payment_proof_url=proof_urls.get(registration.uuid),
                    ticket_number=ticket_numbers.get(registration.uuid),
                    rsvp_status=rsvp_statuses.get(registration.uuid),
                )
                for registration in registrations
            ]

    async def get_ticket(self, ticket_number: str) -> TicketDTO | None:
        async with self.async_session_manager(session_overwrite=self.session_overwrite) as session:
            stmt = (
                select(EventTicket, EventRegistration)
                .join(EventRegistration, EventRegistration.uuid == EventTicket.registration_id)
                .where(EventTicket.ticket_number == ticket_number)
            )
            row = (await session.execute(stmt)).first()
            if row is None:
                return None
            ticket, registration = row

            event_row = await get_event_with_organization(session, registration.event_id)
            if event_row is None:
                return None

            rsvp_result = await session.execute(
                select(EventRsvp).where(EventRsvp.registration_id == registration.uuid)
            )
            rsvp = rsvp_result.scalar_one_or_none()

            return TicketDTO(
                ticket_number=ticket.ticket_number,
                registration_id=registration.uuid,
                holder_name=registration.name,
                registration_status=RegistrationStatus(registration.status),
                event=event_to_dto(*event_row),
                rsvp_status=rsvp.status if rsvp else None,
            )
