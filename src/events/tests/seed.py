"""Rows for write and read model tests. Everything is flushed, never committed."""

from datetime import date
from uuid import uuid4

from src.auth.dtos import CurrentUser
from src.events.dtos import EventType, RegistrationStatus
from src.events.repository.orm_models import Event, EventRegistration, EventTicket
from src.models.organization import MemberRole, Organization, OrganizationMember
from src.models.user import User


async def create_user(session, email: str | None = None, **kwargs) -> User:
    user = User(
        uuid=uuid4(),
        email=email or f"user-{uuid4().hex[:8]}@example.com",
        hashed_password=None,
        is_active=kwargs.pop("is_active", True),
        is_superuser=kwargs.pop("is_superuser", False),
        **kwargs,
    )
    session.add(user)
    await session.flush()
    return user


async def create_organization(
    session, admin: User | None = None, username: str | None = None, name: str = "Tech Circle"
) -> Organization:
    organization = Organization(uuid=uuid4(), name=name, username=username or f"circle-{uuid4().hex[:8]}")
    session.add(organization)
    await session.flush()
    if admin is not None:
        await add_member(session, organization, admin, MemberRole.ADMIN)
    return organization


async def add_member(session, organization: Organization, user: User, role: MemberRole) -> None:
    session.add(OrganizationMember(organization_id=organization.uuid, user_id=user.uuid, role=role))
    await session.flush()


async def create_event(
    session,
    organization: Organization,
    title: str = "Tech Summit 2025!",
    event_date: date = date(2025, 3, 14),
    max_participants: int = 100,
    type: EventType = EventType.OFFLINE,
    **kwargs,
) -> Event:
    event = Event(
        uuid=uuid4(),
        organization_id=organization.uuid,
        title=title,
        event_date=event_date,
        event_time=kwargs.pop("event_time", "19:00"),
        type=type,
        location=kwargs.pop("location", "Jakarta Convention Center"),
        max_participants=max_participants,
        **kwargs,
    )
    session.add(event)
    await session.flush()
    return event


async def create_registration(
    session,
    event: Event,
    email: str | None = None,
    name: str = "Budi Santoso",
    status: RegistrationStatus = RegistrationStatus.PENDING,
    **kwargs,
) -> EventRegistration:
    registration = EventRegistration(
        uuid=uuid4(),
        event_id=event.uuid,
        name=name,
        email=email or f"peserta-{uuid4().hex[:8]}@example.com",
        status=status,
        **kwargs,
    )
    session.add(registration)
    await session.flush()
    return registration


async def create_ticket(session, registration: EventRegistration, ticket_number: str) -> EventTicket:
    ticket = EventTicket(uuid=uuid4(), registration_id=registration.uuid, ticket_number=ticket_number)
    session.add(ticket)
    await session.flush()
    return ticket


def as_operator(user: User) -> CurrentUser:
    return CurrentUser(uuid=user.uuid, email=user.email, is_superuser=bool(user.is_superuser))
