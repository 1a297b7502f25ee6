"""Tests for SqlEventReadModel."""

from datetime import UTC, datetime, timedelta
from uuid import uuid4

import pytest

from src.config.database import async_session_maker
from src.events.dtos import RegistrationStatus, RsvpStatus
from src.events.errors import EventNotFoundError, NotAuthorizedError
from src.events.repository.orm_models import EventPaymentProof, EventRsvp
from src.events.repository.read_models import SqlEventReadModel
from src.events.tests.seed import (
    as_operator,
    create_event,
    create_organization,
    create_registration,
    create_ticket,
    create_user,
)


async def test_list_registrations_newest_first_with_proof_ticket_and_rsvp():
    async with async_session_maker() as db_session:
        admin = await create_user(db_session)
        event = await create_event(db_session, await create_organization(db_session, admin=admin))
        now = datetime.now(UTC)
        older = await create_registration(
            db_session, event, name="Older", status=RegistrationStatus.CONFIRMED,
            registered_at=now - timedelta(hours=1),
        )
        newer = await create_registration(db_session, event, name="Newer", registered_at=now)
        await create_ticket(db_session, older, "TEC00011425")
        db_session.add(EventRsvp(registration_id=older.uuid, status=RsvpStatus.LATE))
        db_session.add(EventPaymentProof(registration_id=newer.uuid, image_url="https://img.example.com/p.jpg"))
        await db_session.flush()
        read_model = SqlEventReadModel(session_overwrite=db_session)

        registrations = await read_model.list_registrations(event.uuid, as_operator(admin))

        assert [r.name for r in registrations] == ["Newer", "Older"]
        assert registrations[0].payment_proof_url == "https://img.example.com/p.jpg"
        assert registrations[0].ticket_number is None
        assert registrations[1].ticket_number == "TEC00011425"
        assert registrations[1].rsvp_status == RsvpStatus.LATE

        await db_session.rollback()


async def test_list_registrations_requires_event_admin():
    async with async_session_maker() as db_session:
        outsider = await create_user(db_session)
        event = await create_event(db_session, await create_organization(db_session))
        read_model = SqlEventReadModel(session_overwrite=db_session)

        with pytest.raises(NotAuthorizedError):
            await read_model.list_registrations(event.uuid, as_operator(outsider))
        with pytest.raises(EventNotFoundError):
            await read_model.list_registrations(uuid4(), as_operator(outsider))

        await db_session.rollback()


async def test_get_ticket():
    async with async_session_maker() as db_session:
        organization = await create_organization(db_session, name="Tech Circle")
        event = await create_event(db_session, organization)
        registration = await create_registration(
            db_session, event, name="Budi Santoso", status=RegistrationStatus.CONFIRMED
        )
        await create_ticket(db_session, registration, "TEC00011425")
        read_model = SqlEventReadModel(session_overwrite=db_session)

        ticket = await read_model.get_ticket("TEC00011425")

        assert ticket.holder_name == "Budi Santoso"
        assert ticket.registration_status == RegistrationStatus.CONFIRMED
        assert ticket.rsvp_status is None
        assert ticket.event.title == "Tech Summit 2025!"
        assert ticket.event.organization_name == "Tech Circle"
        assert await read_model.get_ticket("NOPE") is None

        await db_session.rollback()
