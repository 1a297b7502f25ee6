"""Tests for the public ticket lookup endpoint."""

from datetime import date
from uuid import UUID, uuid4

import pytest

from src.auth.dtos import CurrentUser
from src.events.dtos import (
    EventDTO,
    EventType,
    RegistrationDTO,
    RegistrationStatus,
    RsvpStatus,
    TicketDTO,
)
from src.events.features.list_registrations.router import get_event_read_model
from src.events.repository.read_models import EventReadModel
from src.events.urls import GET_TICKET_URL

EVENT = EventDTO(
    uuid=uuid4(),
    organization_id=uuid4(),
    title="Tech Summit 2025!",
    event_date=date(2025, 3, 14),
    event_time="19:00",
    type=EventType.HYBRID,
    max_participants=100,
    location="Jakarta Convention Center",
    organization_name="Tech Circle",
    organization_username="techcircle",
)


class InMemoryTicketReadModel(EventReadModel):
    def __init__(self, tickets: dict[str, TicketDTO]):
        self.tickets = tickets
        self.lookups: list[str] = []

    async def list_registrations(self, event_id: UUID, operator: CurrentUser) -> list[RegistrationDTO]:
        return []

    async def get_ticket(self, ticket_number: str) -> TicketDTO | None:
        self.lookups.append(ticket_number)
        return self.tickets.get(ticket_number)


@pytest.mark.asyncio
async def test_get_ticket(client_factory):
    ticket = TicketDTO(
        ticket_number="TEC00011425",
        registration_id=uuid4(),
        holder_name="Budi Santoso",
        registration_status=RegistrationStatus.CONFIRMED,
        event=EVENT,
        rsvp_status=RsvpStatus.ON_TIME,
    )
    read_model = InMemoryTicketReadModel({"TEC00011425": ticket})

    async with client_factory({get_event_read_model: lambda: read_model}) as client:
        response = await client.get(GET_TICKET_URL.format(ticket_number="tec00011425"))

    assert response.status_code == 200
    data = response.json()["ticket"]
    assert data["ticket_number"] == "TEC00011425"
    assert data["holder_name"] == "Budi Santoso"
    assert data["rsvp_status"] == "Hadir Tepat Waktu"
    assert data["event"]["title"] == "Tech Summit 2025!"
    assert data["event"]["event_date"] == "2025-03-14"
    assert data["event"]["type"] == "hybrid"
    assert read_model.lookups == ["TEC00011425"]


@pytest.mark.asyncio
async def test_get_unknown_ticket(client_factory):
    read_model = InMemoryTicketReadModel({})

    async with client_factory({get_event_read_model: lambda: read_model}) as client:
        response = await client.get(GET_TICKET_URL.format(ticket_number="ZZZ00000000"))

    assert response.status_code == 404
    assert response.json() == {"success": False, "error": "Tiket tidak ditemukan"}
