"""Response bodies of the events API."""

from datetime import date, datetime
from uuid import UUID

from pydantic import BaseModel

from src.events.dtos import (
    BatchResultDTO,
    EventType,
    RegistrationDTO,
    RegistrationStatus,
    RsvpStatus,
    TicketDTO,
)


class RegistrationOut(BaseModel):
    id: UUID
    event_id: UUID
    name: str
    email: str
    phone: str | None = None
    institution: str | None = None
    status: RegistrationStatus
    registered_at: datetime | None = None
    payment_proof_url: str | None = None
    ticket_number: str | None = None
    rsvp_status: RsvpStatus | None = None

    @classmethod
    def from_dto(cls, dto: RegistrationDTO) -> "RegistrationOut":
        return cls(
            id=dto.uuid,
            event_id=dto.event_id,
            name=dto.name,
            email=dto.email,
            phone=dto.phone,
            institution=dto.institution,
            status=dto.status,
            registered_at=dto.registered_at,
            payment_proof_url=dto.payment_proof_url,
            ticket_number=dto.ticket_number,
            rsvp_status=dto.rsvp_status,
        )


class RegisterResponse(BaseModel):
    success: bool = True
    registration: RegistrationOut
    message: str


class BatchResponse(BaseModel):
    success: bool = True
    processed: int
    failed: int
    message: str

    @classmethod
    def from_dto(cls, result: BatchResultDTO, message: str) -> "BatchResponse":
        return cls(processed=result.processed, failed=result.failed, message=message)


class RsvpResponse(BaseModel):
    success: bool = True
    message: str


class RegistrationListResponse(BaseModel):
    success: bool = True
    registrations: list[RegistrationOut]


class TicketEventOut(BaseModel):
    title: str
    event_date: date
    event_time: str | None = None
    type: EventType
    location: str | None = None
    organization_name: str | None = None


class TicketOut(BaseModel):
    ticket_number: str
    holder_name: str
    registration_status: RegistrationStatus
    rsvp_status: RsvpStatus | None = None
    event: TicketEventOut

    @classmethod
    def from_dto(cls, dto: TicketDTO) -> "TicketOut":
        return cls(
            ticket_number=dto.ticket_number,
            holder_name=dto.holder_name,
            registration_status=dto.registration_status,
            rsvp_status=dto.rsvp_status,
            event=TicketEventOut(
                title=dto.event.title,
                event_date=dto.event.event_date,
                event_time=dto.event.event_time,
                type=dto.event.type,
                location=dto.event.location,
                organization_name=dto.event.organization_name,
            ),
        )


class TicketResponse(BaseModel):
    success: bool = True
    ticket: TicketOut
