from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from uuid import UUID


class EventType(str, Enum):
    OFFLINE = "offline"
    ONLINE = "online"
    HYBRID = "hybrid"


class RegistrationStatus(str, Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"


class RsvpStatus(str, Enum):
    ON_TIME = "Hadir Tepat Waktu"
    LATE = "Hadir Terlambat"
    ABSENT = "Tidak Hadir"


@dataclass(frozen=True)
class EventDTO:
    """Event details as needed by the registration workflow and its emails."""

    uuid: UUID
    organization_id: UUID
    title: str
    event_date: date
    event_time: str | None
    type: EventType
    max_participants: int
    location: str | None = None
    zoom_link: str | None = None
    organization_name: str | None = None
    organization_username: str | None = None


@dataclass(frozen=True)
class RegistrationDTO:
    uuid: UUID
    event_id: UUID
    name: str
    email: str
    status: RegistrationStatus
    registered_at: datetime | None = None
    user_id: UUID | None = None
    phone: str | None = None
    institution: str | None = None
    payment_proof_url: str | None = None
    ticket_number: str | None = None
    rsvp_status: RsvpStatus | None = None


@dataclass(frozen=True)
class TicketDTO:
    """Public view of a ticket, used by the attendance confirmation page."""

    ticket_number: str
    registration_id: UUID
    holder_name: str
    registration_status: RegistrationStatus
    event: EventDTO
    rsvp_status: RsvpStatus | None = None


@dataclass(frozen=True)
class BatchResultDTO:
    """Outcome of a batch status change (approve or cancel)."""

    processed_ids: list[UUID] = field(default_factory=list)
    failed_ids: list[UUID] = field(default_factory=list)
    skipped_ids: list[UUID] = field(default_factory=list)

    @property
    def processed(self) -> int:
        return len(self.processed_ids)

    @property
    def failed(self) -> int:
        return len(self.failed_ids)


@dataclass(frozen=True)
class RsvpResultDTO:
    registration_id: UUID
    status: RsvpStatus
    created: bool
