"""
Domain events raised by the registration workflow.

They are handed to the notification dispatcher once the owning transaction
has committed.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID

from src.events.dtos import EventDTO


@dataclass(kw_only=True)
class DomainEvent:
    """Base domain event."""

    timestamp: datetime = field(default_factory=lambda: datetime.now(UTC))
    event_type: str = ""


@dataclass(kw_only=True)
class RegistrationSubmittedEvent(DomainEvent):
    """Fired when a participant registers for an event."""

    registration_id: UUID
    participant_name: str
    participant_email: str
    event: EventDTO
    payment_proof_url: str | None = None

    def __post_init__(self):
        self.event_type = "registration.submitted"


@dataclass(kw_only=True)
class RegistrationApprovedEvent(DomainEvent):
    """Fired when an operator confirms a registration and a ticket is issued."""

    registration_id: UUID
    participant_name: str
    participant_email: str
    event: EventDTO
    ticket_number: str

    def __post_init__(self):
        self.event_type = "registration.approved"
