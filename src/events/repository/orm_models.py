from datetime import UTC, date, datetime
from uuid import UUID

import sqlalchemy as sa
from sqlalchemy import Date, DateTime, Enum, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from src.config.table_names import TableNames
from src.events.dtos import EventType, RegistrationStatus, RsvpStatus
from src.models.base import Base, TimeStamp, uuid_fk


def _values(enum_cls):
    return [e.value for e in enum_cls]


class Event(Base, TimeStamp):
    __tablename__ = TableNames.EVENTS.value

    organization_id: Mapped[UUID] = uuid_fk(TableNames.ORGANIZATIONS.value, index=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    event_date: Mapped[date] = mapped_column(Date, nullable=False)
    event_time: Mapped[str | None] = mapped_column(String(20), nullable=True)
    type: Mapped[str] = mapped_column(
        Enum(EventType, name="event_type_enum", values_callable=_values),
        default=EventType.OFFLINE,
        nullable=False,
    )
    location: Mapped[str | None] = mapped_column(String(500), nullable=True)
    zoom_link: Mapped[str | None] = mapped_column(String(500), nullable=True)
    max_participants: Mapped[int] = mapped_column(Integer, nullable=False)

    def __repr__(self) -> str:
        return f"<Event {self.title} on {self.event_date}>"


class EventRegistration(Base, TimeStamp):
    __tablename__ = TableNames.EVENT_REGISTRATIONS.value
    # Backs the application-level duplicate check
    __table_args__ = (UniqueConstraint("event_id", "email", name="uq_event_registrations_event_email"),)

    event_id: Mapped[UUID] = uuid_fk(TableNames.EVENTS.value, index=True)
    user_id: Mapped[UUID | None] = uuid_fk(TableNames.USERS.value, ondelete="SET NULL", nullable=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    phone: Mapped[str | None] = mapped_column(String(20), nullable=True)
    institution: Mapped[str | None] = mapped_column(String(200), nullable=True)
    status: Mapped[str] = mapped_column(
        Enum(RegistrationStatus, name="registration_status_enum", values_callable=_values),
        default=RegistrationStatus.PENDING,
        nullable=False,
        index=True,
    )
    registered_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(UTC),
        server_default=sa.func.current_timestamp(),
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<EventRegistration {self.email} - {self.status}>"


class EventPaymentProof(Base, TimeStamp):
    __tablename__ = TableNames.EVENT_PAYMENT_PROOFS.value

    registration_id: Mapped[UUID] = uuid_fk(TableNames.EVENT_REGISTRATIONS.value, index=True)
    image_url: Mapped[str] = mapped_column(String(1000), nullable=False)

    def __repr__(self) -> str:
        return f"<EventPaymentProof for {self.registration_id}>"


class EventTicket(Base, TimeStamp):
    __tablename__ = TableNames.EVENT_TICKETS.value

    registration_id: Mapped[UUID] = uuid_fk(TableNames.EVENT_REGISTRATIONS.value, unique=True)
    # Unique so that two approvals racing on the same sequence cannot both commit
    ticket_number: Mapped[str] = mapped_column(String(32), nullable=False, unique=True, index=True)

    def __repr__(self) -> str:
        return f"<EventTicket {self.ticket_number}>"


class EventRsvp(Base, TimeStamp):
    __tablename__ = TableNames.EVENT_RSVPS.value

    registration_id: Mapped[UUID] = uuid_fk(TableNames.EVENT_REGISTRATIONS.value, unique=True)
    status: Mapped[str] = mapped_column(
        Enum(RsvpStatus, name="rsvp_status_enum", values_callable=_values),
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<EventRsvp {self.registration_id} {self.status}>"
