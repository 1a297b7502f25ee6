"""Write model for batch approval of registrations.

Each id is handled in its own transaction: the conditional status update
``pending -> confirmed`` and the ticket insert commit together or not at all.
Approval emails go out after the commit.
"""

import logging
from abc import ABC, abstractmethod
from enum import Enum
from functools import partial
from uuid import UUID

from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from src.auth.dtos import CurrentUser
from src.config.database import async_session_manager
from src.config.settings import settings
from src.email_service.dispatcher import NotificationDispatcher
from src.events.domain_events import RegistrationApprovedEvent
from src.events.dtos import BatchResultDTO, RegistrationStatus
from src.events.errors import RegistrationNotFoundError
from src.events.repository.orm_models import Event, EventRegistration, EventTicket
from src.events.repository.policies import scope_registrations_to_operator
from src.events.repository.read_models import (
    count_event_tickets,
    event_to_dto,
    ticket_number_exists,
)
from src.events.ticket_numbers import generate_ticket_number
from src.models.organization import Organization

logger = logging.getLogger(__name__)


class ItemOutcome(str, Enum):
    PROCESSED = "processed"
    FAILED = "failed"
    SKIPPED = "skipped"


class ApproveWriteModel(ABC):
    @abstractmethod
    async def approve(self, registration_ids: list[UUID], operator: CurrentUser) -> BatchResultDTO:
        """Confirm pending registrations and issue their tickets.

        Items fail independently. Raises RegistrationNotFoundError when none
        of the ids is a pending registration.
        """
        raise NotImplementedError


class SqlApproveWriteModel(ApproveWriteModel):
    async_session_manager = staticmethod(partial(async_session_manager))

    def __init__(
        self,
        session_overwrite: AsyncSession | None = None,
        dispatcher: NotificationDispatcher | None = None,
        ticket_issue_attempts: int | None = None,
    ) -> None:
        self.session_overwrite = session_overwrite
        self.dispatcher = dispatcher
        self.ticket_issue_attempts = ticket_issue_attempts or settings.TICKET_ISSUE_ATTEMPTS

    async def approve(self, registration_ids: list[UUID], operator: CurrentUser) -> BatchResultDTO:
        registration_ids = list(dict.fromkeys(registration_ids))

        async with self.async_session_manager(session_overwrite=self.session_overwrite) as session:
            result = await session.execute(
                select(EventRegistration.uuid, EventRegistration.status).where(
                    EventRegistration.uuid.in_(registration_ids)
                )
            )
            existing = dict(result.all())
        if RegistrationStatus.PENDING not in existing.values():
            raise RegistrationNotFoundError()

        outcomes: dict[ItemOutcome, list[UUID]] = {outcome: [] for outcome in ItemOutcome}
        notifications: list[RegistrationApprovedEvent] = []

        for registration_id in registration_ids:
            if registration_id not in existing:
                outcomes[ItemOutcome.SKIPPED].append(registration_id)
                continue
            outcome, notification = await self._approve_one(registration_id, operator)
            outcomes[outcome].append(registration_id)
            if notification is not None:
                notifications.append(notification)

        if self.dispatcher:
            await self.dispatcher.dispatch_all(notifications)

        logger.info(
            f"Operator {operator.email} approved {len(outcomes[ItemOutcome.PROCESSED])}, "
            f"failed {len(outcomes[ItemOutcome.FAILED])}, skipped {len(outcomes[ItemOutcome.SKIPPED])}"
        )
        return BatchResultDTO(
            processed_ids=outcomes[ItemOutcome.PROCESSED],
            failed_ids=outcomes[ItemOutcome.FAILED],
            skipped_ids=outcomes[ItemOutcome.SKIPPED],
        )

    async def _approve_one(
        self, registration_id: UUID, operator: CurrentUser
    ) -> tuple[ItemOutcome, RegistrationApprovedEvent | None]:
        for attempt in range(1, self.ticket_issue_attempts + 1):
            try:
                async with self.async_session_manager(session_overwrite=self.session_overwrite) as session:
                    async with session.begin_nested():
                        return await self._confirm_and_issue_ticket(session, registration_id, operator)
            except IntegrityError:
                # another approval took the same ticket number, recount and retry
                logger.info(
                    f"Ticket number collision for registration {registration_id} "
                    f"(attempt {attempt}/{self.ticket_issue_attempts})"
                )
            except SQLAlchemyError:
                logger.exception(f"Approval of registration {registration_id} failed")
                return ItemOutcome.FAILED, None

        logger.warning(
            f"Data integrity: could not issue a ticket for registration {registration_id} "
            f"after {self.ticket_issue_attempts} attempts, registration left pending"
        )
        return ItemOutcome.FAILED, None

    async def _confirm_and_issue_ticket(
        self, session, registration_id: UUID, operator: CurrentUser
    ) -> tuple[ItemOutcome, RegistrationApprovedEvent | None]:
        row = (
            await session.execute(
                select(EventRegistration, Event, Organization)
                .join(Event, Event.uuid == EventRegistration.event_id)
                .join(Organization, Organization.uuid == Event.organization_id)
                .where(EventRegistration.uuid == registration_id)
            )
        ).first()
        if row is None:
            logger.warning(f"Registration {registration_id} has no event or organization, skipped")
            return ItemOutcome.SKIPPED, None
        registration, event, organization = row

        stmt = (
            update(EventRegistration)
            .where(EventRegistration.uuid == registration_id)
            .where(EventRegistration.status == RegistrationStatus.PENDING)
            .values(status=RegistrationStatus.CONFIRMED)
        )
        result = await session.execute(
            scope_registrations_to_operator(stmt, operator).execution_options(synchronize_session=False)
        )
        if result.rowcount == 0:
            logger.warning(
                f"Registration {registration_id} was not confirmed for {operator.email}: "
                f"not pending or not authorized"
            )
            return ItemOutcome.FAILED, None

        ticket_number = await self._next_ticket_number(session, event)
        session.add(EventTicket(registration_id=registration_id, ticket_number=ticket_number))
        await session.flush()

        return ItemOutcome.PROCESSED, RegistrationApprovedEvent(
            registration_id=registration_id,
            participant_name=registration.name,
            participant_email=registration.email,
            event=event_to_dto(event, organization),
            ticket_number=ticket_number,
        )

    async def _next_ticket_number(self, session, event: Event) -> str:
        """Next free number for ``event``, starting at its ticket count plus one."""
        seq_num = await count_event_tickets(session, event.uuid) + 1
        ticket_number = generate_ticket_number(event.title, seq_num, event.event_date)
        # another event with the same title prefix and date may hold this number
        while await ticket_number_exists(session, ticket_number):
            seq_num += 1
            ticket_number = generate_ticket_number(event.title, seq_num, event.event_date)
        return ticket_number
