"""Write model for public event registration."""

import logging
from abc import ABC, abstractmethod
from functools import partial
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.config.database import async_session_manager
from src.email_service.dispatcher import NotificationDispatcher
from src.events.domain_events import RegistrationSubmittedEvent
from src.events.dtos import RegistrationDTO, RegistrationStatus
from src.events.errors import DuplicateRegistrationError, EventFullError, EventNotFoundError
from src.events.repository.orm_models import EventPaymentProof, EventRegistration
from src.events.repository.read_models import (
    count_active_registrations,
    event_to_dto,
    get_event_with_organization,
    registration_to_dto,
)
from src.events.validation import RegisterEventPayload
from src.models.user import User

logger = logging.getLogger(__name__)


class RegisterWriteModel(ABC):
    @abstractmethod
    async def register(self, payload: RegisterEventPayload) -> RegistrationDTO:
        """Create a pending registration for ``payload.event_id``.

        Raises:
            EventNotFoundError: the event does not exist
            DuplicateRegistrationError: the email is already registered for the event
            EventFullError: the event has no seats left
        """
        raise NotImplementedError


class SqlRegisterWriteModel(RegisterWriteModel):
    async_session_manager = staticmethod(partial(async_session_manager))

    def __init__(
        self,
        session_overwrite: AsyncSession | None = None,
        dispatcher: NotificationDispatcher | None = None,
    ) -> None:
        self.session_overwrite = session_overwrite
        self.dispatcher = dispatcher

    async def register(self, payload: RegisterEventPayload) -> RegistrationDTO:
        async with self.async_session_manager(session_overwrite=self.session_overwrite) as session:
            event_row = await get_event_with_organization(session, payload.event_id)
            if event_row is None:
                raise EventNotFoundError(payload.event_id)
            event, organization = event_row

            existing = await session.execute(
                select(EventRegistration.uuid)
                .where(EventRegistration.event_id == event.uuid)
                .where(EventRegistration.email == payload.email)
            )
            if existing.first() is not None:
                raise DuplicateRegistrationError(event.uuid, payload.email)

            # Advisory: two concurrent registrations can both pass this check
            if await count_active_registrations(session, event.uuid) >= event.max_participants:
                raise EventFullError(event.uuid)

            user = await self._get_user_by_email(session, payload.email)
            registration = EventRegistration(
                event_id=event.uuid,
                user_id=user.uuid if user else None,
                name=payload.name,
                email=payload.email,
                phone=payload.phone,
                institution=payload.institution,
                status=RegistrationStatus.PENDING,
            )
            session.add(registration)
            try:
                await session.flush()
            except IntegrityError as e:
                raise DuplicateRegistrationError(event.uuid, payload.email) from e

            if user is not None:
                self._backfill_profile(user, payload)

            registration_dto = registration_to_dto(registration)
            event_dto = event_to_dto(event, organization)

        logger.info(f"Registration {registration_dto.uuid} created for event {event_dto.uuid}")

        payment_proof_url = None
        if payload.payment_proof_url:
            payment_proof_url = await self._save_payment_proof(
                registration_dto.uuid, payload.payment_proof_url
            )

        if self.dispatcher:
            await self.dispatcher.dispatch(
                RegistrationSubmittedEvent(
                    registration_id=registration_dto.uuid,
                    participant_name=registration_dto.name,
                    participant_email=registration_dto.email,
                    event=event_dto,
                    payment_proof_url=payment_proof_url,
                )
            )

        return RegistrationDTO(
            uuid=registration_dto.uuid,
            event_id=registration_dto.event_id,
            name=registration_dto.name,
            email=registration_dto.email,
            status=registration_dto.status,
            registered_at=registration_dto.registered_at,
            user_id=registration_dto.user_id,
            phone=registration_dto.phone,
            institution=registration_dto.institution,
            payment_proof_url=payment_proof_url,
        )

    async def _get_user_by_email(self, session, email: str) -> User | None:
        result = await session.execute(select(User).where(func.lower(User.email) == email))
        return result.scalar_one_or_none()

    @staticmethod
    def _backfill_profile(user: User, payload: RegisterEventPayload) -> None:
        """Fill empty profile fields only."""
        if payload.phone and not user.phone:
            user.phone = payload.phone
        if payload.institution and not user.company:
            user.company = payload.institution

    async def _save_payment_proof(self, registration_id: UUID, image_url: str) -> str | None:
        try:
            async with self.async_session_manager(session_overwrite=self.session_overwrite) as session:
                session.add(EventPaymentProof(registration_id=registration_id, image_url=image_url))
                await session.flush()
        except Exception:
            # the registration stands without its proof
            logger.exception(f"Failed to save payment proof for registration {registration_id}")
            return None
        return image_url
