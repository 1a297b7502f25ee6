import logging
from abc import ABC, abstractmethod
from functools import partial
from uuid import UUID

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from src.auth.dtos import CurrentUser
from src.config.database import async_session_manager
from src.events.dtos import BatchResultDTO, RegistrationStatus
from src.events.errors import RegistrationNotFoundError
from src.events.repository.orm_models import EventRegistration
from src.events.repository.policies import scope_registrations_to_operator

logger = logging.getLogger(__name__)

CANCELLABLE_STATUSES = (RegistrationStatus.PENDING, RegistrationStatus.CONFIRMED)


class CancelRegistrationWriteModel(ABC):
    @abstractmethod
    async def cancel(self, registration_ids: list[UUID], operator: CurrentUser) -> BatchResultDTO:
        """Cancel registrations, keeping their tickets and RSVPs.

        Raises RegistrationNotFoundError when none of the ids exist.
        """
        raise NotImplementedError


class SqlCancelRegistrationWriteModel(CancelRegistrationWriteModel):
    async_session_manager = staticmethod(partial(async_session_manager))

    def __init__(self, session_overwrite: AsyncSession | None = None) -> None:
        self.session_overwrite = session_overwrite

    async def cancel(self, registration_ids: list[UUID], operator: CurrentUser) -> BatchResultDTO:
        registration_ids = list(dict.fromkeys(registration_ids))
        processed, failed, skipped = [], [], []

        async with self.async_session_manager(session_overwrite=self.session_overwrite) as session:
            result = await session.execute(
                select(EventRegistration.uuid).where(EventRegistration.uuid.in_(registration_ids))
            )
            existing = set(result.scalars().all())
            if not existing:
                raise RegistrationNotFoundError()

            for registration_id in registration_ids:
                if registration_id not in existing:
                    skipped.append(registration_id)
                    continue
                stmt = (
                    update(EventRegistration)
                    .where(EventRegistration.uuid == registration_id)
                    .where(EventRegistration.status.in_(CANCELLABLE_STATUSES))
                    .values(status=RegistrationStatus.CANCELLED)
                )
                result = await session.execute(
                    scope_registrations_to_operator(stmt, operator).execution_options(
                        synchronize_session=False
                    )
                )
                if result.rowcount == 0:
                    logger.warning(
                        f"Registration {registration_id} was not cancelled for {operator.email}: "
                        f"already cancelled or not authorized"
                    )
                    failed.append(registration_id)
                else:
                    processed.append(registration_id)

        logger.info(f"Operator {operator.email} cancelled {len(processed)}, failed {len(failed)}")
        return BatchResultDTO(processed_ids=processed, failed_ids=failed, skipped_ids=skipped)
