from abc import ABC, abstractmethod
from uuid import UUID, uuid4

from src.config.database import async_session_manager
from src.models.email_log import EmailLog


class EmailLogger(ABC):
    """Records outbound notification emails and their delivery outcome."""

    @abstractmethod
    async def log_email_attempt(
        self,
        to_address: str,
        from_address: str,
        subject: str,
        html_body: str,
        text_body: str,
        email_type: str,
        registration_id: UUID | None = None,
    ) -> UUID:
        """
        Log an email before it is handed to the provider.

        Returns:
            UUID of the created log entry
        """
        pass

    @abstractmethod
    async def log_email_success(self, log_uuid: UUID, provider_message_id: str | None) -> None:
        pass

    @abstractmethod
    async def log_email_failure(self, log_uuid: UUID, error_message: str) -> None:
        pass


class SQLEmailLogger(EmailLogger):
    async def log_email_attempt(
        self,
        to_address: str,
        from_address: str,
        subject: str,
        html_body: str,
        text_body: str,
        email_type: str,
        registration_id: UUID | None = None,
    ) -> UUID:
        email_log = EmailLog(
            to_address=to_address,
            from_address=from_address,
            subject=subject,
            html_body=html_body,
            text_body=text_body,
            email_type=email_type,
            registration_id=registration_id,
            status="pending",
        )
        async with async_session_manager() as session:
            session.add(email_log)
            await session.flush()
            return email_log.uuid

    async def log_email_success(self, log_uuid: UUID, provider_message_id: str | None) -> None:
        async with async_session_manager() as session:
            email_log = await session.get(EmailLog, log_uuid)
            if email_log:
                email_log.provider_message_id = provider_message_id
                email_log.status = "sent"

    async def log_email_failure(self, log_uuid: UUID, error_message: str) -> None:
        async with async_session_manager() as session:
            email_log = await session.get(EmailLog, log_uuid)
            if email_log:
                email_log.status = "failed"
                email_log.error_message = error_message


class NoOpEmailLogger(EmailLogger):
    """Used in tests and when no database logging is wanted."""

    async def log_email_attempt(
        self,
        to_address: str,
        from_address: str,
        subject: str,
        html_body: str,
        text_body: str,
        email_type: str,
        registration_id: UUID | None = None,
    ) -> UUID:
        return uuid4()

    async def log_email_success(self, log_uuid: UUID, provider_message_id: str | None) -> None:
        pass

    async def log_email_failure(self, log_uuid: UUID, error_message: str) -> None:
        pass
