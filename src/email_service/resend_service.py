import logging
from typing import Protocol
from uuid import UUID

import httpx

from src.email_service.base import EmailServiceBase
from src.email_service.email_logger import EmailLogger, NoOpEmailLogger
from src.email_service.templates import EmailTemplates
from src.events.dtos import EventDTO

logger = logging.getLogger(__name__)

RESEND_API_URL = "https://api.resend.com/emails"


class ResendEmailConfig(Protocol):
    resend_api_key: str
    emails_from: str


class ResendEmailService(EmailServiceBase):
    def __init__(
        self,
        config: ResendEmailConfig,
        email_logger: EmailLogger | None = None,
        http_client_class: type[httpx.AsyncClient] = httpx.AsyncClient,
    ):
        self._config = config
        self.email_logger = email_logger or NoOpEmailLogger()
        self.http_client_class = http_client_class

    async def _send(
        self,
        to_address: str,
        subject: str,
        html_body: str,
        text_body: str,
        email_type: str,
        registration_id: UUID | None = None,
    ) -> str | None:
        """Send through Resend and record the outcome with the injected logger."""
        log_uuid = await self.email_logger.log_email_attempt(
            to_address=to_address,
            from_address=self._config.emails_from,
            subject=subject,
            html_body=html_body,
            text_body=text_body,
            email_type=email_type,
            registration_id=registration_id,
        )

        try:
            async with self.http_client_class() as client:
                response = await client.post(
                    RESEND_API_URL,
                    headers={
                        "Authorization": f"Bearer {self._config.resend_api_key}",
                        "Content-Type": "application/json",
                    },
                    json={
                        "from": self._config.emails_from,
                        "to": [to_address],
                        "subject": subject,
                        "html": html_body,
                        "text": text_body,
                    },
                )
                response.raise_for_status()
        except httpx.HTTPError as e:
            await self.email_logger.log_email_failure(log_uuid=log_uuid, error_message=str(e))
            raise

        message_id = response.json().get("id")
        await self.email_logger.log_email_success(log_uuid=log_uuid, provider_message_id=message_id)
        logger.info(f"Sent {email_type} email to {to_address} (resend id {message_id})")
        return message_id

    async def send_registration_confirmation(
        self,
        to_address: str,
        participant_name: str,
        event: EventDTO,
        circle_url: str,
        payment_proof_url: str | None = None,
        registration_id: UUID | None = None,
    ) -> None:
        subject, html_body, text_body = EmailTemplates.render_registration_confirmation(
            participant_name=participant_name,
            event=event,
            circle_url=circle_url,
            payment_proof_url=payment_proof_url,
        )
        await self._send(
            to_address=to_address,
            subject=subject,
            html_body=html_body,
            text_body=text_body,
            email_type="registration_confirmation",
            registration_id=registration_id,
        )

    async def send_registration_approval(
        self,
        to_address: str,
        participant_name: str,
        event: EventDTO,
        ticket_number: str,
        circle_url: str,
        registration_id: UUID | None = None,
    ) -> None:
        subject, html_body, text_body = EmailTemplates.render_registration_approval(
            participant_name=participant_name,
            event=event,
            ticket_number=ticket_number,
            circle_url=circle_url,
        )
        await self._send(
            to_address=to_address,
            subject=subject,
            html_body=html_body,
            text_body=text_body,
            email_type="registration_approval",
            registration_id=registration_id,
        )
