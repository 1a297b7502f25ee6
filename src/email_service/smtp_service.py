import asyncio
import smtplib
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
from uuid import UUID

from src.config.settings import settings
from src.email_service.base import EmailServiceBase
from src.email_service.templates import EmailTemplates
from src.events.dtos import EventDTO


class SMTPEmailService(EmailServiceBase):
    def __init__(self):
        self.host = settings.smtp_host
        self.port = settings.smtp_port
        self.username = settings.smtp_user
        self.password = settings.smtp_password
        self.from_address = settings.emails_from

    def _create_message(
        self,
        to_address: str,
        subject: str,
        html_body: str,
        text_body: str,
    ) -> MIMEMultipart:
        msg = MIMEMultipart("alternative")
        msg["Subject"] = subject
        msg["From"] = self.from_address
        msg["To"] = to_address

        msg.attach(MIMEText(text_body, "plain"))
        msg.attach(MIMEText(html_body, "html"))

        return msg

    def _send(self, msg: MIMEMultipart) -> None:
        with smtplib.SMTP(self.host, self.port) as server:
            if self.username and self.password:
                server.starttls()
                server.login(self.username, self.password)
            server.send_message(msg)

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
        msg = self._create_message(to_address, subject, html_body, text_body)
        await asyncio.to_thread(self._send, msg)

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
        msg = self._create_message(to_address, subject, html_body, text_body)
        await asyncio.to_thread(self._send, msg)
