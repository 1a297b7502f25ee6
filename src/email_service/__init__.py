from src.config.settings import settings
from src.email_service.base import EmailServiceBase
from src.email_service.dispatcher import NotificationDispatcher
from src.email_service.email_logger import SQLEmailLogger
from src.email_service.resend_service import ResendEmailService
from src.email_service.smtp_service import SMTPEmailService
from src.email_service.templates import EmailTemplates


def get_email_service() -> EmailServiceBase:
    if settings.resend_api_key:
        return ResendEmailService(config=settings, email_logger=SQLEmailLogger())
    return SMTPEmailService()


def get_notification_dispatcher() -> NotificationDispatcher:
    return NotificationDispatcher(get_email_service())


__all__ = [
    "EmailServiceBase",
    "EmailTemplates",
    "NotificationDispatcher",
    "get_email_service",
    "get_notification_dispatcher",
]
