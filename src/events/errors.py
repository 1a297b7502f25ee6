"""Workflow errors.

Every error carries a machine-readable code and a user-safe message in the
application's operating language. Routers decide the HTTP status.
"""

from enum import Enum


class ErrorCode(str, Enum):
    VALIDATION_FAILED = "VALIDATION_FAILED"
    EVENT_NOT_FOUND = "EVENT_NOT_FOUND"
    EVENT_FULL = "EVENT_FULL"
    DUPLICATE_REGISTRATION = "DUPLICATE_REGISTRATION"
    REGISTRATION_NOT_FOUND = "REGISTRATION_NOT_FOUND"
    REGISTRATION_NOT_CONFIRMED = "REGISTRATION_NOT_CONFIRMED"
    TICKET_NOT_FOUND = "TICKET_NOT_FOUND"
    NOT_AUTHENTICATED = "NOT_AUTHENTICATED"
    NOT_AUTHORIZED = "NOT_AUTHORIZED"


class WorkflowError(Exception):
    """Base error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __init__(self, message: str | None = None) -> None:
        if message is not None:
            self.message = message
        super().__init__(f"{self.code.value}: {self.message}")


class PayloadValidationError(WorkflowError):
    code = ErrorCode.VALIDATION_FAILED
    message = "Validasi gagal"

    def __init__(self, details: dict[str, list[str]], message: str | None = None) -> None:
        self.details = details
        super().__init__(message)


class EventNotFoundError(WorkflowError):
    code = ErrorCode.EVENT_NOT_FOUND
    message = "Event tidak ditemukan"

    def __init__(self, event_id) -> None:
        self.event_id = event_id
        super().__init__()


class EventFullError(WorkflowError):
    code = ErrorCode.EVENT_FULL
    message = "Kuota peserta sudah penuh"

    def __init__(self, event_id) -> None:
        self.event_id = event_id
        super().__init__()


class DuplicateRegistrationError(WorkflowError):
    """Raised when the email is already registered for the event."""

    code = ErrorCode.DUPLICATE_REGISTRATION
    message = "Email ini sudah terdaftar untuk event ini"

    def __init__(self, event_id, email: str) -> None:
        self.event_id = event_id
        self.email = email
        super().__init__()


class RegistrationNotFoundError(WorkflowError):
    code = ErrorCode.REGISTRATION_NOT_FOUND
    message = "Data pendaftaran tidak valid atau sudah diproses"


class RegistrationNotConfirmedError(WorkflowError):
    code = ErrorCode.REGISTRATION_NOT_CONFIRMED
    message = "Pendaftaran belum dikonfirmasi"


class TicketNotFoundError(WorkflowError):
    code = ErrorCode.TICKET_NOT_FOUND
    message = "Tiket tidak ditemukan"

    def __init__(self, ticket_number: str) -> None:
        self.ticket_number = ticket_number
        super().__init__()


class NotAuthenticatedError(WorkflowError):
    code = ErrorCode.NOT_AUTHENTICATED
    message = "Unauthorized. Harus login untuk melakukan aksi ini."


class NotAuthorizedError(WorkflowError):
    code = ErrorCode.NOT_AUTHORIZED
    message = "Anda tidak memiliki akses untuk event ini"
