"""Validation and sanitization of public submissions.

Schemas are pydantic models. ``validate_payload`` never raises for malformed
input: it returns either the parsed model or a field-keyed map of messages.
"""

import re
from datetime import date
from typing import Any, TypeVar
from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, Field, ValidationError, field_validator
from pydantic_core import PydanticCustomError

from src.events.dtos import RsvpStatus

ANGLE_BRACKETS = re.compile(r"[<>]")
JAVASCRIPT_PROTOCOL = re.compile(r"javascript:", re.IGNORECASE)
EVENT_HANDLER = re.compile(r"on\w+=", re.IGNORECASE)
WHITESPACE = re.compile(r"\s")

PHONE_PATTERN = re.compile(r"^(\+62|62|0)8[1-9][0-9]{7,11}$")
ISO_DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")
URL_PATTERN = re.compile(r"^https?://\S+$", re.IGNORECASE)
EMAIL_MAX_LENGTH = 100

ModelT = TypeVar("ModelT", bound=BaseModel)


def sanitize_text(text: str) -> str:
    """Strip angle brackets, ``javascript:`` and inline event handlers. Not an HTML sanitizer."""
    text = ANGLE_BRACKETS.sub("", text)
    text = JAVASCRIPT_PROTOCOL.sub("", text)
    text = EVENT_HANDLER.sub("", text)
    return text.strip()


def parse_iso_date(value: str) -> date:
    """Parse a literal ``YYYY-MM-DD`` date."""
    if not ISO_DATE_PATTERN.match(value):
        raise ValueError(f"Date must be formatted as YYYY-MM-DD, got {value!r}")
    return date.fromisoformat(value)


def _blank_to_none(value: Any) -> Any:
    if isinstance(value, str) and not value.strip():
        return None
    return value


class RegisterEventPayload(BaseModel):
    """Public event registration form."""

    model_config = ConfigDict(str_strip_whitespace=True)

    event_id: UUID
    name: str = Field(min_length=2, max_length=100)
    email: EmailStr
    phone: str | None = Field(default=None, max_length=20)
    institution: str | None = Field(default=None, max_length=200)
    payment_proof_url: str | None = Field(default=None, max_length=1000)

    @field_validator("name", mode="before")
    @classmethod
    def sanitize_name(cls, v: Any) -> Any:
        return sanitize_text(v) if isinstance(v, str) else v

    @field_validator("institution", mode="before")
    @classmethod
    def sanitize_institution(cls, v: Any) -> Any:
        v = _blank_to_none(v)
        return sanitize_text(v) if isinstance(v, str) else v

    @field_validator("email", mode="before")
    @classmethod
    def normalize_email(cls, v: Any) -> Any:
        if not isinstance(v, str):
            return v
        v = v.strip().lower()
        if len(v) > EMAIL_MAX_LENGTH:
            raise PydanticCustomError(
                "string_too_long",
                "String should have at most {max_length} characters",
                {"max_length": EMAIL_MAX_LENGTH},
            )
        return v

    @field_validator("phone", mode="before")
    @classmethod
    def strip_phone(cls, v: Any) -> Any:
        v = _blank_to_none(v)
        return WHITESPACE.sub("", v) if isinstance(v, str) else v

    @field_validator("phone")
    @classmethod
    def check_phone(cls, v: str | None) -> str | None:
        if v is not None and not PHONE_PATTERN.match(v):
            raise PydanticCustomError(
                "phone_format",
                "Format nomor WhatsApp tidak valid (contoh: 08123456789)",
            )
        return v

    @field_validator("payment_proof_url", mode="before")
    @classmethod
    def check_payment_proof_url(cls, v: Any) -> Any:
        v = _blank_to_none(v)
        if isinstance(v, str) and not URL_PATTERN.match(v.strip()):
            raise PydanticCustomError("url_format", "URL bukti pembayaran tidak valid")
        return v


class RegistrationIdsPayload(BaseModel):
    """Batch of registration ids, used by approve and cancel."""

    registration_ids: list[UUID] = Field(min_length=1, max_length=500)


class ApprovePayload(RegistrationIdsPayload):
    pass


class CancelPayload(RegistrationIdsPayload):
    pass


class RsvpPayload(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    ticket_number: str = Field(min_length=1, max_length=32)
    status: RsvpStatus

    @field_validator("ticket_number", mode="before")
    @classmethod
    def normalize_ticket_number(cls, v: Any) -> Any:
        return v.strip().upper() if isinstance(v, str) else v


MESSAGES = {
    "missing": "Wajib diisi",
    "string_too_short": "Minimal {min_length} karakter",
    "string_too_long": "Maksimal {max_length} karakter",
    "too_short": "Minimal {min_length} item",
    "too_long": "Maksimal {max_length} item",
    "uuid_parsing": "Format ID tidak valid",
    "uuid_type": "Format ID tidak valid",
    "value_error": "Format email tidak valid",
    "enum": "Pilihan tidak valid",
    "string_type": "Harus berupa teks",
    "list_type": "Harus berupa daftar",
}


def _field_name(loc: tuple) -> str:
    parts = [str(part) for part in loc if not isinstance(part, int)]
    return ".".join(parts) or "__root__"


def _message(error: dict) -> str:
    template = MESSAGES.get(error["type"])
    if template is None:
        return error["msg"]
    return template.format(**error.get("ctx", {}))


def validate_payload(
    schema: type[ModelT], data: Any
) -> tuple[ModelT, None] | tuple[None, dict[str, list[str]]]:
    """Validate ``data`` against ``schema``.

    Returns ``(model, None)`` on success and ``(None, errors)`` otherwise, where
    ``errors`` maps field names to messages.
    """
    if not isinstance(data, dict):
        return None, {"__root__": ["Body harus berupa objek JSON"]}
    try:
        return schema.model_validate(data), None
    except ValidationError as e:
        errors: dict[str, list[str]] = {}
        for error in e.errors():
            errors.setdefault(_field_name(error["loc"]), []).append(_message(error))
        return None, errors
