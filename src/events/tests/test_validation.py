from uuid import uuid4

import pytest

from src.events.dtos import RsvpStatus
from src.events.validation import (
    RegisterEventPayload,
    RegistrationIdsPayload,
    RsvpPayload,
    sanitize_text,
    validate_payload,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("  Budi Santoso ", "Budi Santoso"),
        ("<script>alert(1)</script>", "scriptalert(1)/script"),
        ("JavaScript:void(0)", "void(0)"),
        ('x onerror=steal() y', "x steal() y"),
    ],
)
def test_sanitize_text(text, expected):
    assert sanitize_text(text) == expected


def test_register_payload_is_normalized():
    payload, errors = validate_payload(
        RegisterEventPayload,
        {
            "event_id": str(uuid4()),
            "name": " <Budi> ",
            "email": "  BUDI@Example.COM ",
            "phone": "+62 812 3456 789",
            "institution": "   ",
            "payment_proof_url": "",
        },
    )

    assert errors is None
    assert payload.name == "Budi"
    assert payload.email == "budi@example.com"
    assert payload.phone == "+628123456789"
    assert payload.institution is None
    assert payload.payment_proof_url is None


@pytest.mark.parametrize("phone", ["0712345678", "08123", "0812345678901234", "08-1234-5678"])
def test_register_payload_rejects_bad_phone(phone):
    _, errors = validate_payload(
        RegisterEventPayload,
        {"event_id": str(uuid4()), "name": "Budi", "email": "budi@example.com", "phone": phone},
    )

    assert errors == {"phone": ["Format nomor WhatsApp tidak valid (contoh: 08123456789)"]}


def test_register_payload_reports_every_field():
    _, errors = validate_payload(
        RegisterEventPayload,
        {"name": "x" * 101, "email": "not-an-email", "payment_proof_url": "ftp://host/file"},
    )

    assert errors == {
        "event_id": ["Wajib diisi"],
        "name": ["Maksimal 100 karakter"],
        "email": ["Format email tidak valid"],
        "payment_proof_url": ["URL bukti pembayaran tidak valid"],
    }


def test_overlong_email_is_rejected():
    _, errors = validate_payload(
        RegisterEventPayload,
        {"event_id": str(uuid4()), "name": "Budi", "email": "a" * 95 + "@example.com"},
    )

    assert errors == {"email": ["Maksimal 100 karakter"]}


def test_registration_ids_must_not_be_empty():
    _, errors = validate_payload(RegistrationIdsPayload, {"registration_ids": []})

    assert errors == {"registration_ids": ["Minimal 1 item"]}


def test_rsvp_payload_uppercases_ticket_number():
    payload, errors = validate_payload(
        RsvpPayload, {"ticket_number": " tec00071425 ", "status": "Hadir Terlambat"}
    )

    assert errors is None
    assert payload.ticket_number == "TEC00071425"
    assert payload.status == RsvpStatus.LATE


@pytest.mark.parametrize("data", [None, [], "text", 42])
def test_non_object_bodies_are_rejected(data):
    payload, errors = validate_payload(RsvpPayload, data)

    assert payload is None
    assert errors == {"__root__": ["Body harus berupa objek JSON"]}
