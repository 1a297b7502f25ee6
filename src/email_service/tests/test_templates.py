from datetime import date
from uuid import uuid4

from src.email_service.templates import EmailTemplates, format_event_date
from src.events.dtos import EventDTO, EventType


def make_event(**overrides) -> EventDTO:
    data = {
        "uuid": uuid4(),
        "organization_id": uuid4(),
        "title": "Tech Summit 2025!",
        "event_date": date(2025, 3, 14),
        "event_time": "19:00",
        "type": EventType.OFFLINE,
        "max_participants": 100,
        "location": "Jakarta Convention Center",
        "zoom_link": "https://zoom.us/j/123",
        "organization_name": "Tech Circle",
        "organization_username": "techcircle",
    }
    return EventDTO(**(data | overrides))


def test_format_event_date_in_indonesian():
    assert format_event_date(date(2025, 3, 14)) == "Jumat, 14 Maret 2025"
    assert format_event_date(date(2025, 8, 17)) == "Minggu, 17 Agustus 2025"


def test_registration_confirmation():
    subject, html_body, text_body = EmailTemplates.render_registration_confirmation(
        participant_name="Budi",
        event=make_event(),
        circle_url="https://official.id/o/techcircle",
        payment_proof_url="https://img.example.com/p.jpg",
    )

    assert subject == "Pendaftaran Diterima: Tech Summit 2025!"
    assert "Halo Budi" in html_body
    assert "Jumat, 14 Maret 2025" in html_body
    assert "https://official.id/o/techcircle" in html_body
    assert "https://img.example.com/p.jpg" in text_body
    assert "Jakarta Convention Center" in text_body


def test_approval_hides_zoom_link_for_offline_events():
    subject, html_body, text_body = EmailTemplates.render_registration_approval(
        participant_name="Budi",
        event=make_event(),
        ticket_number="TEC00011425",
        circle_url="https://official.id/o/techcircle",
    )

    assert subject == "Pendaftaran Disetujui: Tech Summit 2025! (Tiket TEC00011425)"
    assert "TEC00011425" in html_body
    assert "zoom.us" not in html_body
    assert "zoom.us" not in text_body


def test_approval_for_online_event_includes_zoom_link():
    _, html_body, text_body = EmailTemplates.render_registration_approval(
        participant_name="Budi",
        event=make_event(type=EventType.ONLINE, location=None),
        ticket_number="TEC00011425",
        circle_url="https://official.id/o/techcircle",
    )

    assert "https://zoom.us/j/123" in html_body
    assert "Link Zoom: https://zoom.us/j/123" in text_body
