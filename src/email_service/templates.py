from dataclasses import dataclass
from datetime import date

from src.events.dtos import EventDTO, EventType

DAY_NAMES = ["Senin", "Selasa", "Rabu", "Kamis", "Jumat", "Sabtu", "Minggu"]
MONTH_NAMES = [
    "Januari", "Februari", "Maret", "April", "Mei", "Juni",
    "Juli", "Agustus", "September", "Oktober", "November", "Desember",
]
EVENT_TYPE_LABELS = {
    EventType.OFFLINE: "Offline",
    EventType.ONLINE: "Online",
    EventType.HYBRID: "Hybrid",
}


def format_event_date(value: date) -> str:
    """``2025-03-14`` -> ``Jumat, 14 Maret 2025``."""
    return f"{DAY_NAMES[value.weekday()]}, {value.day} {MONTH_NAMES[value.month - 1]} {value.year}"


def event_context(event: EventDTO) -> dict[str, str]:
    if event.type == EventType.ONLINE:
        venue = "Link Zoom akan dibagikan oleh penyelenggara"
    else:
        venue = event.location or "Akan diumumkan"
    return {
        "event_title": event.title,
        "event_date": format_event_date(event.event_date),
        "event_time": event.event_time or "-",
        "event_type": EVENT_TYPE_LABELS.get(event.type, str(event.type)),
        "event_location": venue,
        "organization_name": event.organization_name or "Circle",
    }


@dataclass
class EmailTemplates:
    REGISTRATION_SUBJECT = "Pendaftaran Diterima: {event_title}"
    REGISTRATION_HTML = """
    <!DOCTYPE html>
    <html>
    <head>
        <meta charset="utf-8">
        <meta name="viewport" content="width=device-width, initial-scale=1.0">
    </head>
    <body style="font-family: Arial, sans-serif; line-height: 1.6; color: #333; max-width: 600px; margin: 0 auto; padding: 20px;">
        <div style="text-align: center; margin-bottom: 30px;">
            <h1 style="color: #2563eb;">Pendaftaran Diterima</h1>
        </div>

        <p>Halo {participant_name},</p>

        <p>Terima kasih telah mendaftar untuk <strong>{event_title}</strong> yang diselenggarakan oleh {organization_name}.
        Pendaftaran Anda sedang ditinjau oleh penyelenggara. Tiket akan dikirim melalui email setelah pendaftaran disetujui.</p>

        <div style="background-color: #eff6ff; padding: 20px; border-radius: 8px; margin: 20px 0;">
            <h2 style="color: #1e40af; margin-top: 0;">Detail Event</h2>
            <p><strong>Tanggal:</strong> {event_date}</p>
            <p><strong>Waktu:</strong> {event_time}</p>
            <p><strong>Tipe:</strong> {event_type}</p>
            <p><strong>Lokasi:</strong> {event_location}</p>
        </div>
        {payment_proof_block}
        <div style="text-align: center; margin: 30px 0;">
            <a href="{circle_url}" style="background-color: #2563eb; color: white; padding: 15px 30px; text-decoration: none; border-radius: 5px; font-size: 18px;">
                Lihat Circle
            </a>
        </div>

        <hr style="border: none; border-top: 1px solid #ddd; margin: 30px 0;">

        <p style="font-size: 12px; color: #888; text-align: center;">
            Email ini dikirim otomatis oleh Official ID.
        </p>
    </body>
    </html>
    """

    REGISTRATION_TEXT = """
    Halo {participant_name},

    Terima kasih telah mendaftar untuk {event_title} yang diselenggarakan oleh {organization_name}.
    Pendaftaran Anda sedang ditinjau oleh penyelenggara. Tiket akan dikirim melalui email setelah pendaftaran disetujui.

    Detail Event:
    - Tanggal: {event_date}
    - Waktu: {event_time}
    - Tipe: {event_type}
    - Lokasi: {event_location}
    {payment_proof_line}
    Lihat Circle: {circle_url}
    """

    PAYMENT_PROOF_HTML = """
        <p>Bukti pembayaran Anda telah kami terima: <a href="{payment_proof_url}">lihat bukti</a>.</p>
    """
    PAYMENT_PROOF_TEXT = "Bukti pembayaran: {payment_proof_url}\n"

    APPROVAL_SUBJECT = "Pendaftaran Disetujui: {event_title} (Tiket {ticket_number})"
    APPROVAL_HTML = """
    <!DOCTYPE html>
    <html>
    <head>
        <meta charset="utf-8">
        <meta name="viewport" content="width=device-width, initial-scale=1.0">
    </head>
    <body style="font-family: Arial, sans-serif; line-height: 1.6; color: #333; max-width: 600px; margin: 0 auto; padding: 20px;">
        <div style="text-align: center; margin-bottom: 30px;">
            <h1 style="color: #16a34a;">Pendaftaran Disetujui!</h1>
        </div>

        <p>Halo {participant_name},</p>

        <p>Pendaftaran Anda untuk <strong>{event_title}</strong> telah disetujui oleh {organization_name}.</p>

        <div style="text-align: center; background-color: #f0fdf4; padding: 20px; border-radius: 8px; margin: 20px 0;">
            <p style="margin: 0;">Nomor Tiket</p>
            <p style="font-size: 28px; font-weight: bold; letter-spacing: 4px; margin: 8px 0;">{ticket_number}</p>
        </div>

        <div style="background-color: #eff6ff; padding: 20px; border-radius: 8px; margin: 20px 0;">
            <h2 style="color: #1e40af; margin-top: 0;">Detail Event</h2>
            <p><strong>Tanggal:</strong> {event_date}</p>
            <p><strong>Waktu:</strong> {event_time}</p>
            <p><strong>Tipe:</strong> {event_type}</p>
            <p><strong>Lokasi:</strong> {event_location}</p>
            {zoom_block}
        </div>

        <p>Simpan nomor tiket ini untuk konfirmasi kehadiran.</p>

        <div style="text-align: center; margin: 30px 0;">
            <a href="{circle_url}" style="background-color: #16a34a; color: white; padding: 15px 30px; text-decoration: none; border-radius: 5px; font-size: 18px;">
                Lihat Circle
            </a>
        </div>
    </body>
    </html>
    """

    APPROVAL_TEXT = """
    Halo {participant_name},

    Pendaftaran Anda untuk {event_title} telah disetujui oleh {organization_name}.

    Nomor Tiket: {ticket_number}

    Detail Event:
    - Tanggal: {event_date}
    - Waktu: {event_time}
    - Tipe: {event_type}
    - Lokasi: {event_location}
    {zoom_line}
    Simpan nomor tiket ini untuk konfirmasi kehadiran.

    Lihat Circle: {circle_url}
    """

    ZOOM_HTML = '<p><strong>Link Zoom:</strong> <a href="{zoom_link}">{zoom_link}</a></p>'
    ZOOM_TEXT = "- Link Zoom: {zoom_link}\n"

    @classmethod
    def render_registration_confirmation(
        cls,
        participant_name: str,
        event: EventDTO,
        circle_url: str,
        payment_proof_url: str | None = None,
    ) -> tuple[str, str, str]:
        """Returns: (subject, html_body, text_body)"""
        context = event_context(event) | {
            "participant_name": participant_name,
            "circle_url": circle_url,
            "payment_proof_block": "",
            "payment_proof_line": "",
        }
        if payment_proof_url:
            context["payment_proof_block"] = cls.PAYMENT_PROOF_HTML.format(payment_proof_url=payment_proof_url)
            context["payment_proof_line"] = cls.PAYMENT_PROOF_TEXT.format(payment_proof_url=payment_proof_url)
        return (
            cls.REGISTRATION_SUBJECT.format(**context),
            cls.REGISTRATION_HTML.format(**context),
            cls.REGISTRATION_TEXT.format(**context),
        )

    @classmethod
    def render_registration_approval(
        cls,
        participant_name: str,
        event: EventDTO,
        ticket_number: str,
        circle_url: str,
    ) -> tuple[str, str, str]:
        """Returns: (subject, html_body, text_body)"""
        context = event_context(event) | {
            "participant_name": participant_name,
            "ticket_number": ticket_number,
            "circle_url": circle_url,
            "zoom_block": "",
            "zoom_line": "",
        }
        if event.zoom_link and event.type != EventType.OFFLINE:
            context["zoom_block"] = cls.ZOOM_HTML.format(zoom_link=event.zoom_link)
            context["zoom_line"] = cls.ZOOM_TEXT.format(zoom_link=event.zoom_link)
        return (
            cls.APPROVAL_SUBJECT.format(**context),
            cls.APPROVAL_HTML.format(**context),
            cls.APPROVAL_TEXT.format(**context),
        )
