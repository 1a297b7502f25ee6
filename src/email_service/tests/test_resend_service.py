"""Unit tests for ResendEmailService, mocking the HTTP client."""

from datetime import date
from uuid import UUID, uuid4

import httpx
import pytest

from src.email_service.email_logger import EmailLogger
from src.email_service.resend_service import RESEND_API_URL, ResendEmailService
from src.events.dtos import EventDTO, EventType

EVENT = EventDTO(
    uuid=uuid4(),
    organization_id=uuid4(),
    title="Tech Summit 2025!",
    event_date=date(2025, 3, 14),
    event_time="19:00",
    type=EventType.ONLINE,
    max_participants=100,
    zoom_link="https://zoom.us/j/123",
    organization_name="Tech Circle",
    organization_username="techcircle",
)


class MockResponse:
    def __init__(self, *, json_data=None, status_code=200):
        self._json_data = json_data
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise httpx.HTTPStatusError(
                f"HTTP {self.status_code}",
                request=httpx.Request("POST", RESEND_API_URL),
                response=httpx.Response(self.status_code),
            )

    def json(self):
        return self._json_data


class MockHttpClient:
    """Stands in for httpx.AsyncClient; calling it returns itself."""

    def __init__(self, response: MockResponse):
        self.response = response
        self.post_calls: list[dict] = []

    async def post(self, url: str, **kwargs) -> MockResponse:
        self.post_calls.append({"url": url, **kwargs})
        return self.response

    async def __aenter__(self):
        return self

    async def __aexit__(self, *args):
        pass

    def __call__(self):
        return self


class MemoryEmailLogger(EmailLogger):
    def __init__(self):
        self.entries: dict[UUID, dict] = {}

    async def log_email_attempt(self, **kwargs) -> UUID:
        log_uuid = uuid4()
        self.entries[log_uuid] = {**kwargs, "status": "pending"}
        return log_uuid

    async def log_email_success(self, log_uuid: UUID, provider_message_id: str | None) -> None:
        self.entries[log_uuid].update(status="sent", provider_message_id=provider_message_id)

    async def log_email_failure(self, log_uuid: UUID, error_message: str) -> None:
        self.entries[log_uuid].update(status="failed", error_message=error_message)


class MockConfig:
    resend_api_key = "test-api-key"
    emails_from = "Official ID <circle@official.id>"


@pytest.mark.asyncio
async def test_approval_email_is_posted_and_logged():
    client = MockHttpClient(MockResponse(json_data={"id": "re_123"}))
    email_logger = MemoryEmailLogger()
    service = ResendEmailService(config=MockConfig(), email_logger=email_logger, http_client_class=client)
    registration_id = uuid4()

    await service.send_registration_approval(
        to_address="budi@example.com",
        participant_name="Budi",
        event=EVENT,
        ticket_number="TEC00011425",
        circle_url="https://official.id/o/techcircle",
        registration_id=registration_id,
    )

    call = client.post_calls[0]
    assert call["url"] == RESEND_API_URL
    assert call["headers"]["Authorization"] == "Bearer test-api-key"
    assert call["json"]["to"] == ["budi@example.com"]
    assert "TEC00011425" in call["json"]["subject"]
    assert "https://zoom.us/j/123" in call["json"]["html"]

    (entry,) = email_logger.entries.values()
    assert entry["status"] == "sent"
    assert entry["provider_message_id"] == "re_123"
    assert entry["email_type"] == "registration_approval"
    assert entry["registration_id"] == registration_id


@pytest.mark.asyncio
async def test_failed_send_is_logged_and_raised():
    client = MockHttpClient(MockResponse(status_code=422))
    email_logger = MemoryEmailLogger()
    service = ResendEmailService(config=MockConfig(), email_logger=email_logger, http_client_class=client)

    with pytest.raises(httpx.HTTPStatusError):
        await service.send_registration_confirmation(
            to_address="budi@example.com",
            participant_name="Budi",
            event=EVENT,
            circle_url="https://official.id/o/techcircle",
        )

    (entry,) = email_logger.entries.values()
    assert entry["status"] == "failed"
    assert entry["email_type"] == "registration_confirmation"
    assert "422" in entry["error_message"]
