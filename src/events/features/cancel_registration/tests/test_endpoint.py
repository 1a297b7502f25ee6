"""Tests for the cancel endpoint."""

from uuid import UUID, uuid4

import pytest

from src.auth.dependencies import get_current_user
from src.auth.dtos import CurrentUser
from src.events.dtos import BatchResultDTO
from src.events.features.cancel_registration.router import get_cancel_registration_write_model
from src.events.features.cancel_registration.write_model import CancelRegistrationWriteModel
from src.events.urls import CANCEL_URL

OPERATOR = CurrentUser(uuid=uuid4(), email="admin@techcircle.id")


class InMemoryCancelRegistrationWriteModel(CancelRegistrationWriteModel):
    def __init__(self, memory: dict):
        self._memory = memory

    async def cancel(self, registration_ids: list[UUID], operator: CurrentUser) -> BatchResultDTO:
        self._memory["cancelled"] = registration_ids
        return BatchResultDTO(processed_ids=registration_ids)


@pytest.mark.asyncio
async def test_cancel_registrations(client_factory):
    memory = {}
    ids = [uuid4(), uuid4()]
    overrides = {
        get_cancel_registration_write_model: lambda: InMemoryCancelRegistrationWriteModel(memory),
        get_current_user: lambda: OPERATOR,
    }

    async with client_factory(overrides) as client:
        response = await client.post(url=CANCEL_URL, json={"registration_ids": [str(i) for i in ids]})

    assert response.status_code == 200
    data = response.json()
    assert data["processed"] == 2
    assert data["failed"] == 0
    assert data["message"] == "Berhasil membatalkan 2 pendaftaran."
    assert memory["cancelled"] == ids


@pytest.mark.asyncio
async def test_cancel_requires_login(client_factory):
    overrides = {
        get_cancel_registration_write_model: lambda: InMemoryCancelRegistrationWriteModel({}),
    }

    async with client_factory(overrides) as client:
        response = await client.post(url=CANCEL_URL, json={"registration_ids": [str(uuid4())]})

    assert response.status_code == 401
