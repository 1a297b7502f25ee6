"""Tests for the approve endpoint."""

from uuid import UUID, uuid4

import pytest

from src.auth.dependencies import get_current_user
from src.auth.dtos import CurrentUser
from src.events.dtos import BatchResultDTO
from src.events.errors import RegistrationNotFoundError
from src.events.features.approve.router import get_approve_write_model
from src.events.features.approve.write_model import ApproveWriteModel
from src.events.urls import APPROVE_URL

OPERATOR = CurrentUser(uuid=uuid4(), email="admin@techcircle.id")


class InMemoryApproveWriteModel(ApproveWriteModel):
    """Approves every id in ``pending``, fails the rest, 404 when none is pending."""

    def __init__(self, pending: set[UUID], memory: dict):
        self._pending = pending
        self._memory = memory

    async def approve(self, registration_ids: list[UUID], operator: CurrentUser) -> BatchResultDTO:
        self._memory["calls"] = self._memory.get("calls", 0) + 1
        self._memory["operator"] = operator
        processed = [i for i in registration_ids if i in self._pending]
        failed = [i for i in registration_ids if i not in self._pending]
        if not processed:
            raise RegistrationNotFoundError()
        self._pending -= set(processed)
        return BatchResultDTO(processed_ids=processed, failed_ids=failed)


@pytest.mark.asyncio
async def test_approve_reports_partial_success(client_factory):
    memory = {}
    pending = uuid4()
    write_model = InMemoryApproveWriteModel({pending}, memory)
    overrides = {
        get_approve_write_model: lambda: write_model,
        get_current_user: lambda: OPERATOR,
    }

    async with client_factory(overrides) as client:
        response = await client.post(
            url=APPROVE_URL, json={"registration_ids": [str(pending), str(uuid4())]}
        )

    assert response.status_code == 200
    assert response.json() == {
        "success": True,
        "processed": 1,
        "failed": 1,
        "message": "Berhasil menyetujui 1 pendaftar.",
    }
    assert memory["operator"] == OPERATOR


@pytest.mark.asyncio
async def test_approve_with_empty_selection(client_factory):
    memory = {}
    overrides = {
        get_approve_write_model: lambda: InMemoryApproveWriteModel(set(), memory),
        get_current_user: lambda: OPERATOR,
    }

    async with client_factory(overrides) as client:
        response = await client.post(url=APPROVE_URL, json={"registration_ids": []})

    assert response.status_code == 400
    assert response.json() == {"success": False, "error": "Tidak ada data pendaftaran yang dipilih"}
    assert "calls" not in memory


@pytest.mark.asyncio
async def test_approve_with_malformed_ids(client_factory):
    overrides = {
        get_approve_write_model: lambda: InMemoryApproveWriteModel(set(), {}),
        get_current_user: lambda: OPERATOR,
    }

    async with client_factory(overrides) as client:
        response = await client.post(url=APPROVE_URL, json={"registration_ids": ["abc"]})

    assert response.status_code == 400
    assert response.json()["details"] == {"registration_ids": ["Format ID tidak valid"]}


@pytest.mark.asyncio
async def test_approve_when_no_registration_exists(client_factory):
    class NothingExists(InMemoryApproveWriteModel):
        async def approve(self, registration_ids, operator):
            raise RegistrationNotFoundError()

    overrides = {
        get_approve_write_model: lambda: NothingExists(set(), {}),
        get_current_user: lambda: OPERATOR,
    }

    async with client_factory(overrides) as client:
        response = await client.post(url=APPROVE_URL, json={"registration_ids": [str(uuid4())]})

    assert response.status_code == 404
    assert response.json()["error"] == "Data pendaftaran tidak valid atau sudah diproses"


@pytest.mark.asyncio
async def test_approving_already_confirmed_registration_is_not_found(client_factory):
    registration_id = uuid4()
    write_model = InMemoryApproveWriteModel({registration_id}, {})
    overrides = {
        get_approve_write_model: lambda: write_model,
        get_current_user: lambda: OPERATOR,
    }

    async with client_factory(overrides) as client:
        first = await client.post(url=APPROVE_URL, json={"registration_ids": [str(registration_id)]})
        second = await client.post(url=APPROVE_URL, json={"registration_ids": [str(registration_id)]})

    assert first.status_code == 200
    assert second.status_code == 404
    assert second.json() == {
        "success": False,
        "error": "Data pendaftaran tidak valid atau sudah diproses",
    }


@pytest.mark.asyncio
async def test_approve_requires_login(client_factory):
    memory = {}
    overrides = {get_approve_write_model: lambda: InMemoryApproveWriteModel({uuid4()}, memory)}

    async with client_factory(overrides) as client:
        response = await client.post(url=APPROVE_URL, json={"registration_ids": [str(uuid4())]})

    assert response.status_code == 401
    assert response.json() == {
        "success": False,
        "error": "Unauthorized. Harus login untuk melakukan aksi ini.",
    }
    assert "calls" not in memory
