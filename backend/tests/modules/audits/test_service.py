"""Tests for the audit service."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from modules.audits.exceptions import StoreNotAssignedError, UnknownChecklistItemError
from modules.audits.models import (
    AuditRecord,
    ChecklistCategory,
    ItemResponse,
    NewAuditRequest,
    PhotoUpload,
)
from modules.audits.service import AuditService
from shared.exceptions import DataAccessError
from tests.conftest import create_mock_audit_data


def checklist(item_count: int = 4) -> list[ChecklistCategory]:
    return [
        ChecklistCategory.model_validate({
            "id": "cat-1",
            "name": "Exhibition",
            "items": [
                {"id": f"i-{n}", "category_id": "cat-1", "description": f"Item {n}", "order_index": n}
                for n in range(1, item_count + 1)
            ],
        })
    ]


@pytest.fixture
def repository() -> MagicMock:
    repo = MagicMock()
    repo.list_history = AsyncMock(return_value=[])
    repo.list_checklist = AsyncMock(return_value=checklist())

    async def create_audit(data):
        row = create_mock_audit_data("audit-new", store_id=data["store_id"], score=data["score"])
        return AuditRecord.model_validate(row)

    repo.create_audit = AsyncMock(side_effect=create_audit)
    repo.save_responses = AsyncMock(side_effect=lambda rows: len(rows))
    repo.upload_photo = AsyncMock(return_value="https://cdn.example/photo.jpg")
    repo.save_photo = AsyncMock()
    return repo


@pytest.fixture
def service(repository) -> AuditService:
    return AuditService(repository)


class TestHistory:
    @pytest.mark.asyncio
    async def test_store_manager_sees_own_store(self, service, repository, manager_profile):
        await service.list_history(manager_profile)
        repository.list_history.assert_awaited_once_with(store_id="store-1")

    @pytest.mark.asyncio
    async def test_supervisor_sees_all(self, service, repository, supervisor_profile):
        await service.list_history(supervisor_profile)
        repository.list_history.assert_awaited_once_with(store_id=None)

    @pytest.mark.asyncio
    async def test_read_failure_is_empty(self, service, repository, admin_profile):
        repository.list_history.side_effect = DataAccessError("denied", operation="list_audit_history")
        assert await service.list_history(admin_profile) == []


class TestSubmitAudit:
    @pytest.mark.asyncio
    async def test_score_counts_unanswered_items(self, service, repository, admin_profile):
        request = NewAuditRequest(
            store_id="store-1",
            responses=[
                ItemResponse(checklist_item_id="i-1", compliant=True),
                ItemResponse(checklist_item_id="i-2", compliant=True, observation="ok"),
                ItemResponse(checklist_item_id="i-3", compliant=False),
                ItemResponse(checklist_item_id="i-4", compliant=None),
            ],
        )

        result = await service.submit_audit(admin_profile, request, [])

        data = repository.create_audit.await_args.args[0]
        assert data["score"] == 50
        assert data["status"] == "completed"
        assert data["auditor_id"] == admin_profile.id
        assert data["completed_at"]
        assert result.responses_saved == 3
        saved = repository.save_responses.await_args.args[0]
        assert [r["checklist_item_id"] for r in saved] == ["i-1", "i-2", "i-3"]
        assert saved[1]["observation"] == "ok"
        assert saved[0]["observation"] is None

    @pytest.mark.asyncio
    async def test_photos_uploaded_under_audit_folder(self, service, repository, admin_profile):
        photos = [PhotoUpload(filename="shelf.jpg", content=b"jpeg")]

        result = await service.submit_audit(admin_profile, NewAuditRequest(store_id="store-1"), photos)

        path = repository.upload_photo.await_args.args[0]
        assert path.startswith("audit-new/")
        assert path.endswith("-shelf.jpg")
        repository.save_photo.assert_awaited_once_with("audit-new", "https://cdn.example/photo.jpg")
        assert result.photos_uploaded == 1

    @pytest.mark.asyncio
    async def test_failed_photo_skipped(self, service, repository, admin_profile):
        repository.upload_photo.side_effect = [
            DataAccessError("too large", operation="upload_photo"),
            "https://cdn.example/ok.jpg",
        ]
        photos = [PhotoUpload(filename="a.jpg", content=b"1"), PhotoUpload(filename="b.jpg", content=b"2")]

        result = await service.submit_audit(admin_profile, NewAuditRequest(store_id="store-1"), photos)

        assert result.photos_failed == 1
        assert result.photos_uploaded == 1
        repository.save_photo.assert_awaited_once_with("audit-new", "https://cdn.example/ok.jpg")

    @pytest.mark.asyncio
    async def test_store_manager_limited_to_own_store(self, service, repository, manager_profile):
        with pytest.raises(StoreNotAssignedError):
            await service.submit_audit(manager_profile, NewAuditRequest(store_id="store-2"), [])
        repository.create_audit.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_store_manager_own_store(self, service, manager_profile):
        result = await service.submit_audit(manager_profile, NewAuditRequest(store_id="store-1"), [])
        assert result.audit.store_id == "store-1"

    @pytest.mark.asyncio
    async def test_unknown_item_rejected(self, service, repository, admin_profile):
        request = NewAuditRequest(
            store_id="store-1",
            responses=[ItemResponse(checklist_item_id="i-99", compliant=True)],
        )
        with pytest.raises(UnknownChecklistItemError):
            await service.submit_audit(admin_profile, request, [])
        repository.create_audit.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_checklist_failure_propagates(self, service, repository, admin_profile):
        repository.list_checklist.side_effect = DataAccessError("offline", operation="list_checklist")
        with pytest.raises(DataAccessError):
            await service.submit_audit(admin_profile, NewAuditRequest(store_id="store-1"), [])

    @pytest.mark.asyncio
    async def test_response_failure_propagates(self, service, repository, admin_profile):
        repository.save_responses.side_effect = DataAccessError("denied", operation="save_audit_responses")
        request = NewAuditRequest(
            store_id="store-1",
            responses=[ItemResponse(checklist_item_id="i-1", compliant=True)],
        )
        with pytest.raises(DataAccessError):
            await service.submit_audit(admin_profile, request, [])
