"""Tests for document records: drafts, finalizing and web form submits"""
import logging
import pytest

from docforms.core.exceptions import FieldValidationError, NotFoundError, StateConflictError
from docforms.models.document import DOCUMENT_STATUS_DRAFT, DOCUMENT_STATUS_GENERATED
from docforms.repositories.user import UserRepository
from docforms.services.documents import DocumentRecordManager

from conftest import TREATMENT_TITLE, VACATION_TITLE, template_by_title

TREATMENT_ANSWERS = {
    "fullName": "Иванов Иван Иванович",
    "inn": "123456789012",
    "phone": "+7 900 123-45-67",
    "address": "г. Москва, ул. Ленина, д. 1",
    "district": "Московскому району г. Москвы",
    "year": "2024",
    "amount": "50000",
    "treatmentType": "медицинские услуги",
    "date": "15.03.2025",
}


class TestDocumentRecordManager:
    @pytest.fixture
    def manager(self, catalog):
        return DocumentRecordManager(catalog)

    @pytest.fixture
    async def vacation(self, catalog):
        return await template_by_title(catalog, VACATION_TITLE)

    @pytest.mark.asyncio
    async def test_draft_starts_empty(self, manager, vacation, user):
        document = await manager.create_draft(user.id, vacation)

        assert document.status == DOCUMENT_STATUS_DRAFT
        assert document.filled_data == {}
        assert document.title == vacation.title

    @pytest.mark.asyncio
    async def test_finalize_twice_conflicts(self, manager, vacation, user):
        document = await manager.create_draft(user.id, vacation)

        finalized = await manager.finalize(document.id, {"fullName": "Иванов"})
        assert finalized.status == DOCUMENT_STATUS_GENERATED
        assert finalized.filled_data == {"fullName": "Иванов"}

        with pytest.raises(StateConflictError):
            await manager.finalize(document.id, {"fullName": "Петров"})

        reloaded = await manager.get_for_user(document.id, user.id)
        assert reloaded.filled_data == {"fullName": "Иванов"}

    @pytest.mark.asyncio
    async def test_finalize_missing_document(self, manager):
        with pytest.raises(NotFoundError):
            await manager.finalize("no-such-document", {})

    @pytest.mark.asyncio
    async def test_discard_missing_draft_only_warns(self, manager, caplog):
        with caplog.at_level(logging.WARNING):
            assert await manager.discard_draft("no-such-document") is False
        assert "already gone" in caplog.text

    @pytest.mark.asyncio
    async def test_documents_are_private(self, manager, vacation, user, catalog):
        document = await manager.create_draft(user.id, vacation)
        stranger = await UserRepository().create_user(catalog, email="boris@example.com")

        with pytest.raises(NotFoundError):
            await manager.get_for_user(document.id, stranger.id)

    @pytest.mark.asyncio
    async def test_list_filters_by_status(self, manager, vacation, user):
        draft = await manager.create_draft(user.id, vacation)
        generated = await manager.create_draft(user.id, vacation)
        await manager.finalize(generated.id, {})

        assert [d.id for d in await manager.list_for_user(user.id, status=DOCUMENT_STATUS_DRAFT)] == [draft.id]
        assert [d.id for d in await manager.list_for_user(user.id, status=DOCUMENT_STATUS_GENERATED)] == [generated.id]
        assert len(await manager.list_for_user(user.id)) == 2


class TestWebFormSubmit:
    @pytest.mark.asyncio
    async def test_valid_answers_stored_as_generated(self, catalog, user):
        template = await template_by_title(catalog, TREATMENT_TITLE)

        document = await DocumentRecordManager(catalog).create_generated(user.id, template, TREATMENT_ANSWERS)

        assert document.status == DOCUMENT_STATUS_GENERATED
        assert document.filled_data["amount"] == 50000
        assert document.filled_data["year"] == 2024
        assert len(document.filled_data) == len(template.form_fields)

    @pytest.mark.asyncio
    async def test_first_invalid_field_reported(self, catalog, user):
        template = await template_by_title(catalog, TREATMENT_TITLE)
        answers = dict(TREATMENT_ANSWERS, amount="120001")

        with pytest.raises(FieldValidationError) as exc_info:
            await DocumentRecordManager(catalog).create_generated(user.id, template, answers)

        assert exc_info.value.field_name == "amount"

    @pytest.mark.asyncio
    async def test_missing_required_answer(self, catalog, user):
        template = await template_by_title(catalog, TREATMENT_TITLE)
        answers = {k: v for k, v in TREATMENT_ANSWERS.items() if k != "inn"}

        with pytest.raises(FieldValidationError) as exc_info:
            await DocumentRecordManager(catalog).create_generated(user.id, template, answers)

        assert exc_info.value.field_name == "inn"
        assert exc_info.value.reason == "Это поле обязательно для заполнения"
