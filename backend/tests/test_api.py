"""HTTP endpoint tests with the database and outbound clients mocked out"""
import pytest
from datetime import datetime
from unittest.mock import AsyncMock, MagicMock, patch
from fastapi.testclient import TestClient

from docforms.main import app
from docforms.core.config import settings
from docforms.core.deps import get_current_user, get_notification_service, get_pdf_renderer, get_telegram_client
from docforms.core.exceptions import FieldValidationError, NotFoundError, NotificationError, RenderingFailedError
from docforms.database import get_db
from docforms.models.document import DocumentDB
from docforms.models.template import CategoryDB, FormFieldDB, TemplateDB
from docforms.models.user import UserDB


def make_template(template_id="tpl-1", title="Заявление на ежегодный оплачиваемый отпуск"):
    category = CategoryDB(id="cat-1", name="Работодатели", slug="employers", order=5)
    template = TemplateDB(
        id=template_id,
        title=title,
        description="Стандартное заявление",
        category=category,
        content_html="<p>Прошу предоставить отпуск. {{fullName}}</p>",
        popularity_score=100,
        tags="отпуск,работа",
        applicant_type="physical",
        is_active=True
    )
    template.form_fields = [
        FormFieldDB(field_name="fullName", field_type="text", label="Ваше ФИО", step_number=1, order=1,
                    is_required=True),
        FormFieldDB(field_name="days", field_type="number", label="Количество дней", step_number=2, order=1,
                    is_required=True, validation_rules='{"min": 1, "max": 28}'),
    ]
    return template


def make_document(template, status="generated"):
    now = datetime(2024, 6, 10, 12, 0, 0)
    return DocumentDB(
        id="doc-1",
        user_id="user-1",
        template_id=template.id,
        template=template,
        title=template.title,
        status=status,
        filled_data={"fullName": "Иванов Иван", "days": 14},
        created_at=now,
        updated_at=now
    )


@pytest.fixture
def current_user():
    return UserDB(id="user-1", email="anna@example.com", name="Анна", is_active=True)


@pytest.fixture
def renderer():
    return AsyncMock()


@pytest.fixture
def notifications():
    return AsyncMock()


@pytest.fixture
def telegram():
    client = AsyncMock()
    client.token = "123456789:ABCDEF"
    client.is_configured = True
    return client


@pytest.fixture
def client(current_user, renderer, notifications, telegram):
    """Test client authenticated as a web user"""
    mock_db = AsyncMock()

    app.dependency_overrides[get_current_user] = lambda: current_user
    app.dependency_overrides[get_db] = lambda: mock_db
    app.dependency_overrides[get_pdf_renderer] = lambda: renderer
    app.dependency_overrides[get_notification_service] = lambda: notifications
    app.dependency_overrides[get_telegram_client] = lambda: telegram

    yield TestClient(app)

    app.dependency_overrides.clear()


class TestHealth:
    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"


class TestTemplateEndpoints:
    def test_list_paginates_with_camel_case_keys(self, client):
        with patch("docforms.api.v1.endpoints.templates.TemplateRepository") as repo_class:
            repo_class.return_value.search = AsyncMock(return_value=([make_template()], 13))

            response = client.get("/api/v1/templates", params={"category": "employers", "page": 2, "sort": "name"})

        assert response.status_code == 200
        body = response.json()
        assert body["pagination"] == {"page": 2, "limit": 12, "total": 13, "totalPages": 2}
        assert body["templates"][0]["popularityScore"] == 100
        assert body["templates"][0]["tags"] == ["отпуск", "работа"]

        kwargs = repo_class.return_value.search.call_args.kwargs
        assert kwargs["category_slug"] == "employers"
        assert kwargs["offset"] == 12
        assert kwargs["sort"] == "name"

    def test_rejects_unknown_sort(self, client):
        response = client.get("/api/v1/templates", params={"sort": "newest"})
        assert response.status_code == 422

    def test_detail_includes_ordered_fields(self, client):
        with patch("docforms.api.v1.endpoints.templates.TemplateRepository") as repo_class:
            repo_class.return_value.get_active = AsyncMock(return_value=make_template())

            response = client.get("/api/v1/templates/tpl-1")

        assert response.status_code == 200
        body = response.json()
        assert body["totalSteps"] == 2
        assert [f["fieldName"] for f in body["formFields"]] == ["fullName", "days"]
        assert body["formFields"][1]["validationRules"] == {"min": 1, "max": 28}

    def test_detail_not_found(self, client):
        with patch("docforms.api.v1.endpoints.templates.TemplateRepository") as repo_class:
            repo_class.return_value.get_active = AsyncMock(return_value=None)
            response = client.get("/api/v1/templates/missing")

        assert response.status_code == 404


class TestDocumentEndpoints:
    def test_get_document(self, client):
        with patch("docforms.api.v1.endpoints.documents.DocumentRecordManager") as manager_class:
            manager_class.return_value.get_for_user = AsyncMock(return_value=make_document(make_template()))

            response = client.get("/api/v1/documents/doc-1")

        assert response.status_code == 200
        body = response.json()
        assert body["template"] == {"id": "tpl-1", "title": make_template().title, "categoryName": "Работодатели"}
        assert body["filledData"]["days"] == 14
        manager_class.return_value.get_for_user.assert_called_once_with("doc-1", "user-1")

    def test_other_users_document_not_found(self, client):
        with patch("docforms.api.v1.endpoints.documents.DocumentRecordManager") as manager_class:
            manager_class.return_value.get_for_user = AsyncMock(side_effect=NotFoundError("doc-1"))
            response = client.get("/api/v1/documents/doc-1")

        assert response.status_code == 404

    def test_submit_with_invalid_field(self, client):
        with patch("docforms.api.v1.endpoints.documents.TemplateRepository") as repo_class, \
             patch("docforms.api.v1.endpoints.documents.DocumentRecordManager") as manager_class:
            repo_class.return_value.get_active = AsyncMock(return_value=make_template())
            manager_class.return_value.create_generated = AsyncMock(
                side_effect=FieldValidationError("days", "Пожалуйста, введите число")
            )

            response = client.post(
                "/api/v1/documents",
                json={"templateId": "tpl-1", "answers": {"fullName": "Иванов", "days": "abc"}}
            )

        assert response.status_code == 422
        assert response.json()["detail"] == {"fieldName": "days", "reason": "Пожалуйста, введите число"}

    def test_html_substitutes_answers(self, client):
        with patch("docforms.api.v1.endpoints.documents.DocumentRecordManager") as manager_class:
            manager_class.return_value.get_for_user = AsyncMock(return_value=make_document(make_template()))
            manager_class.return_value.is_generated = MagicMock(return_value=True)

            response = client.get("/api/v1/documents/doc-1/html")

        assert response.status_code == 200
        assert "Иванов Иван" in response.text
        assert "{{fullName}}" not in response.text

    def test_pdf_renderer_failure_is_503(self, client, renderer):
        renderer.render_pdf.side_effect = RenderingFailedError("down")
        with patch("docforms.api.v1.endpoints.documents.DocumentRecordManager") as manager_class:
            manager_class.return_value.get_for_user = AsyncMock(return_value=make_document(make_template()))
            manager_class.return_value.is_generated = MagicMock(return_value=True)

            response = client.get("/api/v1/documents/doc-1/pdf")

        assert response.status_code == 503

    def test_pdf_download(self, client, renderer):
        renderer.render_pdf.return_value = b"%PDF-1.7"
        with patch("docforms.api.v1.endpoints.documents.DocumentRecordManager") as manager_class:
            manager_class.return_value.get_for_user = AsyncMock(return_value=make_document(make_template()))
            manager_class.return_value.is_generated = MagicMock(return_value=True)

            response = client.get("/api/v1/documents/doc-1/pdf")

        assert response.status_code == 200
        assert response.headers["content-type"] == "application/pdf"
        assert response.content == b"%PDF-1.7"

    def test_draft_has_no_pdf(self, client):
        with patch("docforms.api.v1.endpoints.documents.DocumentRecordManager") as manager_class:
            manager_class.return_value.get_for_user = AsyncMock(return_value=make_document(make_template(), "draft"))
            manager_class.return_value.is_generated = MagicMock(return_value=False)

            response = client.get("/api/v1/documents/doc-1/pdf")

        assert response.status_code == 409


class TestVerificationEndpoints:
    def test_bad_email_format(self, client):
        response = client.post("/api/v1/verification/send", json={"identifier": "not-an-email", "type": "email"})
        assert response.status_code == 400

    def test_bad_phone_format(self, client):
        response = client.post("/api/v1/verification/send", json={"identifier": "12-34", "type": "phone"})
        assert response.status_code == 400

    def test_send_email_code(self, client, notifications):
        with patch("docforms.api.v1.endpoints.verification.VerificationService") as service_class:
            service_class.return_value.create_code = AsyncMock(return_value="123456")
            service_class.return_value.ttl = MagicMock(total_seconds=MagicMock(return_value=600))

            response = client.post("/api/v1/verification/send", json={"identifier": "a@b.ru", "type": "email"})

        assert response.status_code == 200
        assert response.json()["expiresIn"] == 600
        notifications.send_verification_email.assert_awaited_once_with("a@b.ru", "123456")

    def test_delivery_failure_is_503(self, client, notifications):
        notifications.send_verification_sms.side_effect = NotificationError("sms.ru down")
        with patch("docforms.api.v1.endpoints.verification.VerificationService") as service_class:
            service_class.return_value.create_code = AsyncMock(return_value="123456")

            response = client.post("/api/v1/verification/send", json={"identifier": "+79001234567", "type": "phone"})

        assert response.status_code == 503

    def test_verify_wrong_code(self, client):
        with patch("docforms.api.v1.endpoints.verification.VerificationService") as service_class:
            service_class.return_value.verify_code = AsyncMock(side_effect=ValueError("Неверный код подтверждения"))

            response = client.post("/api/v1/verification/verify", json={"identifier": "a@b.ru", "code": "000000"})

        assert response.status_code == 400
        assert response.json()["detail"] == "Неверный код подтверждения"


class TestBotEndpoints:
    UPDATE = {
        "update_id": 1,
        "message": {"message_id": 5, "chat": {"id": 42}, "from": {"id": 42, "first_name": "Анна"}, "text": "/start"}
    }

    def test_webhook_dispatches_update(self, client):
        with patch("docforms.api.v1.endpoints.bot.dispatcher") as dispatcher:
            dispatcher.dispatch = AsyncMock(return_value=True)

            response = client.post("/api/v1/bot/webhook", json=self.UPDATE)

        assert response.status_code == 200
        ctx = dispatcher.dispatch.call_args.args[0]
        assert ctx.update.message.text == "/start"
        assert ctx.chat_id == 42

    def test_webhook_rejects_wrong_secret(self, client):
        with patch.object(settings, "TELEGRAM_WEBHOOK_SECRET", "s3cret"):
            response = client.post(
                "/api/v1/bot/webhook", json=self.UPDATE, headers={"X-Telegram-Bot-Api-Secret-Token": "wrong"}
            )
        assert response.status_code == 403

    def test_setup_requires_webhook_url(self, client):
        with patch.object(settings, "WEBHOOK_URL", ""):
            response = client.post("/api/v1/bot/setup")
        assert response.status_code == 400

    def test_setup_registers_webhook(self, client, telegram):
        with patch.object(settings, "WEBHOOK_URL", "docs.example.ru"), \
             patch.object(settings, "TELEGRAM_WEBHOOK_SECRET", "s3cret"):
            response = client.post("/api/v1/bot/setup")

        assert response.status_code == 200
        assert response.json()["url"] == "https://docs.example.ru/api/v1/bot/webhook"
        telegram.set_webhook.assert_awaited_once_with(
            "https://docs.example.ru/api/v1/bot/webhook", secret_token="s3cret"
        )

    def test_diagnostics_hide_token(self, client):
        response = client.get("/api/v1/bot/test")
        assert response.json()["hasToken"] is True
        assert response.json()["tokenPrefix"] == "123456789:..."

    def test_diagnostics_without_token(self, client, telegram):
        telegram.token = ""
        telegram.is_configured = False

        response = client.get("/api/v1/bot/test")

        assert response.json()["hasToken"] is False
        assert response.json()["tokenPrefix"] == "not set"

    def test_setup_requires_bot_token(self, client, telegram):
        telegram.is_configured = False
        with patch.object(settings, "WEBHOOK_URL", "docs.example.ru"):
            response = client.post("/api/v1/bot/setup")

        assert response.status_code == 400
        telegram.set_webhook.assert_not_called()
