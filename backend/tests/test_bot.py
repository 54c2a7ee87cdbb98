"""Telegram bot routing and conversation tests with a mocked Bot API client"""
import pytest
from unittest.mock import AsyncMock, patch

from docforms.bot.dispatcher import BotContext, Dispatcher, MSG_GENERIC_ERROR
from docforms.bot.handlers import (
    MSG_FORM_CANCELLED, MSG_FORM_COMPLETE, MSG_OUTSIDE_FORM, MSG_PDF_FAILED, WELCOME_MESSAGE, dispatcher
)
from docforms.bot.models import Update
from docforms.core.exceptions import RenderingFailedError
from docforms.forms.session import InMemorySessionStore
from docforms.models.document import DOCUMENT_STATUS_GENERATED
from docforms.repositories.user import UserRepository
from docforms.services.documents import DocumentRecordManager

from conftest import PROPERTY_TITLE, VACATION_TITLE, template_by_title
from test_form_service import VACATION_ANSWERS

TELEGRAM_ID = 4242


def message_update(text, update_id=1):
    return Update.model_validate({
        "update_id": update_id,
        "message": {
            "message_id": 10,
            "chat": {"id": TELEGRAM_ID},
            "from": {"id": TELEGRAM_ID, "first_name": "Анна", "last_name": "Петрова"},
            "text": text
        }
    })


def callback_update(data, update_id=1):
    return Update.model_validate({
        "update_id": update_id,
        "callback_query": {
            "id": "cb-1",
            "from": {"id": TELEGRAM_ID, "first_name": "Анна"},
            "message": {"message_id": 11, "chat": {"id": TELEGRAM_ID}},
            "data": data
        }
    })


def sent_texts(telegram):
    return [call.args[1] for call in telegram.send_message.call_args_list]


@pytest.fixture
def telegram():
    return AsyncMock()


@pytest.fixture
def renderer():
    return AsyncMock()


@pytest.fixture(autouse=True)
def sessions():
    store = InMemorySessionStore()
    with patch("docforms.forms.service.form_sessions", store):
        yield store


@pytest.fixture
def send(catalog, telegram, renderer):
    """Dispatch an update through the bot's dispatcher"""
    async def _send(update):
        return await dispatcher.dispatch(BotContext(update=update, db=catalog, telegram=telegram, renderer=renderer))
    return _send


@pytest.fixture
async def bot_user(catalog):
    return await UserRepository().get_or_create_telegram_user(catalog, str(TELEGRAM_ID), "Анна Петрова")


class TestDispatcherRouting:
    def make_dispatcher(self):
        routed = Dispatcher()
        calls = []

        def record(name):
            async def handler(ctx):
                calls.append(name)
            handler.__name__ = name
            return handler

        routed.command("start")(record("start"))
        routed.callback("show_templates")(record("show_templates"))
        routed.callback_prefix("template_")(record("template"))
        routed.callback_prefix("template_preview_")(record("template_preview"))
        routed.text()(record("text"))
        return routed, calls

    @pytest.mark.asyncio
    async def test_routes_by_kind(self, telegram, renderer):
        routed, calls = self.make_dispatcher()
        updates = [
            message_update("/start"),
            message_update("/start@DocFormsBot payload"),
            callback_update("show_templates"),
            callback_update("template_abc"),
            callback_update("template_preview_abc"),
            message_update("/unknown"),
            message_update("привет"),
        ]
        for update in updates:
            assert await routed.dispatch(BotContext(update=update, db=None, telegram=telegram, renderer=renderer))

        assert calls == ["start", "start", "show_templates", "template", "template_preview", "text", "text"]

    @pytest.mark.asyncio
    async def test_unmatched_callback_not_handled(self, telegram, renderer):
        routed, calls = self.make_dispatcher()
        ctx = BotContext(update=callback_update("nothing_here"), db=None, telegram=telegram, renderer=renderer)

        assert await routed.dispatch(ctx) is False
        assert calls == []

    @pytest.mark.asyncio
    async def test_handler_failure_reported_generically(self, telegram, renderer):
        routed = Dispatcher()

        @routed.command("boom")
        async def boom(ctx):
            raise RuntimeError("database is down")

        ctx = BotContext(update=message_update("/boom"), db=None, telegram=telegram, renderer=renderer)
        assert await routed.dispatch(ctx) is True
        telegram.send_message.assert_awaited_once_with(TELEGRAM_ID, MSG_GENERIC_ERROR, reply_markup=None)

    @pytest.mark.asyncio
    async def test_callback_failure_answers_query(self, telegram, renderer):
        routed = Dispatcher()

        @routed.callback("boom")
        async def boom(ctx):
            raise RuntimeError("database is down")

        await routed.dispatch(BotContext(update=callback_update("boom"), db=None, telegram=telegram, renderer=renderer))
        telegram.answer_callback_query.assert_awaited_once_with("cb-1", "Произошла ошибка")


class TestMenus:
    @pytest.mark.asyncio
    async def test_start_registers_telegram_user(self, send, telegram, catalog):
        await send(message_update("/start"))

        user = await UserRepository().get_by_telegram_id(catalog, str(TELEGRAM_ID))
        assert user.name == "Анна Петрова"
        assert sent_texts(telegram) == [WELCOME_MESSAGE]

        await send(message_update("/start", update_id=2))
        assert await UserRepository().get_by_telegram_id(catalog, str(TELEGRAM_ID)) is not None

    @pytest.mark.asyncio
    async def test_text_outside_form(self, send, telegram):
        await send(message_update("просто текст"))
        assert sent_texts(telegram) == [MSG_OUTSIDE_FORM]

    @pytest.mark.asyncio
    async def test_categories_listed_with_counts(self, send, telegram):
        await send(message_update("/templates"))

        markup = telegram.send_message.call_args.kwargs["reply_markup"]
        buttons = [row[0] for row in markup["inline_keyboard"]]
        assert {"text": "Работодатели (4)", "callback_data": "category_employers"} in buttons

    @pytest.mark.asyncio
    async def test_category_shows_templates(self, send, telegram):
        await send(callback_update("category_fns"))

        args = telegram.edit_message_text.call_args.args
        assert args[2].startswith("📂 ФНС")
        titles = [row[0]["text"] for row in telegram.edit_message_text.call_args.kwargs["reply_markup"]["inline_keyboard"]]
        assert PROPERTY_TITLE in titles

    @pytest.mark.asyncio
    async def test_documents_require_registration(self, send, telegram):
        await send(message_update("/documents"))
        assert "/start" in sent_texts(telegram)[0]


class TestFormConversation:
    @pytest.mark.asyncio
    async def test_vacation_form_to_completion(self, send, telegram, catalog, bot_user, sessions):
        vacation = await template_by_title(catalog, VACATION_TITLE)

        await send(callback_update(f"start_form_{vacation.id}"))
        assert "Всего шагов: 2" in telegram.edit_message_text.call_args.args[2]
        assert sent_texts(telegram)[-1].startswith("[Шаг 1/2]")

        for update_id, (_, answer) in enumerate(VACATION_ANSWERS, start=2):
            await send(message_update(answer, update_id=update_id))

        assert sent_texts(telegram)[-1] == MSG_FORM_COMPLETE
        assert sessions.get(str(TELEGRAM_ID)) is None

        documents = await DocumentRecordManager(catalog).list_for_user(bot_user.id)
        assert len(documents) == 1
        assert documents[0].status == DOCUMENT_STATUS_GENERATED
        assert documents[0].filled_data["days"] == 14

    @pytest.mark.asyncio
    async def test_invalid_answer_asks_again(self, send, telegram, catalog, bot_user, sessions):
        vacation = await template_by_title(catalog, VACATION_TITLE)
        await send(callback_update(f"start_form_{vacation.id}"))
        for update_id, (_, answer) in enumerate(VACATION_ANSWERS[:4], start=2):
            await send(message_update(answer, update_id=update_id))

        await send(message_update("1 июля", update_id=10))

        assert "ДД.ММ.ГГГГ" in sent_texts(telegram)[-1]
        assert sessions.get(str(TELEGRAM_ID)).current_field().field_name == "startDate"

    @pytest.mark.asyncio
    async def test_cancel_discards_draft(self, send, telegram, catalog, bot_user, sessions):
        vacation = await template_by_title(catalog, VACATION_TITLE)
        await send(callback_update(f"start_form_{vacation.id}"))

        await send(message_update("/cancel", update_id=2))

        assert sent_texts(telegram)[-1] == MSG_FORM_CANCELLED
        assert sessions.get(str(TELEGRAM_ID)) is None
        assert await DocumentRecordManager(catalog).list_for_user(bot_user.id) == []

    @pytest.mark.asyncio
    async def test_select_by_button(self, send, telegram, catalog, bot_user, sessions):
        template = await template_by_title(catalog, PROPERTY_TITLE)
        await send(callback_update(f"start_form_{template.id}"))
        answers = ["Иванов Иван", "123456789012", "№ 28 по г. Москве", "г. Москва", "+79001234567", "2023", "1800000"]
        for update_id, answer in enumerate(answers, start=2):
            await send(message_update(answer, update_id=update_id))

        markup = telegram.send_message.call_args.kwargs["reply_markup"]
        assert markup["inline_keyboard"][0] == [{"text": "квартиры", "callback_data": "select_propertyType_0"}]

        await send(callback_update("select_propertyType_1", update_id=20))

        session = sessions.get(str(TELEGRAM_ID))
        assert session.answers["propertyType"] == "дома"
        assert session.current_field().field_name == "propertyAddress"
        telegram.answer_callback_query.assert_awaited_with("cb-1", "Выбрано: дома")

    @pytest.mark.asyncio
    async def test_stale_select_button_rejected(self, send, telegram, catalog, bot_user, sessions):
        template = await template_by_title(catalog, PROPERTY_TITLE)
        await send(callback_update(f"start_form_{template.id}"))

        await send(callback_update("select_propertyType_0", update_id=2))

        telegram.answer_callback_query.assert_awaited_with("cb-1", "Неверный выбор")
        session = sessions.get(str(TELEGRAM_ID))
        assert session.current_field().field_name == "fullName"
        assert session.answers == {}


class TestDocumentDownload:
    @pytest.fixture
    async def document(self, catalog, bot_user):
        manager = DocumentRecordManager(catalog)
        vacation = await template_by_title(catalog, VACATION_TITLE)
        draft = await manager.create_draft(bot_user.id, vacation)
        return await manager.finalize(draft.id, dict(VACATION_ANSWERS))

    @pytest.mark.asyncio
    async def test_pdf_sent_as_document(self, send, telegram, renderer, document):
        renderer.render_pdf.return_value = b"%PDF-1.7"

        await send(callback_update(f"document_{document.id}"))

        html = renderer.render_pdf.call_args.args[0]
        assert "Иванова Ивана Ивановича" in html
        telegram.send_document.assert_awaited_once_with(
            TELEGRAM_ID, f"{document.title}.pdf", b"%PDF-1.7", caption=document.title
        )

    @pytest.mark.asyncio
    async def test_renderer_failure_reported(self, send, telegram, renderer, document):
        renderer.render_pdf.side_effect = RenderingFailedError("renderer unavailable")

        await send(callback_update(f"document_{document.id}"))

        telegram.send_document.assert_not_called()
        assert sent_texts(telegram) == [MSG_PDF_FAILED]
