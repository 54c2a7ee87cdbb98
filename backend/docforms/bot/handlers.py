"""
Telegram bot conversation: menus, template browsing and step-by-step forms
"""

import logging
from typing import List, Optional

from docforms.bot.dispatcher import BotContext, Dispatcher
from docforms.bot import keyboards
from docforms.bot.keyboards import InlineKeyboard
from docforms.core.exceptions import NotFoundError, RenderingFailedError, StateConflictError
from docforms.forms.service import FormFillingService, FormTurn
from docforms.forms.session import FormSession
from docforms.forms.validation import FieldType
from docforms.models.document import DocumentDB
from docforms.models.user import UserDB
from docforms.repositories.template import CategoryRepository, TemplateRepository
from docforms.repositories.user import UserRepository
from docforms.services.documents import DocumentRecordManager
from docforms.services.renderer import render_template_document

logger = logging.getLogger(__name__)

dispatcher = Dispatcher()

WELCOME_MESSAGE = """Добро пожаловать в конструктор заявлений! 👋

Я помогу вам создать юридически корректные заявления для:
• МФЦ и государственных органов
• Судов
• Банков
• ФНС
• И других организаций

Выберите действие:"""

HELP_MESSAGE = """📖 Справка по командам:

/start - Главное меню
/templates - Просмотр шаблонов заявлений
/documents - Мои документы
/cancel - Отменить заполнение формы
/help - Эта справка

🔍 Как создать заявление:
1. Выберите шаблон из списка (/templates)
2. Заполните пошаговую форму
3. Получите готовый PDF документ

💡 Подсказки:
• Все ваши документы сохраняются
• PDF документы можно скачать в любое время"""

MSG_CHOOSE_CATEGORY = "📋 Выберите категорию заявлений:"
MSG_NO_TEMPLATES = "К сожалению, пока нет доступных шаблонов."
MSG_NO_DOCUMENTS = "У вас пока нет созданных документов. Используйте /templates для создания нового."
MSG_UNKNOWN_USER = "Пользователь не найден. Используйте /start для регистрации."
MSG_FORM_CANCELLED = "❌ Заполнение формы отменено"
MSG_FORM_COMPLETE = (
    "✅ Отлично! Форма заполнена.\n\n"
    "Ваш документ сохранен. Скачать PDF можно в разделе «Мои документы»."
)
MSG_SAVE_FAILED = "Произошла ошибка при сохранении данных"
MSG_PDF_FAILED = "Не удалось сформировать PDF. Попробуйте позже."
MSG_OUTSIDE_FORM = "Текстовое сообщение получено. Используйте /help для просмотра доступных команд."

DOCUMENTS_SHOWN = 10


async def _telegram_user(ctx: BotContext) -> Optional[UserDB]:
    return await UserRepository().get_by_telegram_id(ctx.db, ctx.user_key)


def _shorten(text: str, limit: int) -> str:
    return text if len(text) <= limit else f"{text[:limit]}..."


# Menus

@dispatcher.command("start")
async def handle_start(ctx: BotContext):
    user = ctx.from_user
    if user is None:
        await ctx.reply("Ошибка: не удалось определить ваш Telegram ID")
        return

    await UserRepository().get_or_create_telegram_user(ctx.db, str(user.id), user.display_name)
    await ctx.reply(WELCOME_MESSAGE, keyboards.main_menu())


@dispatcher.callback("back_to_main")
async def handle_back_to_main(ctx: BotContext):
    await ctx.edit(WELCOME_MESSAGE, keyboards.main_menu())
    await ctx.answer()


@dispatcher.command("help")
async def handle_help(ctx: BotContext):
    await ctx.reply(HELP_MESSAGE, keyboards.back_to_main())


@dispatcher.callback("show_help")
async def handle_show_help(ctx: BotContext):
    await ctx.edit(HELP_MESSAGE, keyboards.back_to_main())
    await ctx.answer()


# Template catalog

async def _categories_keyboard(ctx: BotContext) -> Optional[InlineKeyboard]:
    categories = await CategoryRepository().list_with_active_counts(ctx.db)
    if not categories:
        return None

    keyboard = InlineKeyboard()
    for category, count in categories:
        keyboard.text(f"{category.name} ({count})", f"category_{category.slug}").row()
    return keyboard


@dispatcher.command("templates")
async def handle_templates(ctx: BotContext):
    keyboard = await _categories_keyboard(ctx)
    if keyboard is None:
        await ctx.reply(MSG_NO_TEMPLATES)
        return
    await ctx.reply(MSG_CHOOSE_CATEGORY, keyboard)


@dispatcher.callback("show_templates")
async def handle_show_templates(ctx: BotContext):
    keyboard = await _categories_keyboard(ctx)
    await ctx.edit(MSG_CHOOSE_CATEGORY if keyboard else MSG_NO_TEMPLATES, keyboard)
    await ctx.answer()


@dispatcher.callback_prefix("category_")
async def handle_category(ctx: BotContext):
    slug = ctx.callback_data[len("category_"):]
    category = await CategoryRepository().get_by_slug(ctx.db, slug)
    templates = await TemplateRepository().list_by_category(ctx.db, slug) if category else []
    if not templates:
        await ctx.answer("Шаблоны не найдены")
        return

    keyboard = InlineKeyboard()
    for template in templates:
        keyboard.text(template.title[:60], f"template_{template.id}").row()
    keyboard.text("◀️ Назад к категориям", "show_templates")

    message = f"📂 {category.name}\n\n"
    if category.description:
        message += f"{category.description}\n\n"
    message += "Выберите шаблон:"

    await ctx.edit(message, keyboard)
    await ctx.answer()


@dispatcher.callback_prefix("template_")
async def handle_template(ctx: BotContext):
    template_id = ctx.callback_data[len("template_"):]
    template = await TemplateRepository().get_active(ctx.db, template_id)
    if template is None:
        await ctx.answer("Шаблон не найден")
        return

    keyboard = InlineKeyboard().text("✏️ Начать заполнение", f"start_form_{template.id}").row()
    keyboard.text("◀️ Назад", f"category_{template.category.slug}" if template.category else "show_templates")

    total_steps = len({field.step_number for field in template.form_fields})
    message = (
        f"📄 {template.title}\n\n"
        f"{template.description}\n\n"
        f"📋 Категория: {template.category.name if template.category else '-'}\n"
        f"📝 Шагов для заполнения: {total_steps}\n"
    )

    await ctx.edit(message, keyboard)
    await ctx.answer()


# Documents

def _documents_view(documents: List[DocumentDB]):
    keyboard = InlineKeyboard()
    lines = ["📄 Ваши документы:", ""]
    for number, document in enumerate(documents, start=1):
        status = "✅" if DocumentRecordManager.is_generated(document) else "⏳"
        lines.append(f"{number}. {status} {document.title}")
        lines.append(f"   Создан: {document.updated_at.strftime('%d.%m.%Y')}")
        keyboard.text(f"{number}. {_shorten(document.title, 30)}", f"document_{document.id}").row()
    keyboard.text("◀️ Назад", "back_to_main")
    return "\n".join(lines), keyboard


async def _load_documents(ctx: BotContext) -> Optional[List[DocumentDB]]:
    user = await _telegram_user(ctx)
    if user is None:
        return None
    return await DocumentRecordManager(ctx.db).list_for_user(user.id, limit=DOCUMENTS_SHOWN)


@dispatcher.command("documents")
async def handle_documents(ctx: BotContext):
    documents = await _load_documents(ctx)
    if documents is None:
        await ctx.reply(MSG_UNKNOWN_USER)
    elif not documents:
        await ctx.reply(MSG_NO_DOCUMENTS)
    else:
        await ctx.reply(*_documents_view(documents))


@dispatcher.callback("show_documents")
async def handle_show_documents(ctx: BotContext):
    documents = await _load_documents(ctx)
    if documents is None:
        await ctx.edit(MSG_UNKNOWN_USER)
    elif not documents:
        await ctx.edit(MSG_NO_DOCUMENTS, keyboards.back_to_main())
    else:
        await ctx.edit(*_documents_view(documents))
    await ctx.answer()


@dispatcher.callback_prefix("document_")
async def handle_document(ctx: BotContext):
    document_id = ctx.callback_data[len("document_"):]
    user = await _telegram_user(ctx)
    if user is None:
        await ctx.answer("Пользователь не найден")
        return

    manager = DocumentRecordManager(ctx.db)
    try:
        document = await manager.get_for_user(document_id, user.id)
    except NotFoundError:
        await ctx.answer("Документ не найден")
        return

    if not manager.is_generated(document):
        await ctx.answer("Документ еще не заполнен")
        return

    await ctx.answer("Формирую PDF...")
    try:
        pdf = await ctx.renderer.render_pdf(render_template_document(document.template, document.filled_data))
    except RenderingFailedError:
        await ctx.reply(MSG_PDF_FAILED)
        return

    await ctx.telegram.send_document(ctx.chat_id, f"{document.title}.pdf", pdf, caption=document.title)


# Form filling

def _question(session: FormSession) -> tuple:
    field = session.current_field()
    message = f"[Шаг {session.step_position}/{session.total_steps}]\n\n❓ {field.label}"
    if field.is_required:
        message += " *"
    if field.placeholder:
        message += f"\n\n💡 Например: {field.placeholder}"

    keyboard = InlineKeyboard()
    if field.field_type is FieldType.SELECT:
        for index, option in enumerate(field.options):
            keyboard.text(option, f"select_{field.field_name}_{index}").row()
    keyboard.text("❌ Отменить", "cancel_form")
    return message, keyboard


async def _continue(ctx: BotContext, turn: FormTurn):
    if turn.completed:
        await ctx.reply(MSG_FORM_COMPLETE, keyboards.after_form())
    else:
        await ctx.reply(*_question(turn.session))


@dispatcher.callback_prefix("start_form_")
async def handle_start_form(ctx: BotContext):
    template_id = ctx.callback_data[len("start_form_"):]
    user = await _telegram_user(ctx)
    if user is None:
        await ctx.answer("Пользователь не найден")
        return

    try:
        turn = await FormFillingService(ctx.db).start(ctx.user_key, user.id, template_id)
    except NotFoundError:
        await ctx.answer("Шаблон не найден")
        return

    await ctx.answer()
    await ctx.edit(
        f"✏️ Начинаем заполнение: {turn.template_title}\n\n"
        f"Всего шагов: {turn.session.total_steps}\n\n"
        "Отвечайте на вопросы последовательно. Вы можете отменить заполнение командой /cancel"
    )
    await ctx.reply(*_question(turn.session))


@dispatcher.callback_prefix("select_")
async def handle_select_option(ctx: BotContext):
    service = FormFillingService(ctx.db)
    session = service.get_session(ctx.user_key)
    if session is None:
        await ctx.answer("Сессия не найдена")
        return

    # select_<field>_<index>; field names may contain underscores
    field_name, _, index = ctx.callback_data[len("select_"):].rpartition("_")
    field = session.current_field()
    if field is None or field.field_name != field_name or not index.isdigit():
        await ctx.answer("Неверный выбор")
        return

    try:
        turn = await service.choose(ctx.user_key, int(index))
    except (NotFoundError, StateConflictError):
        logger.warning(f"Could not save form of {ctx.user_key}", exc_info=True)
        await ctx.answer()
        await ctx.reply(MSG_SAVE_FAILED)
        return

    if turn.rejection:
        await ctx.answer(turn.rejection)
        return

    await ctx.answer(f"Выбрано: {turn.session.answers[field.field_name]}")
    await _continue(ctx, turn)


@dispatcher.callback("cancel_form")
async def handle_cancel_form(ctx: BotContext):
    await FormFillingService(ctx.db).cancel(ctx.user_key)
    await ctx.answer()
    await ctx.edit(MSG_FORM_CANCELLED, keyboards.after_cancel())


@dispatcher.command("cancel")
async def handle_cancel_command(ctx: BotContext):
    if not await FormFillingService(ctx.db).cancel(ctx.user_key):
        await ctx.reply("Вы не находитесь в процессе заполнения формы.")
        return
    await ctx.reply(MSG_FORM_CANCELLED, keyboards.after_cancel())


@dispatcher.text()
async def handle_text(ctx: BotContext):
    service = FormFillingService(ctx.db)
    if ctx.user_key is None or service.get_session(ctx.user_key) is None:
        await ctx.reply(MSG_OUTSIDE_FORM)
        return

    try:
        turn = await service.answer(ctx.user_key, ctx.text)
    except (NotFoundError, StateConflictError):
        logger.warning(f"Could not save form of {ctx.user_key}", exc_info=True)
        await ctx.reply(MSG_SAVE_FAILED)
        return

    if turn.rejection:
        await ctx.reply(f"❌ {turn.rejection}\n\nПопробуйте еще раз:")
        return
    await _continue(ctx, turn)
