from typing import Dict, List


class InlineKeyboard:
    """Builder for Telegram inline keyboards: buttons fill the current row"""

    def __init__(self):
        self.rows: List[List[Dict[str, str]]] = [[]]

    def text(self, label: str, callback_data: str) -> "InlineKeyboard":
        self.rows[-1].append({"text": label, "callback_data": callback_data})
        return self

    def row(self) -> "InlineKeyboard":
        if self.rows[-1]:
            self.rows.append([])
        return self

    def to_markup(self) -> Dict:
        return {"inline_keyboard": [row for row in self.rows if row]}


def main_menu() -> InlineKeyboard:
    return (
        InlineKeyboard()
        .text("📋 Шаблоны заявлений", "show_templates")
        .row()
        .text("📄 Мои документы", "show_documents")
        .row()
        .text("ℹ️ Помощь", "show_help")
    )


def back_to_main() -> InlineKeyboard:
    return InlineKeyboard().text("◀️ Назад", "back_to_main")


def after_form() -> InlineKeyboard:
    return InlineKeyboard().text("📄 Мои документы", "show_documents").row().text("🏠 Главное меню", "back_to_main")


def after_cancel() -> InlineKeyboard:
    return InlineKeyboard().text("📋 Шаблоны заявлений", "show_templates").row().text("🏠 Главное меню", "back_to_main")
