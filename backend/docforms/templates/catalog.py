"""
Built-in template catalog loaded into the database on first start.
Templates live in docforms.templates.documents, one module per category;
the loader only inserts titles it has not seen.
"""

from docforms.templates.models import CategorySpec
from docforms.templates.documents import banks, courts, employers, fns, gosuslugi, other

CATEGORIES = [
    CategorySpec(name="МФЦ и госуслуги", slug="mfc-gosuslugi", icon="account_balance",
                 description="Заявления в МФЦ, получение документов", order=1),
    CategorySpec(name="Суды", slug="courts", icon="gavel",
                 description="Исковые заявления, жалобы в суд", order=2),
    CategorySpec(name="Банки", slug="banks", icon="account_balance_wallet",
                 description="Претензии в банк, возврат средств", order=3),
    CategorySpec(name="ФНС", slug="fns", icon="receipt_long",
                 description="Налоговые вычеты, регистрация ИП", order=4),
    CategorySpec(name="Работодатели", slug="employers", icon="work",
                 description="Заявления на отпуск, увольнение", order=5),
    CategorySpec(name="Другие организации", slug="other", icon="business",
                 description="ЖКХ, образование, здравоохранение", order=6),
]

TEMPLATES = (
    gosuslugi.TEMPLATES
    + courts.TEMPLATES
    + banks.TEMPLATES
    + fns.TEMPLATES
    + employers.TEMPLATES
    + other.TEMPLATES
)
