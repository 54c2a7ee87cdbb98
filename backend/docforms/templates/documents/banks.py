from docforms.templates.models import FieldSpec, TemplateSpec
from docforms.templates.documents.common import PAGE, SHORT_PAGE, SHORT_SIGNATURE, SIGNATURE_BLOCK

COMMISSION_CLAIM = TemplateSpec(
    title="Претензия в банк о возврате комиссии",
    description="Требование о возврате незаконно удержанной комиссии или платы за услуги",
    category_slug="banks",
    popularity_score=95,
    tags=["банк", "претензия", "возврат", "комиссия"],
    applicant_type="both",
    html=PAGE + """
    <div style="text-align: right; margin-bottom: 20px;">
      {{bankName}}<br/>
      от {{fullName}}<br/>
      Адрес: {{address}}<br/>
      Телефон: {{phone}}<br/>
      Email: {{email}}
    </div>

    <h2 style="text-align: center; margin: 30px 0;">ПРЕТЕНЗИЯ</h2>

    <p style="text-indent: 40px;">
      Я, {{fullName}}, являюсь клиентом {{bankName}} с {{contractDate}}, номер договора/счета: {{contractNumber}}.
    </p>

    <p style="text-indent: 40px;">
      {{complaintDate}} банком была списана сумма в размере {{amount}} рублей за {{serviceType}}.
      Данное списание считаю незаконным по следующим основаниям:
    </p>

    <p style="text-indent: 40px;">{{reason}}</p>

    <p style="text-indent: 40px;">
      На основании изложенного и в соответствии со статьями 29, 31 Закона РФ "О защите прав потребителей",
    </p>

    <p style="text-align: center; font-weight: bold;">ПРОШУ:</p>
    <ol>
      <li>Вернуть незаконно удержанную сумму {{amount}} рублей на счет {{accountNumber}}</li>
      <li>Предоставить письменный ответ на данную претензию в течение 30 дней в соответствии с требованиями
        статьи 16 Федерального закона "О банках и банковской деятельности" от 02.12.1990 № 395-1</li>
    </ol>

    <p style="text-indent: 40px;">
      В случае отказа в удовлетворении претензии буду вынужден(а) обратиться в суд с требованием о взыскании
      указанной суммы, компенсации морального вреда, штрафа в размере 50% от суммы, присужденной судом в мою
      пользу (п. 6 ст. 13 Закона РФ "О защите прав потребителей"), а также судебных расходов.
    </p>
""" + SIGNATURE_BLOCK + "\n</div>",
    fields=[
        FieldSpec(field_name="fullName", label="ФИО (полностью)", step_number=1, order=1),
        FieldSpec(field_name="phone", label="Телефон", step_number=1, order=2),
        FieldSpec(field_name="email", label="Email", step_number=1, order=3,
                  validation_rules={"pattern": r"^[^@]+@[^@]+\.[^@]+$"}),
        FieldSpec(field_name="address", field_type="textarea", label="Адрес", step_number=1, order=4),
        FieldSpec(field_name="bankName", label="Название банка", placeholder='ПАО "Сбербанк"',
                  step_number=2, order=1),
        FieldSpec(field_name="contractNumber", label="Номер договора/счета", step_number=2, order=2),
        FieldSpec(field_name="contractDate", field_type="date", label="Дата заключения договора",
                  step_number=2, order=3),
        FieldSpec(field_name="accountNumber", label="Номер счета для возврата", step_number=2, order=4),
        FieldSpec(field_name="complaintDate", field_type="date", label="Дата незаконного списания",
                  step_number=3, order=1),
        FieldSpec(field_name="amount", field_type="number", label="Сумма списания (рублей)", step_number=3, order=2),
        FieldSpec(field_name="serviceType", label="За какую услугу списано", placeholder="SMS-информирование",
                  step_number=3, order=3),
        FieldSpec(field_name="reason", field_type="textarea", label="Обоснование (почему списание незаконно)",
                  placeholder="Я не давал согласия на подключение данной услуги. Согласно статье...",
                  step_number=3, order=4),
        FieldSpec(field_name="date", field_type="date", label="Дата подачи претензии", step_number=3, order=5),
    ],
)

CLOSE_ACCOUNT = TemplateSpec(
    title="Заявление на закрытие банковского счета/карты",
    description="Закрытие расчетного счета или банковской карты",
    category_slug="banks",
    popularity_score=70,
    tags=["банк", "счет", "карта", "закрытие"],
    applicant_type="both",
    html=SHORT_PAGE + """
    <div style="text-align: right; margin-bottom: 20px;">
      {{bankName}}<br/>
      от {{fullName}}
    </div>

    <h2 style="text-align: center;">ЗАЯВЛЕНИЕ</h2>

    <p>Прошу закрыть мой счет/карту №{{accountNumber}}.</p>
""" + SHORT_SIGNATURE + "\n</div>",
    fields=[
        FieldSpec(field_name="bankName", label="Название банка", step_number=1, order=1),
        FieldSpec(field_name="fullName", label="ФИО", step_number=1, order=2),
        FieldSpec(field_name="accountNumber", label="Номер счета/карты", step_number=1, order=3),
        FieldSpec(field_name="date", field_type="date", label="Дата", step_number=1, order=4),
    ],
)

LOAN_RESTRUCTURING = TemplateSpec(
    title="Заявление на реструктуризацию кредита",
    description="Изменение условий кредитного договора при финансовых сложностях",
    category_slug="banks",
    popularity_score=75,
    tags=["банк", "кредит", "реструктуризация", "долг"],
    applicant_type="both",
    html=SHORT_PAGE + """
    <div style="text-align: right; margin-bottom: 20px;">
      {{bankName}}<br/>
      от {{fullName}}
    </div>

    <h2 style="text-align: center;">ЗАЯВЛЕНИЕ</h2>
    <h3 style="text-align: center;">о реструктуризации кредита</h3>

    <p>
      Прошу пересмотреть условия кредитного договора №{{loanNumber}} в связи с {{reason}}.
      Предлагаю {{proposedTerms}}.
    </p>
""" + SHORT_SIGNATURE + "\n</div>",
    fields=[
        FieldSpec(field_name="bankName", label="Название банка", step_number=1, order=1),
        FieldSpec(field_name="fullName", label="ФИО", step_number=1, order=2),
        FieldSpec(field_name="loanNumber", label="Номер договора", step_number=1, order=3),
        FieldSpec(field_name="reason", field_type="textarea", label="Причина обращения", step_number=2, order=1),
        FieldSpec(field_name="proposedTerms", field_type="textarea", label="Предлагаемые условия",
                  step_number=2, order=2),
        FieldSpec(field_name="date", field_type="date", label="Дата", step_number=2, order=3),
    ],
)

TEMPLATES = [COMMISSION_CLAIM, CLOSE_ACCOUNT, LOAN_RESTRUCTURING]
