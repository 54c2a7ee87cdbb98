from docforms.templates.models import FieldSpec, TemplateSpec
from docforms.templates.documents.common import PAGE, SHORT_PAGE, SHORT_SIGNATURE, SIGNATURE_BLOCK


def _employer_header_fields():
    return [
        FieldSpec(field_name="companyName", label="Название организации", step_number=1, order=1),
        FieldSpec(field_name="directorName", label="ФИО директора", step_number=1, order=2),
        FieldSpec(field_name="fullName", label="Ваше ФИО", step_number=1, order=3),
    ]


VACATION = TemplateSpec(
    title="Заявление на ежегодный оплачиваемый отпуск",
    description="Заявление работника на предоставление очередного отпуска",
    category_slug="employers",
    popularity_score=100,
    tags=["отпуск", "работа", "работодатель", "отдых"],
    html=PAGE + """
    <div style="text-align: right; margin-bottom: 20px; font-size: 12pt;">
      {{companyName}}<br/>
      {{directorName}}<br/>
      от {{fullName}}<br/>
      Должность: {{position}}
    </div>

    <h2 style="text-align: center; margin: 30px 0;">ЗАЯВЛЕНИЕ</h2>

    <p style="text-indent: 40px;">
      Прошу предоставить мне ежегодный оплачиваемый отпуск продолжительностью {{days}} календарных дней
      с {{startDate}} по {{endDate}}.
    </p>
""" + SIGNATURE_BLOCK + "\n</div>",
    fields=_employer_header_fields() + [
        FieldSpec(field_name="position", label="Должность", step_number=1, order=4),
        FieldSpec(field_name="startDate", field_type="date", label="Дата начала отпуска", step_number=2, order=1),
        FieldSpec(field_name="endDate", field_type="date", label="Дата окончания отпуска", step_number=2, order=2),
        FieldSpec(field_name="days", field_type="number", label="Количество дней", step_number=2, order=3),
        FieldSpec(field_name="date", field_type="date", label="Дата подачи", step_number=2, order=4),
    ],
)

RESIGNATION = TemplateSpec(
    title="Заявление об увольнении по собственному желанию",
    description="Заявление работника об увольнении по инициативе работника (ст. 80 ТК РФ)",
    category_slug="employers",
    popularity_score=90,
    tags=["увольнение", "работа", "работодатель", "трудовой кодекс"],
    html=PAGE + """
    <div style="text-align: right; margin-bottom: 20px;">
      {{companyName}}<br/>
      {{directorName}}<br/>
      от {{fullName}}<br/>
      Должность: {{position}}
    </div>

    <h2 style="text-align: center; margin: 30px 0;">ЗАЯВЛЕНИЕ</h2>

    <p style="text-indent: 40px;">
      Прошу уволить меня по собственному желанию с {{dismissalDate}} на основании статьи 80 Трудового кодекса РФ.
    </p>
""" + SIGNATURE_BLOCK + "\n</div>",
    fields=_employer_header_fields() + [
        FieldSpec(field_name="position", label="Должность", step_number=1, order=4),
        FieldSpec(field_name="dismissalDate", field_type="date", label="Дата увольнения", step_number=2, order=1),
        FieldSpec(field_name="date", field_type="date", label="Дата подачи", step_number=2, order=2),
    ],
)

MATERNITY_LEAVE = TemplateSpec(
    title="Заявление на отпуск по беременности и родам",
    description="Декретный отпуск и пособие по беременности и родам",
    category_slug="employers",
    popularity_score=80,
    tags=["декрет", "беременность", "отпуск", "работа"],
    html=SHORT_PAGE + """
    <div style="text-align: right; margin-bottom: 20px;">
      {{companyName}}<br/>
      {{directorName}}<br/>
      от {{fullName}}
    </div>

    <h2 style="text-align: center;">ЗАЯВЛЕНИЕ</h2>

    <p>
      Прошу предоставить мне отпуск по беременности и родам на основании листка нетрудоспособности
      с {{startDate}} по {{endDate}}.
    </p>
""" + SHORT_SIGNATURE + "\n</div>",
    fields=_employer_header_fields() + [
        FieldSpec(field_name="startDate", field_type="date", label="Дата начала", step_number=2, order=1),
        FieldSpec(field_name="endDate", field_type="date", label="Дата окончания", step_number=2, order=2),
        FieldSpec(field_name="date", field_type="date", label="Дата подачи", step_number=2, order=3),
    ],
)

UNPAID_LEAVE = TemplateSpec(
    title="Заявление на отпуск без сохранения заработной платы",
    description="Отпуск за свой счет (без содержания)",
    category_slug="employers",
    popularity_score=70,
    tags=["отпуск", "работа", "работодатель", "без содержания"],
    html=SHORT_PAGE + """
    <div style="text-align: right; margin-bottom: 20px;">
      {{companyName}}<br/>
      {{directorName}}<br/>
      от {{fullName}}<br/>
      Должность: {{position}}
    </div>

    <h2 style="text-align: center;">ЗАЯВЛЕНИЕ</h2>

    <p>
      Прошу предоставить мне отпуск без сохранения заработной платы с {{startDate}} по {{endDate}}
      продолжительностью {{days}} дней по причине: {{reason}}.
    </p>
""" + SHORT_SIGNATURE + "\n</div>",
    fields=_employer_header_fields() + [
        FieldSpec(field_name="position", label="Должность", step_number=1, order=4),
        FieldSpec(field_name="startDate", field_type="date", label="Дата начала", step_number=2, order=1),
        FieldSpec(field_name="endDate", field_type="date", label="Дата окончания", step_number=2, order=2),
        FieldSpec(field_name="days", field_type="number", label="Количество дней", step_number=2, order=3),
        FieldSpec(field_name="reason", field_type="textarea", label="Причина", step_number=2, order=4),
        FieldSpec(field_name="date", field_type="date", label="Дата подачи", step_number=2, order=5),
    ],
)

TEMPLATES = [VACATION, RESIGNATION, MATERNITY_LEAVE, UNPAID_LEAVE]
