from docforms.templates.models import FieldSpec, TemplateSpec
from docforms.templates.documents.common import PAGE, SHORT_PAGE, SHORT_SIGNATURE, SIGNATURE_BLOCK

TREATMENT_DEDUCTION = TemplateSpec(
    title="Заявление на налоговый вычет за лечение",
    description="Получите налоговый вычет за медицинские услуги и лекарства",
    category_slug="fns",
    popularity_score=100,
    tags=["налоговый вычет", "ФНС", "лечение", "медицина"],
    html=PAGE + """
    <div style="text-align: right; margin-bottom: 20px;">
      В Инспекцию Федеральной налоговой службы<br/>
      по {{district}}<br/>
      от {{fullName}}<br/>
      ИНН {{inn}}<br/>
      Адрес: {{address}}<br/>
      Телефон: {{phone}}
    </div>

    <h2 style="text-align: center; margin: 30px 0;">ЗАЯВЛЕНИЕ</h2>
    <h3 style="text-align: center; margin: 20px 0;">о предоставлении социального налогового вычета</h3>

    <p style="text-indent: 40px;">
      Прошу предоставить мне социальный налоговый вычет в соответствии с подпунктом 3 пункта 1 статьи 219
      Налогового кодекса Российской Федерации за {{year}} год в сумме фактически произведенных расходов
      {{amount}} рублей (в пределах установленного лимита 120 000 рублей для обычного лечения),
      уплаченных мной за {{treatmentType}}.
    </p>

    <p style="text-indent: 40px;">К заявлению прилагаю следующие документы:</p>
    <ol>
      <li>Копия паспорта гражданина РФ</li>
      <li>Справка 2-НДФЛ за {{year}} год</li>
      <li>Налоговая декларация по форме 3-НДФЛ за {{year}} год</li>
      <li>Договор с медицинским учреждением на оказание медицинских услуг</li>
      <li>Справка об оплате медицинских услуг для представления в налоговые органы (оригинал)</li>
      <li>Платежные документы (чеки, квитанции, платежные поручения)</li>
    </ol>
""" + SIGNATURE_BLOCK + "\n</div>",
    fields=[
        FieldSpec(field_name="fullName", label="ФИО (полностью)", placeholder="Иванов Иван Иванович",
                  step_number=1, order=1, validation_rules={"minLength": 5}),
        FieldSpec(field_name="inn", label="ИНН", placeholder="123456789012",
                  step_number=1, order=2, validation_rules={"pattern": r"^\d{12}$"}),
        FieldSpec(field_name="phone", label="Телефон", placeholder="+7 (900) 123-45-67", step_number=1, order=3),
        FieldSpec(field_name="address", field_type="textarea", label="Адрес регистрации",
                  placeholder="г. Москва, ул. Ленина, д. 1, кв. 1", step_number=2, order=1),
        FieldSpec(field_name="district", label="Район (для налоговой)",
                  placeholder="Московскому району г. Москвы", step_number=2, order=2),
        FieldSpec(field_name="year", field_type="number", label="Год, за который запрашивается вычет",
                  placeholder="2024", step_number=3, order=1, validation_rules={"min": 2020, "max": 2025}),
        FieldSpec(field_name="amount", field_type="number", label="Сумма расходов (рублей)",
                  placeholder="50000", step_number=3, order=2, validation_rules={"min": 1, "max": 120000}),
        FieldSpec(field_name="treatmentType", field_type="select", label="Вид лечения", step_number=3, order=3,
                  options="медицинские услуги,лекарственные препараты,дорогостоящее лечение"),
        FieldSpec(field_name="date", field_type="date", label="Дата подачи заявления", step_number=3, order=4),
    ],
)

PROPERTY_DEDUCTION = TemplateSpec(
    title="Заявление на налоговый вычет при покупке жилья",
    description="Имущественный налоговый вычет при покупке квартиры/дома",
    category_slug="fns",
    popularity_score=95,
    tags=["налоговый вычет", "квартира", "жилье", "ФНС", "недвижимость"],
    html=PAGE + """
    <div style="text-align: right; margin-bottom: 20px;">
      В Инспекцию ФНС России<br/>
      {{taxOffice}}<br/>
      от {{fullName}}<br/>
      ИНН {{inn}}<br/>
      Адрес регистрации: {{address}}<br/>
      Телефон: {{phone}}
    </div>

    <h2 style="text-align: center; margin: 30px 0;">ЗАЯВЛЕНИЕ</h2>
    <h3 style="text-align: center; margin-bottom: 20px;">о предоставлении имущественного налогового вычета</h3>

    <p style="text-indent: 40px;">
      Прошу предоставить мне имущественный налоговый вычет в соответствии с подпунктом 3 пункта 1
      статьи 220 Налогового кодекса Российской Федерации за {{year}} год в сумме фактически
      произведенных расходов {{amount}} рублей (в пределах установленного лимита 2 000 000 рублей)
      в связи с приобретением {{propertyType}} по адресу: {{propertyAddress}}.
    </p>

    <p style="text-indent: 40px;">
      Право собственности на объект недвижимости зарегистрировано {{registrationDate}},
      номер регистрации: {{registrationNumber}}.
    </p>
""" + SIGNATURE_BLOCK + "\n</div>",
    fields=[
        FieldSpec(field_name="fullName", label="ФИО (полностью)", step_number=1, order=1),
        FieldSpec(field_name="inn", label="ИНН", step_number=1, order=2),
        FieldSpec(field_name="taxOffice", label="Номер налоговой инспекции (например, № 28 по г. Москве)",
                  step_number=1, order=3),
        FieldSpec(field_name="address", label="Адрес регистрации", step_number=1, order=4),
        FieldSpec(field_name="phone", label="Телефон", step_number=1, order=5),
        FieldSpec(field_name="year", field_type="number", label="Год, за который запрашивается вычет",
                  step_number=2, order=1),
        FieldSpec(field_name="amount", field_type="number",
                  label="Сумма фактических расходов (не более 2 000 000 руб.)", step_number=2, order=2,
                  validation_rules={"min": 1, "max": 2000000}),
        FieldSpec(field_name="propertyType", field_type="select", label="Тип недвижимости", step_number=2, order=3,
                  options="квартиры,дома,комнаты,земельного участка"),
        FieldSpec(field_name="propertyAddress", label="Адрес приобретенной недвижимости", step_number=2, order=4),
        FieldSpec(field_name="registrationDate", field_type="date", label="Дата регистрации права собственности",
                  step_number=3, order=1),
        FieldSpec(field_name="registrationNumber", label="Номер регистрации права собственности",
                  step_number=3, order=2),
        FieldSpec(field_name="date", field_type="date", label="Дата подачи заявления", step_number=3, order=3),
    ],
)

EDUCATION_DEDUCTION = TemplateSpec(
    title="Заявление на налоговый вычет за обучение",
    description="Социальный налоговый вычет на образование (свое или детей)",
    category_slug="fns",
    popularity_score=85,
    tags=["налоговый вычет", "обучение", "ФНС", "образование"],
    html=PAGE + """
    <div style="text-align: right; margin-bottom: 20px;">
      В Инспекцию Федеральной налоговой службы<br/>
      по {{district}}<br/>
      от {{fullName}}<br/>
      ИНН {{inn}}<br/>
      Адрес: {{address}}
    </div>

    <h2 style="text-align: center; margin: 30px 0;">ЗАЯВЛЕНИЕ</h2>
    <h3 style="text-align: center; margin: 20px 0;">о предоставлении налогового вычета</h3>

    <p style="text-indent: 40px;">
      Прошу предоставить мне социальный налоговый вычет в соответствии с п.2 ст. 219 Налогового кодекса РФ
      за {{year}} год в сумме {{amount}} рублей, уплаченных мной за обучение {{educationType}}.
    </p>

    <p style="text-indent: 40px;">Обучение проходило в {{institutionName}}.</p>
""" + SIGNATURE_BLOCK + "\n</div>",
    fields=[
        FieldSpec(field_name="fullName", label="ФИО", step_number=1, order=1),
        FieldSpec(field_name="inn", label="ИНН", step_number=1, order=2),
        FieldSpec(field_name="district", label="Район/город", step_number=1, order=3),
        FieldSpec(field_name="address", label="Адрес", step_number=1, order=4),
        FieldSpec(field_name="year", field_type="number", label="Год", step_number=2, order=1),
        FieldSpec(field_name="amount", field_type="number", label="Сумма вычета (руб.)", step_number=2, order=2),
        FieldSpec(field_name="educationType", field_type="select", label="За чье обучение", step_number=2, order=3,
                  options="свое,своего ребенка,своего брата/сестры"),
        FieldSpec(field_name="institutionName", label="Название учебного заведения", step_number=2, order=4),
        FieldSpec(field_name="date", field_type="date", label="Дата", step_number=2, order=5),
    ],
)

INN_REGISTRATION = TemplateSpec(
    title="Заявление на получение ИНН",
    description="Заявление о постановке на учет физического лица и получении ИНН",
    category_slug="fns",
    popularity_score=88,
    tags=["ИНН", "ФНС", "налоги", "регистрация"],
    html=SHORT_PAGE + """
    <div style="text-align: right; margin-bottom: 20px;">
      В Инспекцию ФНС<br/>
      от {{fullName}}
    </div>

    <h2 style="text-align: center;">ЗАЯВЛЕНИЕ</h2>
    <h3 style="text-align: center;">о постановке на учет физического лица</h3>

    <p>
      ФИО: {{fullName}}<br/>
      Дата рождения: {{birthDate}}<br/>
      Паспорт: {{passportSeries}}<br/>
      Адрес: {{address}}
    </p>
""" + SHORT_SIGNATURE + "\n</div>",
    fields=[
        FieldSpec(field_name="fullName", label="ФИО", step_number=1, order=1),
        FieldSpec(field_name="birthDate", field_type="date", label="Дата рождения", step_number=1, order=2),
        FieldSpec(field_name="passportSeries", label="Серия и номер паспорта", step_number=1, order=3),
        FieldSpec(field_name="address", label="Адрес регистрации", step_number=1, order=4),
        FieldSpec(field_name="date", field_type="date", label="Дата", step_number=1, order=5),
    ],
)

TEMPLATES = [TREATMENT_DEDUCTION, PROPERTY_DEDUCTION, EDUCATION_DEDUCTION, INN_REGISTRATION]
