from docforms.templates.models import FieldSpec, TemplateSpec
from docforms.templates.documents.common import PAGE, SHORT_PAGE, SHORT_SIGNATURE, SIGNATURE_BLOCK

FOREIGN_PASSPORT = TemplateSpec(
    title="Заявление на оформление загранпаспорта",
    description="Заявление на получение заграничного паспорта гражданина РФ",
    category_slug="mfc-gosuslugi",
    popularity_score=90,
    tags=["загранпаспорт", "МФЦ", "паспорт", "документы"],
    html=PAGE + """
    <div style="text-align: right; margin-bottom: 20px;">
      В отделение ГУВМ МВД России<br/>
      по {{region}}<br/>
      от {{fullName}}<br/>
      Адрес: {{address}}<br/>
      Телефон: {{phone}}
    </div>

    <h2 style="text-align: center; margin: 30px 0;">ЗАЯВЛЕНИЕ</h2>
    <h3 style="text-align: center; margin: 20px 0;">о выдаче заграничного паспорта</h3>

    <p style="text-indent: 40px;">Прошу оформить мне заграничный паспорт сроком на {{passportTerm}} лет.</p>

    <p>
      Паспортные данные:<br/>
      Серия и номер: {{passportSeries}}<br/>
      Дата рождения: {{birthDate}}<br/>
      Место рождения: {{birthPlace}}
    </p>
""" + SIGNATURE_BLOCK + "\n</div>",
    fields=[
        FieldSpec(field_name="fullName", label="ФИО (полностью)", step_number=1, order=1),
        FieldSpec(field_name="region", label="Регион", step_number=1, order=2),
        FieldSpec(field_name="address", label="Адрес регистрации", step_number=1, order=3),
        FieldSpec(field_name="phone", label="Телефон", step_number=1, order=4),
        FieldSpec(field_name="passportSeries", label="Серия и номер паспорта РФ", step_number=2, order=1),
        FieldSpec(field_name="birthDate", field_type="date", label="Дата рождения", step_number=2, order=2),
        FieldSpec(field_name="birthPlace", label="Место рождения", step_number=2, order=3),
        FieldSpec(field_name="passportTerm", field_type="select", label="Срок действия паспорта",
                  step_number=2, order=4, options="5,10"),
        FieldSpec(field_name="date", field_type="date", label="Дата подачи", step_number=2, order=5),
    ],
)

RESIDENCE_REGISTRATION = TemplateSpec(
    title="Заявление о регистрации по месту жительства",
    description="Постановка на регистрационный учет по месту жительства (прописка)",
    category_slug="mfc-gosuslugi",
    popularity_score=85,
    tags=["прописка", "регистрация", "МФЦ", "жилье"],
    html=PAGE + """
    <div style="text-align: right; margin-bottom: 20px;">
      В МВД России<br/>
      от {{fullName}}<br/>
      Паспорт: {{passportSeries}}<br/>
      Телефон: {{phone}}
    </div>

    <h2 style="text-align: center; margin: 30px 0;">ЗАЯВЛЕНИЕ</h2>
    <h3 style="text-align: center; margin: 20px 0;">о регистрации по месту жительства</h3>

    <p style="text-indent: 40px;">Прошу зарегистрировать меня по адресу: {{newAddress}}.</p>

    <p style="text-indent: 40px;">Основание: {{ownershipType}} ({{ownerName}}).</p>
""" + SIGNATURE_BLOCK + "\n</div>",
    fields=[
        FieldSpec(field_name="fullName", label="ФИО", step_number=1, order=1),
        FieldSpec(field_name="passportSeries", label="Серия и номер паспорта", step_number=1, order=2),
        FieldSpec(field_name="phone", label="Телефон", step_number=1, order=3),
        FieldSpec(field_name="newAddress", label="Адрес для регистрации", step_number=2, order=1),
        FieldSpec(field_name="ownershipType", field_type="select", label="Тип собственности", step_number=2, order=2,
                  options="собственность,аренда,согласие собственника"),
        FieldSpec(field_name="ownerName", label="ФИО собственника", step_number=2, order=3),
        FieldSpec(field_name="date", field_type="date", label="Дата", step_number=2, order=4),
    ],
)

CLEAN_RECORD_CERTIFICATE = TemplateSpec(
    title="Заявление на получение справки о несудимости",
    description="Заявление на получение справки об отсутствии судимости (форма 2)",
    category_slug="mfc-gosuslugi",
    popularity_score=78,
    tags=["справка", "несудимость", "МВД", "МФЦ"],
    html=SHORT_PAGE + """
    <div style="text-align: right; margin-bottom: 20px;">
      В ГУ МВД России<br/>
      от {{fullName}}
    </div>

    <h2 style="text-align: center;">ЗАЯВЛЕНИЕ</h2>
    <h3 style="text-align: center;">о выдаче справки об отсутствии судимости</h3>

    <p>
      ФИО: {{fullName}}<br/>
      Дата рождения: {{birthDate}}<br/>
      Место рождения: {{birthPlace}}<br/>
      Паспорт: {{passportSeries}}<br/>
      Адрес: {{address}}<br/>
      Цель получения: {{purpose}}
    </p>
""" + SHORT_SIGNATURE + "\n</div>",
    fields=[
        FieldSpec(field_name="fullName", label="ФИО", step_number=1, order=1),
        FieldSpec(field_name="birthDate", field_type="date", label="Дата рождения", step_number=1, order=2),
        FieldSpec(field_name="birthPlace", label="Место рождения", step_number=1, order=3),
        FieldSpec(field_name="passportSeries", label="Серия и номер паспорта", step_number=1, order=4),
        FieldSpec(field_name="address", label="Адрес регистрации", step_number=2, order=1),
        FieldSpec(field_name="purpose", field_type="select", label="Цель получения", step_number=2, order=2,
                  options="для трудоустройства,для получения визы,для усыновления,иное"),
        FieldSpec(field_name="date", field_type="date", label="Дата", step_number=2, order=3),
    ],
)

SNILS = TemplateSpec(
    title="Заявление на получение СНИЛС",
    description="Страховой номер индивидуального лицевого счета (СНИЛС)",
    category_slug="mfc-gosuslugi",
    popularity_score=82,
    tags=["СНИЛС", "ПФР", "пенсия", "МФЦ"],
    html=SHORT_PAGE + """
    <div style="text-align: right; margin-bottom: 20px;">
      В Пенсионный фонд России<br/>
      от {{fullName}}
    </div>

    <h2 style="text-align: center;">ЗАЯВЛЕНИЕ</h2>
    <h3 style="text-align: center;">о регистрации в системе индивидуального учета</h3>

    <p>
      ФИО: {{fullName}}<br/>
      Дата рождения: {{birthDate}}<br/>
      Место рождения: {{birthPlace}}<br/>
      Паспорт: {{passportSeries}}<br/>
      Адрес: {{address}}<br/>
      Телефон: {{phone}}
    </p>
""" + SHORT_SIGNATURE + "\n</div>",
    fields=[
        FieldSpec(field_name="fullName", label="ФИО", step_number=1, order=1),
        FieldSpec(field_name="birthDate", field_type="date", label="Дата рождения", step_number=1, order=2),
        FieldSpec(field_name="birthPlace", label="Место рождения", step_number=1, order=3),
        FieldSpec(field_name="passportSeries", label="Серия и номер паспорта", step_number=1, order=4),
        FieldSpec(field_name="address", label="Адрес регистрации", step_number=2, order=1),
        FieldSpec(field_name="phone", label="Телефон", step_number=2, order=2),
        FieldSpec(field_name="date", field_type="date", label="Дата", step_number=2, order=3),
    ],
)

TEMPLATES = [FOREIGN_PASSPORT, RESIDENCE_REGISTRATION, CLEAN_RECORD_CERTIFICATE, SNILS]
