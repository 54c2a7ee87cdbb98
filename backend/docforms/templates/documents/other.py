from docforms.templates.models import FieldSpec, TemplateSpec
from docforms.templates.documents.common import SHORT_PAGE, SHORT_SIGNATURE

HOUSING_CLAIM = TemplateSpec(
    title="Претензия в управляющую компанию (ЖКХ)",
    description="Жалоба на некачественные услуги ЖКХ или нарушение договора",
    category_slug="other",
    popularity_score=72,
    tags=["ЖКХ", "претензия", "коммунальные услуги", "УК"],
    html=SHORT_PAGE + """
    <div style="text-align: right; margin-bottom: 20px;">
      {{companyName}}<br/>
      от {{fullName}}<br/>
      Адрес: {{address}}
    </div>

    <h2 style="text-align: center;">ПРЕТЕНЗИЯ</h2>

    <p>Я являюсь собственником квартиры по адресу: {{address}}. {{complaintText}}</p>

    <p><strong>ПРОШУ:</strong></p>
    <p>{{demands}}</p>
""" + SHORT_SIGNATURE + "\n</div>",
    fields=[
        FieldSpec(field_name="companyName", label="Название УК", step_number=1, order=1),
        FieldSpec(field_name="fullName", label="Ваше ФИО", step_number=1, order=2),
        FieldSpec(field_name="address", label="Адрес квартиры", step_number=1, order=3),
        FieldSpec(field_name="complaintText", field_type="textarea", label="Суть претензии", step_number=2, order=1),
        FieldSpec(field_name="demands", field_type="textarea", label="Ваши требования", step_number=2, order=2),
        FieldSpec(field_name="date", field_type="date", label="Дата", step_number=2, order=3),
    ],
)

GOODS_RETURN = TemplateSpec(
    title="Заявление на возврат товара надлежащего качества",
    description="Возврат товара в течение 14 дней (ст. 25 ЗоЗПП)",
    category_slug="other",
    popularity_score=76,
    tags=["возврат", "товар", "магазин", "защита прав потребителей"],
    html=SHORT_PAGE + """
    <div style="text-align: right; margin-bottom: 20px;">
      {{storeName}}<br/>
      от {{fullName}}
    </div>

    <h2 style="text-align: center;">ЗАЯВЛЕНИЕ</h2>
    <h3 style="text-align: center;">о возврате товара</h3>

    <p>
      {{purchaseDate}} приобрел(а) товар: {{productName}} стоимостью {{price}} рублей.
      Прошу вернуть мне уплаченную сумму в связи с {{reason}}.
    </p>
""" + SHORT_SIGNATURE + "\n</div>",
    fields=[
        FieldSpec(field_name="storeName", label="Название магазина", step_number=1, order=1),
        FieldSpec(field_name="fullName", label="Ваше ФИО", step_number=1, order=2),
        FieldSpec(field_name="purchaseDate", field_type="date", label="Дата покупки", step_number=1, order=3),
        FieldSpec(field_name="productName", label="Название товара", step_number=2, order=1),
        FieldSpec(field_name="price", field_type="number", label="Стоимость (руб.)", step_number=2, order=2),
        FieldSpec(field_name="reason", field_type="select", label="Причина возврата", step_number=2, order=3,
                  options="не подошел размер,не подошел цвет,не подошла форма,иная причина"),
        FieldSpec(field_name="date", field_type="date", label="Дата подачи", step_number=2, order=4),
    ],
)

SCHOOL_TRANSFER = TemplateSpec(
    title="Заявление на перевод ребенка в другую школу",
    description="Заявление об отчислении в порядке перевода",
    category_slug="other",
    popularity_score=68,
    tags=["школа", "образование", "перевод", "дети"],
    html=SHORT_PAGE + """
    <div style="text-align: right; margin-bottom: 20px;">
      Директору {{schoolName}}<br/>
      от {{parentName}}
    </div>

    <h2 style="text-align: center;">ЗАЯВЛЕНИЕ</h2>

    <p>
      Прошу отчислить моего ребенка {{childName}}, ученика(цу) {{grade}} класса, в порядке перевода
      в {{newSchoolName}} с {{transferDate}}.
    </p>
""" + SHORT_SIGNATURE + "\n</div>",
    fields=[
        FieldSpec(field_name="schoolName", label="Название текущей школы", step_number=1, order=1),
        FieldSpec(field_name="parentName", label="ФИО родителя", step_number=1, order=2),
        FieldSpec(field_name="childName", label="ФИО ребенка", step_number=1, order=3),
        FieldSpec(field_name="grade", field_type="number", label="Класс", step_number=1, order=4),
        FieldSpec(field_name="newSchoolName", label="Название новой школы", step_number=2, order=1),
        FieldSpec(field_name="transferDate", field_type="date", label="Дата перевода", step_number=2, order=2),
        FieldSpec(field_name="date", field_type="date", label="Дата подачи", step_number=2, order=3),
    ],
)

TEMPLATES = [HOUSING_CLAIM, GOODS_RETURN, SCHOOL_TRANSFER]
