from docforms.templates.models import FieldSpec, TemplateSpec
from docforms.templates.documents.common import PAGE

DIVORCE_SUIT = TemplateSpec(
    title="Исковое заявление о расторжении брака",
    description="Заявление в суд о расторжении брака без согласия супруга или при наличии несовершеннолетних детей",
    category_slug="courts",
    popularity_score=80,
    tags=["развод", "брак", "суд", "семья"],
    html=PAGE + """
    <div style="text-align: right; margin-bottom: 20px;">
      В {{courtName}}<br/>
      <br/>
      Истец: {{fullName}}<br/>
      Адрес: {{address}}<br/>
      Телефон: {{phone}}<br/>
      <br/>
      Ответчик: {{spouseName}}<br/>
      Адрес ответчика: {{spouseAddress}}
    </div>

    <h2 style="text-align: center; margin: 30px 0;">ИСКОВОЕ ЗАЯВЛЕНИЕ</h2>
    <h3 style="text-align: center; margin: 20px 0;">о расторжении брака</h3>

    <p style="text-indent: 40px;">
      {{marriageDate}} я вступил(а) в брак с {{spouseName}}. Брак зарегистрирован {{registrationPlace}},
      запись акта о заключении брака {{actNumber}}.
    </p>

    <p style="text-indent: 40px;">
      От брака имеем {{childrenCount}} несовершеннолетних детей: {{childrenInfo}}.
    </p>

    <p style="text-indent: 40px;">
      Совместная жизнь не сложилась, брачные отношения фактически прекращены с {{separationDate}}.
      Дальнейшее сохранение семьи и совместное проживание невозможно. {{divorceReason}}
    </p>

    <p style="text-indent: 40px;">
      Спор о разделе совместно нажитого имущества {{propertyDispute}}.
      Спор о месте жительства детей и порядке общения с ними {{childrenDispute}}.
    </p>

    <p style="text-indent: 40px;">
      На основании изложенного и руководствуясь ст. 21-23 Семейного кодекса Российской Федерации,
      ст. 131-132 Гражданского процессуального кодекса РФ,
    </p>

    <h3 style="text-align: center; margin: 20px 0;">ПРОШУ:</h3>
    <ol>
      <li>Расторгнуть брак между мной, {{fullName}}, и {{spouseName}}, заключенный {{marriageDate}},
        актовая запись {{actNumber}}</li>
    </ol>

    <h3 style="margin-top: 30px;">Цена иска:</h3>
    <p>Не подлежит оценке (пп. 4 п. 1 ст. 333.19 НК РФ), госпошлина 600 рублей.</p>

    <h3>Приложения:</h3>
    <ol>
      <li>Копия искового заявления для ответчика</li>
      <li>Копия свидетельства о заключении брака</li>
      <li>Копии свидетельств о рождении детей (при наличии)</li>
      <li>Квитанция об уплате государственной пошлины (600 рублей)</li>
      <li>Документы, подтверждающие обстоятельства, на которых основаны исковые требования</li>
    </ol>

    <div style="margin-top: 40px;">
      <p>
        <span style="display: inline-block; width: 150px;">Дата:</span> {{date}}<br/>
        <span style="display: inline-block; width: 150px;">Подпись истца:</span> _____________ {{fullName}}
      </p>
    </div>
</div>""",
    fields=[
        FieldSpec(field_name="courtName", label="Название суда", step_number=1, order=1),
        FieldSpec(field_name="fullName", label="Ваше ФИО", step_number=1, order=2),
        FieldSpec(field_name="address", label="Ваш адрес", step_number=1, order=3),
        FieldSpec(field_name="phone", label="Телефон", step_number=1, order=4),
        FieldSpec(field_name="spouseName", label="ФИО супруга", step_number=2, order=1),
        FieldSpec(field_name="spouseAddress", label="Адрес супруга", step_number=2, order=2),
        FieldSpec(field_name="marriageDate", field_type="date", label="Дата вступления в брак",
                  step_number=2, order=3),
        FieldSpec(field_name="registrationPlace", label="Место регистрации брака", step_number=2, order=4),
        FieldSpec(field_name="actNumber", label="Номер записи акта", step_number=2, order=5),
        FieldSpec(field_name="childrenCount", field_type="select", label="Количество детей", step_number=3, order=1,
                  options="нет детей,1,2,3,4 и более"),
        FieldSpec(field_name="childrenInfo", field_type="textarea", label="Информация о детях (ФИО, дата рождения)",
                  placeholder="Иванов Петр Иванович, 15.05.2015 г.р.", step_number=3, order=2, is_required=False),
        FieldSpec(field_name="childrenDispute", field_type="select", label="Спор о детях", step_number=3, order=3,
                  options="отсутствует,будет рассмотрен отдельно,просим определить место жительства с истцом"),
        FieldSpec(field_name="separationDate", field_type="date", label="Дата прекращения отношений",
                  step_number=3, order=4),
        FieldSpec(field_name="divorceReason", field_type="textarea", label="Причина развода (подробно)",
                  placeholder="Например: Постоянные конфликты, разные взгляды на жизнь, отсутствие взаимопонимания...",
                  step_number=3, order=5),
        FieldSpec(field_name="propertyDispute", field_type="select", label="Спор об имуществе", step_number=3, order=6,
                  options="отсутствует,будет рассмотрен отдельно,имущество отсутствует"),
        FieldSpec(field_name="date", field_type="date", label="Дата подачи", step_number=3, order=7),
    ],
)

CONSUMER_RIGHTS_SUIT = TemplateSpec(
    title="Исковое заявление о защите прав потребителей",
    description="Иск к продавцу/исполнителю услуг о возмещении ущерба",
    category_slug="courts",
    popularity_score=74,
    tags=["суд", "защита прав потребителей", "иск", "компенсация"],
    html=PAGE + """
    <div style="text-align: right; margin-bottom: 20px;">
      В {{courtName}}<br/><br/>
      <strong>Истец:</strong> {{fullName}}<br/>
      Адрес: {{plaintiffAddress}}<br/>
      Телефон: {{plaintiffPhone}}<br/><br/>
      <strong>Ответчик:</strong> {{defendant}}<br/>
      Адрес: {{defendantAddress}}
    </div>

    <h2 style="text-align: center; margin: 30px 0;">ИСКОВОЕ ЗАЯВЛЕНИЕ</h2>
    <h3 style="text-align: center; margin-bottom: 20px;">о защите прав потребителей</h3>

    <h3 style="margin-top: 20px;">Обстоятельства дела:</h3>
    <p style="text-indent: 40px;">
      {{purchaseDate}} я приобрел(а) у ответчика {{productService}} стоимостью {{price}} рублей.
      Договор/чек/квитанция № {{documentNumber}} от {{purchaseDate}}.
    </p>

    <p style="text-indent: 40px;">{{violation}}</p>

    <p style="text-indent: 40px;">
      {{pretensionDate}} мною была направлена претензия ответчику с требованием {{pretensionDemand}}.
      {{pretensionResult}}
    </p>

    <h3 style="margin-top: 30px;">Правовое обоснование:</h3>
    <p style="text-indent: 40px;">
      В соответствии со статьями 18, 23, 28 Закона РФ "О защите прав потребителей" потребитель
      вправе требовать возмещения убытков, причиненных ему вследствие продажи товара ненадлежащего
      качества либо предоставления услуги ненадлежащего качества.
    </p>

    <p style="text-indent: 40px;">
      Согласно пункту 6 статьи 13 Закона РФ "О защите прав потребителей", при удовлетворении
      судом требований потребителя, установленных законом, суд взыскивает с изготовителя (исполнителя,
      продавца, уполномоченной организации или уполномоченного индивидуального предпринимателя,
      импортера) за несоблюдение в добровольном порядке удовлетворения требований потребителя
      штраф в размере пятьдесят процентов от суммы, присужденной судом в пользу потребителя.
    </p>

    <p style="text-indent: 40px;">
      В силу статьи 15 Закона РФ "О защите прав потребителей" моральный вред, причиненный
      потребителю вследствие нарушения изготовителем (исполнителем, продавцом) прав потребителя,
      подлежит компенсации причинителем вреда при наличии его вины.
    </p>

    <h3 style="text-align: center; margin-top: 30px;">ПРОШУ СУД:</h3>
    <ol>
      <li>Взыскать с ответчика в мою пользу стоимость товара/услуги в размере {{price}} рублей</li>
      <li>Взыскать компенсацию морального вреда в размере {{moralDamage}} рублей</li>
      <li>Взыскать штраф в размере 50% от суммы, присужденной судом в мою пользу
      (п. 6 ст. 13 Закона РФ "О защите прав потребителей")</li>
      <li>Взыскать судебные расходы</li>
    </ol>

    <h3 style="margin-top: 30px;">Цена иска:</h3>
    <p>{{price}} (стоимость товара/услуги) + {{moralDamage}} (моральный вред) = {{totalClaim}} рублей.</p>

    <p style="text-indent: 40px;">
      <i>Примечание: В соответствии с п. 3 ст. 17 Закона РФ "О защите прав потребителей" потребители
      освобождаются от уплаты государственной пошлины по искам, связанным с нарушением их прав.</i>
    </p>

    <h3 style="margin-top: 30px;">Приложения:</h3>
    <ol>
      <li>Копия искового заявления для ответчика</li>
      <li>Копия договора/чека/квитанции об оплате</li>
      <li>Копия претензии с отметкой о вручении (или с описью вложения)</li>
      <li>Документы, подтверждающие обстоятельства дела (акты, заключения экспертизы, фотографии и т.д.)</li>
      <li>Расчет цены иска</li>
    </ol>

    <div style="margin-top: 40px;">
      <p>
        <span style="display: inline-block; width: 150px;">Дата:</span> {{date}}<br/>
        <span style="display: inline-block; width: 150px;">Подпись истца:</span> _____________
      </p>
    </div>
</div>""",
    fields=[
        FieldSpec(field_name="courtName", label="Название суда (например, Тверской районный суд г. Москвы)",
                  step_number=1, order=1),
        FieldSpec(field_name="fullName", label="Ваше ФИО (полностью)", step_number=1, order=2),
        FieldSpec(field_name="plaintiffAddress", label="Ваш адрес", step_number=1, order=3),
        FieldSpec(field_name="plaintiffPhone", label="Ваш телефон", step_number=1, order=4),
        FieldSpec(field_name="defendant", label="Ответчик (полное наименование организации)", step_number=1, order=5),
        FieldSpec(field_name="defendantAddress", label="Адрес ответчика", step_number=1, order=6),
        FieldSpec(field_name="purchaseDate", field_type="date", label="Дата покупки товара/заказа услуги",
                  step_number=2, order=1),
        FieldSpec(field_name="productService", label="Наименование товара/услуги", step_number=2, order=2),
        FieldSpec(field_name="price", field_type="number", label="Стоимость товара/услуги (руб.)",
                  step_number=2, order=3),
        FieldSpec(field_name="documentNumber", label="Номер договора/чека/квитанции", step_number=2, order=4),
        FieldSpec(field_name="violation", field_type="textarea",
                  label="Подробное описание нарушения прав (какой недостаток обнаружен, "
                        "в чем именно выражается нарушение)",
                  step_number=2, order=5),
        FieldSpec(field_name="pretensionDate", field_type="date", label="Дата направления претензии ответчику",
                  step_number=3, order=1),
        FieldSpec(field_name="pretensionDemand",
                  label="Требование в претензии (например: возврата денежных средств, замены товара)",
                  step_number=3, order=2),
        FieldSpec(field_name="pretensionResult", field_type="textarea",
                  label="Результат рассмотрения претензии (например: Претензия оставлена без ответа / Получен отказ)",
                  step_number=3, order=3),
        FieldSpec(field_name="moralDamage", field_type="number", label="Размер компенсации морального вреда (руб.)",
                  step_number=3, order=4),
        FieldSpec(field_name="totalClaim", field_type="number",
                  label="Общая цена иска (автоматически: стоимость + моральный вред)", step_number=3, order=5),
        FieldSpec(field_name="date", field_type="date", label="Дата подачи искового заявления",
                  step_number=3, order=6),
    ],
)

TEMPLATES = [DIVORCE_SUIT, CONSUMER_RIGHTS_SUIT]
