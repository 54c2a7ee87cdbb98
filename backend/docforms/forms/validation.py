"""
Per-field-type validation of form answers.

Pure functions of (field definition, raw input): the chat bot and the web
form both call `validate` and never mutate anything on rejection.
"""

import json
import logging
import math
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, Optional, Tuple, Union

logger = logging.getLogger(__name__)

DATE_PATTERN = re.compile(r"[0-9]{2}\.[0-9]{2}\.[0-9]{4}")
NUMBER_PATTERN = re.compile(r"[+-]?[0-9]+(\.[0-9]+)?")

MSG_REQUIRED = "Это поле обязательно для заполнения"
MSG_NOT_A_NUMBER = "Пожалуйста, введите число"
MSG_BAD_DATE = "Пожалуйста, введите дату в формате ДД.ММ.ГГГГ"
MSG_BAD_OPTION = "Выберите один из предложенных вариантов"


class FieldType(str, Enum):
    TEXT = "text"
    TEXTAREA = "textarea"
    NUMBER = "number"
    DATE = "date"
    SELECT = "select"


@dataclass(frozen=True)
class FieldDefinition:
    """Immutable copy of one form field, detached from the ORM row"""
    field_name: str
    field_type: FieldType
    label: str
    step_number: int
    order: int
    is_required: bool = True
    placeholder: Optional[str] = None
    rules: Dict[str, Any] = field(default_factory=dict)
    options: Tuple[str, ...] = ()

    @classmethod
    def from_model(cls, row) -> "FieldDefinition":
        return cls(
            field_name=row.field_name,
            field_type=FieldType(row.field_type),
            label=row.label,
            step_number=row.step_number,
            order=row.order,
            is_required=row.is_required,
            placeholder=row.placeholder,
            rules=parse_rules(row.validation_rules, row.field_name),
            options=parse_options(row.options),
        )


@dataclass(frozen=True)
class Accepted:
    value: Any


@dataclass(frozen=True)
class Rejected:
    reason: str


ValidationResult = Union[Accepted, Rejected]


def parse_rules(raw: Optional[str], field_name: str = "") -> Dict[str, Any]:
    if not raw:
        return {}
    try:
        rules = json.loads(raw)
    except ValueError:
        logger.warning(f"Ignoring malformed validation rules for field '{field_name}': {raw!r}")
        return {}
    return rules if isinstance(rules, dict) else {}


def parse_options(raw: Optional[str]) -> Tuple[str, ...]:
    if not raw:
        return ()
    options = (option.strip() for option in raw.split(","))
    return tuple(option for option in options if option)


def _format_number(value: float) -> str:
    return str(int(value)) if float(value).is_integer() else str(value)


def _validate_text(definition: FieldDefinition, raw: str) -> ValidationResult:
    rules = definition.rules
    min_length = rules.get("minLength")
    if min_length is not None and len(raw.strip()) < min_length:
        return Rejected(f"Минимальная длина: {min_length} символов")
    max_length = rules.get("maxLength")
    if max_length is not None and len(raw.strip()) > max_length:
        return Rejected(f"Максимальная длина: {max_length} символов")
    pattern = rules.get("pattern")
    if pattern:
        try:
            matched = re.search(pattern, raw.strip()) is not None
        except re.error:
            logger.warning(f"Ignoring invalid pattern for field '{definition.field_name}': {pattern!r}")
            matched = True
        if not matched:
            return Rejected("Значение имеет неверный формат")
    return Accepted(raw)


def _validate_number(definition: FieldDefinition, raw: str) -> ValidationResult:
    # ASCII digits only, so "1_000" and "١٢٣" are rejected
    value = raw.strip()
    if not NUMBER_PATTERN.fullmatch(value):
        return Rejected(MSG_NOT_A_NUMBER)
    number = float(value)
    if not math.isfinite(number):
        return Rejected(MSG_NOT_A_NUMBER)

    minimum = definition.rules.get("min")
    maximum = definition.rules.get("max")
    if minimum is not None and maximum is not None and not minimum <= number <= maximum:
        return Rejected(f"Введите число от {_format_number(minimum)} до {_format_number(maximum)}")
    if minimum is not None and number < minimum:
        return Rejected(f"Число должно быть не меньше {_format_number(minimum)}")
    if maximum is not None and number > maximum:
        return Rejected(f"Число должно быть не больше {_format_number(maximum)}")

    return Accepted(int(number) if number.is_integer() else number)


def _validate_date(definition: FieldDefinition, raw: str) -> ValidationResult:
    # Pattern only: 31.02.2024 passes
    value = raw.strip()
    if not DATE_PATTERN.fullmatch(value):
        return Rejected(MSG_BAD_DATE)
    return Accepted(value)


def _validate_select(definition: FieldDefinition, raw: str) -> ValidationResult:
    # Options are trimmed when parsed; the answer is compared as typed
    if raw not in definition.options:
        return Rejected(MSG_BAD_OPTION)
    return Accepted(raw)


VALIDATORS: Dict[FieldType, Callable[[FieldDefinition, str], ValidationResult]] = {
    FieldType.TEXT: _validate_text,
    FieldType.TEXTAREA: _validate_text,
    FieldType.NUMBER: _validate_number,
    FieldType.DATE: _validate_date,
    FieldType.SELECT: _validate_select,
}


def validate(definition: FieldDefinition, raw: Optional[str]) -> ValidationResult:
    """Check one raw answer against its field definition"""
    raw = raw or ""
    if not raw.strip():
        if definition.is_required:
            return Rejected(MSG_REQUIRED)
        return Accepted("")
    return VALIDATORS[definition.field_type](definition, raw)


def choose_option(definition: FieldDefinition, index: int) -> ValidationResult:
    """Pick a select option by its position, bypassing free-text matching"""
    if definition.field_type is not FieldType.SELECT:
        return Rejected(MSG_BAD_OPTION)
    if not 0 <= index < len(definition.options):
        return Rejected("Неверный выбор")
    return Accepted(definition.options[index])
