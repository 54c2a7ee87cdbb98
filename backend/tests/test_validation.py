"""Tests for per-field-type answer validation"""
import pytest

from docforms.forms.validation import (
    Accepted, FieldDefinition, FieldType, Rejected, VALIDATORS,
    MSG_BAD_OPTION, MSG_NOT_A_NUMBER, MSG_REQUIRED, choose_option, parse_options, parse_rules, validate
)


def make_field(field_type=FieldType.TEXT, **kwargs):
    defaults = dict(field_name="value", field_type=field_type, label="Значение", step_number=1, order=1)
    defaults.update(kwargs)
    return FieldDefinition(**defaults)


class TestNumberFields:
    """Amount field of the treatment deduction: {min: 1, max: 120000}"""

    @pytest.fixture
    def amount(self):
        return make_field(FieldType.NUMBER, field_name="amount", rules={"min": 1, "max": 120000})

    @pytest.mark.parametrize("raw,expected", [("1", 1), ("120000", 120000), (" 500 ", 500), ("99.5", 99.5)])
    def test_accepts_values_in_range(self, amount, raw, expected):
        result = validate(amount, raw)
        assert result == Accepted(expected)

    @pytest.mark.parametrize("raw", ["0", "120001", "-3"])
    def test_rejects_values_out_of_range(self, amount, raw):
        result = validate(amount, raw)
        assert isinstance(result, Rejected)
        assert "120000" in result.reason

    @pytest.mark.parametrize("raw", ["abc", "12abc", "nan", "inf", "1_000", "1e3", "١٢٣", "12,5", "1" * 400])
    def test_rejects_non_numeric_input(self, amount, raw):
        assert validate(amount, raw) == Rejected(MSG_NOT_A_NUMBER)

    def test_integral_values_are_stored_as_int(self):
        result = validate(make_field(FieldType.NUMBER), "14.0")
        assert result.value == 14
        assert isinstance(result.value, int)

    def test_only_minimum(self):
        field = make_field(FieldType.NUMBER, rules={"min": 2000})
        assert isinstance(validate(field, "1999"), Rejected)
        assert validate(field, "2024") == Accepted(2024)


class TestDateFields:
    @pytest.fixture
    def date_field(self):
        return make_field(FieldType.DATE, field_name="startDate")

    def test_accepts_dd_mm_yyyy(self, date_field):
        assert validate(date_field, "01.07.2024") == Accepted("01.07.2024")

    def test_calendar_invalid_date_passes_pattern_check(self, date_field):
        assert validate(date_field, "31.02.2024") == Accepted("31.02.2024")

    @pytest.mark.parametrize("raw", ["2024-07-01", "1.7.2024", "01.07.24", "01.07.2024 extra"])
    def test_rejects_other_formats(self, date_field, raw):
        assert isinstance(validate(date_field, raw), Rejected)


class TestTextFields:
    def test_required_blank_rejected(self):
        assert validate(make_field(), "   ") == Rejected(MSG_REQUIRED)

    def test_optional_blank_accepted_as_empty(self):
        assert validate(make_field(is_required=False), "") == Accepted("")

    def test_pattern_uses_search_semantics(self):
        field = make_field(field_name="inn", rules={"pattern": "^[0-9]{10,12}$"})
        assert validate(field, "123456789012") == Accepted("123456789012")
        assert isinstance(validate(field, "12345"), Rejected)

    def test_length_limits(self):
        field = make_field(rules={"minLength": 3, "maxLength": 5})
        assert isinstance(validate(field, "ab"), Rejected)
        assert isinstance(validate(field, "abcdef"), Rejected)
        assert validate(field, "abcd") == Accepted("abcd")

    def test_textarea_keeps_raw_text(self):
        field = make_field(FieldType.TEXTAREA)
        assert validate(field, "г. Москва,\nул. Ленина, д. 1") == Accepted("г. Москва,\nул. Ленина, д. 1")


class TestSelectFields:
    """Property type select: 'квартиры,дома,комнаты,земельного участка'"""

    @pytest.fixture
    def property_type(self):
        return make_field(
            FieldType.SELECT,
            field_name="propertyType",
            options=parse_options("квартиры,дома,комнаты,земельного участка")
        )

    def test_choose_by_index(self, property_type):
        assert choose_option(property_type, 2) == Accepted("комнаты")

    @pytest.mark.parametrize("index", [4, -1])
    def test_index_out_of_range_rejected(self, property_type, index):
        assert choose_option(property_type, index) == Rejected("Неверный выбор")

    def test_free_text_must_match_an_option(self, property_type):
        assert validate(property_type, "дома") == Accepted("дома")
        assert isinstance(validate(property_type, "гаража"), Rejected)

    def test_free_text_compared_as_typed(self, property_type):
        assert validate(property_type, " дома ") == Rejected(MSG_BAD_OPTION)

    def test_choose_on_non_select_field_rejected(self):
        assert isinstance(choose_option(make_field(), 0), Rejected)


class TestParsing:
    def test_every_field_type_has_a_validator(self):
        assert set(VALIDATORS) == set(FieldType)

    def test_malformed_rules_ignored(self):
        assert parse_rules("{not json", "amount") == {}
        assert parse_rules('["min"]') == {}
        assert parse_rules('{"min": 1}') == {"min": 1}

    def test_options_are_trimmed(self):
        assert parse_options(" a , b,c ") == ("a", "b", "c")
        assert parse_options(None) == ()

    def test_empty_options_dropped(self):
        assert parse_options("a,,b, ,") == ("a", "b")
        field = make_field(FieldType.SELECT, options=parse_options("a,,b"))
        assert choose_option(field, 1) == Accepted("b")
        assert validate(field, "") == Rejected(MSG_REQUIRED)
