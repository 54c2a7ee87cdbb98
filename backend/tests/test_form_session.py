"""Tests for the step-by-step form session state machine"""
import pytest

from docforms.forms.session import FormSession, InMemorySessionStore, SessionClosedError, SessionState
from docforms.forms.validation import Accepted, FieldDefinition, FieldType, Rejected


def field(name, step, order, field_type=FieldType.TEXT, **kwargs):
    return FieldDefinition(field_name=name, field_type=field_type, label=name, step_number=step, order=order, **kwargs)


def start(fields):
    return FormSession.start(user_key="42", user_id="user-1", template_id="tpl-1", document_id="doc-1", fields=fields)


class TestFormSession:
    @pytest.fixture
    def session(self):
        # Deliberately shuffled; the session orders by (step, order)
        return start([
            field("date", 2, 2, FieldType.DATE),
            field("fullName", 1, 1),
            field("days", 2, 1, FieldType.NUMBER),
            field("position", 1, 2),
        ])

    def test_starts_at_first_field_of_first_step(self, session):
        assert session.current_field().field_name == "fullName"
        assert session.current_step == 1
        assert session.step_position == 1
        assert session.total_steps == 2
        assert session.state is SessionState.AWAITING_ANSWER

    def test_walks_fields_in_step_order(self, session):
        visited = []
        for answer in ["Иванов", "Инженер", "14", "01.07.2024"]:
            visited.append(session.current_field().field_name)
            assert isinstance(session.submit(answer), Accepted)

        assert visited == ["fullName", "position", "days", "date"]
        assert session.is_complete
        assert session.current_field() is None
        assert len(session.answers) == len(session.fields)

    def test_rejection_leaves_state_unchanged(self, session):
        session.submit("Иванов")
        session.submit("Инженер")

        result = session.submit("abc")

        assert isinstance(result, Rejected)
        assert session.current_field().field_name == "days"
        assert session.answers == {"fullName": "Иванов", "position": "Инженер"}

    def test_skips_absent_step_numbers(self):
        session = start([field("a", 1, 1), field("b", 3, 1)])
        session.submit("x")

        assert session.current_step == 3
        assert session.step_position == 2
        assert session.total_steps == 2

    def test_input_after_completion_raises(self):
        session = start([field("only", 1, 1)])
        session.submit("done")

        with pytest.raises(SessionClosedError):
            session.submit("again")

    def test_cancelled_session_accepts_no_input(self, session):
        session.cancel()

        assert session.current_field() is None
        with pytest.raises(SessionClosedError):
            session.submit("Иванов")

    def test_choose_option_advances(self):
        options = ("квартиры", "дома", "комнаты", "земельного участка")
        session = start([field("propertyType", 1, 1, FieldType.SELECT, options=options), field("next", 1, 2)])

        assert session.choose(4) == Rejected("Неверный выбор")
        assert session.current_field().field_name == "propertyType"

        assert session.choose(2) == Accepted("комнаты")
        assert session.answers == {"propertyType": "комнаты"}
        assert session.current_field().field_name == "next"

    def test_template_without_fields_cannot_start(self):
        with pytest.raises(ValueError):
            start([])


class TestInMemorySessionStore:
    def test_one_session_per_user_key(self):
        store = InMemorySessionStore()
        first = store.create(start([field("a", 1, 1)]))
        second = store.create(start([field("b", 1, 1)]))

        assert len(store) == 1
        assert store.get("42") is second
        assert store.get("42") is not first

    def test_delete_missing_key_is_noop(self):
        store = InMemorySessionStore()
        store.delete("nobody")
        assert store.get("nobody") is None
