"""
Conversational form session: walks a template's fields step by step.

A session holds its own frozen copy of the field list, so edits to the
template after the session starts never change what the user is asked.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Protocol, Tuple

from docforms.forms.validation import Accepted, FieldDefinition, ValidationResult, choose_option, validate


class SessionState(str, Enum):
    AWAITING_ANSWER = "awaiting_answer"
    COMPLETE = "complete"
    CANCELLED = "cancelled"


class SessionClosedError(RuntimeError):
    """Raised when input arrives for a session that is no longer awaiting answers"""


@dataclass
class FormSession:
    user_key: str
    user_id: str
    template_id: str
    document_id: str
    fields: Tuple[FieldDefinition, ...]
    current_step: int = 0
    current_field_index: int = 0
    answers: Dict[str, Any] = field(default_factory=dict)
    state: SessionState = SessionState.AWAITING_ANSWER

    @classmethod
    def start(cls, user_key: str, user_id: str, template_id: str, document_id: str, fields) -> "FormSession":
        ordered = tuple(sorted(fields, key=lambda f: (f.step_number, f.order)))
        if not ordered:
            raise ValueError("template has no form fields")
        return cls(
            user_key=user_key,
            user_id=user_id,
            template_id=template_id,
            document_id=document_id,
            fields=ordered,
            current_step=ordered[0].step_number,
        )

    @property
    def steps(self) -> Tuple[int, ...]:
        return tuple(sorted({f.step_number for f in self.fields}))

    @property
    def total_steps(self) -> int:
        return len(self.steps)

    @property
    def step_position(self) -> int:
        """1-based position of the current step among the template's steps"""
        return self.steps.index(self.current_step) + 1

    @property
    def is_complete(self) -> bool:
        return self.state is SessionState.COMPLETE

    def step_fields(self, step: Optional[int] = None) -> Tuple[FieldDefinition, ...]:
        step = self.current_step if step is None else step
        return tuple(f for f in self.fields if f.step_number == step)

    def current_field(self) -> Optional[FieldDefinition]:
        if self.state is not SessionState.AWAITING_ANSWER:
            return None
        return self.step_fields()[self.current_field_index]

    def submit(self, raw: str) -> ValidationResult:
        """Validate free-text input for the current field and advance on success"""
        return self._apply(validate(self._require_field(), raw))

    def choose(self, index: int) -> ValidationResult:
        """Answer the current select field by option index"""
        return self._apply(choose_option(self._require_field(), index))

    def cancel(self) -> None:
        self.state = SessionState.CANCELLED

    def _require_field(self) -> FieldDefinition:
        current = self.current_field()
        if current is None:
            raise SessionClosedError(f"session for {self.user_key} is {self.state.value}")
        return current

    def _apply(self, result: ValidationResult) -> ValidationResult:
        if isinstance(result, Accepted):
            self.answers[self._require_field().field_name] = result.value
            self._advance()
        return result

    def _advance(self) -> None:
        self.current_field_index += 1
        if self.current_field_index < len(self.step_fields()):
            return

        later_steps = [step for step in self.steps if step > self.current_step]
        if later_steps:
            self.current_step = later_steps[0]
            self.current_field_index = 0
        else:
            self.state = SessionState.COMPLETE


class SessionStore(Protocol):
    """Keyed storage for in-flight sessions; one session per user key"""

    def get(self, user_key: str) -> Optional[FormSession]: ...

    def create(self, session: FormSession) -> FormSession: ...

    def update(self, session: FormSession) -> None: ...

    def delete(self, user_key: str) -> None: ...


class InMemorySessionStore:
    """Process-local store; sessions are lost on restart"""

    def __init__(self):
        self._sessions: Dict[str, FormSession] = {}

    def get(self, user_key: str) -> Optional[FormSession]:
        return self._sessions.get(user_key)

    def create(self, session: FormSession) -> FormSession:
        self._sessions[session.user_key] = session
        return session

    def update(self, session: FormSession) -> None:
        self._sessions[session.user_key] = session

    def delete(self, user_key: str) -> None:
        self._sessions.pop(user_key, None)

    def __len__(self) -> int:
        return len(self._sessions)


# Global session store instance
form_sessions = InMemorySessionStore()
