import logging
from dataclasses import dataclass
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from docforms.core.exceptions import NotFoundError
from docforms.forms.session import FormSession, SessionStore, form_sessions
from docforms.forms.validation import FieldDefinition, Rejected, ValidationResult
from docforms.models.document import DocumentDB
from docforms.repositories.template import TemplateRepository
from docforms.services.documents import DocumentRecordManager

logger = logging.getLogger(__name__)


@dataclass
class FormTurn:
    """What the transport should tell the user after one interaction"""
    session: FormSession
    next_field: Optional[FieldDefinition] = None
    rejection: Optional[str] = None
    document: Optional[DocumentDB] = None
    template_title: Optional[str] = None

    @property
    def completed(self) -> bool:
        return self.document is not None


class FormFillingService:
    """Drives form sessions and keeps their draft documents in step"""

    def __init__(self, db: AsyncSession, store: SessionStore = None):
        self.db = db
        self.store = store if store is not None else form_sessions
        self.template_repo = TemplateRepository()
        self.documents = DocumentRecordManager(db)

    def get_session(self, user_key: str) -> Optional[FormSession]:
        return self.store.get(user_key)

    async def start(self, user_key: str, user_id: str, template_id: str) -> FormTurn:
        template = await self.template_repo.get_active(self.db, template_id)
        if template is None:
            raise NotFoundError(f"Template {template_id} not found")

        fields = [FieldDefinition.from_model(row) for row in template.form_fields]
        if not fields:
            raise NotFoundError(f"Template {template_id} has no form fields")

        previous = self.store.get(user_key)
        if previous is not None:
            logger.warning(
                f"Replacing active form session of {user_key}: discarding draft {previous.document_id}"
            )
            self.store.delete(user_key)
            await self.documents.discard_draft(previous.document_id)

        document = await self.documents.create_draft(user_id, template)
        session = self.store.create(
            FormSession.start(
                user_key=user_key,
                user_id=user_id,
                template_id=template.id,
                document_id=document.id,
                fields=fields,
            )
        )
        return FormTurn(session=session, next_field=session.current_field(), template_title=template.title)

    async def answer(self, user_key: str, raw: str) -> FormTurn:
        session = self._require(user_key)
        return await self._after(session, session.submit(raw))

    async def choose(self, user_key: str, option_index: int) -> FormTurn:
        session = self._require(user_key)
        return await self._after(session, session.choose(option_index))

    async def cancel(self, user_key: str) -> bool:
        """Abort the user's session and delete its draft; False if there was none"""
        session = self.store.get(user_key)
        if session is None:
            return False
        session.cancel()
        self.store.delete(user_key)
        await self.documents.discard_draft(session.document_id)
        logger.info(f"Cancelled form session of {user_key} after {len(session.answers)} answers")
        return True

    def _require(self, user_key: str) -> FormSession:
        session = self.store.get(user_key)
        if session is None:
            raise NotFoundError(f"No active form session for {user_key}")
        return session

    async def _after(self, session: FormSession, result: ValidationResult) -> FormTurn:
        if isinstance(result, Rejected):
            return FormTurn(session=session, next_field=session.current_field(), rejection=result.reason)

        if not session.is_complete:
            self.store.update(session)
            return FormTurn(session=session, next_field=session.current_field())

        # The session is over whether or not finalizing succeeds
        self.store.delete(session.user_key)
        document = await self.documents.finalize(session.document_id, session.answers)
        return FormTurn(session=session, document=document)
