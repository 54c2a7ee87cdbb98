import logging
from typing import Any, Dict, List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from docforms.core.exceptions import FieldValidationError, NotFoundError, StateConflictError
from docforms.forms.validation import FieldDefinition, Rejected, validate
from docforms.models.document import DocumentDB, DOCUMENT_STATUS_GENERATED
from docforms.models.template import TemplateDB
from docforms.repositories.document import DocumentRepository

logger = logging.getLogger(__name__)


class DocumentRecordManager:
    """All writes to a document go through create / finalize / discard"""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.document_repo = DocumentRepository()

    async def create_draft(self, user_id: str, template: TemplateDB) -> DocumentDB:
        document = await self.document_repo.create_draft(
            self.db, user_id=user_id, template_id=template.id, title=template.title
        )
        logger.info(f"Created draft document {document.id} for user {user_id} (template {template.id})")
        return document

    async def finalize(self, document_id: str, answers: Dict[str, Any]) -> DocumentDB:
        """Freeze answers onto a draft; a document can be finalized once"""
        if await self.document_repo.mark_generated(self.db, document_id, dict(answers)):
            logger.info(f"Finalized document {document_id} with {len(answers)} answers")
            return await self.document_repo.get_by_id(self.db, document_id)

        existing = await self.document_repo.get_by_id(self.db, document_id)
        if existing is None:
            raise NotFoundError(f"Document {document_id} not found")
        raise StateConflictError(f"Document {document_id} is already {existing.status}")

    async def discard_draft(self, document_id: str) -> bool:
        deleted = await self.document_repo.delete(self.db, document_id)
        if not deleted:
            logger.warning(f"Draft document {document_id} was already gone when discarding")
        return deleted

    async def create_generated(self, user_id: str, template: TemplateDB, raw_answers: Dict[str, str]) -> DocumentDB:
        """
        Web form submit: validate every field, then store a generated document

        Raises:
            FieldValidationError: first field whose answer is rejected
        """
        answers = {}
        for row in template.form_fields:
            definition = FieldDefinition.from_model(row)
            result = validate(definition, raw_answers.get(definition.field_name, ""))
            if isinstance(result, Rejected):
                raise FieldValidationError(definition.field_name, result.reason)
            answers[definition.field_name] = result.value

        document = await self.create_draft(user_id, template)
        return await self.finalize(document.id, answers)

    async def get_for_user(self, document_id: str, user_id: str) -> DocumentDB:
        document = await self.document_repo.get_for_user(self.db, document_id, user_id)
        if document is None:
            raise NotFoundError(f"Document {document_id} not found")
        return document

    async def list_for_user(self, user_id: str, status: Optional[str] = None, limit: int = 50) -> List[DocumentDB]:
        return await self.document_repo.list_for_user(self.db, user_id, status=status, limit=limit)

    @staticmethod
    def is_generated(document: DocumentDB) -> bool:
        return document.status == DOCUMENT_STATUS_GENERATED
