from typing import Optional, List, Dict, Any
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, desc

from .base import BaseRepository
from docforms.models.document import DocumentDB, DOCUMENT_STATUS_DRAFT, DOCUMENT_STATUS_GENERATED


class DocumentRepository(BaseRepository[DocumentDB]):
    def __init__(self):
        super().__init__(DocumentDB)

    async def create_draft(self, db: AsyncSession, user_id: str, template_id: str, title: str) -> DocumentDB:
        """Create new draft document with no answers"""
        return await self.add(db, DocumentDB(
            user_id=user_id,
            template_id=template_id,
            title=title,
            status=DOCUMENT_STATUS_DRAFT,
            filled_data={}
        ))

    async def mark_generated(self, db: AsyncSession, document_id: str, filled_data: Dict[str, Any]) -> bool:
        """
        Flip a draft to generated and store its answers

        Returns:
            False when no draft with that id exists (missing or already generated)
        """
        flipped = await self.update_where(
            db,
            DocumentDB.id == document_id,
            DocumentDB.status == DOCUMENT_STATUS_DRAFT,
            status=DOCUMENT_STATUS_GENERATED,
            filled_data=filled_data
        )
        return flipped > 0

    async def get_for_user(self, db: AsyncSession, document_id: str, user_id: str) -> Optional[DocumentDB]:
        result = await db.execute(
            select(DocumentDB)
            .where(DocumentDB.id == document_id, DocumentDB.user_id == user_id)
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    async def list_for_user(
        self,
        db: AsyncSession,
        user_id: str,
        status: Optional[str] = None,
        limit: int = 50,
        offset: int = 0
    ) -> List[DocumentDB]:
        """Get user's documents, most recently updated first"""
        query = select(DocumentDB).where(DocumentDB.user_id == user_id)
        if status:
            query = query.where(DocumentDB.status == status)
        result = await db.execute(
            query.order_by(desc(DocumentDB.updated_at)).limit(limit).offset(offset)
        )
        return result.scalars().all()
