from typing import Optional, List, Tuple
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, func, or_, desc

from .base import BaseRepository
from docforms.models.template import CategoryDB, TemplateDB

SORT_POPULARITY = "popularity"
SORT_NAME = "name"


class TemplateRepository(BaseRepository[TemplateDB]):
    """Read side of the template catalog"""

    def __init__(self):
        super().__init__(TemplateDB)

    async def get_active(self, db: AsyncSession, template_id: str) -> Optional[TemplateDB]:
        """Active template with its category and ordered form fields"""
        result = await db.execute(
            select(TemplateDB).where(TemplateDB.id == template_id, TemplateDB.is_active == True)
        )
        return result.scalar_one_or_none()

    async def search(
        self,
        db: AsyncSession,
        category_slug: Optional[str] = None,
        applicant_type: Optional[str] = None,
        search: Optional[str] = None,
        sort: str = SORT_POPULARITY,
        limit: int = 12,
        offset: int = 0
    ) -> Tuple[List[TemplateDB], int]:
        """Filtered page of active templates plus the total match count"""
        conditions = [TemplateDB.is_active == True]

        if category_slug:
            conditions.append(TemplateDB.category.has(CategoryDB.slug == category_slug))

        # 'both' templates serve every applicant type
        if applicant_type and applicant_type != "both":
            conditions.append(TemplateDB.applicant_type.in_([applicant_type, "both"]))

        if search:
            pattern = f"%{search}%"
            conditions.append(or_(TemplateDB.title.ilike(pattern), TemplateDB.description.ilike(pattern)))

        if sort == SORT_NAME:
            order_by = [TemplateDB.title.asc()]
        else:
            order_by = [desc(TemplateDB.popularity_score), TemplateDB.title.asc()]

        total = (await db.execute(select(func.count(TemplateDB.id)).where(*conditions))).scalar_one()
        result = await db.execute(
            select(TemplateDB).where(*conditions).order_by(*order_by).limit(limit).offset(offset)
        )
        return result.scalars().all(), total

    async def list_by_category(self, db: AsyncSession, category_slug: str) -> List[TemplateDB]:
        """Active templates of one category, most popular first"""
        result = await db.execute(
            select(TemplateDB)
            .join(CategoryDB)
            .where(CategoryDB.slug == category_slug, TemplateDB.is_active == True)
            .order_by(desc(TemplateDB.popularity_score), TemplateDB.title.asc())
        )
        return result.scalars().all()


class CategoryRepository(BaseRepository[CategoryDB]):
    def __init__(self):
        super().__init__(CategoryDB)

    async def get_by_slug(self, db: AsyncSession, slug: str) -> Optional[CategoryDB]:
        result = await db.execute(select(CategoryDB).where(CategoryDB.slug == slug))
        return result.scalar_one_or_none()

    async def list_with_active_counts(self, db: AsyncSession) -> List[Tuple[CategoryDB, int]]:
        """Categories that have at least one active template, in display order"""
        template_count = func.count(TemplateDB.id).label("template_count")
        result = await db.execute(
            select(CategoryDB, template_count)
            .join(TemplateDB, TemplateDB.category_id == CategoryDB.id)
            .where(TemplateDB.is_active == True)
            .group_by(CategoryDB.id)
            .order_by(CategoryDB.order)
        )
        return [(category, count) for category, count in result.all()]
