"""
Loads the built-in template catalog into the database
"""

import json
import logging
from typing import Dict, List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from docforms.models.template import CategoryDB, TemplateDB, FormFieldDB
from docforms.templates.catalog import CATEGORIES, TEMPLATES
from docforms.templates.models import CategorySpec, TemplateSpec

logger = logging.getLogger(__name__)


class CatalogLoader:
    """Inserts catalog categories and templates that are missing from the database"""

    def __init__(self, categories: List[CategorySpec] = None, templates: List[TemplateSpec] = None):
        self.categories = CATEGORIES if categories is None else categories
        self.templates = TEMPLATES if templates is None else templates

    async def load(self, db: AsyncSession) -> int:
        """
        Seed the catalog

        Returns:
            Number of templates inserted
        """
        categories = await self._ensure_categories(db)

        result = await db.execute(select(TemplateDB.title))
        existing_titles = set(result.scalars().all())

        inserted = 0
        for spec in self.templates:
            if spec.title in existing_titles:
                continue
            category = categories.get(spec.category_slug)
            if category is None:
                logger.warning(f"Skipping template '{spec.title}': unknown category '{spec.category_slug}'")
                continue
            db.add(self._build_template(spec, category))
            inserted += 1

        await db.commit()
        if inserted:
            logger.info(f"Seeded {inserted} templates")
        return inserted

    async def _ensure_categories(self, db: AsyncSession) -> Dict[str, CategoryDB]:
        result = await db.execute(select(CategoryDB))
        by_slug = {category.slug: category for category in result.scalars().all()}

        for spec in self.categories:
            if spec.slug not in by_slug:
                category = CategoryDB(**spec.model_dump())
                db.add(category)
                by_slug[spec.slug] = category

        await db.flush()
        return by_slug

    def _build_template(self, spec: TemplateSpec, category: CategoryDB) -> TemplateDB:
        template = TemplateDB(
            title=spec.title,
            description=spec.description,
            category_id=category.id,
            content_html=spec.html,
            is_active=spec.is_active,
            popularity_score=spec.popularity_score,
            tags=",".join(spec.tags),
            applicant_type=spec.applicant_type,
        )
        template.form_fields = [
            FormFieldDB(
                field_name=field.field_name,
                field_type=field.field_type,
                label=field.label,
                placeholder=field.placeholder,
                step_number=field.step_number,
                order=field.order,
                is_required=field.is_required,
                validation_rules=json.dumps(field.validation_rules, ensure_ascii=False) if field.validation_rules else None,
                options=field.options,
            )
            for field in spec.ordered_fields()
        ]
        return template


# Global catalog loader instance
catalog_loader = CatalogLoader()
