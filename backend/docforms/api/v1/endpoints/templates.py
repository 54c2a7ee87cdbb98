"""Template catalog API endpoints"""
import math
from typing import List, Literal, Optional
from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.ext.asyncio import AsyncSession

from ....database import get_db
from ....core.config import settings
from ....forms.validation import parse_rules
from ....models.api import (
    CategoryResponse, FormFieldResponse, Pagination,
    TemplateDetail, TemplateListResponse, TemplateSummary
)
from ....models.template import TemplateDB
from ....repositories.template import CategoryRepository, TemplateRepository, SORT_NAME, SORT_POPULARITY


router = APIRouter()


def _summary(template: TemplateDB) -> TemplateSummary:
    return TemplateSummary(
        id=template.id,
        title=template.title,
        description=template.description,
        category=CategoryResponse.model_validate(template.category) if template.category else None,
        popularity_score=template.popularity_score,
        applicant_type=template.applicant_type,
        tags=template.tag_list
    )


@router.get("", response_model=TemplateListResponse)
@router.get("/", response_model=TemplateListResponse)
async def list_templates(
    category: Optional[str] = Query(None, description="Category slug"),
    type: Optional[Literal["physical", "legal", "both"]] = Query(None, description="Applicant type"),
    search: Optional[str] = Query(None, max_length=200),
    sort: Literal["popularity", "name"] = Query(SORT_POPULARITY),
    page: int = Query(1, ge=1),
    db: AsyncSession = Depends(get_db)
):
    """Paginated list of active templates"""
    limit = settings.TEMPLATES_PAGE_SIZE
    templates, total = await TemplateRepository().search(
        db,
        category_slug=category,
        applicant_type=type,
        search=search.strip() if search else None,
        sort=SORT_NAME if sort == SORT_NAME else SORT_POPULARITY,
        limit=limit,
        offset=(page - 1) * limit
    )

    return TemplateListResponse(
        templates=[_summary(t) for t in templates],
        pagination=Pagination(page=page, limit=limit, total=total, total_pages=math.ceil(total / limit))
    )


@router.get("/categories", response_model=List[CategoryResponse])
async def list_categories(db: AsyncSession = Depends(get_db)):
    """Categories that have active templates, with their counts"""
    rows = await CategoryRepository().list_with_active_counts(db)
    return [
        CategoryResponse(
            id=category.id,
            name=category.name,
            slug=category.slug,
            icon=category.icon,
            description=category.description,
            template_count=count
        )
        for category, count in rows
    ]


@router.get("/{template_id}", response_model=TemplateDetail)
async def get_template(template_id: str, db: AsyncSession = Depends(get_db)):
    """Template with its form fields in step order"""
    template = await TemplateRepository().get_active(db, template_id)
    if not template:
        raise HTTPException(status_code=404, detail="Шаблон не найден")

    summary = _summary(template)
    return TemplateDetail(
        **summary.model_dump(),
        content_html=template.content_html,
        total_steps=len({f.step_number for f in template.form_fields}),
        form_fields=[
            FormFieldResponse(
                field_name=f.field_name,
                field_type=f.field_type,
                label=f.label,
                placeholder=f.placeholder,
                step_number=f.step_number,
                order=f.order,
                is_required=f.is_required,
                validation_rules=parse_rules(f.validation_rules, f.field_name) or None,
                options=f.options
            )
            for f in template.form_fields
        ]
    )
