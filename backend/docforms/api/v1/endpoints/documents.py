"""Document API endpoints"""
import logging
from typing import List, Literal, Optional
from urllib.parse import quote
from fastapi import APIRouter, Depends, HTTPException, Query, status
from fastapi.responses import HTMLResponse, Response
from sqlalchemy.ext.asyncio import AsyncSession

from ....database import get_db
from ....core.deps import get_current_user, get_pdf_renderer
from ....core.exceptions import FieldValidationError, NotFoundError, RenderingFailedError
from ....models.api import CreateDocumentRequest, DocumentResponse, DocumentTemplateSummary
from ....models.document import DocumentDB
from ....models.user import UserDB
from ....repositories.template import TemplateRepository
from ....services.documents import DocumentRecordManager
from ....services.renderer import PdfRenderer, render_template_document

logger = logging.getLogger(__name__)

router = APIRouter()


def _to_response(document: DocumentDB) -> DocumentResponse:
    template = document.template
    return DocumentResponse(
        id=document.id,
        title=document.title,
        status=document.status,
        created_at=document.created_at,
        updated_at=document.updated_at,
        template=DocumentTemplateSummary(
            id=template.id,
            title=template.title,
            category_name=template.category.name if template.category else None
        ),
        file_url=document.file_url,
        filled_data=document.filled_data or {}
    )


async def _load_generated(document_id: str, user: UserDB, db: AsyncSession) -> DocumentDB:
    manager = DocumentRecordManager(db)
    try:
        document = await manager.get_for_user(document_id, user.id)
    except NotFoundError:
        raise HTTPException(status_code=404, detail="Документ не найден")
    if not manager.is_generated(document):
        raise HTTPException(status_code=409, detail="Документ еще не заполнен")
    return document


@router.get("", response_model=List[DocumentResponse])
@router.get("/", response_model=List[DocumentResponse])
async def list_documents(
    status_filter: Optional[Literal["draft", "generated"]] = Query(None, alias="status"),
    limit: int = Query(50, ge=1, le=100),
    current_user: UserDB = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """List user's documents, most recently updated first"""
    documents = await DocumentRecordManager(db).list_for_user(current_user.id, status=status_filter, limit=limit)
    return [_to_response(d) for d in documents]


@router.post("", response_model=DocumentResponse, status_code=status.HTTP_201_CREATED)
@router.post("/", response_model=DocumentResponse, status_code=status.HTTP_201_CREATED)
async def create_document(
    request: CreateDocumentRequest,
    current_user: UserDB = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """Validate a submitted web form and store it as a generated document"""
    template = await TemplateRepository().get_active(db, request.template_id)
    if not template:
        raise HTTPException(status_code=404, detail="Шаблон не найден")

    try:
        document = await DocumentRecordManager(db).create_generated(current_user.id, template, request.answers)
    except FieldValidationError as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail={"fieldName": e.field_name, "reason": e.reason}
        )

    return _to_response(document)


@router.get("/{document_id}", response_model=DocumentResponse)
async def get_document(
    document_id: str,
    current_user: UserDB = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    try:
        document = await DocumentRecordManager(db).get_for_user(document_id, current_user.id)
    except NotFoundError:
        raise HTTPException(status_code=404, detail="Документ не найден")
    return _to_response(document)


@router.get("/{document_id}/html", response_class=HTMLResponse)
async def get_document_html(
    document_id: str,
    current_user: UserDB = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """Printable HTML page with the answers substituted"""
    document = await _load_generated(document_id, current_user, db)
    return HTMLResponse(render_template_document(document.template, document.filled_data))


@router.get("/{document_id}/pdf")
async def get_document_pdf(
    document_id: str,
    current_user: UserDB = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
    renderer: PdfRenderer = Depends(get_pdf_renderer)
):
    document = await _load_generated(document_id, current_user, db)
    try:
        pdf = await renderer.render_pdf(render_template_document(document.template, document.filled_data))
    except RenderingFailedError:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Не удалось сформировать PDF. Попробуйте позже."
        )

    filename = quote(f"{document.title}.pdf")
    return Response(
        content=pdf,
        media_type="application/pdf",
        headers={"Content-Disposition": f"attachment; filename*=UTF-8''{filename}"}
    )
