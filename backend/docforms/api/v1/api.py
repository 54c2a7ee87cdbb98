from fastapi import APIRouter

from docforms.api.v1.endpoints import auth, bot, documents, templates, verification

api_router = APIRouter()

api_router.include_router(auth.router, prefix="/auth", tags=["authentication"])
api_router.include_router(verification.router, prefix="/verification", tags=["verification"])
api_router.include_router(templates.router, prefix="/templates", tags=["templates"])
api_router.include_router(documents.router, prefix="/documents", tags=["documents"])
api_router.include_router(bot.router, prefix="/bot", tags=["bot"])
