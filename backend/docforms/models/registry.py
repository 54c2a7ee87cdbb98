"""Imports every mapped model so relationship strings resolve"""
from docforms.models.user import UserDB, AuthSessionDB, VerificationCodeDB  # noqa: F401
from docforms.models.template import CategoryDB, TemplateDB, FormFieldDB  # noqa: F401
from docforms.models.document import DocumentDB  # noqa: F401
