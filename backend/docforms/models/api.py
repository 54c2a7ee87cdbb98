from pydantic import BaseModel, Field, ConfigDict
from pydantic.alias_generators import to_camel
from typing import Optional, Dict, Any, List, Literal
from datetime import datetime


class ApiModel(BaseModel):
    """Wire models speak camelCase; Python code uses snake_case"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


# Authentication

class LoginRequest(ApiModel):
    identifier: str = Field(..., min_length=3, max_length=255, description="E-mail or phone")
    password: str = Field(..., min_length=1, max_length=255)


class LoginResponse(ApiModel):
    access_token: str
    token_type: str = "bearer"
    expires_in: int  # seconds
    user_id: str
    name: Optional[str] = None


class RegisterRequest(ApiModel):
    email: str = Field(..., pattern=r"^[^\s@]+@[^\s@]+\.[^\s@]+$", max_length=255)
    password: str = Field(..., min_length=6, max_length=255)
    name: Optional[str] = Field(None, min_length=2, max_length=255)
    verification_code: str = Field(..., pattern=r"^[0-9]{6}$")


class RegisterResponse(ApiModel):
    user_id: str
    email: str
    name: Optional[str] = None
    message: str = "Регистрация успешна"


class UserProfileResponse(ApiModel):
    user_id: str
    email: Optional[str]
    phone: Optional[str]
    name: Optional[str]
    email_verified: Optional[datetime]
    created_at: datetime


# Verification codes

class SendCodeRequest(ApiModel):
    identifier: str = Field(..., min_length=1)
    type: Literal["email", "phone"]


class SendCodeResponse(ApiModel):
    message: str = "Код отправлен"
    expires_in: int


class VerifyCodeRequest(ApiModel):
    identifier: str = Field(..., min_length=1)
    code: str = Field(..., pattern=r"^[0-9]{6}$")


class VerifyCodeResponse(ApiModel):
    message: str = "Код подтвержден"
    type: str


# Templates

class CategoryResponse(ApiModel):
    id: str
    name: str
    slug: str
    icon: Optional[str] = None
    description: Optional[str] = None
    template_count: int = 0


class FormFieldResponse(ApiModel):
    field_name: str
    field_type: str
    label: str
    placeholder: Optional[str] = None
    step_number: int
    order: int
    is_required: bool
    validation_rules: Optional[Dict[str, Any]] = None
    options: Optional[str] = None


class TemplateSummary(ApiModel):
    id: str
    title: str
    description: str
    category: Optional[CategoryResponse] = None
    popularity_score: int
    applicant_type: str
    tags: List[str] = Field(default_factory=list)


class TemplateDetail(TemplateSummary):
    content_html: str
    total_steps: int
    form_fields: List[FormFieldResponse] = Field(default_factory=list)


class Pagination(ApiModel):
    page: int
    limit: int
    total: int
    total_pages: int


class TemplateListResponse(ApiModel):
    templates: List[TemplateSummary]
    pagination: Pagination


# Documents

class DocumentTemplateSummary(ApiModel):
    id: str
    title: str
    category_name: Optional[str] = None


class DocumentResponse(ApiModel):
    id: str
    title: str
    status: str
    created_at: datetime
    updated_at: datetime
    template: DocumentTemplateSummary
    file_url: Optional[str] = None
    filled_data: Dict[str, Any] = Field(default_factory=dict)


class CreateDocumentRequest(ApiModel):
    template_id: str
    answers: Dict[str, str] = Field(default_factory=dict)


class FieldErrorResponse(ApiModel):
    field_name: str
    reason: str
