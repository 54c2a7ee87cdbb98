from pydantic import BaseModel, ConfigDict, Field, model_validator
from typing import Any, Dict, List, Literal, Optional


class FieldSpec(BaseModel):
    """One question of a template's form"""
    model_config = ConfigDict(extra="forbid")

    field_name: str = Field(..., pattern=r"^\w+$", description="Placeholder key in the HTML body")
    field_type: Literal["text", "textarea", "number", "date", "select"] = "text"
    label: str
    placeholder: Optional[str] = None
    step_number: int = Field(..., ge=1)
    order: int = Field(..., ge=0)
    is_required: bool = True
    validation_rules: Optional[Dict[str, Any]] = None
    options: Optional[str] = Field(default=None, description="Comma-separated choices for select fields")

    @model_validator(mode="after")
    def check_select_options(self):
        if self.field_type == "select" and not any(o.strip() for o in (self.options or "").split(",")):
            raise ValueError(f"select field '{self.field_name}' needs options")
        return self


class CategorySpec(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: str
    slug: str
    icon: Optional[str] = None
    description: Optional[str] = None
    order: int = 0


class TemplateSpec(BaseModel):
    """Complete document template definition"""
    model_config = ConfigDict(extra="forbid")

    title: str
    description: str
    category_slug: str
    html: str
    popularity_score: int = 0
    tags: List[str] = Field(default_factory=list)
    applicant_type: Literal["physical", "legal", "both"] = "physical"
    is_active: bool = True
    fields: List[FieldSpec]

    @model_validator(mode="after")
    def check_field_order(self):
        """(step_number, order) pairs and field names must be unique"""
        positions = [(f.step_number, f.order) for f in self.fields]
        if len(set(positions)) != len(positions):
            raise ValueError(f"duplicate (step, order) position in template '{self.title}'")
        names = [f.field_name for f in self.fields]
        if len(set(names)) != len(names):
            raise ValueError(f"duplicate field name in template '{self.title}'")
        return self

    def ordered_fields(self) -> List[FieldSpec]:
        return sorted(self.fields, key=lambda f: (f.step_number, f.order))
