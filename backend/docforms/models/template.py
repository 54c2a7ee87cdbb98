from sqlalchemy import Column, String, Boolean, Integer, Text, ForeignKey, Index, UniqueConstraint
from sqlalchemy.orm import relationship

from .base import TimestampedModel


class CategoryDB(TimestampedModel):
    __tablename__ = "categories"

    name = Column(String(255), nullable=False)
    slug = Column(String(100), unique=True, nullable=False, index=True)
    icon = Column(String(100), nullable=True)
    description = Column(Text, nullable=True)
    order = Column(Integer, default=0, nullable=False)

    # Relationships
    templates = relationship("TemplateDB", back_populates="category")


class TemplateDB(TimestampedModel):
    __tablename__ = "templates"

    title = Column(String(500), nullable=False)
    description = Column(Text, nullable=False, default="")
    category_id = Column(String(36), ForeignKey("categories.id"), nullable=False)
    content_html = Column(Text, nullable=False, default="")
    is_active = Column(Boolean, default=True, nullable=False)
    popularity_score = Column(Integer, default=0, nullable=False)
    tags = Column(Text, nullable=False, default="")  # comma-separated
    applicant_type = Column(String(20), nullable=False, default="both")  # 'physical', 'legal', 'both'

    # Relationships
    category = relationship("CategoryDB", back_populates="templates", lazy="selectin")
    form_fields = relationship(
        "FormFieldDB",
        back_populates="template",
        cascade="all, delete-orphan",
        order_by="[FormFieldDB.step_number, FormFieldDB.order]",
        lazy="selectin",
    )
    documents = relationship("DocumentDB", back_populates="template")

    __table_args__ = (
        Index("idx_templates_category_active", "category_id", "is_active"),
        Index("idx_templates_popularity", "popularity_score"),
    )

    @property
    def tag_list(self):
        return [tag.strip() for tag in (self.tags or "").split(",") if tag.strip()]


class FormFieldDB(TimestampedModel):
    __tablename__ = "form_fields"

    template_id = Column(String(36), ForeignKey("templates.id"), nullable=False)
    field_name = Column(String(100), nullable=False)
    field_type = Column(String(20), nullable=False)  # 'text', 'textarea', 'number', 'date', 'select'
    label = Column(String(500), nullable=False)
    placeholder = Column(String(500), nullable=True)
    step_number = Column(Integer, nullable=False)
    order = Column(Integer, nullable=False)
    is_required = Column(Boolean, default=True, nullable=False)
    validation_rules = Column(Text, nullable=True)  # JSON: minLength | maxLength | pattern | min | max
    options = Column(Text, nullable=True)  # comma-separated, select only

    # Relationships
    template = relationship("TemplateDB", back_populates="form_fields")

    __table_args__ = (
        UniqueConstraint("template_id", "field_name", name="uq_form_field_name"),
        UniqueConstraint("template_id", "step_number", "order", name="uq_form_field_position"),
    )
