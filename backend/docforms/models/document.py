from sqlalchemy import Column, String, Text, ForeignKey, Index
from sqlalchemy.orm import relationship

from .base import TimestampedModel, JSONField

DOCUMENT_STATUS_DRAFT = "draft"
DOCUMENT_STATUS_GENERATED = "generated"


class DocumentDB(TimestampedModel):
    __tablename__ = "documents"

    user_id = Column(String(36), ForeignKey("users.id"), nullable=False)
    template_id = Column(String(36), ForeignKey("templates.id"), nullable=False)
    title = Column(String(500), nullable=False)
    status = Column(String(20), nullable=False, default=DOCUMENT_STATUS_DRAFT)
    filled_data = Column(JSONField, nullable=False, default=dict)
    file_url = Column(Text, nullable=True)

    # Relationships
    user = relationship("UserDB", back_populates="documents")
    template = relationship("TemplateDB", back_populates="documents", lazy="selectin")

    # Indexes
    __table_args__ = (
        Index("idx_documents_user_updated", "user_id", "updated_at"),
        Index("idx_documents_user_status", "user_id", "status"),
    )
