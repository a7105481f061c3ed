"""Model for requests to be promoted to the writer role."""

from datetime import datetime

from sqlalchemy import DateTime, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from inkwell.db.session import Base
from inkwell.db.time import utcnow
from inkwell.models.states import ApplicationStatus


class WriterApplication(Base):
    """Application reviewed by an admin; approval promotes the applicant."""

    __tablename__ = "writer_application"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    applicant_id: Mapped[str] = mapped_column(String(32), nullable=False, index=True)
    applicant_name: Mapped[str] = mapped_column(String(100), nullable=False)
    applicant_email: Mapped[str] = mapped_column(String(320), nullable=False)
    motivation: Mapped[str] = mapped_column(Text, nullable=False)
    experience: Mapped[str] = mapped_column(Text, nullable=False)
    topics: Mapped[str] = mapped_column(Text, nullable=False)
    status: Mapped[str] = mapped_column(
        String(16),
        nullable=False,
        default=ApplicationStatus.PENDING,
    )
    decided_by: Mapped[str | None] = mapped_column(String(32), nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow)
