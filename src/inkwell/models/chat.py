"""Models for the global chat room and abuse reports against it."""

from datetime import datetime

from sqlalchemy import DateTime, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from inkwell.db.session import Base
from inkwell.db.time import utcnow
from inkwell.models.states import ReportStatus


class ChatMessage(Base):
    """Message posted to the single global chat room."""

    __tablename__ = "chat_message"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    body: Mapped[str] = mapped_column(Text, nullable=False)
    author_id: Mapped[str] = mapped_column(String(32), nullable=False)
    author_name: Mapped[str] = mapped_column(String(100), nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow, index=True)


class Report(Base):
    """Abuse report against a chat message.

    The message content and the reported user's details are copied in so the
    report stays readable after the message is deleted.
    """

    __tablename__ = "report"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    # No foreign key: the message may be deleted while the report lives on.
    message_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    message_content: Mapped[str] = mapped_column(Text, nullable=False)
    reported_user_id: Mapped[str] = mapped_column(String(32), nullable=False)
    reported_user_name: Mapped[str] = mapped_column(String(100), nullable=False)
    reported_user_email: Mapped[str | None] = mapped_column(String(320), nullable=True)
    reporter_id: Mapped[str] = mapped_column(String(32), nullable=False)
    reporter_name: Mapped[str] = mapped_column(String(100), nullable=False)
    reason: Mapped[str] = mapped_column(Text, nullable=False)
    status: Mapped[str] = mapped_column(String(16), nullable=False, default=ReportStatus.PENDING)
    resolved_by: Mapped[str | None] = mapped_column(String(32), nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow)
