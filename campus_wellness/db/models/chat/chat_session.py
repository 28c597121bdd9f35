# campus_wellness/db/models/chat/chat_session.py
from sqlalchemy import Column, String, DateTime, ForeignKey, Integer, JSON, Uuid
from sqlalchemy.orm import relationship
from datetime import datetime
import uuid

from campus_wellness.db.session import Base
from campus_wellness.db.models.enums import SessionStatus

class ChatSession(Base):
    __tablename__ = "chat_sessions"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    title = Column(String(100), nullable=False)
    status = Column(SessionStatus, nullable=False, default="active")
    context = Column(JSON, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    last_activity_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    user = relationship("User", back_populates="chat_sessions")
    messages = relationship(
        "ChatMessage",
        back_populates="session",
        cascade="all, delete-orphan",
        order_by="ChatMessage.created_at",
    )
    analytics = relationship("ChatAnalytics", back_populates="session", uselist=False, cascade="all, delete-orphan")
