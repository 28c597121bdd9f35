# campus_wellness/db/models/chat/chat_message.py
from sqlalchemy import Column, Integer, Text, ForeignKey, DateTime, Uuid
from sqlalchemy.orm import relationship
from datetime import datetime
import uuid

from campus_wellness.db.session import Base
from campus_wellness.db.models.enums import EmotionType, MessageRole

class ChatMessage(Base):
    __tablename__ = "chat_messages"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    session_id = Column(Uuid, ForeignKey("chat_sessions.id", ondelete="CASCADE"), nullable=False, index=True)
    role = Column(MessageRole, nullable=False)
    content = Column(Text, nullable=False)
    emotion = Column(EmotionType, nullable=True)
    confidence = Column(Integer, nullable=True)  # 0-100, set together with emotion
    created_at = Column(DateTime, default=datetime.utcnow)

    session = relationship("ChatSession", back_populates="messages")
