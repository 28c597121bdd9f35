# campus_wellness/db/models/chat/chat_analytics.py
from sqlalchemy import Column, Integer, ForeignKey, DateTime, Uuid
from sqlalchemy.orm import relationship
from datetime import datetime
import uuid

from campus_wellness.db.session import Base
from campus_wellness.db.models.enums import EmotionType

class ChatAnalytics(Base):
    __tablename__ = "chat_analytics"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    session_id = Column(Uuid, ForeignKey("chat_sessions.id", ondelete="CASCADE"), nullable=False, unique=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    message_count = Column(Integer, nullable=False, default=0)
    average_response_time = Column(Integer, nullable=True)  # ms, last turn only
    dominant_emotion = Column(EmotionType, nullable=True)   # last turn's emotion
    session_duration = Column(Integer, nullable=True)       # seconds
    user_satisfaction = Column(Integer, nullable=True)      # 1-5
    created_at = Column(DateTime, default=datetime.utcnow)

    session = relationship("ChatSession", back_populates="analytics")
