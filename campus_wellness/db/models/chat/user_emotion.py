# campus_wellness/db/models/chat/user_emotion.py
from sqlalchemy import Column, Integer, Text, ForeignKey, DateTime, Uuid
from datetime import datetime
import uuid

from campus_wellness.db.session import Base
from campus_wellness.db.models.enums import EmotionType

class UserEmotion(Base):
    """Append-only trail of emotions detected in (or reported by) a user."""
    __tablename__ = "user_emotions"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    session_id = Column(Uuid, ForeignKey("chat_sessions.id", ondelete="SET NULL"), nullable=True)
    emotion = Column(EmotionType, nullable=False)
    intensity = Column(Integer, nullable=False)  # 1-10
    context = Column(Text, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow)
