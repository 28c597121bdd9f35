# campus_wellness/db/models/chat/response_template.py
from sqlalchemy import Boolean, Column, String, Text, Integer, DateTime, JSON, Uuid
from datetime import datetime
import uuid

from campus_wellness.db.session import Base
from campus_wellness.db.models.enums import EmotionType

class ResponseTemplate(Base):
    __tablename__ = "ai_response_templates"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    emotion = Column(EmotionType, nullable=False, index=True)
    response_type = Column(String(20), nullable=False)  # comfort / guidance / celebration / coping
    content = Column(Text, nullable=False)
    coping_strategies = Column(JSON, nullable=True)
    is_active = Column(Boolean, nullable=False, default=True)
    priority = Column(Integer, nullable=False, default=1)  # higher is used first
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
