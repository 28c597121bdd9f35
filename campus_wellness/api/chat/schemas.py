from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import Any, Dict, List, Literal, Optional
from uuid import UUID
from datetime import datetime

from campus_wellness.db.models.enums import EMOTION_TYPES

MAX_MESSAGE_LENGTH = 1000

EmotionLabel = Literal[EMOTION_TYPES]
SessionStatusLabel = Literal["active", "paused", "completed", "archived"]


class CamelModel(BaseModel):
    """JSON in and out uses camelCase keys; Python code uses snake_case."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


# -----------------------------
# 🧾 Message Schemas
# -----------------------------

class ChatMessageResponse(CamelModel):
    id: UUID
    role: str
    content: str
    emotion: Optional[str] = None
    confidence: Optional[int] = None
    created_at: datetime


class SessionMessagesResponse(CamelModel):
    success: bool = True
    messages: List[ChatMessageResponse] = []


# -----------------------------
# 📁 Session Schemas
# -----------------------------

class ChatSessionCreate(CamelModel):
    title: str = Field(min_length=1, max_length=100)
    context: Optional[Dict[str, Any]] = None


class ChatSessionCreated(CamelModel):
    success: bool = True
    session_id: UUID
    title: str


class ChatSessionUpdate(CamelModel):
    title: Optional[str] = Field(default=None, min_length=1, max_length=100)
    status: Optional[SessionStatusLabel] = None
    context: Optional[Dict[str, Any]] = None


class ChatSessionResponse(CamelModel):
    id: UUID
    title: str
    status: str
    context: Optional[Dict[str, Any]] = None
    created_at: datetime
    updated_at: datetime
    last_activity_at: datetime


# -----------------------------
# 📊 Analytics / Emotions
# -----------------------------

class SessionAnalyticsResponse(CamelModel):
    session_id: UUID
    message_count: int
    average_response_time: Optional[int] = None
    dominant_emotion: Optional[str] = None
    session_duration: Optional[int] = None
    user_satisfaction: Optional[int] = None


class EmotionTrackingRequest(CamelModel):
    emotion: EmotionLabel
    intensity: int = Field(ge=1, le=10)
    context: Optional[str] = None
    session_id: Optional[UUID] = None


class EmotionRecordResponse(CamelModel):
    id: UUID
    emotion: str
    intensity: int
    context: Optional[str] = None
    session_id: Optional[UUID] = None
    created_at: datetime


# -----------------------------
# 🚀 Turn Endpoint
# -----------------------------

class SendMessageRequest(CamelModel):
    content: str = Field(min_length=1, max_length=MAX_MESSAGE_LENGTH)
    session_id: UUID
    context: Optional[Dict[str, Any]] = None


class TurnAnalytics(CamelModel):
    response_time: int
    emotion_confidence: int


class SendMessageResponse(CamelModel):
    success: bool = True
    message: str
    emotion: str
    coping_strategies: List[str] = []
    session_id: UUID
    message_id: UUID
    analytics: TurnAnalytics
