# campus_wellness/api/chat/services.py

import logging
import time
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional
from uuid import UUID

from sqlalchemy.orm import Session

from campus_wellness.db.models.chat.chat_session import ChatSession
from campus_wellness.db.models.chat.chat_message import ChatMessage
from campus_wellness.db.models.chat.chat_analytics import ChatAnalytics
from campus_wellness.db.models.chat.user_emotion import UserEmotion
from campus_wellness.db.models.user import User
from campus_wellness.api.chat import responder, schemas
from campus_wellness.api.chat.emotion import detect_emotion_with_confidence, intensity_from_confidence

logger = logging.getLogger(__name__)

SESSION_LIST_LIMIT = 50
EMOTION_CONTEXT_LENGTH = 100


@dataclass
class TurnResult:
    reply_text: str
    emotion: str
    confidence: int
    coping_strategies: List[str] = field(default_factory=list)
    session_id: Optional[UUID] = None
    message_id: Optional[UUID] = None
    response_time: int = 0  # ms


# ---------------------------------------------------
# 🛠️ Chat Session Management
# ---------------------------------------------------

def create_chat_session(db: Session, user_id: int, session_data: schemas.ChatSessionCreate) -> ChatSession:
    """Create a new chat session together with its empty analytics row."""
    chat_session = ChatSession(
        user_id=user_id,
        title=session_data.title,
        context=session_data.context or {},
    )
    db.add(chat_session)
    db.flush()

    db.add(ChatAnalytics(
        session_id=chat_session.id,
        user_id=user_id,
        message_count=0,
        average_response_time=0,
        session_duration=0,
    ))
    db.commit()
    db.refresh(chat_session)
    return chat_session


def get_chat_session(db: Session, session_id: UUID) -> Optional[ChatSession]:
    """Fetch a chat session by ID."""
    return db.query(ChatSession).filter(ChatSession.id == session_id).first()


def get_owned_session(db: Session, session_id: UUID, user_id: int) -> Optional[ChatSession]:
    """Fetch a session only if it belongs to the user."""
    session = get_chat_session(db, session_id)
    if not session or session.user_id != user_id:
        return None
    return session


def list_user_chat_sessions(db: Session, user_id: int, limit: int = SESSION_LIST_LIMIT) -> list[ChatSession]:
    """Most recently active sessions for a user."""
    return db.query(ChatSession)\
             .filter(ChatSession.user_id == user_id)\
             .order_by(ChatSession.last_activity_at.desc())\
             .limit(limit)\
             .all()


def update_chat_session(db: Session, chat_session: ChatSession, update_data: schemas.ChatSessionUpdate) -> ChatSession:
    """Update title, status or context of a session."""
    for key, value in update_data.model_dump(exclude_unset=True, exclude_none=True).items():
        setattr(chat_session, key, value)
    chat_session.updated_at = datetime.utcnow()
    db.commit()
    db.refresh(chat_session)
    return chat_session


# ---------------------------------------------------
# 🛠️ Messages, Emotions, Analytics
# ---------------------------------------------------

def append_message(
    db: Session,
    session_id: UUID,
    role: str,
    content: str,
    emotion: Optional[str] = None,
    confidence: Optional[int] = None,
) -> ChatMessage:
    """Store a message and bump the session's activity timestamp."""
    if (emotion is None) != (confidence is None):
        raise ValueError("emotion and confidence must be provided together")

    chat_message = ChatMessage(
        session_id=session_id,
        role=role,
        content=content,
        emotion=emotion,
        confidence=confidence,
    )
    db.add(chat_message)

    session = db.query(ChatSession).filter(ChatSession.id == session_id).first()
    if session:
        now = datetime.utcnow()
        session.last_activity_at = now
        session.updated_at = now

    db.commit()
    db.refresh(chat_message)
    return chat_message


def list_session_messages(db: Session, session_id: UUID) -> list[ChatMessage]:
    return db.query(ChatMessage)\
             .filter(ChatMessage.session_id == session_id)\
             .order_by(ChatMessage.created_at.asc())\
             .all()


def record_emotion_event(
    db: Session,
    user_id: int,
    emotion: str,
    intensity: int,
    context: Optional[str] = None,
    session_id: Optional[UUID] = None,
) -> UserEmotion:
    record = UserEmotion(
        user_id=user_id,
        session_id=session_id,
        emotion=emotion,
        intensity=intensity,
        context=context,
    )
    db.add(record)
    db.commit()
    db.refresh(record)
    return record


def get_session_analytics(db: Session, session_id: UUID) -> Optional[ChatAnalytics]:
    return db.query(ChatAnalytics).filter(ChatAnalytics.session_id == session_id).first()


def update_session_analytics(
    db: Session,
    chat_session: ChatSession,
    message_count: int,
    response_time: int,
    dominant_emotion: str,
) -> ChatAnalytics:
    """Overwrite the session's analytics rollup with the latest turn's figures."""
    analytics = get_session_analytics(db, chat_session.id)
    if analytics is None:
        analytics = ChatAnalytics(session_id=chat_session.id, user_id=chat_session.user_id)
        db.add(analytics)

    analytics.message_count = message_count
    analytics.average_response_time = response_time
    analytics.dominant_emotion = dominant_emotion
    analytics.session_duration = int((datetime.utcnow() - chat_session.created_at).total_seconds())

    db.commit()
    db.refresh(analytics)
    return analytics


# ---------------------------------------------------
# 🤖 Turn Handling
# ---------------------------------------------------

def process_message(
    db: Session,
    user: User,
    chat_session: ChatSession,
    content: str,
    context: Optional[dict] = None,
) -> TurnResult:
    """Run one chat turn: detect, store, reply, store, roll up.

    Each write is committed as it happens; a failure part way through leaves
    the earlier rows in place.
    """
    start_time = time.monotonic()

    current_analytics = get_session_analytics(db, chat_session.id)
    previous_count = current_analytics.message_count if current_analytics else 0

    # Step 1: Detect emotion once for the whole turn
    detection = detect_emotion_with_confidence(content)

    # Step 2: Save user's message
    append_message(db, chat_session.id, "user", content, detection.emotion, detection.confidence)

    # Step 3: Track the emotion
    record_emotion_event(
        db,
        user_id=user.id,
        emotion=detection.emotion,
        intensity=intensity_from_confidence(detection.confidence),
        context=content[:EMOTION_CONTEXT_LENGTH],
        session_id=chat_session.id,
    )

    # Step 4: Pick the reply
    ai_response = responder.select_response(db, content, detection.emotion)

    # Step 5: Save assistant message with the same detection
    ai_message = append_message(db, chat_session.id, "assistant", ai_response.content, detection.emotion, detection.confidence)

    # Step 6: Session state and analytics
    chat_session.status = "active"
    if context:
        chat_session.context = {**(chat_session.context or {}), **context}

    response_time = int((time.monotonic() - start_time) * 1000)
    update_session_analytics(
        db,
        chat_session,
        message_count=previous_count + 2,
        response_time=response_time,
        dominant_emotion=detection.emotion,
    )

    return TurnResult(
        reply_text=ai_response.content,
        emotion=detection.emotion,
        confidence=detection.confidence,
        coping_strategies=ai_response.coping_strategies,
        session_id=chat_session.id,
        message_id=ai_message.id,
        response_time=response_time,
    )
