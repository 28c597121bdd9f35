import logging
from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from campus_wellness.api.chat import schemas, services
from campus_wellness.core.security import get_current_user
from campus_wellness.db.models.user import User
from campus_wellness.db.session import get_db

logger = logging.getLogger(__name__)

router = APIRouter()


def _owned_session_or_404(db: Session, session_id: UUID, user: User):
    session = services.get_owned_session(db, session_id, user.id)
    if session is None:
        raise HTTPException(status_code=404, detail="Chat session not found")
    return session


# ---------------------------------------------------
# 🚀 Turn Endpoint
# ---------------------------------------------------

@router.post("/message", response_model=schemas.SendMessageResponse)
def send_message(
    payload: schemas.SendMessageRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    if not payload.content.strip():
        raise HTTPException(status_code=400, detail="Message cannot be empty")

    session = _owned_session_or_404(db, payload.session_id, current_user)

    try:
        result = services.process_message(db, current_user, session, payload.content, payload.context)
    except Exception:
        db.rollback()
        logger.exception("Error in chat service for session %s", payload.session_id)
        raise HTTPException(status_code=500, detail="Failed to process message")

    return schemas.SendMessageResponse(
        message=result.reply_text,
        emotion=result.emotion,
        coping_strategies=result.coping_strategies,
        session_id=result.session_id,
        message_id=result.message_id,
        analytics=schemas.TurnAnalytics(
            response_time=result.response_time,
            emotion_confidence=result.confidence,
        ),
    )


# ---------------------------------------------------
# 🔁 Chat Session Endpoints
# ---------------------------------------------------

@router.post("/sessions", response_model=schemas.ChatSessionCreated, status_code=201)
def create_session(
    payload: schemas.ChatSessionCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    session = services.create_chat_session(db, user_id=current_user.id, session_data=payload)
    return schemas.ChatSessionCreated(session_id=session.id, title=session.title)


@router.get("/sessions", response_model=List[schemas.ChatSessionResponse])
def list_sessions(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    return services.list_user_chat_sessions(db, user_id=current_user.id)


@router.get("/sessions/{session_id}", response_model=schemas.ChatSessionResponse)
def retrieve_session(
    session_id: UUID,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    return _owned_session_or_404(db, session_id, current_user)


@router.patch("/sessions/{session_id}", response_model=schemas.ChatSessionResponse)
def update_session(
    session_id: UUID,
    payload: schemas.ChatSessionUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    session = _owned_session_or_404(db, session_id, current_user)
    return services.update_chat_session(db, session, payload)


@router.get("/sessions/{session_id}/messages", response_model=schemas.SessionMessagesResponse)
def list_messages(
    session_id: UUID,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    _owned_session_or_404(db, session_id, current_user)
    return {"success": True, "messages": services.list_session_messages(db, session_id)}


@router.get("/sessions/{session_id}/analytics", response_model=schemas.SessionAnalyticsResponse)
def retrieve_analytics(
    session_id: UUID,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    _owned_session_or_404(db, session_id, current_user)
    analytics = services.get_session_analytics(db, session_id)
    if analytics is None:
        raise HTTPException(status_code=404, detail="Analytics not found")
    return analytics


# ---------------------------------------------------
# 💭 Emotion Tracking
# ---------------------------------------------------

@router.post("/emotions", response_model=schemas.EmotionRecordResponse, status_code=201)
def track_emotion(
    payload: schemas.EmotionTrackingRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    if payload.session_id is not None:
        _owned_session_or_404(db, payload.session_id, current_user)

    return services.record_emotion_event(
        db,
        user_id=current_user.id,
        emotion=payload.emotion,
        intensity=payload.intensity,
        context=payload.context,
        session_id=payload.session_id,
    )
