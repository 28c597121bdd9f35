from datetime import datetime, timedelta
import uuid

from campus_wellness.api.chat import services
from campus_wellness.api.chat.emotion import COPING_STRATEGIES
from campus_wellness.api.chat.responder import FALLBACK_RESPONSES
from campus_wellness.db.models.chat import ChatMessage, UserEmotion


def create_session(client, title="Exam week"):
    response = client.post("/chat/sessions", json={"title": title})
    assert response.status_code == 201
    return response.json()["sessionId"]


def send(client, session_id, content, **extra):
    return client.post("/chat/message", json={"content": content, "sessionId": session_id, **extra})


# ---------------------------------------------------
# Sessions
# ---------------------------------------------------

def test_create_and_list_sessions(client):
    first = create_session(client, "First")
    second = create_session(client, "Second")

    response = client.get("/chat/sessions")

    assert response.status_code == 200
    ids = [s["id"] for s in response.json()]
    assert set(ids) == {first, second}
    assert all(s["status"] == "active" for s in response.json())


def test_new_session_starts_with_zeroed_analytics(client):
    session_id = create_session(client)
    analytics = client.get(f"/chat/sessions/{session_id}/analytics").json()
    assert analytics["messageCount"] == 0
    assert analytics["dominantEmotion"] is None


def test_session_title_is_required(client):
    assert client.post("/chat/sessions", json={"title": ""}).status_code == 422


def test_sessions_listed_by_latest_activity(client, db):
    older = create_session(client, "Older")
    newer = create_session(client, "Newer")
    send(client, older, "hello again")

    ids = [s["id"] for s in client.get("/chat/sessions").json()]

    assert ids == [older, newer]


def test_update_session_status_and_title(client):
    session_id = create_session(client)

    response = client.patch(f"/chat/sessions/{session_id}", json={"status": "paused", "title": "Renamed"})

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "paused"
    assert body["title"] == "Renamed"


def test_update_session_rejects_unknown_status(client):
    session_id = create_session(client)
    assert client.patch(f"/chat/sessions/{session_id}", json={"status": "deleted"}).status_code == 422


def test_foreign_sessions_are_not_visible(client_for, user, other_user, empty_corpus):
    client = client_for(user)
    session_id = create_session(client)

    client = client_for(other_user)
    assert client.get(f"/chat/sessions/{session_id}").status_code == 404
    assert client.get(f"/chat/sessions/{session_id}/messages").status_code == 404
    assert client.get(f"/chat/sessions/{session_id}/analytics").status_code == 404
    assert client.patch(f"/chat/sessions/{session_id}", json={"title": "Mine now"}).status_code == 404
    assert client.get("/chat/sessions").json() == []


# ---------------------------------------------------
# Turns
# ---------------------------------------------------

def test_turn_with_empty_stores_uses_builtin_fallback(client):
    session_id = create_session(client)

    response = send(client, session_id, "I feel anxious about my exam")

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["emotion"] == "anxious"
    assert body["message"] == FALLBACK_RESPONSES["anxious"]
    assert body["copingStrategies"] == COPING_STRATEGIES["anxious"]
    assert body["sessionId"] == session_id
    assert body["analytics"]["emotionConfidence"] > 0
    assert body["analytics"]["responseTime"] >= 0
    uuid.UUID(body["messageId"])


def test_turn_uses_seeded_template(client_for, admin_user, empty_corpus):
    client = client_for(admin_user)
    assert client.post("/templates/seed").json()["success"] is True
    session_id = create_session(client)

    body = send(client, session_id, "I'm so sad today").json()

    assert body["emotion"] == "sad"
    assert body["message"].startswith("I understand that sadness can feel overwhelming")
    assert "Reach out to someone you trust" in body["copingStrategies"]


def test_assistant_message_carries_user_detection(client):
    session_id = create_session(client)
    send(client, session_id, "I am furious and nervous and worried")
    send(client, session_id, "the weather")

    messages = client.get(f"/chat/sessions/{session_id}/messages").json()["messages"]

    assert [m["role"] for m in messages] == ["user", "assistant", "user", "assistant"]
    first_user, first_reply, second_user, second_reply = messages
    assert first_user["emotion"] == first_reply["emotion"] == "anxious"
    assert first_user["confidence"] == first_reply["confidence"] > 0
    assert second_user["emotion"] == second_reply["emotion"] == "neutral"
    assert second_user["confidence"] == second_reply["confidence"] == 0


def test_turn_records_emotion_event(client, db, user):
    session_id = create_session(client)
    long_message = "I feel so stressed and overwhelmed " + "x" * 200

    send(client, session_id, long_message)

    events = db.query(UserEmotion).all()
    assert len(events) == 1
    event = events[0]
    assert event.user_id == user.id
    assert str(event.session_id) == session_id
    assert event.emotion == "anxious"
    assert 1 <= event.intensity <= 10
    assert event.context == long_message[:100]


def test_analytics_after_n_turns(client):
    session_id = create_session(client)
    for text in ("I feel happy", "now I'm sad", "I am thankful"):
        assert send(client, session_id, text).status_code == 200

    analytics = client.get(f"/chat/sessions/{session_id}/analytics").json()

    assert analytics["messageCount"] == 6
    assert analytics["dominantEmotion"] == "grateful"
    assert analytics["averageResponseTime"] >= 0
    assert analytics["sessionDuration"] >= 0


def test_turn_reactivates_paused_session(client):
    session_id = create_session(client)
    client.patch(f"/chat/sessions/{session_id}", json={"status": "paused"})

    send(client, session_id, "back again")

    assert client.get(f"/chat/sessions/{session_id}").json()["status"] == "active"


def test_turn_context_is_merged_into_session(client):
    session_id = create_session(client)
    send(client, session_id, "hello", context={"source": "mobile"})
    assert client.get(f"/chat/sessions/{session_id}").json()["context"] == {"source": "mobile"}


def test_blank_message_rejected_before_any_write(client, db):
    session_id = create_session(client)

    assert send(client, session_id, "   ").status_code == 400
    assert send(client, session_id, "").status_code == 422
    assert send(client, session_id, "x" * 1001).status_code == 422

    assert db.query(ChatMessage).count() == 0
    assert db.query(UserEmotion).count() == 0


def test_unknown_session_rejected(client, db):
    response = send(client, str(uuid.uuid4()), "hello")
    assert response.status_code == 404
    assert db.query(ChatMessage).count() == 0


def test_foreign_session_rejected(client_for, user, other_user, empty_corpus, db):
    session_id = create_session(client_for(user))
    response = send(client_for(other_user), session_id, "hello")
    assert response.status_code == 404
    assert db.query(ChatMessage).count() == 0


def test_failure_mid_turn_reports_generic_error(client, db, monkeypatch):
    session_id = create_session(client)

    def broken_select(*args, **kwargs):
        raise RuntimeError("template store unavailable")

    monkeypatch.setattr(services.responder, "select_response", broken_select)

    response = send(client, session_id, "I feel sad")

    assert response.status_code == 500
    assert response.json()["detail"] == "Failed to process message"
    # earlier writes of the turn are kept
    assert [m.role for m in db.query(ChatMessage).all()] == ["user"]
    assert db.query(UserEmotion).count() == 1


# ---------------------------------------------------
# Manual emotion tracking
# ---------------------------------------------------

def test_track_emotion(client, db):
    session_id = create_session(client)

    response = client.post("/chat/emotions", json={"emotion": "calm", "intensity": 7, "context": "after yoga", "sessionId": session_id})

    assert response.status_code == 201
    body = response.json()
    assert body["emotion"] == "calm"
    assert body["intensity"] == 7
    assert body["sessionId"] == session_id


def test_track_emotion_validates_input(client):
    assert client.post("/chat/emotions", json={"emotion": "bored", "intensity": 5}).status_code == 422
    assert client.post("/chat/emotions", json={"emotion": "calm", "intensity": 11}).status_code == 422


# ---------------------------------------------------
# Service level
# ---------------------------------------------------

def test_append_message_requires_emotion_and_confidence_together(db, user):
    from campus_wellness.api.chat.schemas import ChatSessionCreate
    import pytest

    session = services.create_chat_session(db, user.id, ChatSessionCreate(title="t"))
    with pytest.raises(ValueError):
        services.append_message(db, session.id, "user", "hi", emotion="happy")


def test_session_duration_measured_from_creation(db, user):
    from campus_wellness.api.chat.schemas import ChatSessionCreate

    session = services.create_chat_session(db, user.id, ChatSessionCreate(title="t"))
    session.created_at = datetime.utcnow() - timedelta(minutes=5)
    db.commit()

    analytics = services.update_session_analytics(db, session, message_count=2, response_time=12, dominant_emotion="calm")

    assert 299 <= analytics.session_duration <= 310
    assert analytics.message_count == 2
