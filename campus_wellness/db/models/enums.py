from sqlalchemy import Enum

EMOTION_TYPES = (
    "happy",
    "sad",
    "anxious",
    "angry",
    "neutral",
    "excited",
    "frustrated",
    "calm",
    "stressed",
    "grateful",
)
MESSAGE_ROLES = ("user", "assistant", "system")
SESSION_STATUSES = ("active", "paused", "completed", "archived")
RESPONSE_TYPES = ("comfort", "guidance", "celebration", "coping")
USER_ROLES = ("user", "admin")
CAMPUSES = ("Main", "North", "South", "East", "West")

# Shared column types so every table reuses the same named database enum
EmotionType = Enum(*EMOTION_TYPES, name="emotion_types")
MessageRole = Enum(*MESSAGE_ROLES, name="message_roles")
SessionStatus = Enum(*SESSION_STATUSES, name="session_statuses")
