# campus_wellness/db/models/chat/__init__.py
from .chat_session import ChatSession
from .chat_message import ChatMessage
from .user_emotion import UserEmotion
from .chat_analytics import ChatAnalytics
from .response_template import ResponseTemplate
