# campus_wellness/db/models/__init__.py
from .user import User
from .pre_assessment import PreAssessment
from .chat import ChatSession, ChatMessage, UserEmotion, ChatAnalytics, ResponseTemplate
