from datetime import datetime

from sqlalchemy import Boolean, Column, DateTime, Integer, String
from sqlalchemy.orm import relationship

from campus_wellness.db.session import Base


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String, unique=True, index=True, nullable=False)
    name = Column(String, nullable=False)
    hashed_password = Column(String, nullable=True)
    auth_provider = Column(String, default="local")
    role = Column(String(10), nullable=False, default="user")  # 'user' or 'admin'
    campus = Column(String(20), nullable=True)
    office_or_dept = Column(String, nullable=True)
    is_profile_complete = Column(Boolean, nullable=False, default=False)
    has_completed_pre_assessment = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    chat_sessions = relationship("ChatSession", back_populates="user", cascade="all, delete-orphan", lazy="dynamic")
    pre_assessment = relationship("PreAssessment", back_populates="user", uselist=False, cascade="all, delete-orphan")
