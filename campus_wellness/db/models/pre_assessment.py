# campus_wellness/db/models/pre_assessment.py
from datetime import datetime
import uuid

from sqlalchemy import Column, DateTime, ForeignKey, Integer, JSON, String, Uuid
from sqlalchemy.orm import relationship

from campus_wellness.db.session import Base


class PreAssessment(Base):
    __tablename__ = "pre_assessments"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, unique=True)

    # Work and daily functioning (0-3)
    work_overwhelmed = Column(Integer, nullable=False)
    concentration_difficulty = Column(Integer, nullable=False)
    procrastination = Column(Integer, nullable=False)
    irritability = Column(Integer, nullable=False)
    lack_accomplishment = Column(Integer, nullable=False)
    trouble_switching_off = Column(Integer, nullable=False)

    # Mood and emotions (0-3)
    feeling_down = Column(Integer, nullable=False)
    losing_interest = Column(Integer, nullable=False)
    feeling_anxious = Column(Integer, nullable=False)
    mood_swings = Column(Integer, nullable=False)
    feeling_guilty = Column(Integer, nullable=False)

    # Physical and behavioral changes (0-3)
    sleep_problems = Column(Integer, nullable=False)
    appetite_changes = Column(Integer, nullable=False)
    feeling_tired = Column(Integer, nullable=False)
    physical_symptoms = Column(Integer, nullable=False)
    substance_use = Column(Integer, nullable=False)
    withdrawing = Column(Integer, nullable=False)

    # Thoughts and safety (0-3)
    thoughts_of_harm = Column(Integer, nullable=False)
    life_not_worth_living = Column(Integer, nullable=False)
    worried_about_students = Column(Integer, nullable=False)

    coping_mechanisms = Column(JSON, nullable=False, default=list)
    goals = Column(JSON, nullable=False, default=list)

    total_score = Column(Integer, nullable=False)
    risk_level = Column(String(20), nullable=False)  # low / moderate / high / critical
    ai_analysis = Column(JSON, nullable=True)
    personalized_plan = Column(JSON, nullable=True)

    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    user = relationship("User", back_populates="pre_assessment")
