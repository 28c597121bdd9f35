# campus_wellness/api/pre_assessment/services.py
import logging
from datetime import datetime
from typing import Optional

from sqlalchemy.orm import Session

from campus_wellness.db.models.pre_assessment import PreAssessment
from campus_wellness.db.models.user import User
from campus_wellness.api.pre_assessment import analysis, schemas

logger = logging.getLogger(__name__)

SCORE_FIELDS = (
    "work_overwhelmed",
    "concentration_difficulty",
    "procrastination",
    "irritability",
    "lack_accomplishment",
    "trouble_switching_off",
    "feeling_down",
    "losing_interest",
    "feeling_anxious",
    "mood_swings",
    "feeling_guilty",
    "sleep_problems",
    "appetite_changes",
    "feeling_tired",
    "physical_symptoms",
    "substance_use",
    "withdrawing",
    "thoughts_of_harm",
    "life_not_worth_living",
    "worried_about_students",
)


def calculate_total_score(data: schemas.PreAssessmentCreate) -> int:
    return sum(getattr(data, name) for name in SCORE_FIELDS)


def get_pre_assessment(db: Session, user_id: int) -> Optional[PreAssessment]:
    return db.query(PreAssessment).filter(PreAssessment.user_id == user_id).first()


def submit_pre_assessment(db: Session, user: User, data: schemas.PreAssessmentCreate) -> dict:
    """Score, analyze and store the questionnaire; one assessment per user."""
    answers = data.model_dump()
    total_score = calculate_total_score(data)

    logger.info("Starting pre-assessment analysis for user %s", user.id)
    ai_analysis = analysis.analyze_pre_assessment(answers)
    logger.info("Pre-assessment analysis for user %s finished, risk level %s", user.id, ai_analysis["risk_level"])

    assessment = get_pre_assessment(db, user.id)
    if assessment is None:
        assessment = PreAssessment(user_id=user.id)
        db.add(assessment)

    for key, value in answers.items():
        setattr(assessment, key, value)
    assessment.total_score = total_score
    assessment.risk_level = ai_analysis["risk_level"]
    assessment.ai_analysis = ai_analysis
    assessment.personalized_plan = ai_analysis.get("personalized_plan")
    assessment.updated_at = datetime.utcnow()

    user.has_completed_pre_assessment = True
    user.updated_at = datetime.utcnow()

    db.commit()
    db.refresh(assessment)
    return ai_analysis
