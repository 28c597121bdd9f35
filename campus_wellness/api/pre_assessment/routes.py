import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from campus_wellness.api.pre_assessment import schemas, services
from campus_wellness.core.security import get_current_user
from campus_wellness.db.models.user import User
from campus_wellness.db.session import get_db

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/", response_model=schemas.PreAssessmentResult)
def complete_pre_assessment(
    payload: schemas.PreAssessmentCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    try:
        ai_analysis = services.submit_pre_assessment(db, current_user, payload)
    except Exception:
        db.rollback()
        logger.exception("Error completing pre-assessment for user %s", current_user.id)
        raise HTTPException(status_code=500, detail="Failed to complete pre-assessment")

    return {
        "success": True,
        "message": "Pre-assessment completed and analyzed successfully",
        "analysis": {
            "risk_level": ai_analysis["risk_level"],
            "primary_concerns": ai_analysis.get("primary_concerns") or [],
            "recommendations": ai_analysis.get("recommendations") or [],
            "personalized_plan": ai_analysis.get("personalized_plan") or {},
        },
    }


@router.get("/", response_model=schemas.PreAssessmentStatus)
def pre_assessment_status(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    return {
        "success": True,
        "has_completed_pre_assessment": bool(current_user.has_completed_pre_assessment),
        "assessment": services.get_pre_assessment(db, current_user.id),
    }
