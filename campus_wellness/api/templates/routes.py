import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from campus_wellness.api.templates import schemas, services
from campus_wellness.core.security import get_current_admin, get_current_user
from campus_wellness.db.models.user import User
from campus_wellness.db.session import get_db

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/seed", response_model=schemas.TemplateListResponse)
def list_response_templates(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    templates = services.list_templates(db)
    return {
        "success": True,
        "message": f"Found {len(templates)} AI response templates",
        "templates": templates,
        "count": len(templates),
    }


@router.post("/seed", response_model=schemas.SeedResult, response_model_exclude_none=True)
def seed_response_templates(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_admin)
):
    try:
        count = services.seed_templates(db)
    except Exception:
        db.rollback()
        logger.exception("Error seeding AI response templates")
        raise HTTPException(status_code=500, detail="Failed to seed AI response templates")

    if count is None:
        return {"success": False, "message": "AI response templates already exist in the database"}

    logger.info("Seeded %d AI response templates", count)
    return {
        "success": True,
        "message": f"Successfully seeded {count} AI response templates",
        "count": count,
    }
