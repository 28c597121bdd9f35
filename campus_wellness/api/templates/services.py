# campus_wellness/api/templates/services.py

from sqlalchemy.orm import Session

from campus_wellness.db.models.chat.response_template import ResponseTemplate
from campus_wellness.api.templates.seed_data import RESPONSE_TEMPLATES


def find_active_templates(db: Session, emotion: str, limit: int = 3) -> list[ResponseTemplate]:
    """Active templates for an emotion, highest priority first."""
    return db.query(ResponseTemplate)\
             .filter(ResponseTemplate.emotion == emotion, ResponseTemplate.is_active.is_(True))\
             .order_by(ResponseTemplate.priority.desc())\
             .limit(limit)\
             .all()


def list_templates(db: Session) -> list[ResponseTemplate]:
    return db.query(ResponseTemplate)\
             .order_by(ResponseTemplate.emotion.asc(), ResponseTemplate.priority.asc())\
             .all()


def insert_template(db: Session, record: dict) -> ResponseTemplate:
    template = ResponseTemplate(**record)
    db.add(template)
    db.flush()
    return template


def seed_templates(db: Session):
    """Insert the built-in templates when the table is empty.

    Returns the number of rows written, or None if templates already exist.
    """
    if db.query(ResponseTemplate.id).first() is not None:
        return None

    for record in RESPONSE_TEMPLATES:
        insert_template(db, record)

    db.commit()
    return len(RESPONSE_TEMPLATES)
