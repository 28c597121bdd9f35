# campus_wellness/core/scheduler.py

import logging
from datetime import datetime, timedelta

from apscheduler.schedulers.background import BackgroundScheduler
from sqlalchemy.orm import Session

from campus_wellness.config import settings
from campus_wellness.db.session import SessionLocal
from campus_wellness.db.models.chat.chat_session import ChatSession

logger = logging.getLogger(__name__)

# Initialize the scheduler
scheduler = BackgroundScheduler()


# ---------------------------
# Archive Idle Chat Sessions
# ---------------------------

def archive_idle_sessions(db: Session, days_idle: int = None, now: datetime = None) -> int:
    """Move sessions with no activity for `days_idle` days to 'archived'. Rows are never deleted."""
    days_idle = days_idle if days_idle is not None else settings.SESSION_ARCHIVE_AFTER_DAYS
    cutoff_date = (now or datetime.utcnow()) - timedelta(days=days_idle)

    idle_sessions = db.query(ChatSession)\
                      .filter(ChatSession.status.in_(("active", "paused")))\
                      .filter(ChatSession.last_activity_at < cutoff_date)\
                      .all()

    for session in idle_sessions:
        session.status = "archived"

    db.commit()
    return len(idle_sessions)


@scheduler.scheduled_job("cron", hour=0, minute=0)
def auto_archive_idle_chats():
    db: Session = SessionLocal()
    try:
        archived = archive_idle_sessions(db)
        logger.info("Auto-archived %d idle chat sessions.", archived)
    except Exception:
        db.rollback()
        logger.exception("Error archiving idle chat sessions")
    finally:
        db.close()

# ---------------------------
# Start Scheduler
# ---------------------------

def start_scheduler():
    scheduler.start()
    logger.info("Background scheduler started")


def shutdown_scheduler():
    if scheduler.running:
        scheduler.shutdown(wait=False)
