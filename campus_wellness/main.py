import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from campus_wellness.config import settings
from campus_wellness.api.auth.routes import router as auth_router
from campus_wellness.api.chat.routes import router as chat_router
from campus_wellness.api.templates.routes import router as templates_router
from campus_wellness.api.pre_assessment.routes import router as pre_assessment_router
from campus_wellness.api.chat.responder import response_generator

# Scheduler for idle session archiving
from campus_wellness.core.scheduler import start_scheduler, shutdown_scheduler

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Counselor corpus is read once and shared read-only by every request
    response_generator.load()
    if settings.ENABLE_SCHEDULER:
        start_scheduler()
    yield
    shutdown_scheduler()

app = FastAPI(title="Campus Wellness API", lifespan=lifespan)

# Routers
app.include_router(auth_router, prefix="/auth", tags=["Auth"])
app.include_router(chat_router, prefix="/chat", tags=["Chat"])
app.include_router(templates_router, prefix="/templates", tags=["Response Templates"])
app.include_router(pre_assessment_router, prefix="/pre-assessment", tags=["Pre-Assessment"])

@app.get("/ping")
def ping():
    return {"message": "pong"}
