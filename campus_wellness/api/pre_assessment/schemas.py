from pydantic import BaseModel, Field
from typing import Any, Dict, List, Optional
from uuid import UUID
from datetime import datetime

# -----------------------------
# 📝 Questionnaire
# -----------------------------

class PreAssessmentCreate(BaseModel):
    # Work and daily functioning
    work_overwhelmed: int = Field(ge=0, le=3)
    concentration_difficulty: int = Field(ge=0, le=3)
    procrastination: int = Field(ge=0, le=3)
    irritability: int = Field(ge=0, le=3)
    lack_accomplishment: int = Field(ge=0, le=3)
    trouble_switching_off: int = Field(ge=0, le=3)

    # Mood and emotions
    feeling_down: int = Field(ge=0, le=3)
    losing_interest: int = Field(ge=0, le=3)
    feeling_anxious: int = Field(ge=0, le=3)
    mood_swings: int = Field(ge=0, le=3)
    feeling_guilty: int = Field(ge=0, le=3)

    # Physical and behavioral changes
    sleep_problems: int = Field(ge=0, le=3)
    appetite_changes: int = Field(ge=0, le=3)
    feeling_tired: int = Field(ge=0, le=3)
    physical_symptoms: int = Field(ge=0, le=3)
    substance_use: int = Field(ge=0, le=3)
    withdrawing: int = Field(ge=0, le=3)

    # Thoughts and safety
    thoughts_of_harm: int = Field(ge=0, le=3)
    life_not_worth_living: int = Field(ge=0, le=3)
    worried_about_students: int = Field(ge=0, le=3)

    coping_mechanisms: List[str] = []
    goals: List[str] = []


# -----------------------------
# 🤖 Analysis
# -----------------------------

class AnalysisSummary(BaseModel):
    risk_level: str
    primary_concerns: List[str] = []
    recommendations: List[str] = []
    personalized_plan: Dict[str, Any] = {}


class PreAssessmentResult(BaseModel):
    success: bool
    message: str
    analysis: AnalysisSummary


class PreAssessmentOut(PreAssessmentCreate):
    id: UUID
    total_score: int
    risk_level: str
    ai_analysis: Optional[Dict[str, Any]] = None
    personalized_plan: Optional[Dict[str, Any]] = None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class PreAssessmentStatus(BaseModel):
    success: bool = True
    has_completed_pre_assessment: bool
    assessment: Optional[PreAssessmentOut] = None
