from pydantic import BaseModel
from typing import List, Optional
from uuid import UUID
from datetime import datetime


class ResponseTemplateOut(BaseModel):
    id: UUID
    emotion: str
    response_type: str
    content: str
    coping_strategies: Optional[List[str]] = None
    is_active: bool
    priority: int
    created_at: datetime

    model_config = {"from_attributes": True}


class SeedResult(BaseModel):
    success: bool
    message: str
    count: Optional[int] = None


class TemplateListResponse(BaseModel):
    success: bool
    message: str
    templates: List[ResponseTemplateOut] = []
    count: int
