from typing import Literal, Optional
from pydantic import BaseModel, EmailStr, Field

class UserCreate(BaseModel):
    name: str = Field(min_length=1)
    email: EmailStr
    password: str = Field(min_length=8)
    campus: Optional[Literal["Main", "North", "South", "East", "West"]] = None
    office_or_dept: Optional[str] = None

class UserLogin(BaseModel):
    email: EmailStr
    password: str

class Token(BaseModel):
    access_token: str
    token_type: str = "bearer"


class UserOut(BaseModel):
    id: int
    email: str
    name: str
    role: str
    campus: Optional[str] = None
    office_or_dept: Optional[str] = None
    is_profile_complete: bool
    has_completed_pre_assessment: bool

    model_config = {"from_attributes": True}
