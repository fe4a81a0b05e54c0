from pydantic import BaseModel, EmailStr, Field, field_validator
from typing import List, Optional
from uuid import UUID
from datetime import datetime

# ----------------- Sign-in sync -----------------
class UserSync(BaseModel):
    email: EmailStr
    name: Optional[str] = None
    image_url: Optional[str] = None

# ----------------- Onboarding -----------------
class UserProfileUpdate(BaseModel):
    industry: Optional[str] = Field(None, max_length=200)
    experience: Optional[int] = Field(None, ge=0, le=50, description="Years of experience")
    skills: Optional[List[str]] = None
    bio: Optional[str] = Field(None, max_length=2000)

    @field_validator("skills")
    @classmethod
    def strip_blank_skills(cls, value):
        if value is None:
            return value
        return [skill.strip() for skill in value if skill and skill.strip()]

# ----------------- User response -----------------
class UserResponse(BaseModel):
    id: UUID
    clerk_user_id: str
    email: str
    name: Optional[str] = None
    image_url: Optional[str] = None
    industry: Optional[str] = None
    experience: Optional[int] = None
    skills: List[str] = []
    bio: Optional[str] = None
    created_at: Optional[datetime] = None

    model_config = {
        "from_attributes": True
    }
