# app/schema/cover_letter_schema.py
from pydantic import BaseModel, Field
from typing import Optional
from uuid import UUID
from datetime import datetime


class CoverLetterGenerate(BaseModel):
    """Job details the letter is written for"""
    job_title: str = Field(..., min_length=1, max_length=200, description="Position being applied for")
    company_name: str = Field(..., min_length=1, max_length=200, description="Hiring company")
    job_description: str = Field(..., min_length=1, max_length=10000, description="Job posting text")


class CoverLetterResponse(BaseModel):
    """Schema for cover letter response"""
    id: UUID
    user_id: UUID
    content: str
    job_description: Optional[str] = None
    company_name: str
    job_title: str
    status: str
    created_at: datetime
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True
