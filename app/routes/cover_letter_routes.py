# app/routes/cover_letter_routes.py
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from typing import List
from app.database import get_db
from app.utils.security import get_current_user
from app.utils.cover_letter_ai import CoverLetterGenerationError
from app.models.user import User
from app.crud import cover_letter_crud
from app.schema.cover_letter_schema import CoverLetterGenerate, CoverLetterResponse
import uuid


router = APIRouter(prefix="/cover-letters", tags=["cover-letters"])


@router.post("/generate", response_model=CoverLetterResponse, status_code=status.HTTP_201_CREATED)
def generate_cover_letter(
    data: CoverLetterGenerate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """Generate a cover letter with AI and save it for the authenticated user"""
    try:
        return cover_letter_crud.generate_cover_letter(
            db,
            current_user,
            job_title=data.job_title,
            company_name=data.company_name,
            job_description=data.job_description,
        )
    except CoverLetterGenerationError:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to generate cover letter"
        )


@router.get("/", response_model=List[CoverLetterResponse])
def get_cover_letters(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """All cover letters of the authenticated user, most recent first"""
    return cover_letter_crud.get_cover_letters(db, current_user)


@router.get("/{id}", response_model=CoverLetterResponse)
def get_cover_letter(
    id: uuid.UUID,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    cover_letter = cover_letter_crud.get_cover_letter(db, current_user, id)
    if not cover_letter:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Cover letter not found"
        )
    return cover_letter


@router.delete("/{id}", response_model=CoverLetterResponse)
def delete_cover_letter(
    id: uuid.UUID,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """Delete a cover letter and return the deleted record"""
    cover_letter = cover_letter_crud.delete_cover_letter(db, current_user, id)
    if not cover_letter:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Cover letter not found"
        )
    return cover_letter
