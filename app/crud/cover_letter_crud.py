import logging
import uuid
from typing import List, Optional
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from app.models.user import User
from app.models.cover_letter import CoverLetter, CoverLetterStatus
from app.utils.cover_letter_ai import (
    build_cover_letter_prompt,
    generate_cover_letter_content,
    CoverLetterGenerationError,
)

logger = logging.getLogger(__name__)


def generate_cover_letter(db: Session, user: User, job_title: str, company_name: str, job_description: str) -> CoverLetter:
    """
    Generate a letter for the user and store it as completed.
    Raises CoverLetterGenerationError if the model call or the write fails;
    nothing is stored then.
    """
    prompt = build_cover_letter_prompt(user, job_title, company_name, job_description)

    try:
        content = generate_cover_letter_content(prompt)
    except CoverLetterGenerationError as e:
        logger.error("Error generating cover letter: %s", e)
        raise

    cover_letter = CoverLetter(
        content=content,
        job_description=job_description,
        company_name=company_name,
        job_title=job_title,
        status=CoverLetterStatus.COMPLETED.value,
        user_id=user.id,
    )
    db.add(cover_letter)
    try:
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error("Error saving cover letter: %s", e)
        raise CoverLetterGenerationError("Could not store cover letter") from e
    db.refresh(cover_letter)

    logger.info("Stored cover letter %s for user %s", cover_letter.id, user.id)
    return cover_letter


def get_cover_letters(db: Session, user: User) -> List[CoverLetter]:
    return db.query(CoverLetter)\
        .filter(CoverLetter.user_id == user.id)\
        .order_by(CoverLetter.created_at.desc())\
        .all()


def get_cover_letter(db: Session, user: User, cover_letter_id: uuid.UUID) -> Optional[CoverLetter]:
    return db.query(CoverLetter)\
        .filter(
            CoverLetter.id == cover_letter_id,
            CoverLetter.user_id == user.id
        )\
        .first()


def delete_cover_letter(db: Session, user: User, cover_letter_id: uuid.UUID) -> Optional[CoverLetter]:
    """Delete the letter if the user owns it and return it, else None"""
    cover_letter = get_cover_letter(db, user, cover_letter_id)
    if not cover_letter:
        return None

    db.delete(cover_letter)
    try:
        db.commit()
    except Exception:
        db.rollback()
        raise

    logger.info("Deleted cover letter %s for user %s", cover_letter_id, user.id)
    return cover_letter
