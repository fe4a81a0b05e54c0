import logging
from typing import Optional
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from app.models.user import User

logger = logging.getLogger(__name__)


def get_user_by_subject(db: Session, clerk_user_id: str) -> Optional[User]:
    return db.query(User).filter(User.clerk_user_id == clerk_user_id).first()


def get_user_by_email(db: Session, email: str) -> Optional[User]:
    return db.query(User).filter(User.email == email).first()


def get_or_create_user(db: Session, clerk_user_id: str, email: str, name: str = None, image_url: str = None) -> User:
    """
    Return the local row for a signed-in subject, creating it on first sign-in.
    A concurrent first sign-in for the same subject returns the row the other
    request stored.
    """
    user = get_user_by_subject(db, clerk_user_id)
    if user:
        return user

    existing = get_user_by_email(db, email)
    if existing:
        raise ValueError("Email already linked to another account")

    user = User(
        clerk_user_id=clerk_user_id,
        email=email,
        name=name,
        image_url=image_url,
        skills=[],
    )
    db.add(user)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        user = get_user_by_subject(db, clerk_user_id)
        if user:
            logger.info("User %s was created by a concurrent sign-in", clerk_user_id)
            return user
        raise ValueError("Email already linked to another account")
    db.refresh(user)
    return user


def update_profile(db: Session, user: User, data: dict) -> User:
    for field, value in data.items():
        setattr(user, field, value)
    try:
        db.commit()
    except Exception:
        db.rollback()
        raise
    db.refresh(user)
    return user
