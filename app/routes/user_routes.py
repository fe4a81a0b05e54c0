# app/routes/user_routes.py
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from app.database import get_db
from app.utils.security import get_current_user, require_subject
from app.models.user import User
from app.crud import user_crud
from app.schema.user_schema import UserSync, UserProfileUpdate, UserResponse

router = APIRouter(prefix="/users", tags=["users"])


@router.post("/sync", response_model=UserResponse)
def sync_user(
    data: UserSync,
    db: Session = Depends(get_db),
    subject: str = Depends(require_subject)
):
    """Create the local user row on first sign-in, or return the existing one"""
    try:
        return user_crud.get_or_create_user(
            db,
            clerk_user_id=subject,
            email=data.email,
            name=data.name,
            image_url=data.image_url,
        )
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))


@router.get("/me", response_model=UserResponse)
def get_me(current_user: User = Depends(get_current_user)):
    return current_user


@router.put("/me/profile", response_model=UserResponse)
def update_my_profile(
    data: UserProfileUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """Update the profile fields used when generating cover letters"""
    update_data = data.model_dump(exclude_unset=True)
    if "skills" in update_data and update_data["skills"] is None:
        update_data["skills"] = []
    return user_crud.update_profile(db, current_user, update_data)
