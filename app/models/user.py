import uuid
from typing import List, Optional
from datetime import datetime
from sqlalchemy import String, Integer, Text, DateTime, JSON, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column, relationship
from app.database import Base


class User(Base):
    __tablename__ = "users"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    clerk_user_id: Mapped[str] = mapped_column(String, unique=True, index=True, nullable=False)  # auth provider subject
    email: Mapped[str] = mapped_column(String, unique=True, nullable=False)
    name: Mapped[Optional[str]] = mapped_column(String, nullable=True)
    image_url: Mapped[Optional[str]] = mapped_column(String, nullable=True)

    # Profile data, only used to fill the generation prompt
    industry: Mapped[Optional[str]] = mapped_column(String, nullable=True)
    experience: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    skills: Mapped[List[str]] = mapped_column(JSON, default=list, nullable=False)
    bio: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    cover_letters = relationship(
        "CoverLetter",
        back_populates="user",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
