from app.models.user import User
from app.models.cover_letter import CoverLetter, CoverLetterStatus

__all__ = ["User", "CoverLetter", "CoverLetterStatus"]
