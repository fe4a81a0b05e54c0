from datetime import datetime, timedelta, timezone
from jose import JWTError, jwt
from fastapi import Depends, HTTPException, Request, status
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session
from typing import Optional
import logging
import os
from dotenv import load_dotenv
from app.models.user import User

load_dotenv()

logger = logging.getLogger(__name__)

SECRET_KEY = os.getenv("AUTH_JWT_KEY")
if not SECRET_KEY:
    raise ValueError("AUTH_JWT_KEY environment variable must be set")

ALGORITHM = os.getenv("AUTH_JWT_ALGORITHM", "HS256")
ISSUER = os.getenv("AUTH_JWT_ISSUER")
SESSION_TOKEN_EXPIRE_MINUTES = 60 * 24
SESSION_COOKIE = os.getenv("AUTH_SESSION_COOKIE", "__session")

# The auth provider issues the bearer token; we only verify it.
oauth2_scheme = OAuth2PasswordBearer(
    tokenUrl="/sign-in",
    auto_error=False
)


def create_session_token(subject: str, expires_delta: Optional[timedelta] = None) -> str:
    """Mint a session token for a provider subject id (local tooling and tests)"""
    expire = datetime.now(timezone.utc) + (expires_delta or timedelta(minutes=SESSION_TOKEN_EXPIRE_MINUTES))
    to_encode = {"sub": subject, "exp": expire}
    if ISSUER:
        to_encode["iss"] = ISSUER
    return jwt.encode(to_encode, SECRET_KEY, algorithm=ALGORITHM)


def decode_session_token(token: Optional[str]) -> Optional[str]:
    """Return the subject id carried by the token, or None if it isn't a valid session"""
    if not token:
        return None
    try:
        payload = jwt.decode(token, SECRET_KEY, algorithms=[ALGORITHM], issuer=ISSUER)
    except JWTError as e:
        logger.debug("Rejected session token: %s", e)
        return None
    subject = payload.get("sub")
    if not subject:
        return None
    return str(subject)


def get_current_subject(
    request: Request,
    token: Optional[str] = Depends(oauth2_scheme)
) -> Optional[str]:
    """
    Session lookup: the signed-in subject id, or None when unauthenticated.
    Browsers send the session as a cookie, API clients as a bearer token.
    """
    return decode_session_token(token or request.cookies.get(SESSION_COOKIE))


def require_subject(subject: Optional[str] = Depends(get_current_subject)) -> str:
    if not subject:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unauthorized",
            headers={"WWW-Authenticate": "Bearer"}
        )
    return subject


from app.database import get_db


def get_current_user(
    subject: str = Depends(require_subject),
    db: Session = Depends(get_db)
) -> User:
    """
    Fetch the local user row for the signed-in subject.
    Every cover letter operation goes through this dependency.
    """
    user = db.query(User).filter(User.clerk_user_id == subject).first()
    if not user:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="User not found"
        )
    return user
