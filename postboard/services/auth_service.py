from datetime import datetime, timedelta, timezone
from typing import Optional
from jose import JWTError, jwt
from fastapi import Depends
from fastapi.security import OAuth2PasswordBearer
import logging

from postboard.config import settings
from postboard.exceptions import Unauthorized

logger = logging.getLogger(__name__)

# Login lives in the auth service; auto_error is off so failures use our envelope
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/auth/login", auto_error=False)

def create_access_token(user_id: str, expires_delta: Optional[timedelta] = None) -> str:
    """Create a JWT access token"""
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)

    to_encode = {
        "sub": str(user_id),
        "type": "access",
        "exp": datetime.now(timezone.utc) + expires_delta,
    }
    return jwt.encode(to_encode, settings.secret_key, algorithm=settings.ALGORITHM)

def decode_access_token(token: str) -> Optional[str]:
    """Return the user id carried by a valid access token, else None"""
    try:
        payload = jwt.decode(token, settings.secret_key, algorithms=[settings.ALGORITHM])
    except JWTError as e:
        logger.debug(f"Rejected token: {e}")
        return None

    if payload.get("type") != "access":
        return None

    return payload.get("sub")

async def verify_token(token: Optional[str] = Depends(oauth2_scheme)) -> str:
    """Dependency returning the authenticated user id"""
    if not token:
        raise Unauthorized("No token provided")

    user_id = decode_access_token(token)
    if user_id is None:
        raise Unauthorized("Invalid or expired token")

    return user_id
