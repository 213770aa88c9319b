"""
Authentication utilities for the Inventory API.

Issues and validates the JWT bearer tokens that guard every resource route.
"""
import logging
import secrets
from datetime import datetime, timedelta
from typing import Optional
from jose import JWTError, jwt
from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from pydantic import BaseModel

from . import config, schemas

logger = logging.getLogger(__name__)

# Security scheme for JWT bearer tokens
security = HTTPBearer()

router = APIRouter(prefix="/api/auth", tags=["auth"])


class CurrentClient(BaseModel):
    """Authenticated API client."""
    subject: str
    token: str


def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    """
    Create a JWT access token.

    Args:
        data: Dictionary containing the claims to encode in the token
        expires_delta: Optional custom expiration time delta

    Returns:
        Encoded JWT token string
    """
    to_encode = data.copy()
    if expires_delta:
        expire = datetime.utcnow() + expires_delta
    else:
        expire = datetime.utcnow() + timedelta(minutes=config.ACCESS_TOKEN_EXPIRE_MINUTES)

    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, config.SECRET_KEY, algorithm=config.ALGORITHM)


def get_current_client(
    credentials: HTTPAuthorizationCredentials = Depends(security)
) -> CurrentClient:
    """
    FastAPI dependency to get the current client from the bearer token.

    Args:
        credentials: HTTP Authorization credentials (injected)

    Returns:
        Current authenticated client

    Raises:
        HTTPException: 401 if token is invalid or expired
    """
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )

    try:
        token = credentials.credentials
        payload = jwt.decode(token, config.SECRET_KEY, algorithms=[config.ALGORITHM])
    except JWTError as e:
        logger.warning(f"JWT validation error: {e}")
        raise credentials_exception

    subject = payload.get("sub")
    if not subject:
        raise credentials_exception
    return CurrentClient(subject=str(subject), token=token)


@router.post("/token", response_model=schemas.Token)
def login(form: schemas.TokenRequest):
    """
    Exchange the configured API credentials for an access token.

    Raises:
        HTTPException: 401 if the credentials do not match
    """
    username_ok = secrets.compare_digest(form.username.encode(), config.API_USERNAME.encode())
    password_ok = secrets.compare_digest(form.password.encode(), config.API_PASSWORD.encode())
    if not (username_ok and password_ok):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect username or password",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return {"access_token": create_access_token({"sub": form.username}), "token_type": "bearer"}
