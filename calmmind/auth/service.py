import logging
from fastapi import HTTPException, Depends
from datetime import datetime, timedelta, timezone
from jose import jwt, JWTError
from passlib.context import CryptContext
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from typing import Optional

from calmmind.auth.schemas import LoginRequest, TokenResponse, UserBase, UserCreate, UserOut
from calmmind.core.config import Settings
from calmmind.core.dependency import get_settings, get_storage
from calmmind.storage.base import Storage

# Initialize logger and security tools
logger = logging.getLogger(__name__)
pwd = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")
bearer = HTTPBearer(auto_error=False)


def hash_password(password: str) -> str:
    """
    Hashes a plaintext password.

    Args:
        password (str): Raw password input.

    Returns:
        str: Salted PBKDF2 hash.
    """
    return pwd.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd.verify(plain_password, hashed_password)


def create_token(user_id: int, settings: Settings, expires_delta: Optional[timedelta] = None) -> str:
    now = datetime.now(timezone.utc)
    if not expires_delta:
        expires_delta = timedelta(minutes=settings.access_token_expire_minutes)
    payload = {
        "sub": str(user_id),
        "type": "access",
        "iat": int(now.timestamp()),
        "exp": now + expires_delta,
    }
    return jwt.encode(payload, settings.secret_key, algorithm=settings.algorithm)


def decode_token(token: str, settings: Settings) -> dict:
    """
    Decodes and validates a JWT token.

    Raises:
        HTTPException: If token is invalid or expired.
    """
    try:
        return jwt.decode(token, settings.secret_key, algorithms=[settings.algorithm])
    except JWTError:
        raise HTTPException(status_code=401, detail="Invalid or expired authentication token")


def _user_id_from_credentials(creds: HTTPAuthorizationCredentials, settings: Settings) -> int:
    payload = decode_token(creds.credentials, settings)
    user_id = payload.get("sub")
    if not user_id:
        raise HTTPException(status_code=401, detail="Token missing subject field")
    try:
        return int(user_id)
    except ValueError:
        raise HTTPException(status_code=401, detail="Invalid user ID in token")


def get_optional_user_id(
    creds: Optional[HTTPAuthorizationCredentials] = Depends(bearer),
    settings: Settings = Depends(get_settings),
) -> Optional[int]:
    """
    Session user for routes that also serve anonymous callers.

    No token means anonymous; a bad token is still rejected with 401.
    """
    if creds is None:
        return None
    return _user_id_from_credentials(creds, settings)


def get_current_user_id(
    creds: Optional[HTTPAuthorizationCredentials] = Depends(bearer),
    settings: Settings = Depends(get_settings),
) -> int:
    if creds is None:
        raise HTTPException(status_code=401, detail="User not authenticated")
    return _user_id_from_credentials(creds, settings)


def get_current_user(
    user_id: int = Depends(get_current_user_id),
    storage: Storage = Depends(get_storage),
) -> UserBase:
    user = storage.get_user(user_id)
    if not user:
        raise HTTPException(status_code=401, detail="User not found")
    return user


def handle_signup(user: UserCreate, storage: Storage) -> UserBase:
    """
    Registers a user with a hashed password.

    Raises:
        HTTPException: 409 if the username is taken.
    """
    if storage.get_user_by_username(user.username):
        raise HTTPException(status_code=409, detail="Username already registered")
    created = storage.create_user(user.model_copy(update={"password": hash_password(user.password)}))
    logger.info(f"Registered user {created.id}")
    return created


def handle_login(credentials: LoginRequest, storage: Storage, settings: Settings) -> TokenResponse:
    user = storage.get_user_by_username(credentials.username)
    if not user or not verify_password(credentials.password, user.password):
        raise HTTPException(status_code=401, detail="Invalid username or password")
    return TokenResponse(
        access_token=create_token(user.id, settings),
        user=UserOut.model_validate(user),
    )
