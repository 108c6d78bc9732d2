import logging

from fastapi import APIRouter, Body, Depends, HTTPException

from calmmind.auth.schemas import LoginRequest, TokenResponse, UserBase, UserCreate, UserOut
from calmmind.auth.service import get_current_user, handle_login, handle_signup
from calmmind.core.config import Settings
from calmmind.core.dependency import get_settings, get_storage
from calmmind.storage.base import Storage

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/auth", tags=["Auth"])


@router.post(
    "/register",
    response_model=UserOut,
    summary="Register a new user",
    responses={
        200: {"description": "User created successfully"},
        409: {"description": "Username already registered"},
    },
)
def register_route(
    user: UserCreate = Body(...),
    storage: Storage = Depends(get_storage),
) -> UserOut:
    return UserOut.model_validate(handle_signup(user, storage))


@router.post(
    "/login",
    response_model=TokenResponse,
    summary="Login and receive a bearer token",
    responses={
        200: {"description": "Login successful"},
        401: {"description": "Invalid credentials"},
    },
)
def login_route(
    credentials: LoginRequest,
    storage: Storage = Depends(get_storage),
    settings: Settings = Depends(get_settings),
) -> TokenResponse:
    try:
        return handle_login(credentials, storage, settings)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Login failed: {e}")
        raise HTTPException(status_code=500, detail="Login failed")


@router.get(
    "/me",
    response_model=UserOut,
    summary="Get the current user",
    responses={401: {"description": "Unauthorized"}},
)
def me_route(user: UserBase = Depends(get_current_user)) -> UserOut:
    return UserOut.model_validate(user)
