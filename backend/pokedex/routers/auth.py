"""
Authentication router for registration, login and the current user.
"""
from fastapi import APIRouter, Depends, status

from pokedex.core.rate_limit import enforce_rate_limit
from pokedex.dependencies.auth import CurrentUserId
from pokedex.dependencies.database import get_auth_service, require_database
from pokedex.schemas.auth import AuthResponse, LoginRequest, RegisterRequest
from pokedex.schemas.user import MeResponse, UserResponse
from pokedex.services.auth_service import AuthService

router = APIRouter(
    prefix="/auth",
    tags=["Authentication"],
    dependencies=[Depends(enforce_rate_limit), Depends(require_database)],
)


@router.post(
    "/register",
    response_model=AuthResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register a new user",
)
async def register(
    body: RegisterRequest,
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    Register a new user account.

    - **username**: 3-30 characters (must be unique)
    - **email**: Valid email address (must be unique)
    - **password**: Password (minimum 6 characters)
    """
    user, token = await auth_service.register(body.username, body.email, body.password)
    return AuthResponse(
        message="User registered successfully",
        token=token,
        user=UserResponse.from_user(user),
    )


@router.post(
    "/login",
    response_model=AuthResponse,
    summary="Login and get access token",
)
async def login(
    body: LoginRequest,
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    Authenticate with email and password to receive a JWT token.

    The token should be sent to protected endpoints as `Authorization: Bearer <token>`.
    """
    user, token = await auth_service.authenticate(body.email, body.password)
    return AuthResponse(
        message="Login successful",
        token=token,
        user=UserResponse.from_user(user),
    )


@router.get(
    "/me",
    response_model=MeResponse,
    summary="Get current user info",
)
async def get_current_user_info(
    user_id: CurrentUserId,
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    Get the currently authenticated user with favorites and team.
    """
    user = await auth_service.get_user(user_id)
    return MeResponse(user=UserResponse.from_user(user))
