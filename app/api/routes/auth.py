"""Authentication routes for registration, login and the current user."""
from fastapi import APIRouter, Depends, Request
from app.schemas import UserCreate, UserOut, TokenResponse, LoginRequest, CurrentUser
from app.services.auth_service import AuthService
from app.db.session import get_session
from app.auth import get_current_user
from app.core.limiter import limiter
from sqlalchemy.ext.asyncio import AsyncSession

router = APIRouter(prefix="/auth", tags=["auth"])


def get_auth_service(session: AsyncSession = Depends(get_session)) -> AuthService:
    return AuthService(session)


@router.post("/register", response_model=TokenResponse)
@limiter.limit("5/minute")
async def register(
    request: Request,
    payload: UserCreate,
    auth_service: AuthService = Depends(get_auth_service)
):
    """
    Register a new user account and return a session token.

    Rate limit: 5 requests per minute

    Raises:
        HTTPException: 400 if the email is already registered
    """
    return await auth_service.register(payload)


@router.post("/login", response_model=TokenResponse)
@limiter.limit("10/minute")
async def login(
    request: Request,
    form_data: LoginRequest,
    auth_service: AuthService = Depends(get_auth_service)
):
    """
    Exchange email and password for a session token.

    Rate limit: 10 requests per minute

    Raises:
        HTTPException: 400 with the same message for unknown email and wrong password
    """
    return await auth_service.login(form_data)


@router.get("/me", response_model=UserOut)
async def get_current_user_info(
    current_user: CurrentUser = Depends(get_current_user),
    auth_service: AuthService = Depends(get_auth_service)
):
    """Return the authenticated user without the password hash."""
    return await auth_service.get_user(current_user.id)
