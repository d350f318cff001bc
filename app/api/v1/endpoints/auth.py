"""
Auth endpoints — login (OAuth2 password flow), token refresh, logout,
customer self-registration and the caller's own profile.
"""

from fastapi import (APIRouter, Cookie, Depends, HTTPException, Request,
                     Response, status)
from fastapi.security import OAuth2PasswordRequestForm
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.v1.deps import (get_auth_service, get_current_user, get_db,
                             get_user_service)
from app.core.config import settings
from app.core.limiter import limiter
from app.core.security import decode_refresh_token
from app.domain.exceptions import UserNotFound
from app.domain.roles import CUSTOMER
from app.models.user import User
from app.repositories.user_repo import UserRepository
from app.schemas.token import MessageResponse, RefreshRequest, Token
from app.schemas.user import RegisterRequest, UserRead
from app.services.auth_service import AuthService, LoginResult, issue_tokens
from app.services.user_service import UserService

router = APIRouter(prefix="/auth", tags=["auth"])


def _set_auth_cookies(response: Response, result: LoginResult) -> None:
    response.set_cookie(
        key="access_token",
        value=f"Bearer {result.access_token}",
        httponly=True,
        secure=settings.COOKIE_SECURE,  # Set to True in HTTPS production
        samesite="lax",
        max_age=settings.ACCESS_TOKEN_EXPIRE_MINUTES * 60,
    )
    response.set_cookie(
        key="refresh_token",
        value=result.refresh_token,
        httponly=True,
        secure=settings.COOKIE_SECURE,
        samesite="lax",
        max_age=settings.REFRESH_TOKEN_EXPIRE_DAYS * 24 * 60 * 60,
    )


def _token(result: LoginResult) -> Token:
    return Token(
        access_token=result.access_token,
        refresh_token=result.refresh_token,
        user=UserRead.model_validate(result.user),
    )


@router.post("/login", response_model=Token)
@limiter.limit(settings.LOGIN_RATE_LIMIT)
async def login_for_access_token(
    request: Request,
    response: Response,
    form_data: OAuth2PasswordRequestForm = Depends(),
    auth: AuthService = Depends(get_auth_service),
) -> Token:
    """Authenticate with email/password. Returns tokens and sets HttpOnly cookies."""
    result = await auth.login(form_data.username, form_data.password)
    _set_auth_cookies(response, result)
    return _token(result)


@router.post("/refresh", response_model=Token)
async def refresh_access_token_endpoint(
    response: Response,
    body: RefreshRequest | None = None,
    refresh_token_cookie: str | None = Cookie(None, alias="refresh_token"),
    db: AsyncSession = Depends(get_db),
) -> Token:
    # Priority: Body > Cookie
    token_str = None
    if body and body.refresh_token:
        token_str = body.refresh_token
    elif refresh_token_cookie:
        token_str = refresh_token_cookie

    if not token_str:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Refresh token missing",
        )

    payload = decode_refresh_token(token_str)
    if payload is None or not str(payload.get("sub", "")).isdigit():
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired refresh token",
        )

    try:
        user = await UserRepository(db).get_by_id(int(payload["sub"]))
    except UserNotFound:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="User not found",
        )

    result = issue_tokens(user)
    _set_auth_cookies(response, result)
    return _token(result)


@router.post("/logout", response_model=MessageResponse)
async def logout(response: Response) -> MessageResponse:
    """Clear auth cookies and end the session."""
    response.delete_cookie("access_token")
    response.delete_cookie("refresh_token")
    return MessageResponse(message="Logged out")


@router.post("/register", response_model=UserRead, status_code=201)
async def register(
    body: RegisterRequest,
    users: UserService = Depends(get_user_service),
) -> User:
    """Public sign-up. The new account is always a CUSTOMER."""
    return await users.create_user(
        executor_role=None,
        name=body.name,
        email=body.email,
        password=body.password,
        target_role=CUSTOMER,
    )


@router.get("/me", response_model=UserRead)
async def read_current_user(
    current_user: User = Depends(get_current_user),
) -> User:
    """Return profile of the currently authenticated user."""
    return current_user
