# Third-party imports
from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

# Local application imports
from civicconnect.core.db import get_async_session
from civicconnect.core.errors import AuthenticationRequired
from civicconnect.dependancies.common import get_current_session, get_current_user, get_viewer
from civicconnect.models.auth.profile import Role
from civicconnect.models.auth.session import Session
from civicconnect.models.auth.user import User
from civicconnect.schemas.auth import (
    AccessTokenRequest,
    AccessTokenResponse,
    AuthoritySignupRequest,
    RefreshTokenRequest,
    SignupRequest,
    UserResponse,
    Viewer,
)
from civicconnect.services.auth import (
    AuthorityCodeValidator,
    authenticate_user,
    create_session,
    get_authority_code_validator,
    invalidate_session,
    refresh_session,
    register_authority,
    register_citizen,
)

router = APIRouter(prefix="/auth", tags=["Authentication"])


def _user_response(user: User, role: Role) -> UserResponse:
    return UserResponse(
        id=user.id,
        email=user.email,
        display_name=user.display_name,
        role=role,
        created_at=user.created_at,
    )


@router.post("/signup", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def signup(request: SignupRequest, db: AsyncSession = Depends(get_async_session)):
    """Create a citizen account"""
    user = await register_citizen(db, request)
    return _user_response(user, Role.CITIZEN)


@router.post("/signup/authority", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def signup_authority(
    request: AuthoritySignupRequest,
    db: AsyncSession = Depends(get_async_session),
    validator: AuthorityCodeValidator = Depends(get_authority_code_validator),
):
    """Create an authority account once the access code has been validated"""
    user = await register_authority(db, request, validator)
    return _user_response(user, Role.AUTHORITY)


@router.post("/token", response_model=AccessTokenResponse)
async def login(
    request: AccessTokenRequest,
    http_request: Request,
    db: AsyncSession = Depends(get_async_session),
):
    """Sign in with email and password"""
    user = await authenticate_user(db, request.email, request.password)
    if user is None:
        raise AuthenticationRequired("Invalid login credentials")

    return await create_session(
        db,
        user,
        user_agent=http_request.headers.get("user-agent"),
        ip_address=http_request.client.host if http_request.client else None,
    )


@router.post("/token/refresh", response_model=AccessTokenResponse)
async def refresh_token(request: RefreshTokenRequest, db: AsyncSession = Depends(get_async_session)):
    """Exchange a refresh token for a new token pair"""
    return await refresh_session(db, request.refresh_token)


@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT)
async def logout(
    session: Session = Depends(get_current_session),
    db: AsyncSession = Depends(get_async_session),
) -> None:
    """Sign out of the current session"""
    await invalidate_session(db, session)


@router.get("/me", response_model=UserResponse)
async def me(
    current_user: User = Depends(get_current_user),
    viewer: Viewer = Depends(get_viewer),
):
    """Get the signed-in identity and its role"""
    return _user_response(current_user, viewer.role or Role.CITIZEN)
