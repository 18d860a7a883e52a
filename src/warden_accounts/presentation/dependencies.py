"""FastAPI dependency injection for warden.

Provides dependencies for:
- Database sessions
- Authentication (current identity from a bearer token)
- Service instances
"""

import logging
from typing import Annotated

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from warden_accounts.application import (
    AccountLifecycleService,
    AccountProcessFactory,
    AccountStores,
    AuthenticationService,
    MailComposer,
)
from warden_accounts.infrastructure.email import EmailService
from warden_accounts.infrastructure.persistence.sqlalchemy import (
    ConfirmationTokenRepositorySQLAlchemy,
    RoleRepositorySQLAlchemy,
    UserRepositorySQLAlchemy,
    get_db_session,
)
from warden_auth import (
    ConfirmationTokenGenerator,
    InvalidTokenError,
    JWTService,
    PasswordGenerator,
    PasswordHashingService,
    TokenIdentity,
)
from warden_auth.persistence.sqlalchemy import IssuedTokenRepositorySQLAlchemy
from warden_config.settings import Settings, get_settings

logger = logging.getLogger(__name__)

# Security scheme for JWT Bearer tokens
security = HTTPBearer(auto_error=False)

AppSettings = Annotated[Settings, Depends(get_settings)]


# -----------------------------------------------------------------------------
# Services
# -----------------------------------------------------------------------------


def get_jwt_service(settings: AppSettings) -> JWTService:
    """Get JWT service configured with application settings."""
    return JWTService(
        secret_key=settings.jwt_secret_key.get_secret_value(),
        access_token_expire_minutes=settings.jwt_access_token_expire_minutes,
        refresh_token_expire_minutes=settings.jwt_refresh_token_expire_minutes,
        issuer=settings.jwt_issuer,
    )


def get_password_service(settings: AppSettings) -> PasswordHashingService:
    return PasswordHashingService(rounds=settings.bcrypt_rounds)


def get_email_service(settings: AppSettings) -> EmailService:
    return EmailService(settings)


def get_process_factory(
    settings: AppSettings,
    password_service: Annotated[PasswordHashingService, Depends(get_password_service)],
) -> AccountProcessFactory:
    return AccountProcessFactory(
        password_service=password_service,
        token_generator=ConfirmationTokenGenerator(settings.confirmation_token_length),
        password_generator=PasswordGenerator(settings.generated_password_length),
        mail_composer=MailComposer(settings.confirmation_mail_url),
        default_role_id=settings.default_role_id,
    )


async def get_account_lifecycle_service(
    settings: AppSettings,
    session: AsyncSession = Depends(get_db_session),
    process_factory: AccountProcessFactory = Depends(get_process_factory),
    email_service: EmailService = Depends(get_email_service),
) -> AccountLifecycleService:
    """Get the lifecycle facade bound to the request's session."""
    stores = AccountStores(
        users=UserRepositorySQLAlchemy(session),
        roles=RoleRepositorySQLAlchemy(session),
        confirmation_tokens=ConfirmationTokenRepositorySQLAlchemy(
            session,
            ttl_minutes=settings.confirmation_token_ttl_minutes,
        ),
    )
    return AccountLifecycleService(process_factory, stores, email_service)


async def get_authentication_service(
    session: AsyncSession = Depends(get_db_session),
    jwt_service: JWTService = Depends(get_jwt_service),
    password_service: PasswordHashingService = Depends(get_password_service),
) -> AuthenticationService:
    return AuthenticationService(
        user_repository=UserRepositorySQLAlchemy(session),
        token_repository=IssuedTokenRepositorySQLAlchemy(session),
        password_service=password_service,
        jwt_service=jwt_service,
    )


LifecycleService = Annotated[AccountLifecycleService, Depends(get_account_lifecycle_service)]
AuthService = Annotated[AuthenticationService, Depends(get_authentication_service)]


# -----------------------------------------------------------------------------
# Current Identity (bearer token)
# -----------------------------------------------------------------------------


def get_bearer_token(
    request: Request,
    settings: AppSettings,
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
) -> str | None:
    """
    Extract the bearer token from the request.

    The ``Authorization: Bearer`` header wins; the JWT cookie is the
    fallback for browser clients.
    """
    if credentials is not None and credentials.credentials:
        return credentials.credentials
    return request.cookies.get(settings.jwt_cookie_name) or None


def get_current_identity_optional(
    token: str | None = Depends(get_bearer_token),
    jwt_service: JWTService = Depends(get_jwt_service),
) -> TokenIdentity | None:
    """
    Optional authentication dependency.

    Returns the identity of a valid access token, None otherwise. Refresh
    tokens are not accepted here.
    """
    if token is None:
        return None

    try:
        identity = jwt_service.decode_identity(token)
    except InvalidTokenError as e:
        logger.warning("Invalid token: %s", e.message)
        return None

    # Refresh tokens are only accepted by AuthenticationService.refresh_access
    if not identity.is_access_token():
        logger.warning("Refresh token used as access token for user: %s", identity.user_id)
        return None

    return identity


def get_current_identity(
    identity: TokenIdentity | None = Depends(get_current_identity_optional),
) -> TokenIdentity:
    """
    FastAPI dependency for endpoints that require authentication.

    Raises
    ------
    HTTPException
        401 if the token is missing, invalid, expired or not an access token
    """
    if identity is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return identity


# Type alias for injected current identity
CurrentIdentity = Annotated[TokenIdentity, Depends(get_current_identity)]
