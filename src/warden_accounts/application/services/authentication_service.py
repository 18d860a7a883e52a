"""Authentication service for login and token refresh."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from warden_accounts.domain import Identity
from warden_auth import (
    AccountLockedError,
    InvalidCredentialsError,
    InvalidTokenError,
    JWTService,
    PasswordHashingService,
    TokenKind,
)
from warden_auth.repositories import IssuedTokenRepository

if TYPE_CHECKING:
    from warden_accounts.repositories import UserRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TokenPair:
    access_token: str = field(repr=False)
    refresh_token: str = field(repr=False)
    identity: Identity


class AuthenticationService:
    """
    Application service for bearer token authentication.

    Bridges the generic warden_auth infrastructure (password hashing, JWT
    tokens, issued token store) with the account domain:
    - Login with username or email
    - Access token refresh
    - Revocation-aware token checks
    """

    def __init__(
        self,
        user_repository: UserRepository,
        token_repository: IssuedTokenRepository,
        password_service: PasswordHashingService,
        jwt_service: JWTService,
    ):
        self._user_repo = user_repository
        self._token_repo = token_repository
        self._password_service = password_service
        self._jwt_service = jwt_service

    async def _issue(self, identity: Identity, kind: TokenKind) -> str:
        token = self._jwt_service.issue(identity, kind)
        await self._token_repo.save(
            kind=kind,
            user_id=identity.user_id,
            token=token,
            expires_at=self._jwt_service.expiry(token),
        )
        return token

    async def _find_by_login(self, login: str) -> Identity | None:
        identity = await self._user_repo.find_by_username(login)
        if identity is None:
            identity = await self._user_repo.find_by_email(login)
        return identity

    async def login(self, login: str, password: str) -> TokenPair:
        """
        Authenticate with username or email and issue a token pair.

        Raises
        ------
        InvalidCredentialsError
            If no account matches or the password is wrong
        AccountLockedError
            If the account is blocked or not yet verified
        """
        identity = await self._find_by_login(login)
        if identity is None:
            raise InvalidCredentialsError

        if not self._password_service.verify(password, identity.password_hash):
            logger.info("Failed login for user %s", identity.user_id)
            raise InvalidCredentialsError

        if not identity.can_log_in:
            raise AccountLockedError

        access_token = await self._issue(identity, TokenKind.ACCESS)
        refresh_token = await self._issue(identity, TokenKind.REFRESH)

        logger.info("User logged in: %s", identity.username)
        return TokenPair(
            access_token=access_token,
            refresh_token=refresh_token,
            identity=identity,
        )

    async def refresh_access(self, refresh_token: str) -> str:
        """
        Issue a new access token for a valid, persisted refresh token.

        Raises
        ------
        InvalidTokenError
            If the token is invalid, not a refresh token, unknown to the
            store, or its owner is gone or locked
        """
        claims = self._jwt_service.decode_identity(refresh_token)
        if not claims.is_refresh_token():
            msg = "Not a refresh token"
            raise InvalidTokenError(msg)

        if not await self._token_repo.is_active(TokenKind.REFRESH, refresh_token):
            msg = "Refresh token is not active"
            raise InvalidTokenError(msg)

        identity = await self._user_repo.find_by_id(claims.user_id)
        if identity is None or not identity.can_log_in:
            msg = "User not found"
            raise InvalidTokenError(msg)

        logger.debug("Access token refreshed for user: %s", identity.user_id)
        return await self._issue(identity, TokenKind.ACCESS)

    async def is_token_active(self, token: str, kind: TokenKind = TokenKind.ACCESS) -> bool:
        """Valid signature and expiry, and still present and unexpired in the store."""
        if not self._jwt_service.validate(token):
            return False
        return await self._token_repo.is_active(kind, token)
