"""JWT token service.

Issues and verifies the signed bearer tokens (access and refresh) that
carry an identity and its role set.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Any

import jwt

from warden_auth.exceptions import InvalidTokenError
from warden_auth.schemas import RoleClaim, TokenIdentity, TokenKind, TokenSubject

logger = logging.getLogger(__name__)


class JWTService:
    """Service for bearer token creation and verification.

    The subject is ``"{user_id},{email}"`` and the ``roles`` claim is a list
    of ``{"id": ..., "name": ...}`` objects. Tokens are pure values: nothing
    here consults the persisted token tables.

    Examples
    --------
    >>> service = JWTService(secret_key="your-secret-key")
    >>> token = service.create_access_token(identity)
    >>> service.validate(token)
    True
    >>> service.decode_identity(token).user_id
    42
    """

    DEFAULT_ACCESS_EXPIRE_MINUTES = 60
    DEFAULT_REFRESH_EXPIRE_MINUTES = 7 * 24 * 60
    DEFAULT_ISSUER = "warden"
    ALGORITHM = "HS256"
    ROLES_CLAIM = "roles"
    KIND_CLAIM = "typ"

    def __init__(
        self,
        secret_key: str,
        access_token_expire_minutes: int = DEFAULT_ACCESS_EXPIRE_MINUTES,
        refresh_token_expire_minutes: int = DEFAULT_REFRESH_EXPIRE_MINUTES,
        issuer: str = DEFAULT_ISSUER,
    ):
        """Initialize the JWT service.

        Parameters
        ----------
        secret_key
            Shared HMAC secret for signing tokens. Must be kept secure.
        access_token_expire_minutes
            Minutes until an access token expires
        refresh_token_expire_minutes
            Minutes until a refresh token expires
        issuer
            Value written to and required in the ``iss`` claim
        """
        if not secret_key:
            msg = "JWT secret key cannot be empty"
            raise ValueError(msg)

        self._secret_key = secret_key
        self._issuer = issuer
        self._lifetimes = {
            TokenKind.ACCESS: timedelta(minutes=access_token_expire_minutes),
            TokenKind.REFRESH: timedelta(minutes=refresh_token_expire_minutes),
        }

    def issue(
        self,
        identity: TokenSubject,
        kind: TokenKind,
        expires_delta: timedelta | None = None,
    ) -> str:
        """Build and sign a bearer token for ``identity``.

        Parameters
        ----------
        identity
            The identity the token proves (user id, email, roles)
        kind
            Access or refresh; selects the configured lifetime
        expires_delta
            Custom expiration time (optional)

        Returns
        -------
        The encoded JWT token string
        """
        now = datetime.now(tz=timezone.utc)
        expire = now + (expires_delta if expires_delta is not None else self._lifetimes[kind])

        payload = {
            "sub": f"{identity.user_id},{identity.email}",
            "iss": self._issuer,
            "iat": now,
            "exp": expire,
            self.KIND_CLAIM: kind.value,
            self.ROLES_CLAIM: [role.to_claim() for role in identity.role_claims],
        }

        return jwt.encode(payload, self._secret_key, algorithm=self.ALGORITHM)

    def create_access_token(
        self,
        identity: TokenSubject,
        expires_delta: timedelta | None = None,
    ) -> str:
        return self.issue(identity, TokenKind.ACCESS, expires_delta)

    def create_refresh_token(
        self,
        identity: TokenSubject,
        expires_delta: timedelta | None = None,
    ) -> str:
        return self.issue(identity, TokenKind.REFRESH, expires_delta)

    def validate(self, token: str | None) -> bool:
        """Check signature, issuer, expiry and claim structure.

        Never raises. The specific rejection cause is logged for operators;
        callers only see the boolean.
        """
        try:
            self.decode_identity(token)
        except InvalidTokenError as e:
            logger.warning("Bearer token rejected: %s", e.message)
            return False
        return True

    def decode_identity(self, token: str | None) -> TokenIdentity:
        """Verify ``token`` and decode the identity it carries.

        Raises
        ------
        InvalidTokenError
            If the token is invalid, expired, or any claim is malformed
        """
        payload = self._decode(token)

        try:
            user_id, email = self._parse_subject(payload["sub"])
            kind = TokenKind(payload[self.KIND_CLAIM])
            roles = self._parse_roles(payload[self.ROLES_CLAIM])
            expires_at = datetime.fromtimestamp(payload["exp"], tz=timezone.utc)
        except KeyError as e:
            raise InvalidTokenError(f"Malformed token payload: missing {e}") from e
        except (TypeError, ValueError) as e:
            raise InvalidTokenError(f"Malformed token payload: {e}") from e

        return TokenIdentity(
            user_id=user_id,
            email=email,
            roles=roles,
            token_kind=kind,
            expires_at=expires_at,
        )

    def expiry(self, token: str | None) -> datetime:
        """Return the UTC expiration timestamp of a valid token."""
        return self.decode_identity(token).expires_at

    def _decode(self, token: str | None) -> dict[str, Any]:
        if not isinstance(token, str) or not token.strip():
            msg = "Token is null, empty or only whitespace"
            raise InvalidTokenError(msg)

        try:
            return jwt.decode(
                token,
                self._secret_key,
                algorithms=[self.ALGORITHM],
                issuer=self._issuer,
                options={"require": ["sub", "iss", "iat", "exp"]},
            )
        except jwt.ExpiredSignatureError as e:
            raise InvalidTokenError("Token has expired") from e
        except jwt.InvalidSignatureError as e:
            raise InvalidTokenError("Token signature is invalid") from e
        except jwt.DecodeError as e:
            raise InvalidTokenError(f"Token is malformed: {e}") from e
        except jwt.InvalidTokenError as e:
            raise InvalidTokenError(f"Invalid token: {e}") from e

    @staticmethod
    def _parse_subject(subject: Any) -> tuple[int, str]:
        if not isinstance(subject, str):
            msg = "subject must be a string"
            raise TypeError(msg)
        user_id, separator, email = subject.partition(",")
        if not separator or not email:
            msg = "subject must be '<user_id>,<email>'"
            raise ValueError(msg)
        return int(user_id), email

    @staticmethod
    def _parse_roles(claim: Any) -> tuple[RoleClaim, ...]:
        if not isinstance(claim, list):
            msg = "roles claim must be a list"
            raise TypeError(msg)

        roles = []
        for entry in claim:
            if not isinstance(entry, dict):
                msg = "roles claim entries must be objects"
                raise TypeError(msg)
            role_id = entry["id"]
            name = entry["name"]
            if isinstance(role_id, bool) or not isinstance(role_id, int):
                msg = "role id must be an integer"
                raise TypeError(msg)
            if not isinstance(name, str) or not name:
                msg = "role name must be a non-empty string"
                raise ValueError(msg)
            roles.append(RoleClaim(id=role_id, name=name))
        return tuple(roles)
