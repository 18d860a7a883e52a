"""Identity aggregate and its roles."""

from dataclasses import dataclass, field

from warden_auth.schemas import RoleClaim


@dataclass(frozen=True)
class Role:
    """A named permission group, e.g. ``ROLE_USER``."""

    role_id: int
    name: str

    def to_claim(self) -> RoleClaim:
        return RoleClaim(id=self.role_id, name=self.name)


@dataclass(frozen=True)
class Identity:
    """
    A registered account.

    Identities are created unverified and unblocked at registration time.
    They are never deleted by this package; confirmation, unlock and
    password changes produce updated copies via the store.

    Attributes
    ----------
    user_id
        Store-assigned numeric identifier
    username
        Unique login name
    email
        Unique email address
    password_hash
        bcrypt hash of the current password
    roles
        Roles attached through the user_roles association
    blocked
        Account is blocked and must be unlocked via confirmation
    verified
        The email address was confirmed
    """

    user_id: int
    username: str
    email: str
    password_hash: str
    roles: frozenset[Role] = field(default_factory=frozenset)
    blocked: bool = False
    verified: bool = False

    @property
    def role_claims(self) -> tuple[RoleClaim, ...]:
        return tuple(
            role.to_claim() for role in sorted(self.roles, key=lambda r: r.role_id)
        )

    @property
    def can_log_in(self) -> bool:
        return self.verified and not self.blocked

    def __repr__(self) -> str:
        return (
            f"Identity(user_id={self.user_id}, username={self.username}, "
            f"email={self.email}, blocked={self.blocked}, verified={self.verified})"
        )


@dataclass(frozen=True)
class GeneratedPassword:
    """An identity with a freshly generated plaintext password.

    The plaintext exists only to be mailed once; it is never persisted.
    """

    identity: Identity
    plaintext: str = field(repr=False)
