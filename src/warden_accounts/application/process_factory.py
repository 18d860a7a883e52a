"""Selects and wires the process for a lifecycle action."""

from dataclasses import dataclass

from warden_accounts.application.confirmation_token_issuer import (
    ConfirmationTokenIssuer,
)
from warden_accounts.application.mail_composer import MailComposer
from warden_accounts.application.processes import (
    AccountProcess,
    ChangePasswordProcess,
    ConfirmationProcess,
    Notifier,
    RegistrationProcess,
    ResetPasswordProcess,
    UnlockProcess,
)
from warden_accounts.domain import AccountAction
from warden_accounts.repositories import (
    ConfirmationTokenRepository,
    RoleRepository,
    UserRepository,
)
from warden_auth.services import (
    ConfirmationTokenGenerator,
    PasswordGenerator,
    PasswordHashingService,
)


@dataclass(frozen=True)
class AccountStores:
    """Store handles for one unit of work; processes take only what they need."""

    users: UserRepository
    roles: RoleRepository | None = None
    confirmation_tokens: ConfirmationTokenRepository | None = None


class AccountProcessFactory:
    """
    Maps each AccountAction to a freshly constructed process.

    The factory itself is stateless per request and can be shared; stores
    and the notifier are passed to ``create`` because they are bound to a
    unit of work.

    Parameters
    ----------
    password_service
        bcrypt hashing for new and changed passwords
    token_generator
        Source of confirmation token strings
    password_generator
        Source of reset passwords
    mail_composer
        Renders the outgoing mails
    default_role_id
        Role attached to every new registration
    """

    def __init__(  # noqa: PLR0913
        self,
        password_service: PasswordHashingService,
        token_generator: ConfirmationTokenGenerator,
        password_generator: PasswordGenerator,
        mail_composer: MailComposer,
        default_role_id: int,
    ):
        self._password_service = password_service
        self._token_generator = token_generator
        self._password_generator = password_generator
        self._mail_composer = mail_composer
        self._default_role_id = default_role_id

    def create(
        self,
        action: AccountAction,
        stores: AccountStores,
        notifier: Notifier,
    ) -> AccountProcess:
        """
        Build the process for ``action``.

        Raises
        ------
        ValueError
            If the action is unknown or a store the process needs is missing
        """
        if action is AccountAction.REGISTRATION:
            return RegistrationProcess(
                user_repository=stores.users,
                role_repository=self._required(stores.roles, "roles", action),
                issuer=self._issuer(stores, action),
                password_service=self._password_service,
                notifier=notifier,
                mail_composer=self._mail_composer,
                default_role_id=self._default_role_id,
            )
        if action is AccountAction.CONFIRMATION:
            return ConfirmationProcess(
                user_repository=stores.users,
                issuer=self._issuer(stores, action),
            )
        if action is AccountAction.UNLOCK:
            return UnlockProcess(
                user_repository=stores.users,
                issuer=self._issuer(stores, action),
                notifier=notifier,
                mail_composer=self._mail_composer,
            )
        if action is AccountAction.RESET_PASSWORD:
            return ResetPasswordProcess(
                user_repository=stores.users,
                password_service=self._password_service,
                password_generator=self._password_generator,
                notifier=notifier,
                mail_composer=self._mail_composer,
            )
        if action is AccountAction.CHANGE_PASSWORD:
            return ChangePasswordProcess(
                user_repository=stores.users,
                password_service=self._password_service,
                notifier=notifier,
                mail_composer=self._mail_composer,
            )

        msg = f"Unknown account action: {action!r}"
        raise ValueError(msg)

    def _issuer(self, stores: AccountStores, action: AccountAction) -> ConfirmationTokenIssuer:
        tokens = self._required(stores.confirmation_tokens, "confirmation_tokens", action)
        return ConfirmationTokenIssuer(tokens, self._token_generator)

    @staticmethod
    def _required(store, name: str, action: AccountAction):
        if store is None:
            msg = f"{action.value} requires the {name} store"
            raise ValueError(msg)
        return store
