"""Mints and retires single-use confirmation tokens."""

import logging

from warden_accounts.domain import ConfirmationToken, Identity
from warden_accounts.repositories import ConfirmationTokenRepository
from warden_auth.services import ConfirmationTokenGenerator

logger = logging.getLogger(__name__)


class ConfirmationTokenIssuer:
    """Issues confirmation tokens for an identity and retires them after use."""

    def __init__(
        self,
        token_repository: ConfirmationTokenRepository,
        token_generator: ConfirmationTokenGenerator,
    ):
        self._token_repo = token_repository
        self._generator = token_generator

    async def issue(self, identity: Identity | None) -> ConfirmationToken | None:
        """
        Generate and persist a token for ``identity``.

        Returns
        -------
        The stored token re-read from the store, or None if there is no
        identity or the store could not allocate a token
        """
        if identity is None:
            return None

        token_id = await self._token_repo.create(identity.user_id, self._generator.generate())
        if token_id is None:
            logger.warning("Confirmation token not allocated for user %s", identity.user_id)
            return None

        token = await self._token_repo.find_by_id(token_id)
        if token is not None:
            logger.debug("Issued confirmation token %s for user %s", token_id, identity.user_id)
        return token

    async def find(self, token_id: int) -> ConfirmationToken | None:
        return await self._token_repo.find_by_id(token_id)

    async def retire(self, token_id: int) -> bool:
        """Expire a token now. False if it was already expired or retired."""
        retired = await self._token_repo.retire(token_id)
        if not retired:
            logger.info("Confirmation token %s was already retired", token_id)
        return retired
