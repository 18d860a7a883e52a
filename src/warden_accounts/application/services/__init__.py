from warden_accounts.application.services.account_lifecycle_service import (
    AccountLifecycleService,
)
from warden_accounts.application.services.authentication_service import (
    AuthenticationService,
    TokenPair,
)

__all__ = ["AccountLifecycleService", "AuthenticationService", "TokenPair"]
