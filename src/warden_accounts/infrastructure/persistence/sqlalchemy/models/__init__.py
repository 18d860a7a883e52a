from warden_accounts.infrastructure.persistence.sqlalchemy.models.confirmation_token_model import (
    ConfirmationTokenModel,
)
from warden_accounts.infrastructure.persistence.sqlalchemy.models.user_model import (
    RoleModel,
    UserModel,
    user_roles,
)

__all__ = ["ConfirmationTokenModel", "RoleModel", "UserModel", "user_roles"]
