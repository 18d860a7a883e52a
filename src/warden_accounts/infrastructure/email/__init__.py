from warden_accounts.infrastructure.email.email_service import EmailService

__all__ = ["EmailService"]
