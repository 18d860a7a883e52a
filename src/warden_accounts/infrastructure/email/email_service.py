"""SMTP notifier for verification and password mails."""

import logging
import re
import smtplib
import ssl
from email.mime.text import MIMEText

from warden_accounts.exceptions import InvalidEmailMessageError
from warden_config.settings import Settings

logger = logging.getLogger(__name__)

EMAIL_PATTERN = re.compile(r"^[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,6}$")


class EmailService:
    """
    Plain-text mail delivery configured from ``SMTP_*`` settings.

    With ``smtp_enabled`` off the mail is validated and logged but not sent,
    so development setups run without a mail server. Delivery errors
    propagate; the lifecycle processes turn them into "mail not sent"
    responses.
    """

    def __init__(self, settings: Settings):
        self._settings = settings

    @staticmethod
    def validate(to: str, subject: str, text: str) -> None:
        """
        Raises
        ------
        InvalidEmailMessageError
            If the recipient is not an email address or subject or body is blank
        """
        if not to or not EMAIL_PATTERN.match(to):
            msg = f"Invalid recipient address: {to!r}"
            raise InvalidEmailMessageError(msg)
        if not subject or not subject.strip():
            msg = "Mail subject cannot be blank"
            raise InvalidEmailMessageError(msg)
        if not text or not text.strip():
            msg = "Mail body cannot be blank"
            raise InvalidEmailMessageError(msg)

    def send_email(self, to: str, subject: str, text: str) -> None:
        self.validate(to, subject, text)

        if not self._settings.smtp_enabled:
            logger.warning("SMTP disabled, email '%s' not sent to %s", subject, to)
            return

        message = self._build(to, subject, text)
        try:
            self._deliver(message)
        except Exception as e:
            logger.error("Failed to send '%s' to %s: %s", subject, to, e)
            raise
        logger.info("Email '%s' sent to %s", subject, to)

    def _build(self, to: str, subject: str, text: str) -> MIMEText:
        settings = self._settings
        message = MIMEText(text, "plain", "utf-8")
        message["Subject"] = subject
        message["From"] = f"{settings.smtp_from_name} <{settings.smtp_from_email}>"
        message["To"] = to
        return message

    def _connect(self) -> smtplib.SMTP:
        settings = self._settings
        if not settings.smtp_host:
            msg = "SMTP host not configured"
            raise RuntimeError(msg)

        # smtp_use_tls without STARTTLS means implicit TLS, usually port 465
        if settings.smtp_use_tls and not settings.smtp_starttls:
            return smtplib.SMTP_SSL(
                settings.smtp_host,
                settings.smtp_port,
                context=ssl.create_default_context(),
            )
        return smtplib.SMTP(settings.smtp_host, settings.smtp_port)

    def _deliver(self, message: MIMEText) -> None:
        settings = self._settings
        with self._connect() as server:
            if settings.smtp_starttls:
                server.starttls(context=ssl.create_default_context())
            if settings.smtp_user:
                password = settings.smtp_password.get_secret_value() if settings.smtp_password else ""
                server.login(settings.smtp_user, password)
            server.send_message(message)
