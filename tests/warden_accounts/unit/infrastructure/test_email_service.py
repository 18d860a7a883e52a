"""Unit tests for EmailService."""

from unittest.mock import MagicMock, patch

import pytest

from warden_accounts.exceptions import InvalidEmailMessageError
from warden_accounts.infrastructure.email import EmailService
from warden_config import Settings

SMTP_PATH = "warden_accounts.infrastructure.email.email_service.smtplib"


def _settings(**overrides) -> Settings:
    values = {
        "jwt_secret_key": "unit-test-secret",
        "smtp_enabled": True,
        "smtp_host": "smtp.example.com",
        "smtp_port": 587,
        "smtp_from_email": "noreply@example.com",
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


class TestEmailValidation:
    """Validation happens before anything is sent."""

    @pytest.mark.parametrize(
        ("to", "subject", "text"),
        [
            ("", "Subject", "Body"),
            ("not-an-address", "Subject", "Body"),
            ("alice@x", "Subject", "Body"),
            ("alice@x.com", "", "Body"),
            ("alice@x.com", "   ", "Body"),
            ("alice@x.com", "Subject", ""),
            ("alice@x.com", "Subject", "\n\t"),
        ],
    )
    def test_invalid_message_rejected(self, to, subject, text):
        service = EmailService(_settings(smtp_enabled=False))

        with pytest.raises(InvalidEmailMessageError):
            service.send_email(to, subject, text)

    def test_valid_message_accepted(self):
        EmailService.validate("alice.smith+test@mail.example.org", "Hi", "Body")


class TestEmailSending:
    """SMTP delivery paths."""

    def test_disabled_smtp_skips_sending(self, caplog):
        service = EmailService(_settings(smtp_enabled=False))

        with patch(SMTP_PATH) as smtplib_mock:
            service.send_email("alice@x.com", "Confirmation message", "Body")

        smtplib_mock.SMTP.assert_not_called()
        assert "SMTP disabled" in caplog.text

    def test_starttls_delivery(self):
        service = EmailService(_settings(smtp_user="mailer", smtp_password="pw"))
        server = MagicMock()

        with patch(SMTP_PATH) as smtplib_mock:
            smtplib_mock.SMTP.return_value.__enter__.return_value = server
            service.send_email("alice@x.com", "Confirmation message", "Body")

        smtplib_mock.SMTP.assert_called_once_with("smtp.example.com", 587)
        server.starttls.assert_called_once()
        server.login.assert_called_once_with("mailer", "pw")
        message = server.send_message.call_args.args[0]
        assert message["To"] == "alice@x.com"
        assert message["Subject"] == "Confirmation message"
        assert message["From"] == "Warden <noreply@example.com>"

    def test_implicit_tls_delivery(self):
        service = EmailService(_settings(smtp_port=465, smtp_starttls=False))
        server = MagicMock()

        with patch(SMTP_PATH) as smtplib_mock:
            smtplib_mock.SMTP_SSL.return_value.__enter__.return_value = server
            service.send_email("alice@x.com", "Subject", "Body")

        smtplib_mock.SMTP.assert_not_called()
        server.login.assert_not_called()
        server.send_message.assert_called_once()

    def test_missing_host_raises(self):
        service = EmailService(_settings(smtp_host=""))

        with pytest.raises(RuntimeError, match="SMTP host"):
            service.send_email("alice@x.com", "Subject", "Body")

    def test_smtp_failure_propagates(self):
        service = EmailService(_settings())

        with patch(SMTP_PATH) as smtplib_mock:
            smtplib_mock.SMTP.side_effect = ConnectionRefusedError
            with pytest.raises(ConnectionRefusedError):
                service.send_email("alice@x.com", "Subject", "Body")
