"""Unit tests for MailComposer."""

from datetime import datetime, timezone

from warden_accounts.application import MailComposer
from warden_accounts.domain import ConfirmationToken, GeneratedPassword
from tests.shared.fixtures.factories import make_identity


class TestMailComposer:
    """Tests for the rendered mails."""

    def setup_method(self):
        """Set up test fixtures."""
        self.composer = MailComposer("https://app.example.com/confirm/")
        self.identity = make_identity(username="alice", email="alice@x.com")

    def test_verification_mail(self):
        """The verification mail links to '<url><token_id>/<token>'."""
        token = ConfirmationToken(
            token_id=17,
            user_id=1,
            token="abc123",
            expires_at=datetime.now(tz=timezone.utc),
        )

        message = self.composer.verification(self.identity, token)

        assert message.to == "alice@x.com"
        assert message.subject == "Confirmation message"
        assert "Dear alice" in message.text
        assert "https://app.example.com/confirm/17/abc123" in message.text

    def test_new_password_mail(self):
        """The new-password mail carries the plaintext."""
        generated = GeneratedPassword(identity=self.identity, plaintext="Xy7!abcdEFGH")

        message = self.composer.new_password(generated)

        assert message.subject == "New password message"
        assert "Xy7!abcdEFGH" in message.text
        assert "Xy7!abcdEFGH" not in repr(generated)

    def test_password_changed_mail(self):
        """The change notice is informational only."""
        message = self.composer.password_changed(self.identity)

        assert message.to == "alice@x.com"
        assert message.subject == "New password message"
        assert "information mail only" in message.text
