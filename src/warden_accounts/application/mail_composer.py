"""Builds the mails sent by the lifecycle flows."""

from dataclasses import dataclass

from warden_accounts.domain import ConfirmationToken, GeneratedPassword, Identity

CONFIRMATION_SUBJECT = "Confirmation message"
NEW_PASSWORD_SUBJECT = "New password message"

VERIFICATION_TEXT = """Dear {username},
to complete please enter to link:
{link}"""

NEW_PASSWORD_TEXT = """Dear {username},
your new password is:
{password}

Please change your password after login, as soon as possible."""

PASSWORD_CHANGED_TEXT = """Hello,
this is information mail only,
password was changed if it wasn't you, please restore your password immediately."""


@dataclass(frozen=True)
class MailMessage:
    to: str
    subject: str
    text: str


class MailComposer:
    """Renders mail bodies for verification and password flows.

    Parameters
    ----------
    confirmation_url
        Front-end route that accepts ``{token_id}/{token}``; must end in ``/``
    """

    def __init__(self, confirmation_url: str):
        self._confirmation_url = confirmation_url

    def confirmation_link(self, token: ConfirmationToken) -> str:
        return f"{self._confirmation_url}{token.token_id}/{token.token}"

    def verification(self, identity: Identity, token: ConfirmationToken) -> MailMessage:
        return MailMessage(
            to=identity.email,
            subject=CONFIRMATION_SUBJECT,
            text=VERIFICATION_TEXT.format(
                username=identity.username,
                link=self.confirmation_link(token),
            ),
        )

    def new_password(self, generated: GeneratedPassword) -> MailMessage:
        return MailMessage(
            to=generated.identity.email,
            subject=NEW_PASSWORD_SUBJECT,
            text=NEW_PASSWORD_TEXT.format(
                username=generated.identity.username,
                password=generated.plaintext,
            ),
        )

    def password_changed(self, identity: Identity) -> MailMessage:
        return MailMessage(
            to=identity.email,
            subject=NEW_PASSWORD_SUBJECT,
            text=PASSWORD_CHANGED_TEXT,
        )
