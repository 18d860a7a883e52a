"""Unit tests for PasswordHashingService."""

import pytest

from warden_auth.exceptions import WeakPasswordError
from warden_auth.services import PasswordHashingService


class TestPasswordHashingService:
    """Tests for password hashing and verification."""

    def setup_method(self):
        """Set up test fixtures."""
        # Low rounds keep the suite fast
        self.service = PasswordHashingService(rounds=4)

    def test_hash_and_verify(self):
        """A hashed password verifies."""
        password_hash = self.service.hash("pw1")

        assert password_hash != "pw1"
        assert password_hash.startswith("$2")
        assert self.service.verify("pw1", password_hash)

    def test_verify_wrong_password(self):
        """A different password does not verify."""
        password_hash = self.service.hash("correct horse")

        assert not self.service.verify("battery staple", password_hash)

    def test_hashes_are_salted(self):
        """Hashing the same password twice gives different hashes."""
        assert self.service.hash("same") != self.service.hash("same")

    def test_empty_password_rejected(self):
        """Empty passwords cannot be hashed."""
        with pytest.raises(WeakPasswordError, match="empty"):
            self.service.hash("")

    def test_password_over_72_bytes_rejected(self):
        """bcrypt's input limit is enforced instead of silently truncating."""
        with pytest.raises(WeakPasswordError, match="72 bytes"):
            self.service.hash("ä" * 37)

    @pytest.mark.parametrize("password_hash", [None, "", "not-a-bcrypt-hash"])
    def test_verify_invalid_hash_returns_false(self, password_hash):
        """Missing or corrupt hashes never verify."""
        assert self.service.verify("pw1", password_hash) is False
