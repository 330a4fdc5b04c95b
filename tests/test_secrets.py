"""Tests for provisioning/secrets.py.

Tests chap-secrets account replacement, permissions and invalid entries.
"""

import stat
from pathlib import Path

from models import UserCredential
from provisioning.secrets import configure_users, format_secret_line, merge_user


def _active_lines(path: Path, username: str) -> list[str]:
    return [line for line in path.read_text().splitlines() if line.split()[:1] == [username]]


class TestFormatSecretLine:
    """Tests for format_secret_line function."""

    def test_wildcards(self) -> None:
        """Test server and address are wildcards."""
        assert format_secret_line(UserCredential.parse("alice:pw1")) == "alice\t*\tpw1\t*"


class TestMergeUser:
    """Tests for merge_user function."""

    def test_replaces_and_appends(self) -> None:
        """Test old line removed, new line at end, others in order."""
        lines = [
            "# client\tserver\tsecret\tIP addresses",
            "alice\t*\told\t*",
            "carol pptpd carolpw *",
        ]

        result = merge_user(lines, UserCredential.parse("alice:new"))

        assert result == [
            "# client\tserver\tsecret\tIP addresses",
            "carol pptpd carolpw *",
            "alice\t*\tnew\t*",
        ]

    def test_leading_whitespace_matched(self) -> None:
        """Test indented line for the user is replaced."""
        result = merge_user(["   alice * old *"], UserCredential.parse("alice:new"))
        assert result == ["alice\t*\tnew\t*"]

    def test_prefix_names_untouched(self) -> None:
        """Test users sharing a prefix are not removed."""
        lines = ["alice2\t*\tpw\t*", "al\t*\tpw\t*"]
        result = merge_user(lines, UserCredential.parse("alice:new"))
        assert result[:2] == lines


class TestConfigureUsers:
    """Tests for configure_users function."""

    def test_creates_file_with_mode_600(self, tmp_path: Path, sample_users: list[UserCredential]) -> None:
        """Test file created with restrictive permissions."""
        path = tmp_path / "ppp" / "chap-secrets"

        written = configure_users(sample_users, path)

        assert written == ["alice", "bob"]
        assert stat.S_IMODE(path.stat().st_mode) == 0o600
        assert path.read_text() == "alice\t*\tpw1\t*\nbob\t*\tpw2\t*\n"

    def test_existing_file_permissions_tightened(self, tmp_path: Path, sample_users: list[UserCredential]) -> None:
        """Test world-readable file is restricted."""
        path = tmp_path / "chap-secrets"
        path.write_text("")
        path.chmod(0o644)

        configure_users(sample_users, path)

        assert stat.S_IMODE(path.stat().st_mode) == 0o600

    def test_previous_lines_replaced(self, tmp_path: Path, sample_users: list[UserCredential]) -> None:
        """Test exactly one active line per user with new passwords."""
        path = tmp_path / "chap-secrets"
        path.write_text(
            "# Secrets for authentication using CHAP\n"
            "alice\t*\toldpw\t*\n"
            "dave\t*\tdavepw\t*\n"
            "bob pptpd stale *\n"
        )

        configure_users(sample_users, path)

        assert _active_lines(path, "alice") == ["alice\t*\tpw1\t*"]
        assert _active_lines(path, "bob") == ["bob\t*\tpw2\t*"]
        assert "oldpw" not in path.read_text()
        assert "stale" not in path.read_text()
        assert path.read_text().splitlines()[:2] == [
            "# Secrets for authentication using CHAP",
            "dave\t*\tdavepw\t*",
        ]

    def test_rerun_keeps_single_line(self, tmp_path: Path, sample_users: list[UserCredential]) -> None:
        """Test repeated runs never duplicate accounts."""
        path = tmp_path / "chap-secrets"

        configure_users(sample_users, path)
        first = path.read_bytes()
        configure_users(sample_users, path)

        assert path.read_bytes() == first

    def test_invalid_entries_skipped(self, tmp_path: Path, caplog) -> None:
        """Test invalid entries are warned about and not written."""
        path = tmp_path / "chap-secrets"
        users = [
            UserCredential.parse("alice:pw1"),
            UserCredential.parse("nopass"),
            UserCredential.parse(":pw"),
            UserCredential.parse("bob:"),
            UserCredential.parse(":hunter2"),
            UserCredential.parse("john doe:s3cret"),
        ]

        written = configure_users(users, path)

        assert written == ["alice"]
        assert path.read_text() == "alice\t*\tpw1\t*\n"
        assert "Ignoring invalid user definition: nopass" in caplog.text
        assert "Ignoring invalid user definition: bob:<no password>" in caplog.text
        assert "Ignoring invalid user definition: <empty>:***" in caplog.text
        assert "Ignoring invalid user definition: john doe:***" in caplog.text
        assert "hunter2" not in caplog.text
        assert "s3cret" not in caplog.text

    def test_duplicate_user_last_wins(self, tmp_path: Path) -> None:
        """Test same user twice in one run keeps the last password."""
        path = tmp_path / "chap-secrets"
        users = [UserCredential.parse("alice:first"), UserCredential.parse("alice:second")]

        written = configure_users(users, path)

        assert written == ["alice"]
        assert path.read_text() == "alice\t*\tsecond\t*\n"

    def test_default_account(self, tmp_path: Path) -> None:
        """Test default user:123 account line."""
        path = tmp_path / "chap-secrets"

        configure_users([UserCredential.parse("user:123")], path)

        assert _active_lines(path, "user") == ["user\t*\t123\t*"]

    def test_passwords_not_logged(self, tmp_path: Path, caplog) -> None:
        """Test secrets never reach the log."""
        configure_users([UserCredential.parse("alice:topsecret")], tmp_path / "chap-secrets")
        assert "topsecret" not in caplog.text
