"""Text formatting utilities.

CSV splitting for CLI values and credential masking for logs.
Passwords never reach the log: use mask_credential() or mask_users()
when logging accounts.
"""

from models import UserCredential


def split_csv(value: str | None) -> list[str]:
    """Split a comma-separated CLI value.

    Items are stripped; empty items are dropped.

    Examples:
        "1.1.1.1, 8.8.8.8," -> ["1.1.1.1", "8.8.8.8"]
        None -> []

    Args:
        value: Raw CLI value or None

    Returns:
        List of non-empty items in original order.
    """
    if not value:
        return []
    return [item.strip() for item in value.split(",") if item.strip()]


def mask_credential(user: UserCredential) -> str:
    """Render one account for logging with the password hidden.

    Examples:
        alice:pw -> "alice:***"
        :pw -> "<empty>:***"
        bob: -> "bob:<no password>"
    """
    name = user.username or "<empty>"
    return f"{name}:***" if user.password else f"{name}:<no password>"


def mask_users(users: list[UserCredential]) -> str:
    """Render accounts for logging with passwords hidden.

    Args:
        users: Credentials to render

    Returns:
        "alice:***,bob:***" or "<none>" if empty.
    """
    if not users:
        return "<none>"
    return ",".join(mask_credential(user) for user in users)
