import pytest

from shoplists.shared.logging import sanitize_message


@pytest.mark.parametrize(
    ("message", "secret"),
    [
        ("Authorization: Bearer 48213377", "48213377"),
        ("issued token=90210 for user=admin", "90210"),
        ('{"token": "5551234"}', "5551234"),
        ("login password=hunter2 rejected", "hunter2"),
        ('{"username": "admin", "password": "s3cret"}', "s3cret"),
    ],
)
def test_secrets_are_redacted(message: str, secret: str) -> None:
    sanitized = sanitize_message(message)
    assert secret not in sanitized
    assert "***REDACTED***" in sanitized


def test_plain_messages_are_untouched() -> None:
    message = "lists.create: ok (user=admin, list_id=1, dt_ms=0)"
    assert sanitize_message(message) == message
