"""Fixture data and shared constants."""

from e2e.data.constants import ApiEndpoints, ErrorMessages, HomePageTexts, Routes
from e2e.data.users import (
    User,
    admin_user,
    default_user,
    invalid_user,
    to_payload,
    valid_user,
    with_overrides,
)

__all__ = [
    "ApiEndpoints",
    "ErrorMessages",
    "HomePageTexts",
    "Routes",
    "User",
    "admin_user",
    "default_user",
    "invalid_user",
    "to_payload",
    "valid_user",
    "with_overrides",
]
