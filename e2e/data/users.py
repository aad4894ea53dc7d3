"""User fixture data: a default value plus pure override helpers."""

import time
from dataclasses import asdict, dataclass, replace
from typing import Any, Dict, Optional

DEFAULT_PASSWORD = "TestPassword123!"


@dataclass(frozen=True)
class User:
    email: str
    password: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    username: Optional[str] = None


def default_user() -> User:
    """A valid user with a unique, timestamped email address."""
    return User(
        email=f"test.user.{int(time.time() * 1000)}@example.com",
        password=DEFAULT_PASSWORD,
    )


def with_overrides(user: User, **changes: Any) -> User:
    return replace(user, **changes)


def valid_user() -> User:
    return default_user()


def admin_user() -> User:
    return with_overrides(
        default_user(),
        email="admin@example.com",
        password="AdminPassword123!",
        first_name="Admin",
        last_name="User",
    )


def invalid_user() -> User:
    return with_overrides(default_user(), email="invalid@example.com", password="wrong")


def to_payload(user: User) -> Dict[str, Any]:
    """Serialize a user for an API request body, dropping unset fields."""
    return {k: v for k, v in asdict(user).items() if v is not None}
