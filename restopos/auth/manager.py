import secrets
from typing import Optional

from restopos.core.config import settings
from restopos.schemas.user import Actor, Role


def _accounts():
    return {
        settings.admin_username.lower(): (settings.admin_password, Role.admin),
        settings.staff_username.lower(): (settings.staff_password, Role.staff),
    }


def authenticate(username: str, password: str) -> Optional[Actor]:
    """Usernames are case-insensitive, passwords are not."""
    key = (username or "").strip().lower()
    account = _accounts().get(key)
    if account is None:
        return None
    expected, role = account
    if not secrets.compare_digest(password or "", expected):
        return None
    return Actor(username=key, role=role)
