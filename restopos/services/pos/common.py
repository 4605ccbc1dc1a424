from typing import Iterable

from restopos.core.exceptions import ConfirmationRequired


def require_confirmation(confirm: bool, action: str) -> None:
    """Destructive operations only run once the caller has confirmed them."""
    if not confirm:
        raise ConfirmationRequired(action)


class IdSequence:
    """Monotonic integer ids. Deleting a record never frees its id."""

    def __init__(self, records: Iterable = ()):
        self._last_id = max((r.id for r in records), default=0)

    @property
    def last_id(self) -> int:
        return self._last_id

    def next_id(self) -> int:
        self._last_id += 1
        return self._last_id
