from typing import Dict, Iterable, Iterator

from .models import UNKNOWN_USER, User


class Directory:
    """Read-only lookup of workspace users by id"""

    def __init__(self, users: Iterable[User]):
        self._users: Dict[str, User] = {u.id: u for u in users}

    def __iter__(self) -> Iterator[User]:
        return iter(self._users.values())

    def user_by_id(self, user_id: str | None) -> User:
        """Return the user, or a placeholder named 'none' for unknown ids"""
        if user_id is None:
            return UNKNOWN_USER
        return self._users.get(user_id, UNKNOWN_USER)

    def display_name(self, user_id: str | None) -> str:
        return self.user_by_id(user_id).name
