from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import User, UserDraft


class UserRepository(Protocol):
    """Gateway interface for user accounts.

    Note (DIP): the service layer depends on this interface, not on the REST client.
    """

    def list_users(self, *, limit: Optional[int] = None) -> Sequence[User]:
        raise NotImplementedError

    def get_by_id(self, user_id: str) -> Optional[User]:
        raise NotImplementedError

    def create_user(self, draft: UserDraft) -> str:
        raise NotImplementedError

    def update_user(self, user_id: str, draft: UserDraft) -> None:
        raise NotImplementedError

    def delete_by_id(self, user_id: str) -> None:
        raise NotImplementedError
