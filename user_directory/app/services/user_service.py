"""
Business logic for users.

``UserService`` performs CRUD operations on the user collection.  Each
call loads the full collection from the record store, changes it in
memory and writes it back; nothing is cached between calls.

Failures are not handled uniformly, and callers rely on that:

* reads (``list_all``, ``get_by_id``) log and return an empty result;
* ``create`` and ``update`` raise ``CreationError``/``UpdateError``;
* ``delete`` logs and returns ``False``.

Input validation and email uniqueness are the API layer's job.
"""

import logging
from typing import List, Optional

from fastapi import Depends

from user_directory.app.core.errors import CreationError, NotFoundError, UpdateError
from user_directory.app.core.storage import RecordStore, get_store
from user_directory.app.schemas.user import DEFAULT_ROLE, User

logger = logging.getLogger(__name__)


class UserService:
    """Service for working with users stored in a ``RecordStore``."""

    def __init__(self, store: RecordStore) -> None:
        self.store = store

    def list_all(self) -> List[User]:
        """Return every user, or an empty list if the store cannot be read."""
        try:
            return self.store.read_all()
        except Exception:
            logger.exception("Failed to list users")
            return []

    def get_by_id(self, user_id: int) -> Optional[User]:
        try:
            users = self.store.read_all()
        except Exception:
            logger.exception("Failed to load user %s", user_id)
            return None
        return next((user for user in users if user.id == user_id), None)

    def email_taken(self, email: str, exclude_id: Optional[int] = None) -> bool:
        """Return True if a user other than ``exclude_id`` already has ``email``."""
        return any(
            user.email == email and user.id != exclude_id
            for user in self.list_all()
        )

    def create(self, name: str, email: str) -> User:
        """Create a user with a fresh id and the default role.

        Raises ``CreationError`` if the collection cannot be saved.
        """
        try:
            users = self.store.read_all()
            user = User(
                id=self.store.next_id(users),
                name=name,
                email=email,
                role=DEFAULT_ROLE,
            )
            users.append(user)
            self.store.write_all(users)
        except Exception as exc:
            logger.error("Failed to create user %s: %s", email, exc)
            raise CreationError("Unable to create the user") from exc
        logger.info("Created user %s (%s)", user.name, user.email)
        return user

    def update(self, user_id: int, name: str, email: str) -> User:
        """Replace the name and email of an existing user.

        The id and role are kept.  Raises ``NotFoundError`` if no user
        has ``user_id`` and ``UpdateError`` if the change cannot be saved.
        """
        try:
            users = self.store.read_all()
        except Exception as exc:
            logger.error("Failed to load users for update: %s", exc)
            raise UpdateError("Unable to update the user") from exc

        for index, user in enumerate(users):
            if user.id == user_id:
                break
        else:
            raise NotFoundError("User not found")

        updated = user.model_copy(update={"name": name, "email": email})
        users[index] = updated
        try:
            self.store.write_all(users)
        except Exception as exc:
            logger.error("Failed to update user %s: %s", user_id, exc)
            raise UpdateError("Unable to update the user") from exc
        logger.info("Updated user %s (%s)", updated.name, updated.email)
        return updated

    def delete(self, user_id: int) -> bool:
        """Remove a user.

        Returns ``True`` if the user was removed, ``False`` if it did not
        exist or the collection could not be read or saved.
        """
        try:
            users = self.store.read_all()
            remaining = [user for user in users if user.id != user_id]
            if len(remaining) == len(users):
                logger.info("Attempt to delete unknown user %s", user_id)
                return False
            self.store.write_all(remaining)
        except Exception:
            logger.exception("Failed to delete user %s", user_id)
            return False
        logger.info("Deleted user %s", user_id)
        return True


def get_user_service(store: RecordStore = Depends(get_store)) -> UserService:
    """FastAPI dependency building the service on the configured store."""
    return UserService(store)
