"""
Record store for the user collection.

The whole collection lives in a single JSON document: an array of
``{id, name, email, role}`` objects, pretty printed with a two space
indent.  Every read loads the entire file and every write replaces it.
There is no locking, so two concurrent writers race and the last one
wins.

``RecordStore`` is the capability the service layer depends on.
``JSONFileStore`` is the production implementation and ``MemoryStore``
keeps the collection in a list, which is what the tests use.
"""

import abc
import copy
import json
import logging
from pathlib import Path
from typing import List, Optional, Sequence, Union

from pydantic import TypeAdapter
from pydantic import ValidationError as SchemaError

from user_directory.app.core.config import get_data_path
from user_directory.app.core.errors import PersistenceError
from user_directory.app.schemas.user import User

logger = logging.getLogger(__name__)

_USER_LIST = TypeAdapter(List[User])

# Written to the data file the first time the application starts.
SEED_USERS = [
    {"id": 1, "name": "Jean Dupont", "email": "jean.dupont@email.com", "role": "admin"},
    {"id": 2, "name": "Marie Martin", "email": "marie.martin@email.com", "role": "moderator"},
    {"id": 3, "name": "Pierre Durand", "email": "pierre.durand@email.com", "role": "user"},
    {"id": 4, "name": "Sophie Bernard", "email": "sophie.bernard@email.com", "role": "user"},
    {"id": 5, "name": "Lucas Petit", "email": "lucas.petit@email.com", "role": "user"},
    {"id": 6, "name": "Emma Roux", "email": "emma.roux@email.com", "role": "user"},
    {"id": 7, "name": "Thomas Moreau", "email": "thomas.moreau@email.com", "role": "user"},
    {"id": 8, "name": "Julie Simon", "email": "julie.simon@email.com", "role": "user"},
    {"id": 9, "name": "Nicolas Michel", "email": "nicolas.michel@email.com", "role": "user"},
    {"id": 10, "name": "Camille Garcia", "email": "camille.garcia@email.com", "role": "user"},
]


def seed_users() -> List[User]:
    return [User(**data) for data in SEED_USERS]


class RecordStore(abc.ABC):
    """Reads and writes the complete user collection."""

    @abc.abstractmethod
    def read_all(self) -> List[User]:
        """Return the persisted collection.  Must not raise."""

    @abc.abstractmethod
    def write_all(self, users: Sequence[User]) -> None:
        """Replace the persisted collection, raising ``PersistenceError`` on failure."""

    @staticmethod
    def next_id(users: Sequence[User]) -> int:
        """Return ``1`` for an empty collection, else the highest id plus one.

        Deleting the user holding the highest id makes that id available
        again for the next creation.
        """
        if not users:
            return 1
        return max(user.id for user in users) + 1

    @staticmethod
    def _check_sequence(users) -> None:
        if not isinstance(users, (list, tuple)):
            raise PersistenceError("Users must be stored as a list")


class JSONFileStore(RecordStore):
    """Store backed by a JSON file on disk."""

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path)

    def read_all(self) -> List[User]:
        if not self.path.exists():
            logger.info("Data file %s not found, writing the seed users", self.path)
            users = seed_users()
            try:
                self.write_all(users)
            except PersistenceError:
                logger.error("Could not initialise data file %s", self.path)
                return []
            return users

        try:
            content = self.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            logger.error("Could not read data file %s: %s", self.path, exc)
            return []

        try:
            data = json.loads(content)
        except ValueError as exc:
            logger.warning("Data file %s is not valid JSON: %s", self.path, exc)
            return []

        if not isinstance(data, list):
            logger.warning("Data file %s does not contain a list of users", self.path)
            return []

        try:
            return _USER_LIST.validate_python(data)
        except SchemaError as exc:
            logger.warning("Data file %s contains malformed users: %s", self.path, exc)
            return []

    def write_all(self, users: Sequence[User]) -> None:
        self._check_sequence(users)
        payload = json.dumps(
            [user.model_dump() for user in users],
            indent=2,
            ensure_ascii=False,
        )
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(payload, encoding="utf-8")
        except OSError as exc:
            logger.error("Could not write data file %s: %s", self.path, exc)
            raise PersistenceError("Unable to save users") from exc


class MemoryStore(RecordStore):
    """Store keeping the collection in memory.

    Reads and writes copy the records so callers never share state with
    the store, mirroring the behaviour of the file store.
    """

    def __init__(self, users: Optional[Sequence[User]] = None) -> None:
        self._users: List[User] = copy.deepcopy(list(users or []))

    def read_all(self) -> List[User]:
        return copy.deepcopy(self._users)

    def write_all(self, users: Sequence[User]) -> None:
        self._check_sequence(users)
        self._users = copy.deepcopy(list(users))


_store: Optional[RecordStore] = None


def get_store() -> RecordStore:
    """FastAPI dependency returning the process-wide file store."""
    global _store
    if _store is None:
        _store = JSONFileStore(get_data_path())
    return _store
