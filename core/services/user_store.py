# =============================================================================
# core/services/user_store.py - In-Memory User Store
# =============================================================================
# Owns the ordered user collection and the id counter.
# Every operation runs under one lock, so each call is atomic and
# mutations are totally ordered. Nothing is logged while the lock is held.
# =============================================================================

import logging
import re
import threading
from collections.abc import Iterable

from core.errors import (
    EmailConflictError,
    InvalidArgumentError,
    InvalidUserIdError,
    UserNotFoundError,
)
from core.models.user import User

logger = logging.getLogger(__name__)

_USER_ID_PATTERN = re.compile(r"[+-]?[0-9]+")

DEMO_USERS: tuple[tuple[str, str], ...] = (
    ("John Doe", "john@example.com"),
    ("Jane Smith", "jane@example.com"),
    ("Mike Wilson", "mike@example.com"),
)


def parse_user_id(raw_id: object) -> int:
    """
    Parse a user id from a path segment or an int.

    Only whole base-10 integers are accepted ("12", "+12", "-3").
    Decimals, blanks, and anything with extra characters are rejected.

    Raises:
        InvalidUserIdError: If the value is not a valid id
    """
    if isinstance(raw_id, bool):
        raise InvalidUserIdError(raw_id)
    if isinstance(raw_id, int):
        return raw_id
    if isinstance(raw_id, str) and _USER_ID_PATTERN.fullmatch(raw_id):
        try:
            return int(raw_id)
        except ValueError:
            # Longer than the interpreter allows for int()
            raise InvalidUserIdError(raw_id) from None
    raise InvalidUserIdError(raw_id)


def _is_filled(value: object) -> bool:
    return isinstance(value, str) and value != ""


class UserStore:
    """
    Process-local user collection.

    Records are kept in insertion order. Ids come from a counter that only
    moves forward, so an id is never handed out twice, even after a delete.

    Callers always receive copies; mutating a returned User does not touch
    the store.
    """

    def __init__(self, seed: Iterable[tuple[str, str]] = ()):
        self._lock = threading.Lock()
        self._users: list[User] = []
        self._next_id = 1

        for name, email in seed:
            self.create(name, email)

    # -------------------------------------------------------------------------
    # Reads
    # -------------------------------------------------------------------------

    def list_all(self) -> list[User]:
        """Return every live user in insertion order."""
        with self._lock:
            return [user.model_copy() for user in self._users]

    def search(self, query: object) -> list[User]:
        """
        Find users whose name contains `query`, ignoring case.

        Returns an empty list when nothing matches.

        Raises:
            InvalidArgumentError: If query is missing, empty, or not a string
        """
        if not _is_filled(query):
            raise InvalidArgumentError(
                'Query parameter "name" is required',
                code="SEARCH_QUERY_REQUIRED",
                suggestion="Call /api/v1/users/search?name=<text>",
            )

        needle = query.casefold()
        with self._lock:
            return [
                user.model_copy()
                for user in self._users
                if needle in user.name.casefold()
            ]

    def get_by_id(self, user_id: object) -> User:
        """
        Get one user.

        Raises:
            InvalidUserIdError: If user_id is malformed (checked first)
            UserNotFoundError: If no live user has that id
        """
        parsed_id = parse_user_id(user_id)

        with self._lock:
            index = self._index_of(parsed_id)
            return self._users[index].model_copy()

    # -------------------------------------------------------------------------
    # Writes
    # -------------------------------------------------------------------------

    def create(self, name: object, email: object) -> User:
        """
        Create a user and assign it the next id.

        Raises:
            InvalidArgumentError: If name or email is missing or empty
            EmailConflictError: If the email belongs to a live user
        """
        if not _is_filled(name) or not _is_filled(email):
            raise InvalidArgumentError(
                "Name and email are required",
                code="USER_FIELDS_REQUIRED",
                suggestion='Send a JSON body like {"name": "...", "email": "..."}',
            )

        with self._lock:
            if self._email_owner(email) is not None:
                raise EmailConflictError(email)

            user = User(id=self._next_id, name=name, email=email)
            self._next_id += 1
            self._users.append(user)
            created = user.model_copy()

        logger.info(f"Created user: {created.id}")
        return created

    def update(
        self,
        user_id: object,
        name: object = None,
        email: object = None,
    ) -> User:
        """
        Overwrite the supplied fields of an existing user.

        Empty strings count as "not supplied".

        Raises:
            InvalidUserIdError: If user_id is malformed
            UserNotFoundError: If no live user has that id
            InvalidArgumentError: If neither name nor email is supplied
            EmailConflictError: If the new email belongs to another live user
        """
        parsed_id = parse_user_id(user_id)

        with self._lock:
            index = self._index_of(parsed_id)

            new_name = name if _is_filled(name) else None
            new_email = email if _is_filled(email) else None
            if new_name is None and new_email is None:
                raise InvalidArgumentError(
                    "At least one of name or email is required",
                    code="UPDATE_FIELDS_REQUIRED",
                )

            if new_email is not None:
                owner = self._email_owner(new_email)
                if owner is not None and owner != parsed_id:
                    raise EmailConflictError(new_email)

            user = self._users[index]
            if new_name is not None:
                user.name = new_name
            if new_email is not None:
                user.email = new_email
            updated = user.model_copy()

        logger.info(f"Updated user: {updated.id}")
        return updated

    def delete(self, user_id: object) -> User:
        """
        Remove a user. Its id is never reassigned.

        Raises:
            InvalidUserIdError: If user_id is malformed
            UserNotFoundError: If no live user has that id
        """
        parsed_id = parse_user_id(user_id)

        with self._lock:
            index = self._index_of(parsed_id)
            removed = self._users.pop(index)

        logger.info(f"Deleted user: {removed.id}")
        return removed

    # -------------------------------------------------------------------------
    # Helpers (caller holds the lock)
    # -------------------------------------------------------------------------

    def _index_of(self, user_id: int) -> int:
        for index, user in enumerate(self._users):
            if user.id == user_id:
                return index
        raise UserNotFoundError(user_id)

    def _email_owner(self, email: str) -> int | None:
        for user in self._users:
            if user.email == email:
                return user.id
        return None
