# server/core/accounts.py

import logging
import pydantic

from core.errors import UserExistsError, InvalidCredentialsError, CorruptStoreError
from core.security import get_password_hash, verify_password
from core.store import JsonStore
from models.user import User


logger = logging.getLogger(__name__)


def _parse_users(records: list[dict]) -> list[User]:
    try:
        return [User.model_validate(r) for r in records]
    except pydantic.ValidationError as e:
        raise CorruptStoreError("User data file holds malformed records") from e


class AccountRegistry:
    """
    User records over a JsonStore. Usernames are unique and case-sensitive.
    """

    def __init__(self, store: JsonStore):
        self.store = store

    def register(self, username: str, password: str) -> User:
        # hashed outside the store lock
        user = User(username=username, password_hash=get_password_hash(password))

        with self.store.transaction() as records:
            if any(u.username == username for u in _parse_users(records)):
                raise UserExistsError()
            records.append(user.to_record())

        logger.info("Registered user %s", username)
        return user

    def get(self, username: str) -> User | None:
        for user in self.list_all():
            if user.username == username:
                return user
        return None

    def authenticate(self, username: str, password: str) -> str:
        user = self.get(username)
        if not user or not verify_password(password, user.password_hash):
            logger.info("Failed login for %s", username)
            raise InvalidCredentialsError()
        return user.username

    def list_all(self) -> list[User]:
        return _parse_users(self.store.load())
