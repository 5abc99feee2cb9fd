# server/core/security.py

import logging
from datetime import datetime, timedelta, timezone
from jose import JWTError, jwt
from passlib.context import CryptContext

from core.errors import TokenMissingError, TokenInvalidError


logger = logging.getLogger(__name__)


BCRYPT_ROUNDS = 10

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=BCRYPT_ROUNDS)


# -------------------------------
# Passwords
# -------------------------------

def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except ValueError:
        logger.warning("Stored password hash could not be identified")
        return False


# -------------------------------
# Tokens
# -------------------------------

class TokenService:
    """
    Issues and verifies signed, time-limited identity tokens (JWT).
    The token binds a single `username` claim plus its `exp`.
    """

    def __init__(self, secret_key: str, algorithm: str = "HS256", expires_delta: timedelta = timedelta(hours=1)):
        self.secret_key = secret_key
        self.algorithm = algorithm
        self.expires_delta = expires_delta

    def issue(self, username: str, expires_delta: timedelta | None = None) -> str:
        expire = datetime.now(timezone.utc) + (expires_delta if expires_delta is not None else self.expires_delta)
        to_encode = {"username": username, "exp": expire}
        return jwt.encode(to_encode, self.secret_key, algorithm=self.algorithm)

    def verify(self, token: str | None) -> str:
        if not token:
            raise TokenMissingError()
        try:
            payload = jwt.decode(
                token, self.secret_key, algorithms=[self.algorithm], options={"require_exp": True}
            )
        except JWTError as e:
            logger.info("Rejected token: %s", e)
            raise TokenInvalidError() from e

        username = payload.get("username")
        if not isinstance(username, str):
            raise TokenInvalidError()
        return username
