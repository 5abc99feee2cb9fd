# server/core/errors.py

"""
Exception hierarchy shared by the store, the registries and the API layer.

Every error carries the HTTP status it maps to and a short message that is
safe to show to the client.
"""


class PostboardError(Exception):
    status_code = 500
    message = "Internal server error"

    def __init__(self, message: str | None = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


# -------------------------------
# Domain errors
# -------------------------------

class ValidationError(PostboardError):
    status_code = 400
    message = "Invalid request"


class UserExistsError(ValidationError):
    message = "User already exists"


class AuthError(PostboardError):
    status_code = 401
    message = "Not authenticated"


class InvalidCredentialsError(AuthError):
    message = "Invalid credentials"


class TokenMissingError(AuthError):
    message = "Not authenticated"


class TokenInvalidError(AuthError):
    status_code = 403
    message = "Invalid or expired token"


# -------------------------------
# Storage errors
# -------------------------------

class StoreError(PostboardError):
    status_code = 500
    message = "Storage failure"


class CorruptStoreError(StoreError):
    message = "Stored data is corrupt"
