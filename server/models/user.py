# server/models/user.py

from pydantic import BaseModel, ConfigDict, Field


# -------------------------------
# User Model
# -------------------------------

class User(BaseModel):
    """
    Stored user record.
    The hash is persisted under the `password` key, matching existing users.json files.
    """
    model_config = ConfigDict(populate_by_name=True)

    username: str
    password_hash: str = Field(alias="password")

    def to_record(self) -> dict:
        return self.model_dump(by_alias=True)


class Credentials(BaseModel):
    username: str
    password: str


class Account(BaseModel):
    """
    Public view of a user. Never carries the password hash.
    """
    username: str


class Token(BaseModel):
    token: str


class Message(BaseModel):
    message: str
