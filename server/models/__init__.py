# server/models/__init__.py

from .user import User, Credentials, Account, Token, Message
from .post import Post, PostCreate, PostRemove
