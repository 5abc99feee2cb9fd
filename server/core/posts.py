# server/core/posts.py

import logging
import pydantic

from core.errors import CorruptStoreError
from core.store import JsonStore
from models.post import Post


logger = logging.getLogger(__name__)


def _parse_posts(records: list[dict]) -> list[Post]:
    try:
        return [Post.model_validate(r) for r in records]
    except pydantic.ValidationError as e:
        raise CorruptStoreError("Post data file holds malformed records") from e


class PostRegistry:
    """
    Post records over a JsonStore.

    New posts get `id = len(posts) + 1`. After a removal that id can collide
    with a surviving post; ids are only unique while nothing is deleted.
    """

    def __init__(self, store: JsonStore):
        self.store = store

    def create(self, owner: str, content: str) -> Post:
        with self.store.transaction() as records:
            existing = _parse_posts(records)
            post = Post(id=len(existing) + 1, username=owner, content=content)
            records.append(post.model_dump())

        logger.info("User %s created post %d", owner, post.id)
        return post

    def list_all(self) -> list[Post]:
        return _parse_posts(self.store.load())

    def list_by_owner(self, owner: str) -> list[Post]:
        return [p for p in self.list_all() if p.username == owner]

    def remove_by_id(self, post_id: int) -> None:
        with self.store.transaction() as records:
            existing = _parse_posts(records)
            remaining = [p.model_dump() for p in existing if p.id != post_id]
            removed = len(existing) - len(remaining)
            records[:] = remaining

        logger.info("Removed %d post(s) with id %d", removed, post_id)
