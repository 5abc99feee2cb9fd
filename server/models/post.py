# server/models/post.py

from pydantic import BaseModel, ConfigDict, Field, StrictInt


class Post(BaseModel):
    id: int
    username: str
    content: str


class PostCreate(BaseModel):
    content: str


class PostRemove(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    post_id: StrictInt = Field(alias="postId")
