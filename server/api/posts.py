# server/api/posts.py

from fastapi import APIRouter, Depends, status
from fastapi.responses import PlainTextResponse

from api.auth import get_current_user
from core.posts import PostRegistry
from database import get_post_registry
from models.post import Post, PostCreate, PostRemove


router = APIRouter()


@router.post("/createPost", response_model=Post, status_code=status.HTTP_201_CREATED)
def create_post(
    body: PostCreate,
    current_user: str = Depends(get_current_user),
    posts: PostRegistry = Depends(get_post_registry),
):
    return posts.create(current_user, body.content)


@router.get("/posts", response_model=list[Post])
def list_posts(posts: PostRegistry = Depends(get_post_registry)):
    return posts.list_all()


@router.get("/userPosts", response_model=list[Post])
def list_user_posts(
    current_user: str = Depends(get_current_user),
    posts: PostRegistry = Depends(get_post_registry),
):
    return posts.list_by_owner(current_user)


@router.post("/removePost", response_class=PlainTextResponse)
def remove_post(
    body: PostRemove,
    current_user: str = Depends(get_current_user),
    posts: PostRegistry = Depends(get_post_registry),
):
    """
    Removes the post with the given id. Succeeds even if no such post exists.
    """
    posts.remove_by_id(body.post_id)
    return "Post removed"
