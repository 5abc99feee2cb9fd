# server/database.py

import logging
from datetime import timedelta
from fastapi import Depends

from core.accounts import AccountRegistry
from core.config import Settings, get_settings, DEFAULT_SECRET_KEY
from core.posts import PostRegistry
from core.security import TokenService
from core.store import JsonStore


logger = logging.getLogger(__name__)


def init_db(settings: Settings):
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    if settings.secret_key == DEFAULT_SECRET_KEY:
        logger.warning("JWT_SECRET_KEY is not set; tokens are signed with the development default")
    logger.info("Data files: %s, %s", settings.users_path, settings.posts_path)


def get_user_store(settings: Settings = Depends(get_settings)) -> JsonStore:
    return JsonStore(settings.users_path)


def get_post_store(settings: Settings = Depends(get_settings)) -> JsonStore:
    return JsonStore(settings.posts_path)


def get_account_registry(store: JsonStore = Depends(get_user_store)) -> AccountRegistry:
    return AccountRegistry(store)


def get_post_registry(store: JsonStore = Depends(get_post_store)) -> PostRegistry:
    return PostRegistry(store)


def get_token_service(settings: Settings = Depends(get_settings)) -> TokenService:
    return TokenService(
        settings.secret_key,
        algorithm=settings.algorithm,
        expires_delta=timedelta(minutes=settings.access_token_expire_minutes),
    )
