# server/core/config.py

import os
from functools import lru_cache
from pathlib import Path
from dotenv import load_dotenv
from pydantic import BaseModel


load_dotenv()


DEFAULT_SECRET_KEY = "change_me"


class Settings(BaseModel):
    """
    Process-wide configuration, read from the environment (and `.env`) once.
    """
    project_name: str = os.getenv("PROJECT_NAME", "Postboard API")
    version: str = "0.1.0"

    secret_key: str = os.getenv("JWT_SECRET_KEY", DEFAULT_SECRET_KEY)
    algorithm: str = os.getenv("JWT_ALGORITHM", "HS256")
    access_token_expire_minutes: int = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "60"))

    data_dir: Path = Path(os.getenv("DATA_DIR", "."))
    users_file: str = os.getenv("USERS_FILE", "users.json")
    posts_file: str = os.getenv("POSTS_FILE", "posts.json")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3000"))
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str | None = os.getenv("LOG_FILE") or None
    cors_origins: str = os.getenv("CORS_ORIGINS", "*")

    @property
    def users_path(self) -> Path:
        return self.data_dir / self.users_file

    @property
    def posts_path(self) -> Path:
        return self.data_dir / self.posts_file

    @property
    def cors_origin_list(self) -> list[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]


@lru_cache
def get_settings() -> Settings:
    return Settings()
