from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from domain.value_objects.mime_type import MediaTypePolicy


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        # make it absolute so reload/CWD doesn't break it
        env_file=Path(__file__).resolve().parents[1] / ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = Field(default="ThumbnailService", validation_alias="APP_NAME")
    app_env: Literal["development", "staging", "production"] = Field(
        default="development",
        validation_alias="APP_ENV",
    )
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")
    log_dir: Path = Field(
        default=Path(__file__).resolve().parents[1] / "logs",
        validation_alias="LOG_DIR",
    )

    # API
    api_host: str = Field(default="127.0.0.1", validation_alias="API_HOST")
    api_port: int = Field(default=8091, validation_alias="API_PORT")

    # Authentication
    jwt_secret: str = Field(default="", validation_alias="JWT_SECRET")
    jwt_algorithm: str = Field(default="HS256", validation_alias="JWT_ALGORITHM")
    jwt_issuer: str | None = Field(
        default=None,
        validation_alias="JWT_ISSUER",
        description="Expected 'iss' claim. Not checked when unset.",
    )

    # Thumbnail ingestion
    upload_memory_budget: int = Field(
        default=10 << 20,
        gt=0,
        validation_alias="UPLOAD_MEMORY_BUDGET",
        description="Byte ceiling for a single thumbnail upload.",
    )
    storage_strategy: Literal["inline", "file"] = Field(
        default="inline",
        validation_alias="STORAGE_STRATEGY",
    )
    media_type_policy: MediaTypePolicy = Field(
        default=MediaTypePolicy.STRICT,
        validation_alias="MEDIA_TYPE_POLICY",
    )
    asset_root: Path = Field(
        default=Path("assets"),
        validation_alias="ASSET_ROOT",
        description="Directory holding file-strategy thumbnails.",
    )

    # MongoDB (video metadata store)
    mongo_uri: str = Field(
        default="mongodb://localhost:27017",
        validation_alias="MONGO_URI",
    )
    mongo_db: str = Field(default="thumbnail_service", validation_alias="MONGO_DB")
    mongo_videos_collection: str = Field(
        default="videos",
        validation_alias="MONGO_VIDEOS_COLLECTION",
    )


# Global settings instance
settings = Settings()
