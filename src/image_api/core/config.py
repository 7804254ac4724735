"""Application configuration loaded from environment variables."""

import os
from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, Field, StrictStr, field_validator

from image_api.core.utils.constants import (
    DEFAULT_ALLOWED_MIME_TYPES,
    DEFAULT_AWS_REGION,
    DEFAULT_LOG_LEVEL,
    DEFAULT_PORT,
    DEFAULT_STATIC_DIR,
    ENV_ALLOWED_MIME_TYPES,
    ENV_AWS_ENDPOINT_URL,
    ENV_AWS_REGION,
    ENV_BUCKET,
    ENV_IMAGE_KEY_PREFIX,
    ENV_LOG_LEVEL,
    ENV_MAX_UPLOAD_SIZE,
    ENV_PORT,
    ENV_STATIC_DIR,
    MAX_UPLOAD_SIZE,
)


class AppConfig(BaseModel):
    """Runtime settings for the Image API."""

    model_config = ConfigDict(frozen=True)

    port: int = Field(default=DEFAULT_PORT, ge=1, le=65535)
    bucket: StrictStr | None = Field(None, description="Backing bucket name")
    static_dir: StrictStr = Field(default=DEFAULT_STATIC_DIR)
    allowed_mime_types: tuple[str, ...] = Field(default=DEFAULT_ALLOWED_MIME_TYPES)
    max_upload_size: int = Field(default=MAX_UPLOAD_SIZE, gt=0)
    key_prefix: StrictStr = Field(default="")
    aws_endpoint_url: StrictStr | None = None
    aws_region: StrictStr = Field(default=DEFAULT_AWS_REGION)
    log_level: StrictStr = Field(default=DEFAULT_LOG_LEVEL)

    @field_validator("allowed_mime_types", mode="before")
    @classmethod
    def split_mime_types(cls, value: object) -> object:
        """Accept a comma-separated string as well as a sequence."""
        if isinstance(value, str):
            return tuple(m.strip() for m in value.split(",") if m.strip())
        return value

    @field_validator("key_prefix")
    @classmethod
    def normalize_prefix(cls, value: str) -> str:
        value = value.strip("/")
        return f"{value}/" if value else ""

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "AppConfig":
        """Build configuration from ``environ`` (defaults to ``os.environ``).

        Unset or empty variables fall back to their defaults.
        """
        env = os.environ if environ is None else environ

        names = {
            "port": ENV_PORT,
            "bucket": ENV_BUCKET,
            "static_dir": ENV_STATIC_DIR,
            "allowed_mime_types": ENV_ALLOWED_MIME_TYPES,
            "max_upload_size": ENV_MAX_UPLOAD_SIZE,
            "key_prefix": ENV_IMAGE_KEY_PREFIX,
            "aws_endpoint_url": ENV_AWS_ENDPOINT_URL,
            "aws_region": ENV_AWS_REGION,
            "log_level": ENV_LOG_LEVEL,
        }
        values = {field: env.get(name) for field, name in names.items()}

        return cls(**{field: value for field, value in values.items() if value})

    def require_bucket(self) -> str:
        if not self.bucket:
            raise RuntimeError(f"{ENV_BUCKET} environment variable is not set")
        return self.bucket

    def require_static_dir(self) -> str:
        if not os.path.isdir(self.static_dir):
            raise RuntimeError(f"{ENV_STATIC_DIR} {self.static_dir!r} is not a directory")
        return self.static_dir
