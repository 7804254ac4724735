"""Global constants used throughout the application.

This module centralizes all magic numbers, string literals, and configuration
values that are used across multiple modules. Using constants prevents hardcoding
values and makes it easy to change them globally.
"""

from typing import Final

# ============================================================================
# Error Codes
# ============================================================================


# Validation Errors
ERROR_CODE_VALIDATION_FAILED = "VALIDATION_FAILED"
ERROR_CODE_UNSUPPORTED_MIME_TYPE = "UNSUPPORTED_MIME_TYPE"
ERROR_CODE_FILE_SIZE_EXCEEDED = "FILE_SIZE_EXCEEDED"

# Storage Errors
ERROR_CODE_S3 = "S3_ERROR"
ERROR_CODE_IMAGE_LIST_FAILED = "IMAGE_LIST_FAILED"
ERROR_CODE_IMAGE_READ_FAILED = "IMAGE_READ_FAILED"
ERROR_CODE_IMAGE_UPLOAD_FAILED = "IMAGE_UPLOAD_FAILED"
ERROR_CODE_IMAGE_REPLACE_FAILED = "IMAGE_REPLACE_FAILED"

# Mapping Errors
ERROR_CODE_IMAGE_MAPPING_FAILED = "IMAGE_MAPPING_FAILED"


# ============================================================================
# File Upload Constraints
# ============================================================================

UPLOAD_FIELD_NAME = "myFile"

MAX_UPLOAD_SIZE = 10 * 1024 * 1024  # 10MB in bytes

DEFAULT_ALLOWED_MIME_TYPES: Final[tuple[str, ...]] = (
    "image/png",
    "image/jpeg",
    "image/gif",
)

FALLBACK_CONTENT_TYPE = "application/octet-stream"

# ============================================================================
# HTTP Configuration
# ============================================================================

API_PREFIX = "/api/v1"
DEFAULT_PORT = 8080
DEFAULT_HOST = "0.0.0.0"
DEFAULT_STATIC_DIR = "./static"

CORS_ORIGIN = "*"
CORS_METHODS: Final[tuple[str, ...]] = ("GET", "HEAD", "POST", "PUT", "OPTIONS", "DELETE")
CORS_HEADERS: Final[tuple[str, ...]] = ("X-Requested-With",)
DEFAULT_CONTENT_TYPE = "application/json; charset=utf-8"

# ============================================================================
# Environment Variable Names
# ============================================================================

ENV_PORT = "PORT"
ENV_BUCKET = "BUCKET"
ENV_STATIC_DIR = "STATIC_DIR"
ENV_ALLOWED_MIME_TYPES = "ALLOWED_MIME_TYPES"
ENV_MAX_UPLOAD_SIZE = "MAX_UPLOAD_SIZE"
ENV_IMAGE_KEY_PREFIX = "IMAGE_KEY_PREFIX"
ENV_AWS_ENDPOINT_URL = "AWS_ENDPOINT_URL"
ENV_AWS_REGION = "AWS_REGION"
ENV_LOG_LEVEL = "LOG_LEVEL"

DEFAULT_AWS_REGION = "us-east-1"
DEFAULT_LOG_LEVEL = "INFO"

SERVICE_NAME = "image-api"

# ============================================================================
# Helper Functions
# ============================================================================


def get_max_upload_size_mb(size_bytes: int = MAX_UPLOAD_SIZE) -> int:
    """Get maximum upload size in megabytes."""
    return size_bytes // (1024 * 1024)
