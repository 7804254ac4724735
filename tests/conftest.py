"""
Pytest configuration and fixtures for image-api tests.
Provides an in-memory storage gateway, S3 mocking and HTTP client fixtures.
"""

import base64
import logging
from collections.abc import Callable, Iterator
from contextlib import ExitStack
from pathlib import Path
from typing import Any, BinaryIO

import boto3
import pytest
from botocore.exceptions import ClientError
from fastapi.testclient import TestClient
from moto import mock_aws

from image_api.app import create_app
from image_api.core.config import AppConfig
from image_api.core.models.errors import StorageError
from image_api.core.models.image import StoredObject
from image_api.core.repositories.storage_repository import ImageStorageRepository
from image_api.core.utils.constants import SERVICE_NAME

TEST_BUCKET = "image-api-test-bucket"
TEST_REGION = "us-east-1"


@pytest.fixture(autouse=True)
def aws_environment(monkeypatch):
    """Fake AWS credentials so boto3 never reaches a real account."""
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.setenv("AWS_SECURITY_TOKEN", "testing")
    monkeypatch.setenv("AWS_SESSION_TOKEN", "testing")
    monkeypatch.setenv("AWS_DEFAULT_REGION", TEST_REGION)
    monkeypatch.delenv("AWS_ENDPOINT_URL", raising=False)
    monkeypatch.delenv("AWS_PROFILE", raising=False)


@pytest.fixture
def debug_logging() -> Iterator[None]:
    """Lower the service logger to DEBUG so every log call builds a record."""
    service_logger = logging.getLogger(SERVICE_NAME)
    previous = service_logger.level
    service_logger.setLevel(logging.DEBUG)
    yield
    service_logger.setLevel(previous)


# ============================================================================
# In-memory storage gateway
# ============================================================================


class InMemoryImageStorage(ImageStorageRepository):
    """Storage gateway test double keeping objects in a dict.

    Failures can be injected per operation through ``fail``, e.g.
    ``storage.fail["delete"] = StorageError(message="boom")``.
    ``unreadable`` holds names whose content is reported as unreadable.
    """

    def __init__(self) -> None:
        self.objects: dict[str, tuple[bytes, str]] = {}
        self.calls: list[tuple[str, str]] = []
        self.fail: dict[str, Exception] = {}
        self.unreadable: set[str] = set()
        self.closed = False

    def _check(self, operation: str, name: str = "") -> None:
        self.calls.append((operation, name))
        if operation in self.fail:
            raise self.fail[operation]

    def _describe(self, name: str) -> StoredObject:
        content, content_type = self.objects[name]
        return StoredObject(
            name=name,
            content=None if name in self.unreadable else content,
            content_type=content_type,
            size=len(content),
            updated_at="2024-01-01T10:00:00+00:00",
        )

    def put(self, name: str, content: bytes, content_type: str = "image/png") -> None:
        """Seed an object without recording a call."""
        self.objects[name] = (content, content_type)

    def list_objects(self) -> list[StoredObject]:
        self._check("list")
        return [self._describe(name) for name in self.objects]

    def read_object(self, object_id: str) -> list[StoredObject]:
        self._check("read", object_id)
        if object_id not in self.objects:
            return []
        return [self._describe(object_id)]

    def create_object(self, name: str, content: BinaryIO, *, content_type: str) -> None:
        self._check("create", name)
        self.objects[name] = (content.read(), content_type)

    def delete_object(self, object_id: str) -> None:
        self._check("delete", object_id)
        self.objects.pop(object_id, None)

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def memory_storage() -> InMemoryImageStorage:
    return InMemoryImageStorage()


@pytest.fixture
def storage_error() -> Callable[[str], StorageError]:
    def _make(message: str = "AccessDenied: Access Denied") -> StorageError:
        return StorageError(message=message)

    return _make


# ============================================================================
# Application fixtures
# ============================================================================


@pytest.fixture
def static_dir(tmp_path: Path) -> Path:
    directory = tmp_path / "static"
    directory.mkdir()
    (directory / "index.html").write_text("<h1>Image API</h1>", encoding="utf-8")
    (directory / "app.js").write_text("console.log('images');", encoding="utf-8")
    return directory


@pytest.fixture
def app_config(static_dir: Path) -> AppConfig:
    return AppConfig(
        bucket=TEST_BUCKET,
        static_dir=str(static_dir),
        aws_region=TEST_REGION,
    )


@pytest.fixture
def make_client(
    app_config: AppConfig,
    memory_storage: InMemoryImageStorage,
) -> Iterator[Callable[..., TestClient]]:
    """
    Build a started TestClient around the in-memory storage.

    Usage:
        client = make_client(allowed_mime_types=("image/png",))
    """
    with ExitStack() as stack:

        def _make(**overrides: Any) -> TestClient:
            config = app_config.model_copy(update=overrides)
            return stack.enter_context(TestClient(create_app(config, storage=memory_storage)))

        yield _make


@pytest.fixture
def client(make_client) -> TestClient:
    return make_client()


# ============================================================================
# S3 fixtures
# ============================================================================


@pytest.fixture(scope="function")
def aws_mock():
    with mock_aws():
        yield


@pytest.fixture(scope="function")
def s3_client(aws_mock):
    """S3 client for bucket operations."""
    return boto3.client("s3", region_name=TEST_REGION)


def _cleanup_s3_objects(s3_client, bucket_name):
    """Helper to delete all objects from S3 bucket efficiently."""
    try:
        paginator = s3_client.get_paginator("list_objects_v2")
        for page in paginator.paginate(Bucket=bucket_name):
            objects = page.get("Contents", [])
            if objects:
                delete_keys = [{"Key": obj["Key"]} for obj in objects]
                s3_client.delete_objects(
                    Bucket=bucket_name, Delete={"Objects": delete_keys}
                )
    except ClientError as e:
        if e.response["Error"]["Code"] != "NoSuchBucket":
            raise


@pytest.fixture(scope="function")
def s3_bucket(s3_client):
    """
    Create and manage S3 bucket for testing.

    Cleanup Strategy:
    - Objects are deleted after each test (teardown)
    - Bucket is NOT deleted (moto cleans up on context exit)
    """
    s3_client.create_bucket(Bucket=TEST_BUCKET)

    yield s3_client

    _cleanup_s3_objects(s3_client, TEST_BUCKET)


@pytest.fixture
def s3_put_object(s3_bucket) -> Callable[..., dict[str, Any]]:
    """
    Helper to upload an object to S3.

    Usage:
        response = s3_put_object("cat.png", image_bytes, "image/png")
    """

    def _put(key: str, body: bytes, content_type: str = "application/octet-stream"):
        return s3_bucket.put_object(
            Bucket=TEST_BUCKET, Key=key, Body=body, ContentType=content_type
        )

    return _put


@pytest.fixture
def s3_get_object(s3_bucket) -> Callable[[str], bytes]:
    """
    Helper to get an object from S3.

    Usage:
        content = s3_get_object("cat.png")
    """

    def _get(key: str) -> bytes:
        response: dict[str, Any] = s3_bucket.get_object(Bucket=TEST_BUCKET, Key=key)
        data: bytes = response["Body"].read()
        return data

    return _get


@pytest.fixture
def s3_keys(s3_bucket) -> Callable[[], list[str]]:
    def _keys() -> list[str]:
        response = s3_bucket.list_objects_v2(Bucket=TEST_BUCKET)
        return [obj["Key"] for obj in response.get("Contents", [])]

    return _keys


# ============================================================================
# Sample images
# ============================================================================


@pytest.fixture
def sample_png_bytes() -> bytes:
    """Sample binary image data (1x1 PNG)."""
    png_base64 = "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAYAAAAfFcSJAAAADUlEQVR42mNk+M9QDwADhgGAWjR9awAAAABJRU5ErkJggg=="
    return base64.b64decode(png_base64)


@pytest.fixture
def sample_jpeg_bytes() -> bytes:
    """Sample JPEG header bytes."""
    return b"\xff\xd8\xff\xe0\x00\x10JFIF\x00\x01\x01\x00\x00\x01\x00\x01\x00\x00\xff\xd9"


@pytest.fixture
def sample_gif_bytes() -> bytes:
    """Sample GIF header bytes."""
    return b"GIF89a\x01\x00\x01\x00\x00\x00\x00;"

