"""Thin adapter for interacting with Amazon S3."""

from collections.abc import Iterator, Mapping
from typing import Any, BinaryIO, Protocol

import boto3

from image_api.core.config import AppConfig


class _Boto3S3Client(Protocol):
    """Internal typing for boto3 S3 client (AWS-facing only)."""

    def put_object(
        self,
        *,
        Bucket: str,
        Key: str,
        Body: bytes | BinaryIO,
        ContentType: str,
    ) -> Any: ...

    def get_object(
        self,
        *,
        Bucket: str,
        Key: str,
    ) -> Mapping[str, Any]: ...

    def delete_object(
        self,
        *,
        Bucket: str,
        Key: str,
    ) -> Any: ...

    def get_paginator(self, operation_name: str) -> Any: ...

    def close(self) -> None: ...


class S3AdapterProtocol(Protocol):
    """Minimal S3 adapter protocol (repository-facing)."""

    @property
    def key_prefix(self) -> str: ...

    def list_keys(self) -> Iterator[str]: ...

    def put_object(
        self,
        *,
        key: str,
        body: bytes | BinaryIO,
        content_type: str,
    ) -> None: ...

    def get_object(self, *, key: str) -> Mapping[str, Any]: ...

    def delete_object(self, *, key: str) -> None: ...

    def close(self) -> None: ...


class S3Adapter:
    """Low-level S3 operations (mechanical, no error handling).

    This adapter:
    - Wraps boto3 S3 client
    - Does NOT handle errors (lets them bubble up)
    - Domain implementations catch and translate errors
    """

    def __init__(self, config: AppConfig) -> None:
        """Create S3 client from application configuration."""
        self._bucket = config.require_bucket()
        self._prefix = config.key_prefix
        self._client: _Boto3S3Client = boto3.client(
            "s3",
            endpoint_url=config.aws_endpoint_url,
            region_name=config.aws_region,
        )

    @property
    def bucket(self) -> str:
        return self._bucket

    @property
    def key_prefix(self) -> str:
        return self._prefix

    def list_keys(self) -> Iterator[str]:
        """Yield every key under the configured prefix.
        Raises boto3 exceptions - caught by domain implementation.
        """
        paginator = self._client.get_paginator("list_objects_v2")
        for page in paginator.paginate(Bucket=self._bucket, Prefix=self._prefix):
            for obj in page.get("Contents", []):
                yield obj["Key"]

    def put_object(
        self,
        *,
        key: str,
        body: bytes | BinaryIO,
        content_type: str,
    ) -> None:
        """Store object in S3.
        Raises boto3 exceptions - caught by domain implementation.
        """
        self._client.put_object(
            Bucket=self._bucket,
            Key=key,
            Body=body,
            ContentType=content_type,
        )

    def get_object(self, *, key: str) -> Mapping[str, Any]:
        """Fetch object from S3.
        Raises boto3 exceptions - caught by domain implementation.
        """
        response = self._client.get_object(
            Bucket=self._bucket,
            Key=key,
        )
        return response

    def delete_object(self, *, key: str) -> None:
        """Delete object from S3.
        Raises boto3 exceptions - caught by domain implementation.
        """
        self._client.delete_object(
            Bucket=self._bucket,
            Key=key,
        )

    def close(self) -> None:
        """Close the underlying HTTP connection pool."""
        self._client.close()
