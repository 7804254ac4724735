"""
Centralized API response builder for the HTTP handlers.
"""

from __future__ import annotations

import json
from collections.abc import Sequence
from http import HTTPStatus
from typing import Any

from aws_lambda_powertools import Logger
from pydantic import BaseModel
from starlette.responses import Response

from image_api.core.utils.constants import (
    CORS_HEADERS,
    CORS_METHODS,
    CORS_ORIGIN,
    DEFAULT_CONTENT_TYPE,
    SERVICE_NAME,
)

logger = Logger(service=SERVICE_NAME, UTC=True)

JsonPayload = BaseModel | Sequence[BaseModel] | dict[str, Any] | list[Any]


class ResponseBuilder:
    """Factory for JSON HTTP responses with CORS headers."""

    DEFAULT_HEADERS: dict[str, str] = {
        "Content-Type": DEFAULT_CONTENT_TYPE,
    }

    DEFAULT_CORS_HEADERS: dict[str, str] = {
        "Access-Control-Allow-Origin": CORS_ORIGIN,
        "Access-Control-Allow-Headers": ",".join(CORS_HEADERS),
        "Access-Control-Allow-Methods": ",".join(CORS_METHODS),
    }

    @staticmethod
    def _build_headers() -> dict[str, str]:
        headers: dict[str, str] = dict(ResponseBuilder.DEFAULT_HEADERS)

        # Always include CORS headers
        headers.update(ResponseBuilder.DEFAULT_CORS_HEADERS)

        return headers

    @staticmethod
    def _response(*, status: HTTPStatus, body: str = "") -> Response:
        if status is not HTTPStatus.OK:
            log = logger.warning if status >= HTTPStatus.BAD_REQUEST else logger.info
            log(
                "Webserver response",
                extra={"status_code": status.value, "body": body},
            )

        # HTTP/1.1 forbids a body on 204; it is logged above instead
        if status is HTTPStatus.NO_CONTENT:
            body = ""

        return Response(
            content=body,
            status_code=status.value,
            headers=ResponseBuilder._build_headers(),
        )

    @staticmethod
    def _dump(payload: JsonPayload) -> str:
        if isinstance(payload, BaseModel):
            return payload.model_dump_json()

        if isinstance(payload, (list, tuple)):
            items = [
                item.model_dump(mode="json") if isinstance(item, BaseModel) else item
                for item in payload
            ]
            return json.dumps(items)

        return json.dumps(payload)

    @staticmethod
    def json(payload: JsonPayload, *, status: HTTPStatus = HTTPStatus.OK) -> Response:
        """Serialize ``payload`` and write it with ``status``.

        A payload that cannot be serialized turns into an error response.
        """
        try:
            body = ResponseBuilder._dump(payload)
        except (TypeError, ValueError) as exc:
            logger.exception("Failed to serialize response payload")
            return ResponseBuilder.error(f"could not marshal json for response: {exc}")

        return ResponseBuilder._response(status=status, body=body)

    @staticmethod
    def ok(payload: JsonPayload) -> Response:
        return ResponseBuilder.json(payload, status=HTTPStatus.OK)

    @staticmethod
    def empty(status: HTTPStatus) -> Response:
        return ResponseBuilder._response(status=status)

    @staticmethod
    def created() -> Response:
        return ResponseBuilder.empty(HTTPStatus.CREATED)

    @staticmethod
    def no_content() -> Response:
        return ResponseBuilder.empty(HTTPStatus.NO_CONTENT)

    @staticmethod
    def error(message: str) -> Response:
        """500 response with an ``{"error": message}`` body."""
        return ResponseBuilder._response(
            status=HTTPStatus.INTERNAL_SERVER_ERROR,
            body=json.dumps({"error": message}),
        )
