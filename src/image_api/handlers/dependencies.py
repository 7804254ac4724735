"""FastAPI dependencies shared by the route handlers."""

from typing import Annotated

from fastapi import Depends, Request

from image_api.core.config import AppConfig
from image_api.core.repositories.storage_repository import ImageStorageRepository
from image_api.core.utils.mime import MimeMap


def get_storage(request: Request) -> ImageStorageRepository:
    return request.app.state.storage


def get_config(request: Request) -> AppConfig:
    return request.app.state.config


def get_mime_map(request: Request) -> MimeMap:
    return request.app.state.mime_map


StorageDep = Annotated[ImageStorageRepository, Depends(get_storage)]
ConfigDep = Annotated[AppConfig, Depends(get_config)]
MimeMapDep = Annotated[MimeMap, Depends(get_mime_map)]
