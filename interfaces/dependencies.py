"""FastAPI dependency injection integration with Lagom."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends
from lagom import Container

from application.use_cases.thumbnail_use_cases import GetThumbnailUseCase, UploadThumbnailUseCase
from infrastructure.di.container import create_container


@lru_cache
def get_container() -> Container:
    """Get the DI container instance.

    Cached so every request shares one Mongo client and one blob store.
    """
    return create_container()


def get_upload_thumbnail_use_case(
    container: Annotated[Container, Depends(get_container)],
) -> UploadThumbnailUseCase:
    return container[UploadThumbnailUseCase]


def get_thumbnail_use_case(
    container: Annotated[Container, Depends(get_container)],
) -> GetThumbnailUseCase:
    return container[GetThumbnailUseCase]
