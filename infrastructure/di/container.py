from __future__ import annotations

import structlog
from lagom import Container
from motor.motor_asyncio import AsyncIOMotorClient

from application.ports.blob_store import BlobStore
from application.ports.repositories.video_repository import VideoRepository
from application.ports.token_verifier import TokenVerifier
from application.use_cases.thumbnail_use_cases import GetThumbnailUseCase, UploadThumbnailUseCase
from domain.services.media_type_validator import MediaTypeValidator
from infrastructure.auth.jose_token_verifier import JoseTokenVerifier
from infrastructure.blob_stores.fsspec_blob_store import FsspecBlobStore
from infrastructure.blob_stores.inline_blob_store import InlineBlobStore
from infrastructure.blob_stores.routing_blob_store import RoutingBlobStore
from infrastructure.config import Settings, settings
from infrastructure.repositories.mongo_video_repository import MongoVideoRepository

logger = structlog.get_logger()


def create_blob_store(config: Settings) -> BlobStore:
    """Build the blob store for the configured strategy.

    Writes go through ``storage_strategy``; reads are routed by reference kind so
    references written under the other strategy stay readable.
    """
    inline_store = InlineBlobStore()
    file_store = FsspecBlobStore(asset_root=config.asset_root)
    writer = file_store if config.storage_strategy == "file" else inline_store
    return RoutingBlobStore(
        writer=writer,
        readers={"inline": inline_store, "file": file_store},
    )


def create_container(config: Settings = settings) -> Container:
    container = Container()

    container[Settings] = config

    if not config.jwt_secret:
        logger.warning("jwt_secret_not_configured")

    # Blob storage
    container[BlobStore] = create_blob_store(config)

    # Media type allow-list
    container[MediaTypeValidator] = MediaTypeValidator(policy=config.media_type_policy)

    # Bearer token verification
    container[TokenVerifier] = JoseTokenVerifier(
        secret=config.jwt_secret,
        algorithm=config.jwt_algorithm,
        issuer=config.jwt_issuer,
    )

    # Register MongoDB Client and Video Repository
    container[AsyncIOMotorClient] = AsyncIOMotorClient(config.mongo_uri)

    def video_repository_factory(c: Container) -> MongoVideoRepository:
        return MongoVideoRepository(client=c[AsyncIOMotorClient], settings=config)

    container[VideoRepository] = video_repository_factory

    # Register Use Cases
    container[UploadThumbnailUseCase] = lambda c: UploadThumbnailUseCase(
        video_repository=c[VideoRepository],
        blob_store=c[BlobStore],
        token_verifier=c[TokenVerifier],
        media_type_validator=c[MediaTypeValidator],
        upload_memory_budget=config.upload_memory_budget,
    )
    container[GetThumbnailUseCase] = lambda c: GetThumbnailUseCase(
        video_repository=c[VideoRepository],
        blob_store=c[BlobStore],
    )

    return container
