from __future__ import annotations

from typing import TYPE_CHECKING

import structlog
from returns.result import Failure, Result, Success

from application.dtos.errors import AppError
from application.dtos.video_dtos import ThumbnailContent, VideoResponse
from application.mappers.video_mappers import VideoMapper
from domain.exceptions import (
    AggregateNotFoundError,
    AuthenticationError,
    BlobNotFoundError,
    CorruptReferenceError,
    InfrastructureError,
    InvalidMediaTypeError,
    MalformedUploadError,
    OwnershipError,
    StorageUnavailableError,
)
from domain.value_objects.thumbnail_reference import parse_thumbnail_reference
from domain.value_objects.uploaded_blob import UploadedBlob

if TYPE_CHECKING:
    from uuid import UUID

    from structlog.typing import FilteringBoundLogger

    from application.ports.blob_store import BlobStore
    from application.ports.repositories.video_repository import VideoRepository
    from application.ports.token_verifier import TokenVerifier
    from application.ports.upload_source import UploadSource
    from domain.services.media_type_validator import MediaTypeValidator

logger = structlog.get_logger()

THUMBNAIL_FIELD = "thumbnail"
DEFAULT_UPLOAD_MEMORY_BUDGET = 10 << 20


def get_bearer_token(authorization: str | None) -> str:
    """Extract the token from an ``Authorization: Bearer <token>`` header value.

    Raises:
        AuthenticationError: If the header is absent or not a bearer credential.

    """
    if not authorization:
        msg = "No authorization header included"
        raise AuthenticationError(msg)

    scheme, _, token = authorization.strip().partition(" ")
    token = token.strip()
    if scheme != "Bearer" or not token or " " in token:
        msg = "Malformed authorization header"
        raise AuthenticationError(msg)
    return token


def _fail(
    log: FilteringBoundLogger,
    step: str,
    category: str,
    message: str,
) -> Failure[AppError]:
    log.warning("thumbnail_request_failed", step=step, category=category, error=message)
    return Failure(AppError(category, message))


class UploadThumbnailUseCase:
    """Authenticate, authorize, validate and store a thumbnail for a video.

    Steps run in order and stop at the first failure. Nothing is rolled back:
    if the blob is stored but the metadata update fails, the blob is left
    orphaned and reported in the logs.
    """

    def __init__(  # noqa: PLR0913
        self,
        video_repository: VideoRepository,
        blob_store: BlobStore,
        token_verifier: TokenVerifier,
        media_type_validator: MediaTypeValidator,
        upload_memory_budget: int = DEFAULT_UPLOAD_MEMORY_BUDGET,
    ) -> None:
        self.video_repository = video_repository
        self.blob_store = blob_store
        self.token_verifier = token_verifier
        self.media_type_validator = media_type_validator
        self.upload_memory_budget = upload_memory_budget

    async def execute(  # noqa: PLR0911
        self,
        video_id: UUID,
        authorization: str | None,
        upload_source: UploadSource,
    ) -> Result[VideoResponse, AppError]:
        log = logger.bind(video_id=str(video_id))

        # Authenticate
        try:
            token = get_bearer_token(authorization)
        except AuthenticationError as e:
            return _fail(log, "extract_credential", "unauthorized", f"Couldn't find JWT: {e!s}")
        try:
            user_id = self.token_verifier.verify(token)
        except AuthenticationError as e:
            return _fail(log, "verify_credential", "unauthorized", f"Couldn't validate JWT: {e!s}")

        log = log.bind(user_id=str(user_id))
        log.info("thumbnail_upload_started")

        # Authorize
        try:
            video = await self.video_repository.get_by_id(video_id)
            video.ensure_owned_by(user_id)
        except AggregateNotFoundError:
            return _fail(
                log,
                "lookup_video",
                "not_found",
                f"Unable to find video with ID {video_id}",
            )
        except OwnershipError:
            return _fail(log, "authorize", "forbidden", "You do not own this video")

        # Parse and validate the upload before reading its payload
        try:
            part = await upload_source.get_part(
                THUMBNAIL_FIELD,
                memory_budget=self.upload_memory_budget,
            )
            if part.size is not None and part.size > self.upload_memory_budget:
                msg = f"Thumbnail exceeds the {self.upload_memory_budget} byte upload budget"
                raise MalformedUploadError(msg)
        except MalformedUploadError as e:
            return _fail(
                log,
                "parse_upload",
                "bad_request",
                f"Unable to parse thumbnail request: {e!s}",
            )

        log = log.bind(upload_filename=part.filename)

        try:
            media_type = self.media_type_validator.validate(part.content_type)
        except InvalidMediaTypeError as e:
            return _fail(
                log,
                "validate_media_type",
                "invalid_media_type",
                f"Invalid thumbnail media type: {e!s}",
            )

        try:
            data = part.stream.read(self.upload_memory_budget + 1)
        except OSError as e:
            return _fail(
                log,
                "read_upload",
                "storage_unavailable",
                f"Unable to read thumbnail: {e!s}",
            )
        if len(data) > self.upload_memory_budget:
            return _fail(
                log,
                "read_upload",
                "bad_request",
                f"Thumbnail exceeds the {self.upload_memory_budget} byte upload budget",
            )

        # Store
        try:
            blob = UploadedBlob(data=data, media_type=media_type)
            reference = self.blob_store.store(blob, video.id)
        except InvalidMediaTypeError as e:
            return _fail(
                log,
                "store_blob",
                "invalid_media_type",
                f"Invalid thumbnail media type: {e!s}",
            )
        except StorageUnavailableError as e:
            return _fail(
                log,
                "store_blob",
                "storage_unavailable",
                f"Unable to store thumbnail: {e!s}",
            )

        # Update
        try:
            video.set_thumbnail(reference.serialize(), by_user=user_id)
            await self.video_repository.save(video)
        except InfrastructureError as e:
            log.warning("thumbnail_blob_orphaned", reference_kind=reference.kind)
            return _fail(
                log,
                "update_video",
                "update_failed",
                f"Unable to update thumbnail data: {e!s}",
            )

        log.info(
            "thumbnail_upload_succeeded",
            media_type=media_type.essence,
            size_bytes=blob.size_bytes,
            reference_kind=reference.kind,
        )
        return Success(VideoMapper.to_video_response(video))


class GetThumbnailUseCase:
    """Look up a video's thumbnail reference and resolve it to servable bytes."""

    def __init__(self, video_repository: VideoRepository, blob_store: BlobStore) -> None:
        self.video_repository = video_repository
        self.blob_store = blob_store

    async def execute(self, video_id: UUID) -> Result[ThumbnailContent, AppError]:
        log = logger.bind(video_id=str(video_id))

        try:
            video = await self.video_repository.get_by_id(video_id)
        except AggregateNotFoundError:
            return _fail(log, "lookup_video", "not_found", "Thumbnail not found")
        if video.thumbnail_reference is None:
            return _fail(log, "lookup_video", "not_found", "Video does not have thumbnail")

        try:
            reference = parse_thumbnail_reference(video.thumbnail_reference)
            resolved = self.blob_store.resolve(reference)
        except CorruptReferenceError as e:
            return _fail(log, "resolve_reference", "corrupt_reference", str(e))
        except BlobNotFoundError as e:
            return _fail(log, "resolve_reference", "not_found", f"Thumbnail not found: {e!s}")
        except StorageUnavailableError as e:
            return _fail(
                log,
                "resolve_reference",
                "storage_unavailable",
                f"Unable to read thumbnail: {e!s}",
            )

        content = ThumbnailContent(data=resolved.data, media_type=str(resolved.media_type))
        log.info(
            "thumbnail_resolved",
            reference_kind=reference.kind,
            content_length=content.content_length,
        )
        return Success(content)
