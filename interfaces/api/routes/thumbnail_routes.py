from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Header, Request, status

from application.dtos.video_dtos import VideoResponse
from application.use_cases.thumbnail_use_cases import GetThumbnailUseCase, UploadThumbnailUseCase
from interfaces.api.middleware import handle_use_case_errors
from interfaces.api.responses import ThumbnailResponse
from interfaces.api.upload_source import FormUploadSource
from interfaces.dependencies import get_thumbnail_use_case, get_upload_thumbnail_use_case

router = APIRouter(prefix="/videos", tags=["thumbnails"])


@router.api_route(
    "/{video_id}/thumbnail",
    methods=["PUT", "POST"],
    status_code=status.HTTP_200_OK,
)
@handle_use_case_errors
async def upload_thumbnail(
    video_id: UUID,
    request: Request,
    use_case: Annotated[UploadThumbnailUseCase, Depends(get_upload_thumbnail_use_case)],
    authorization: Annotated[str | None, Header()] = None,
) -> VideoResponse:
    """Upload a thumbnail image for a video the caller owns.

    Expects a multipart body with a single file field named ``thumbnail``.

    Returns:
        200 OK: The updated video record
        400 Bad Request: Malformed upload or unsupported media type
        401 Unauthorized: Missing or invalid bearer token
        403 Forbidden: Caller does not own the video
        404 Not Found: Video does not exist
        500 Internal Server Error: Storage or metadata update failure

    """
    upload_source = FormUploadSource(request)
    try:
        return await use_case.execute(
            video_id=video_id,
            authorization=authorization,
            upload_source=upload_source,
        )
    finally:
        await upload_source.aclose()


@router.get("/{video_id}/thumbnail", response_class=ThumbnailResponse)
@handle_use_case_errors
async def get_thumbnail(
    video_id: UUID,
    use_case: Annotated[GetThumbnailUseCase, Depends(get_thumbnail_use_case)],
) -> ThumbnailResponse:
    """Serve a video's thumbnail with its stored content type."""
    result = await use_case.execute(video_id)
    return result.map(
        lambda content: ThumbnailResponse(content=content.data, media_type=content.media_type),
    )
