from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field


class VideoResponse(BaseModel):
    """Response DTO representing a video record."""

    id: UUID = Field(..., description="Unique identifier of the video")
    user_id: UUID = Field(..., description="Identifier of the owning user")
    title: str = Field("", description="Title of the video")
    description: str = Field("", description="Description of the video")
    video_url: str | None = Field(None, description="Location of the video file")
    thumbnail_reference: str | None = Field(
        None,
        description="Inline data URL or rooted file path of the thumbnail",
    )
    created_at: datetime = Field(..., description="Creation timestamp")
    updated_at: datetime = Field(..., description="Last update timestamp")


class ThumbnailContent(BaseModel):
    """Resolved thumbnail bytes ready to be served."""

    data: bytes = Field(..., description="Raw image bytes")
    media_type: str = Field(..., description="Content type to serve the bytes with")

    @property
    def content_length(self) -> int:
        return len(self.data)
