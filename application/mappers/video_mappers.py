from application.dtos.video_dtos import VideoResponse
from domain.aggregates.video import Video


class VideoMapper:
    """Mapper for converting Video domain objects to DTOs."""

    @staticmethod
    def to_video_response(video: Video) -> VideoResponse:
        return VideoResponse(
            id=video.id,
            user_id=video.user_id,
            title=video.title,
            description=video.description,
            video_url=video.video_url,
            thumbnail_reference=video.thumbnail_reference,
            created_at=video.created_at,
            updated_at=video.updated_at,
        )
