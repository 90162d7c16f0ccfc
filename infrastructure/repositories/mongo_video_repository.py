from uuid import UUID

from motor.motor_asyncio import AsyncIOMotorClient
from pymongo.errors import PyMongoError

from application.ports.repositories.video_repository import VideoRepository
from domain.aggregates.video import Video
from domain.exceptions import AggregateNotFoundError, InfrastructureError
from infrastructure.config import Settings


class MongoVideoRepository(VideoRepository):
    def __init__(self, client: AsyncIOMotorClient, settings: Settings) -> None:
        self.client = client
        self.db = self.client[settings.mongo_db]
        self.videos = self.db[settings.mongo_videos_collection]

    async def get_by_id(self, video_id: UUID) -> Video:
        try:
            doc = await self.videos.find_one({"video_id": str(video_id)})
        except PyMongoError as e:
            msg = f"Failed to load video {video_id}: {e!s}"
            raise InfrastructureError(msg) from e
        if not doc:
            msg = f"Video with id {video_id} not found"
            raise AggregateNotFoundError(msg)

        doc.pop("_id", None)
        doc["id"] = doc.pop("video_id")
        return Video(**doc)

    async def save(self, video: Video) -> None:
        doc = video.model_dump(mode="json", exclude={"id"})
        doc["video_id"] = str(video.id)
        try:
            await self.videos.replace_one({"video_id": doc["video_id"]}, doc, upsert=True)
        except PyMongoError as e:
            msg = f"Failed to save video {video.id}: {e!s}"
            raise InfrastructureError(msg) from e
