"""Repository interface (port) for the external video metadata store."""

from abc import ABC, abstractmethod
from uuid import UUID

from domain.aggregates.video import Video


class VideoRepository(ABC):
    """Interface for the video metadata store.

    The repository raises domain exceptions to allow proper error handling
    at the application and interface layers:
    - AggregateNotFoundError: When a video is not found
    - InfrastructureError: When infrastructure operations fail (DB, network, etc.)
    """

    @abstractmethod
    async def save(self, video: Video) -> None:
        """Persist the video record.

        Raises:
            InfrastructureError: If the save operation fails.

        """

    @abstractmethod
    async def get_by_id(self, video_id: UUID) -> Video:
        """Retrieve a video record by its ID.

        Raises:
            AggregateNotFoundError: If the video does not exist.
            InfrastructureError: If the retrieval operation fails.

        """
