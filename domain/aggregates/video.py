from __future__ import annotations

from datetime import UTC, datetime
from uuid import UUID, uuid4

from pydantic import BaseModel, Field

from domain.exceptions import OwnershipError


class Video(BaseModel):
    """Video metadata record as held by the metadata store.

    Only the owner may replace the thumbnail reference; ``updated_at`` moves with it.
    """

    id: UUID = Field(default_factory=uuid4)
    user_id: UUID
    title: str = ""
    description: str = ""
    video_url: str | None = None
    thumbnail_reference: str | None = None
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(UTC))

    def ensure_owned_by(self, user_id: UUID) -> None:
        if self.user_id != user_id:
            msg = f"User {user_id} does not own video {self.id}"
            raise OwnershipError(msg)

    def set_thumbnail(self, reference: str, *, by_user: UUID, at: datetime | None = None) -> None:
        """Replace the thumbnail reference on behalf of ``by_user``.

        Raises:
            OwnershipError: If ``by_user`` is not the video's owner.

        """
        self.ensure_owned_by(by_user)
        self.thumbnail_reference = reference
        self.updated_at = at or datetime.now(UTC)
