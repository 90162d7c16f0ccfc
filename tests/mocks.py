"""Mock implementations for testing."""

from __future__ import annotations

import io
from datetime import UTC, datetime, timedelta
from typing import TYPE_CHECKING
from uuid import UUID

from jose import jwt

from application.ports.repositories.video_repository import VideoRepository
from application.ports.upload_source import UploadPart, UploadSource
from domain.exceptions import (
    AggregateNotFoundError,
    AuthenticationError,
    InfrastructureError,
    MalformedUploadError,
)

if TYPE_CHECKING:
    from domain.aggregates.video import Video


# ---------------------------------------------------------------------------
# Repository mocks
# ---------------------------------------------------------------------------


class MockVideoRepository(VideoRepository):
    """In-memory VideoRepository that hands out copies, like a real store."""

    def __init__(self, *, fail_on_save: bool = False) -> None:
        self.videos: dict[UUID, Video] = {}
        self.fail_on_save = fail_on_save
        self.save_called = False
        self.get_by_id_called = False

    def add(self, video: Video) -> Video:
        self.videos[video.id] = video.model_copy(deep=True)
        return video

    async def save(self, video: Video) -> None:
        self.save_called = True
        if self.fail_on_save:
            msg = "database is locked"
            raise InfrastructureError(msg)
        self.videos[video.id] = video.model_copy(deep=True)

    async def get_by_id(self, video_id: UUID) -> Video:
        self.get_by_id_called = True
        if video_id not in self.videos:
            msg = f"Video with id {video_id} not found"
            raise AggregateNotFoundError(msg)
        return self.videos[video_id].model_copy(deep=True)


# ---------------------------------------------------------------------------
# Upload source mocks
# ---------------------------------------------------------------------------


class FakeUploadSource(UploadSource):
    """Upload source returning a prepared part, or failing like a bad form."""

    def __init__(
        self,
        data: bytes = b"",
        content_type: str | None = "image/png",
        *,
        field_name: str = "thumbnail",
        size: int | None = -1,
        malformed: bool = False,
    ) -> None:
        self.data = data
        self.content_type = content_type
        self.field_name = field_name
        self.size = len(data) if size == -1 else size
        self.malformed = malformed
        self.stream = io.BytesIO(data)
        self.get_part_called = False
        self.requested_budget: int | None = None

    async def get_part(self, field_name: str, *, memory_budget: int) -> UploadPart:
        self.get_part_called = True
        self.requested_budget = memory_budget
        if self.malformed:
            msg = "multipart boundary not found"
            raise MalformedUploadError(msg)
        if field_name != self.field_name:
            msg = f"Missing file field {field_name!r}"
            raise MalformedUploadError(msg)
        return UploadPart(content_type=self.content_type, size=self.size, stream=self.stream)

    @property
    def bytes_read(self) -> int:
        return self.stream.tell()


class BrokenStream(io.RawIOBase):
    def read(self, size: int = -1) -> bytes:  # noqa: ARG002
        msg = "connection reset by peer"
        raise OSError(msg)


# ---------------------------------------------------------------------------
# Auth mocks
# ---------------------------------------------------------------------------


class StaticTokenVerifier:
    """Token verifier mapping known tokens to user IDs."""

    def __init__(self, tokens: dict[str, UUID]) -> None:
        self.tokens = tokens

    def verify(self, token: str) -> UUID:
        if token not in self.tokens:
            msg = "unknown token"
            raise AuthenticationError(msg)
        return self.tokens[token]


# ---------------------------------------------------------------------------
# Payload helpers
# ---------------------------------------------------------------------------

JWT_SECRET = "test-secret"  # noqa: S105

PNG_HEADER = b"\x89PNG\r\n\x1a\n"


def make_token(
    user_id: UUID,
    *,
    secret: str = JWT_SECRET,
    expires_in: timedelta = timedelta(hours=1),
    issuer: str | None = None,
) -> str:
    now = datetime.now(UTC)
    claims: dict[str, object] = {"sub": str(user_id), "iat": now, "exp": now + expires_in}
    if issuer is not None:
        claims["iss"] = issuer
    return jwt.encode(claims, secret, algorithm="HS256")


def make_png(size: int) -> bytes:
    """Return ``size`` bytes starting with the PNG signature."""
    body = bytes(i % 251 for i in range(max(size - len(PNG_HEADER), 0)))
    return (PNG_HEADER + body)[:size]
