"""Tests for the Video record."""

from __future__ import annotations

from datetime import UTC, datetime
from uuid import UUID

import pytest

from domain.aggregates.video import Video
from domain.exceptions import OwnershipError


class TestVideo:
    """Test Video ownership rules."""

    def test_new_video_has_no_thumbnail(self, sample_video: Video) -> None:
        assert sample_video.thumbnail_reference is None

    def test_owner_can_set_thumbnail(self, sample_video: Video, owner_id: UUID) -> None:
        at = datetime(2024, 1, 2, tzinfo=UTC)
        sample_video.set_thumbnail("/assets/x.png", by_user=owner_id, at=at)
        assert sample_video.thumbnail_reference == "/assets/x.png"
        assert sample_video.updated_at == at

    def test_set_thumbnail_moves_updated_at(self, sample_video: Video, owner_id: UUID) -> None:
        before = sample_video.updated_at
        sample_video.set_thumbnail("/assets/x.png", by_user=owner_id)
        assert sample_video.updated_at >= before

    def test_non_owner_cannot_set_thumbnail(
        self,
        sample_video: Video,
        other_user_id: UUID,
    ) -> None:
        with pytest.raises(OwnershipError):
            sample_video.set_thumbnail("/assets/x.png", by_user=other_user_id)
        assert sample_video.thumbnail_reference is None

    def test_ensure_owned_by(
        self,
        sample_video: Video,
        owner_id: UUID,
        other_user_id: UUID,
    ) -> None:
        sample_video.ensure_owned_by(owner_id)
        with pytest.raises(OwnershipError):
            sample_video.ensure_owned_by(other_user_id)
