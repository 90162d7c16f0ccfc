"""Shared test fixtures and configuration."""

from __future__ import annotations

from pathlib import Path
from uuid import UUID, uuid4

import pytest

from domain.aggregates.video import Video
from domain.value_objects.mime_type import MediaType
from domain.value_objects.uploaded_blob import UploadedBlob
from tests.mocks import make_png


@pytest.fixture
def owner_id() -> UUID:
    return uuid4()


@pytest.fixture
def other_user_id() -> UUID:
    return uuid4()


@pytest.fixture
def sample_video(owner_id: UUID) -> Video:
    """Create a sample Video record owned by ``owner_id``."""
    return Video(
        user_id=owner_id,
        title="Keyboard review",
        description="A video about mechanical keyboards",
    )


@pytest.fixture
def png_blob() -> UploadedBlob:
    return UploadedBlob(data=make_png(1024), media_type=MediaType.parse("image/png"))


@pytest.fixture
def asset_root(tmp_path: Path) -> Path:
    return tmp_path / "assets"
