"""Tests for logging configuration."""

from __future__ import annotations

from domain.value_objects.mime_type import MediaTypePolicy
from infrastructure.config import Settings
from infrastructure.logging import service_context


class TestServiceContext:
    """Test the service context processor."""

    def test_adds_service_and_ingestion_settings(self) -> None:
        config = Settings(
            APP_NAME="thumbs",
            STORAGE_STRATEGY="file",
            MEDIA_TYPE_POLICY="permissive",
        )
        processor = service_context(config)

        event = processor(None, "info", {"event": "thumbnail_upload_succeeded"})

        assert event == {
            "event": "thumbnail_upload_succeeded",
            "service": "thumbs",
            "storage_strategy": "file",
            "media_type_policy": MediaTypePolicy.PERMISSIVE.value,
        }

    def test_keeps_values_bound_on_the_event(self) -> None:
        processor = service_context(Settings(STORAGE_STRATEGY="inline"))

        event = processor(None, "info", {"event": "x", "storage_strategy": "file"})

        assert event["storage_strategy"] == "file"
