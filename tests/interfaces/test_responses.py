"""Tests for the raw thumbnail response."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
import structlog
from structlog.testing import capture_logs

from interfaces.api import responses
from interfaces.api.responses import ThumbnailResponse
from tests.mocks import make_png

if TYPE_CHECKING:
    from starlette.types import Message

SCOPE = {"type": "http", "method": "GET", "path": "/videos/abc/thumbnail", "headers": []}


async def _receive() -> Message:
    return {"type": "http.request", "body": b"", "more_body": False}


class TestThumbnailResponse:
    """Test ThumbnailResponse body delivery."""

    @pytest.mark.asyncio
    async def test_sends_image_bytes_with_content_type(self) -> None:
        sent: list[Message] = []

        async def send(message: Message) -> None:
            sent.append(message)

        data = make_png(64)
        await ThumbnailResponse(content=data, media_type="image/png")(SCOPE, _receive, send)

        start, body = sent
        headers = dict(start["headers"])
        assert start["status"] == 200
        assert headers[b"content-type"] == b"image/png"
        assert headers[b"content-length"] == b"64"
        assert body["body"] == data

    @pytest.mark.asyncio
    async def test_failed_body_write_is_logged_not_raised(
        self,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        async def send(message: Message) -> None:
            if message["type"] == "http.response.body":
                msg = "connection reset by peer"
                raise OSError(msg)

        monkeypatch.setattr(responses, "logger", structlog.get_logger())
        response = ThumbnailResponse(content=make_png(64), media_type="image/png")

        with capture_logs() as logs:
            await response(SCOPE, _receive, send)

        assert len(logs) == 1
        assert logs[0]["event"] == "thumbnail_response_write_failed"
        assert logs[0]["log_level"] == "warning"
        assert logs[0]["path"] == "/videos/abc/thumbnail"
        assert logs[0]["content_length"] == 64
        assert "connection reset" in logs[0]["error"]
