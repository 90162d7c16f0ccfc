import structlog
from starlette.responses import Response
from starlette.types import Receive, Scope, Send

logger = structlog.get_logger()


class ThumbnailResponse(Response):
    """Raw image response; a failed body write is logged and not retried."""

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        try:
            await super().__call__(scope, receive, send)
        except OSError as exc:
            logger.warning(
                "thumbnail_response_write_failed",
                path=scope.get("path"),
                media_type=self.media_type,
                content_length=len(self.body),
                error=str(exc),
            )
