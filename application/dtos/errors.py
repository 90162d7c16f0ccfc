class AppError:
    """Represents different categories of application errors."""

    def __init__(self, category: str, message: str) -> None:
        # 'bad_request', 'unauthorized', 'forbidden', 'not_found', 'invalid_media_type',
        # 'storage_unavailable', 'corrupt_reference', 'update_failed'
        self.category = category
        self.message = message

    def __str__(self) -> str:
        return self.message
