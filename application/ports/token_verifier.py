from typing import Protocol
from uuid import UUID


class TokenVerifier(Protocol):
    def verify(self, token: str) -> UUID:
        """Return the user ID a bearer token was issued for.

        Raises:
            AuthenticationError: If the token is invalid, expired, or has no usable subject.

        """
        ...
