from uuid import UUID

from jose import ExpiredSignatureError, JWTError, jwt

from application.ports.token_verifier import TokenVerifier
from domain.exceptions import AuthenticationError


class JoseTokenVerifier(TokenVerifier):
    """Verify signed JWT bearer tokens whose ``sub`` claim is the user ID."""

    def __init__(self, secret: str, *, algorithm: str = "HS256", issuer: str | None = None) -> None:
        self.secret = secret
        self.algorithm = algorithm
        self.issuer = issuer

    def verify(self, token: str) -> UUID:
        if not self.secret:
            msg = "JWT secret is not configured"
            raise AuthenticationError(msg)

        try:
            claims = jwt.decode(
                token,
                self.secret,
                algorithms=[self.algorithm],
                issuer=self.issuer,
                options={"require_sub": True},
            )
        except ExpiredSignatureError as e:
            msg = "Token has expired"
            raise AuthenticationError(msg) from e
        except JWTError as e:
            msg = f"Invalid token: {e!s}"
            raise AuthenticationError(msg) from e

        try:
            return UUID(claims["sub"])
        except (KeyError, TypeError, ValueError) as e:
            msg = "Token subject is not a valid user ID"
            raise AuthenticationError(msg) from e
