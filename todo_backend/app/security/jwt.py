# todo_backend/app/security/jwt.py
"""
Signed, time-limited identity tokens (JWT, HS256).

Claims: sub (user id as a string), iss, iat, exp = iat + lifetime.
Nothing is persisted server-side; a token is valid as long as its
signature, algorithm, issuer and expiry check out.
"""
import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

from jose import ExpiredSignatureError, JOSEError, JWTError, jwt
from jose.exceptions import JWTClaimsError

from todo_backend.app.core.config import Settings
from todo_backend.app.core.errors import SigningError, TokenError

logger = logging.getLogger(__name__)


class TokenService:
    """
    Issues and verifies access tokens.

    Built once at startup; the secret is held by the instance and never read
    from the environment afterwards.
    """

    def __init__(
        self,
        secret: str,
        algorithm: str = "HS256",
        issuer: str = "todo-app",
        lifetime: timedelta = timedelta(hours=1),
    ):
        if not secret:
            raise SigningError("Signing key is not configured")
        if not algorithm.startswith("HS"):
            raise SigningError(f"Unsupported signing algorithm: {algorithm}")
        self._secret = secret
        self.algorithm = algorithm
        self.issuer = issuer
        self.lifetime = lifetime

    @classmethod
    def from_settings(cls, settings: Settings) -> "TokenService":
        return cls(
            secret=settings.SECRET_KEY,
            algorithm=settings.ALGORITHM,
            issuer=settings.TOKEN_ISSUER,
            lifetime=timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES),
        )

    def issue(self, subject_id: int, issued_at: Optional[datetime] = None) -> str:
        now = issued_at or datetime.now(timezone.utc)
        claims = {
            "sub": str(subject_id),
            "iss": self.issuer,
            "iat": int(now.timestamp()),
            "exp": int((now + self.lifetime).timestamp()),
        }
        logger.debug("Token claims added: %s", claims)
        try:
            return jwt.encode(claims, self._secret, algorithm=self.algorithm)
        except JOSEError as e:
            raise SigningError() from e

    def verify(self, token: str) -> int:
        """
        Return the user id carried by `token`.

        Raises TokenError with one of the TokenError reason constants.
        The algorithm header is checked before the signature so that a
        token declaring any other scheme ("none", RS256, ...) is refused
        outright.
        """
        try:
            header = jwt.get_unverified_header(token)
        except JWTError:
            raise TokenError(TokenError.MALFORMED)

        if header.get("alg") != self.algorithm:
            raise TokenError(TokenError.WRONG_ALGORITHM)

        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self.algorithm],
                issuer=self.issuer,
            )
        except ExpiredSignatureError:
            raise TokenError(TokenError.EXPIRED)
        except JWTClaimsError:
            raise TokenError(TokenError.INVALID_CLAIMS)
        except JWTError:
            raise TokenError(TokenError.BAD_SIGNATURE)

        sub = payload.get("sub")
        if sub is None or sub == "":
            raise TokenError(TokenError.MISSING_SUBJECT)
        try:
            return int(sub)
        except (TypeError, ValueError):
            raise TokenError(TokenError.INVALID_CLAIMS)
