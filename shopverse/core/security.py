# shopverse/core/security.py
from datetime import datetime, timedelta, timezone
from typing import Any, Literal

from jose import jwt, JWTError
from passlib.context import CryptContext

from shopverse.core.config import get_settings
from shopverse.core.errors import UnauthorizedError

settings = get_settings()

Role = Literal["user", "admin"]

# pbkdf2_sha256 is pure Python (hashlib) so no native bcrypt build is needed.
pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except ValueError:
        # Stored hash in an unknown format
        return False


def create_access_token(
    subject: str,
    role: Role,
    expires_delta: timedelta | None = None,
) -> str:
    """
    Issue a signed JWT identifying a user or an admin.

    Claims:
      - sub:  user/admin id
      - role: "user" | "admin"
      - exp:  expiry (ACCESS_TOKEN_EXPIRE_MINUTES by default)
    """
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    )
    claims = {"sub": subject, "role": role, "exp": expire}
    return jwt.encode(claims, settings.JWT_SECRET, algorithm=settings.JWT_ALG)


def decode_access_token(token: str) -> dict[str, Any]:
    """
    Decode and verify an access token.

    Verification:
      - signature (JWT_SECRET / JWT_ALG)
      - expiration time (exp)

    Raises:
        UnauthorizedError: if token is invalid/expired.
    """
    try:
        return jwt.decode(token, settings.JWT_SECRET, algorithms=[settings.JWT_ALG])
    except JWTError:
        raise UnauthorizedError("Invalid or expired token")
