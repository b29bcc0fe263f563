# shopverse/core/auth.py
from dataclasses import dataclass

from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from shopverse.core.errors import UnauthorizedError
from shopverse.core.security import decode_access_token

# HTTP Bearer scheme:
# - auto_error=False => missing Authorization header will NOT raise immediately
#   so we can support "guest" mode (unauthenticated).
bearer_scheme = HTTPBearer(auto_error=False)


@dataclass(frozen=True)
class Identity:
    """Who is calling: a customer or an admin, by id."""

    id: str
    role: str


def get_current_identity(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> Identity | None:
    """
    Resolve the caller from a bearer token.

    Flow:
      1. If no Authorization header => guest => return None.
      2. Decode JWT => extract 'sub' and 'role'.

    Raises:
        UnauthorizedError: if the token is invalid or lacks required claims.
    """
    if credentials is None:
        return None  # guest mode

    payload = decode_access_token(credentials.credentials)
    sub = payload.get("sub")
    role = payload.get("role")

    if not sub or role not in ("user", "admin"):
        raise UnauthorizedError("Token missing sub/role")

    return Identity(id=sub, role=role)


def resolve_user(identity: Identity | None = Depends(get_current_identity)) -> str | None:
    """Customer id of the caller, or None."""
    if identity is not None and identity.role == "user":
        return identity.id
    return None


def resolve_admin(identity: Identity | None = Depends(get_current_identity)) -> str | None:
    """Admin id of the caller, or None."""
    if identity is not None and identity.role == "admin":
        return identity.id
    return None


def require_user(user_id: str | None = Depends(resolve_user)) -> str:
    """
    Enforce a customer identity.

    Use this for:
      - cart endpoints
      - checkout and order history
    Guests and admins are rejected with 401.
    """
    if user_id is None:
        raise UnauthorizedError("Authentication required")
    return user_id


def require_admin(admin_id: str | None = Depends(resolve_admin)) -> str:
    """
    Enforce an admin identity.

    Raises:
        UnauthorizedError: if the caller is a guest or a customer.
    """
    if admin_id is None:
        raise UnauthorizedError("Admin authentication required")
    return admin_id
