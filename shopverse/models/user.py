# shopverse/models/user.py
from datetime import datetime, timezone

from sqlmodel import SQLModel, Field

from shopverse.models.product import new_record_id


class User(SQLModel):
    """
    Customer account stored in the `users` collection.

    password_hash is never returned by the API; see schemas.user.UserRead.
    """

    id: str = Field(default_factory=new_record_id)
    name: str
    email: str
    password_hash: str
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
    )


class Admin(SQLModel):
    """Back-office account stored in the `admins` collection."""

    id: str = Field(default_factory=new_record_id)
    username: str
    password_hash: str
