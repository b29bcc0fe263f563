# shopverse/models/collection.py
from sqlmodel import SQLModel, Field


class StoredCollection(SQLModel, table=True):
    """
    One whole collection serialized as JSON.

    Used by SqlRecordStore: a collection is the unit of read and write,
    so there is exactly one row per collection name.
    """

    __tablename__ = "collections"

    name: str = Field(primary_key=True, max_length=64)
    payload: str = Field(description="JSON document of the full collection")
