# shopverse/database.py
from functools import lru_cache

from sqlalchemy.engine import Engine
from sqlmodel import create_engine

from shopverse.core.config import get_settings
from shopverse.repositories.record_store import (
    JsonFileStore,
    RecordStore,
    SqlRecordStore,
)

settings = get_settings()


@lru_cache
def get_engine() -> Engine:
    """
    Engine for the SQL backend, created on first use.

    - pool_pre_ping=True: validate connections before using them
    - SQLite needs check_same_thread=False since FastAPI serves sync
      endpoints from a thread pool
    """
    connect_args = {}
    if settings.DATABASE_URL.startswith("sqlite"):
        connect_args["check_same_thread"] = False

    return create_engine(
        settings.DATABASE_URL,
        echo=False,  # set to True if you want to debug SQL queries
        pool_pre_ping=True,
        connect_args=connect_args,
    )


@lru_cache
def build_store() -> RecordStore:
    """
    Build the configured record store once per process.

    STORE_BACKEND:
      - json: one file per collection under DATA_DIR
      - sql:  one row per collection in DATABASE_URL
    """
    if settings.STORE_BACKEND == "sql":
        return SqlRecordStore(get_engine())
    return JsonFileStore(settings.DATA_DIR)


def get_store() -> RecordStore:
    """
    FastAPI dependency that returns the record store.

    Usage:

        from fastapi import Depends

        @router.get("/example")
        def example_endpoint(store: RecordStore = Depends(get_store)):
            ...

    Tests replace it through app.dependency_overrides.
    """
    return build_store()
