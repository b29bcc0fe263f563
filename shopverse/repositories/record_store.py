# shopverse/repositories/record_store.py
"""
Record stores: load and save whole named collections.

A collection is read in full and written back in full; there is no
partial update and no locking. Two requests mutating the same
collection concurrently race and the last write wins.
"""

import copy
import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any

from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from shopverse.core.errors import StoreError
from shopverse.models.collection import StoredCollection

logger = logging.getLogger(__name__)

PRODUCTS = "products"
CARTS = "carts"
ORDERS = "orders"
USERS = "users"
ADMINS = "admins"

# Zero value returned for a collection that has no (valid) data yet
COLLECTION_TYPES: dict[str, type] = {
    PRODUCTS: list,
    CARTS: dict,
    ORDERS: list,
    USERS: list,
    ADMINS: list,
}


def empty_collection(name: str) -> list | dict:
    return COLLECTION_TYPES.get(name, list)()


def _coerce(name: str, data: Any) -> list | dict:
    """Return data if it has the collection's shape, else its zero value."""
    expected = COLLECTION_TYPES.get(name, list)
    if not isinstance(data, expected):
        logger.warning(
            "Collection %r has unexpected type %s; treating as empty",
            name,
            type(data).__name__,
        )
        return expected()
    return data


class RecordStore:
    """
    Interface shared by every backend.

    load() never raises: missing or malformed data yields the empty
    collection. save() raises StoreError when the write fails.
    """

    def load(self, name: str) -> list | dict:
        raise NotImplementedError

    def save(self, name: str, value: list | dict) -> None:
        raise NotImplementedError

    def setup(self) -> None:
        """Prepare the backend (directories, tables). Called on startup."""


class JsonFileStore(RecordStore):
    """One `<name>.json` file per collection inside data_dir."""

    def __init__(self, data_dir: Path):
        self.data_dir = Path(data_dir)

    def path_for(self, name: str) -> Path:
        return self.data_dir / f"{name}.json"

    def setup(self) -> None:
        self.data_dir.mkdir(parents=True, exist_ok=True)

    def load(self, name: str) -> list | dict:
        path = self.path_for(name)
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError:
            return empty_collection(name)
        except (OSError, ValueError) as e:
            logger.warning("Could not read %s (%s); treating as empty", path, e)
            return empty_collection(name)
        return _coerce(name, data)

    def save(self, name: str, value: list | dict) -> None:
        """
        Replace the collection file.

        Writes to a temp file then renames it over the target, so readers
        see either the old or the new document, never a partial one.
        """
        path = self.path_for(name)
        temp_path = None
        try:
            self.data_dir.mkdir(parents=True, exist_ok=True)
            fd, temp_path = tempfile.mkstemp(
                dir=self.data_dir, prefix=f".{name}_", suffix=".tmp"
            )
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(value, f, indent=2)
                f.write("\n")
            os.replace(temp_path, path)
        except OSError as e:
            logger.error("Failed to write collection %r to %s: %s", name, path, e)
            if temp_path is not None:
                try:
                    os.unlink(temp_path)
                except OSError:
                    pass
            raise StoreError(name) from e


class SqlRecordStore(RecordStore):
    """
    Collections kept as JSON documents in a SQL table (one row each).

    Still whole-collection reads and writes; the database only replaces
    the filesystem.
    """

    def __init__(self, engine: Engine):
        self.engine = engine

    def setup(self) -> None:
        StoredCollection.metadata.create_all(self.engine)

    def load(self, name: str) -> list | dict:
        try:
            with Session(self.engine) as session:
                row = session.get(StoredCollection, name)
                payload = row.payload if row is not None else None
        except SQLAlchemyError as e:
            logger.warning("Could not read collection %r (%s); treating as empty", name, e)
            return empty_collection(name)

        if payload is None:
            return empty_collection(name)
        try:
            data = json.loads(payload)
        except ValueError as e:
            logger.warning("Collection %r holds invalid JSON (%s); treating as empty", name, e)
            return empty_collection(name)
        return _coerce(name, data)

    def save(self, name: str, value: list | dict) -> None:
        payload = json.dumps(value)
        try:
            with Session(self.engine) as session:
                session.merge(StoredCollection(name=name, payload=payload))
                session.commit()
        except SQLAlchemyError as e:
            logger.error("Failed to write collection %r: %s", name, e)
            raise StoreError(name) from e


class MemoryStore(RecordStore):
    """
    In-process store, mainly for tests.

    Values are deep-copied on the way in and out so callers get the same
    snapshot semantics as the file and SQL backends.
    """

    def __init__(self, initial: dict[str, list | dict] | None = None):
        self._collections: dict[str, list | dict] = {}
        for name, value in (initial or {}).items():
            self.save(name, value)

    def load(self, name: str) -> list | dict:
        if name not in self._collections:
            return empty_collection(name)
        return copy.deepcopy(self._collections[name])

    def save(self, name: str, value: list | dict) -> None:
        self._collections[name] = copy.deepcopy(value)
