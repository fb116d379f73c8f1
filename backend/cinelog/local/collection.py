from logging import getLogger
from typing import TypeVar

from pydantic import BaseModel, TypeAdapter, ValidationError

from cinelog.local.storage import Storage

logger = getLogger(__name__)

T = TypeVar("T", bound=BaseModel)


def load(storage: Storage, key: str, adapter: TypeAdapter[list[T]]) -> list[T]:
    """
    Read a JSON array from storage.

    A missing key, an unreadable medium or malformed contents all yield an
    empty list; a corrupted local cache must never crash the caller.
    """
    try:
        raw = storage.get_item(key)
    except (OSError, UnicodeDecodeError):
        logger.warning("Could not read %s from local storage", key, exc_info=True)
        return []
    if not raw:
        return []
    try:
        return adapter.validate_json(raw)
    except ValidationError:
        logger.warning("Discarding malformed local data under %s", key, exc_info=True)
        return []


def persist(storage: Storage, key: str, adapter: TypeAdapter[list[T]], items: list[T]) -> None:
    storage.set_item(key, adapter.dump_json(items).decode("utf-8"))
