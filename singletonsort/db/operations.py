"""
Database key-value operations.

Callers own the session and the transaction boundary.
"""

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from singletonsort.models.db import StoredValueDB


def get_value(session: Session, key: str) -> str | None:
    """
    Get the value stored under a key.

    Returns None if nothing is stored.
    """
    result = session.execute(select(StoredValueDB).where(StoredValueDB.key == key))
    stored = result.scalar_one_or_none()
    return stored.value if stored else None


def put_value(session: Session, key: str, value: str) -> StoredValueDB:
    """Insert or replace the value stored under a key."""
    stored = session.get(StoredValueDB, key)

    if stored:
        stored.value = value
    else:
        stored = StoredValueDB(key=key, value=value)
        session.add(stored)

    session.flush()
    return stored


def delete_value(session: Session, key: str) -> bool:
    """
    Delete the value stored under a key.

    Returns True if a value was deleted, False if none existed.
    """
    result = session.execute(delete(StoredValueDB).where(StoredValueDB.key == key))
    # rowcount is available on DELETE results
    return bool(result.rowcount)  # type: ignore[attr-defined]
