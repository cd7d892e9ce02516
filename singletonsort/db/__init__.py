from singletonsort.db.database import drop_db, engine, init_db, session_factory
from singletonsort.db.operations import delete_value, get_value, put_value

__all__ = [
    "delete_value",
    "drop_db",
    "engine",
    "get_value",
    "init_db",
    "put_value",
    "session_factory",
]
