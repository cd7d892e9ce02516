from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from importlib.metadata import version as pkg_version

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from singletonsort.api import health_router, lists_router, shutdown_router
from singletonsort.config import settings
from singletonsort.db.database import init_db, session_factory
from singletonsort.services.card_list_store import CardListStore
from singletonsort.services.storage import SqlKeyValueStore


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Create tables and load the card list store once at startup."""
    init_db()
    app.state.store = CardListStore(SqlKeyValueStore(session_factory), settings.storage_key)
    yield


app = FastAPI(
    title=settings.app_name,
    version=pkg_version("singletonsort"),
    lifespan=lifespan,
)

app.include_router(health_router)
app.include_router(lists_router)
app.include_router(shutdown_router)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Local single-user tool
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)
