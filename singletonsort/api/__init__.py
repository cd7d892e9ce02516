from singletonsort.api.health import router as health_router
from singletonsort.api.lists import router as lists_router
from singletonsort.api.shutdown import router as shutdown_router

__all__ = [
    "health_router",
    "lists_router",
    "shutdown_router",
]
