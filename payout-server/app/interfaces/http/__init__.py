from fastapi import APIRouter

from app.interfaces.http.routers import checkouts, health, tasks, users


def create_api_router(prefix: str = "") -> APIRouter:
    router = APIRouter(prefix=prefix)
    router.include_router(health.router, tags=["health"])
    router.include_router(users.router, tags=["users"])
    router.include_router(tasks.router, tags=["tasks"])
    router.include_router(checkouts.router, tags=["checkouts"])
    return router


__all__ = [
    "create_api_router",
]
