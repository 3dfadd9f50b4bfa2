"""Service status endpoints."""

from fastapi import APIRouter

from flashdeck.config import Settings

router = APIRouter(tags=["health"])


@router.get("/health")
def health() -> dict[str, str]:
    """Liveness probe; does not touch the database."""
    return {"status": "healthy"}


def build_root_router(settings: Settings) -> APIRouter:
    """Build the router for the service root and the versioned API root."""
    root_router = APIRouter(tags=["health"])

    @root_router.get("/")
    def root() -> dict[str, str]:
        return {"message": f"Welcome to {settings.PROJECT_NAME}"}

    @root_router.get(f"{settings.API_V1_PREFIX}/")
    def api_root() -> dict[str, str]:
        return {
            "message": f"{settings.PROJECT_NAME} v1",
            "version": settings.VERSION,
            "docs": "/docs",
        }

    return root_router
