"""Master module - dynamic route aggregator for FastAPI."""

from importlib.metadata import entry_points
from typing import Callable, cast

from fastapi import APIRouter

from .common.config import Settings
from .plugins.print_resize.service import ResizeService
from .utils.admission import ResizeLimiter

# Type alias for route factory functions loaded from entry points
RouteFactory = Callable[[ResizeService, ResizeLimiter, Settings], APIRouter]

ROUTES_GROUP = "print_resizer.routes"


def create_master_router(
    service: ResizeService,
    limiter: ResizeLimiter,
    settings: Settings,
) -> APIRouter:
    """Dynamically aggregate all plugin routes from entry points.

    Discovers routes from [project.entry-points."print_resizer.routes"]
    in pyproject.toml and creates a combined router.

    Args:
        service: ResizeService shared by every request
        limiter: ResizeLimiter shared by every request
        settings: Application settings

    Returns:
        Combined APIRouter with all plugin routes

    Raises:
        RuntimeError: If a plugin fails to load (missing dependency, etc.)
    """
    master = APIRouter()

    for ep in entry_points(group=ROUTES_GROUP):
        try:
            create_router = cast(RouteFactory, ep.load())
            plugin_router: APIRouter = create_router(service, limiter, settings)
            master.include_router(plugin_router)
        except Exception as e:
            # Plugin dependency missing = exception (fail fast)
            raise RuntimeError(f"Failed to load plugin '{ep.name}': {e}") from e

    return master


def get_available_plugins() -> list[str]:
    """Get list of available plugins.

    Returns:
        List of plugin names registered as entry points
    """
    return [ep.name for ep in entry_points(group=ROUTES_GROUP)]
