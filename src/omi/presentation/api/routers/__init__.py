from omi.presentation.api.routers.auth import router as auth_router
from omi.presentation.api.routers.comments import router as comments_router
from omi.presentation.api.routers.favorites import router as favorites_router
from omi.presentation.api.routers.ratings import router as ratings_router

__all__ = [
    "auth_router",
    "comments_router",
    "favorites_router",
    "ratings_router",
]
