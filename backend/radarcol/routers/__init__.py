# API routers
from .dashboard import router as dashboard_router
from .analysis import router as analysis_router

__all__ = [
    "dashboard_router",
    "analysis_router",
]
