"""API 路由"""

from interfaces.api.routes.fetch import router as fetch_router

__all__ = ["fetch_router"]
