"""API routers.

Each router module defines endpoints for a specific domain:
  - comments: Comment CRUD and story-scoped endpoints (/api/comments)
"""

from blog.api.routers.comments import router as comments_router

__all__ = ["comments_router"]
