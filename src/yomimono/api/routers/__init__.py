"""API routers for different endpoint groups.

Routers:
- auth: Sign-up, sign-in and current user
- health: Health check and monitoring endpoints
- stories: Story management and vocabulary extraction
"""

from .auth import router as auth_router
from .health import router as health_router
from .stories import router as stories_router

__all__ = [
    "auth_router",
    "health_router",
    "stories_router",
]
