"""
Router package for the Training Progression API.

This package contains all API routers organized by domain:
- health: Health check endpoints
- progression: History, suggestions, deload and adaptation analysis
- generation: Program generation from wizard answers
"""

from api.routers.health import router as health_router
from api.routers.progression import router as progression_router
from api.routers.generation import router as generation_router

__all__ = [
    "health_router",
    "progression_router",
    "generation_router",
]
