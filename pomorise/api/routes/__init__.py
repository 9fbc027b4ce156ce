"""
API Routes module - Endpoint definitions.

Each file in this module defines routes for a specific domain:
- action.py   : Text to structured action
- insights.py : Habit/task insights
- speech.py   : Speech-to-text relay
- auth.py     : Identity provider relay
- health.py   : Health check endpoint
"""
from pomorise.api.routes.action import router as action_router
from pomorise.api.routes.insights import router as insights_router
from pomorise.api.routes.speech import router as speech_router
from pomorise.api.routes.auth import router as auth_router
from pomorise.api.routes.health import router as health_router

__all__ = [
    "action_router",
    "insights_router",
    "speech_router",
    "auth_router",
    "health_router",
]
