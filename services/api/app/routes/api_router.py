"""Central API router composition.

Mounts the individual route modules on the main app router and provides a
single import point for `FastAPI.include_router(...)`.
"""

from fastapi import APIRouter

from .users import router as users_router

router = APIRouter()

router.include_router(users_router)
