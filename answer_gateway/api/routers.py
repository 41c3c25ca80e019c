from fastapi import APIRouter

from .endpoints import answer
from .endpoints import health

api_router = APIRouter()

# Include endpoint routers
api_router.include_router(health.router, prefix="", tags=["health"])
api_router.include_router(answer.router, prefix="", tags=["answer"])
