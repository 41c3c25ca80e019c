"""
Health check endpoints.
"""
from fastapi import APIRouter
from pydantic import BaseModel

router = APIRouter(tags=["health"])


class PingResponse(BaseModel):
    """Liveness response model."""

    status: str


@router.get("/ping", response_model=PingResponse)
async def ping():
    """Liveness probe."""
    return PingResponse(status="ok")
