"""General Router.

Health check 엔드포인트입니다.
"""

from fastapi import APIRouter

router = APIRouter()


@router.get("/health", summary="Health check")
async def health() -> dict:
    return {"status": "healthy"}
