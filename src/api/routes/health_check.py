from fastapi import APIRouter, status

from src.domain.base import utcnow

router = APIRouter(tags=["Health"])


@router.get("/health", status_code=status.HTTP_200_OK)
async def health_check():
    return {
        "success": True,
        "message": "NUPRC API is running",
        "timestamp": utcnow().isoformat() + "Z",
    }
