from __future__ import annotations
from datetime import datetime, timezone
from fastapi import APIRouter

from platecraft.shared.config.settings import settings

router = APIRouter(tags=["health"])

@router.get("/health")
def health():
    return {
        "status": "ok",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "service": settings.SERVICE_NAME,
    }
