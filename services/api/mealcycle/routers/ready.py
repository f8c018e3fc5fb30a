from fastapi import APIRouter

from ..measurements import CONVERSION_RATIOS
from ..settings import settings

router = APIRouter()


@router.get("/ready")
def ready():
    return {"ok": True, "version": settings.version, "units": len(CONVERSION_RATIOS)}
