# Meal Cycle Measurements API Main Entry Point
import logging
import sys
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi import Limiter, _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from slowapi.util import get_remote_address

from .settings import settings
from .routers.ready import router as ready_router
from .routers.units import router as units_router
from .routers.grocery import router as grocery_router

logging.basicConfig(
    level=settings.log_level,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[logging.StreamHandler(sys.stdout)]
)
logger = logging.getLogger("mealcycle")

# Rate limiter (per-IP)
limiter = Limiter(
    key_func=get_remote_address,
    default_limits=[settings.rate_limit],
    enabled=settings.rate_limit_enabled,
)

app = FastAPI(title=settings.app_name, version=settings.version)
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
app.add_middleware(SlowAPIMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(ready_router, prefix=settings.api_prefix, tags=["ready"])
app.include_router(units_router, prefix=f"{settings.api_prefix}/units", tags=["units"])
app.include_router(grocery_router, prefix=f"{settings.api_prefix}/grocery", tags=["grocery"])

logger.info(f"{settings.app_name} {settings.version} routes mounted under {settings.api_prefix}")
