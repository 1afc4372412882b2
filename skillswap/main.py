import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from slowapi import _rate_limit_exceeded_handler
import sentry_sdk

from skillswap.api.v1.health import router as health_router
from skillswap.api.v1.match import router as match_router
from skillswap.api.v1.explore import router as explore_router
from skillswap.core.cors import cors_allowed_origins
from skillswap.core.rate_limit import limiter
from skillswap.core.config import settings
from skillswap.core.lifespan import lifespan

logging.basicConfig(level=settings.log_level, format="%(message)s")
if settings.sentry_dsn:
    sentry_sdk.init(dsn=settings.sentry_dsn)

app = FastAPI(title="SkillSwap Matching API", version="0.1.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_allowed_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
app.add_middleware(SlowAPIMiddleware)

app.include_router(health_router, prefix="/v1", tags=["Health"])
app.include_router(match_router, prefix="/v1", tags=["Match"])
app.include_router(explore_router, prefix="/v1", tags=["Explore"])
