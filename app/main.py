import logging

from dotenv import load_dotenv
from fastapi import FastAPI
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
import sentry_sdk

from app.api.v1.health import router as health_router
from app.api.v1.resume import router as resume_router
from app.core.config import settings
from app.core.cors import configure_cors
from app.core.lifespan import lifespan
from app.core.rate_limit import limiter

load_dotenv()
logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s %(message)s")
if settings.sentry_dsn:
    sentry_sdk.init(dsn=settings.sentry_dsn)

app = FastAPI(title="Resume Analyzer API", version="0.1.0", lifespan=lifespan)

configure_cors(app)
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
app.add_middleware(SlowAPIMiddleware)

app.include_router(health_router, prefix="/v1", tags=["Health"])
app.include_router(resume_router, prefix="/v1", tags=["Resume"])
