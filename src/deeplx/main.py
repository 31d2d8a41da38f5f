import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .core.config import get_settings
from .core.errors import register_exception_handlers
from .api.translate import router as translate_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    logging.basicConfig(level=settings.log_level.upper())
    logger.info("%s starting (env=%s, endpoint=%s)", settings.app_name, settings.app_env, settings.endpoint)
    yield
    logger.info("%s stopped", settings.app_name)


app = FastAPI(title="DeepLX", lifespan=lifespan)
register_exception_handlers(app)

settings_for_cors = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings_for_cors.cors_origins,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
    max_age=3600,
)


@app.get("/health")
def health():
    return {"status": "ok"}


app.include_router(translate_router)
