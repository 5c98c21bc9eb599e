import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api.handlers import register_exception_handlers
from .api.routes import api_router
from .config import settings

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage application lifespan: startup and shutdown events.
    """
    logger.info(f"Starting {settings.APP_TITLE} (model: {settings.DEFAULT_MODEL})")
    if not settings.OPENROUTER_API_KEY:
        logger.warning("OPENROUTER_API_KEY is not set; generation endpoints will fail")

    yield

    logger.info(f"Shutting down {settings.APP_TITLE}")

app = FastAPI(
    title=settings.APP_TITLE,
    description="Generates LinkedIn posts and hooks in English and Kurdish Sorani, adapts them for other platforms, and stores custom tones, saved posts and the extension's swipe file.",
    lifespan=lifespan
)

# The browser extension calls in from a chrome-extension:// origin
app.add_middleware(
    CORSMiddleware,
    allow_origins=[],
    allow_origin_regex=r"^https:\/\/.*\.vercel\.app$|^http:\/\/localhost:\d+$|^http:\/\/127\.0\.0\.1:\d+$|^chrome-extension:\/\/[a-z]+$",
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["*"],
)

register_exception_handlers(app)
app.include_router(api_router)
