import logging
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager

from cdn_bot import __version__
from cdn_bot.api.slack_routes import router as slack_router
from cdn_bot.config import get_settings

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    logging.getLogger().setLevel(settings.log_level.upper())
    logger.info(f"Starting CDN invalidation Slack bot for distribution {settings.cdn_distribution}...")
    yield
    logger.info("Shutting down CDN invalidation Slack bot...")

app = FastAPI(
    title="CDN Invalidation Slack Bot",
    description="A Slack bot webhook that invalidates a CloudFront distribution on request",
    version=__version__,
    lifespan=lifespan
)

app.include_router(slack_router)


@app.get("/")
async def root():
    return {
        "message": "CDN Invalidation Slack Bot API",
        "version": __version__,
        "endpoints": {
            "slack_webhook": "/slack/events",
            "health": "/health"
        }
    }


@app.get("/health")
async def health_check():
    return {
        "status": "healthy",
        "service": "cdn-invalidation-bot",
        "version": __version__
    }


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled exception: {str(exc)}", exc_info=True)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"}
    )
