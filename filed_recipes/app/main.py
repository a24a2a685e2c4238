from contextlib import asynccontextmanager

from fastapi import FastAPI
import logging

from .api.recipes import get_repository, router as recipes_router
from .core.config import get_settings

settings = get_settings()

# Configure logging
logging.basicConfig(
    level=settings.log_level,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

log = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.load_on_startup:
        result = get_repository().load()
        if result.ok:
            log.info(f"📚 {result.recipes} recipe(s) ready")
        else:
            log.warning("⚠️ Starting with an empty recipe collection")
    yield


app = FastAPI(title="filed-recipes", version="0.1.0", description="Recipe collection backed by a text file", lifespan=lifespan)

app.include_router(recipes_router)


@app.get("/api/health")
async def health_check():
    return {"status": "ok", "message": "filed-recipes API is running", "recipes_file": str(settings.recipes_file)}
