import logging
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI

from app.routers import blog, pages
from app.settings import settings

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="MOSC Website API",
    description="Pages and blog content for Mathematics Outstanding Students Cambodia",
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    app.state.cms_http = httpx.AsyncClient()
    logger.info(f"Serving blog content from CMS at {settings.cms_base_url}")

    try:
        yield
    finally:
        await app.state.cms_http.aclose()
        app.state.cms_http = None
        logger.info("CMS HTTP client closed")


app.router.lifespan_context = lifespan

app.include_router(pages.router)
app.include_router(blog.router)
