"""FastAPI server for the Platewise landing page."""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.responses import HTMLResponse

from platewise.config import get_config, setup_logging
from platewise.home import (
    HomePage,
    author_name,
    render_home_page,
    render_stars,
    review_image_urls,
)
from platewise.services.data_service import DataService
from platewise.services.navigation import Navigator
from platewise.services.storage import StorageUrlResolver
from platewise.services.toaster import Toaster

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI):
    """Application lifespan manager."""
    config = get_config()
    logger.info(
        f"Starting Platewise on {config.server_host}:{config.server_port}"
    )

    # One HTTP client shared by every page view
    data_service = DataService(config)
    _app.state.data_service = data_service
    _app.state.storage = StorageUrlResolver(config)

    yield

    logger.info("Shutting down Platewise")
    await data_service.aclose()


app = FastAPI(
    title="Platewise",
    description="Restaurant review landing page",
    version="0.1.0",
    lifespan=lifespan,
)


def get_data_service(request: Request) -> DataService:
    """Dependency to get the shared data service from app state.

    Raises:
        HTTPException: If the service is not initialized
    """
    data_service = getattr(request.app.state, "data_service", None)
    if data_service is None:
        raise HTTPException(status_code=503, detail="Data service not initialized yet")
    return data_service


def get_storage(request: Request) -> StorageUrlResolver:
    """Dependency to get the storage URL resolver from app state.

    Raises:
        HTTPException: If the resolver is not initialized
    """
    storage = getattr(request.app.state, "storage", None)
    if storage is None:
        raise HTTPException(status_code=503, detail="Storage not initialized yet")
    return storage


async def load_home_page(
    data_service: DataService = Depends(get_data_service),
    storage: StorageUrlResolver = Depends(get_storage),
):
    """Dependency that mounts a home page and waits for both loads.

    The page is unmounted once the response has been produced.
    """
    config = get_config()
    page = HomePage(
        data_service=data_service,
        storage=storage,
        toaster=Toaster(limit=config.toast_limit),
        navigator=Navigator(),
        restaurant_limit=config.featured_restaurant_limit,
        review_limit=config.latest_review_limit,
    )
    page.mount()
    await page.settled()
    try:
        yield page
    finally:
        page.unmount()


@app.get("/health")
async def health_check():
    """Health check endpoint for monitoring."""
    return {"status": "healthy", "service": "platewise"}


@app.get("/", response_class=HTMLResponse)
async def home(page: HomePage = Depends(load_home_page)):
    """Render the landing page."""
    config = get_config()
    return HTMLResponse(render_home_page(page, bucket=config.review_images_bucket))


@app.get("/api/home")
async def home_data(page: HomePage = Depends(load_home_page)):
    """Return the landing page state as JSON.

    Returns:
        {
            "restaurants": [...],
            "latest_reviews": [{..., "author": "...", "stars": "★★★☆☆", "image_urls": [...]}],
            "toasts": [...]
        }
    """
    config = get_config()
    latest_reviews = []
    for review in page.latest_reviews:
        item = review.model_dump(mode="json")
        item["author"] = author_name(review)
        item["stars"] = render_stars(review.rating)
        item["image_urls"] = review_image_urls(
            review, page.storage, config.review_images_bucket
        )
        latest_reviews.append(item)

    return {
        "restaurants": [r.model_dump(mode="json") for r in page.restaurants],
        "latest_reviews": latest_reviews,
        "toasts": [t.model_dump(mode="json") for t in page.toaster.toasts],
    }


def run_server():
    """Run the FastAPI server using uvicorn.

    This is the main entry point for the server.
    """
    setup_logging()
    config = get_config()

    uvicorn.run(
        "platewise.server:app",
        host=config.server_host,
        port=config.server_port,
        log_level=config.log_level.lower(),
        reload=False,
    )


if __name__ == "__main__":
    run_server()
