from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from marketplace.core.config import settings
from marketplace.core.logging import LoggingMiddleware, get_logger, setup_logging
from marketplace.routers import auth, drivers, orders, products, uploads, users, vendors
from marketplace.storage import Storage, build_storage
from marketplace.utils.exceptions import register_exception_handlers
from marketplace.utils.image_utils import BlobStore, CloudinaryBlobStore

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    app.state.storage.close()


def create_app(storage: Optional[Storage] = None, blob_store: Optional[BlobStore] = None) -> FastAPI:
    """
    Build the API around an explicitly constructed entity store. Passing a
    store (and blob store) in is how tests get a fresh, isolated instance.
    """
    setup_logging()

    app = FastAPI(title="Marketplace API", version="1.0.0", lifespan=lifespan)
    app.state.storage = storage if storage is not None else build_storage(settings)
    app.state.blob_store = blob_store if blob_store is not None else CloudinaryBlobStore(settings.CLOUDINARY_URL)

    app.add_middleware(LoggingMiddleware)
    register_exception_handlers(app)

    @app.get("/health")
    def health_check():
        """Basic health check endpoint"""
        return {"status": "healthy", "message": "Marketplace API is running"}

    @app.get("/")
    def root():
        """Root endpoint with API information"""
        return {
            "message": "Welcome to the Marketplace API",
            "version": "1.0.0",
            "docs": "/docs",
            "health": "/health"
        }

    app.include_router(auth.router)
    app.include_router(users.router)
    app.include_router(vendors.router)
    app.include_router(products.router)
    app.include_router(drivers.router)
    app.include_router(orders.router)
    app.include_router(uploads.router)

    logger.info("Application configured", storage=type(app.state.storage).__name__)
    return app


app = create_app()
