"""
Store Admin - Backend API
Store-scoped CRUD endpoints consumed by the admin dashboard
"""
import logging
import time
from contextlib import asynccontextmanager
from pathlib import Path

from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy import text

# Load environment variables
env_path = Path(__file__).parent.parent / '.env'
load_dotenv(env_path)

from store_admin.api import billboards, categories, colors, orders, products, sizes
from store_admin.core.config import settings
from store_admin.core.database import engine, init_db

logging.basicConfig(
    level=logging.DEBUG if settings.API_DEBUG else logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    yield


def create_app() -> FastAPI:
    """Build the FastAPI application with CORS and all resource routers"""
    app = FastAPI(
        title=settings.API_TITLE,
        version=settings.API_VERSION,
        description=settings.API_DESCRIPTION,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.get_allowed_origins(),
        allow_credentials=True,
        allow_methods=["GET", "POST", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )

    # Include API routers
    app.include_router(billboards.router, prefix="/api/{store_id}/billboards", tags=["Billboards"])
    app.include_router(categories.router, prefix="/api/{store_id}/categories", tags=["Categories"])
    app.include_router(sizes.router, prefix="/api/{store_id}/sizes", tags=["Sizes"])
    app.include_router(colors.router, prefix="/api/{store_id}/colors", tags=["Colors"])
    app.include_router(products.router, prefix="/api/{store_id}/products", tags=["Products"])
    app.include_router(orders.router, prefix="/api/{store_id}/orders", tags=["Orders"])

    @app.get("/")
    async def root():
        """Root endpoint - API status"""
        return {
            "message": "Store Admin API",
            "status": "online",
            "version": settings.API_VERSION,
        }

    @app.get("/health")
    async def health():
        """Health check endpoint - tests database connectivity"""
        start_time = time.time()
        try:
            with engine.connect() as conn:
                conn.execute(text("SELECT 1"))
        except Exception as e:
            logger.error(f"Health check failed: {e}")
            raise HTTPException(status_code=503, detail=f"Database unavailable: {str(e)}")

        return {
            "status": "healthy",
            "database": "connected",
            "latency_ms": round((time.time() - start_time) * 1000, 2),
        }

    return app


app = create_app()
