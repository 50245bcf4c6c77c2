"""
Order Service Application

Order-taking backend: cart consolidation with promotion pricing and order
confirmation.
"""

import logging
from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .core.config import settings
from .routes import items_router, cart_router, orders_router
from .routes.dependencies import get_engine

# Load environment variables
load_dotenv()

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events"""
    logger.info(f"{settings.app_name} starting up...")
    engine = get_engine()
    logger.info(
        f"Catalog: {len(engine.catalog.items)} item(s), "
        f"{len(engine.catalog.promotions)} promotion(s); "
        f"timeout={settings.context_timeout}s, discount threshold={settings.discount_threshold.value}"
    )
    yield
    logger.info(f"{settings.app_name} shutting down...")


# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    description="Cart consolidation, promotion pricing and order confirmation",
    version="1.0.0",
    lifespan=lifespan,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API routers
app.include_router(items_router)
app.include_router(cart_router)
app.include_router(orders_router)


@app.get("/")
async def home():
    """Service index"""
    return {
        "message": f"{settings.app_name} API",
        "docs": "/docs",
        "endpoints": {
            "items": "/api/items",
            "cart": "/api/cart",
            "orders": "/api/orders",
        },
    }


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "service": "order-service"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "order_service.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
