"""
LocalThread Storefront Application

Shopping API for the LocalThread multi-vendor storefront: catalog browsing,
cart, wishlist and checkout.
"""

import os
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from dotenv import load_dotenv

from .core.config import CONFIG_DIR, settings
from .routes import products_router, cart_router, wishlist_router, checkout_router
from .security.auth import BearerAuthMiddleware

# Load environment variables
load_dotenv(os.path.join(CONFIG_DIR, ".env"))

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
    logger.info(f"Flat shipping fee: {settings.flat_shipping_fee} {settings.currency}")
    yield
    logger.info(f"{settings.app_name} shutting down...")


# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    description="Multi-vendor storefront: catalog, cart, wishlist and checkout",
    version="1.0.0",
    lifespan=lifespan,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Bearer token middleware
app.add_middleware(BearerAuthMiddleware)

# Include API routers
app.include_router(products_router)
app.include_router(cart_router)
app.include_router(wishlist_router)
app.include_router(checkout_router)


@app.get("/")
async def home():
    """Storefront API index"""
    return {
        "message": "LocalThread Storefront API",
        "docs": "/docs",
        "endpoints": {
            "products": "/api/products",
            "cart": "/api/cart",
            "wishlist": "/api/wishlist",
            "checkout": "/api/checkout",
        },
    }


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "service": "localthread-storefront"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "localthread.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
