"""
BeerBro - Backend API
Storefront and admin API for the BeerBro alcohol-delivery shop
"""
import logging
import time
from pathlib import Path

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Load environment variables
env_path = Path(__file__).parent.parent / '.env'
load_dotenv(env_path)

from app.core.config import settings
from app.core.database import get_firestore

# Import API routers
from app.api import (
    products,
    categories,
    orders,
    users,
    addresses,
    cart,
    payments,
    admin,
    admin_products,
    admin_orders,
    admin_users,
    admin_locations,
)

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

ALLOWED_ORIGINS = settings.get_allowed_origins()

# Create FastAPI app
app = FastAPI(
    title=settings.API_TITLE,
    version=settings.API_VERSION,
    description=settings.API_DESCRIPTION,
    debug=settings.API_DEBUG,
)

# Configure CORS with both specific origins and Vercel regex pattern
app.add_middleware(
    CORSMiddleware,
    allow_origin_regex=r"https://.*\.vercel\.app",  # Storefront preview/production deployments
    allow_origins=ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS", "PATCH"],
    allow_headers=["*"],
    expose_headers=["*"],
)

# Storefront routers
app.include_router(products.router, prefix="/api/products", tags=["Products"])
app.include_router(categories.router, prefix="/api/categories", tags=["Categories"])
app.include_router(orders.router, prefix="/api/orders", tags=["Orders"])
app.include_router(users.router, prefix="/api/users", tags=["Users"])
app.include_router(addresses.router, prefix="/api/users", tags=["Addresses"])
app.include_router(cart.router, prefix="/api/cart", tags=["Cart"])
app.include_router(payments.router, prefix="/api/payments", tags=["Payments"])

# Admin routers (admin bearer token required)
app.include_router(admin.router, prefix="/api/admin", tags=["Admin"])
app.include_router(admin_products.router, prefix="/api/admin/products", tags=["Admin Products"])
app.include_router(admin_orders.router, prefix="/api/admin/orders", tags=["Admin Orders"])
app.include_router(admin_users.router, prefix="/api/admin/users", tags=["Admin Users"])
app.include_router(admin_locations.router, prefix="/api/admin/locations", tags=["Admin Locations"])


@app.get("/")
async def root():
    """Root endpoint - API status"""
    return {
        "message": "BeerBro API",
        "status": "online",
        "version": settings.API_VERSION,
        "description": settings.API_DESCRIPTION
    }


@app.get("/health")
async def health():
    """Health check endpoint for monitoring - tests Firestore connectivity"""
    start_time = time.time()

    db_status = "unknown"
    db_latency_ms = None
    db_error = None

    try:
        db_start = time.time()
        list(get_firestore().collection("categories").limit(1).stream())
        db_latency_ms = round((time.time() - db_start) * 1000, 2)
        db_status = "connected"
    except Exception as e:
        logger.warning(f"Health check could not reach Firestore: {e}")
        db_status = "disconnected"
        db_error = str(e)

    total_latency_ms = round((time.time() - start_time) * 1000, 2)

    status = "healthy" if db_status == "connected" else "degraded"

    return {
        "status": status,
        "service": "beerbro-api",
        "version": settings.API_VERSION,
        "database": {
            "status": db_status,
            "latency_ms": db_latency_ms,
            "error": db_error
        },
        "total_latency_ms": total_latency_ms
    }
