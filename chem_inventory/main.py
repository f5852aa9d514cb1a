import logging

from fastapi import FastAPI, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from chem_inventory.core.config import settings
from chem_inventory.core.rate_limit import limiter
from chem_inventory.api.v1.api import api_router
from chem_inventory.services.inventory_store import InventoryChange, InventoryStore

logger = logging.getLogger(__name__)


# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    description="Chemical inventory with safety data sheets",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
)

app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "DELETE"],
    allow_headers=["Content-Type"],
)


def log_inventory_change(change: InventoryChange) -> None:
    logger.info(
        f"Inventory {change.action.value}: {change.record_id} ({change.affected} record(s))")


@app.on_event("startup")
async def startup_event():
    """
    Application startup event.
    Configures logging and creates the inventory store for this app.
    """
    logging.basicConfig(level=settings.log_level.upper())

    store = InventoryStore.with_samples() if settings.seed_samples else InventoryStore()
    app.state.inventory_store = store
    app.state.unsubscribe_inventory_log = store.on_change(log_inventory_change)
    logger.info(f"Inventory store ready with {len(store)} chemical(s)")


@app.on_event("shutdown")
async def shutdown_event():
    """Detach listeners and drop the store; nothing is persisted."""
    unsubscribe = getattr(app.state, "unsubscribe_inventory_log", None)
    if unsubscribe:
        unsubscribe()
    app.state.inventory_store = None


# Include API routes
app.include_router(api_router, prefix="/api/v1")


@app.get("/")
async def root():
    """Root endpoint with basic service information."""
    return {"name": settings.app_name, "docs": "/docs"}


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return Response(status_code=200)


@app.exception_handler(Exception)
async def global_exception_handler(request, exc):
    """Global exception handler for unhandled errors."""
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(
        status_code=500,
        content={"detail": "Internal server error", "error": str(exc)}
    )


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "chem_inventory.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.debug
    )
