"""FastAPI application - Sri Lanka trip planner."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from backend.app.api.routes.accounts import router as accounts_router
from backend.app.api.routes.admin import router as admin_router
from backend.app.api.routes.bookings import router as bookings_router
from backend.app.api.routes.catalog import router as catalog_router
from backend.app.api.routes.health import router as health_router
from backend.app.api.routes.itineraries import router as itineraries_router
from backend.app.api.routes.metrics import router as metrics_router
from backend.app.api.routes.travel import router as travel_router
from backend.app.config import get_settings

app = FastAPI(title="Lanka Trip Planner API", version="0.1.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=[get_settings().ui_origin],
    allow_methods=["*"],
    allow_headers=["authorization", "content-type"],
)

# Register routes
app.include_router(health_router, tags=["health"])
app.include_router(metrics_router, tags=["metrics"])
app.include_router(catalog_router)
app.include_router(itineraries_router)
app.include_router(bookings_router)
app.include_router(travel_router)
app.include_router(accounts_router)
app.include_router(admin_router)


@app.get("/")
async def root() -> dict[str, str]:
    """Root endpoint."""
    return {"message": "Lanka Trip Planner API", "version": "0.1.0"}
