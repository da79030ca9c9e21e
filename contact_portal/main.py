import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from contact_portal.api.endpoints.auth import router as auth_router
from contact_portal.api.endpoints.contacts import router as contacts_router
from contact_portal.api.endpoints.users import router as users_router
from contact_portal.api.endpoints.reports import router as reports_router
from contact_portal.core.config import settings
from contact_portal.core.database import session_manager

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Async context manager for app lifespan events"""
    logger.info("Starting Contact Portal application...")

    # A failed connection is logged inside init(); the app still starts.
    await session_manager.init()
    if not session_manager.connected:
        logger.warning("Database unavailable, requests will fail until it is reachable")

    try:
        yield
    finally:
        logger.info("Closing database connections...")
        await session_manager.close()
        logger.info("Application shutdown complete")


app = FastAPI(
    title="Contact Portal API",
    description="Accounts and contact form submissions",
    version="1.0.0",
    lifespan=lifespan,
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    logger.info(f"Request: {request.method} {request.url}")
    response = await call_next(request)
    logger.info(f"Response status: {response.status_code}")
    return response


app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Malformed bodies are reported like any other failure: 500 with the raw errors."""
    logger.error(f"Validation Error: {exc.errors()}")
    return JSONResponse(
        status_code=500,
        content={"error": "Invalid request body", "details": jsonable_encoder(exc.errors())},
    )


@app.get("/test", response_class=PlainTextResponse, tags=["Health Check"])
async def test_route():
    return "Server is running and routes are set up!"


app.include_router(auth_router, tags=["Authentication"])
app.include_router(contacts_router, prefix="/api", tags=["Contacts"])
app.include_router(users_router, prefix="/api", tags=["Users"])
app.include_router(reports_router, prefix="/api", tags=["Reports"])

logger.info(f"Loaded {len(app.routes)} routes")


def run():
    """Serve the application with uvicorn on the configured host and port."""
    logger.info(f"Server is running on port {settings.PORT}")
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
