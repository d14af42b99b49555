"""
FastAPI Application Entry Point

Integrates:
  - Dialogflow fulfillment webhook (POST /webhook)
  - Health checks
  - Middleware for logging & error handling

Run: python main.py
  or uvicorn main:app --host 0.0.0.0 --port 8082
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from transport.dialogflow import router as dialogflow_router
from config import Config

# Setup logging
logging.basicConfig(
    level=getattr(logging, Config.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan: startup and shutdown handlers.
    """
    # Startup
    logger.info("=" * 60)
    logger.info("Dialogflow webhook starting up...")
    logger.info(f"Environment: {Config.ENVIRONMENT}")
    logger.info(f"Listening on: {Config.WEBHOOK_HOST}:{Config.WEBHOOK_PORT}")
    logger.info("=" * 60)

    yield

    # Shutdown
    logger.info("Dialogflow webhook shutting down...")


# Create FastAPI app
app = FastAPI(
    title="Dialogflow Webhook",
    description="Fulfillment webhook for a Dialogflow agent",
    version="1.0.0",
    lifespan=lifespan,
)


# Middleware for logging
@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log all requests."""
    logger.debug(f"{request.method} {request.url.path}")
    try:
        response = await call_next(request)
        return response
    except Exception as e:
        logger.error(f"Request error: {str(e)}", exc_info=True)
        return JSONResponse(
            status_code=500,
            content={"detail": "Internal server error"},
        )


# Include routers
app.include_router(dialogflow_router)


# Health check endpoints
@app.get("/health/live")
async def health_live():
    """Live health check (Kubernetes liveness probe)."""
    return {"status": "alive"}


@app.get("/health/ready")
async def health_ready():
    """Readiness health check (Kubernetes readiness probe)."""
    try:
        Config.validate()
        return {"status": "ready"}
    except ValueError as e:
        return {"status": "not_ready", "reason": str(e)}


@app.get("/")
async def root():
    """Root endpoint with API info."""
    return {
        "name": "Dialogflow Webhook",
        "version": "1.0.0",
        "status": "running",
        "endpoints": {
            "dialogflow_webhook": "POST /webhook",
            "health_live": "GET /health/live",
            "health_ready": "GET /health/ready",
        },
    }


def run() -> None:
    """
    Start the HTTP listener.

    uvicorn exits the process with a non-zero status if the port cannot be bound.
    """
    import uvicorn

    uvicorn.run(
        app,
        host=Config.WEBHOOK_HOST,
        port=Config.WEBHOOK_PORT,
    )


if __name__ == "__main__":
    run()
