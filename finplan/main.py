"""FastAPI application entrypoint."""
from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI

from finplan.routers import health, strategies, custom_strategies, client_configs, reports
from finplan.settings import settings
from finplan.startup import build_catalog, run_startup_validation
from finplan.middleware import RequestLoggingMiddleware, setup_logging

# Configure logging before anything else
setup_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan with startup validation.

    Validates settings and the database, then builds the strategy catalog
    that every request shares for the life of the process.
    """
    logger.info(f"Starting application in {settings.ENV} environment")

    try:
        run_startup_validation()
        app.state.catalog = build_catalog()
    except Exception as e:
        logger.error(f"Startup failed: {e}")
        logger.error("Application will not start")
        raise

    yield

    logger.info("Shutting down application")


app = FastAPI(
    title="Financial Plan Compiler",
    description="Compiles client financial plans from a catalog of strategy templates",
    version="0.1.0",
    lifespan=lifespan
)

app.add_middleware(RequestLoggingMiddleware)

app.include_router(health.router)
app.include_router(strategies.router)
app.include_router(custom_strategies.router)
app.include_router(client_configs.router)
app.include_router(reports.router)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
