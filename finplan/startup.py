"""Application startup validation and initialization."""
import logging
from sqlalchemy import inspect, text

from finplan.settings import settings
from finplan.db import engine, init_db
from finplan.services.catalog import CatalogStore

logger = logging.getLogger(__name__)


def validate_settings() -> None:
    """
    Validate all required settings at startup.

    Raises:
        ValueError: If required settings are missing or invalid
    """
    logger.info(f"Validating settings for ENV={settings.ENV}")

    settings.validate_required_for_env()

    logger.info("✓ Settings validation passed")


def validate_database() -> None:
    """
    Validate database connection and create the report table if needed.

    Raises:
        Exception: If the database is unreachable
    """
    logger.info("Validating database connection...")

    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))

        logger.info("✓ Database connection successful")

        init_db()

        existing_tables = set(inspect(engine).get_table_names())
        if "reports" not in existing_tables:
            raise ValueError("Missing required database table: reports")

        logger.info("✓ Report table present")

    except Exception as e:
        logger.error(f"✗ Database validation failed: {e}")
        raise


def build_catalog() -> CatalogStore:
    """Create the process-wide strategy catalog, seeded if configured."""
    catalog = CatalogStore()
    if settings.SEED_DEFAULT_STRATEGIES:
        catalog.seed_defaults()
    logger.info(f"Strategy catalog ready with {len(catalog)} strategies")
    return catalog


def run_startup_validation() -> None:
    """
    Run all startup validations.

    Fails fast with clear error messages if any validation fails.

    Raises:
        Exception: If any validation fails
    """
    logger.info("=" * 60)
    logger.info("Starting application startup validation")
    logger.info("=" * 60)

    try:
        validate_settings()
        validate_database()

        logger.info("=" * 60)
        logger.info("✓ All startup validations passed")
        logger.info("=" * 60)

    except Exception as e:
        logger.error("=" * 60)
        logger.error("✗ Startup validation failed")
        logger.error("=" * 60)
        logger.error(f"Error: {e}")
        logger.error("")
        logger.error("Application will not start until this is resolved.")
        raise
