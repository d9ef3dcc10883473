"""Simple CLI to validate the receipt store connection.

This adapter is meant for local operations: it instantiates the concrete
database adapter from the infrastructure layer and runs a basic health
check against the receipts database.
"""

from src.infrastructure.container import build_database_adapter
from src.infrastructure.logging.logger import get_app_logger


def main() -> None:
    """Run a basic connectivity check against the receipts database."""
    adapter = build_database_adapter()
    logger = get_app_logger()

    receipts_engine = adapter.get_receipts_engine()
    logger.info(f"Receipts DB: {receipts_engine.url}")

    with receipts_engine.connect() as conn:
        conn.exec_driver_sql("SELECT 1")

    logger.info("Receipts connection is working.")


if __name__ == "__main__":  # pragma: no cover
    main()
