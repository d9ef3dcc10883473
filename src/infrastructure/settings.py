"""Settings helpers for the spending dashboard."""

from dataclasses import dataclass
import os

import dotenv

from src.domain.constants import DEFAULT_TOP_N
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.receipts_repository import DEFAULT_SNAPSHOT_LIMIT


@dataclass(frozen=True)
class SpendingSettings:
    """Settings for spending aggregation and presentation.

    Attributes:
        top_n: Groups kept in category and merchant breakdowns.
        snapshot_limit: Receipts read from the store per snapshot.
        available_months: Months offered by month pickers.
        currency: Currency code used when formatting amounts.
    """

    top_n: int = DEFAULT_TOP_N
    snapshot_limit: int = DEFAULT_SNAPSHOT_LIMIT
    available_months: int = 24
    currency: str = "USD"

    @classmethod
    def from_env(cls) -> "SpendingSettings":
        """Build settings from environment variables.

        Returns:
            SpendingSettings: Settings sourced from environment variables.
        """
        dotenv.load_dotenv()
        logger = get_app_logger()
        currency = os.getenv("SPENDING_CURRENCY", "USD").strip().upper()
        return cls(
            top_n=cls._read_positive_int(
                "SPENDING_TOP_N",
                DEFAULT_TOP_N,
                logger=logger,
            ),
            snapshot_limit=cls._read_positive_int(
                "RECEIPTS_SNAPSHOT_LIMIT",
                DEFAULT_SNAPSHOT_LIMIT,
                logger=logger,
            ),
            available_months=cls._read_positive_int(
                "AVAILABLE_MONTHS",
                24,
                logger=logger,
            ),
            currency=currency or "USD",
        )

    @staticmethod
    def _read_positive_int(name: str, default: int, logger) -> int:
        """Read a positive integer, falling back to ``default``.

        Args:
            name: Environment variable name.
            default: Value used when the variable is unset or invalid.
            logger: Logger used for warnings.

        Returns:
            int: Parsed value or the default.
        """
        raw = os.getenv(name)
        if raw is None or not raw.strip():
            return default
        try:
            value = int(raw.strip())
        except ValueError:
            logger.warning(f"Invalid {name}={raw!r}; using {default}")
            return default
        if value <= 0:
            logger.warning(f"{name} must be positive; using {default}")
            return default
        return value


__all__ = ["SpendingSettings"]
