from __future__ import annotations

from typing import Optional

from stockview.config import get_config
from stockview.logging import get_logger

from .backends.csv_backend import CsvDataAccess
from .interface import DataAccess

logger = get_logger(__name__)


def get_data_access(kind: Optional[str] = None) -> DataAccess:
    """Build the configured backend.

    Args:
        kind: Backend name; defaults to ``get_config().data_backend``. Only ``"csv"``
            is available.
    Raises:
        ValueError: For an unknown backend name.
    """
    config = get_config()
    kind = (kind or config.data_backend).strip().lower()
    if kind == "csv":
        logger.debug(f"Using CSV data access on {config.data_dir}")
        return CsvDataAccess(data_dir=config.data_dir)
    logger.error(f"Unknown data access kind: {kind}")
    raise ValueError(f"Unknown data access kind: {kind}")
