from __future__ import annotations

import os
import tempfile
from datetime import datetime, timezone
from pathlib import Path
from typing import List, Optional

import pandas as pd

from stockview.config import get_config
from stockview.logging import get_logger

from ..interface import DataAccess
from ..models import (
    MovementRecord, ThresholdDefinition, ThresholdUpdate, ReportRecord,
    StringList, DateBounds,
)

MOVEMENTS_FILE = "movements.csv"
THRESHOLDS_FILE = "thresholds.csv"
TICKETS_FILE = "tickets.csv"

MOVEMENT_COLUMNS = ["product_name", "category", "quantity", "timestamp"]
THRESHOLD_COLUMNS = ["id", "product_name", "category", "minimum", "maximum"]
TICKET_COLUMNS = ["branch", "category", "created_on"]


def _records(df: pd.DataFrame) -> List[dict]:
    # NaN -> None so optional model fields validate
    return df.astype(object).where(df.notna(), None).to_dict(orient="records")


class CsvDataAccess(DataAccess):
    """
    CSV-backed implementation.
    - Reads `movements.csv`, `thresholds.csv` and the optional `tickets.csv` from `data_dir`.
    - Every method call re-reads the files it needs (no caching), so each refresh
      sees the current state of the source, mirroring a remote query.
    """

    def __init__(self, data_dir: str | Path = None) -> None:
        if data_dir is None:
            config = get_config()
            data_dir = config.data_dir

        self.data_dir = Path(data_dir)
        self.logger = get_logger(__name__)

        # If the path is relative, make it relative to the repository root
        if not self.data_dir.is_absolute():
            current = Path.cwd()
            repo_root = None

            # Look up the directory tree for pyproject.toml
            for parent in [current] + list(current.parents):
                if (parent / "pyproject.toml").exists():
                    repo_root = parent
                    break

            if repo_root:
                self.data_dir = repo_root / self.data_dir
            else:
                # Fallback to current directory
                self.data_dir = current / self.data_dir

        if not self.data_dir.exists():
            raise FileNotFoundError(
                f"Data directory not found: {self.data_dir}\n"
                f"Please either:\n"
                f"  1. Generate sample data: python -m stockview.data.seed_data\n"
                f"  2. Set DATA_DIR environment variable to point to your data directory\n"
                f"  3. Create a .env file with DATA_DIR=/path/to/your/data"
            )

    # ---------- loading helpers ----------

    def _read_csv(self, filename: str, columns: List[str], required: bool = True) -> pd.DataFrame:
        path = self.data_dir / filename
        if not path.exists():
            if required:
                self.logger.error(f"Required CSV file missing: {path}")
                raise FileNotFoundError(
                    f"Required CSV file missing in {self.data_dir}: {filename}\n"
                    f"  Expected columns: {', '.join(columns)}\n\n"
                    f"Please either:\n"
                    f"  1. Generate sample data: python -m stockview.data.seed_data\n"
                    f"  2. Set DATA_DIR environment variable to a directory with the required files"
                )
            return pd.DataFrame(columns=columns)

        try:
            df = pd.read_csv(path, dtype=str)
        except Exception as e:
            self.logger.error(f"Error reading {path}: {e}")
            raise RuntimeError(
                f"Error reading CSV file {path}: {e}\n"
                f"Please check that the CSV file is valid and readable."
            ) from e

        missing = [c for c in columns if c not in df.columns]
        if missing:
            self.logger.error(f"{path} is missing columns: {missing}")
            raise RuntimeError(f"CSV file {path} is missing columns: {', '.join(missing)}")
        return df

    def _write_csv(self, filename: str, df: pd.DataFrame) -> None:
        """Replace `filename` with `df`. Written to a temporary file first, so a failed
        write leaves the previous contents in place."""
        path = self.data_dir / filename
        fd, tmp_path = tempfile.mkstemp(dir=self.data_dir, prefix=f".{path.stem}-", suffix=".tmp")
        os.close(fd)
        try:
            df.to_csv(tmp_path, index=False)
            os.replace(tmp_path, path)
        except OSError as e:
            Path(tmp_path).unlink(missing_ok=True)
            self.logger.error(f"Error writing {path}: {e}")
            raise RuntimeError(f"Error writing CSV file {path}: {e}") from e

    @staticmethod
    def _clean_text(df: pd.DataFrame, columns: List[str]) -> pd.DataFrame:
        return df.assign(**{c: df[c].fillna("").str.strip() for c in columns})

    # ---------- interface implementation ----------

    def list_categories(self) -> StringList:
        df = self._read_csv(MOVEMENTS_FILE, MOVEMENT_COLUMNS)
        categories = df["category"].dropna().str.strip()
        categories = categories[categories != ""].unique().tolist()
        return StringList(values=sorted(categories))

    def get_movement_date_bounds(self) -> DateBounds:
        timestamps = [m.timestamp for m in self.list_movements() if m.has_valid_timestamp]
        if not timestamps:
            now = datetime.now(timezone.utc)
            return DateBounds(first_movement=now, last_movement=now)
        return DateBounds(first_movement=min(timestamps), last_movement=max(timestamps))

    def list_movements(self, category: Optional[str] = None) -> List[MovementRecord]:
        df = self._read_csv(MOVEMENTS_FILE, MOVEMENT_COLUMNS)
        df = self._clean_text(df, ["product_name", "category"])

        quantity = pd.to_numeric(df["quantity"], errors="coerce")
        invalid = quantity.isna()
        if invalid.any():
            self.logger.warning(f"Skipping {int(invalid.sum())} movement row(s) with a non-numeric quantity")
        df = df.assign(quantity=quantity)[~invalid]

        if category and category.strip():
            df = df[df["category"].str.lower() == category.strip().lower()]
        if "priority" not in df.columns:
            df = df.assign(priority=None)

        movements = [MovementRecord(**row) for row in _records(df[MOVEMENT_COLUMNS + ["priority"]])]
        self.logger.debug(f"Loaded {len(movements)} movement(s) from {self.data_dir / MOVEMENTS_FILE}")
        return movements

    def list_thresholds(self) -> List[ThresholdDefinition]:
        df = self._read_csv(THRESHOLDS_FILE, THRESHOLD_COLUMNS)
        df = self._clean_text(df, ["product_name", "category"])

        missing_id = df["id"].isna()
        if missing_id.any():
            self.logger.warning(f"Skipping {int(missing_id.sum())} threshold row(s) without an id")
            df = df[~missing_id]

        # Undefined bounds count as 0
        df = df.assign(
            minimum=pd.to_numeric(df["minimum"], errors="coerce").fillna(0.0),
            maximum=pd.to_numeric(df["maximum"], errors="coerce").fillna(0.0),
        )
        thresholds = [ThresholdDefinition(**row) for row in _records(df[THRESHOLD_COLUMNS])]
        self.logger.debug(f"Loaded {len(thresholds)} threshold(s) from {self.data_dir / THRESHOLDS_FILE}")
        return thresholds

    def update_threshold(self, threshold_id: str, update: ThresholdUpdate) -> ThresholdDefinition:
        df = self._read_csv(THRESHOLDS_FILE, THRESHOLD_COLUMNS)
        mask = df["id"] == str(threshold_id)
        if not mask.any():
            self.logger.error(f"Unknown threshold id: {threshold_id}")
            raise KeyError(f"Unknown threshold id: {threshold_id}")

        df.loc[mask, "minimum"] = str(update.minimum)
        df.loc[mask, "maximum"] = str(update.maximum)
        self._write_csv(THRESHOLDS_FILE, df)
        self.logger.info(
            f"Updated threshold {threshold_id}: minimum={update.minimum}, maximum={update.maximum}"
        )

        row = self._clean_text(df.loc[mask], ["product_name", "category"]).iloc[0]
        return ThresholdDefinition(
            id=str(threshold_id),
            product_name=row["product_name"],
            category=row["category"],
            minimum=update.minimum,
            maximum=update.maximum,
        )

    def list_report_records(self) -> List[ReportRecord]:
        df = self._read_csv(TICKETS_FILE, TICKET_COLUMNS, required=False)
        if df.empty:
            return []
        return [ReportRecord(**row) for row in _records(df[TICKET_COLUMNS])]
