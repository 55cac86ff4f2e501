"""
Upload Reader Service.

Handles reading game plan uploads (CSV and Excel) into flat records
with the template's column headers.

Uses pandas and openpyxl for file processing.
"""

import logging
import re
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import pandas as pd

from config.constants import (
    EXCEL_EXTENSIONS,
    FIELD_HEADERS,
    HEADER_ALIASES,
    MONTH_ALIASES,
    UPLOAD_EXTENSIONS,
)
from domain.exceptions import ImportValidationError, ValidationError
from domain.models import GamePlanRow
from domain.validators import validate_file_path

logger = logging.getLogger(__name__)


def _header_key(header: Any) -> str:
    """Lower-case header with collapsed whitespace ("Media  Sub Type " -> "media sub type")."""
    return re.sub(r"\s+", " ", str(header)).strip().lower()


# Header variant -> template header
_CANONICAL_HEADERS = {
    _header_key(alias): FIELD_HEADERS[field_name]
    for field_name, aliases in HEADER_ALIASES.items()
    for alias in aliases
}
_CANONICAL_HEADERS.update({
    _header_key(alias): month
    for month, aliases in MONTH_ALIASES.items()
    for alias in aliases
})


class UploadReader:
    """
    Game plan upload reader for .csv, .xlsx and .xls files.

    Produces one dict per non-blank row, keyed by template headers.
    Header variants (case, spacing, aliases such as "Media Sub Type") are
    mapped onto the template header; unknown headers are kept as-is.
    """

    def __init__(self, file_path: Union[Path, str]):
        """
        Initialize upload reader.

        Args:
            file_path: Path to upload file

        Raises:
            ImportValidationError: If file is invalid or doesn't exist
        """
        try:
            self.file_path = validate_file_path(
                file_path,
                must_exist=True,
                allowed_extensions=UPLOAD_EXTENSIONS,
            )
        except ValidationError as e:
            raise ImportValidationError(e.message, details=e.details)
        logger.info(f"Initialized upload reader for: {self.file_path}")

    @property
    def is_excel(self) -> bool:
        return self.file_path.suffix.lower() in EXCEL_EXTENSIONS

    def read_dataframe(self, sheet_name: Optional[str] = None) -> pd.DataFrame:
        """
        Read the upload into a pandas DataFrame.

        CSV cells are read as text; Excel cells keep their native types
        (numbers, dates) and are converted by the validator's parsers.

        Args:
            sheet_name: Excel sheet to read (None = first sheet)

        Returns:
            DataFrame with cleaned data and template headers

        Raises:
            ImportValidationError: If file cannot be read
        """
        try:
            if self.is_excel:
                df = pd.read_excel(self.file_path, sheet_name=sheet_name or 0)
            else:
                df = pd.read_csv(self.file_path, dtype=str, encoding="utf-8-sig")
        except Exception as e:
            raise ImportValidationError(
                f"Could not read upload file: {e}",
                details={"file": str(self.file_path), "error": str(e)},
            )

        df = self._clean_dataframe(df)
        df = df.rename(columns=self._normalize_headers(df.columns))

        logger.debug(f"Read {len(df)} rows from {self.file_path.name}")
        return df

    def _clean_dataframe(self, df: pd.DataFrame) -> pd.DataFrame:
        """
        Clean DataFrame by removing empty rows and standardizing cells.

        Args:
            df: Input DataFrame

        Returns:
            Cleaned DataFrame
        """
        # Strip whitespace from headers and string cells
        df.columns = [str(col).strip() for col in df.columns]
        for col in df.columns:
            df[col] = df[col].map(lambda v: (v.strip() or None) if isinstance(v, str) else v)

        # Remove completely empty rows and unnamed empty columns
        df = df.dropna(how="all")
        unnamed = [col for col in df.columns if col.startswith("Unnamed:") and df[col].isna().all()]
        df = df.drop(columns=unnamed)

        # Replace NaN with None for better handling
        df = df.astype(object).where(pd.notnull(df), None)

        return df

    def _normalize_headers(self, columns: List[str]) -> Dict[str, str]:
        """
        Map header variants onto template headers.

        The first column matching a template header wins; later duplicates
        keep their original header.

        Returns:
            Rename mapping for DataFrame.rename
        """
        renames = {}
        taken = set()
        for col in columns:
            canonical = _CANONICAL_HEADERS.get(_header_key(col))
            if canonical is None or canonical in taken:
                continue
            taken.add(canonical)
            if canonical != col:
                logger.debug(f"Mapped header '{col}' to '{canonical}'")
                renames[col] = canonical
        return renames

    def read_rows(self, sheet_name: Optional[str] = None) -> List[Dict[str, Any]]:
        """
        Read upload into flat records.

        Returns:
            List of dicts keyed by template headers, in file order
        """
        df = self.read_dataframe(sheet_name=sheet_name)
        rows = df.to_dict("records")
        logger.info(f"Read {len(rows)} rows from {self.file_path.name}")
        return rows

    def read_game_plan_rows(self, sheet_name: Optional[str] = None) -> List[GamePlanRow]:
        """Read upload into typed GamePlanRow records."""
        return [GamePlanRow.from_record(row) for row in self.read_rows(sheet_name=sheet_name)]

    def get_sheet_names(self) -> List[str]:
        """
        Get list of sheet names in an Excel upload.

        Returns:
            List of sheet names (empty for CSV)
        """
        if not self.is_excel:
            return []
        try:
            excel_file = pd.ExcelFile(self.file_path)
            return excel_file.sheet_names
        except Exception as e:
            raise ImportValidationError(
                f"Could not read sheet names: {e}",
                details={"file": str(self.file_path)},
            )
