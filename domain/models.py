"""
Domain models for Taxonomy Guard.

These dataclasses represent the reference taxonomy, the candidate game plan
rows and the diagnostics produced while validating them.
They are framework-agnostic and have no dependencies on storage or UI.
"""

import math
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

from config.constants import (
    FIELD_HEADERS,
    HEADER_ALIASES,
    MONTH_ALIASES,
    SEVERITY_CRITICAL,
    SEVERITY_WARNING,
    SEVERITY_SUGGESTION,
)

SEVERITIES = (SEVERITY_CRITICAL, SEVERITY_WARNING, SEVERITY_SUGGESTION)

# Lower-cased header -> field name, built once from the alias table
_HEADER_LOOKUP = {
    alias.strip().lower(): field_name
    for field_name, aliases in HEADER_ALIASES.items()
    for alias in aliases
}

_MONTH_LOOKUP = {
    alias.strip().lower(): month
    for month, aliases in MONTH_ALIASES.items()
    for alias in aliases
}


# ==================== Reference Nodes ====================


@dataclass(frozen=True)
class BusinessUnit:
    """Top-level division owning categories."""

    name: str
    id: Optional[int] = None

    def __post_init__(self):
        if not self.name:
            raise ValueError("name cannot be empty")


@dataclass(frozen=True)
class Category:
    """
    Product category.

    business_unit is None for categories that were never mapped to a division.
    """

    name: str
    id: Optional[int] = None
    business_unit: Optional[str] = None

    def __post_init__(self):
        if not self.name:
            raise ValueError("name cannot be empty")


@dataclass(frozen=True)
class Range:
    """Product line grouping campaigns."""

    name: str
    id: Optional[int] = None

    def __post_init__(self):
        if not self.name:
            raise ValueError("name cannot be empty")


@dataclass(frozen=True)
class Campaign:
    """
    Marketing campaign.

    primary_range is None for campaigns auto-created during an import
    that were never linked to a range.
    """

    name: str
    id: Optional[int] = None
    primary_range: Optional[str] = None
    is_shared: bool = False

    def __post_init__(self):
        if not self.name:
            raise ValueError("name cannot be empty")

    @property
    def is_linked(self) -> bool:
        """Check if campaign has a primary range."""
        return bool(self.primary_range)


@dataclass(frozen=True)
class ReferenceDiagnostic:
    """
    Data-quality anomaly found in the reference snapshot.

    Always warning level - imperfect reference data is tolerated.
    """

    kind: str  # e.g. "dangling_reference", "duplicate_node", "asymmetric_edge"
    message: str
    subject: Optional[str] = None
    severity: str = SEVERITY_WARNING

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind,
            "message": self.message,
            "subject": self.subject,
            "severity": self.severity,
        }


# ==================== Validation Results ====================


@dataclass(frozen=True)
class ValidationIssue:
    """
    A single problem found on a candidate row.

    Immutable - the orchestrator only appends issues, never edits them.
    """

    row_index: int
    column: str
    severity: str
    message: str
    current_value: Any = None
    suggested_value: Optional[str] = None
    rule: Optional[str] = None

    def __post_init__(self):
        """Validate issue data after initialization."""
        if self.severity not in SEVERITIES:
            raise ValueError(f"severity must be one of {SEVERITIES}")
        if not self.column:
            raise ValueError("column cannot be empty")
        if self.row_index < 0:
            raise ValueError("row_index cannot be negative")

    @property
    def is_critical(self) -> bool:
        return self.severity == SEVERITY_CRITICAL

    def to_dict(self) -> Dict[str, Any]:
        """Uniform shape consumed by the UI and the import gate."""
        return {
            "rowIndex": self.row_index,
            "columnName": self.column,
            "severity": self.severity,
            "message": self.message,
            "currentValue": self.current_value,
            "suggestedValue": self.suggested_value,
            "rule": self.rule,
        }

    def __str__(self) -> str:
        """User-friendly string representation."""
        return f"[{self.severity.upper()}] row {self.row_index + 1}, {self.column}: {self.message}"


@dataclass
class ValidationSummary:
    """Aggregate counts for a validated batch."""

    critical: int = 0
    warning: int = 0
    suggestion: int = 0
    by_column: Dict[str, int] = field(default_factory=dict)
    unique_rows: int = 0

    @property
    def total(self) -> int:
        return self.critical + self.warning + self.suggestion

    @property
    def can_import(self) -> bool:
        """Rows may be imported only when no critical issue exists."""
        return self.critical == 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "critical": self.critical,
            "warning": self.warning,
            "suggestion": self.suggestion,
            "total": self.total,
            "canImport": self.can_import,
            "byColumn": dict(self.by_column),
            "uniqueRows": self.unique_rows,
        }


# ==================== Candidate Rows ====================


@dataclass
class GamePlanRow:
    """
    One candidate game plan row from an upload.

    Known spreadsheet headers are mapped onto typed fields; anything else
    lands in extras. Values are kept exactly as uploaded.
    """

    category: Any = None
    range: Any = None
    campaign: Any = None
    business_unit: Any = None
    media: Any = None
    media_subtype: Any = None
    campaign_archetype: Any = None
    pm_type: Any = None
    burst: Any = None
    initial_date: Any = None
    end_date: Any = None
    total_budget: Any = None
    total_r1_plus: Any = None
    total_r3_plus: Any = None
    total_trps: Any = None
    tv_demo_gender: Any = None
    tv_demo_min_age: Any = None
    tv_demo_max_age: Any = None
    digital_same_as_tv: Any = None
    digital_demo_gender: Any = None
    digital_demo_min_age: Any = None
    digital_demo_max_age: Any = None
    monthly_budgets: Dict[str, Any] = field(default_factory=dict)
    extras: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "GamePlanRow":
        """
        Build a row from a header -> value mapping.

        Header matching is case-insensitive and accepts the template aliases
        (e.g. "Media Sub Type", "Start Date", "BU"). The first non-blank value
        wins when two aliases of the same field are present.

        Args:
            record: Raw record as parsed from CSV/Excel

        Returns:
            GamePlanRow
        """
        values: Dict[str, Any] = {}
        months: Dict[str, Any] = {}
        extras: Dict[str, Any] = {}

        for header, value in record.items():
            key = str(header).strip().lower()
            if key in _HEADER_LOOKUP:
                field_name = _HEADER_LOOKUP[key]
                if is_blank(values.get(field_name)):
                    values[field_name] = value
            elif key in _MONTH_LOOKUP:
                month = _MONTH_LOOKUP[key]
                if is_blank(months.get(month)):
                    months[month] = value
            else:
                extras[str(header)] = value

        return cls(monthly_budgets=months, extras=extras, **values)

    @staticmethod
    def column_name(field_name: str) -> str:
        """Header shown to operators for a field."""
        return FIELD_HEADERS.get(field_name, field_name)

    def value(self, field_name: str) -> Any:
        """Raw value of a field."""
        return getattr(self, field_name)

    def text(self, field_name: str) -> str:
        """Field value as trimmed text ('' when blank)."""
        return to_text(getattr(self, field_name))

    def has(self, field_name: str) -> bool:
        """Check if field carries a non-blank value."""
        return not is_blank(getattr(self, field_name))

    def is_empty(self) -> bool:
        """Check if every cell of the row is blank."""
        known = [getattr(self, name) for name in FIELD_HEADERS]
        others = list(self.monthly_budgets.values()) + list(self.extras.values())
        return all(is_blank(v) for v in known + others)


def is_blank(value: Any) -> bool:
    """None, NaN and whitespace-only strings are blank."""
    if value is None:
        return True
    if isinstance(value, float) and math.isnan(value):
        return True
    return isinstance(value, str) and value.strip() == ""


def to_text(value: Any) -> str:
    """
    Convert a cell value to trimmed text.

    Whole floats lose their ".0" so that 25.0 read by a spreadsheet engine
    compares equal to "25" typed by an operator.
    """
    if is_blank(value):
        return ""
    if isinstance(value, bool):
        return "Yes" if value else "No"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value).strip()


def coerce_row(row: Any) -> GamePlanRow:
    """Accept a GamePlanRow or a raw header mapping."""
    if isinstance(row, GamePlanRow):
        return row
    if isinstance(row, Mapping):
        return GamePlanRow.from_record(row)
    raise TypeError(f"Unsupported row type: {type(row).__name__}")
