"""
Batch Operations for Taxonomy Guard.

Runs the row validator over a batch of candidate rows in chunks and
aggregates the result.
Per-row failures never abort a batch; only a reference snapshot that
cannot be turned into a graph does.
"""

import asyncio
import logging
from collections import Counter
from dataclasses import dataclass, field
from typing import Any, Iterable, Iterator, List, Optional, Sequence, Tuple

from config.constants import SEVERITY_CRITICAL, SEVERITY_SUGGESTION, SEVERITY_WARNING
from config.settings import Settings, get_settings
from domain.graph import MasterReferenceGraph, load_graph
from domain.models import ReferenceDiagnostic, ValidationIssue, ValidationSummary
from .row_ops import RowValidator

logger = logging.getLogger(__name__)


@dataclass
class ValidationRun:
    """Everything produced by validating one upload."""

    issues: List[ValidationIssue]
    summary: ValidationSummary
    row_count: int
    diagnostics: Tuple[ReferenceDiagnostic, ...] = field(default_factory=tuple)

    @property
    def can_import(self) -> bool:
        return self.summary.can_import


def iter_chunks(rows: Sequence[Any], chunk_size: int) -> Iterator[Tuple[int, Sequence[Any]]]:
    """
    Split rows into consecutive chunks.

    Args:
        rows: Candidate rows
        chunk_size: Rows per chunk

    Yields:
        (offset, chunk) tuples in input order
    """
    if chunk_size <= 0:
        raise ValueError("chunk_size must be positive")
    for offset in range(0, len(rows), chunk_size):
        yield offset, rows[offset:offset + chunk_size]


def validate_chunk(
    validator: RowValidator,
    chunk: Iterable[Any],
    start_index: int,
) -> List[ValidationIssue]:
    """
    Validate one chunk of rows.

    A row whose validation raises is reported as a CRITICAL issue instead
    of aborting the chunk.

    Args:
        validator: Row validator
        chunk: Rows in this chunk
        start_index: Absolute index of the chunk's first row

    Returns:
        Issues with absolute row indices
    """
    issues = []
    for position, row in enumerate(chunk):
        row_index = start_index + position
        try:
            issues.extend(validator.validate_row(row, row_index))
        except Exception as e:
            logger.exception(f"Validation failed for row {row_index}")
            issues.append(ValidationIssue(
                row_index=row_index,
                column="Row",
                severity=SEVERITY_CRITICAL,
                message=f"Validation error: {e}",
                rule="internal",
            ))
    return issues


def validate_all(
    validator: RowValidator,
    rows: Sequence[Any],
    start_index_offset: int = 0,
    chunk_size: Optional[int] = None,
) -> List[ValidationIssue]:
    """
    Validate a batch of rows chunk by chunk.

    Chunks are processed strictly in input order. Splitting a batch and
    validating the parts with the matching start_index_offset gives the
    same issues as validating it in one call.

    Args:
        validator: Row validator
        rows: Candidate rows (GamePlanRow or header -> value mappings)
        start_index_offset: Absolute index of rows[0]
        chunk_size: Rows per chunk (settings if None)

    Returns:
        All issues, ordered by row

    Example:
        >>> issues = validate_all(RowValidator(graph), rows)
        >>> can_import(issues)
        False
    """
    chunk_size = chunk_size or get_settings().chunk_size
    rows = list(rows)
    logger.info(f"Validating {len(rows)} rows (chunk size {chunk_size})")

    issues: List[ValidationIssue] = []
    for offset, chunk in iter_chunks(rows, chunk_size):
        issues.extend(validate_chunk(validator, chunk, start_index_offset + offset))

    logger.info(f"Validation complete: {len(issues)} issue(s) in {len(rows)} rows")
    return issues


async def validate_all_async(
    validator: RowValidator,
    rows: Sequence[Any],
    start_index_offset: int = 0,
    chunk_size: Optional[int] = None,
) -> List[ValidationIssue]:
    """
    Same as validate_all, yielding to the event loop after every chunk.

    Holds no external resources, so a cancelled task needs no cleanup.
    """
    chunk_size = chunk_size or get_settings().chunk_size
    rows = list(rows)
    logger.info(f"Validating {len(rows)} rows asynchronously (chunk size {chunk_size})")

    issues: List[ValidationIssue] = []
    for offset, chunk in iter_chunks(rows, chunk_size):
        issues.extend(validate_chunk(validator, chunk, start_index_offset + offset))
        await asyncio.sleep(0)

    logger.info(f"Validation complete: {len(issues)} issue(s) in {len(rows)} rows")
    return issues


def get_validation_summary(issues: Iterable[ValidationIssue]) -> ValidationSummary:
    """
    Aggregate issues by severity and column.

    Args:
        issues: Issues from validate_all

    Returns:
        ValidationSummary (can_import is True only without critical issues)
    """
    severities = Counter()
    columns = Counter()
    rows = set()
    for issue in issues:
        severities[issue.severity] += 1
        columns[issue.column] += 1
        rows.add(issue.row_index)

    return ValidationSummary(
        critical=severities[SEVERITY_CRITICAL],
        warning=severities[SEVERITY_WARNING],
        suggestion=severities[SEVERITY_SUGGESTION],
        by_column=dict(columns),
        unique_rows=len(rows),
    )


def can_import(issues: Iterable[ValidationIssue]) -> bool:
    """Rows may be imported only when no critical issue exists."""
    return not any(issue.is_critical for issue in issues)


def validate_upload(
    reference: Any,
    rows: Sequence[Any],
    settings: Optional[Settings] = None,
    default_business_unit: Optional[str] = None,
    start_index_offset: int = 0,
) -> ValidationRun:
    """
    Validate an upload end to end.

    Builds the reference graph, validates every row and summarizes.

    Args:
        reference: Reference snapshot dict, reference source or a built graph
        rows: Candidate rows
        settings: Settings (global settings if None)
        default_business_unit: Business unit assumed for rows without one
        start_index_offset: Absolute index of rows[0]

    Returns:
        ValidationRun

    Raises:
        MalformedReferenceData: If the reference snapshot cannot be parsed
    """
    settings = settings or get_settings()
    graph = reference if isinstance(reference, MasterReferenceGraph) else load_graph(reference)

    validator = RowValidator(
        graph,
        settings=settings,
        default_business_unit=default_business_unit,
    )
    rows = list(rows)
    issues = validate_all(
        validator,
        rows,
        start_index_offset=start_index_offset,
        chunk_size=settings.chunk_size,
    )
    summary = get_validation_summary(issues)

    logger.info(
        f"Upload validated: {summary.critical} critical, {summary.warning} warning, "
        f"{summary.suggestion} suggestion - import {'allowed' if summary.can_import else 'blocked'}"
    )

    return ValidationRun(
        issues=issues,
        summary=summary,
        row_count=len(rows),
        diagnostics=graph.diagnostics,
    )
