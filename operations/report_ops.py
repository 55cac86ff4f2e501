"""
Report Operations for Taxonomy Guard.

Shapes validation issues for consumers: JSON-ready reports with truncation,
grouping and filtering, and tabular export with pandas.
"""

import logging
from collections import defaultdict
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Union

import pandas as pd

from config.settings import get_settings
from domain.models import ReferenceDiagnostic, ValidationIssue, SEVERITIES
from .batch_ops import get_validation_summary

logger = logging.getLogger(__name__)

ISSUE_COLUMNS = ["Row", "Column", "Severity", "Message", "Current Value", "Suggested Value", "Rule"]


def issue_to_dict(issue: ValidationIssue) -> Dict[str, Any]:
    """Uniform issue shape consumed by the UI and the import gate."""
    return issue.to_dict()


def build_report(
    issues: List[ValidationIssue],
    max_issues: Optional[int] = None,
    diagnostics: Iterable[ReferenceDiagnostic] = (),
) -> Dict[str, Any]:
    """
    Build a JSON-ready validation report.

    The summary always covers every issue; only the issue list is capped.

    Args:
        issues: All issues of a batch
        max_issues: Cap for the issue list (settings if None, 0 = no cap)
        diagnostics: Reference data diagnostics to include

    Returns:
        Dict with summary, issues, total_issues, truncated, diagnostics

    Example:
        >>> report = build_report(run.issues, diagnostics=run.diagnostics)
        >>> report["summary"]["canImport"]
        True
    """
    if max_issues is None:
        max_issues = get_settings().max_reported_issues

    summary = get_validation_summary(issues)
    shown = issues[:max_issues] if max_issues else issues
    truncated = len(shown) < len(issues)
    if truncated:
        logger.info(f"Report truncated to {len(shown)} of {len(issues)} issues")

    return {
        "summary": summary.to_dict(),
        "issues": [issue_to_dict(issue) for issue in shown],
        "total_issues": len(issues),
        "truncated": truncated,
        "diagnostics": [d.to_dict() for d in diagnostics],
    }


def group_issues_by_column(issues: Iterable[ValidationIssue]) -> Dict[str, List[ValidationIssue]]:
    """Group issues by column name, preserving order within each group."""
    groups = defaultdict(list)
    for issue in issues:
        groups[issue.column].append(issue)
    return dict(groups)


def group_issues_by_row(issues: Iterable[ValidationIssue]) -> Dict[int, List[ValidationIssue]]:
    """Group issues by row index, preserving order within each group."""
    groups = defaultdict(list)
    for issue in issues:
        groups[issue.row_index].append(issue)
    return dict(groups)


def filter_issues(
    issues: Iterable[ValidationIssue],
    severity: Optional[str] = None,
    column: Optional[str] = None,
) -> List[ValidationIssue]:
    """
    Filter issues by severity and/or column.

    Raises:
        ValueError: If severity is not a known severity
    """
    if severity is not None and severity not in SEVERITIES:
        raise ValueError(f"severity must be one of {SEVERITIES}")
    return [
        issue for issue in issues
        if (severity is None or issue.severity == severity)
        and (column is None or issue.column == column)
    ]


def issues_to_dataframe(issues: Iterable[ValidationIssue]) -> pd.DataFrame:
    """
    Convert issues to a DataFrame with one row per issue.

    Row numbers are 1-based to match the spreadsheet the operator uploaded.
    """
    records = [
        {
            "Row": issue.row_index + 1,
            "Column": issue.column,
            "Severity": issue.severity,
            "Message": issue.message,
            "Current Value": issue.current_value,
            "Suggested Value": issue.suggested_value,
            "Rule": issue.rule,
        }
        for issue in issues
    ]
    return pd.DataFrame(records, columns=ISSUE_COLUMNS)


def export_issues_csv(issues: Iterable[ValidationIssue], output_path: Union[Path, str]) -> Path:
    """
    Write issues to a CSV file.

    Args:
        issues: Issues to export
        output_path: Destination file (parent directories are created)

    Returns:
        Path to the written file
    """
    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)

    df = issues_to_dataframe(issues)
    df.to_csv(path, index=False)

    logger.info(f"Exported {len(df)} issues to {path}")
    return path
