"""
Operations layer for Taxonomy Guard.

Validation logic - pure functions and classes with dependency injection.
No file or database access - works on a reference graph and plain rows.
"""

from .row_ops import RowValidator

from .batch_ops import (
    ValidationRun,
    iter_chunks,
    validate_chunk,
    validate_all,
    validate_all_async,
    get_validation_summary,
    can_import,
    validate_upload,
)

from .report_ops import (
    issue_to_dict,
    build_report,
    group_issues_by_column,
    group_issues_by_row,
    filter_issues,
    issues_to_dataframe,
    export_issues_csv,
)

__all__ = [
    # Row validation
    "RowValidator",
    # Batch validation
    "ValidationRun",
    "iter_chunks",
    "validate_chunk",
    "validate_all",
    "validate_all_async",
    "get_validation_summary",
    "can_import",
    "validate_upload",
    # Reporting
    "issue_to_dict",
    "build_report",
    "group_issues_by_column",
    "group_issues_by_row",
    "filter_issues",
    "issues_to_dataframe",
    "export_issues_csv",
]
