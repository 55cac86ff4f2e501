"""
Domain layer for Taxonomy Guard.

This module contains the reference graph, the compatibility resolver,
core entities, rules, and validators.
No dependencies on storage, file formats, or external frameworks.
"""

from .models import (
    BusinessUnit,
    Category,
    Range,
    Campaign,
    ReferenceDiagnostic,
    ValidationIssue,
    ValidationSummary,
    GamePlanRow,
    SEVERITIES,
    coerce_row,
)

from .exceptions import (
    TaxonomyGuardBaseException,
    MalformedReferenceData,
    ReferenceSourceError,
    ImportValidationError,
    ValidationError,
)

from .validators import (
    validate_snapshot,
    validate_file_path,
)

from .rules import (
    normalize_name,
    parse_number,
    parse_age,
    parse_flag,
    parse_date,
    split_media,
    row_channels,
    closest_name,
)

from .graph import (
    MasterReferenceGraph,
    CompatibilityMap,
    load_graph,
)

from .resolver import (
    CompatibilityResolver,
    Resolution,
)

__all__ = [
    # Models
    "BusinessUnit",
    "Category",
    "Range",
    "Campaign",
    "ReferenceDiagnostic",
    "ValidationIssue",
    "ValidationSummary",
    "GamePlanRow",
    "SEVERITIES",
    "coerce_row",
    # Exceptions
    "TaxonomyGuardBaseException",
    "MalformedReferenceData",
    "ReferenceSourceError",
    "ImportValidationError",
    "ValidationError",
    # Validators
    "validate_snapshot",
    "validate_file_path",
    # Rules
    "normalize_name",
    "parse_number",
    "parse_age",
    "parse_flag",
    "parse_date",
    "split_media",
    "row_channels",
    "closest_name",
    # Graph
    "MasterReferenceGraph",
    "CompatibilityMap",
    "load_graph",
    # Resolver
    "CompatibilityResolver",
    "Resolution",
]
