"""
Custom exceptions for Taxonomy Guard.

All exceptions inherit from TaxonomyGuardBaseException for easier catching.
Each exception includes a message and optional details dict.

Per-row problems are never raised - they become ValidationIssue objects.
Only a reference snapshot that cannot be turned into a graph at all
is allowed to abort a validation run.
"""


class TaxonomyGuardBaseException(Exception):
    """Base exception for all Taxonomy Guard errors."""

    def __init__(self, message: str, details: dict = None):
        """
        Initialize base exception.

        Args:
            message: Human-readable error message
            details: Optional dict with additional context
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        """String representation with details if available."""
        if self.details:
            details_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{self.message} ({details_str})"
        return self.message


class MalformedReferenceData(TaxonomyGuardBaseException):
    """Reference snapshot could not be parsed into a graph."""
    pass


class ReferenceSourceError(TaxonomyGuardBaseException):
    """Reference snapshot could not be read from its source."""
    pass


class ImportValidationError(TaxonomyGuardBaseException):
    """Upload file could not be read or is missing required columns."""
    pass


class ValidationError(TaxonomyGuardBaseException):
    """Input argument validation failed."""
    pass
