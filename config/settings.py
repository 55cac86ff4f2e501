"""
Application settings for Taxonomy Guard.

Loads settings from environment variables or uses defaults.
Provides centralized configuration management.
"""

import os
from typing import Optional
from dataclasses import dataclass

from .constants import (
    APP_VERSION,
    DEFAULT_CHUNK_SIZE,
    DEFAULT_MAX_REPORTED_ISSUES,
    SEVERITY_CRITICAL,
    SEVERITY_WARNING,
)


@dataclass
class Settings:
    """
    Application settings.

    Can be loaded from environment variables or initialized with defaults.
    """

    # Application info
    app_version: str = APP_VERSION

    # Batch settings
    chunk_size: int = DEFAULT_CHUNK_SIZE
    max_reported_issues: int = DEFAULT_MAX_REPORTED_ISSUES

    # Severity for campaigns that exist but have no primary range.
    # Auto-created campaigns may be pending review upstream.
    unlinked_campaign_severity: str = SEVERITY_CRITICAL

    # Unknown ranges/campaigns are reported as "will be auto-created"
    auto_create: bool = False

    # Financial cycle year that Initial/End dates must fall in (None = unchecked)
    abp_year: Optional[int] = None

    # Debug settings
    log_level: str = "INFO"  # DEBUG, INFO, WARNING, ERROR

    def __post_init__(self):
        """Validate settings after initialization."""
        if self.chunk_size <= 0:
            raise ValueError("chunk_size must be positive")
        if self.max_reported_issues < 0:
            raise ValueError("max_reported_issues cannot be negative")
        if self.unlinked_campaign_severity not in (SEVERITY_CRITICAL, SEVERITY_WARNING):
            raise ValueError("unlinked_campaign_severity must be 'critical' or 'warning'")

    @classmethod
    def from_env(cls) -> "Settings":
        """
        Load settings from environment variables.

        Environment variables:
        - TAXONOMY_GUARD_CHUNK_SIZE: Rows per chunk
        - TAXONOMY_GUARD_MAX_REPORTED_ISSUES: Issue cap for reports
        - TAXONOMY_GUARD_UNLINKED_CAMPAIGN_SEVERITY: critical/warning
        - TAXONOMY_GUARD_AUTO_CREATE: Enable auto-create mode (true/false)
        - TAXONOMY_GUARD_ABP_YEAR: Financial cycle year (e.g. 2025)
        - TAXONOMY_GUARD_LOG_LEVEL: Logging level (DEBUG/INFO/WARNING/ERROR)

        Returns:
            Settings instance with values from environment or defaults
        """
        abp_year = os.getenv("TAXONOMY_GUARD_ABP_YEAR")
        return cls(
            chunk_size=int(os.getenv("TAXONOMY_GUARD_CHUNK_SIZE", DEFAULT_CHUNK_SIZE)),
            max_reported_issues=int(
                os.getenv("TAXONOMY_GUARD_MAX_REPORTED_ISSUES", DEFAULT_MAX_REPORTED_ISSUES)
            ),
            unlinked_campaign_severity=os.getenv(
                "TAXONOMY_GUARD_UNLINKED_CAMPAIGN_SEVERITY", SEVERITY_CRITICAL
            ).lower(),
            auto_create=os.getenv("TAXONOMY_GUARD_AUTO_CREATE", "false").lower() == "true",
            abp_year=int(abp_year) if abp_year else None,
            log_level=os.getenv("TAXONOMY_GUARD_LOG_LEVEL", "INFO"),
        )

    def to_dict(self) -> dict:
        """Convert settings to dictionary for serialization."""
        return {
            "app_version": self.app_version,
            "chunk_size": self.chunk_size,
            "max_reported_issues": self.max_reported_issues,
            "unlinked_campaign_severity": self.unlinked_campaign_severity,
            "auto_create": self.auto_create,
            "abp_year": self.abp_year,
            "log_level": self.log_level,
        }


# Global settings instance (lazy-loaded)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get global settings instance.

    Lazy-loaded on first call. Loads from environment variables.

    Returns:
        Settings instance

    Example:
        >>> from config.settings import get_settings
        >>> settings = get_settings()
        >>> print(settings.chunk_size)
    """
    global _settings
    if _settings is None:
        _settings = Settings.from_env()
    return _settings


def reset_settings():
    """
    Reset global settings instance.

    Useful for testing - forces reload from environment on next get_settings() call.
    """
    global _settings
    _settings = None
