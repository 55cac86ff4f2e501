"""
Shared fixtures for Taxonomy Guard tests.

The reference snapshot is a small but complete taxonomy: two business
units, a category sharing its name with its only range, a shared campaign
with override ranges, an alias-mapped campaign and an unlinked campaign.
"""

import pytest

from config.settings import Settings, reset_settings
from domain.graph import load_graph


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Isolate tests from TAXONOMY_GUARD_* variables in the environment."""
    for name in [
        "TAXONOMY_GUARD_CHUNK_SIZE",
        "TAXONOMY_GUARD_MAX_REPORTED_ISSUES",
        "TAXONOMY_GUARD_UNLINKED_CAMPAIGN_SEVERITY",
        "TAXONOMY_GUARD_AUTO_CREATE",
        "TAXONOMY_GUARD_ABP_YEAR",
        "TAXONOMY_GUARD_LOG_LEVEL",
    ]:
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def reference_snapshot():
    """Reference snapshot in the load_graph() format."""
    return {
        "businessUnits": [{"name": "Face Care", "id": 1}, {"name": "Body Care", "id": 2}],
        "categories": [
            {"name": "Men", "id": 10, "businessUnit": "Face Care"},
            {"name": "Sun", "id": 11, "businessUnit": "Face Care"},
            {"name": "Brand", "id": 12, "businessUnit": "Face Care"},
            {"name": "Body Lotion", "id": 13, "businessUnit": "Body Care"},
            {"name": "Deo", "id": 14, "businessUnit": "Body Care"},
            {"name": "Lip", "id": 15},
        ],
        "ranges": [
            "Men",
            "Sun Protection",
            "Kids Sun",
            "Brand (Institutional)",
            "Aloe",
            "Milk",
            "Deo",
            "Lip Care",
        ],
        "campaigns": [
            {"name": "Men Expert", "id": 100, "range": "Men"},
            {"name": "Sun Summer 2025", "id": 101},
            {"name": "Search AWON", "id": 102},
            {"name": "Body Aloe Summer", "id": 103},
            {"name": "Lip Glow", "id": 104},
            {"name": "Pending Launch", "id": 105},
        ],
        "categoryToRanges": {
            "Men": ["Men"],
            "Sun": ["Sun Protection", "Kids Sun"],
            "Brand": ["Brand (Institutional)"],
            "Body Lotion": ["Aloe", "Milk"],
            "Lip": ["Lip Care"],
        },
        "rangeToCategories": {
            "Men": ["Men"],
            "Sun Protection": ["Sun"],
            "Kids Sun": ["Sun"],
            "Brand (Institutional)": ["Brand"],
            "Aloe": ["Body Lotion"],
            "Milk": ["Body Lotion"],
            "Lip Care": ["Lip"],
        },
        "rangeToCampaigns": {
            "Men": ["Men Expert", "Pending Launch"],
            "Sun Protection": ["Sun Summer 2025", "Search AWON"],
            "Brand (Institutional)": ["Search AWON"],
            "Aloe": ["Body Aloe Summer", "Search AWON"],
            "Lip Care": ["Lip Glow"],
        },
        "campaignToRangeMap": {
            "Men Expert": "Men",
            "Sun Summer 2025": "Sun Protection",
            "Search AWON": "Brand (Institutional)",
            "Body Aloe Summer": "Aloe",
            "Lip Glow": "Lip Care",
        },
        "campaignRangeOverrides": {
            "Search AWON": ["Brand (Institutional)", "Sun Protection", "Aloe"],
        },
        "campaignCompatibilityMap": {
            "Body Aloe Summer": ["Aloe", "Milk"],
        },
        "sharedCampaigns": ["Search AWON"],
        "mediaTypes": ["Traditional", "Digital"],
        "mediaToSubtypes": {
            "Traditional": ["Open TV", "Paid TV", "OOH", "Print", "Radio"],
            "Digital": ["Social", "Search", "Online Video"],
        },
    }


@pytest.fixture
def graph(reference_snapshot):
    """Reference graph built from the sample snapshot."""
    return load_graph(reference_snapshot)


@pytest.fixture
def settings():
    """Default settings, independent of the environment."""
    return Settings()


@pytest.fixture
def make_row():
    """
    Factory for a valid TV-only game plan row.

    Keyword overrides use template headers, e.g.
    make_row(**{"Campaign": "Search AWON"}).
    """
    def _make_row(**overrides):
        row = {
            "Business Unit": "Face Care",
            "Category": "Men",
            "Range": "Men",
            "Campaign": "Men Expert",
            "Media": "Traditional",
            "Media Subtype": "Open TV",
            "Total R1+ (%)": "50",
            "TV Demo Gender": "Male",
            "TV Demo Min. Age": "25",
            "TV Demo Max. Age": "54",
            "Is Digital target the same than TV?": "No",
        }
        row.update(overrides)
        return row

    return _make_row
