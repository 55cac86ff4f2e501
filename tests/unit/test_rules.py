"""
Unit tests for domain rules.

Tests cover name normalization, number/age/flag/date parsing, media
channel detection and closest-name suggestions.
"""

from datetime import date, datetime

import pytest

from domain.rules import (
    allowed_pm_types,
    closest_name,
    format_options,
    is_broadcast_subtype,
    is_optional_demo_subtype,
    is_reach_required_subtype,
    is_tv_subtype,
    names_equal,
    normalize_name,
    parse_age,
    parse_date,
    parse_flag,
    parse_number,
    parse_percentage,
    row_channels,
    split_media,
)


def test_normalize_name():
    """Test trim and case-fold."""
    assert normalize_name("  Brand (Institutional) ") == "brand (institutional)"
    assert normalize_name("MEN") == normalize_name("men")
    assert normalize_name(None) == ""


def test_names_equal_ignores_case_and_blank():
    """Test case-insensitive equality; blanks never match."""
    assert names_equal("Search AWON", "search awon ")
    assert not names_equal("", "")
    assert not names_equal(None, None)


def test_parse_number_strips_commas():
    """Test thousands separators are removed."""
    assert parse_number("1,250,000") == 1250000.0
    assert parse_number(" 42.5 ") == 42.5
    assert parse_number(7) == 7.0
    assert parse_number("") is None


@pytest.mark.parametrize("value", ["abc", True, "nan", "inf", "-Infinity", float("inf")])
def test_parse_number_invalid(value):
    """Test non-numeric and non-finite values raise ValueError."""
    with pytest.raises(ValueError):
        parse_number(value)


def test_parse_percentage():
    """Test percent signs are accepted."""
    assert parse_percentage("56%") == 56.0
    assert parse_percentage("56.5 %") == 56.5
    assert parse_percentage(None) is None


def test_parse_age():
    """Test ages, sentinel and blanks."""
    assert parse_age("25") == 25.0
    assert parse_age(25.0) == 25.0
    assert parse_age("+") == "+"
    assert parse_age(" ") is None


@pytest.mark.parametrize("value", ["adults", "-5", "nan", "NaN", "inf"])
def test_parse_age_invalid(value):
    """Test non-numeric, non-finite and negative ages raise ValueError."""
    with pytest.raises(ValueError):
        parse_age(value)


@pytest.mark.parametrize("value,expected", [
    ("Yes", True),
    ("y", True),
    ("TRUE", True),
    ("1", True),
    (True, True),
    ("No", False),
    ("n", False),
    ("false", False),
    ("0", False),
    ("", None),
    (None, None),
])
def test_parse_flag(value, expected):
    """Test yes/no vocabulary."""
    assert parse_flag(value) is expected


def test_parse_flag_unrecognized():
    """Test unknown flag values raise ValueError."""
    with pytest.raises(ValueError):
        parse_flag("maybe")


@pytest.mark.parametrize("value", [
    "2025-03-01",
    "01/03/2025",
    "01-03-2025",
    "01-Mar-25",
    "2025-03-01 00:00:00",
    datetime(2025, 3, 1, 0, 0),
    date(2025, 3, 1),
])
def test_parse_date_formats(value):
    """Test accepted date representations."""
    assert parse_date(value) == date(2025, 3, 1)


def test_parse_date_invalid():
    """Test unparseable dates raise ValueError."""
    assert parse_date(None) is None
    with pytest.raises(ValueError):
        parse_date("March first")


def test_split_media():
    """Test combined media values are split into tokens."""
    assert split_media("TV + Digital") == ["TV", "Digital"]
    assert split_media("TV/Digital") == ["TV", "Digital"]
    assert split_media("Traditional") == ["Traditional"]
    assert split_media(None) == []


def test_row_channels():
    """Test channel detection from media and subtype."""
    digital = ["Social", "Search"]

    assert row_channels("Traditional", "Open TV", digital) == {"TV"}
    assert row_channels("TV + Digital", "Open TV", digital) == {"TV", "Digital"}
    assert row_channels("Digital", "Social", digital) == {"Digital"}
    assert row_channels("Traditional", "Radio", digital) == set()


def test_subtype_classification():
    """Test broadcast and optional-demographics subtypes."""
    assert is_broadcast_subtype("open tv")
    assert is_broadcast_subtype("Paid TV")
    assert not is_broadcast_subtype("OOH")
    assert is_optional_demo_subtype("Radio")
    assert is_tv_subtype("Connected TV")
    assert not is_tv_subtype("Social")


def test_reach_required_subtypes():
    """Test subtypes that need Total R1+."""
    assert is_reach_required_subtype("Open TV")
    assert is_reach_required_subtype("Digital OOH")
    assert is_reach_required_subtype("Outdoor Screens")
    assert not is_reach_required_subtype("Paid TV")
    assert not is_reach_required_subtype("Radio")
    assert not is_reach_required_subtype(None)


@pytest.mark.parametrize("subtype,expected", [
    ("Open TV", ["Non PM", "GR Only"]),
    ("Paid Search", ["GR Only", "PM Advanced", "Full Funnel Basic", "Full Funnel Advanced", "PM & FF"]),
    ("Influencers Organic", ["Non PM"]),
    ("Influencers Amplification", ["GR Only", "PM Advanced", "Full Funnel Basic", "Full Funnel Advanced", "PM & FF"]),
    ("Out of Home", ["Non PM", "GR Only"]),
    ("Social", []),
    ("", []),
])
def test_allowed_pm_types(subtype, expected):
    """Test PM Types by subtype keyword, first match wins."""
    assert allowed_pm_types(subtype) == expected


def test_closest_name():
    """Test suggestions for near-miss names."""
    choices = ["Search AWON", "Men Expert", "Body Aloe Summer"]

    assert closest_name("Serch AWON", choices) == "Search AWON"
    assert closest_name("men expert", choices) == "Men Expert"
    assert closest_name("Completely Different", choices) is None
    assert closest_name("", choices) is None


def test_format_options():
    """Test option listing for corrective messages."""
    assert format_options(["Milk", "Aloe"]) == "Aloe, Milk"
    assert format_options(["A", "B", "C", "D", "E", "F"], limit=5) == "A, B, C, D, E..."
    assert format_options([]) == "none"
