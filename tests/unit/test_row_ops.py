"""
Unit tests for row operations.

Tests cover each row rule against the sample reference graph: required
fields, existence, structural compatibility, business unit consistency,
demographics, media, dates, budgets and plan fields.
"""

import pytest

from config.settings import Settings
from domain.graph import load_graph
from domain.models import GamePlanRow
from operations.row_ops import (
    RULE_BUSINESS_UNIT,
    RULE_CAMPAIGN_RANGE,
    RULE_CATEGORY_RANGE,
    RULE_DATA_INTEGRITY,
    RULE_EXISTENCE,
    RowValidator,
)


@pytest.fixture
def validator(graph, settings):
    return RowValidator(graph, settings=settings)


def _columns(issues):
    return [(issue.column, issue.severity) for issue in issues]


# ==================== Baseline ====================


def test_valid_row_has_no_issues(validator, make_row):
    """Test the sample row passes every rule."""
    assert validator.validate_row(make_row(), row_index=0) == []


def test_blank_row_is_skipped(validator):
    """Test fully blank rows produce no issues."""
    assert validator.validate_row({"Category": None, "Range": "  "}, row_index=3) == []


def test_accepts_game_plan_row(validator, make_row):
    """Test GamePlanRow objects are accepted as well as mappings."""
    row = GamePlanRow.from_record(make_row())

    assert validator.validate_row(row, row_index=0) == []


def test_issues_carry_row_index(validator, make_row):
    """Test the row index is copied onto each issue."""
    issues = validator.validate_row(make_row(**{"Campaign": "Ghost Campaign"}), row_index=41)

    assert [issue.row_index for issue in issues] == [41]


# ==================== Required and Existence ====================


def test_missing_required_field(validator, make_row):
    """Test an empty required field is critical."""
    issues = validator.validate_row(make_row(**{"Campaign": None}), row_index=0)

    assert _columns(issues) == [("Campaign", "critical")]
    assert issues[0].message == "Campaign is required"


def test_missing_business_unit_without_default(validator, make_row):
    """Test an empty business unit is a warning."""
    issues = validator.validate_row(make_row(**{"Business Unit": None}), row_index=0)

    assert _columns(issues) == [("Business Unit", "warning")]


def test_missing_business_unit_with_default(graph, settings, make_row):
    """Test the default business unit stands in for an empty one."""
    validator = RowValidator(graph, settings=settings, default_business_unit="Face Care")

    assert validator.validate_row(make_row(**{"Business Unit": None}), row_index=0) == []


def test_default_business_unit_mismatch(graph, settings, make_row):
    """Test the default business unit is checked against the category."""
    validator = RowValidator(graph, settings=settings, default_business_unit="Body Care")

    issues = validator.validate_row(make_row(**{"Business Unit": None}), row_index=0)

    assert _columns(issues) == [("Business Unit", "critical")]
    assert issues[0].suggested_value == "Face Care"


def test_unknown_category_suggests_closest(validator, make_row):
    """Test unknown categories are critical with a suggestion."""
    issues = validator.validate_row(make_row(**{"Category": "Mens"}), row_index=0)

    assert _columns(issues) == [("Category", "critical")]
    assert issues[0].rule == RULE_EXISTENCE
    assert issues[0].message == "Category 'Mens' does not exist"
    assert issues[0].suggested_value == "Men"


def test_unknown_range_is_critical(validator, make_row):
    """Test unknown ranges are critical outside auto-create mode."""
    issues = validator.validate_row(make_row(**{"Range": "Hologram"}), row_index=0)

    assert _columns(issues) == [("Range", "critical")]
    assert issues[0].rule == RULE_EXISTENCE


def test_unknown_business_unit(validator, make_row):
    """Test unknown business units are critical."""
    issues = validator.validate_row(make_row(**{"Business Unit": "Face Cares"}), row_index=0)

    assert _columns(issues) == [("Business Unit", "critical")]
    assert issues[0].suggested_value == "Face Care"


def test_auto_create_mode(graph, settings, make_row):
    """Test unknown ranges and campaigns are pending creation, not errors."""
    validator = RowValidator(graph, settings=settings, auto_create=True)

    issues = validator.validate_row(
        make_row(**{"Range": "Men Night", "Campaign": "Men Night Launch"}), row_index=0
    )

    assert _columns(issues) == [("Range", "warning"), ("Campaign", "warning")]
    assert all("auto-created" in issue.message for issue in issues)


def test_auto_create_from_settings(graph, make_row):
    """Test auto-create mode can come from settings."""
    validator = RowValidator(graph, settings=Settings(auto_create=True))

    issues = validator.validate_row(make_row(**{"Campaign": "Men Night Launch"}), row_index=0)

    assert _columns(issues) == [("Campaign", "warning")]


# ==================== Structural Compatibility ====================


def test_range_not_valid_for_category(validator, make_row):
    """Test an unmapped category/range pair is critical on Range."""
    issues = validator.validate_row(make_row(**{"Category": "Sun"}), row_index=0)

    assert _columns(issues) == [("Range", "critical")]
    assert issues[0].rule == RULE_CATEGORY_RANGE
    assert "Valid ranges: Kids Sun, Sun Protection" in issues[0].message


def test_unknown_campaign_reported_once(validator, make_row):
    """Test an unknown campaign yields a single no-range-mapping issue."""
    issues = validator.validate_row(make_row(**{"Campaign": "Men Expertt"}), row_index=0)

    assert len(issues) == 1
    assert issues[0].column == "Campaign"
    assert issues[0].message == "Campaign 'Men Expertt' has no range mapping"
    assert issues[0].suggested_value == "Men Expert"


def test_campaign_wrong_range(validator, make_row):
    """Test a campaign used outside its primary range."""
    issues = validator.validate_row(
        make_row(**{"Category": "Sun", "Range": "Sun Protection"}), row_index=0
    )

    assert _columns(issues) == [("Campaign", "critical")]
    assert issues[0].rule == RULE_CAMPAIGN_RANGE
    assert issues[0].suggested_value == "Men"


def test_shared_campaign_row(validator, make_row):
    """Test a shared campaign on one of its override ranges."""
    row = make_row(**{
        "Category": "Brand",
        "Range": "Brand (Institutional)",
        "Campaign": "Search AWON",
    })

    assert validator.validate_row(row, row_index=0) == []

    issues = validator.validate_row(make_row(**{"Campaign": "Search AWON"}), row_index=1)
    assert _columns(issues) == [("Campaign", "critical")]


def test_alias_campaign_row(validator, make_row):
    """Test the campaign alias table through a full row."""
    row = make_row(**{
        "Business Unit": "Body Care",
        "Category": "Body Lotion",
        "Range": "Milk",
        "Campaign": "Body Aloe Summer",
    })

    assert validator.validate_row(row, row_index=0) == []


def test_unlinked_campaign_default_severity(validator, make_row):
    """Test unlinked campaigns are critical by default."""
    issues = validator.validate_row(make_row(**{"Campaign": "Pending Launch"}), row_index=0)

    assert _columns(issues) == [("Campaign", "critical")]
    assert issues[0].message == "Campaign 'Pending Launch' has no range mapping"


def test_unlinked_campaign_configurable_severity(graph, make_row):
    """Test the unlinked campaign severity setting."""
    validator = RowValidator(graph, settings=Settings(unlinked_campaign_severity="warning"))

    issues = validator.validate_row(make_row(**{"Campaign": "Pending Launch"}), row_index=0)

    assert _columns(issues) == [("Campaign", "warning")]


@pytest.mark.parametrize("range_name,range_message", [
    ("Bogus Range", "Range 'Bogus Range' does not exist"),
    ("", "Range is required"),
])
def test_unlinked_campaign_reported_without_known_range(validator, make_row, range_name, range_message):
    """Test unlinked campaigns are reported even when the range is unknown or blank."""
    row = make_row(**{"Campaign": "Pending Launch", "Range": range_name})

    issues = validator.validate_row(row, row_index=0)

    assert _columns(issues) == [("Range", "critical"), ("Campaign", "critical")]
    assert issues[0].message == range_message
    assert issues[1].message == "Campaign 'Pending Launch' has no range mapping"
    assert issues[1].rule == RULE_CAMPAIGN_RANGE


def test_unlinked_campaign_without_range_uses_configured_severity(graph, make_row):
    """Test the unlinked severity setting applies when the range is unknown."""
    validator = RowValidator(graph, settings=Settings(unlinked_campaign_severity="warning"))

    issues = validator.validate_row(
        make_row(**{"Campaign": "Pending Launch", "Range": "Bogus Range"}), row_index=0
    )

    assert _columns(issues) == [("Range", "critical"), ("Campaign", "warning")]


def test_shared_campaign_integrity_warning(reference_snapshot, settings, make_row):
    """Test override/junction disagreement adds a data integrity warning."""
    reference_snapshot["campaignRangeOverrides"]["Search AWON"].append("Kids Sun")
    validator = RowValidator(load_graph(reference_snapshot), settings=settings)

    issues = validator.validate_row(
        make_row(**{"Category": "Sun", "Range": "Kids Sun", "Campaign": "Search AWON"}),
        row_index=0,
    )

    assert _columns(issues) == [("Campaign", "critical"), ("Campaign", "warning")]
    assert issues[1].rule == RULE_DATA_INTEGRITY


# ==================== Business Unit ====================


def test_business_unit_mismatch(validator, make_row):
    """Test a category owned by another business unit."""
    issues = validator.validate_row(make_row(**{"Business Unit": "Body Care"}), row_index=0)

    assert _columns(issues) == [("Business Unit", "critical")]
    assert issues[0].rule == RULE_BUSINESS_UNIT
    assert issues[0].message.startswith("Business unit mismatch")
    assert issues[0].suggested_value == "Face Care"


def test_category_without_business_unit(validator, make_row):
    """Test categories never mapped to a business unit are a warning."""
    row = make_row(**{"Category": "Lip", "Range": "Lip Care", "Campaign": "Lip Glow"})

    issues = validator.validate_row(row, row_index=0)

    assert _columns(issues) == [("Category", "warning")]


def test_business_unit_case_insensitive(validator, make_row):
    """Test business unit comparison ignores casing."""
    assert validator.validate_row(make_row(**{"Business Unit": "FACE CARE"}), row_index=0) == []


# ==================== Demographics ====================


def test_min_age_plus_is_critical(validator, make_row):
    """Test '+' is rejected as a minimum age."""
    issues = validator.validate_row(make_row(**{"TV Demo Min. Age": "+"}), row_index=0)

    assert _columns(issues) == [("TV Demo Min. Age", "critical")]


def test_max_age_plus_is_open_ended(validator, make_row):
    """Test '+' is accepted as a maximum age."""
    assert validator.validate_row(make_row(**{"TV Demo Max. Age": "+"}), row_index=0) == []


@pytest.mark.parametrize("max_age", ["25", "18", 25.0])
def test_max_age_must_exceed_min(validator, make_row, max_age):
    """Test max age equal to or below min age."""
    issues = validator.validate_row(make_row(**{"TV Demo Max. Age": max_age}), row_index=0)

    assert _columns(issues) == [("TV Demo Max. Age", "critical")]


@pytest.mark.parametrize("min_age,max_age,bad_column", [
    ("25", "old", "TV Demo Max. Age"),
    ("nan", "54", "TV Demo Min. Age"),
    ("25", "inf", "TV Demo Max. Age"),
    ("25", "nan", "TV Demo Max. Age"),
])
def test_age_not_a_number(validator, make_row, min_age, max_age, bad_column):
    """Test non-numeric and non-finite ages."""
    row = make_row(**{"TV Demo Min. Age": min_age, "TV Demo Max. Age": max_age})

    issues = validator.validate_row(row, row_index=0)

    assert _columns(issues) == [(bad_column, "critical")]
    assert issues[0].rule == "age"


def test_digital_ages_checked(validator, make_row):
    """Test Digital age pairs follow the same rules."""
    row = make_row(**{"Digital Demo Min. Age": "30", "Digital Demo Max. Age": "20"})

    issues = validator.validate_row(row, row_index=0)

    assert _columns(issues) == [("Digital Demo Max. Age", "critical")]


def test_parity_yes_matching(validator, make_row):
    """Test matching Digital demographics with the flag set."""
    row = make_row(**{
        "Is Digital target the same than TV?": "Yes",
        "Digital Demo Gender": "Male",
        "Digital Demo Min. Age": "25",
        "Digital Demo Max. Age": 54.0,
    })

    assert validator.validate_row(row, row_index=0) == []


def test_parity_yes_mismatch(validator, make_row):
    """Test mismatching Digital demographics with the flag set."""
    row = make_row(**{
        "Is Digital target the same than TV?": "Yes",
        "Digital Demo Gender": "Female",
        "Digital Demo Min. Age": "25",
        "Digital Demo Max. Age": "54",
    })

    issues = validator.validate_row(row, row_index=0)

    assert _columns(issues) == [("Digital Demo Gender", "critical")]
    assert issues[0].suggested_value == "Male"


def test_parity_flag_missing_single_channel(validator, make_row):
    """Test a missing flag is a warning for a TV-only row."""
    issues = validator.validate_row(
        make_row(**{"Is Digital target the same than TV?": None}), row_index=0
    )

    assert _columns(issues) == [("Is Digital target the same than TV?", "warning")]


def test_parity_flag_missing_both_channels(validator, make_row):
    """Test a missing flag is critical when the row has TV and Digital."""
    row = make_row(**{"Media": "TV + Digital", "Is Digital target the same than TV?": None})

    issues = validator.validate_row(row, row_index=0)

    assert _columns(issues) == [("Is Digital target the same than TV?", "critical")]


def test_parity_flag_missing_no_channel(validator, make_row):
    """Test a missing flag is ignored when the row has neither channel."""
    row = make_row(**{"Media Subtype": "Radio", "Is Digital target the same than TV?": None})

    assert validator.validate_row(row, row_index=0) == []


def test_parity_flag_unrecognized(validator, make_row):
    """Test an unrecognized flag value."""
    issues = validator.validate_row(
        make_row(**{"Is Digital target the same than TV?": "Maybe"}), row_index=0
    )

    assert _columns(issues) == [("Is Digital target the same than TV?", "critical")]


def test_parity_suggestion_when_identical(validator, make_row):
    """Test identical demographics with flag No produce a suggestion."""
    row = make_row(**{
        "Digital Demo Gender": "Male",
        "Digital Demo Min. Age": "25",
        "Digital Demo Max. Age": "54",
    })

    issues = validator.validate_row(row, row_index=0)

    assert _columns(issues) == [("Is Digital target the same than TV?", "suggestion")]
    assert issues[0].suggested_value == "Yes"


def test_broadcast_subtype_requires_tv_demographics(validator, make_row):
    """Test Open TV rows need every TV demographic."""
    issues = validator.validate_row(make_row(**{"TV Demo Gender": None}), row_index=0)

    assert _columns(issues) == [("TV Demo Gender", "critical")]


def test_optional_subtype_partial_demographics(validator, make_row):
    """Test partially filled TV demographics on Radio are warnings."""
    row = make_row(**{
        "Media Subtype": "Radio",
        "TV Demo Min. Age": None,
        "TV Demo Max. Age": None,
    })

    issues = validator.validate_row(row, row_index=0)

    assert _columns(issues) == [
        ("TV Demo Min. Age", "warning"),
        ("TV Demo Max. Age", "warning"),
    ]


def test_optional_subtype_without_demographics(validator, make_row):
    """Test Radio rows without any TV demographics."""
    row = make_row(**{
        "Media Subtype": "Radio",
        "TV Demo Gender": None,
        "TV Demo Min. Age": None,
        "TV Demo Max. Age": None,
    })

    assert validator.validate_row(row, row_index=0) == []


# ==================== Media ====================


def test_unknown_media(validator, make_row):
    """Test unknown media types."""
    issues = validator.validate_row(make_row(**{"Media": "Billboard"}), row_index=0)

    assert _columns(issues) == [("Media", "critical")]


def test_unknown_media_subtype(validator, make_row):
    """Test subtypes missing from the reference data."""
    row = make_row(**{
        "Media Subtype": "Hologram",
        "TV Demo Gender": None,
        "TV Demo Min. Age": None,
        "TV Demo Max. Age": None,
    })

    issues = validator.validate_row(row, row_index=0)

    assert _columns(issues) == [("Media Subtype", "critical")]


def test_subtype_not_in_media(validator, make_row):
    """Test a subtype listed under another media type."""
    row = make_row(**{
        "Media Subtype": "Social",
        "TV Demo Gender": None,
        "TV Demo Min. Age": None,
        "TV Demo Max. Age": None,
    })

    issues = validator.validate_row(row, row_index=0)

    assert _columns(issues) == [("Media Subtype", "critical")]
    assert "not valid for Media 'Traditional'" in issues[0].message


def test_tv_channel_token_covers_tv_subtypes(validator, make_row):
    """Test 'TV + Digital' accepts a TV subtype."""
    row = make_row(**{"Media": "TV + Digital", "Is Digital target the same than TV?": "No"})

    assert validator.validate_row(row, row_index=0) == []


# ==================== Dates, Budget, Plan Fields ====================


def test_dates_in_abp_year(graph, settings, make_row):
    """Test dates must fall in the selected ABP year and be ordered."""
    validator = RowValidator(graph, settings=settings, abp_year=2025)
    row = make_row(**{"Initial Date": "2025-03-01", "End Date": "2024-12-31"})

    issues = validator.validate_row(row, row_index=0)

    assert _columns(issues) == [("End Date", "critical"), ("End Date", "critical")]
    assert issues[1].message == "End Date must be after Initial Date"


def test_dates_valid(graph, settings, make_row):
    """Test valid dates in the ABP year."""
    validator = RowValidator(graph, settings=settings, abp_year=2025)
    row = make_row(**{"Initial Date": "01-Mar-25", "End Date": "2025-06-30"})

    assert validator.validate_row(row, row_index=0) == []


def test_invalid_date(validator, make_row):
    """Test unparseable dates."""
    issues = validator.validate_row(make_row(**{"Initial Date": "soon"}), row_index=0)

    assert _columns(issues) == [("Initial Date", "critical")]


def test_budget_distributed(validator, make_row):
    """Test monthly budgets summing to the total."""
    row = make_row(**{"Total Budget": "1,000", "Jan": "400", "Feb": "600.00"})

    assert validator.validate_row(row, row_index=0) == []


def test_budget_single_month_matches_total(validator, make_row):
    """Test one month carrying the full total is accepted."""
    row = make_row(**{"Total Budget": "1000", "Mar": "1000", "Apr": "1000"})

    assert validator.validate_row(row, row_index=0) == []


def test_budget_mismatch(validator, make_row):
    """Test monthly budgets that do not add up."""
    row = make_row(**{"Total Budget": "1000", "Jan": "300", "Feb": "300"})

    issues = validator.validate_row(row, row_index=0)

    assert _columns(issues) == [("Total Budget", "critical")]
    assert issues[0].suggested_value == "600.00"


def test_budget_not_distributed(validator, make_row):
    """Test a total without any monthly budget."""
    issues = validator.validate_row(make_row(**{"Total Budget": "1000"}), row_index=0)

    assert _columns(issues) == [("Total Budget", "critical")]


@pytest.mark.parametrize("total", ["-5", "0", "lots"])
def test_budget_invalid_total(validator, make_row, total):
    """Test totals that are not positive numbers."""
    issues = validator.validate_row(make_row(**{"Total Budget": total}), row_index=0)

    assert _columns(issues) == [("Total Budget", "critical")]


def test_budget_month_not_a_number(validator, make_row):
    """Test non-numeric monthly budgets."""
    row = make_row(**{"Total Budget": "1000", "Jan": "a lot"})

    issues = validator.validate_row(row, row_index=0)

    assert _columns(issues) == [("Jan", "critical")]


@pytest.mark.parametrize("burst,valid", [("1", True), ("3", True), ("0", False), ("1.5", False), ("x", False)])
def test_burst(validator, make_row, burst, valid):
    """Test burst must be a positive integer."""
    issues = validator.validate_row(make_row(**{"Burst": burst}), row_index=0)

    assert (issues == []) is valid


def test_campaign_archetype(validator, make_row):
    """Test archetypes come from the allowed list."""
    assert validator.validate_row(make_row(**{"Campaign Archetype": "innovation"}), row_index=0) == []

    issues = validator.validate_row(make_row(**{"Campaign Archetype": "Innovaton"}), row_index=0)
    assert _columns(issues) == [("Campaign Archetype", "critical")]
    assert issues[0].suggested_value == "Innovation"


@pytest.mark.parametrize("reach,valid", [("56%", True), ("0", True), ("100", True), ("120%", False), ("high", False)])
def test_reach_percentages(validator, make_row, reach, valid):
    """Test Total R1+ and R3+ are percentages."""
    issues = validator.validate_row(make_row(**{"Total R1+ (%)": reach, "Total R3+ (%)": reach}), row_index=0)

    assert len(issues) == (0 if valid else 2)


def test_rules_accumulate_in_order(validator, make_row):
    """Test every failing rule contributes, in rule order."""
    row = make_row(**{
        "Business Unit": "Body Care",
        "TV Demo Min. Age": "+",
        "Burst": "0",
    })

    issues = validator.validate_row(row, row_index=0)

    assert [issue.column for issue in issues] == ["Business Unit", "TV Demo Min. Age", "Burst"]


# ==================== Media Metrics ====================


def _radio_row(make_row, **overrides):
    return make_row(**{"Media Subtype": "Radio", "Total R1+ (%)": None, **overrides})


def _digital_row(make_row, subtype, **overrides):
    return make_row(**{"Media": "Digital", "Media Subtype": subtype, **overrides})


def test_trps_on_tv_media(validator, make_row):
    """Test Total TRPs are accepted on TV subtypes."""
    assert validator.validate_row(make_row(**{"Total TRPs": "350"}), row_index=0) == []


@pytest.mark.parametrize("trps,valid", [("120", False), ("0", True), ("", True)])
def test_trps_only_for_tv_media(validator, make_row, trps, valid):
    """Test Total TRPs on non-TV media are critical unless zero."""
    issues = validator.validate_row(_radio_row(make_row, **{"Total TRPs": trps}), row_index=0)

    if valid:
        assert issues == []
    else:
        assert _columns(issues) == [("Total TRPs", "critical")]
        assert issues[0].rule == "trps"
        assert "Media 'Radio' does not support TRPs" in issues[0].message


@pytest.mark.parametrize("trps", ["-5", "many", "inf"])
def test_trps_must_be_a_number(validator, make_row, trps):
    """Test Total TRPs must be a non-negative number."""
    issues = validator.validate_row(make_row(**{"Total TRPs": trps}), row_index=0)

    assert _columns(issues) == [("Total TRPs", "critical")]
    assert issues[0].message == "Total TRPs must be a non-negative number"


@pytest.mark.parametrize("pm_type", ["GR Only", "non pm"])
def test_pm_type_valid_for_subtype(validator, make_row, pm_type):
    """Test PM Types allowed for Open TV, case-insensitively."""
    assert validator.validate_row(make_row(**{"PM Type": pm_type}), row_index=0) == []


def test_pm_type_invalid_for_traditional_subtype(validator, make_row):
    """Test performance PM Types are rejected on Open TV."""
    issues = validator.validate_row(make_row(**{"PM Type": "PM Advanced"}), row_index=0)

    assert _columns(issues) == [("PM Type", "critical")]
    assert issues[0].rule == "pm_type"
    assert issues[0].message == (
        "PM Type 'PM Advanced' is not valid for Media Subtype 'Open TV'. "
        "Allowed PM Types: Non PM, GR Only"
    )


def test_pm_type_invalid_for_search(validator, make_row):
    """Test Search only accepts performance PM Types."""
    issues = validator.validate_row(
        _digital_row(make_row, "Search", **{"PM Type": "Non PM"}), row_index=0
    )

    assert _columns(issues) == [("PM Type", "critical")]
    assert "Full Funnel Basic" in issues[0].message


def test_pm_type_unrestricted_subtype(validator, make_row):
    """Test subtypes without a PM Type rule accept any PM Type."""
    row = _digital_row(make_row, "Social", **{"PM Type": "Anything Goes"})

    assert validator.validate_row(row, row_index=0) == []


@pytest.mark.parametrize("media,subtype,fragment", [
    ("Traditional", "Open TV", "Media Subtype 'Open TV'"),
    ("Traditional", "OOH", "Media Subtype 'OOH'"),
    ("Digital", "Social", "digital media 'Social'"),
    ("TV + Digital", "Open TV", "digital media 'Open TV'"),
])
def test_reach_mandatory_by_media(validator, make_row, media, subtype, fragment):
    """Test Total R1+ is mandatory for Digital, Open TV and OOH rows."""
    row = make_row(**{"Media": media, "Media Subtype": subtype, "Total R1+ (%)": None})

    issues = validator.validate_row(row, row_index=0)

    assert _columns(issues) == [("Total R1+ (%)", "critical")]
    assert issues[0].rule == "reach"
    assert fragment in issues[0].message


def test_reach_optional_for_other_media(validator, make_row):
    """Test Total R1+ may stay empty on Radio."""
    assert validator.validate_row(_radio_row(make_row), row_index=0) == []
