"""
Row Operations for Taxonomy Guard.

Applies the battery of checks to one candidate game plan row.
No I/O - takes a reference graph and a row, returns ValidationIssue objects.

Rules run independently and accumulate, in a fixed order:
1. Required fields
2. Existence of category, range, business unit (and campaign in auto-create mode)
3. Structural compatibility (category/range, campaign/range)
4. Business unit consistency
5. Age ranges (TV and Digital)
6. Digital/TV demographic parity
7. TV demographics required by media subtype
8. Media and media subtype validity
9. Dates
10. Budget distribution
11. Burst, campaign archetype, reach percentages
12. Media metrics (Total TRPs, PM Type, mandatory Total R1+)
"""

import logging
from typing import Any, List, Optional

from config.constants import (
    AGE_SENTINEL,
    BUDGET_TOLERANCE,
    CHANNEL_DIGITAL,
    CHANNEL_TV,
    MONTH_COLUMNS,
    PARITY_FIELD_PAIRS,
    REQUIRED_FIELDS,
    SEVERITY_CRITICAL,
    SEVERITY_SUGGESTION,
    SEVERITY_WARNING,
    TV_DEMO_FIELDS,
)
from config.settings import Settings, get_settings
from domain.graph import MasterReferenceGraph
from domain.models import GamePlanRow, ValidationIssue, coerce_row
from domain.resolver import CompatibilityResolver
from domain.rules import (
    allowed_pm_types,
    closest_name,
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

logger = logging.getLogger(__name__)

# Rule identifiers carried on every issue
RULE_REQUIRED = "required"
RULE_EXISTENCE = "existence"
RULE_CATEGORY_RANGE = "category_range"
RULE_CAMPAIGN_RANGE = "campaign_range"
RULE_DATA_INTEGRITY = "data_integrity"
RULE_BUSINESS_UNIT = "business_unit"
RULE_AGE = "age"
RULE_PARITY = "parity"
RULE_SUBTYPE_DEMOGRAPHICS = "subtype_demographics"
RULE_MEDIA = "media"
RULE_DATES = "dates"
RULE_BUDGET = "budget"
RULE_BURST = "burst"
RULE_ARCHETYPE = "archetype"
RULE_REACH = "reach"
RULE_TRPS = "trps"
RULE_PM_TYPE = "pm_type"

AGE_FIELD_PAIRS = [
    ("tv_demo_min_age", "tv_demo_max_age"),
    ("digital_demo_min_age", "digital_demo_max_age"),
]

PARITY_FLAG = "digital_same_as_tv"

column = GamePlanRow.column_name


class RowValidator:
    """
    Validates candidate game plan rows against a reference graph.

    The graph is injected; the validator keeps no other state between rows,
    so one instance can validate any number of rows.

    Example:
        >>> graph = load_graph(snapshot)
        >>> validator = RowValidator(graph)
        >>> issues = validator.validate_row({"Category": "Men", ...}, row_index=0)
    """

    def __init__(
        self,
        graph: MasterReferenceGraph,
        resolver: Optional[CompatibilityResolver] = None,
        settings: Optional[Settings] = None,
        default_business_unit: Optional[str] = None,
        abp_year: Optional[int] = None,
        auto_create: Optional[bool] = None,
    ):
        """
        Initialize validator.

        Args:
            graph: Reference graph for this run
            resolver: Compatibility resolver (built from graph if None)
            settings: Settings (global settings if None)
            default_business_unit: Business unit assumed for rows without one
            abp_year: Financial cycle year dates must fall in (settings if None)
            auto_create: Report unknown ranges/campaigns as pending creation
                (settings if None)
        """
        settings = settings or get_settings()
        self.graph = graph
        self.resolver = resolver or CompatibilityResolver(graph)
        self.default_business_unit = default_business_unit
        self.abp_year = abp_year if abp_year is not None else settings.abp_year
        self.auto_create = settings.auto_create if auto_create is None else auto_create
        self.unlinked_campaign_severity = settings.unlinked_campaign_severity
        self._digital_subtypes = graph.digital_subtypes()

    def validate_row(self, row: Any, row_index: int) -> List[ValidationIssue]:
        """
        Validate one candidate row.

        Args:
            row: GamePlanRow or raw header -> value mapping
            row_index: Absolute index of the row in the batch

        Returns:
            List of ValidationIssue (empty if the row is valid or blank)
        """
        record = coerce_row(row)
        if record.is_empty():
            return []

        issues: List[ValidationIssue] = []
        issues.extend(self.check_required_fields(record, row_index))
        issues.extend(self.check_existence(record, row_index))
        issues.extend(self.check_category_range(record, row_index))
        issues.extend(self.check_campaign_range(record, row_index))
        issues.extend(self.check_business_unit(record, row_index))
        issues.extend(self.check_age_ranges(record, row_index))
        issues.extend(self.check_parity(record, row_index))
        issues.extend(self.check_subtype_demographics(record, row_index))
        issues.extend(self.check_media(record, row_index))
        issues.extend(self.check_dates(record, row_index))
        issues.extend(self.check_budget(record, row_index))
        issues.extend(self.check_plan_fields(record, row_index))
        issues.extend(self.check_media_metrics(record, row_index))

        if issues:
            logger.debug(f"Row {row_index}: {len(issues)} issue(s)")
        return issues

    # ==================== Taxonomy ====================

    def check_required_fields(self, row: GamePlanRow, row_index: int) -> List[ValidationIssue]:
        issues = []
        for field_name in REQUIRED_FIELDS:
            if not row.has(field_name):
                issues.append(_issue(
                    row_index, column(field_name), SEVERITY_CRITICAL,
                    f"{column(field_name)} is required",
                    row.value(field_name), rule=RULE_REQUIRED,
                ))

        if not row.has("business_unit") and not self.default_business_unit:
            issues.append(_issue(
                row_index, column("business_unit"), SEVERITY_WARNING,
                "Business Unit is empty - business unit consistency cannot be checked",
                row.business_unit, rule=RULE_REQUIRED,
            ))
        return issues

    def check_existence(self, row: GamePlanRow, row_index: int) -> List[ValidationIssue]:
        """
        Check that referenced names exist in the reference graph.

        Unknown campaigns are reported by check_campaign_range, except in
        auto-create mode where they are flagged here as pending creation.
        """
        graph = self.graph
        issues = []

        if row.has("category") and not graph.has_category(row.category):
            issues.append(_issue(
                row_index, column("category"), SEVERITY_CRITICAL,
                f"Category '{row.text('category')}' does not exist",
                row.category, closest_name(row.category, graph.known_names("category")),
                rule=RULE_EXISTENCE,
            ))

        if row.has("range") and not graph.has_range(row.range):
            if self.auto_create:
                issues.append(_issue(
                    row_index, column("range"), SEVERITY_WARNING,
                    f"Range '{row.text('range')}' does not exist and will be auto-created for review",
                    row.range, rule=RULE_EXISTENCE,
                ))
            else:
                issues.append(_issue(
                    row_index, column("range"), SEVERITY_CRITICAL,
                    f"Range '{row.text('range')}' does not exist",
                    row.range, closest_name(row.range, graph.known_names("range")),
                    rule=RULE_EXISTENCE,
                ))

        if self.auto_create and row.has("campaign") and not graph.has_campaign(row.campaign):
            issues.append(_issue(
                row_index, column("campaign"), SEVERITY_WARNING,
                f"Campaign '{row.text('campaign')}' does not exist and will be auto-created for review",
                row.campaign, rule=RULE_EXISTENCE,
            ))

        if row.has("business_unit") and not graph.has_business_unit(row.business_unit):
            issues.append(_issue(
                row_index, column("business_unit"), SEVERITY_CRITICAL,
                f"Business Unit '{row.text('business_unit')}' does not exist",
                row.business_unit, closest_name(row.business_unit, graph.known_names("business_unit")),
                rule=RULE_EXISTENCE,
            ))
        return issues

    def check_category_range(self, row: GamePlanRow, row_index: int) -> List[ValidationIssue]:
        graph = self.graph
        if not (row.has("category") and row.has("range")):
            return []
        if not (graph.has_category(row.category) and graph.has_range(row.range)):
            return []

        resolution = self.resolver.resolve_category_range(row.category, row.range)
        if resolution.valid:
            return []
        return [_issue(
            row_index, column("range"), SEVERITY_CRITICAL, resolution.message,
            row.range, _single(resolution.valid_options), rule=RULE_CATEGORY_RANGE,
        )]

    def check_campaign_range(self, row: GamePlanRow, row_index: int) -> List[ValidationIssue]:
        """
        Check that the campaign may be used with the row's range.

        An unknown campaign produces exactly one issue ("no range mapping").
        A known campaign without a primary range is always reported, whatever
        the row's range, at the configured unlinked campaign severity.
        """
        graph = self.graph
        if not row.has("campaign"):
            return []

        if not graph.has_campaign(row.campaign):
            if self.auto_create:
                return []
            return [_issue(
                row_index, column("campaign"), SEVERITY_CRITICAL,
                f"Campaign '{row.text('campaign')}' has no range mapping",
                row.campaign, closest_name(row.campaign, graph.known_names("campaign")),
                rule=RULE_CAMPAIGN_RANGE,
            )]

        if not graph.is_shared_campaign(row.campaign) and not graph.range_of_campaign(row.campaign):
            return [_issue(
                row_index, column("campaign"), self.unlinked_campaign_severity,
                f"Campaign '{row.text('campaign')}' has no range mapping",
                row.campaign, rule=RULE_CAMPAIGN_RANGE,
            )]

        if not row.has("range") or not graph.has_range(row.range):
            return []

        issues = []
        resolution = self.resolver.resolve_campaign_range(row.campaign, row.range)
        if not resolution.valid:
            issues.append(_issue(
                row_index, column("campaign"), SEVERITY_CRITICAL, resolution.message,
                row.campaign, _single(resolution.valid_options), rule=RULE_CAMPAIGN_RANGE,
            ))

        if resolution.integrity_warning:
            issues.append(_issue(
                row_index, column("campaign"), SEVERITY_WARNING,
                f"Reference data inconsistency: {resolution.integrity_warning}",
                row.campaign, rule=RULE_DATA_INTEGRITY,
            ))
        return issues

    def check_business_unit(self, row: GamePlanRow, row_index: int) -> List[ValidationIssue]:
        graph = self.graph
        if not row.has("category") or not graph.has_category(row.category):
            return []

        owner = graph.business_unit_of_category(row.category)
        if not owner:
            return [_issue(
                row_index, column("category"), SEVERITY_WARNING,
                f"Category '{row.text('category')}' is not mapped to a business unit",
                row.category, rule=RULE_BUSINESS_UNIT,
            )]

        business_unit = row.text("business_unit") or self.default_business_unit
        if not business_unit or not graph.has_business_unit(business_unit):
            return []
        if names_equal(owner, business_unit):
            return []

        return [_issue(
            row_index, column("business_unit"), SEVERITY_CRITICAL,
            f"Business unit mismatch: category '{row.text('category')}' belongs to "
            f"'{owner}', not '{business_unit}'",
            row.business_unit if row.has("business_unit") else business_unit,
            owner, rule=RULE_BUSINESS_UNIT,
        )]

    # ==================== Demographics ====================

    def check_age_ranges(self, row: GamePlanRow, row_index: int) -> List[ValidationIssue]:
        """
        Check min/max age pairs.

        "+" is only allowed as a max age (open-ended). Max must be "+" or a
        number strictly greater than min.
        """
        issues = []
        for min_field, max_field in AGE_FIELD_PAIRS:
            min_age = max_age = None

            if row.text(min_field) == AGE_SENTINEL:
                issues.append(_issue(
                    row_index, column(min_field), SEVERITY_CRITICAL,
                    f"{column(min_field)} cannot be '+' - the open-ended '+' is only allowed for max age",
                    row.value(min_field), rule=RULE_AGE,
                ))
            else:
                try:
                    min_age = parse_age(row.value(min_field))
                except ValueError:
                    issues.append(_issue(
                        row_index, column(min_field), SEVERITY_CRITICAL,
                        f"{column(min_field)} must be a number",
                        row.value(min_field), rule=RULE_AGE,
                    ))

            try:
                max_age = parse_age(row.value(max_field))
            except ValueError:
                issues.append(_issue(
                    row_index, column(max_field), SEVERITY_CRITICAL,
                    f"{column(max_field)} must be a number or '+'",
                    row.value(max_field), rule=RULE_AGE,
                ))

            if isinstance(min_age, float) and isinstance(max_age, float) and max_age <= min_age:
                issues.append(_issue(
                    row_index, column(max_field), SEVERITY_CRITICAL,
                    f"{column(max_field)} must exceed {column(min_field)} "
                    f"({row.text(max_field)} is not greater than {row.text(min_field)})",
                    row.value(max_field), rule=RULE_AGE,
                ))
        return issues

    def check_parity(self, row: GamePlanRow, row_index: int) -> List[ValidationIssue]:
        """
        Check Digital vs TV demographic parity.

        Flag Yes: Digital gender/min/max must equal the TV values.
        Flag missing: CRITICAL when the row carries both TV and Digital,
        WARNING when it carries one of them.
        """
        flag_column = column(PARITY_FLAG)
        try:
            same_as_tv = parse_flag(row.value(PARITY_FLAG))
        except ValueError:
            return [_issue(
                row_index, flag_column, SEVERITY_CRITICAL,
                f"{flag_column} must be Yes or No",
                row.value(PARITY_FLAG), rule=RULE_PARITY,
            )]

        if same_as_tv is None:
            channels = row_channels(row.media, row.media_subtype, self._digital_subtypes)
            if {CHANNEL_TV, CHANNEL_DIGITAL} <= channels:
                return [_issue(
                    row_index, flag_column, SEVERITY_CRITICAL,
                    f"{flag_column} is required when the row has both TV and Digital media",
                    row.value(PARITY_FLAG), rule=RULE_PARITY,
                )]
            if channels:
                return [_issue(
                    row_index, flag_column, SEVERITY_WARNING,
                    f"{flag_column} is empty",
                    row.value(PARITY_FLAG), rule=RULE_PARITY,
                )]
            return []

        if same_as_tv:
            issues = []
            for tv_field, digital_field in PARITY_FIELD_PAIRS:
                if row.text(tv_field) != row.text(digital_field):
                    issues.append(_issue(
                        row_index, column(digital_field), SEVERITY_CRITICAL,
                        f"{column(digital_field)} ('{row.text(digital_field)}') must match "
                        f"{column(tv_field)} ('{row.text(tv_field)}') when {flag_column} is Yes",
                        row.value(digital_field), row.text(tv_field) or None, rule=RULE_PARITY,
                    ))
            return issues

        identical = all(
            row.has(tv_field) and row.text(tv_field) == row.text(digital_field)
            for tv_field, digital_field in PARITY_FIELD_PAIRS
        )
        if identical:
            return [_issue(
                row_index, flag_column, SEVERITY_SUGGESTION,
                f"Digital demographics are identical to TV - consider setting {flag_column} to Yes",
                row.value(PARITY_FLAG), "Yes", rule=RULE_PARITY,
            )]
        return []

    def check_subtype_demographics(self, row: GamePlanRow, row_index: int) -> List[ValidationIssue]:
        """
        TV demographics are required for broadcast subtypes (Open TV, Paid TV).

        For OOH, Print and Radio they are optional, but a partially filled
        set is flagged.
        """
        subtype = row.text("media_subtype")
        issues = []

        if is_broadcast_subtype(subtype):
            for field_name in TV_DEMO_FIELDS:
                if not row.has(field_name):
                    issues.append(_issue(
                        row_index, column(field_name), SEVERITY_CRITICAL,
                        f"{column(field_name)} is required for Media Subtype '{subtype}'",
                        row.value(field_name), rule=RULE_SUBTYPE_DEMOGRAPHICS,
                    ))

        elif is_optional_demo_subtype(subtype):
            filled = [f for f in TV_DEMO_FIELDS if row.has(f)]
            if filled and len(filled) < len(TV_DEMO_FIELDS):
                for field_name in TV_DEMO_FIELDS:
                    if not row.has(field_name):
                        issues.append(_issue(
                            row_index, column(field_name), SEVERITY_WARNING,
                            f"{column(field_name)} is empty while other TV demographics are filled",
                            row.value(field_name), rule=RULE_SUBTYPE_DEMOGRAPHICS,
                        ))
        return issues

    # ==================== Media ====================

    def check_media(self, row: GamePlanRow, row_index: int) -> List[ValidationIssue]:
        """
        Check media tokens and that the subtype belongs to the listed media.

        Channel tokens (TV, Digital) are always accepted as media.
        """
        graph = self.graph
        issues = []
        tokens = split_media(row.media)
        channel_tokens = {normalize_name(CHANNEL_TV), normalize_name(CHANNEL_DIGITAL)}

        known_tokens = []
        for token in tokens:
            if graph.has_media_type(token) or normalize_name(token) in channel_tokens:
                known_tokens.append(token)
            else:
                issues.append(_issue(
                    row_index, column("media"), SEVERITY_CRITICAL,
                    f"Media '{token}' is not a valid media type",
                    row.media, closest_name(token, graph.known_names("media")),
                    rule=RULE_MEDIA,
                ))

        if not row.has("media_subtype") or not graph.declares_subtypes():
            return issues

        subtype = row.text("media_subtype")
        all_subtypes = graph.known_names("media_subtype")
        if not any(names_equal(subtype, s) for s in all_subtypes):
            issues.append(_issue(
                row_index, column("media_subtype"), SEVERITY_CRITICAL,
                f"Media Subtype '{subtype}' does not exist",
                row.media_subtype, closest_name(subtype, all_subtypes), rule=RULE_MEDIA,
            ))
            return issues

        if known_tokens and not any(self._subtype_in_media(subtype, t) for t in known_tokens):
            issues.append(_issue(
                row_index, column("media_subtype"), SEVERITY_CRITICAL,
                f"Media Subtype '{subtype}' is not valid for Media '{row.text('media')}'",
                row.media_subtype, rule=RULE_MEDIA,
            ))
        return issues

    def _subtype_in_media(self, subtype: str, media: str) -> bool:
        if any(names_equal(subtype, s) for s in self.graph.subtypes_of_media(media)):
            return True
        # Channel token TV covers every television subtype
        return names_equal(media, CHANNEL_TV) and is_tv_subtype(subtype)

    # ==================== Plan Fields ====================

    def check_dates(self, row: GamePlanRow, row_index: int) -> List[ValidationIssue]:
        issues = []
        parsed = {}
        for field_name in ("initial_date", "end_date"):
            try:
                parsed[field_name] = parse_date(row.value(field_name))
            except ValueError:
                parsed[field_name] = None
                issues.append(_issue(
                    row_index, column(field_name), SEVERITY_CRITICAL,
                    f"{column(field_name)} must be a valid date (YYYY-MM-DD or DD-Mon-YY)",
                    row.value(field_name), rule=RULE_DATES,
                ))
                continue

            value = parsed[field_name]
            if value and self.abp_year and value.year != self.abp_year:
                issues.append(_issue(
                    row_index, column(field_name), SEVERITY_CRITICAL,
                    f"{column(field_name)} must be in {self.abp_year} to match the selected ABP cycle",
                    row.value(field_name), rule=RULE_DATES,
                ))

        start, end = parsed["initial_date"], parsed["end_date"]
        if start and end and end < start:
            issues.append(_issue(
                row_index, column("end_date"), SEVERITY_CRITICAL,
                "End Date must be after Initial Date",
                row.end_date, rule=RULE_DATES,
            ))
        return issues

    def check_budget(self, row: GamePlanRow, row_index: int) -> List[ValidationIssue]:
        """
        Total Budget must be positive and distributed across Jan-Dec.

        The monthly values must sum to the total within BUDGET_TOLERANCE.
        """
        if not row.has("total_budget"):
            return []

        budget_column = column("total_budget")
        try:
            total = parse_number(row.total_budget)
        except ValueError:
            total = None
        if total is None or total <= 0:
            return [_issue(
                row_index, budget_column, SEVERITY_CRITICAL,
                "Total Budget must be a valid number greater than zero",
                row.total_budget, rule=RULE_BUDGET,
            )]

        issues = []
        monthly = []
        for month in MONTH_COLUMNS:
            raw = row.monthly_budgets.get(month)
            try:
                amount = parse_number(raw)
            except ValueError:
                issues.append(_issue(
                    row_index, month, SEVERITY_CRITICAL,
                    f"{month} budget must be a number",
                    raw, rule=RULE_BUDGET,
                ))
                continue
            if amount is not None:
                monthly.append(amount)

        if issues:
            return issues

        if not monthly:
            return [_issue(
                row_index, budget_column, SEVERITY_CRITICAL,
                "Total Budget must be distributed across monthly budgets (Jan-Dec)",
                row.total_budget, rule=RULE_BUDGET,
            )]

        monthly_sum = sum(monthly)
        matches_sum = abs(monthly_sum - total) <= BUDGET_TOLERANCE
        matches_single = any(abs(amount - total) <= BUDGET_TOLERANCE for amount in monthly)
        if not (matches_sum or matches_single):
            issues.append(_issue(
                row_index, budget_column, SEVERITY_CRITICAL,
                f"Total Budget ({total:,.2f}) should equal the sum of monthly budgets "
                f"({monthly_sum:,.2f})",
                row.total_budget, f"{monthly_sum:.2f}", rule=RULE_BUDGET,
            ))
        return issues

    def check_plan_fields(self, row: GamePlanRow, row_index: int) -> List[ValidationIssue]:
        """Burst, Campaign Archetype and Total R1+/R3+ checks."""
        graph = self.graph
        issues = []

        if row.has("burst"):
            try:
                burst = parse_number(row.burst)
            except ValueError:
                burst = None
            if burst is None or burst < 1 or not burst.is_integer():
                issues.append(_issue(
                    row_index, column("burst"), SEVERITY_CRITICAL,
                    "Burst must be a positive integer (1 or greater)",
                    row.burst, rule=RULE_BURST,
                ))

        if row.has("campaign_archetype") and not graph.has_archetype(row.campaign_archetype):
            issues.append(_issue(
                row_index, column("campaign_archetype"), SEVERITY_CRITICAL,
                f"Campaign Archetype '{row.text('campaign_archetype')}' is not valid. "
                f"Allowed: {', '.join(graph.archetypes())}",
                row.campaign_archetype,
                closest_name(row.campaign_archetype, graph.archetypes()),
                rule=RULE_ARCHETYPE,
            ))

        for field_name in ("total_r1_plus", "total_r3_plus"):
            if not row.has(field_name):
                continue
            try:
                percentage = parse_percentage(row.value(field_name))
            except ValueError:
                percentage = None
            if percentage is None or not 0 <= percentage <= 100:
                issues.append(_issue(
                    row_index, column(field_name), SEVERITY_CRITICAL,
                    f"{column(field_name)} must be a valid percentage (0-100)",
                    row.value(field_name), rule=RULE_REACH,
                ))
        return issues

    def check_media_metrics(self, row: GamePlanRow, row_index: int) -> List[ValidationIssue]:
        """
        Metrics that depend on the row's media.

        - Total TRPs only on TV media (0 is accepted anywhere)
        - PM Type must be allowed for the Media Subtype
        - Total R1+ is mandatory for Digital, Open TV and out-of-home media
        """
        channels = row_channels(row.media, row.media_subtype, self._digital_subtypes)
        media_label = row.text("media_subtype") or row.text("media")
        issues = []

        if row.has("total_trps"):
            trps_column = column("total_trps")
            try:
                trps = parse_number(row.total_trps)
            except ValueError:
                trps = None
            if trps is None or trps < 0:
                issues.append(_issue(
                    row_index, trps_column, SEVERITY_CRITICAL,
                    f"{trps_column} must be a non-negative number",
                    row.total_trps, rule=RULE_TRPS,
                ))
            elif trps and CHANNEL_TV not in channels:
                issues.append(_issue(
                    row_index, trps_column, SEVERITY_CRITICAL,
                    f"{trps_column} should only be used for TV media (Open TV, Paid TV). "
                    f"Media '{media_label}' does not support TRPs - use reach metrics instead",
                    row.total_trps, rule=RULE_TRPS,
                ))

        if row.has("pm_type") and row.has("media_subtype"):
            allowed = allowed_pm_types(row.media_subtype)
            if allowed and not any(names_equal(row.pm_type, pm_type) for pm_type in allowed):
                issues.append(_issue(
                    row_index, column("pm_type"), SEVERITY_CRITICAL,
                    f"PM Type '{row.text('pm_type')}' is not valid for Media Subtype "
                    f"'{row.text('media_subtype')}'. Allowed PM Types: {', '.join(allowed)}",
                    row.pm_type, closest_name(row.pm_type, allowed), rule=RULE_PM_TYPE,
                ))

        if not row.has("total_r1_plus"):
            reach_column = column("total_r1_plus")
            if CHANNEL_DIGITAL in channels:
                message = f"{reach_column} is mandatory for digital media '{media_label}'"
            elif is_reach_required_subtype(row.media_subtype):
                message = f"{reach_column} is mandatory for Media Subtype '{row.text('media_subtype')}'"
            else:
                message = None
            if message:
                issues.append(_issue(
                    row_index, reach_column, SEVERITY_CRITICAL, message,
                    row.total_r1_plus, rule=RULE_REACH,
                ))
        return issues


def _issue(
    row_index: int,
    column_name: str,
    severity: str,
    message: str,
    current_value: Any = None,
    suggested_value: Optional[str] = None,
    rule: Optional[str] = None,
) -> ValidationIssue:
    return ValidationIssue(
        row_index=row_index,
        column=column_name,
        severity=severity,
        message=message,
        current_value=current_value,
        suggested_value=suggested_value,
        rule=rule,
    )


def _single(options) -> Optional[str]:
    """Suggest a replacement only when there is exactly one valid option."""
    return next(iter(options)) if len(options) == 1 else None
