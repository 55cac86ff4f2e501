"""
Compatibility resolver for Taxonomy Guard.

Decides whether a campaign may be used with a range, and whether a range
belongs to a category, using tiered lookups against a MasterReferenceGraph.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, FrozenSet, Optional

from .graph import MasterReferenceGraph
from .models import to_text
from .rules import format_options, names_equal, normalize_name

logger = logging.getLogger(__name__)

# Resolution tiers
TIER_SHARED = "shared"
TIER_PRIMARY = "primary"
TIER_CATEGORY = "category_mapping"
TIER_SELF_REFERENCE = "self_reference"
TIER_ALIAS = "alias"
TIER_UNMAPPED = "unmapped"
TIER_INVALID = "invalid"


@dataclass(frozen=True)
class Resolution:
    """
    Result of a compatibility check.

    integrity_warning is set when the override map and the junction edge
    set disagree for a shared campaign. It does not affect validity.
    """

    valid: bool
    tier: str
    message: Optional[str] = None
    valid_options: FrozenSet[str] = field(default_factory=frozenset)
    integrity_warning: Optional[str] = None


class CompatibilityResolver:
    """
    Tiered membership checks over a reference graph.

    Campaign/range: shared campaigns use the graph's CompatibilityMap
    (cross-checked against the junction); other campaigns use strict primary
    range -> compatibility alias table -> invalid.

    Category/range: category mapping -> same name -> category alias table
    -> invalid.

    Example:
        >>> resolver = CompatibilityResolver(graph)
        >>> resolver.resolve_campaign_range("Search AWON", "Brand (Institutional)").valid
        True
    """

    def __init__(self, graph: MasterReferenceGraph):
        self.graph = graph

    def resolve_campaign_range(self, campaign: Any, range_name: Any) -> Resolution:
        """
        Decide whether a campaign may be used with a range.

        Args:
            campaign: Campaign name as uploaded
            range_name: Range name as uploaded

        Returns:
            Resolution
        """
        campaign_text = to_text(campaign)
        range_text = to_text(range_name)
        graph = self.graph

        if graph.is_shared_campaign(campaign_text):
            return self._resolve_shared(campaign_text, range_text)

        primary = graph.range_of_campaign(campaign_text)
        if not primary:
            # Unlinked campaigns stay invalid even when listed under a range
            return Resolution(
                valid=False,
                tier=TIER_UNMAPPED,
                message=f"Campaign '{campaign_text}' has no range mapping",
            )

        if names_equal(primary, range_text):
            return Resolution(valid=True, tier=TIER_PRIMARY)

        if _contains(graph.alias_ranges(campaign_text), range_text):
            logger.debug(f"Campaign '{campaign_text}' accepted for '{range_text}' via alias table")
            return Resolution(valid=True, tier=TIER_ALIAS)

        options = frozenset({primary} | graph.alias_ranges(campaign_text))
        return Resolution(
            valid=False,
            tier=TIER_INVALID,
            message=(
                f"Campaign '{campaign_text}' does not belong to range '{range_text}'. "
                f"Valid ranges: {format_options(options)}"
            ),
            valid_options=options,
        )

    def _resolve_shared(self, campaign: str, range_name: str) -> Resolution:
        """
        Shared campaigns are valid for any range in their compatibility map
        entry (primary + overrides + aliases).

        When the junction edge set lists the campaign it decides instead, and a
        disagreement with the map is reported as an integrity warning. Alias
        ranges are curated exceptions and stay valid without a junction edge.
        """
        graph = self.graph
        compatibility = graph.compatibility
        junction = graph.junction_ranges(campaign)

        in_declared = compatibility.allows(campaign, range_name)
        aliased = _contains(graph.alias_ranges(campaign), range_name)
        integrity_warning = None
        if junction:
            in_junction = _contains(junction, range_name)
            if in_junction != in_declared and not aliased:
                integrity_warning = (
                    f"Shared campaign '{campaign}' and range '{range_name}': override map "
                    f"says {'valid' if in_declared else 'invalid'}, range/campaign links say "
                    f"{'valid' if in_junction else 'invalid'}"
                )
                logger.debug(integrity_warning)
            shared = in_junction
        else:
            shared = in_declared and not aliased

        if shared:
            return Resolution(valid=True, tier=TIER_SHARED, integrity_warning=integrity_warning)

        if aliased:
            logger.debug(f"Shared campaign '{campaign}' accepted for '{range_name}' via alias table")
            return Resolution(valid=True, tier=TIER_ALIAS, integrity_warning=integrity_warning)

        if junction:
            options = frozenset(junction | graph.alias_ranges(campaign))
        else:
            options = compatibility.forward(campaign)
        return Resolution(
            valid=False,
            tier=TIER_INVALID,
            message=(
                f"Shared campaign '{campaign}' is not available for range '{range_name}'. "
                f"Valid ranges: {format_options(options)}"
            ),
            valid_options=options,
            integrity_warning=integrity_warning,
        )

    def resolve_category_range(self, category: Any, range_name: Any) -> Resolution:
        """
        Decide whether a range belongs to a category.

        A category and a range with the same name are always compatible,
        even without an explicit mapping.

        Args:
            category: Category name as uploaded
            range_name: Range name as uploaded

        Returns:
            Resolution
        """
        category_text = to_text(category)
        range_text = to_text(range_name)
        graph = self.graph

        mapped = graph.ranges_of_category(category_text)
        if _contains(mapped, range_text):
            return Resolution(valid=True, tier=TIER_CATEGORY)

        if names_equal(category_text, range_text):
            return Resolution(valid=True, tier=TIER_SELF_REFERENCE)

        aliases = graph.category_alias_ranges(category_text)
        if _contains(aliases, range_text):
            return Resolution(valid=True, tier=TIER_ALIAS)

        options = frozenset(mapped | aliases)
        return Resolution(
            valid=False,
            tier=TIER_INVALID,
            message=(
                f"Range '{range_text}' is not valid for category '{category_text}'. "
                f"Valid ranges: {format_options(options)}"
            ),
            valid_options=options,
        )

    def is_campaign_valid_for_range(self, campaign: Any, range_name: Any) -> bool:
        return self.resolve_campaign_range(campaign, range_name).valid

    def is_range_valid_for_category(self, category: Any, range_name: Any) -> bool:
        return self.resolve_category_range(category, range_name).valid


def _contains(names, name: str) -> bool:
    target = normalize_name(name)
    return bool(target) and any(normalize_name(n) == target for n in names)
