"""
Master reference graph for Taxonomy Guard.

Builds an immutable, in-memory snapshot of the taxonomy (business units,
categories, ranges, campaigns and the edges between them) from a plain
reference snapshot. The graph is built once per validation run and passed
explicitly to every component that needs it.

Imperfect reference data is the normal case: dangling edges, duplicates and
asymmetric junctions are recorded as diagnostics and loading continues.
"""

import logging
from collections import defaultdict
from functools import partial
from types import MappingProxyType
from typing import Any, Dict, FrozenSet, Iterable, List, Mapping, Optional, Set, Tuple

from config.constants import CHANNEL_DIGITAL, DEFAULT_CAMPAIGN_ARCHETYPES, DEFAULT_MEDIA_TYPES
from .models import BusinessUnit, Campaign, Category, Range, ReferenceDiagnostic
from .rules import normalize_name
from .validators import (
    validate_edge_map,
    validate_name_list,
    validate_node_list,
    validate_scalar_map,
    validate_snapshot,
)

logger = logging.getLogger(__name__)

EMPTY: FrozenSet[str] = frozenset()


def _freeze(edges: Mapping[str, Iterable[str]]) -> Mapping[str, FrozenSet[str]]:
    return MappingProxyType({key: frozenset(values) for key, values in edges.items()})


class CompatibilityMap:
    """
    Precomputed campaign <-> range compatibility.

    forward: campaign -> ranges (primary + overrides + aliases)
    inverse: range -> campaigns

    The inverse is derived from the forward map, so the two are symmetric.
    """

    def __init__(self, forward: Mapping[str, Iterable[str]]):
        forward_edges: Dict[str, Set[str]] = {}
        inverse_edges: Dict[str, Set[str]] = defaultdict(set)

        for campaign, ranges in forward.items():
            key = normalize_name(campaign)
            forward_edges.setdefault(key, set()).update(ranges)
            for range_name in ranges:
                inverse_edges[normalize_name(range_name)].add(campaign)

        self._forward = _freeze(forward_edges)
        self._inverse = _freeze(inverse_edges)

    def forward(self, campaign: str) -> FrozenSet[str]:
        """Ranges the campaign may serve."""
        return self._forward.get(normalize_name(campaign), EMPTY)

    def inverse(self, range_name: str) -> FrozenSet[str]:
        """Campaigns that may serve the range."""
        return self._inverse.get(normalize_name(range_name), EMPTY)

    def allows(self, campaign: str, range_name: str) -> bool:
        target = normalize_name(range_name)
        return any(normalize_name(r) == target for r in self.forward(campaign))

    def __len__(self) -> int:
        return len(self._forward)


class MasterReferenceGraph:
    """
    Read-only taxonomy snapshot.

    All lookups are case-insensitive (trim + casefold); display casing from
    the snapshot is preserved in every returned name. Edge queries never
    raise: unknown names yield empty sets or None.

    Use load_graph() to build one from a snapshot.
    """

    def __init__(
        self,
        business_units: Mapping[str, BusinessUnit],
        categories: Mapping[str, Category],
        ranges: Mapping[str, Range],
        campaigns: Mapping[str, Campaign],
        category_ranges: Mapping[str, Iterable[str]],
        range_categories: Mapping[str, Iterable[str]],
        range_campaigns: Mapping[str, Iterable[str]],
        campaign_junction_ranges: Mapping[str, Iterable[str]],
        campaign_overrides: Mapping[str, Iterable[str]],
        campaign_aliases: Mapping[str, Iterable[str]],
        category_aliases: Mapping[str, Iterable[str]],
        shared_campaigns: Iterable[str],
        media_types: Iterable[str],
        media_subtypes: Mapping[str, Iterable[str]],
        campaign_archetypes: Iterable[str],
        diagnostics: Iterable[ReferenceDiagnostic] = (),
        alias_campaign_names: Optional[Mapping[str, str]] = None,
    ):
        self._business_units = MappingProxyType(dict(business_units))
        self._categories = MappingProxyType(dict(categories))
        self._ranges = MappingProxyType(dict(ranges))
        self._campaigns = MappingProxyType(dict(campaigns))

        self._category_ranges = _freeze(category_ranges)
        self._range_categories = _freeze(range_categories)
        self._range_campaigns = _freeze(range_campaigns)
        self._campaign_junction_ranges = _freeze(campaign_junction_ranges)
        self._campaign_overrides = _freeze(campaign_overrides)
        self._campaign_aliases = _freeze(campaign_aliases)
        self._category_aliases = _freeze(category_aliases)

        self._shared = frozenset(normalize_name(name) for name in shared_campaigns)
        self._media_types = MappingProxyType({normalize_name(m): m for m in media_types})
        self._media_subtypes = _freeze(media_subtypes)
        self._archetypes = MappingProxyType(
            {normalize_name(a): a for a in campaign_archetypes}
        )
        self.diagnostics: Tuple[ReferenceDiagnostic, ...] = tuple(diagnostics)

        forward: Dict[str, Set[str]] = defaultdict(set)
        for key, campaign in self._campaigns.items():
            if campaign.primary_range:
                forward[campaign.name].add(campaign.primary_range)
            forward[campaign.name].update(self._campaign_overrides.get(key, EMPTY))
            forward[campaign.name].update(self._campaign_aliases.get(key, EMPTY))
        # Alias entries may name campaigns missing from the node list
        alias_campaign_names = alias_campaign_names or {}
        for key, ranges in self._campaign_aliases.items():
            if key not in self._campaigns:
                forward[alias_campaign_names.get(key, key)].update(ranges)
        self.compatibility = CompatibilityMap(forward)

    # ==================== Existence ====================

    def has_business_unit(self, name: Any) -> bool:
        return normalize_name(name) in self._business_units

    def has_category(self, name: Any) -> bool:
        return normalize_name(name) in self._categories

    def has_range(self, name: Any) -> bool:
        return normalize_name(name) in self._ranges

    def has_campaign(self, name: Any) -> bool:
        return normalize_name(name) in self._campaigns

    def get_category(self, name: Any) -> Optional[Category]:
        return self._categories.get(normalize_name(name))

    def get_campaign(self, name: Any) -> Optional[Campaign]:
        return self._campaigns.get(normalize_name(name))

    def canonical_business_unit(self, name: Any) -> Optional[str]:
        unit = self._business_units.get(normalize_name(name))
        return unit.name if unit else None

    def canonical_category(self, name: Any) -> Optional[str]:
        category = self._categories.get(normalize_name(name))
        return category.name if category else None

    def canonical_range(self, name: Any) -> Optional[str]:
        range_node = self._ranges.get(normalize_name(name))
        return range_node.name if range_node else None

    def canonical_campaign(self, name: Any) -> Optional[str]:
        campaign = self._campaigns.get(normalize_name(name))
        return campaign.name if campaign else None

    def known_names(self, kind: str) -> List[str]:
        """
        Display names of one node kind, used for closest-name suggestions.

        Args:
            kind: "business_unit", "category", "range", "campaign",
                "media" or "media_subtype"
        """
        if kind == "business_unit":
            return [n.name for n in self._business_units.values()]
        if kind == "category":
            return [n.name for n in self._categories.values()]
        if kind == "range":
            return [n.name for n in self._ranges.values()]
        if kind == "campaign":
            return [n.name for n in self._campaigns.values()]
        if kind == "media":
            return list(self._media_types.values())
        if kind == "media_subtype":
            return sorted({s for subtypes in self._media_subtypes.values() for s in subtypes})
        raise ValueError(f"Unknown node kind: {kind}")

    # ==================== Edges ====================

    def business_unit_of_category(self, category: Any) -> Optional[str]:
        node = self._categories.get(normalize_name(category))
        return node.business_unit if node else None

    def ranges_of_category(self, category: Any) -> FrozenSet[str]:
        """Ranges linked to a category (categoryToRanges + rangeToCategories)."""
        return self._category_ranges.get(normalize_name(category), EMPTY)

    def categories_of_range(self, range_name: Any) -> FrozenSet[str]:
        return self._range_categories.get(normalize_name(range_name), EMPTY)

    def campaigns_of_range(self, range_name: Any) -> FrozenSet[str]:
        """Campaigns listed under a range in the junction edge set."""
        return self._range_campaigns.get(normalize_name(range_name), EMPTY)

    def range_of_campaign(self, campaign: Any) -> Optional[str]:
        """Primary range of a campaign, None when unknown or unlinked."""
        node = self._campaigns.get(normalize_name(campaign))
        return node.primary_range if node else None

    def junction_ranges(self, campaign: Any) -> FrozenSet[str]:
        """Ranges listing the campaign in the junction edge set."""
        return self._campaign_junction_ranges.get(normalize_name(campaign), EMPTY)

    def junction_has(self, range_name: Any, campaign: Any) -> bool:
        target = normalize_name(campaign)
        return any(normalize_name(c) == target for c in self.campaigns_of_range(range_name))

    def is_shared_campaign(self, campaign: Any) -> bool:
        return normalize_name(campaign) in self._shared

    def override_ranges(self, campaign: Any) -> FrozenSet[str]:
        """Many-to-many override ranges of a shared campaign."""
        return self._campaign_overrides.get(normalize_name(campaign), EMPTY)

    def alias_ranges(self, campaign: Any) -> FrozenSet[str]:
        """Hand-curated compatibility ranges of a campaign."""
        return self._campaign_aliases.get(normalize_name(campaign), EMPTY)

    def category_alias_ranges(self, category: Any) -> FrozenSet[str]:
        return self._category_aliases.get(normalize_name(category), EMPTY)

    # ==================== Media ====================

    def has_media_type(self, media: Any) -> bool:
        return normalize_name(media) in self._media_types

    def declares_subtypes(self) -> bool:
        """Check if the snapshot lists subtypes per media type."""
        return bool(self._media_subtypes)

    def subtypes_of_media(self, media: Any) -> FrozenSet[str]:
        return self._media_subtypes.get(normalize_name(media), EMPTY)

    def digital_subtypes(self) -> FrozenSet[str]:
        return self.subtypes_of_media(CHANNEL_DIGITAL)

    def has_archetype(self, archetype: Any) -> bool:
        return normalize_name(archetype) in self._archetypes

    def archetypes(self) -> List[str]:
        return list(self._archetypes.values())

    def stats(self) -> Dict[str, int]:
        """Node and edge counts (for logging and the CLI report)."""
        return {
            "business_units": len(self._business_units),
            "categories": len(self._categories),
            "ranges": len(self._ranges),
            "campaigns": len(self._campaigns),
            "shared_campaigns": len(self._shared),
            "junction_edges": sum(len(c) for c in self._range_campaigns.values()),
            "diagnostics": len(self.diagnostics),
        }

    def __repr__(self) -> str:
        return f"MasterReferenceGraph({self.stats()})"


# ==================== Loading ====================


class _GraphBuilder:
    """Collects nodes, edges and diagnostics while parsing a snapshot."""

    def __init__(self):
        self.diagnostics: List[ReferenceDiagnostic] = []

    def diagnose(self, kind: str, message: str, subject: Optional[str] = None):
        logger.warning(f"Reference data: {message}")
        self.diagnostics.append(ReferenceDiagnostic(kind=kind, message=message, subject=subject))

    def index_nodes(self, label: str, nodes: List[Dict[str, Any]]) -> Dict[str, Dict[str, Any]]:
        """Index nodes by normalized name, keeping the first of any duplicates."""
        index = {}
        for node in nodes:
            key = normalize_name(node["name"])
            if key in index:
                self.diagnose(
                    "duplicate_node",
                    f"Duplicate {label} '{node['name']}'",
                    subject=node["name"],
                )
                continue
            index[key] = node
        return index

    def check_known(self, label: str, names: Iterable[str], known: Mapping[str, Any], edge: str):
        for name in names:
            if normalize_name(name) not in known:
                self.diagnose(
                    "dangling_reference",
                    f"{edge} references unknown {label} '{name}'",
                    subject=name,
                )

    @staticmethod
    def display(name: str, known: Mapping[str, Any]) -> str:
        node = known.get(normalize_name(name))
        return node["name"] if node else name


def load_graph(source: Any) -> MasterReferenceGraph:
    """
    Build a MasterReferenceGraph from a reference snapshot.

    Args:
        source: Snapshot dict, or a reference source with load_snapshot()

    Returns:
        MasterReferenceGraph

    Raises:
        MalformedReferenceData: If the snapshot cannot be parsed at all
    """
    snapshot = source.load_snapshot() if hasattr(source, "load_snapshot") else source
    snapshot = validate_snapshot(snapshot)
    builder = _GraphBuilder()

    # Nodes
    units = builder.index_nodes("business unit", validate_node_list("businessUnits", snapshot.get("businessUnits")))
    categories = builder.index_nodes(
        "category", validate_node_list("categories", snapshot.get("categories"), "businessUnit")
    )
    ranges = builder.index_nodes("range", validate_node_list("ranges", snapshot.get("ranges")))
    campaigns = builder.index_nodes(
        "campaign", validate_node_list("campaigns", snapshot.get("campaigns"), "range")
    )

    # Edges
    category_units = validate_scalar_map("categoryToBusinessUnit", snapshot.get("categoryToBusinessUnit"))
    category_to_ranges = validate_edge_map("categoryToRanges", snapshot.get("categoryToRanges"))
    range_to_categories = validate_edge_map("rangeToCategories", snapshot.get("rangeToCategories"))
    range_to_campaigns = validate_edge_map("rangeToCampaigns", snapshot.get("rangeToCampaigns"))
    primary_map = validate_scalar_map("campaignToRangeMap", snapshot.get("campaignToRangeMap"))
    overrides = validate_edge_map("campaignRangeOverrides", snapshot.get("campaignRangeOverrides"))
    campaign_aliases = validate_edge_map("campaignCompatibilityMap", snapshot.get("campaignCompatibilityMap"))
    category_aliases = validate_edge_map("categoryCompatibilityMap", snapshot.get("categoryCompatibilityMap"))
    shared = validate_name_list("sharedCampaigns", snapshot.get("sharedCampaigns"))
    media_types = validate_name_list("mediaTypes", snapshot.get("mediaTypes")) or list(DEFAULT_MEDIA_TYPES)
    media_subtypes = validate_edge_map("mediaToSubtypes", snapshot.get("mediaToSubtypes"))
    archetypes = (
        validate_name_list("campaignArchetypes", snapshot.get("campaignArchetypes"))
        or list(DEFAULT_CAMPAIGN_ARCHETYPES)
    )

    display_range = partial(builder.display, known=ranges)
    display_category = partial(builder.display, known=categories)
    display_campaign = partial(builder.display, known=campaigns)

    # Business units
    business_units = {key: BusinessUnit(name=node["name"], id=node["id"]) for key, node in units.items()}

    # Categories with owning business unit
    builder.check_known("category", category_units, categories, "categoryToBusinessUnit")
    category_units = _by_key(category_units)
    category_nodes = {}
    for key, node in categories.items():
        unit = category_units.get(key) or node["parent"]
        if unit and normalize_name(unit) not in units:
            builder.diagnose(
                "dangling_reference",
                f"Category '{node['name']}' belongs to unknown business unit '{unit}'",
                subject=node["name"],
            )
        elif unit:
            unit = units[normalize_name(unit)]["name"]
        category_nodes[key] = Category(name=node["name"], id=node["id"], business_unit=unit or None)

    range_nodes = {key: Range(name=node["name"], id=node["id"]) for key, node in ranges.items()}

    # Category <-> range junction (many-to-many both ways, unioned)
    category_ranges: Dict[str, Set[str]] = defaultdict(set)
    range_categories: Dict[str, Set[str]] = defaultdict(set)
    forward_pairs = set()
    for category, targets in category_to_ranges.items():
        builder.check_known("category", [category], categories, "categoryToRanges")
        builder.check_known("range", targets, ranges, f"categoryToRanges['{category}']")
        for range_name in targets:
            forward_pairs.add((normalize_name(category), normalize_name(range_name)))
            category_ranges[normalize_name(category)].add(display_range(range_name))
            range_categories[normalize_name(range_name)].add(display_category(category))

    reverse_pairs = set()
    for range_name, sources in range_to_categories.items():
        builder.check_known("range", [range_name], ranges, "rangeToCategories")
        builder.check_known("category", sources, categories, f"rangeToCategories['{range_name}']")
        for category in sources:
            reverse_pairs.add((normalize_name(category), normalize_name(range_name)))
            category_ranges[normalize_name(category)].add(display_range(range_name))
            range_categories[normalize_name(range_name)].add(display_category(category))

    if category_to_ranges and range_to_categories:
        for category_key, range_key in sorted(forward_pairs ^ reverse_pairs):
            declared_in = "categoryToRanges" if (category_key, range_key) in forward_pairs else "rangeToCategories"
            builder.diagnose(
                "asymmetric_edge",
                f"Category/range link ({category_key} -> {range_key}) only declared in {declared_in}",
                subject=category_key,
            )

    # Range -> campaign junction (authoritative edge set)
    range_campaigns: Dict[str, Set[str]] = defaultdict(set)
    campaign_junction_ranges: Dict[str, Set[str]] = defaultdict(set)
    for range_name, members in range_to_campaigns.items():
        builder.check_known("range", [range_name], ranges, "rangeToCampaigns")
        builder.check_known("campaign", members, campaigns, f"rangeToCampaigns['{range_name}']")
        for campaign in members:
            range_campaigns[normalize_name(range_name)].add(display_campaign(campaign))
            campaign_junction_ranges[normalize_name(campaign)].add(display_range(range_name))

    # Campaigns with primary range
    builder.check_known("campaign", primary_map, campaigns, "campaignToRangeMap")
    primary_map = _by_key(primary_map)
    shared_keys = {normalize_name(name) for name in shared}
    builder.check_known("campaign", shared, campaigns, "sharedCampaigns")
    campaign_nodes = {}
    for key, node in campaigns.items():
        mapped = primary_map.get(key)
        declared = node["parent"]
        if mapped and declared and normalize_name(mapped) != normalize_name(declared):
            builder.diagnose(
                "conflicting_primary",
                f"Campaign '{node['name']}' lists range '{declared}' but is mapped to '{mapped}'",
                subject=node["name"],
            )
        primary = mapped or declared
        if primary:
            if normalize_name(primary) not in ranges:
                builder.diagnose(
                    "dangling_reference",
                    f"Campaign '{node['name']}' is mapped to unknown range '{primary}'",
                    subject=node["name"],
                )
            primary = display_range(primary)
        campaign_nodes[key] = Campaign(
            name=node["name"],
            id=node["id"],
            primary_range=primary or None,
            is_shared=key in shared_keys,
        )

    # Override and alias edges
    override_edges: Dict[str, Set[str]] = {}
    for campaign, targets in overrides.items():
        builder.check_known("campaign", [campaign], campaigns, "campaignRangeOverrides")
        builder.check_known("range", targets, ranges, f"campaignRangeOverrides['{campaign}']")
        override_edges[normalize_name(campaign)] = {display_range(r) for r in targets}

    alias_edges: Dict[str, Set[str]] = {}
    alias_names: Dict[str, str] = {}
    for campaign, targets in campaign_aliases.items():
        builder.check_known("range", targets, ranges, f"campaignCompatibilityMap['{campaign}']")
        alias_edges[normalize_name(campaign)] = {display_range(r) for r in targets}
        alias_names[normalize_name(campaign)] = display_campaign(campaign)

    category_alias_edges: Dict[str, Set[str]] = {}
    for category, targets in category_aliases.items():
        builder.check_known("range", targets, ranges, f"categoryCompatibilityMap['{category}']")
        category_alias_edges[normalize_name(category)] = {display_range(r) for r in targets}

    # Shared campaigns: override map vs junction edge set
    for key in sorted(shared_keys):
        node = campaign_nodes.get(key)
        declared = {normalize_name(r) for r in override_edges.get(key, set())}
        if node and node.primary_range:
            declared.add(normalize_name(node.primary_range))
        junction = {normalize_name(r) for r in campaign_junction_ranges.get(key, set())}
        if junction and declared != junction:
            name = node.name if node else key
            builder.diagnose(
                "junction_mismatch",
                f"Shared campaign '{name}' override ranges disagree with the range/campaign junction",
                subject=name,
            )

    # Media subtypes keyed by media type
    subtype_edges = {normalize_name(media): set(subtypes) for media, subtypes in media_subtypes.items()}
    for media in media_subtypes:
        if normalize_name(media) not in {normalize_name(m) for m in media_types}:
            media_types.append(media)

    graph = MasterReferenceGraph(
        business_units=business_units,
        categories=category_nodes,
        ranges=range_nodes,
        campaigns=campaign_nodes,
        category_ranges=category_ranges,
        range_categories=range_categories,
        range_campaigns=range_campaigns,
        campaign_junction_ranges=campaign_junction_ranges,
        campaign_overrides=override_edges,
        campaign_aliases=alias_edges,
        category_aliases=category_alias_edges,
        shared_campaigns=shared,
        media_types=media_types,
        media_subtypes=subtype_edges,
        campaign_archetypes=archetypes,
        diagnostics=builder.diagnostics,
        alias_campaign_names=alias_names,
    )

    logger.info(f"Loaded reference graph: {graph.stats()}")
    return graph


def _by_key(mapping: Mapping[str, Any]) -> Dict[str, Any]:
    """Re-key a name-keyed map by normalized name."""
    return {normalize_name(name): value for name, value in mapping.items()}
