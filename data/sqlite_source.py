"""
SQLite implementation of ReferenceSource.

Reads the taxonomy tables (read-only) and assembles the snapshot dict
consumed by the reference graph. write_snapshot() goes the other way and
is used to seed a database from a JSON reference file.
"""

import logging
import sqlite3
from collections import defaultdict
from contextlib import closing
from pathlib import Path
from typing import Any, Dict, List, Mapping, Union

from .interface import ReferenceSource
from . import queries as Q
from domain.exceptions import ReferenceSourceError
from domain.validators import (
    validate_edge_map,
    validate_name_list,
    validate_node_list,
    validate_scalar_map,
    validate_snapshot,
)

logger = logging.getLogger(__name__)


class SQLiteReferenceSource(ReferenceSource):
    """
    Reference source reading a SQLite database.

    A connection is opened per load and closed afterwards; the source
    holds no open handles between validation runs.
    """

    def __init__(self, db_path: Union[Path, str]):
        """
        Initialize SQLite source.

        Args:
            db_path: Path to an existing SQLite database
        """
        self.db_path = Path(db_path)

    def _connect(self) -> sqlite3.Connection:
        if not self.db_path.exists():
            raise ReferenceSourceError(
                f"Reference database not found: {self.db_path}",
                details={"path": str(self.db_path)},
            )
        # Open read-only: the engine never writes reference data
        conn = sqlite3.connect(f"{self.db_path.resolve().as_uri()}?mode=ro", uri=True)
        conn.row_factory = sqlite3.Row
        return conn

    def load_snapshot(self) -> Dict[str, Any]:
        """
        Read taxonomy tables into a snapshot dict.

        Raises:
            ReferenceSourceError: If the database cannot be read
        """
        try:
            with closing(self._connect()) as conn:
                snapshot = self._read_snapshot(conn)
        except sqlite3.Error as e:
            raise ReferenceSourceError(
                f"Failed to read reference database: {e}",
                details={"path": str(self.db_path)},
            )

        logger.debug(
            f"Loaded reference snapshot from {self.db_path}: "
            f"{len(snapshot['categories'])} categories, {len(snapshot['campaigns'])} campaigns"
        )
        return snapshot

    def _read_snapshot(self, conn: sqlite3.Connection) -> Dict[str, Any]:
        def fetch(query: str) -> List[sqlite3.Row]:
            return conn.execute(query).fetchall()

        categories = fetch(Q.SELECT_CATEGORIES)
        campaigns = fetch(Q.SELECT_CAMPAIGNS)

        category_ranges = defaultdict(list)
        range_categories = defaultdict(list)
        for row in fetch(Q.SELECT_CATEGORY_RANGES):
            category_ranges[row["category_name"]].append(row["range_name"])
            range_categories[row["range_name"]].append(row["category_name"])

        range_campaigns = defaultdict(list)
        for row in fetch(Q.SELECT_RANGE_CAMPAIGNS):
            range_campaigns[row["range_name"]].append(row["campaign_name"])

        snapshot = {
            "businessUnits": [
                {"name": row["name"], "id": row["id"]} for row in fetch(Q.SELECT_BUSINESS_UNITS)
            ],
            "categories": [
                {"name": row["name"], "id": row["id"], "businessUnit": row["business_unit"]}
                for row in categories
            ],
            "ranges": [{"name": row["name"], "id": row["id"]} for row in fetch(Q.SELECT_RANGES)],
            "campaigns": [
                {"name": row["name"], "id": row["id"], "range": row["range_name"]}
                for row in campaigns
            ],
            "categoryToBusinessUnit": {
                row["name"]: row["business_unit"] for row in categories if row["business_unit"]
            },
            "categoryToRanges": dict(category_ranges),
            "rangeToCategories": dict(range_categories),
            "rangeToCampaigns": dict(range_campaigns),
            "campaignToRangeMap": {
                row["name"]: row["range_name"] for row in campaigns if row["range_name"]
            },
            "campaignRangeOverrides": _pairs_to_edges(fetch(Q.SELECT_CAMPAIGN_OVERRIDES)),
            "campaignCompatibilityMap": _pairs_to_edges(fetch(Q.SELECT_CAMPAIGN_COMPATIBILITY)),
            "categoryCompatibilityMap": _pairs_to_edges(fetch(Q.SELECT_CATEGORY_COMPATIBILITY)),
            "sharedCampaigns": [row["campaign_name"] for row in fetch(Q.SELECT_SHARED_CAMPAIGNS)],
        }

        # Empty lookup tables fall back to the built-in defaults
        media_types = [row["name"] for row in fetch(Q.SELECT_MEDIA_TYPES)]
        if media_types:
            snapshot["mediaTypes"] = media_types
        subtypes = _pairs_to_edges(fetch(Q.SELECT_MEDIA_SUBTYPES))
        if subtypes:
            snapshot["mediaToSubtypes"] = subtypes
        archetypes = [row["name"] for row in fetch(Q.SELECT_CAMPAIGN_ARCHETYPES)]
        if archetypes:
            snapshot["campaignArchetypes"] = archetypes

        return snapshot

    def describe(self) -> str:
        return f"sqlite:{self.db_path}"


def create_schema(db_path: Union[Path, str]) -> Path:
    """
    Create the taxonomy tables (idempotent).

    Args:
        db_path: Path to SQLite database file (created if not exists)

    Returns:
        Path to the database
    """
    path = Path(db_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with closing(sqlite3.connect(str(path))) as conn:
        conn.executescript(Q.CREATE_SCHEMA)
        conn.commit()
    logger.info(f"Reference schema ready at {path}")
    return path


def write_snapshot(db_path: Union[Path, str], snapshot: Mapping[str, Any]) -> Path:
    """
    Seed a reference database from a snapshot dict.

    Existing rows are kept; names already present are skipped.

    Args:
        db_path: Path to SQLite database file (schema created if missing)
        snapshot: Snapshot in the load_graph() format

    Returns:
        Path to the database

    Raises:
        MalformedReferenceData: If the snapshot cannot be parsed
        ReferenceSourceError: If the database cannot be written
    """
    snapshot = validate_snapshot(snapshot)
    path = create_schema(db_path)

    units = validate_node_list("businessUnits", snapshot.get("businessUnits"))
    categories = validate_node_list("categories", snapshot.get("categories"), "businessUnit")
    ranges = validate_node_list("ranges", snapshot.get("ranges"))
    campaigns = validate_node_list("campaigns", snapshot.get("campaigns"), "range")
    category_units = validate_scalar_map("categoryToBusinessUnit", snapshot.get("categoryToBusinessUnit"))
    primary_map = validate_scalar_map("campaignToRangeMap", snapshot.get("campaignToRangeMap"))

    try:
        with closing(sqlite3.connect(str(path))) as conn:
            conn.executemany(Q.INSERT_BUSINESS_UNIT, [(u["name"],) for u in units])
            conn.executemany(Q.INSERT_CATEGORY, [
                (c["name"], category_units.get(c["name"]) or c["parent"]) for c in categories
            ])
            conn.executemany(Q.INSERT_RANGE, [(r["name"],) for r in ranges])
            conn.executemany(Q.INSERT_CAMPAIGN, [
                (c["name"], primary_map.get(c["name"]) or c["parent"]) for c in campaigns
            ])

            category_links = _edge_pairs(validate_edge_map("categoryToRanges", snapshot.get("categoryToRanges")))
            category_links += [
                (category, range_name)
                for range_name, category in _edge_pairs(
                    validate_edge_map("rangeToCategories", snapshot.get("rangeToCategories"))
                )
            ]
            conn.executemany(Q.INSERT_CATEGORY_RANGE, category_links)
            conn.executemany(
                Q.INSERT_RANGE_CAMPAIGN,
                _edge_pairs(validate_edge_map("rangeToCampaigns", snapshot.get("rangeToCampaigns"))),
            )

            conn.executemany(Q.INSERT_SHARED_CAMPAIGN, [
                (name,) for name in validate_name_list("sharedCampaigns", snapshot.get("sharedCampaigns"))
            ])
            conn.executemany(
                Q.INSERT_CAMPAIGN_OVERRIDE,
                _edge_pairs(validate_edge_map("campaignRangeOverrides", snapshot.get("campaignRangeOverrides"))),
            )
            conn.executemany(
                Q.INSERT_CAMPAIGN_COMPATIBILITY,
                _edge_pairs(validate_edge_map("campaignCompatibilityMap", snapshot.get("campaignCompatibilityMap"))),
            )
            conn.executemany(
                Q.INSERT_CATEGORY_COMPATIBILITY,
                _edge_pairs(validate_edge_map("categoryCompatibilityMap", snapshot.get("categoryCompatibilityMap"))),
            )

            media_subtypes = validate_edge_map("mediaToSubtypes", snapshot.get("mediaToSubtypes"))
            media_types = validate_name_list("mediaTypes", snapshot.get("mediaTypes"))
            conn.executemany(Q.INSERT_MEDIA_TYPE, [(m,) for m in media_types + list(media_subtypes)])
            conn.executemany(
                Q.INSERT_MEDIA_SUBTYPE,
                [(subtype, media) for media, subtype in _edge_pairs(media_subtypes)],
            )
            conn.executemany(Q.INSERT_CAMPAIGN_ARCHETYPE, [
                (a,) for a in validate_name_list("campaignArchetypes", snapshot.get("campaignArchetypes"))
            ])
            conn.commit()
    except sqlite3.Error as e:
        raise ReferenceSourceError(
            f"Failed to write reference database: {e}",
            details={"path": str(path)},
        )

    logger.info(f"Wrote reference snapshot to {path}")
    return path


def _pairs_to_edges(rows: List[sqlite3.Row]) -> Dict[str, List[str]]:
    """Two-column rows (source, target) -> {source: [targets]}."""
    edges = defaultdict(list)
    for source, target in rows:
        edges[source].append(target)
    return dict(edges)


def _edge_pairs(edges: Mapping[str, List[str]]) -> List[tuple]:
    """{source: [targets]} -> [(source, target), ...]."""
    return [(source, target) for source, targets in edges.items() for target in targets]
