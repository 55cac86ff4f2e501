"""
Reference Source Interface - Abstract Base Class for reference snapshots.

This module defines the contract for every source of master taxonomy data.
Any backend (JSON file, SQLite, in-memory dict) must implement this interface.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict


class ReferenceSource(ABC):
    """
    Abstract base class for reference data sources.

    A source produces a plain snapshot dict with the keys understood by
    domain.graph.load_graph():
    - businessUnits, categories, ranges, campaigns
    - categoryToBusinessUnit, categoryToRanges, rangeToCategories
    - rangeToCampaigns, campaignToRangeMap, campaignRangeOverrides
    - campaignCompatibilityMap, categoryCompatibilityMap, sharedCampaigns
    - mediaTypes, mediaToSubtypes, campaignArchetypes
    """

    @abstractmethod
    def load_snapshot(self) -> Dict[str, Any]:
        """
        Load the reference snapshot.

        Returns:
            Snapshot dict (a fresh object on every call)

        Raises:
            ReferenceSourceError: If the backing store cannot be read
            MalformedReferenceData: If the stored data cannot be parsed
        """
        pass

    @abstractmethod
    def describe(self) -> str:
        """
        Short human-readable description of the source (for logs).

        Returns:
            e.g. "json:/data/reference.json"
        """
        pass
