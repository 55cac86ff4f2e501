"""
JSON and in-memory implementations of ReferenceSource.
"""

import copy
import json
import logging
from pathlib import Path
from typing import Any, Dict, Union

from .interface import ReferenceSource
from domain.exceptions import MalformedReferenceData, ReferenceSourceError

logger = logging.getLogger(__name__)


class DictReferenceSource(ReferenceSource):
    """
    Reference source wrapping an in-memory snapshot.

    Each load returns a deep copy, so callers cannot alter the wrapped data.
    """

    def __init__(self, snapshot: Dict[str, Any]):
        self._snapshot = snapshot

    def load_snapshot(self) -> Dict[str, Any]:
        return copy.deepcopy(self._snapshot)

    def describe(self) -> str:
        return "memory"


class JsonReferenceSource(ReferenceSource):
    """
    Reference source reading a JSON file.

    The file is read on every load, so edits to the reference file are
    picked up by the next validation run without a restart.
    """

    def __init__(self, path: Union[Path, str]):
        """
        Initialize JSON source.

        Args:
            path: Path to reference JSON file
        """
        self.path = Path(path)

    def load_snapshot(self) -> Dict[str, Any]:
        """
        Read and parse the reference file.

        Raises:
            ReferenceSourceError: If the file cannot be read
            MalformedReferenceData: If the file is not valid JSON
        """
        try:
            text = self.path.read_text(encoding="utf-8")
        except OSError as e:
            raise ReferenceSourceError(
                f"Could not read reference file: {self.path}",
                details={"path": str(self.path), "error": str(e)},
            )

        try:
            snapshot = json.loads(text)
        except json.JSONDecodeError as e:
            raise MalformedReferenceData(
                f"Reference file is not valid JSON: {self.path}",
                details={"path": str(self.path), "line": e.lineno, "error": e.msg},
            )

        logger.debug(f"Loaded reference snapshot from {self.path}")
        return snapshot

    def describe(self) -> str:
        return f"json:{self.path}"
