from __future__ import annotations
from typing import Any, Dict, Iterator, List
import threading
import logging

from core.error_types import (
    Result,
    Success,
    Failure,
    SerializationError,
    combine_results,
    try_execute,
)
from models.marker import Marker
from utils.validators import validate_marker

logger = logging.getLogger(__name__)


class MarkerCollection:
    """
    Ordered, thread-safe set of markers owned by a document view.

    Markers are immutable, so iteration hands out a snapshot that stays
    valid while other threads add or remove entries.
    """

    def __init__(self):
        self._markers: List[Marker] = []
        self._lock = threading.RLock()

    def add(self, marker: Marker) -> Result[Marker]:
        """
        Add a marker after validating it.

        Returns:
            Result containing the added marker or the validation error.
        """
        result = validate_marker(marker)
        if result.is_failure():
            return result

        with self._lock:
            self._markers.append(marker)
        logger.debug(f"Added marker on page {marker.page}")
        return result

    def remove(self, marker: Marker) -> bool:
        """Remove the first marker equal to ``marker``; False if absent."""
        with self._lock:
            try:
                self._markers.remove(marker)
            except ValueError:
                return False
        return True

    def clear(self) -> None:
        with self._lock:
            count = len(self._markers)
            self._markers.clear()
        logger.info(f"Cleared marker collection (count={count})")

    def for_page(self, page: int) -> List[Marker]:
        """Markers on ``page`` in insertion order."""
        with self._lock:
            return [marker for marker in self._markers if marker.page == page]

    def pages(self) -> List[int]:
        """Sorted indexes of pages carrying at least one marker."""
        with self._lock:
            return sorted({marker.page for marker in self._markers})

    def snapshot(self) -> List[Marker]:
        with self._lock:
            return list(self._markers)

    def __len__(self) -> int:
        with self._lock:
            return len(self._markers)

    def __iter__(self) -> Iterator[Marker]:
        return iter(self.snapshot())

    def __contains__(self, marker: object) -> bool:
        with self._lock:
            return marker in self._markers

    def to_list(self) -> List[Dict[str, Any]]:
        return [marker.to_dict() for marker in self.snapshot()]

    @classmethod
    def from_list(cls, data: List[Dict[str, Any]]) -> Result[MarkerCollection]:
        """
        Rebuild a collection from ``to_list`` output.

        Returns:
            Result containing the collection, a SerializationError for
            malformed entries, or the first ValidationError.
        """
        parsed = try_execute(
            lambda: [Marker.from_dict(entry) for entry in data],
            SerializationError,
            "Failed to deserialize markers",
            data_type="Marker",
        )
        if parsed.is_failure():
            return Failure(parsed.get_error())

        validated = combine_results([validate_marker(marker) for marker in parsed.unwrap()])
        if validated.is_failure():
            return Failure(validated.get_error())

        collection = cls()
        with collection._lock:
            collection._markers.extend(validated.unwrap())
        logger.info(f"Loaded {len(collection)} markers")
        return Success(collection)
