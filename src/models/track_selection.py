"""Ordered, duplicate-free multi-select of desired tracks."""
from typing import Iterable, Iterator, List, Optional, Tuple

from src.models.track import TrackCatalog


class TrackSelection:
    """Track IDs in the order they were picked, without duplicates."""

    def __init__(self, track_ids: Optional[Iterable[str]] = None):
        self._ids: List[str] = []
        for track_id in track_ids or ():
            self.add(track_id)

    def add(self, track_id: str) -> bool:
        """
        Append a track ID unless it is already selected.

        Returns:
            True if the ID was appended, False if it was already present
        """
        if track_id in self._ids:
            return False
        self._ids.append(track_id)
        return True

    def remove(self, track_id: str) -> bool:
        """
        Remove a track ID if present.

        Returns:
            True if the ID was removed, False if it was absent
        """
        if track_id not in self._ids:
            return False
        self._ids.remove(track_id)
        return True

    def as_list(self) -> List[str]:
        return list(self._ids)

    def to_storage(self) -> str:
        """Flatten to the comma-delimited storage string."""
        return ",".join(self._ids)

    def labels(self, catalog: TrackCatalog) -> List[Tuple[str, str]]:
        """Resolve each selected ID to (id, display name) at render time."""
        return [(track_id, catalog.label_for(track_id)) for track_id in self._ids]

    def copy(self) -> "TrackSelection":
        return TrackSelection(self._ids)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._ids))

    def __len__(self) -> int:
        return len(self._ids)

    def __contains__(self, track_id: object) -> bool:
        return track_id in self._ids

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TrackSelection):
            return NotImplemented
        return self._ids == other._ids

    def __repr__(self) -> str:
        return f"TrackSelection({self._ids!r})"
