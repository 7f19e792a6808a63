"""Academic track reference data."""
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Tuple

from src.utils.exceptions import UnknownTrackError


@dataclass(frozen=True)
class Track:
    """Selectable academic track (career)."""

    id: str
    name: str

    def __post_init__(self):
        """Validate track data after initialization."""
        if not self.id or not self.id.strip():
            raise ValueError("Track ID cannot be empty")

        if "," in self.id:
            raise ValueError(f"Track ID cannot contain commas: {self.id}")

        if not self.name or not self.name.strip():
            raise ValueError("Track name cannot be empty")


class TrackCatalog:
    """Immutable, ordered reference table of tracks."""

    def __init__(self, tracks: Iterable[Track]):
        self._tracks: Tuple[Track, ...] = tuple(tracks)
        self._by_id = {}
        for track in self._tracks:
            if track.id in self._by_id:
                raise ValueError(f"Duplicate track ID: {track.id}")
            self._by_id[track.id] = track

    def __iter__(self) -> Iterator[Track]:
        return iter(self._tracks)

    def __len__(self) -> int:
        return len(self._tracks)

    def __contains__(self, track_id: object) -> bool:
        return track_id in self._by_id

    def get(self, track_id: str) -> Optional[Track]:
        """Return the track with this ID, or None."""
        return self._by_id.get(track_id)

    def label_for(self, track_id: str) -> str:
        """
        Resolve a track ID to its display name.

        Raises:
            UnknownTrackError: If the ID is not in the table
        """
        track = self._by_id.get(track_id)
        if track is None:
            raise UnknownTrackError(f"Unknown track: {track_id}")
        return track.name

    def ids(self) -> Tuple[str, ...]:
        """Return all track IDs in table order."""
        return tuple(track.id for track in self._tracks)
