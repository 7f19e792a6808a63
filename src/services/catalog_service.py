"""Loads the fixed reference table of academic tracks."""
import logging
from typing import Dict

from src.models.track import Track, TrackCatalog
from src.services.storage_service import load_json

logger = logging.getLogger(__name__)

# Cache keyed by file path
_catalog_cache: Dict[str, TrackCatalog] = {}


def _clear_cache():
    """Drop cached catalogs."""
    _catalog_cache.clear()


def load_catalog(file_path: str) -> TrackCatalog:
    """
    Load the track reference table.

    Args:
        file_path: JSON file shaped as {"careers": [{"id": ..., "name": ...}]}

    Returns:
        TrackCatalog in file order

    Raises:
        FileNotFoundError: If the file doesn't exist
        json.JSONDecodeError: If JSON is malformed
        ValueError: If an entry is invalid or an ID repeats
    """
    if file_path in _catalog_cache:
        return _catalog_cache[file_path]

    data = load_json(file_path)
    entries = data.get("careers", [])

    try:
        tracks = [Track(id=entry["id"], name=entry["name"]) for entry in entries]
    except KeyError as e:
        raise ValueError(f"Career entry missing field {e} in {file_path}")

    catalog = TrackCatalog(tracks)
    logger.info(f"Loaded {len(catalog)} careers from {file_path}")

    _catalog_cache[file_path] = catalog
    return catalog
