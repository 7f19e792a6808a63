"""Tests for Track, TrackCatalog and TrackSelection."""
import pytest

from src.models.track import Track, TrackCatalog
from src.models.track_selection import TrackSelection
from src.utils.exceptions import UnknownTrackError


class TestTrack:
    """Tests for track data validation."""

    def test_create_valid_track(self):
        track = Track(id="ing-civil", name="Ingeniería Civil")
        assert track.id == "ing-civil"
        assert track.name == "Ingeniería Civil"

    def test_empty_id_raises_error(self):
        with pytest.raises(ValueError, match="Track ID cannot be empty"):
            Track(id=" ", name="Ingeniería Civil")

    def test_comma_in_id_raises_error(self):
        """IDs are stored comma-joined, so commas are not allowed."""
        with pytest.raises(ValueError, match="cannot contain commas"):
            Track(id="ing,civil", name="Ingeniería Civil")

    def test_empty_name_raises_error(self):
        with pytest.raises(ValueError, match="Track name cannot be empty"):
            Track(id="ing-civil", name="")


class TestTrackCatalog:
    """Tests for the reference table."""

    def test_iteration_keeps_table_order(self, catalog):
        assert [t.id for t in catalog] == [
            "ing-civil", "ing-industrial", "lic-mercadotecnia", "lic-derecho"
        ]
        assert len(catalog) == 4

    def test_lookup(self, catalog):
        assert "ing-civil" in catalog
        assert "arquitectura" not in catalog
        assert catalog.get("lic-derecho").name == "Licenciatura en Derecho"
        assert catalog.get("arquitectura") is None

    def test_label_for_unknown_raises_error(self, catalog):
        with pytest.raises(UnknownTrackError):
            catalog.label_for("arquitectura")

    def test_duplicate_ids_rejected(self):
        with pytest.raises(ValueError, match="Duplicate track ID"):
            TrackCatalog([
                Track(id="ing-civil", name="A"),
                Track(id="ing-civil", name="B"),
            ])


class TestTrackSelection:
    """Tests for the ordered, deduplicated multi-select."""

    def test_add_is_idempotent(self):
        """Adding twice keeps a single entry at its first position."""
        selection = TrackSelection()
        assert selection.add("ing-civil") is True
        selection.add("lic-derecho")
        assert selection.add("ing-civil") is False

        assert selection.as_list() == ["ing-civil", "lic-derecho"]

    def test_order_is_insertion_order(self, catalog):
        """Order follows picks, not the reference table."""
        selection = TrackSelection()
        selection.add("lic-derecho")
        selection.add("ing-civil")

        assert list(selection) == ["lic-derecho", "ing-civil"]

    def test_remove_then_add_moves_to_end(self):
        selection = TrackSelection(["ing-civil", "ing-industrial", "lic-derecho"])
        selection.remove("ing-civil")
        selection.add("ing-civil")

        assert selection.as_list() == ["ing-industrial", "lic-derecho", "ing-civil"]

    def test_remove_absent_is_noop(self):
        selection = TrackSelection(["ing-civil"])
        assert selection.remove("lic-derecho") is False
        assert selection.as_list() == ["ing-civil"]

    def test_constructor_drops_duplicates(self):
        selection = TrackSelection(["ing-civil", "ing-civil", "lic-derecho"])
        assert len(selection) == 2

    def test_to_storage_joins_with_commas(self):
        selection = TrackSelection(["ing-civil", "lic-mercadotecnia"])
        assert selection.to_storage() == "ing-civil,lic-mercadotecnia"

    def test_empty_to_storage(self):
        assert TrackSelection().to_storage() == ""

    def test_labels_resolved_from_catalog(self, catalog):
        selection = TrackSelection(["lic-mercadotecnia", "ing-civil"])
        assert selection.labels(catalog) == [
            ("lic-mercadotecnia", "Licenciatura en Mercadotecnia"),
            ("ing-civil", "Ingeniería Civil"),
        ]

    def test_copy_is_independent(self):
        selection = TrackSelection(["ing-civil"])
        clone = selection.copy()
        clone.add("lic-derecho")

        assert selection.as_list() == ["ing-civil"]
        assert clone != selection
        assert selection.copy() == selection
