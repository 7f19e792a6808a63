"""Tests for TriState."""
import pytest

from src.models.tri_state import TriState


class TestFromChoice:
    """Tests for coercing UI choices."""

    @pytest.mark.parametrize("choice,expected", [
        ("SI", TriState.YES),
        ("si", TriState.YES),
        (" Sí ", TriState.YES),
        ("NO", TriState.NO),
        ("", TriState.UNSET),
        (None, TriState.UNSET),
        (True, TriState.YES),
        (False, TriState.NO),
        (TriState.NO, TriState.NO),
    ])
    def test_valid_choices(self, choice, expected):
        """Choice strings, bools and None map to the three states."""
        assert TriState.from_choice(choice) is expected

    def test_invalid_choice_raises_error(self):
        """Unknown choices should raise ValueError."""
        with pytest.raises(ValueError, match="Invalid yes/no choice"):
            TriState.from_choice("MAYBE")

    def test_numbers_are_rejected(self):
        """0 and 1 are not accepted as answers."""
        with pytest.raises(ValueError):
            TriState.from_choice(1)


class TestConversions:
    """Tests for converting back to UI and storage values."""

    def test_to_choice(self):
        assert TriState.YES.to_choice() == "SI"
        assert TriState.NO.to_choice() == "NO"
        assert TriState.UNSET.to_choice() == ""

    def test_to_bool_answered(self):
        assert TriState.YES.to_bool() is True
        assert TriState.NO.to_bool() is False

    def test_unset_is_not_false(self):
        """An unanswered question must not silently become False."""
        with pytest.raises(ValueError, match="Unanswered"):
            TriState.UNSET.to_bool()

    def test_flags(self):
        assert TriState.YES.is_yes
        assert not TriState.NO.is_yes
        assert TriState.NO.is_answered
        assert not TriState.UNSET.is_answered
