"""Three-valued answer used by every yes/no question of the form."""
from enum import Enum
from typing import Any


class TriState(Enum):
    """Unanswered, affirmative or negative."""

    UNSET = "unset"
    YES = "yes"
    NO = "no"

    @classmethod
    def from_choice(cls, value: Any) -> "TriState":
        """
        Coerce a UI choice into a TriState.

        Args:
            value: TriState, "SI"/"NO"/"" choice string, bool or None

        Returns:
            Matching TriState

        Raises:
            ValueError: If value cannot be interpreted
        """
        if isinstance(value, TriState):
            return value
        if value is None:
            return cls.UNSET
        if isinstance(value, bool):
            return cls.YES if value else cls.NO
        if isinstance(value, str):
            choice = value.strip().upper()
            if choice in ("SI", "SÍ"):
                return cls.YES
            if choice == "NO":
                return cls.NO
            if choice == "":
                return cls.UNSET
        raise ValueError(f"Invalid yes/no choice: {value!r}")

    def to_choice(self) -> str:
        """Return the UI choice string ("SI", "NO" or "")."""
        return {TriState.YES: "SI", TriState.NO: "NO"}.get(self, "")

    def to_bool(self) -> bool:
        """
        Convert an answered value to bool.

        Raises:
            ValueError: If the question is still unanswered
        """
        if self is TriState.UNSET:
            raise ValueError("Unanswered question has no boolean value")
        return self is TriState.YES

    @property
    def is_yes(self) -> bool:
        return self is TriState.YES

    @property
    def is_answered(self) -> bool:
        return self is not TriState.UNSET
