"""Keeps the extra-attendee name slots in step with the attendee count."""
from typing import Any, List

from src.utils.exceptions import ValidationError

MAX_EXTRA_ATTENDEES = 50


def parse_attendee_count(raw: Any) -> int:
    """
    Parse a user-entered attendee count.

    Args:
        raw: int, integral float, or digit string ("" counts as 0)

    Returns:
        Non-negative integer count

    Raises:
        ValidationError: If the value is negative, fractional, non-numeric
            or above MAX_EXTRA_ATTENDEES
    """
    if raw is None:
        return 0

    if isinstance(raw, bool):
        raise ValidationError("La cantidad debe ser un número entero")

    if isinstance(raw, float):
        if not raw.is_integer():
            raise ValidationError("La cantidad debe ser un número entero")
        raw = int(raw)

    if isinstance(raw, str):
        text = raw.strip()
        if text == "":
            return 0
        try:
            raw = int(text)
        except ValueError:
            raise ValidationError("La cantidad debe ser un número entero")

    if not isinstance(raw, int):
        raise ValidationError("La cantidad debe ser un número entero")

    if raw < 0:
        raise ValidationError("La cantidad no puede ser negativa")

    if raw > MAX_EXTRA_ATTENDEES:
        raise ValidationError(f"La cantidad no puede ser mayor a {MAX_EXTRA_ATTENDEES}")

    return raw


def resize_names(names: List[str], count: int) -> List[str]:
    """
    Regenerate the name list to exactly `count` entries.

    Args:
        names: Current names (not modified)
        count: Desired length

    Returns:
        New list: names at indices < min(len(names), count) are kept,
        new slots are "", slots at index >= count are dropped

    Raises:
        ValueError: If count is negative
    """
    if count < 0:
        raise ValueError(f"Attendee count cannot be negative: {count}")

    kept = list(names[:count])
    return kept + [""] * (count - len(kept))


def slot_label(index: int) -> str:
    """Label of the attendee slot at a 0-based index (shown 1-based)."""
    return f"Nombre de la persona extra #{index + 1}"
