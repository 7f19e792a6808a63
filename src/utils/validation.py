"""Data validation utilities."""
from typing import Dict, Iterable, List, Optional, Tuple

from email_validator import EmailNotValidError, validate_email as check_email_syntax

from src.models.registration import RegistrationRecord
from src.models.track import TrackCatalog
from src.models.tri_state import TriState
from src.services.attendee_service import slot_label
from src.services.form_schema import (
    COUNT,
    EMAIL,
    FORM_FIELDS,
    NAME_MIN_LENGTH,
    NAMES,
    TEXT,
    TRACKS,
    TRI_STATE,
    get_field,
    slot_index,
    slot_key,
)
from src.services.visibility_service import active_fields

TRACKS_REQUIRED_MESSAGE = "Selecciona al menos una carrera"


def validate_required(value: str, label: str) -> Tuple[bool, str]:
    """
    Validate that a text field is not blank.

    Returns:
        Tuple of (is_valid: bool, error_message: str)
        - (True, "") if valid
        - (False, "<label> es obligatorio") if empty or whitespace only
    """
    if not value or not value.strip():
        return False, f"{label} es obligatorio"
    return True, ""


def validate_min_length(value: str, min_length: int, label: str) -> Tuple[bool, str]:
    """
    Validate trimmed length of a text field.

    Args:
        value: Text to check
        min_length: Minimum number of characters after trimming
        label: Field label used in the message

    Returns:
        Tuple of (is_valid: bool, error_message: str)
        - (True, "") if valid
        - (False, "<label> debe tener al menos N caracteres") if too short
    """
    if len((value or "").strip()) < min_length:
        return False, f"{label} debe tener al menos {min_length} caracteres"
    return True, ""


def validate_email(value: str, label: str = "Correo electrónico") -> Tuple[bool, str]:
    """
    Validate email syntax (no DNS deliverability check).

    Returns:
        Tuple of (is_valid: bool, error_message: str)
    """
    if not value or not value.strip():
        return False, f"{label} es obligatorio"
    try:
        check_email_syntax(value.strip(), check_deliverability=False)
    except EmailNotValidError:
        return False, f"{label} no es un correo válido"
    return True, ""


def validate_tri_state_answered(value: TriState, label: str) -> Tuple[bool, str]:
    """Validate that a yes/no question has been answered."""
    if not isinstance(value, TriState) or not value.is_answered:
        return False, f"Selecciona una opción: {label}"
    return True, ""


def validate_tracks(track_ids: Iterable[str], catalog: TrackCatalog) -> Tuple[bool, str]:
    """
    Validate the desired tracks selection.

    Returns:
        Tuple of (is_valid: bool, error_message: str)
        - (False, "Selecciona al menos una carrera") if empty
        - (False, "Carrera desconocida: <id>") if an ID is not in the table
        - (False, "Carrera duplicada: <id>") if an ID repeats
    """
    ids = list(track_ids)
    if not ids:
        return False, TRACKS_REQUIRED_MESSAGE

    seen = set()
    for track_id in ids:
        if track_id not in catalog:
            return False, f"Carrera desconocida: {track_id}"
        if track_id in seen:
            return False, f"Carrera duplicada: {track_id}"
        seen.add(track_id)

    return True, ""


def validate_attendee_count(count: int) -> Tuple[bool, str]:
    """Validate the extra attendee count once the attendee group is active."""
    if not isinstance(count, int) or isinstance(count, bool) or count < 1:
        return False, "Indica al menos una persona adicional"
    return True, ""


def validate_attendee_names(names: List[str], count: int) -> Tuple[bool, str]:
    """Validate that one name slot exists per extra attendee."""
    if len(names) != count:
        return False, (
            f"Se esperaban {count} nombres de personas extras, "
            f"se recibieron {len(names)}"
        )
    return True, ""


def _check_field(record: RegistrationRecord, name: str, catalog: TrackCatalog) -> Tuple[bool, str]:
    index = slot_index(name)
    if index is not None:
        names = record.extra_attendee_names
        value = names[index] if index < len(names) else ""
        return validate_min_length(value, NAME_MIN_LENGTH, slot_label(index))

    spec = get_field(name)
    value = getattr(record, spec.name)

    if spec.kind == TEXT:
        if spec.min_length:
            return validate_min_length(value, spec.min_length, spec.label)
        if spec.required:
            return validate_required(value, spec.label)
        return True, ""

    if spec.kind == EMAIL:
        if not spec.required and not value.strip():
            return True, ""
        return validate_email(value, spec.label)

    if spec.kind == TRI_STATE:
        return validate_tri_state_answered(value, spec.label)

    if spec.kind == COUNT:
        return validate_attendee_count(value)

    if spec.kind == NAMES:
        return validate_attendee_names(value, record.extra_attendee_count)

    if spec.kind == TRACKS:
        return validate_tracks(value, catalog)

    raise ValueError(f"Unsupported field kind: {spec.kind}")


def validate_field(
    record: RegistrationRecord,
    name: str,
    catalog: TrackCatalog
) -> Optional[str]:
    """
    Validate a single field or attendee slot.

    Args:
        record: Current registration record
        name: Field name or "extra_attendee_names.<i>" slot key
        catalog: Reference table of tracks

    Returns:
        Error message, or None if valid or currently inactive
    """
    if name not in active_fields(record):
        return None

    is_valid, error_msg = _check_field(record, name, catalog)
    return None if is_valid else error_msg


def validate_record(record: RegistrationRecord, catalog: TrackCatalog) -> Dict[str, str]:
    """
    Validate every active field of the record.

    Returns:
        Mapping of field name (or slot key) to error message, in form
        order; empty if the record can be submitted
    """
    active = active_fields(record)
    errors: Dict[str, str] = {}

    for spec in FORM_FIELDS:
        keys = [spec.name]
        if spec.kind == NAMES:
            keys += [slot_key(i) for i in range(record.extra_attendee_count)]

        for key in keys:
            if key not in active:
                continue
            is_valid, error_msg = _check_field(record, key, catalog)
            if not is_valid:
                errors[key] = error_msg

    return errors
