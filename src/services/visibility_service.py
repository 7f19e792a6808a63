"""Conditional visibility of gated field groups."""
from typing import Dict, FrozenSet, Tuple

from src.models.registration import RegistrationRecord
from src.services.form_schema import FORM_FIELDS, TRI_STATE, slot_key


def _build_gate_map() -> Dict[str, Tuple[str, ...]]:
    gates: Dict[str, Tuple[str, ...]] = {}
    for spec in FORM_FIELDS:
        if spec.kind == TRI_STATE and spec.name != "data_use_consent":
            gates.setdefault(spec.name, ())
        if spec.gate:
            gates[spec.gate] = gates.get(spec.gate, ()) + (spec.name,)
    return gates


# Gate field -> dependent fields it reveals when answered "yes".
GATED_FIELDS: Dict[str, Tuple[str, ...]] = _build_gate_map()


def active_fields(record: RegistrationRecord) -> FrozenSet[str]:
    """
    Compute which fields are currently active.

    Args:
        record: Current registration record

    Returns:
        Names of active fields, plus one "extra_attendee_names.<i>" key
        per attendee slot when the attendee group is active

    Behavior:
        - Pure function of the record, no state is kept between calls
        - Ungated fields are always active
        - Gated fields are active only while their gate is YES
    """
    active = set()
    for spec in FORM_FIELDS:
        if spec.gate is not None and not getattr(record, spec.gate).is_yes:
            continue
        active.add(spec.name)

    if "extra_attendee_names" in active:
        active.update(slot_key(i) for i in range(record.extra_attendee_count))

    return frozenset(active)


def is_active(record: RegistrationRecord, name: str) -> bool:
    """Check if a field (or attendee slot key) is currently active."""
    return name in active_fields(record)


def deactivated_fields(
    before: RegistrationRecord,
    after: RegistrationRecord
) -> FrozenSet[str]:
    """Return fields that were active in `before` but are inactive in `after`."""
    return active_fields(before) - active_fields(after)


def prune_errors(errors: Dict[str, str], record: RegistrationRecord) -> Dict[str, str]:
    """Drop errors belonging to fields that are no longer active."""
    active = active_fields(record)
    return {name: message for name, message in errors.items() if name in active}
