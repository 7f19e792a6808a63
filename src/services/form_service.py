"""Registration form state: field edits, validation and submission."""
import asyncio
import logging
from dataclasses import dataclass, field
from functools import partial
from typing import Any, Callable, Dict, List, Optional, Tuple

from src.models.payload import DEFAULT_REGISTRANT_TYPE, RegistrationPayload
from src.models.registration import RegistrationRecord
from src.models.track import TrackCatalog
from src.models.tri_state import TriState
from src.services.attendee_service import parse_attendee_count, resize_names, slot_label
from src.services.form_schema import (
    COUNT,
    FIELDS_BY_NAME,
    FORM_FIELDS,
    NAMES,
    TRACKS,
    TRI_STATE,
    TEXT,
    slot_key,
)
from src.services.notification_service import Notifier
from src.services.registration_store import RegistrationStore
from src.services.visibility_service import active_fields, prune_errors
from src.utils.exceptions import UnknownTrackError, ValidationError
from src.utils.validation import validate_field, validate_record

logger = logging.getLogger(__name__)

SUBMIT_LABEL = "Registrar empresa"
BUSY_LABEL = "Registrando..."
SUCCESS_MESSAGE = "¡Registro exitoso!"
FAILURE_MESSAGE = "Error al registrar"
INVALID_MESSAGE = "Corrige los campos marcados antes de registrar"
BUSY_MESSAGE = "Ya hay un registro en curso"

TRI_STATE_OPTIONS: List[Tuple[str, str]] = [
    ("", "Selecciona una opción"),
    ("SI", "Sí"),
    ("NO", "No"),
]


@dataclass
class FieldDescriptor:
    """Everything the presentation layer needs to render one field."""

    name: str
    label: str
    kind: str
    value: Any
    error: Optional[str] = None
    placeholder: str = ""
    on_change: Optional[Callable[[Any], Any]] = None
    options: List[Tuple[str, str]] = field(default_factory=list)


class RegistrationForm:
    """
    Owns one in-progress registration.

    The record is mutated field by field; every change is validated
    immediately and errors of fields hidden by a gate are dropped.
    Submission re-validates everything and hands a single row to the
    store, with a busy flag guaranteeing one request in flight.
    """

    def __init__(
        self,
        catalog: TrackCatalog,
        store: RegistrationStore,
        notifier: Notifier,
        registrant_type: str = DEFAULT_REGISTRANT_TYPE,
    ):
        self.catalog = catalog
        self.store = store
        self.notifier = notifier
        self.registrant_type = registrant_type

        self.record = RegistrationRecord()
        self.errors: Dict[str, str] = {}
        self.is_busy = False
        # Bumped on reset so widget keys change and stale inputs are discarded
        self.generation = 0

    @property
    def submit_label(self) -> str:
        return BUSY_LABEL if self.is_busy else SUBMIT_LABEL

    def reset(self) -> None:
        """Return to an empty record with no errors."""
        self.record = RegistrationRecord()
        self.errors = {}
        self.generation += 1

    def set_field(self, name: str, value: Any) -> Optional[str]:
        """
        Update one scalar field and revalidate it.

        Args:
            name: Record field name (not attendee names or tracks)
            value: Raw input; tri-states accept "SI"/"NO"/"" or TriState,
                the attendee count accepts ints or digit strings

        Returns:
            The field's error message after the change, or None

        Raises:
            KeyError: If the field is unknown or is a collection field
        """
        spec = FIELDS_BY_NAME.get(name)
        if spec is None or spec.kind in (NAMES, TRACKS):
            raise KeyError(f"Not a scalar form field: {name}")

        if spec.kind == TRI_STATE:
            value = TriState.from_choice(value)
        elif spec.kind == COUNT:
            try:
                value = parse_attendee_count(value)
            except ValidationError as e:
                self.errors[name] = str(e)
                return self.errors[name]
            self.record.extra_attendee_names = resize_names(
                self.record.extra_attendee_names, value
            )
        else:
            value = "" if value is None else str(value)

        setattr(self.record, name, value)
        self._revalidate(name)
        if spec.kind == COUNT:
            self._revalidate("extra_attendee_names")

        self.errors = prune_errors(self.errors, self.record)
        return self.errors.get(name)

    def set_attendee_name(self, index: int, value: str) -> Optional[str]:
        """
        Update the extra attendee name at a 0-based slot index.

        Raises:
            IndexError: If no slot exists at that index
        """
        names = self.record.extra_attendee_names
        if not 0 <= index < len(names):
            raise IndexError(f"No attendee slot at index {index}")

        names[index] = "" if value is None else str(value)
        key = slot_key(index)
        self._revalidate(key)
        return self.errors.get(key)

    def add_track(self, track_id: str) -> Optional[str]:
        """
        Select a track; selecting it again is a no-op.

        Raises:
            UnknownTrackError: If the ID is not in the reference table
        """
        if track_id not in self.catalog:
            raise UnknownTrackError(f"Unknown track: {track_id}")

        self.record.desired_tracks.add(track_id)
        self._revalidate("desired_tracks")
        return self.errors.get("desired_tracks")

    def remove_track(self, track_id: str) -> Optional[str]:
        """Deselect a track; removing an unselected track is a no-op."""
        self.record.desired_tracks.remove(track_id)
        self._revalidate("desired_tracks")
        return self.errors.get("desired_tracks")

    def _revalidate(self, key: str) -> None:
        error = validate_field(self.record, key, self.catalog)
        if error:
            self.errors[key] = error
        else:
            self.errors.pop(key, None)

    def validate(self) -> Dict[str, str]:
        """Run the full validation pass and replace the current errors."""
        self.errors = validate_record(self.record, self.catalog)
        return dict(self.errors)

    def descriptors(self) -> List[FieldDescriptor]:
        """
        Describe every active field in display order.

        Attendee names expand to one descriptor per slot; selected tracks
        are resolved to their display names here, not when stored.
        """
        active = active_fields(self.record)
        result: List[FieldDescriptor] = []

        for spec in FORM_FIELDS:
            if spec.name not in active:
                continue

            if spec.kind == NAMES:
                for index, name in enumerate(self.record.extra_attendee_names):
                    key = slot_key(index)
                    result.append(FieldDescriptor(
                        name=key,
                        label=slot_label(index),
                        kind=TEXT,
                        value=name,
                        error=self.errors.get(key),
                        placeholder=f"Nombre de la persona #{index + 1}",
                        on_change=partial(self.set_attendee_name, index),
                    ))
                continue

            value = getattr(self.record, spec.name)
            options: List[Tuple[str, str]] = []
            on_change = partial(self.set_field, spec.name)

            if spec.kind == TRI_STATE:
                value = value.to_choice()
                options = list(TRI_STATE_OPTIONS)
            elif spec.kind == TRACKS:
                value = value.labels(self.catalog)
                options = [(track.id, track.name) for track in self.catalog]
                on_change = self.add_track

            result.append(FieldDescriptor(
                name=spec.name,
                label=spec.label,
                kind=spec.kind,
                value=value,
                error=self.errors.get(spec.name),
                placeholder=spec.placeholder,
                on_change=on_change,
                options=options,
            ))

        return result

    async def submit(self) -> Tuple[bool, str]:
        """
        Validate and persist the registration.

        Returns:
            Tuple of (success: bool, message: str)
            - (True, "¡Registro exitoso!") after a successful insert; the form is reset
            - (False, BUSY_MESSAGE) if a submission is already in flight
            - (False, INVALID_MESSAGE) if any field has an error; nothing is sent
            - (False, "Error al registrar") if the store fails; the record is kept

        Behavior:
            - The busy flag is set before the first await, so a second call
              made while the insert is pending returns immediately
            - The store is called exactly once per accepted attempt, no retries
        """
        if self.is_busy:
            logger.warning("Submit ignored: registration already in flight")
            return False, BUSY_MESSAGE

        errors = self.validate()
        if errors:
            logger.info(f"Submit blocked by {len(errors)} validation error(s)")
            self.notifier.notify_failure(INVALID_MESSAGE)
            return False, INVALID_MESSAGE

        try:
            payload = RegistrationPayload.from_record(
                self.record, self.catalog, self.registrant_type
            ).to_row()
        except ValidationError as e:
            logger.error(f"Refusing to submit malformed registration: {e}")
            self.notifier.notify_failure(FAILURE_MESSAGE)
            return False, FAILURE_MESSAGE

        self.is_busy = True
        try:
            await asyncio.to_thread(self.store.insert_registration, payload)
        except Exception:
            logger.exception("Registration submit failed")
            self.notifier.notify_failure(FAILURE_MESSAGE)
            return False, FAILURE_MESSAGE
        finally:
            self.is_busy = False

        logger.info(f"Registration submitted for {payload['nombreEmpresa']}")
        self.notifier.notify_success(SUCCESS_MESSAGE)
        self.reset()
        return True, SUCCESS_MESSAGE
