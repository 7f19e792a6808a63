"""Declarative schema of the company registration form."""
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

TEXT = "text"
EMAIL = "email"
TRI_STATE = "tri_state"
COUNT = "count"
NAMES = "names"
TRACKS = "tracks"

ATTENDEE_SLOT_PREFIX = "extra_attendee_names."
NAME_MIN_LENGTH = 2


@dataclass(frozen=True)
class FieldSpec:
    """Static description of a single form field."""

    name: str
    label: str
    kind: str = TEXT
    required: bool = False
    min_length: int = 0
    placeholder: str = ""
    gate: Optional[str] = None


# Display order matches the rendered form.
FORM_FIELDS: Tuple[FieldSpec, ...] = (
    FieldSpec("company_name", "Nombre de la empresa", required=True, min_length=2,
              placeholder="Mi Empresa S.A. de C.V"),
    FieldSpec("location", "Ubicación", required=True, min_length=2,
              placeholder="Ciudad, Estado, Municipio, Calle y C.P"),
    FieldSpec("contact_name", "Nombre del colaborador", required=True, min_length=2,
              placeholder="Hernesto Guerrero"),
    FieldSpec("role", "Cargo", required=True, placeholder="Ejemplo: Reclutador"),
    FieldSpec("email", "Correo electrónico", kind=EMAIL, required=True,
              placeholder="correo@empresa.com"),
    FieldSpec("phone", "Teléfono", required=True, placeholder="555-555-5555"),

    FieldSpec("has_companion", "¿Llevarás acompañante?", kind=TRI_STATE, required=True),
    FieldSpec("companion_name", "Nombre del acompañante", required=True, min_length=2,
              placeholder="Nombre del acompañante", gate="has_companion"),
    FieldSpec("companion_email", "Correo del acompañante", kind=EMAIL, required=True,
              placeholder="correo@ejemplo.com", gate="has_companion"),
    FieldSpec("companion_phone", "Teléfono del acompañante",
              placeholder="555-555-5555", gate="has_companion"),

    FieldSpec("has_extra_attendees", "¿Llevarás personas extras?", kind=TRI_STATE,
              required=True),
    FieldSpec("extra_attendee_count", "¿Cuántas personas adicionales asistirán?",
              kind=COUNT, required=True, placeholder="0", gate="has_extra_attendees"),
    FieldSpec("extra_attendee_names", "Nombres de las personas extras", kind=NAMES,
              required=True, min_length=NAME_MIN_LENGTH, gate="has_extra_attendees"),

    FieldSpec("vacancy_level", "Nivel de vacante", required=True,
              placeholder="Ejemplo: Practicas(estudiantes) o Tiempo Completo(egresado)"),
    FieldSpec("desired_tracks", "Carreras buscadas", kind=TRACKS, required=True,
              placeholder="Selecciona carreras"),

    FieldSpec("wants_stand", "¿Requiere stand?", kind=TRI_STATE, required=True),
    FieldSpec("stand_details", "Detalles del stand", required=True,
              placeholder="Medidas, conexión eléctrica, mobiliario", gate="wants_stand"),

    FieldSpec("joins_job_board", "¿Está inscrito en la bolsa?", kind=TRI_STATE,
              required=True),

    FieldSpec("brings_items", "¿Trae artículos promocionales?", kind=TRI_STATE,
              required=True),
    FieldSpec("item_description", "¿Qué artículos?", required=True,
              placeholder="Describe los artículos", gate="brings_items"),

    FieldSpec("logo_url", "URL del logo", placeholder="https://..."),
    FieldSpec("description", "Descripción de la empresa", placeholder="Breve descripción"),
    FieldSpec("data_use_consent", "¿Autoriza el uso de sus datos?", kind=TRI_STATE,
              required=True),
)

FIELDS_BY_NAME: Dict[str, FieldSpec] = {spec.name: spec for spec in FORM_FIELDS}


def get_field(name: str) -> FieldSpec:
    """
    Look up a field spec by name.

    Raises:
        KeyError: If the field is not part of the form
    """
    return FIELDS_BY_NAME[base_field_name(name)]


def base_field_name(name: str) -> str:
    """Map an attendee slot key ("extra_attendee_names.2") to its field name."""
    if name.startswith(ATTENDEE_SLOT_PREFIX):
        return "extra_attendee_names"
    return name


def slot_key(index: int) -> str:
    """Error/descriptor key of the attendee slot at a 0-based index."""
    return f"{ATTENDEE_SLOT_PREFIX}{index}"


def slot_index(key: str) -> Optional[int]:
    """Return the 0-based index encoded in a slot key, or None."""
    if not key.startswith(ATTENDEE_SLOT_PREFIX):
        return None
    suffix = key[len(ATTENDEE_SLOT_PREFIX):]
    return int(suffix) if suffix.isdigit() else None
