"""Persistence shape of a submitted registration."""
from typing import Any, Dict, List, Literal

from pydantic import BaseModel, ConfigDict, EmailStr, Field, model_validator

from src.models.registration import RegistrationRecord
from src.models.track import TrackCatalog
from src.utils.exceptions import UnknownTrackError, ValidationError

DEFAULT_REGISTRANT_TYPE = "empresa"


class RegistrationPayload(BaseModel):
    """Row inserted into the registrations table (column names as aliases)."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    company_name: str = Field(alias="nombreEmpresa", min_length=2)
    location: str = Field(alias="ubicacion", min_length=2)
    contact_name: str = Field(alias="nombreColaborador", min_length=2)
    role: str = Field(alias="cargo")
    email: EmailStr = Field(alias="correo")
    phone: str = Field(alias="telefono")

    has_companion: bool = Field(alias="llevaAcompanante")
    companion_name: str = Field(default="", alias="nombreAcompañante")
    companion_email: str = Field(default="", alias="correo2")
    companion_phone: str = Field(default="", alias="telefono2")

    has_extra_attendees: bool = Field(alias="llevaPersonasExtras")
    extra_attendee_count: int = Field(default=0, ge=0, alias="cantidadPersonasExtras")
    extra_attendee_names: List[str] = Field(default_factory=list, alias="nombresPersonasExtras")

    vacancy_level: str = Field(alias="nivelVacante", min_length=1)
    desired_tracks: str = Field(alias="carreraBuscada", min_length=1)

    wants_stand: bool = Field(alias="requiereStand")
    stand_details: str = Field(default="", alias="stand")
    joins_job_board: bool = Field(alias="participaBolsa")
    brings_items: bool = Field(alias="traeArticulos")
    item_description: str = Field(default="", alias="articulo")

    logo_url: str = Field(default="", alias="logo")
    description: str = Field(default="", alias="descripcion")
    data_use_consent: Literal["SI", "NO"] = Field(alias="autorizacion")

    registrant_type: str = Field(default=DEFAULT_REGISTRANT_TYPE, alias="tipoUsuario")

    @model_validator(mode="after")
    def _check_attendees(self) -> "RegistrationPayload":
        if len(self.extra_attendee_names) != self.extra_attendee_count:
            raise ValueError("Attendee names must match attendee count")
        if not self.has_extra_attendees and self.extra_attendee_count:
            raise ValueError("Attendee count requires extra attendees")
        return self

    @classmethod
    def from_record(
        cls,
        record: RegistrationRecord,
        catalog: TrackCatalog,
        registrant_type: str = DEFAULT_REGISTRANT_TYPE
    ) -> "RegistrationPayload":
        """
        Build the persistence shape from a validated record.

        Args:
            record: Record that passed validation
            catalog: Reference table used to re-check track IDs
            registrant_type: Discriminator stored with the row

        Returns:
            RegistrationPayload with inactive groups blanked

        Raises:
            UnknownTrackError: If a selected track is not in the table
            ValidationError: If the record cannot be represented
        """
        for track_id in record.desired_tracks:
            if track_id not in catalog:
                raise UnknownTrackError(f"Unknown track: {track_id}")

        companion = record.has_companion.is_yes
        attendees = record.has_extra_attendees.is_yes
        stand = record.wants_stand.is_yes
        items = record.brings_items.is_yes

        try:
            return cls(
                company_name=record.company_name.strip(),
                location=record.location.strip(),
                contact_name=record.contact_name.strip(),
                role=record.role.strip(),
                email=record.email.strip(),
                phone=record.phone.strip(),
                has_companion=record.has_companion.to_bool(),
                companion_name=record.companion_name.strip() if companion else "",
                companion_email=record.companion_email.strip() if companion else "",
                companion_phone=record.companion_phone.strip() if companion else "",
                has_extra_attendees=record.has_extra_attendees.to_bool(),
                extra_attendee_count=record.extra_attendee_count if attendees else 0,
                extra_attendee_names=(
                    [name.strip() for name in record.extra_attendee_names] if attendees else []
                ),
                vacancy_level=record.vacancy_level.strip(),
                desired_tracks=record.desired_tracks.to_storage(),
                wants_stand=record.wants_stand.to_bool(),
                stand_details=record.stand_details.strip() if stand else "",
                joins_job_board=record.joins_job_board.to_bool(),
                brings_items=record.brings_items.to_bool(),
                item_description=record.item_description.strip() if items else "",
                logo_url=record.logo_url.strip(),
                description=record.description.strip(),
                data_use_consent=record.data_use_consent.to_choice(),
                registrant_type=registrant_type,
            )
        except ValueError as e:
            # pydantic.ValidationError subclasses ValueError
            raise ValidationError(f"Registration cannot be stored: {e}") from e

    def to_row(self) -> Dict[str, Any]:
        """Dump using the storage column names."""
        return self.model_dump(by_alias=True, mode="json")
