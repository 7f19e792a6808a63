"""Registration record data model."""
from dataclasses import dataclass, field, fields, replace
from typing import Any, Dict, List

from src.models.track_selection import TrackSelection
from src.models.tri_state import TriState


@dataclass
class RegistrationRecord:
    """One company's in-progress registration, edited field by field."""

    # Company
    company_name: str = ""
    location: str = ""

    # Representative
    contact_name: str = ""
    role: str = ""
    email: str = ""
    phone: str = ""

    # Companion
    has_companion: TriState = TriState.UNSET
    companion_name: str = ""
    companion_email: str = ""
    companion_phone: str = ""

    # Extra attendees
    has_extra_attendees: TriState = TriState.UNSET
    extra_attendee_count: int = 0
    extra_attendee_names: List[str] = field(default_factory=list)

    vacancy_level: str = ""
    desired_tracks: TrackSelection = field(default_factory=TrackSelection)

    wants_stand: TriState = TriState.UNSET
    stand_details: str = ""

    joins_job_board: TriState = TriState.UNSET

    brings_items: TriState = TriState.UNSET
    item_description: str = ""

    logo_url: str = ""
    description: str = ""
    data_use_consent: TriState = TriState.UNSET

    def copy(self) -> "RegistrationRecord":
        """Return an independent snapshot of this record."""
        return replace(
            self,
            extra_attendee_names=list(self.extra_attendee_names),
            desired_tracks=self.desired_tracks.copy(),
        )

    def snapshot(self) -> Dict[str, Any]:
        """Return field values as a plain dict (tracks as a list)."""
        values = {}
        for record_field in fields(self):
            value = getattr(self, record_field.name)
            if isinstance(value, TrackSelection):
                value = value.as_list()
            elif isinstance(value, list):
                value = list(value)
            values[record_field.name] = value
        return values

    @classmethod
    def field_names(cls) -> List[str]:
        return [record_field.name for record_field in fields(cls)]
