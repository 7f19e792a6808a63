"""Integration tests for the company registration flow."""
import asyncio
import json
from pathlib import Path

import pytest

from src.services import catalog_service
from src.services.catalog_service import load_catalog
from src.services.form_service import RegistrationForm
from src.services.notification_service import LogNotifier
from src.services.registration_store import JsonRegistrationStore
from src.services.storage_service import load_json

BUNDLED_CATALOG = Path(__file__).resolve().parents[2] / "data" / "careers.json"


@pytest.fixture
def registrations_file(tmp_path):
    return str(tmp_path / "registrations.json")


@pytest.fixture
def live_form(registrations_file):
    """Form wired to the bundled catalog and a JSON file store."""
    catalog_service._clear_cache()
    return RegistrationForm(
        catalog=load_catalog(str(BUNDLED_CATALOG)),
        store=JsonRegistrationStore(registrations_file),
        notifier=LogNotifier(),
    )


def _fill_company(form):
    form.set_field("company_name", "Grupo Industrial Saltillo")
    form.set_field("location", "Saltillo, Coahuila")
    form.set_field("contact_name", "Luis Pérez")
    form.set_field("role", "Gerente de Talento")
    form.set_field("email", "luis.perez@gis.com.mx")
    form.set_field("phone", "844 123 4567")
    form.set_field("vacancy_level", "Tiempo completo (egresado)")
    form.set_field("joins_job_board", "SI")


class TestRegistrationFlow:
    """End-to-end registration through the form and JSON store."""

    def test_full_registration_is_stored(self, live_form, registrations_file):
        _fill_company(live_form)
        live_form.set_field("has_companion", "SI")
        live_form.set_field("companion_name", "Marta Ruiz")
        live_form.set_field("companion_email", "marta@gis.com.mx")
        live_form.set_field("has_extra_attendees", "SI")
        live_form.set_field("extra_attendee_count", 2)
        live_form.set_attendee_name(0, "Ana")
        live_form.set_attendee_name(1, "Jorge")
        live_form.add_track("ing-civil")
        live_form.add_track("lic-mercadotecnia")
        live_form.set_field("wants_stand", "SI")
        live_form.set_field("stand_details", "Stand de 3x2 con contacto eléctrico")
        live_form.set_field("brings_items", "SI")
        live_form.set_field("item_description", "Plumas y libretas")
        live_form.set_field("logo_url", "https://gis.com.mx/logo.png")
        live_form.set_field("data_use_consent", "SI")

        success, _ = asyncio.run(live_form.submit())

        assert success is True
        rows = load_json(registrations_file)["registrations"]
        assert len(rows) == 1
        row = rows[0]
        assert row["nombreEmpresa"] == "Grupo Industrial Saltillo"
        assert row["carreraBuscada"] == "ing-civil,lic-mercadotecnia"
        assert row["tipoUsuario"] == "empresa"
        assert row["nombresPersonasExtras"] == ["Ana", "Jorge"]
        assert row["nombreAcompañante"] == "Marta Ruiz"
        assert row["articulo"] == "Plumas y libretas"
        assert row["autorizacion"] == "SI"

        raw = Path(registrations_file).read_text(encoding="utf-8")
        assert "Pérez" in raw
        assert json.loads(raw) == {"registrations": rows}

    def test_attendee_edits_before_submit(self, live_form, registrations_file):
        _fill_company(live_form)
        live_form.set_field("has_companion", "NO")
        live_form.set_field("has_extra_attendees", "SI")
        live_form.set_field("extra_attendee_count", 3)
        live_form.set_attendee_name(0, "Ana")
        live_form.set_attendee_name(1, "Luis")
        live_form.set_field("extra_attendee_count", 1)
        live_form.add_track("lic-derecho")
        live_form.set_field("wants_stand", "NO")
        live_form.set_field("brings_items", "NO")
        live_form.set_field("data_use_consent", "NO")

        success, _ = asyncio.run(live_form.submit())

        assert success is True
        row = load_json(registrations_file)["registrations"][0]
        assert row["cantidadPersonasExtras"] == 1
        assert row["nombresPersonasExtras"] == ["Ana"]
        assert row["autorizacion"] == "NO"

    def test_invalid_form_writes_nothing(self, live_form, registrations_file):
        _fill_company(live_form)

        success, _ = asyncio.run(live_form.submit())

        assert success is False
        assert not Path(registrations_file).exists()
        assert "desired_tracks" in live_form.errors
        assert "data_use_consent" in live_form.errors

    def test_two_registrations_in_sequence(self, live_form, registrations_file):
        for company in ("Empresa Uno", "Empresa Dos"):
            _fill_company(live_form)
            live_form.set_field("company_name", company)
            live_form.set_field("has_companion", "NO")
            live_form.set_field("has_extra_attendees", "NO")
            live_form.add_track("ing-industrial")
            live_form.set_field("wants_stand", "NO")
            live_form.set_field("brings_items", "NO")
            live_form.set_field("data_use_consent", "SI")
            assert asyncio.run(live_form.submit())[0] is True

        rows = load_json(registrations_file)["registrations"]
        assert [r["nombreEmpresa"] for r in rows] == ["Empresa Uno", "Empresa Dos"]
