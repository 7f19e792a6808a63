"""Shared fixtures for registration form tests."""
import threading

import pytest

from src.models.track import Track, TrackCatalog
from src.services.form_service import RegistrationForm
from src.utils.exceptions import PersistenceError


class RecordingStore:
    """In-memory store that records every insert."""

    def __init__(self, fail: bool = False):
        self.fail = fail
        self.calls = []
        self._lock = threading.Lock()

    def insert_registration(self, payload):
        with self._lock:
            self.calls.append(payload)
        if self.fail:
            raise PersistenceError("connection refused")


class RecordingNotifier:
    """Collects notifications instead of showing them."""

    def __init__(self):
        self.successes = []
        self.failures = []

    def notify_success(self, message):
        self.successes.append(message)

    def notify_failure(self, message):
        self.failures.append(message)


@pytest.fixture
def catalog():
    """Small reference table of careers."""
    return TrackCatalog([
        Track(id="ing-civil", name="Ingeniería Civil"),
        Track(id="ing-industrial", name="Ingeniería Industrial"),
        Track(id="lic-mercadotecnia", name="Licenciatura en Mercadotecnia"),
        Track(id="lic-derecho", name="Licenciatura en Derecho"),
    ])


@pytest.fixture
def store():
    return RecordingStore()


@pytest.fixture
def failing_store():
    return RecordingStore(fail=True)


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def form(catalog, store, notifier):
    """Empty registration form wired to recording collaborators."""
    return RegistrationForm(catalog=catalog, store=store, notifier=notifier)


def fill_valid(form):
    """Fill every required field with valid data; all optional groups answered NO."""
    form.set_field("company_name", "Constructora del Norte")
    form.set_field("location", "Monterrey, Nuevo León")
    form.set_field("contact_name", "Ana López")
    form.set_field("role", "Reclutadora")
    form.set_field("email", "ana@constructora.mx")
    form.set_field("phone", "818-555-1234")
    form.set_field("has_companion", "NO")
    form.set_field("has_extra_attendees", "NO")
    form.set_field("vacancy_level", "Prácticas")
    form.add_track("ing-civil")
    form.add_track("lic-mercadotecnia")
    form.set_field("wants_stand", "NO")
    form.set_field("joins_job_board", "SI")
    form.set_field("brings_items", "NO")
    form.set_field("data_use_consent", "SI")
    return form


@pytest.fixture
def filled_form(form):
    """Registration form with a complete, valid record."""
    return fill_valid(form)
