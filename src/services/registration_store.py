"""Persistence collaborators that store a finished registration."""
import logging
from typing import Any, Dict, Protocol

import requests

from src.config import Settings
from src.services.storage_service import append_json_record
from src.utils.exceptions import FileWriteError, PersistenceError

logger = logging.getLogger(__name__)


class RegistrationStore(Protocol):
    """Inserts one registration row; raises PersistenceError on failure."""

    def insert_registration(self, payload: Dict[str, Any]) -> None:
        ...


class JsonRegistrationStore:
    """Appends registrations to a local JSON file under a file lock."""

    def __init__(self, file_path: str):
        self.file_path = file_path

    def insert_registration(self, payload: Dict[str, Any]) -> None:
        """
        Append one registration.

        Raises:
            PersistenceError: If the file cannot be locked, read or written
        """
        try:
            total = append_json_record(self.file_path, "registrations", payload)
        except (OSError, FileWriteError, TimeoutError, ValueError) as e:
            # json.JSONDecodeError is a ValueError
            logger.error(f"File operation failed during registration insert: {e}")
            raise PersistenceError(f"Could not store registration: {e}") from e

        logger.info(f"Stored registration #{total} in {self.file_path}")


class SupabaseRegistrationStore:
    """Inserts registrations through the Supabase PostgREST endpoint."""

    def __init__(self, url: str, api_key: str, table: str, timeout: float = 10.0):
        self.endpoint = f"{url.rstrip('/')}/rest/v1/{table}"
        self.api_key = api_key
        self.timeout = timeout

    def _headers(self) -> Dict[str, str]:
        return {
            "apikey": self.api_key,
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
            "Prefer": "return=minimal",
        }

    def insert_registration(self, payload: Dict[str, Any]) -> None:
        """
        Insert one row with a single POST; no retries.

        Raises:
            PersistenceError: On transport errors or a non-2xx response
        """
        try:
            response = requests.post(
                self.endpoint,
                headers=self._headers(),
                json=[payload],
                timeout=self.timeout,
            )
        except requests.exceptions.RequestException as e:
            logger.error(f"Registration insert request failed: {e}")
            raise PersistenceError(f"Could not reach data store: {e}") from e

        if not 200 <= response.status_code < 300:
            logger.error(
                f"Registration insert rejected ({response.status_code}): {response.text[:300]}"
            )
            raise PersistenceError(f"Data store rejected registration ({response.status_code})")


def build_store(settings: Settings) -> RegistrationStore:
    """Pick Supabase when credentials are configured, the JSON file otherwise."""
    if settings.uses_supabase:
        return SupabaseRegistrationStore(
            url=settings.supabase_url,
            api_key=settings.supabase_key,
            table=settings.supabase_table,
            timeout=settings.request_timeout,
        )
    return JsonRegistrationStore(settings.registrations_file)
