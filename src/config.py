"""Application settings loaded from the environment and an optional .env file."""
import os
from dataclasses import dataclass
from threading import Lock
from typing import Optional

from dotenv import load_dotenv

_ENV_LOADED = False
_ENV_LOCK = Lock()

DEFAULT_CAREERS_FILE = "data/careers.json"
DEFAULT_REGISTRATIONS_FILE = "data/registrations.json"
DEFAULT_SUPABASE_TABLE = "RegistroEmpresas"


@dataclass(frozen=True)
class Settings:
    """Runtime configuration for the registration form."""

    careers_file: str = DEFAULT_CAREERS_FILE
    registrations_file: str = DEFAULT_REGISTRATIONS_FILE
    supabase_url: Optional[str] = None
    supabase_key: Optional[str] = None
    supabase_table: str = DEFAULT_SUPABASE_TABLE
    request_timeout: float = 10.0
    log_level: str = "INFO"
    registrant_type: str = "empresa"

    @property
    def uses_supabase(self) -> bool:
        return bool(self.supabase_url and self.supabase_key)


def _load_env() -> None:
    """Load variables from .env once, without overriding the real environment."""
    global _ENV_LOADED

    if _ENV_LOADED:
        return

    with _ENV_LOCK:
        if _ENV_LOADED:
            return
        load_dotenv(override=False)
        _ENV_LOADED = True


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got: {raw}")


def get_settings() -> Settings:
    """
    Build settings from environment variables.

    Variables:
        CAREERS_FILE, REGISTRATIONS_FILE, SUPABASE_URL, SUPABASE_ANON_KEY,
        SUPABASE_TABLE, REQUEST_TIMEOUT, LOG_LEVEL

    Raises:
        ValueError: If REQUEST_TIMEOUT is not a number
    """
    _load_env()

    return Settings(
        careers_file=os.getenv("CAREERS_FILE", DEFAULT_CAREERS_FILE),
        registrations_file=os.getenv("REGISTRATIONS_FILE", DEFAULT_REGISTRATIONS_FILE),
        supabase_url=os.getenv("SUPABASE_URL") or None,
        supabase_key=os.getenv("SUPABASE_ANON_KEY") or None,
        supabase_table=os.getenv("SUPABASE_TABLE", DEFAULT_SUPABASE_TABLE),
        request_timeout=_float_env("REQUEST_TIMEOUT", 10.0),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )
