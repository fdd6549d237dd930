"""Dependency container wiring for the application."""

from dataclasses import dataclass

from pydantic import ValidationError
from supabase import Client, create_client

from form_progress.adapters.supabase_form_repository import SupabaseFormRepository
from form_progress.config import Settings
from form_progress.errors import ConfigurationParseError, ConfigurationReadError
from form_progress.services.forms import FormService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    form_service: FormService


def load_settings() -> Settings:
    """Load settings from the environment, failing loudly when incomplete."""
    try:
        return Settings()
    except ValidationError as exc:
        raise ConfigurationParseError("Invalid configuration", cause=exc) from exc
    except OSError as exc:
        raise ConfigurationReadError("Unable to read configuration", cause=exc) from exc


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or load_settings()
    supabase_client: Client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    form_repository = SupabaseFormRepository(
        supabase_client, table=resolved_settings.form_table
    )
    return AppContainer(
        settings=resolved_settings,
        form_service=FormService(form_repository),
    )
