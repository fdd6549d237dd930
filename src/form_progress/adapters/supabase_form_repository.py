"""Supabase repository for form progress."""

from dataclasses import dataclass

import httpx
from postgrest.exceptions import APIError
from supabase import Client

from form_progress.domain.forms import FormRecord, FormState
from form_progress.errors import IoError, StorageError
from form_progress.services.forms import FormRepository

_COLUMNS = "user_id, form_step, email, therapy_for_whom, therapist_gender"


@dataclass
class SupabaseFormRepository(FormRepository):
    """Supabase implementation for form progress persistence."""

    client: Client
    table: str = "form_data"

    def upsert_form(self, record: FormRecord) -> None:
        """Insert the record or replace every column of the existing row."""
        payload = {
            "user_id": record.user_id,
            "form_step": record.form_step,
            "email": record.email,
            "therapy_for_whom": record.therapy_for_whom,
            "therapist_gender": record.therapist_gender,
            "updated_at": record.updated_at.isoformat(),
        }
        try:
            self.client.table(self.table).upsert(
                payload, on_conflict="user_id"
            ).execute()
        except (APIError, httpx.HTTPError) as exc:
            raise StorageError("Failed to save form progress", cause=exc) from exc
        except OSError as exc:
            raise IoError("Failed to save form progress", cause=exc) from exc

    def get_form(self, user_id: str) -> FormState | None:
        """Return the stored form state for a user id, if present."""
        try:
            response = (
                self.client.table(self.table)
                .select(_COLUMNS)
                .eq("user_id", user_id)
                .limit(1)
                .execute()
            )
        except (APIError, httpx.HTTPError) as exc:
            raise StorageError("Failed to load form progress", cause=exc) from exc
        except OSError as exc:
            raise IoError("Failed to load form progress", cause=exc) from exc
        if not response.data:
            return None
        row = response.data[0]
        return FormState(
            user_id=row["user_id"],
            form_step=row.get("form_step"),
            email=row.get("email"),
            therapy_for_whom=row.get("therapy_for_whom"),
            therapist_gender=row.get("therapist_gender"),
        )
