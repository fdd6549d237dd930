"""Form progress business logic."""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Protocol
from uuid import uuid4

from form_progress.domain.forms import (
    DEFAULT_FORM_STEP,
    FormRecord,
    FormSnapshot,
    FormState,
)

_logger = logging.getLogger(__name__)


class FormRepository(Protocol):
    """Persistence interface for form progress."""

    def upsert_form(self, record: FormRecord) -> None:
        """Insert the record or fully replace the row with the same user id."""

    def get_form(self, user_id: str) -> FormState | None:
        """Return the stored form state for a user id, if present."""


def _new_user_id() -> str:
    return str(uuid4())


def _utc_now() -> datetime:
    return datetime.now(tz=UTC)


@dataclass
class FormService:
    """Application service for saving and loading form progress."""

    repository: FormRepository
    id_factory: Callable[[], str] = field(default=_new_user_id)
    clock: Callable[[], datetime] = field(default=_utc_now)

    def save_form(self, snapshot: FormSnapshot) -> str:
        """Persist a form snapshot and return the user id it was stored under.

        A missing or empty user id gets a fresh UUID. Any other value is used
        as given.
        """
        issued = not snapshot.user_id
        user_id = self.id_factory() if issued else snapshot.user_id
        self.repository.upsert_form(
            FormRecord(
                user_id=user_id,
                form_step=snapshot.form_step,
                email=snapshot.email,
                therapy_for_whom=snapshot.therapy_for_whom,
                therapist_gender=snapshot.therapist_gender,
                updated_at=self.clock(),
            )
        )
        _logger.info(
            "Form saved: user_id=%s form_step=%s issued=%s",
            user_id,
            snapshot.form_step,
            issued,
        )
        return user_id

    def load_form(self, user_id: str) -> FormState:
        """Return stored progress, or a fresh first-step state when none exists."""
        stored = self.repository.get_form(user_id)
        if stored is not None:
            _logger.info("Form loaded: user_id=%s", user_id)
            return stored
        _logger.info("Form not found, using defaults: user_id=%s", user_id)
        return FormState(
            user_id=user_id,
            form_step=DEFAULT_FORM_STEP,
            email=None,
            therapy_for_whom=None,
            therapist_gender=None,
        )
