"""Domain models for saved form progress."""

from dataclasses import dataclass
from datetime import datetime

DEFAULT_FORM_STEP = 1


@dataclass(frozen=True)
class FormRecord:
    """Represents a form progress row stored in the database."""

    user_id: str
    form_step: int
    email: str
    therapy_for_whom: str
    therapist_gender: str
    updated_at: datetime


@dataclass(frozen=True)
class FormSnapshot:
    """Partial form progress submitted by a client."""

    user_id: str | None
    form_step: int
    email: str
    therapy_for_whom: str
    therapist_gender: str


@dataclass(frozen=True)
class FormState:
    """Form progress returned to a client.

    Stored columns are nullable, so everything except ``user_id`` may be
    missing.
    """

    user_id: str
    form_step: int | None
    email: str | None
    therapy_for_whom: str | None
    therapist_gender: str | None
