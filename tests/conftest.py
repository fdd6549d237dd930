"""Shared test fixtures."""

import threading
from dataclasses import dataclass, field

import pytest

from form_progress.config import Settings
from form_progress.containers import AppContainer
from form_progress.domain.forms import FormRecord, FormState
from form_progress.errors import StorageError
from form_progress.services.forms import FormRepository, FormService


@dataclass
class InMemoryFormRepository(FormRepository):
    """In-memory form repository for tests."""

    records: dict[str, FormRecord] = field(default_factory=dict)
    upserts: list[FormRecord] = field(default_factory=list)
    _lock: threading.Lock = field(default_factory=threading.Lock)

    def upsert_form(self, record: FormRecord) -> None:
        with self._lock:
            self.records[record.user_id] = record
            self.upserts.append(record)

    def get_form(self, user_id: str) -> FormState | None:
        with self._lock:
            record = self.records.get(user_id)
        if record is None:
            return None
        return FormState(
            user_id=record.user_id,
            form_step=record.form_step,
            email=record.email,
            therapy_for_whom=record.therapy_for_whom,
            therapist_gender=record.therapist_gender,
        )


@dataclass
class FailingFormRepository(FormRepository):
    """Repository whose every call fails like an unreachable database."""

    def upsert_form(self, record: FormRecord) -> None:
        raise StorageError("database unavailable", cause=ConnectionError("refused"))

    def get_form(self, user_id: str) -> FormState | None:
        raise StorageError("database unavailable", cause=ConnectionError("refused"))


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key="header.payload.signature",
    )


@pytest.fixture
def form_repository() -> InMemoryFormRepository:
    return InMemoryFormRepository()


@pytest.fixture
def container(
    settings: Settings, form_repository: InMemoryFormRepository
) -> AppContainer:
    return AppContainer(
        settings=settings,
        form_service=FormService(form_repository),
    )
