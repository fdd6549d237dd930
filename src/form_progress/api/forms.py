"""Form progress API endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Request

from form_progress.api.form_models import (
    LoadFormRequest,
    LoadFormResponse,
    SaveFormRequest,
    SaveFormResponse,
)
from form_progress.domain.forms import FormSnapshot

if TYPE_CHECKING:
    from form_progress.containers import AppContainer

router = APIRouter(prefix="/api", tags=["forms"])


@router.post("/save-form")
def save_form(payload: SaveFormRequest, request: Request) -> SaveFormResponse:
    """Store partial form progress and return its user id."""
    container: AppContainer = request.app.state.container
    user_id = container.form_service.save_form(
        FormSnapshot(
            user_id=payload.user_id,
            form_step=payload.form_step,
            email=payload.email,
            therapy_for_whom=payload.therapy_for_whom,
            therapist_gender=payload.therapist_gender,
        )
    )
    return SaveFormResponse(user_id=user_id)


@router.post("/load-form")
def load_form(payload: LoadFormRequest, request: Request) -> LoadFormResponse:
    """Return saved form progress for a user id."""
    container: AppContainer = request.app.state.container
    state = container.form_service.load_form(payload.user_id)
    return LoadFormResponse(
        user_id=state.user_id,
        form_step=state.form_step,
        email=state.email,
        therapy_for_whom=state.therapy_for_whom,
        therapist_gender=state.therapist_gender,
    )
