"""Pydantic models for form progress payloads."""

from pydantic import BaseModel, Field

INT4_MIN = -(2**31)
INT4_MAX = 2**31 - 1


class SaveFormRequest(BaseModel):
    """Partial form progress sent by the client."""

    user_id: str | None = None
    form_step: int = Field(ge=INT4_MIN, le=INT4_MAX)
    email: str
    therapy_for_whom: str
    therapist_gender: str


class SaveFormResponse(BaseModel):
    """Identifier the progress was stored under."""

    user_id: str


class LoadFormRequest(BaseModel):
    """Identifier of the progress to load."""

    user_id: str


class LoadFormResponse(BaseModel):
    """Stored progress, or the default first-step state."""

    user_id: str | None = None
    form_step: int | None = None
    email: str | None = None
    therapy_for_whom: str | None = None
    therapist_gender: str | None = None
