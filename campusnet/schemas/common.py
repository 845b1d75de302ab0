"""Response envelope shared by every endpoint."""

from typing import Generic, TypeVar

from pydantic import BaseModel


DataT = TypeVar("DataT")


class Envelope(BaseModel, Generic[DataT]):
    """Successful response: ``{"ok": true, "data": ...}``."""
    ok: bool = True
    data: DataT


class ErrorEnvelope(BaseModel):
    """Failed response: ``{"ok": false, "error": "..."}``."""
    ok: bool = False
    error: str
