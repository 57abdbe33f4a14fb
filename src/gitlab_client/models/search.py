"""Search models."""

from typing import Optional

from pydantic import BaseModel

from .options import ListOptions


class Blob(BaseModel):
    """Code search hit."""

    basename: Optional[str] = None
    data: Optional[str] = None
    path: Optional[str] = None
    filename: Optional[str] = None
    id: Optional[str] = None
    ref: Optional[str] = None
    startline: Optional[int] = None
    project_id: Optional[int] = None


class SearchOptions(ListOptions):
    """Options shared by every search scope.

    ``scope`` and ``search`` are filled in by ``SearchService``.
    """

    scope: Optional[str] = None
    search: Optional[str] = None
    ref: Optional[str] = None
    state: Optional[str] = None
    confidential: Optional[bool] = None
