from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field


class ApiInfo(BaseModel):
    api: str
    version: str


class Entry(BaseModel):
    name: str
    url: str
    children: Optional[list[Entry]] = None


class Listing(BaseModel):
    path: str
    url: str
    entries: list[Entry] = Field(default_factory=list)


class MessageResponse(BaseModel):
    message: str


class RenameResponse(BaseModel):
    url: str


class ErrorResponse(BaseModel):
    error: str


Entry.model_rebuild()
