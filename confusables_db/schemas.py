from __future__ import annotations

from datetime import datetime
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictInt, field_validator


class AppBaseModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


# --- Persisted record set -------------------------------------------------


class MappingRecord(AppBaseModel):
    """One ``source -> target`` row as written by the generator.

    Only the shape is checked here; codepoint validity, empty targets and
    duplicates are the loader's job so each gets its own error type.
    """

    source: StrictInt
    target: List[StrictInt]
    source_name: str = ""
    target_name: str = ""

    @field_validator("source_name", "target_name", mode="before")
    @classmethod
    def null_name_as_empty(cls, value: Any) -> Any:
        # Names are cosmetic; a null in the file means "unknown".
        return "" if value is None else value


class DataFile(AppBaseModel):
    unicode_version: str = ""
    generated_at: Optional[datetime] = None
    source_url: str = ""
    source_date: str = ""
    total_mappings: Optional[int] = None
    mappings: List[MappingRecord] = Field(default_factory=list)

    @field_validator("unicode_version", "source_url", "source_date", mode="before")
    @classmethod
    def null_text_as_empty(cls, value: Any) -> Any:
        return "" if value is None else value


# --- HTTP bodies ------------------------------------------------------------


class TextRequest(BaseModel):
    text: str


class TextResponse(BaseModel):
    result: str


class PairRequest(BaseModel):
    a: str
    b: str


class PairResponse(BaseModel):
    confusable: bool
    skeleton_a: str
    skeleton_b: str


class LookupResponse(BaseModel):
    codepoint: str
    target: List[str]
    ascii: Optional[str] = None


class MetadataResponse(BaseModel):
    unicode_version: str
    source_date: str
    source_url: str
    generated_at: Optional[datetime] = None
    total_mappings: int


__all__ = [
    "AppBaseModel",
    "DataFile",
    "LookupResponse",
    "MappingRecord",
    "MetadataResponse",
    "PairRequest",
    "PairResponse",
    "TextRequest",
    "TextResponse",
]
