"""Validate a serialized record set and build a :class:`Database` from it.

Loading is all-or-nothing: the first bad record aborts the load and no
partially built table ever escapes.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Iterable, Union

from pydantic import ValidationError

from confusables_db.codepoints import is_valid_scalar
from confusables_db.database import Database
from confusables_db.errors import (
    DeserializationError,
    DuplicateSourceError,
    EmptyTargetError,
    InvalidSourceCodepointError,
    InvalidTargetCodepointError,
    LoadError,
)
from confusables_db.metrics import record_load
from confusables_db.schemas import DataFile, MappingRecord
from confusables_db.table import MappingTable, Targets

log = logging.getLogger(__name__)


def build_table(records: Iterable[MappingRecord]) -> MappingTable:
    entries: Dict[int, Targets] = {}
    for index, record in enumerate(records):
        source = record.source
        if not record.target:
            raise EmptyTargetError(source, index=index)
        if not is_valid_scalar(source):
            raise InvalidSourceCodepointError(source, index=index)
        for target in record.target:
            if not is_valid_scalar(target):
                raise InvalidTargetCodepointError(target, source=source, index=index)
        if source in entries:
            raise DuplicateSourceError(source, index=index)
        entries[source] = tuple(record.target)
    return MappingTable(entries)


def _parse(raw: Union[bytes, bytearray, str]) -> DataFile:
    if not isinstance(raw, (bytes, bytearray, str)):
        raise DeserializationError(
            f"expected bytes or str, got {type(raw).__name__}"
        )
    try:
        return DataFile.model_validate_json(raw)
    except ValidationError as exc:
        raise DeserializationError(
            f"failed to deserialize confusables data: {exc.error_count()} error(s): "
            f"{exc.errors()[0]['msg']}"
        ) from exc


def load(raw: Union[bytes, bytearray, str]) -> Database:
    """Build a :class:`Database` from the JSON record set in ``raw``.

    Raises a :class:`~confusables_db.errors.LoadError` subclass on the first
    structural or semantic problem.
    """
    try:
        data = _parse(raw)
        table = build_table(data.mappings)
    except LoadError as exc:
        log.warning("confusables load rejected: %s", exc)
        record_load("error")
        raise

    db = Database(
        table,
        unicode_version=data.unicode_version,
        source_date=data.source_date,
        generated_at=data.generated_at,
        source_url=data.source_url,
    )
    log.info(
        "loaded confusables database: unicode_version=%s mappings=%d",
        db.unicode_version,
        len(db),
    )
    record_load("ok", len(db))
    return db


def load_file(path: Union[str, Path]) -> Database:
    return load(Path(path).read_bytes())


__all__ = ["build_table", "load", "load_file"]
