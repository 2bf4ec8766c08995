"""Unicode confusables database: ASCII folding and TR39 skeletons."""

from confusables_db.codepoints import is_valid_scalar
from confusables_db.database import Database
from confusables_db.embedded import default
from confusables_db.errors import (
    ConfusablesError,
    DeserializationError,
    DuplicateSourceError,
    EmptyTargetError,
    InvalidSourceCodepointError,
    InvalidTargetCodepointError,
    LoadError,
)
from confusables_db.loader import load, load_file

__all__ = [
    "ConfusablesError",
    "Database",
    "DeserializationError",
    "DuplicateSourceError",
    "EmptyTargetError",
    "InvalidSourceCodepointError",
    "InvalidTargetCodepointError",
    "LoadError",
    "default",
    "is_valid_scalar",
    "load",
    "load_file",
]
