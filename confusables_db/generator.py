"""Convert Unicode's ``confusables.txt`` into the persisted JSON record set.

Each data line looks like::

    0430 ;	0061 ;	MA	# ( а → a ) CYRILLIC SMALL LETTER A → LATIN SMALL LETTER A

Leading ``#`` lines may carry ``Version:`` and ``Date:`` headers.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from typing import Iterable, List, Optional, Set, Tuple

import requests

from confusables_db.codepoints import format_codepoint, is_valid_scalar
from confusables_db.config import get_settings
from confusables_db.errors import GeneratorError, ParseError
from confusables_db.schemas import DataFile, MappingRecord

log = logging.getLogger(__name__)

_NAME_ARROW = "→"


def normalize_version(version: str) -> str:
    # 16.0 -> 16.0.0; the versioned directory on unicode.org uses three parts.
    if version != "latest" and version.count(".") == 1:
        return version + ".0"
    return version


def resolve_source_url(version: str) -> str:
    settings = get_settings()
    if version == "latest":
        return settings.SOURCE_URL_LATEST
    return settings.SOURCE_URL_VERSIONED.format(version=normalize_version(version))


def _parse_hex(text: str, what: str, line_no: int) -> int:
    try:
        return int(text, 16)
    except ValueError:
        raise ParseError(f"invalid {what} hex {text!r}", line_no=line_no) from None


def _parse_names(comment: str) -> Tuple[str, str]:
    # Best effort: "( а → a ) CYRILLIC SMALL LETTER A → LATIN SMALL LETTER A"
    names = comment
    idx = comment.rfind(")")
    if idx != -1:
        names = comment[idx + 1 :]
    parts = names.split(_NAME_ARROW)
    if len(parts) != 2:
        return "", ""
    return parts[0].strip(), parts[1].strip()


def parse_confusables(
    lines: Iterable[str],
    source_url: str,
    version: str = "latest",
    *,
    generated_at: Optional[datetime] = None,
) -> DataFile:
    unicode_version = version
    source_date = ""
    mappings: List[MappingRecord] = []
    seen: Set[int] = set()

    for line_no, raw_line in enumerate(lines, start=1):
        line = raw_line.rstrip("\r\n")
        if line_no == 1:
            line = line.lstrip("\ufeff")

        if line.startswith("#"):
            if "Version:" in line and unicode_version == "latest":
                unicode_version = line.split(":", 1)[1].strip()
            if "Date:" in line and not source_date:
                source_date = line.split(":", 1)[1].strip()
            continue

        if not line.strip():
            continue

        if "#" not in line:
            raise ParseError(f"malformed line (missing comment): {line!r}", line_no=line_no)
        data_part, comment = line.split("#", 2)[:2]

        fields = data_part.split(";")
        if len(fields) < 2:
            raise ParseError(f"malformed line (missing fields): {line!r}", line_no=line_no)

        source = _parse_hex(fields[0].strip(), "source", line_no)
        if not is_valid_scalar(source):
            raise ParseError(
                f"invalid unicode source codepoint: {format_codepoint(source)}",
                line_no=line_no,
            )
        if source in seen:
            raise ParseError(f"duplicate source: {format_codepoint(source)}", line_no=line_no)

        targets: List[int] = []
        for hex_text in fields[1].split():
            target = _parse_hex(hex_text, "target", line_no)
            if not is_valid_scalar(target):
                raise ParseError(
                    f"invalid unicode target codepoint: {format_codepoint(target)}",
                    line_no=line_no,
                )
            targets.append(target)
        if not targets:
            raise ParseError(
                f"empty target for source {format_codepoint(source)}", line_no=line_no
            )

        source_name, target_name = _parse_names(comment)
        mappings.append(
            MappingRecord(
                source=source,
                target=targets,
                source_name=source_name,
                target_name=target_name,
            )
        )
        seen.add(source)

    return DataFile(
        unicode_version=unicode_version,
        generated_at=generated_at or datetime.now(timezone.utc),
        source_url=source_url,
        source_date=source_date,
        total_mappings=len(mappings),
        mappings=mappings,
    )


def fetch_confusables(version: str = "latest", *, timeout: Optional[float] = None) -> Tuple[str, str]:
    """Download confusables.txt; returns ``(text, url)``."""
    url = resolve_source_url(version)
    if timeout is None:
        timeout = get_settings().HTTP_TIMEOUT_S
    log.info("downloading %s", url)
    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()
    except requests.RequestException as exc:
        raise GeneratorError(f"failed to download confusables: {exc}") from exc
    response.encoding = "utf-8"
    return response.text, url


def dump_data_file(data_file: DataFile) -> str:
    payload = data_file.model_dump(mode="json")
    if data_file.generated_at is not None:
        payload["generated_at"] = (
            data_file.generated_at.astimezone(timezone.utc).isoformat().replace("+00:00", "Z")
        )
    return json.dumps(payload, indent=2, ensure_ascii=False)


__all__ = [
    "dump_data_file",
    "fetch_confusables",
    "normalize_version",
    "parse_confusables",
    "resolve_source_url",
]
