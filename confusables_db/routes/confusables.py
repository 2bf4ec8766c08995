from __future__ import annotations

import logging
import re
from functools import lru_cache

from fastapi import APIRouter, Depends, HTTPException

from confusables_db.codepoints import format_codepoint, is_valid_scalar
from confusables_db.config import get_settings
from confusables_db.database import Database
from confusables_db.embedded import default
from confusables_db.loader import load_file
from confusables_db.metrics import record_request
from confusables_db.schemas import (
    LookupResponse,
    MetadataResponse,
    PairRequest,
    PairResponse,
    TextRequest,
    TextResponse,
)

router = APIRouter(prefix="/v1/confusables", tags=["confusables"])

log = logging.getLogger(__name__)

_HEX_RE = re.compile(r"[0-9A-Fa-f]{1,8}")


@lru_cache(maxsize=1)
def _configured_database() -> Database:
    path = get_settings().DATA_PATH
    if path:
        log.info("serving confusables data from %s", path)
        return load_file(path)
    return default()


def get_database() -> Database:
    return _configured_database()


def _parse_codepoint(raw: str) -> int:
    text = raw.strip()
    if text[:2].upper() == "U+":
        text = text[2:]
    if not _HEX_RE.fullmatch(text):
        raise HTTPException(status_code=400, detail=f"invalid codepoint: {raw!r}")
    cp = int(text, 16)
    if not is_valid_scalar(cp):
        raise HTTPException(status_code=400, detail=f"invalid codepoint: {raw!r}")
    return cp


@router.post("/to-ascii", response_model=TextResponse)
def to_ascii(body: TextRequest, db: Database = Depends(get_database)) -> TextResponse:
    record_request("to_ascii")
    return TextResponse(result=db.to_ascii(body.text))


@router.post("/skeleton", response_model=TextResponse)
def skeleton(body: TextRequest, db: Database = Depends(get_database)) -> TextResponse:
    record_request("skeleton")
    return TextResponse(result=db.skeleton(body.text))


@router.post("/is-confusable", response_model=PairResponse)
def is_confusable(body: PairRequest, db: Database = Depends(get_database)) -> PairResponse:
    record_request("is_confusable")
    skel_a = db.skeleton(body.a)
    skel_b = db.skeleton(body.b)
    return PairResponse(confusable=skel_a == skel_b, skeleton_a=skel_a, skeleton_b=skel_b)


@router.get("/lookup/{codepoint}", response_model=LookupResponse)
def lookup(codepoint: str, db: Database = Depends(get_database)) -> LookupResponse:
    record_request("lookup")
    cp = _parse_codepoint(codepoint)
    targets = db.lookup(cp)
    if targets is None:
        raise HTTPException(status_code=404, detail=f"no mapping for {format_codepoint(cp)}")
    ascii_cp = db.lookup_ascii(cp)
    return LookupResponse(
        codepoint=format_codepoint(cp),
        target=[format_codepoint(t) for t in targets],
        ascii=chr(ascii_cp) if ascii_cp is not None else None,
    )


@router.get("/metadata", response_model=MetadataResponse)
def metadata(db: Database = Depends(get_database)) -> MetadataResponse:
    return MetadataResponse(
        unicode_version=db.unicode_version,
        source_date=db.source_date,
        source_url=db.source_url,
        generated_at=db.generated_at,
        total_mappings=len(db),
    )
