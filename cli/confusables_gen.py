from __future__ import annotations

import argparse
import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import List, Optional

from confusables_db.errors import ConfusablesError
from confusables_db.generator import (
    dump_data_file,
    fetch_confusables,
    normalize_version,
    parse_confusables,
)
from confusables_db.loader import load


def _parse_generated_at(value: str) -> datetime:
    # RFC 3339; fromisoformat only learned the trailing "Z" in 3.11.
    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    ts = datetime.fromisoformat(text)
    if ts.tzinfo is None:
        raise ValueError(f"generated-at needs a UTC offset: {value!r}")
    return ts


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="confusables-gen",
        description="Generate the confusables JSON record set from unicode.org data.",
    )
    parser.add_argument("--version", default="latest", help="Unicode version to download")
    parser.add_argument("--input", help="Path to a local confusables.txt (offline mode)")
    parser.add_argument("--output", default="data/confusables.json", help="Output JSON path")
    parser.add_argument("--generated-at", help="Override generated_at timestamp (RFC 3339)")
    return parser


def run(argv: Optional[List[str]] = None) -> int:
    args = _build_parser().parse_args(argv)

    generated_at = None
    if args.generated_at:
        try:
            generated_at = _parse_generated_at(args.generated_at)
        except ValueError as exc:
            print(f"error: failed to parse generated-at: {exc}", file=sys.stderr)
            return 1

    version = args.version
    try:
        if args.input:
            print(f"Reading from local file: {args.input}")
            text = Path(args.input).read_text(encoding="utf-8")
            source_url = f"local file: {args.input}"
        else:
            version = normalize_version(version)
            text, source_url = fetch_confusables(version)
            print(f"Downloaded: {source_url}")

        data_file = parse_confusables(
            text.splitlines(), source_url, version, generated_at=generated_at
        )
        payload = dump_data_file(data_file)
        # Refuse to write anything the loader would reject.
        load(payload)
    except (ConfusablesError, OSError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    output = Path(args.output)
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(payload, encoding="utf-8")

    print(f"Generated {output}")
    print(f"Total mappings: {data_file.total_mappings}")
    print(f"Unicode version: {data_file.unicode_version}")
    return 0


def main() -> int:
    logging.basicConfig(level=logging.INFO)
    return run()


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
