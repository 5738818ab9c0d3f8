"""
json_exporter.py
Structured JSON exporter for ParseResult objects.

This exporter:
- Converts dataclasses and objects to dictionaries (NOT strings)
- Preserves full structure (canonical tree and friendly entities)
- Is deterministic apart from the ``meta.parsed_at`` timestamp
"""

from __future__ import annotations

import json
from dataclasses import asdict, is_dataclass
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Any, Dict

from gedcom_lossless.logging import get_logger

log = get_logger(__name__)


def to_json_compatible(obj: Any) -> Any:
    """
    Recursively convert objects into JSON-compatible structures.

    Rules:
    - Primitives pass through
    - datetime -> ISO-8601 string, Enum -> its value
    - dataclasses -> dict (recursively)
    - dict -> dict (recursively)
    - list / tuple / set -> list (recursively)
    - Unknown objects -> __dict__ if present, else str(obj)
    """
    if obj is None or isinstance(obj, (bool, int, float, str)):
        return obj

    if isinstance(obj, datetime):
        return obj.isoformat()

    if isinstance(obj, Enum):
        return obj.value

    if is_dataclass(obj) and not isinstance(obj, type):
        return {k: to_json_compatible(v) for k, v in asdict(obj).items()}

    if isinstance(obj, dict):
        return {str(k): to_json_compatible(v) for k, v in obj.items()}

    if isinstance(obj, (list, tuple, set)):
        return [to_json_compatible(v) for v in obj]

    if hasattr(obj, "__dict__"):
        return {k: to_json_compatible(v) for k, v in obj.__dict__.items()}

    return str(obj)


def result_to_dict(result: Any) -> Dict[str, Any]:
    """
    Convert a ParseResult into the documented output shape:

        {canonical: {header, records, trailer},
         friendly: {individuals, families, sources, media, repositories, notes},
         meta: {source_format, parsed_at, line_count, record_count},
         diagnostics: [...]}
    """
    canonical = result.canonical
    diagnostics = getattr(result, "diagnostics", None)

    return {
        "canonical": {
            "header": to_json_compatible(canonical.header),
            "records": {
                ptr: to_json_compatible(node) for ptr, node in canonical.records.items()
            },
            "trailer": canonical.trailer,
        },
        "friendly": to_json_compatible(result.friendly),
        "meta": to_json_compatible(result.meta),
        "diagnostics": diagnostics.to_list() if diagnostics is not None else [],
    }


def serialize_result_to_json_string(result: Any, indent: int | None = 2) -> str:
    return json.dumps(
        result_to_dict(result),
        indent=indent,
        ensure_ascii=False,
    )


def export_result_json(result: Any, output_path: str | Path, indent: int | None = 2) -> None:
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    counts = result.friendly.counts()
    log.info(
        "Exporting JSON to: %s (INDI=%d, FAM=%d, SOUR=%d, REPO=%d, OBJE=%d, NOTE=%d)",
        output_path,
        counts["individuals"],
        counts["families"],
        counts["sources"],
        counts["repositories"],
        counts["media"],
        counts["notes"],
    )

    json_str = serialize_result_to_json_string(result, indent=indent)

    with output_path.open("w", encoding="utf-8") as f:
        f.write(json_str)

    log.info("JSON export complete. size=%d bytes", output_path.stat().st_size)
