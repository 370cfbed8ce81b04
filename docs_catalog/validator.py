# docs_catalog/validator.py
"""
Per-record checks for docs.json.

validate_record() is pure: the only filesystem access goes through the
probe callable, which maps a relative path to its size in bytes (or None
when nothing is there). The CLI passes a real probe; tests pass a dict.

Checks, in transcript order:
- required fields present (JSON truthiness, all collected)
- category in VALID_CATEGORIES
- category/fileName exists
- tags is a non-empty list (warning only)
"""

from __future__ import annotations

import json
import logging
from typing import Any, Callable, Dict, Iterator, List, Optional

from .models import REQUIRED_FIELDS, VALID_CATEGORIES, Finding, RecordResult

log = logging.getLogger("docs_catalog.validator")

Probe = Callable[[str], Optional[int]]


class PathEscapesRoot(ValueError):
    """Raised by a guarded probe when a record path resolves outside the root."""


# --- Helpers -----------------------------------------------------------------

def is_missing(value: Any) -> bool:
    """
    JSON-falsy check: absent, null, false, 0, NaN or "".

    Empty lists/objects count as present, unlike Python's bool().
    """
    if value is None or value is False:
        return True
    if isinstance(value, str):
        return value == ""
    if isinstance(value, (int, float)):
        return value == 0 or value != value
    return False


def display(value: Any) -> str:
    if isinstance(value, str):
        return value
    if value is None:
        return ""
    if isinstance(value, (bool, list, dict)):
        return json.dumps(value, ensure_ascii=False)
    return str(value)


def record_path(record: Dict[str, Any]) -> str:
    """category/fileName exactly as given; missing parts render empty."""
    category = record.get("category")
    file_name = record.get("fileName")
    left = "" if is_missing(category) else display(category)
    right = "" if is_missing(file_name) else display(file_name)
    return f"{left}/{right}"


# --- Checks ------------------------------------------------------------------

def check_fields(record: Dict[str, Any]) -> List[Finding]:
    out = []
    for name in REQUIRED_FIELDS:
        value = record.get(name)
        if is_missing(value):
            out.append(Finding(check="field", level="error", field=name,
                               message=f"Missing field: {name}"))
        else:
            out.append(Finding(check="field", level="ok", field=name, value=value,
                               message=f"{name}: {display(value)}"))
    return out


def check_category(record: Dict[str, Any]) -> List[Finding]:
    category = record.get("category")
    if isinstance(category, str) and category in VALID_CATEGORIES:
        return []
    return [Finding(check="category", level="error", field="category", value=category,
                    message=f"Invalid category: {display(category)}")]


def check_file(record: Dict[str, Any], probe: Probe) -> Finding:
    path = record_path(record)
    if is_missing(record.get("category")) or is_missing(record.get("fileName")):
        return Finding(check="file", level="error", path=path, message=f"File not found: {path}")
    try:
        size = probe(path)
    except PathEscapesRoot:
        return Finding(check="file", level="error", path=path,
                       message=f"Path escapes catalog root: {path}")
    if size is None:
        return Finding(check="file", level="error", path=path, message=f"File not found: {path}")
    return Finding(check="file", level="ok", path=path, size_bytes=size,
                   message=f"File exists: {path} ({size} bytes)")


def check_tags(record: Dict[str, Any]) -> Finding:
    tags = record.get("tags")
    if not isinstance(tags, list) or not tags:
        return Finding(check="tags", level="warning", field="tags", value=tags,
                       message="Warning: No tags found")
    return Finding(check="tags", level="ok", field="tags", value=tags,
                   message=f"Tags: {', '.join(display(t) for t in tags)}")


def validate_record(record: Dict[str, Any], probe: Probe) -> List[Finding]:
    """All findings for one record, in transcript order. Never short-circuits."""
    findings = check_fields(record)
    findings.extend(check_category(record))
    findings.append(check_file(record, probe))
    findings.append(check_tags(record))
    return findings


def iter_results(records: List[Dict[str, Any]], probe: Probe) -> Iterator[RecordResult]:
    """One RecordResult per record, yielded as soon as it is checked."""
    for i, rec in enumerate(records, start=1):
        findings = validate_record(rec, probe)
        result = RecordResult(index=i, title=rec.get("title"), findings=findings)
        if result.failed:
            log.debug("record %d failed %d check(s)", i, len(result.errors))
        yield result
