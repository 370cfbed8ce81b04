# docs_catalog/schema.py
"""
Catalog shape check (Draft 2020-12).

Only the container shape is enforced here: an array of objects. Field
presence, categories and files are per-record findings, not schema errors,
so one bad record never hides the others.
"""

from __future__ import annotations

from typing import Any, Dict, List

from jsonschema import Draft202012Validator

CATALOG_SCHEMA: Dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "title": "docs catalog",
    "type": "array",
    "items": {"type": "object"},
}

Draft202012Validator.check_schema(CATALOG_SCHEMA)
_VALIDATOR = Draft202012Validator(CATALOG_SCHEMA)


def shape_errors(data: Any) -> List[str]:
    """Human-readable shape violations, empty when the catalog is well-formed."""
    out = []
    for e in sorted(_VALIDATOR.iter_errors(data), key=lambda e: list(e.path)):
        where = "/".join(str(p) for p in e.path)
        out.append(f"{'item ' + where if where else 'catalog'}: {e.message}")
    return out
