# docs_catalog/__init__.py
"""
docs_catalog — validator for the docs.json document catalog.

Submodules:
- models: frozen constants and pydantic result models
- validator: pure per-record checks (validate_record)
- schema: JSON Schema shape check for the catalog container
- loader: catalog loading and the filesystem probe
- config: environment-backed settings
- cli: transcript, run(), main()
"""

from __future__ import annotations

__version__ = "1.0.0"

__all__ = [
    "REQUIRED_FIELDS",
    "VALID_CATEGORIES",
    "Finding",
    "RecordResult",
    "RunReport",
    "validate_record",
    "load_catalog",
    "run",
    "main",
]


# Lazy imports so `python -m docs_catalog.cli` does not import cli twice
def __getattr__(name: str):
    if name in ("REQUIRED_FIELDS", "VALID_CATEGORIES", "Finding", "RecordResult", "RunReport"):
        from . import models
        return getattr(models, name)
    if name == "validate_record":
        from .validator import validate_record
        return validate_record
    if name == "load_catalog":
        from .loader import load_catalog
        return load_catalog
    if name in ("run", "main"):
        from . import cli
        return getattr(cli, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
