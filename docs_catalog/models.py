# docs_catalog/models.py
"""
Pydantic models and frozen constants for the docs catalog.

Records (input):
- Read straight from docs.json as plain dicts, never mutated
- Seven required fields, presence-checked with JSON truthiness
- Optional tags list (advisory only)

Findings (output):
- Finding      — one check outcome for one record
- RecordResult — all findings for one record, in transcript order
- RunReport    — whole-run outcome, dumped by --json

Design Decisions:
- Pydantic v2 syntax (ConfigDict, computed_field)
- Findings are frozen; reports are built once per run
"""

from __future__ import annotations

from typing import Any, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field

# ============================================================
# Constants
# ============================================================

# Checked in this order; transcript lines follow it
REQUIRED_FIELDS = (
    "id",
    "title",
    "description",
    "category",
    "fileName",
    "uploadedBy",
    "uploadedDate",
)

# Allowed categories, also the top-level folders on disk
VALID_CATEGORIES = (
    "templates",
    "reference-materials",
    "frameworks",
    "style-references",
)

CheckName = Literal["field", "category", "file", "tags"]
Level = Literal["ok", "error", "warning"]


# ============================================================
# Findings
# ============================================================

class Finding(BaseModel):
    """Outcome of a single check against a single record."""

    model_config = ConfigDict(frozen=True)

    check: CheckName
    level: Level
    message: str
    field: Optional[str] = None
    value: Any = None
    path: Optional[str] = None
    size_bytes: Optional[int] = None

    @property
    def is_error(self) -> bool:
        return self.level == "error"

    @property
    def is_warning(self) -> bool:
        return self.level == "warning"


class RecordResult(BaseModel):
    index: int = Field(..., ge=1, description="1-based position in the catalog")
    title: Any = None
    findings: List[Finding] = Field(default_factory=list)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def failed(self) -> bool:
        return any(f.is_error for f in self.findings)

    @property
    def errors(self) -> List[Finding]:
        return [f for f in self.findings if f.is_error]

    @property
    def warnings(self) -> List[Finding]:
        return [f for f in self.findings if f.is_warning]


class RunReport(BaseModel):
    catalog_path: str
    records: List[RecordResult] = Field(default_factory=list)
    categories: List[Any] = Field(default_factory=list)
    fatal_error: Optional[str] = None

    @computed_field  # type: ignore[prop-decorator]
    @property
    def total_documents(self) -> int:
        return len(self.records)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def failed(self) -> bool:
        if self.fatal_error is not None:
            return True
        return any(r.failed for r in self.records)

    @property
    def exit_code(self) -> int:
        return 1 if self.failed else 0


def distinct_categories(records: List[dict]) -> List[Any]:
    """Categories in first-occurrence order, duplicates removed."""
    seen: List[Any] = []
    for rec in records:
        cat = rec.get("category")
        if cat not in seen:
            seen.append(cat)
    return seen
