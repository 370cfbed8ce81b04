# docs_catalog/config.py
"""
Runtime settings for the catalog validator.

Environment Variables (all optional):
- DOCS_CATALOG_PATH: catalog file (default: docs.json in the working directory)
- DOCS_CATALOG_ROOT: folder the category/fileName paths are resolved against (default: cwd)
- DOCS_CATALOG_FORBID_TRAVERSAL: reject paths resolving outside the root (default: off)
- DOCS_CATALOG_LOG_LEVEL: stderr log level (default: WARNING)

CLI flags in docs_catalog.cli override these.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

DEFAULT_CATALOG = "docs.json"
DEFAULT_LOG_LEVEL = "WARNING"


def _flag_on(name: str) -> bool:
    """Check if a feature flag is enabled. Default: off."""
    val = os.getenv(name, "off").lower()
    return val in ("on", "true", "1", "yes")


@dataclass(frozen=True)
class Settings:
    catalog_path: Path
    root: Path
    forbid_traversal: bool = False
    log_level: str = DEFAULT_LOG_LEVEL


def load_settings(
    catalog: Optional[str] = None,
    root: Optional[str] = None,
    forbid_traversal: Optional[bool] = None,
    log_level: Optional[str] = None,
) -> Settings:
    """Merge explicit overrides on top of the environment."""
    catalog_path = Path(catalog or os.getenv("DOCS_CATALOG_PATH", "").strip() or DEFAULT_CATALOG)
    root_dir = Path(root or os.getenv("DOCS_CATALOG_ROOT", "").strip() or ".")
    if forbid_traversal is None:
        forbid_traversal = _flag_on("DOCS_CATALOG_FORBID_TRAVERSAL")
    level = (log_level or os.getenv("DOCS_CATALOG_LOG_LEVEL", "") or DEFAULT_LOG_LEVEL).upper()

    settings = Settings(
        catalog_path=catalog_path,
        root=root_dir,
        forbid_traversal=forbid_traversal,
        log_level=level,
    )
    return settings
