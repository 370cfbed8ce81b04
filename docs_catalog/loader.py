# docs_catalog/loader.py
"""
Filesystem side of the validator: reading docs.json and statting the
files it references.

Fatal errors (abort the run, exit 1):
- CatalogLoadError  — file missing/unreadable/not UTF-8
- CatalogParseError — not valid JSON
- CatalogShapeError — valid JSON but not an array of objects
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, List, Optional

from .schema import shape_errors
from .validator import PathEscapesRoot, Probe

log = logging.getLogger("docs_catalog.loader")


class CatalogError(Exception):
    """Base class for errors that stop the run before any record is checked."""


class CatalogLoadError(CatalogError):
    pass


class CatalogParseError(CatalogError):
    pass


class CatalogShapeError(CatalogParseError):
    pass


def _reject_constant(token: str) -> Any:
    # NaN, Infinity, -Infinity are not JSON
    raise ValueError(f"non-standard JSON constant {token!r}")


def load_catalog(path: Path) -> List[Dict[str, Any]]:
    try:
        text = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise CatalogLoadError(f"cannot read {path}: {e}") from e

    try:
        data = json.loads(text, parse_constant=_reject_constant)
    except ValueError as e:
        raise CatalogParseError(f"invalid JSON in {path}: {e}") from e

    problems = shape_errors(data)
    if problems:
        raise CatalogShapeError(f"unexpected catalog shape in {path}: " + "; ".join(problems))

    log.debug("loaded %d record(s) from %s", len(data), path)
    return data


def filesystem_probe(root: Path, forbid_traversal: bool = False) -> Probe:
    """
    Build a probe resolving record paths against root.

    Any stat failure counts as "not there". With forbid_traversal, paths
    resolving outside root raise PathEscapesRoot before the stat.
    """
    base = Path(root).resolve()

    def probe(rel: str) -> Optional[int]:
        # plain string join; pathlib would drop a trailing slash
        target = os.path.join(str(root), rel)
        if forbid_traversal:
            resolved = Path(target).resolve()
            if resolved != base and base not in resolved.parents:
                raise PathEscapesRoot(rel)
        try:
            size = os.stat(target).st_size
        except (OSError, ValueError) as e:
            log.debug("stat failed for %s: %s", target, e)
            return None
        return size

    return probe
