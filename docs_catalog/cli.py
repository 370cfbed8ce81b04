#!/usr/bin/env python3
# docs_catalog/cli.py
"""
validate-docs — check docs.json and the files it points at.

Usage:
  validate-docs                          # docs.json in the working directory
  validate-docs --catalog path/docs.json --root path/
  validate-docs --forbid-traversal       # reject ../ escapes
  validate-docs --json                   # machine-readable report on stdout

Exit codes:
- 0 = every record passed the required checks
- 1 = at least one record failed, or the catalog could not be loaded/parsed
- 2 = bad command-line arguments
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from .config import Settings, load_settings
from .loader import CatalogError, filesystem_probe, load_catalog
from .models import Finding, RecordResult, RunReport, distinct_categories
from .validator import display, iter_results

log = logging.getLogger("docs_catalog.cli")

RULE = "=" * 50

MARKERS = {"ok": "✅", "error": "❌", "warning": "⚠️ "}
PLAIN_MARKERS = {"ok": "[ok]", "error": "[error]", "warning": "[warn]"}


class Transcript:
    """Human-readable stdout output; errors and warnings also go to the log (stderr)."""

    def __init__(self, plain: bool = False, enabled: bool = True):
        self.plain = plain
        self.enabled = enabled

    def _mark(self, level: str) -> str:
        return (PLAIN_MARKERS if self.plain else MARKERS)[level]

    def _icon(self, emoji: str) -> str:
        return "" if self.plain else f"{emoji} "

    def line(self, text: str = "") -> None:
        if self.enabled:
            print(text, file=sys.stdout)

    def loaded(self, count: int) -> None:
        self.line(f"{self._mark('ok')} JSON is valid")
        self.line(f"{self._icon('📄')}Found {count} documents")

    def record(self, result: RecordResult) -> None:
        self.line()
        self.line(f'{self._icon("📋")}Validating doc {result.index}: "{display(result.title)}"')
        for f in result.findings:
            self.finding(result.index, f)

    def finding(self, index: int, f: Finding) -> None:
        self.line(f"  {self._mark(f.level)} {f.message}")
        if f.is_error:
            log.error("doc %d: %s", index, f.message)
        elif f.is_warning:
            log.warning("doc %d: %s", index, f.message)

    def fatal(self, message: str) -> None:
        self.line(f"{self._mark('error')} Validation failed: {message}")
        log.error("Validation failed: %s", message)

    def summary(self, report: RunReport) -> None:
        self.line()
        self.line(RULE)
        if report.failed:
            self.line(f"{self._mark('error')} Validation completed with errors!")
            return
        self.line(f"{self._mark('ok')} Validation complete! All checks passed!")
        self.line()
        self.line(f"{self._icon('📊')}Summary:")
        self.line(f"   - Total documents: {report.total_documents}")
        self.line(f"   - Categories: {', '.join(display(c) for c in report.categories)}")
        self.line("   - All files present and accounted for!")


def validate(settings: Settings, transcript: Optional[Transcript] = None) -> RunReport:
    """One full pass over the catalog. Never raises for catalog problems."""
    transcript = transcript or Transcript(enabled=False)
    report = RunReport(catalog_path=str(settings.catalog_path))

    try:
        records = load_catalog(settings.catalog_path)
    except CatalogError as e:
        report.fatal_error = str(e)
        transcript.fatal(report.fatal_error)
        return report

    transcript.loaded(len(records))
    probe = filesystem_probe(settings.root, forbid_traversal=settings.forbid_traversal)
    for result in iter_results(records, probe):
        transcript.record(result)
        report.records.append(result)

    report.categories = distinct_categories(records)
    transcript.summary(report)
    return report


def run(settings: Optional[Settings] = None, plain: bool = False, as_json: bool = False) -> int:
    settings = settings or load_settings()
    transcript = Transcript(plain=plain, enabled=not as_json)
    report = validate(settings, transcript)
    if as_json:
        print(report.model_dump_json(indent=2), file=sys.stdout)
    return report.exit_code


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="validate-docs",
        description="Validate docs.json records and check the files they reference exist.",
    )
    ap.add_argument("--catalog", help="Path to the catalog JSON (default: docs.json or $DOCS_CATALOG_PATH)")
    ap.add_argument("--root", help="Folder category/fileName paths are resolved against (default: cwd)")
    ap.add_argument("--forbid-traversal", action="store_true", default=None,
                    help="Fail records whose path resolves outside the root")
    ap.add_argument("--plain", action="store_true", help="Text markers instead of emoji")
    ap.add_argument("--json", dest="as_json", action="store_true", help="Print the report as JSON")
    ap.add_argument("--verbose", "-v", action="store_true", help="Debug logging on stderr")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    settings = load_settings(
        catalog=args.catalog,
        root=args.root,
        forbid_traversal=args.forbid_traversal,
        log_level="DEBUG" if args.verbose else None,
    )
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.WARNING),
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    log.debug("catalog=%s root=%s forbid_traversal=%s",
              settings.catalog_path, settings.root, settings.forbid_traversal)
    return run(settings, plain=args.plain, as_json=args.as_json)


def entrypoint() -> None:
    sys.exit(main())


if __name__ == "__main__":
    entrypoint()
