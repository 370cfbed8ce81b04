# tests/test_validator.py
import math

import pytest

from docs_catalog.models import REQUIRED_FIELDS, VALID_CATEGORIES
from docs_catalog.validator import (
    PathEscapesRoot,
    is_missing,
    iter_results,
    record_path,
    validate_record,
)


def _probe(files):
    """Fake filesystem: {relative path: size}."""
    return lambda rel: files.get(rel)


def _errors(findings):
    return [f for f in findings if f.level == "error"]


# --- truthiness --------------------------------------------------------------

@pytest.mark.parametrize("value", [None, False, 0, 0.0, "", math.nan])
def test_falsy_values_count_as_missing(value):
    assert is_missing(value)


@pytest.mark.parametrize("value", ["x", " ", 1, -1, True, [], {}, ["a"]])
def test_json_truthy_values_count_as_present(value):
    assert not is_missing(value)


# --- full record -------------------------------------------------------------

def test_valid_record_has_no_errors(record):
    findings = validate_record(record, _probe({"templates/a.txt": 5}))
    assert _errors(findings) == []
    assert [f.check for f in findings] == ["field"] * 7 + ["file", "tags"]
    assert findings[7].message == "File exists: templates/a.txt (5 bytes)"
    assert findings[7].size_bytes == 5
    assert findings[8].message == "Tags: x"


def test_every_missing_field_is_reported(record):
    for name in ("title", "uploadedBy", "uploadedDate"):
        record[name] = ""
    errors = _errors(validate_record(record, _probe({"templates/a.txt": 5})))
    assert [e.field for e in errors] == ["title", "uploadedBy", "uploadedDate"]
    assert errors[0].message == "Missing field: title"


def test_empty_record_reports_all_seven_fields_and_more():
    errors = _errors(validate_record({}, _probe({})))
    missing = [e.field for e in errors if e.check == "field"]
    assert missing == list(REQUIRED_FIELDS)
    checks = {e.check for e in errors}
    assert checks == {"field", "category", "file"}


def test_bad_category_is_an_error(record):
    record["category"] = "bogus"
    errors = _errors(validate_record(record, _probe({"bogus/a.txt": 3})))
    assert len(errors) == 1
    assert errors[0].check == "category"
    assert errors[0].message == "Invalid category: bogus"


def test_missing_category_fails_both_presence_and_membership(record):
    del record["category"]
    errors = _errors(validate_record(record, _probe({})))
    assert ("field", "category") in [(e.check, e.field) for e in errors]
    assert any(e.check == "category" for e in errors)


@pytest.mark.parametrize("category", VALID_CATEGORIES)
def test_all_known_categories_pass(record, category):
    record["category"] = category
    findings = validate_record(record, _probe({f"{category}/a.txt": 1}))
    assert _errors(findings) == []


def test_category_match_is_case_sensitive(record):
    record["category"] = "Templates"
    errors = _errors(validate_record(record, _probe({"Templates/a.txt": 1})))
    assert [e.check for e in errors] == ["category"]


def test_missing_file_names_the_path(record):
    errors = _errors(validate_record(record, _probe({})))
    assert len(errors) == 1
    assert errors[0].check == "file"
    assert errors[0].path == "templates/a.txt"
    assert "templates/a.txt" in errors[0].message


def test_path_is_used_verbatim(record):
    record["fileName"] = "../outside.txt"
    assert record_path(record) == "templates/../outside.txt"
    findings = validate_record(record, _probe({"templates/../outside.txt": 9}))
    assert _errors(findings) == []


def test_guarded_probe_escape_is_reported(record):
    def probe(rel):
        raise PathEscapesRoot(rel)

    errors = _errors(validate_record(record, probe))
    assert errors[0].message == "Path escapes catalog root: templates/a.txt"


def test_missing_file_name_skips_probe(record):
    calls = []
    record["fileName"] = None

    def probe(rel):
        calls.append(rel)
        return 1

    findings = validate_record(record, probe)
    assert calls == []
    file_finding = [f for f in findings if f.check == "file"][0]
    assert file_finding.level == "error"
    assert file_finding.path == "templates/"


# --- tags --------------------------------------------------------------------

@pytest.mark.parametrize("tags", [None, [], "x", {"a": 1}])
def test_bad_or_empty_tags_only_warn(record, tags):
    if tags is None:
        del record["tags"]
    else:
        record["tags"] = tags
    findings = validate_record(record, _probe({"templates/a.txt": 1}))
    assert _errors(findings) == []
    assert findings[-1].level == "warning"
    assert findings[-1].message == "Warning: No tags found"


def test_tags_are_joined(record):
    record["tags"] = ["a", "b", "c"]
    assert validate_record(record, _probe({"templates/a.txt": 1}))[-1].message == "Tags: a, b, c"


# --- catalog -----------------------------------------------------------------

def test_one_bad_record_does_not_skip_the_next(record):
    bad = dict(record, category="bogus")
    results = list(iter_results([bad, record], _probe({"templates/a.txt": 1})))
    assert [r.index for r in results] == [1, 2]
    assert results[0].failed is True
    assert results[1].failed is False


def test_warnings_do_not_fail_a_record(record):
    record["tags"] = []
    (result,) = iter_results([record], _probe({"templates/a.txt": 1}))
    assert not result.failed
    assert len(result.warnings) == 1
