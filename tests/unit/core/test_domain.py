# tests/unit/core/test_domain.py
# Target: masscompare/core/domain.py

import dataclasses

import pytest

from masscompare.core.domain import (
    CompareParameters,
    ComparisonOutcome,
    DirectoryComparisonReport,
    FilePairJob,
    OutcomeKind,
)
from masscompare.core.exceptions import CompareValidationError
from masscompare.utils.constants import DEFAULT_CHUNK_SIZE


# =============================================================================
# SECTION 1 -- FilePairJob
# =============================================================================

class TestFilePairJob:

    def test_fields(self):
        job = FilePairJob(path_a="a/x", path_b="b/x")
        assert job.path_a == "a/x"
        assert job.path_b == "b/x"

    def test_is_frozen(self):
        job = FilePairJob(path_a="a/x", path_b="b/x")
        with pytest.raises(dataclasses.FrozenInstanceError):
            job.path_a = "other"  # type: ignore[misc]


# =============================================================================
# SECTION 2 -- ComparisonOutcome
# =============================================================================

class TestComparisonOutcome:

    def test_match(self):
        outcome = ComparisonOutcome.match("a/x")
        assert outcome.kind is OutcomeKind.MATCH
        assert outcome.is_match is True
        assert outcome.message == ""
        assert outcome.render() == ""

    def test_mismatch_renders_path(self):
        outcome = ComparisonOutcome.mismatch("a/x")
        assert outcome.kind is OutcomeKind.MISMATCH
        assert outcome.is_match is False
        assert outcome.render() == "a/x"

    def test_error_renders_message_then_path(self):
        outcome = ComparisonOutcome.error("a/x", "Path to file B was invalid")
        assert outcome.kind is OutcomeKind.ERROR
        assert outcome.render() == "Path to file B was invalid: a/x"

    def test_error_never_has_empty_message(self):
        outcome = ComparisonOutcome.error("a/x", "")
        assert outcome.message == "Unknown error"

    def test_outcomes_are_hashable_and_comparable(self):
        assert ComparisonOutcome.mismatch("p") == ComparisonOutcome.mismatch("p")
        assert len({ComparisonOutcome.mismatch("p"), ComparisonOutcome.mismatch("p")}) == 1
        assert ComparisonOutcome.mismatch("p") != ComparisonOutcome.match("p")


# =============================================================================
# SECTION 3 -- CompareParameters
# =============================================================================

class TestCompareParameters:

    def test_defaults(self):
        params = CompareParameters()
        assert params.chunk_size == DEFAULT_CHUNK_SIZE == 32_000
        assert params.threaded is True
        assert params.max_workers is None
        assert params.strict_size is True

    def test_valid_overrides(self):
        params = CompareParameters(chunk_size=1, threaded=False, max_workers=1, strict_size=False)
        assert params.chunk_size == 1
        assert params.max_workers == 1

    @pytest.mark.parametrize("value", [0, -5])
    def test_chunk_size_must_be_positive(self, value):
        with pytest.raises(CompareValidationError) as info:
            CompareParameters(chunk_size=value)
        assert info.value.field_name == "chunk_size"
        assert info.value.value == value

    @pytest.mark.parametrize("value", [1.5, "32", True, None])
    def test_chunk_size_must_be_int(self, value):
        with pytest.raises(CompareValidationError, match="chunk_size"):
            CompareParameters(chunk_size=value)  # type: ignore[arg-type]

    @pytest.mark.parametrize("value", [0, -1])
    def test_max_workers_must_be_positive(self, value):
        with pytest.raises(CompareValidationError, match="max_workers"):
            CompareParameters(max_workers=value)

    @pytest.mark.parametrize("value", [2.0, "4", False])
    def test_max_workers_must_be_int(self, value):
        with pytest.raises(CompareValidationError, match="max_workers"):
            CompareParameters(max_workers=value)  # type: ignore[arg-type]

    def test_threaded_must_be_bool(self):
        with pytest.raises(CompareValidationError, match="threaded"):
            CompareParameters(threaded=1)  # type: ignore[arg-type]

    def test_strict_size_must_be_bool(self):
        with pytest.raises(CompareValidationError, match="strict_size"):
            CompareParameters(strict_size="yes")  # type: ignore[arg-type]

    def test_is_frozen(self):
        params = CompareParameters()
        with pytest.raises(dataclasses.FrozenInstanceError):
            params.chunk_size = 1  # type: ignore[misc]


# =============================================================================
# SECTION 4 -- DirectoryComparisonReport
# =============================================================================

class TestDirectoryComparisonReport:

    def _report(self, entries):
        return DirectoryComparisonReport(
            dir_a="A", dir_b="B", total_files=10, entries=tuple(entries),
        )

    def test_empty_report_passes(self):
        report = self._report([])
        assert report.passed is True
        assert report.lines() == ()

    def test_split_by_kind(self):
        mm = ComparisonOutcome.mismatch("A/x")
        er = ComparisonOutcome.error("A/y", "Path to file B was invalid")
        report = self._report([mm, er])
        assert report.passed is False
        assert report.mismatches == (mm,)
        assert report.errors == (er,)

    def test_lines(self):
        report = self._report([
            ComparisonOutcome.mismatch("A/x"),
            ComparisonOutcome.error("A/y", "boom"),
        ])
        assert report.lines() == ("A/x", "boom: A/y")
