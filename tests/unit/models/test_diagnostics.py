"""Tests for diagnostics and string enums."""

from jiraassets.models.diagnostics import Diagnostic, Severity
from jiraassets.providers.assets.codec import DecodeMode


class TestDiagnostic:
    def test_enums_render_as_value(self):
        assert str(Severity.WARNING) == "warning"
        assert str(DecodeMode.STRICT) == "strict"

    def test_to_dict_drops_missing_attribute(self):
        assert Diagnostic(summary="Missing Assets API User").to_dict() == {
            "severity": "error",
            "summary": "Missing Assets API User",
            "detail": "",
        }
