"""Unit tests for verification code parsing and the extraction request."""

from datetime import UTC, datetime, timedelta

import pytest

from obwizard.config import MfaPollCfg
from obwizard.domain.mfa import MfaExtractionRequest, extract_code, format_log_line, is_valid_code


class TestExtractCode:
    def test_single_code_in_body(self):
        assert extract_code("Your code is 482913 - use it soon") == "482913"

    def test_first_code_wins(self):
        assert extract_code("Reference 111111, your verification code is 222222") == "111111"

    def test_longer_digit_runs_are_not_codes(self):
        assert extract_code("Call 2124591234 then enter 730104") == "730104"

    def test_shorter_digit_runs_are_not_codes(self):
        assert extract_code("Zip 10001, apartment 12345") is None

    def test_code_next_to_letters(self):
        assert extract_code("code:730104.") == "730104"

    @pytest.mark.parametrize("text", [None, "", "no digits here"])
    def test_nothing_to_find(self, text):
        assert extract_code(text) is None

    def test_non_ascii_digits_ignored(self):
        # Arabic-Indic digits are \d in python regex but not a code
        assert extract_code("٤٨٢٩١٣") is None


class TestIsValidCode:
    @pytest.mark.parametrize("code", ["000000", "730104"])
    def test_valid(self, code):
        assert is_valid_code(code)

    @pytest.mark.parametrize("code", ["73010", "7301045", "73O104", " 730104", None, 730104])
    def test_invalid(self, code):
        assert not is_valid_code(code)


def test_format_log_line():
    at = datetime(2025, 3, 1, 12, 30, tzinfo=UTC)
    assert format_log_line("Filler4821", "730104", at) == "2025-03-01T12:30:00+00:00 | Filler4821 | MFA: 730104"


class TestMfaExtractionRequest:
    def test_deadline_covers_every_wait(self):
        now = datetime(2025, 3, 1, tzinfo=UTC)
        request = MfaExtractionRequest.create("Filler4821", MfaPollCfg(), now=now)
        assert request.created_at == now
        assert request.deadline == now + timedelta(seconds=43)

    def test_is_overdue(self):
        now = datetime(2025, 3, 1, tzinfo=UTC)
        request = MfaExtractionRequest.create("Filler4821", MfaPollCfg(), now=now)
        assert not request.is_overdue(now + timedelta(seconds=43))
        assert request.is_overdue(now + timedelta(seconds=44))

    @pytest.mark.parametrize("prefix", ["", "   ", "Filler 4821", "Filler4821@mailforspam.com", None])
    def test_rejects_bad_prefix(self, prefix):
        with pytest.raises(ValueError):
            MfaExtractionRequest.create(prefix, MfaPollCfg())

    def test_deadline_before_creation_is_rejected(self):
        now = datetime(2025, 3, 1, tzinfo=UTC)
        with pytest.raises(ValueError, match="Deadline"):
            MfaExtractionRequest("Filler4821", created_at=now, deadline=now - timedelta(seconds=1))
