# tests/utils/test_helpers.py
"""Tests for bloglist/utils/helpers.py module."""

import re
from unittest.mock import MagicMock
from uuid import uuid4

import pytest

from bloglist.utils.helpers import as_uuid, host, today_str


class TestTodayStr:
    """Tests for today_str function."""

    def test_format_matches_expected_pattern(self) -> None:
        """Test that the date format matches YYYY-MM-DD HH:MM:SS."""
        result = today_str()
        pattern = r"^\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}$"
        assert re.match(pattern, result), f"Date format mismatch: {result}"


class TestAsUuid:
    """Tests for as_uuid function."""

    def test_passes_uuid_through(self) -> None:
        value = uuid4()
        assert as_uuid(value) is value

    def test_parses_string(self) -> None:
        value = uuid4()
        assert as_uuid(str(value)) == value

    @pytest.mark.parametrize("value", ["", "5a3d5da59070081a82a3445", "not-an-id"])
    def test_invalid_values_return_none(self, value: str) -> None:
        assert as_uuid(value) is None


class TestHost:
    """Tests for host function."""

    def test_returns_client_host(self) -> None:
        request = MagicMock()
        request.client.host = "127.0.0.1"
        assert host(request) == "127.0.0.1"

    def test_unknown_without_client(self) -> None:
        request = MagicMock()
        request.client = None
        assert host(request) == "unknown"
