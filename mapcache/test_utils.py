"""
Tests for mapcache.utils
"""

import datetime

import pytest

from .utils import jsonDumps, parseDuration, toSeconds


class TestParseDuration:
    """Test duration string parsing."""

    @pytest.mark.parametrize(
        "durationStr,expected",
        [
            ("30s", 30),
            ("5m", 300),
            ("2h", 7200),
            ("1d", 86400),
            ("1d2h30m15s", 95415),
            ("1h30m", 5400),
            ("0s", 0),
            ("2:30", 9000),
            ("00:05:00", 300),
            ("1:00:15", 3615),
            (" 10s ", 10),
            ("-90s", -90),
        ],
    )
    def testValidFormats(self, durationStr, expected):
        """Test all supported formats."""
        assert parseDuration(durationStr) == expected

    @pytest.mark.parametrize("durationStr", ["", "soon", "5x", "s", "1:75", "5s3m", "1:2:3:4"])
    def testInvalidFormats(self, durationStr):
        """Test that malformed strings raise ValueError."""
        with pytest.raises(ValueError):
            parseDuration(durationStr)


class TestToSeconds:
    """Test TTL normalization."""

    def testNumbers(self):
        assert toSeconds(10) == 10.0
        assert toSeconds(0.25) == 0.25
        assert toSeconds(-3) == -3.0

    def testTimedelta(self):
        assert toSeconds(datetime.timedelta(minutes=1, seconds=30)) == 90.0

    def testString(self):
        assert toSeconds("1m") == 60.0

    @pytest.mark.parametrize("ttl", [None, True, [1], {"s": 1}])
    def testUnsupportedTypes(self, ttl):
        """Test that unsupported TTL types raise TypeError."""
        with pytest.raises(TypeError):
            toSeconds(ttl)


class TestJsonDumps:
    """Test JSON helper."""

    def testCompactByDefault(self):
        assert jsonDumps({"b": 1, "a": [1, 2]}) == '{"a":[1,2],"b":1}'

    def testIndentDisablesCompact(self):
        assert jsonDumps({"a": 1}, indent=2) == '{\n  "a": 1\n}'

    def testNonSerializableFallsBackToStr(self):
        assert jsonDumps({"ttl": datetime.timedelta(seconds=1)}) == '{"ttl":"0:00:01"}'
