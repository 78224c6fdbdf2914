"""
Unit tests for option list helpers.
"""

import pytest

from src.stemmers.options import (
    ConfigurationParseError,
    OptionError,
    check_for_remaining_options,
    get_flag,
    get_option,
    parse_int_option,
)

pytestmark = pytest.mark.unit


class TestGetOption:
    
    def test_returns_value_and_consumes(self):
        options = ["-i", "in.txt", "-stemmlength", "3"]
        assert get_option("stemmlength", options) == "3"
        assert options == ["-i", "in.txt"]
    
    def test_absent_returns_empty_string(self):
        options = ["-l"]
        assert get_option("stemmlength", options) == ""
        assert options == ["-l"]
    
    def test_missing_value_raises(self):
        with pytest.raises(OptionError, match="-o"):
            get_option("o", ["-o"])
    
    def test_requires_exact_flag(self):
        options = ["-stemmlengthx", "3"]
        assert get_option("stemmlength", options) == ""


class TestGetFlag:
    
    def test_present(self):
        options = ["-l", "-h"]
        assert get_flag("l", options) is True
        assert options == ["-h"]
    
    def test_absent(self):
        options = ["-h"]
        assert get_flag("l", options) is False
        assert options == ["-h"]


class TestParseIntOption:
    
    @pytest.mark.parametrize("value,expected", [("7", 7), ("-2", -2), ("+3", 3), ("0", 0), ("2147483647", 2147483647), ("-2147483648", -2147483648)])
    def test_valid(self, value, expected):
        assert parse_int_option("stemmlength", value) == expected
    
    @pytest.mark.parametrize("value", ["", "1_000", "seven", "1e3", "4\n", "99999999999", "-2147483649"])
    def test_invalid(self, value):
        with pytest.raises(ConfigurationParseError, match="stemmlength"):
            parse_int_option("stemmlength", value)


class TestRemainingOptions:
    
    def test_empty_ok(self):
        check_for_remaining_options([])
        check_for_remaining_options(["", ""])
    
    def test_leftover_raises(self):
        with pytest.raises(OptionError, match="-bogus"):
            check_for_remaining_options(["-bogus", "1"])
