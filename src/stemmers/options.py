"""
Option handling shared by all stemmers.

Stemmers are configured from a flat list of command-line style strings,
e.g. ["-stemmlength", "5", "-l"]. Helpers here consume the options they
recognise IN PLACE, so the same list can be passed through several
handlers (runner, stemmer) and whatever is left over is reported as an
error at the end.

Usage:
    options = ["-stemmlength", "5", "-l"]
    lowercase = get_flag("l", options)          # True, options = ["-stemmlength", "5"]
    value = get_option("stemmlength", options)  # "5", options = []
    check_for_remaining_options(options)        # OK
"""

import re
from dataclasses import dataclass
from typing import List

_INTEGER = re.compile(r"[+-]?[0-9]+")

# Option values are Java-style 32-bit ints
INT_MIN = -2**31
INT_MAX = 2**31 - 1


class StemmerError(Exception):
    """Base class for stemmer configuration failures"""


class OptionError(StemmerError, ValueError):
    """Option list is malformed or contains unsupported options"""


class ConfigurationParseError(OptionError):
    """Option value could not be parsed"""

    def __init__(self, option: str, value: str, reason: str = "not a valid integer"):
        self.option = option
        self.value = value
        super().__init__(f"Invalid value for -{option}: {value!r} ({reason})")


@dataclass(frozen=True)
class Option:
    """Description of a single option a stemmer understands"""
    name: str            # Flag name without the leading dash
    description: str     # Help text shown by -h
    num_arguments: int   # 0 = flag, 1 = takes a value
    synopsis: str        # e.g. "-stemmlength <value>"


def _flag_index(name: str, options: List[str]) -> int:
    flag = f"-{name}"
    for i, value in enumerate(options):
        if value == flag:
            return i
    return -1


def get_option(name: str, options: List[str]) -> str:
    """
    Consume `-name <value>` from the option list.
    
    Args:
        name: Option name without the leading dash
        options: Option list (modified in place)
        
    Returns:
        Option value, or "" if the option is absent
        
    Raises:
        OptionError: Option present but no value follows it
        
    Examples:
        >>> opts = ["-stemmlength", "3"]
        >>> get_option("stemmlength", opts), opts
        ('3', [])
        >>> get_option("stemmlength", [])
        ''
    """
    i = _flag_index(name, options)
    if i < 0:
        return ""
    if i + 1 >= len(options):
        raise OptionError(f"No value given for -{name} option")
    value = options[i + 1]
    del options[i:i + 2]
    return value


def get_flag(name: str, options: List[str]) -> bool:
    """Consume `-name` from the option list, returning whether it was present."""
    i = _flag_index(name, options)
    if i < 0:
        return False
    del options[i]
    return True


def parse_int_option(name: str, value: str) -> int:
    """
    Parse an integer option value strictly (no whitespace, no underscores).
    
    Raises:
        ConfigurationParseError: value is not an integer or outside the 32-bit range
    """
    if not _INTEGER.fullmatch(value):
        raise ConfigurationParseError(name, value)
    number = int(value)
    if not INT_MIN <= number <= INT_MAX:
        raise ConfigurationParseError(name, value, reason="out of 32-bit integer range")
    return number


def check_for_remaining_options(options: List[str]) -> None:
    """Raise OptionError if any non-empty option was not consumed."""
    leftover = [o for o in options if o]
    if leftover:
        raise OptionError(f"Illegal options: {' '.join(leftover)}")
