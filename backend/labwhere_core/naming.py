"""Location name rules: 1-60 characters of word characters, hyphens, whitespace and parentheses."""
import re

from labwhere_core.errors import InvalidNameFormatError

NAME_MIN_LENGTH = 1
NAME_MAX_LENGTH = 60

_NAME_PATTERN = re.compile(r"\A[\w\-\s()]+\Z", re.ASCII)


def validate_name(name: str) -> bool:
    """True if name has 1-60 characters, all in [A-Za-z0-9_-], whitespace or parentheses."""
    if not isinstance(name, str):
        return False
    if not NAME_MIN_LENGTH <= len(name) <= NAME_MAX_LENGTH:
        return False
    return _NAME_PATTERN.match(name) is not None


def ensure_valid_name(name: str) -> str:
    """Return name unchanged, or raise InvalidNameFormatError."""
    if not validate_name(name):
        raise InvalidNameFormatError(name)
    return name
