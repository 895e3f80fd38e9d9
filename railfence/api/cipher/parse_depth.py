"""Parse a depth supplied as text."""

from ._validate_depth import _validate_depth
from .ParameterFormatError import ParameterFormatError


def parse_depth(value: str) -> int:
    """Convert a caller-supplied depth string into a validated rail count.

    Surrounding whitespace is ignored. Only ASCII decimal digits with an
    optional leading minus are accepted; signs like "+", digit separators
    and non-ASCII digits are rejected.

    Raises:
        ParameterFormatError: If the value is not an integer
        InvalidParameterError: If the integer is less than 1
    """
    text = value.strip()
    digits = text[1:] if text.startswith("-") else text
    if not (digits.isascii() and digits.isdigit()):
        raise ParameterFormatError(value)
    return _validate_depth(int(text, 10))
