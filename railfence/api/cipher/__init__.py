"""Rail fence cipher API."""

from .CipherMode import CipherMode
from .decode import decode
from .encode import encode
from .InvalidParameterError import InvalidParameterError
from .next_rail import next_rail
from .ParameterFormatError import ParameterFormatError
from .parse_depth import parse_depth
from .rail_lengths import rail_lengths
from .RailFenceError import RailFenceError
from .transform import transform
from .zigzag_path import zigzag_path

__all__ = [
    "CipherMode",
    "InvalidParameterError",
    "ParameterFormatError",
    "RailFenceError",
    "decode",
    "encode",
    "next_rail",
    "parse_depth",
    "rail_lengths",
    "transform",
    "zigzag_path",
]
