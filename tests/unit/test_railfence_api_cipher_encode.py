"""Unit tests for railfence.api.cipher.encode module."""

from collections import Counter

import pytest

from railfence.api.cipher import InvalidParameterError, encode

pytestmark = pytest.mark.cipher


def test_encode_hello_three_rails():
    assert encode("HELLO", 3) == "HOELL"


def test_encode_four_rails():
    assert encode("RAILFENCEISTHEBEST", 4) == "RNHAECTETIFESBSLIE"


def test_encode_classic_example():
    assert encode("WEAREDISCOVEREDFLEEATONCE", 3) == "WECRLTEERDSOEEFEAOCAIVDEN"


def test_encode_two_rails():
    assert encode("ABCDEFG", 2) == "ACEGBDF"


def test_encode_single_rail_is_identity():
    assert encode("ANY", 1) == "ANY"


def test_encode_empty_message():
    assert encode("", 3) == ""


def test_encode_depth_exceeds_length():
    """Depth larger than the message leaves the text in place."""
    assert encode("ABC", 5) == "ABC"


def test_encode_preserves_spaces_and_punctuation():
    assert encode("A B.C", 2) == "ABC ."


def test_encode_is_an_anagram():
    message = "The quick brown fox jumps over the lazy dog"
    for depth in (2, 3, 5, 9):
        result = encode(message, depth)
        assert len(result) == len(message)
        assert Counter(result) == Counter(message)


def test_encode_is_deterministic():
    assert encode("deterministic", 4) == encode("deterministic", 4)


@pytest.mark.parametrize("depth", [0, -1, -10])
def test_encode_rejects_depth_below_one(depth):
    with pytest.raises(InvalidParameterError) as exc_info:
        encode("HELLO", depth)
    assert exc_info.value.depth == depth


@pytest.mark.parametrize("depth", [True, 2.0, "3", None])
def test_encode_rejects_non_integer_depth(depth):
    with pytest.raises(InvalidParameterError):
        encode("HELLO", depth)  # type: ignore[arg-type]


def test_invalid_parameter_error_is_value_error():
    with pytest.raises(ValueError, match="depth must be an integer >= 1"):
        encode("HELLO", 0)
