import pytest

from gltf_lite.core import b64
from gltf_lite.exceptions import MalformedBase64


@pytest.mark.parametrize(
    "text, expected",
    [
        ("", b""),
        ("QQ==", b"A"),
        ("QUI=", b"AB"),
        ("QUJD", b"ABC"),
        ("QUJDRA==", b"ABCD"),
        ("AAEC/w==", bytes([0, 1, 2, 255])),
        ("+/+/", bytes([0xFB, 0xFF, 0xBF])),
    ],
)
def test_decode_known_values(text, expected):
    assert b64.decode(text) == expected


@pytest.mark.parametrize(
    "text, groups, pad",
    [("QUJDREVG", 2, 0), ("QUJDREU=", 2, 1), ("QUJDRA==", 2, 2), ("QQ==", 1, 2)],
)
def test_decode_length_matches_padding(text, groups, pad):
    assert len(b64.decode(text)) == 3 * groups - pad


def test_unpadded_tail_is_treated_as_padded():
    assert b64.decode("QQ") == b"A"
    assert b64.decode("QUI") == b"AB"


@pytest.mark.parametrize(
    "text",
    [
        "Q",  # length 1 mod 4
        "QUJDR",
        "QQ=",  # pad that does not complete a group
        "A=",
        "QQ===",
        "====",
        "Q=Q=",  # pad in the middle
        "QQ==QQ==",
        "QQ!=",  # outside the alphabet
        "QU I",
        "QUJ-",
    ],
)
def test_decode_rejects_malformed_input(text):
    with pytest.raises(MalformedBase64):
        b64.decode(text)


def test_decode_rejects_non_text():
    with pytest.raises(MalformedBase64):
        b64.decode(b"QQ==")


@pytest.mark.parametrize("text", ["QQ==", "QUI=", "QUJD", "AAEC/w=="])
def test_encode_round_trips(text):
    assert b64.encode(b64.decode(text)) == text


def test_malformed_base64_is_a_value_error():
    with pytest.raises(ValueError):
        b64.decode("Q")
