"""Base64 codec for embedded binary payloads."""

from __future__ import annotations

import base64
import binascii
import re

from ..exceptions import MalformedBase64

# Symbols first, then at most two pad characters at the very end.
_BASE64_TEXT = re.compile(r"[A-Za-z0-9+/]*={0,2}")


def decode(text: str) -> bytes:
    """Decode standard-alphabet base64 ``text`` into raw bytes.

    Input whose length is 2 or 3 modulo 4 is treated as implicitly padded.
    A length of 1 modulo 4 can never be valid and is rejected, as is any
    character outside the alphabet or a ``=`` anywhere but the tail.
    """

    if not isinstance(text, str):
        raise MalformedBase64(f"Expected base64 text, got {type(text).__name__}")

    if not _BASE64_TEXT.fullmatch(text):
        raise MalformedBase64("Base64 payload contains characters outside the alphabet")

    remainder = len(text) % 4
    if remainder == 1:
        raise MalformedBase64(f"Base64 payload has impossible length {len(text)}")
    if remainder:
        if text.endswith("="):
            raise MalformedBase64("Base64 padding does not complete the final group")
        text += "=" * (4 - remainder)

    try:
        return base64.b64decode(text, validate=True)
    except binascii.Error as exc:
        raise MalformedBase64(str(exc)) from exc


def encode(data: bytes) -> str:
    """Encode ``data`` as padded standard-alphabet base64 text."""

    return base64.b64encode(bytes(data)).decode("ascii")
