"""Classify buffer and image URIs as inline data or external references."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from ..exceptions import UnsupportedDataUri
from . import b64

DATA_URI_PREFIXES = (
    "data:application/octet-stream;base64,",
    "data:image/jpeg;base64,",
    "data:image/png;base64,",
)


@dataclass(frozen=True)
class InlineBytes:
    data: bytes


@dataclass(frozen=True)
class ExternalReference:
    """An unresolved relative path or URL; reading it is the caller's job."""

    path: str


UriKind = Union[InlineBytes, ExternalReference]


def classify(uri: str) -> UriKind:
    """Return :class:`InlineBytes` for a recognised data URI, else an external reference."""

    if not uri.startswith("data:"):
        return ExternalReference(uri)

    for prefix in DATA_URI_PREFIXES:
        if uri.startswith(prefix):
            return InlineBytes(b64.decode(uri[len(prefix):]))

    raise UnsupportedDataUri(uri)
