"""Project-specific exception types."""

from __future__ import annotations

from typing import Any


class GltfError(Exception):
    """Base class for every error raised while loading or resolving a document."""


class MalformedBase64(GltfError, ValueError):
    """Raised when a base64 payload has a bad length, padding, or alphabet."""


class UnsupportedDataUri(GltfError, ValueError):
    """Raised for a ``data:`` URI whose media type/encoding is not recognised."""

    def __init__(self, uri: str) -> None:
        self.uri = uri
        head = uri.split(",", 1)[0]
        super().__init__(f"Unsupported data URI: '{head}'")


class InvalidEnumCode(GltfError, ValueError):
    """Raised when a numeric (or string) code is outside its closed set."""

    def __init__(self, domain: str, value: Any) -> None:
        self.domain = domain
        self.value = value
        super().__init__(f"Invalid {domain} code: {value!r}")


class MalformedDocument(GltfError, ValueError):
    """Raised when the JSON structure or a required field is wrong."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")


class SparseAccessorUnsupported(GltfError, NotImplementedError):
    """Raised when resolving an accessor that carries a sparse descriptor."""

    def __init__(self, accessor: int) -> None:
        self.accessor = accessor
        super().__init__(f"Accessor {accessor} is sparse; sparse accessors are not supported")


class MissingBufferView(GltfError, LookupError):
    """Raised when an accessor has no bufferView to resolve against."""

    def __init__(self, accessor: int) -> None:
        self.accessor = accessor
        super().__init__(f"Accessor {accessor} has no bufferView")


class InvalidAccessorType(GltfError, ValueError):
    """Raised for an accessor type tag with no known component multiplicity."""

    def __init__(self, accessor: int, type_tag: Any) -> None:
        self.accessor = accessor
        self.type_tag = type_tag
        super().__init__(f"Accessor {accessor} has unrecognised type {type_tag!r}")


class ImageSourceMissing(GltfError, LookupError):
    """Raised when an image has neither a uri nor a bufferView."""

    def __init__(self, image: Any = None) -> None:
        self.image = image
        label = f"Image {image}" if image is not None else "Image"
        super().__init__(f"{label} has neither uri nor bufferView")


class IndexOutOfRange(GltfError, IndexError):
    """Raised when an index field points past the end of its collection."""

    def __init__(self, collection: str, index: int, length: int) -> None:
        self.collection = collection
        self.index = index
        self.length = length
        super().__init__(f"{collection}[{index}] is out of range (length {length})")


class DocumentLoadError(RuntimeError):
    """Raised when a document or one of its buffers cannot be read from disk."""
