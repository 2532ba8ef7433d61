"""Resolve accessors and images into concrete byte locations.

``resolve(document, accessor_index)`` returns ``(buffer, offset, length)``;
combine it with loaded buffer bytes as ``buffers[buffer][offset:offset + length]``.
Common attribute names are ``POSITION``, ``NORMAL`` and ``TEXCOORD_*``::

    resolve(document, primitive.attributes["TEXCOORD_0"])
    resolve(document, primitive.indices)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, NamedTuple, TypeVar, Union

from ..enums import ACCESSOR_TYPE_SIZES
from ..exceptions import (
    ImageSourceMissing,
    IndexOutOfRange,
    InvalidAccessorType,
    MalformedDocument,
    MissingBufferView,
    SparseAccessorUnsupported,
)
from ..models import Document, Image
from .uri import InlineBytes, UriKind, classify

T = TypeVar("T")


class AttributeRange(NamedTuple):
    buffer: int
    offset: int
    length: int

    @property
    def end(self) -> int:
        return self.offset + self.length


@dataclass(frozen=True)
class ImageBytes:
    data: bytes


@dataclass(frozen=True)
class ImageSlice:
    buffer: int
    offset: int
    length: int


@dataclass(frozen=True)
class ImagePath:
    path: str


ImageSource = Union[ImageBytes, ImageSlice, ImagePath]


def lookup(document: Document, collection: str, index: int) -> T:
    """Return ``document.<collection>[index]`` or raise :class:`IndexOutOfRange`."""

    items: List[T] = getattr(document, collection)
    if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index < len(items):
        raise IndexOutOfRange(collection, index, len(items))
    return items[index]


def resolve(document: Document, accessor_index: int) -> AttributeRange:
    """Return the buffer index, absolute byte offset and byte length of an accessor."""

    accessor = lookup(document, "accessors", accessor_index)
    if accessor.sparse is not None:
        raise SparseAccessorUnsupported(accessor_index)
    if accessor.buffer_view is None:
        raise MissingBufferView(accessor_index)

    view = lookup(document, "buffer_views", accessor.buffer_view)
    lookup(document, "buffers", view.buffer)

    components = ACCESSOR_TYPE_SIZES.get(accessor.type) if accessor.type is not None else None
    if components is None:
        raise InvalidAccessorType(accessor_index, accessor.type)

    return AttributeRange(
        buffer=view.buffer,
        offset=view.byte_offset + accessor.byte_offset,
        length=accessor.count * accessor.component_type.byte_size() * components,
    )


def buffer_source(document: Document, buffer_index: int) -> UriKind:
    """Classify the URI of a buffer; a buffer without a URI cannot be located."""

    buffer = lookup(document, "buffers", buffer_index)
    if buffer.uri is None:
        raise MalformedDocument(f"buffers[{buffer_index}].uri", "buffer has no uri")
    return classify(buffer.uri)


def image_source(document: Document, image: Union[Image, int]) -> ImageSource:
    """Locate the encoded bytes of an image.

    A ``uri`` takes precedence and is classified; otherwise the image's buffer
    view is returned as a slice of its buffer.
    """

    label = None
    if not isinstance(image, Image):
        label = image
        image = lookup(document, "images", image)

    if image.uri is not None:
        kind = classify(image.uri)
        if isinstance(kind, InlineBytes):
            return ImageBytes(kind.data)
        return ImagePath(kind.path)

    if image.buffer_view is None:
        raise ImageSourceMissing(label)

    view = lookup(document, "buffer_views", image.buffer_view)
    lookup(document, "buffers", view.buffer)
    return ImageSlice(buffer=view.buffer, offset=view.byte_offset, length=view.byte_length)
