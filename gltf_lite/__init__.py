"""Typed loader and byte-range resolver for glTF JSON documents."""

from .core import (
    AttributeRange,
    ExternalReference,
    ImageBytes,
    ImagePath,
    ImageSlice,
    InlineBytes,
    classify,
    image_source,
    load,
    resolve,
)
from .enums import AlphaMode, BufferViewTarget, ComponentType, Filter, PrimitiveMode, WrapMode
from .exceptions import (
    DocumentLoadError,
    GltfError,
    ImageSourceMissing,
    IndexOutOfRange,
    InvalidAccessorType,
    InvalidEnumCode,
    MalformedBase64,
    MalformedDocument,
    MissingBufferView,
    SparseAccessorUnsupported,
    UnsupportedDataUri,
)
from .models import Document

__all__ = [
    "load",
    "resolve",
    "image_source",
    "classify",
    "Document",
    "AttributeRange",
    "ImageBytes",
    "ImageSlice",
    "ImagePath",
    "InlineBytes",
    "ExternalReference",
    "AlphaMode",
    "BufferViewTarget",
    "ComponentType",
    "Filter",
    "PrimitiveMode",
    "WrapMode",
    "GltfError",
    "DocumentLoadError",
    "ImageSourceMissing",
    "IndexOutOfRange",
    "InvalidAccessorType",
    "InvalidEnumCode",
    "MalformedBase64",
    "MalformedDocument",
    "MissingBufferView",
    "SparseAccessorUnsupported",
    "UnsupportedDataUri",
]
