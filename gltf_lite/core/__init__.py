"""Core infrastructure for document loading and byte-range resolution."""

from .analyzer import DocumentAnalyzer, DocumentContext, load_buffers
from .loader import load
from .resolver import AttributeRange, ImageBytes, ImagePath, ImageSlice, image_source, lookup, resolve
from .uri import ExternalReference, InlineBytes, classify

__all__ = [
    "DocumentAnalyzer",
    "DocumentContext",
    "load_buffers",
    "load",
    "resolve",
    "image_source",
    "lookup",
    "classify",
    "AttributeRange",
    "ImageBytes",
    "ImageSlice",
    "ImagePath",
    "InlineBytes",
    "ExternalReference",
]
