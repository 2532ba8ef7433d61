"""Inspector implementations for extracting targeted data."""

from .images import ImageInspector
from .primitives import PrimitiveInspector
from .scene_graph import SceneGraphInspector
from .top_level import TopLevelInspector

__all__ = [
    "ImageInspector",
    "PrimitiveInspector",
    "SceneGraphInspector",
    "TopLevelInspector",
]
