"""Domain models used across the package.

The first half is the typed document schema produced by
:func:`gltf_lite.core.loader.load`. Every entity is a frozen dataclass and
cross references are plain integer indices into the owning
:class:`Document`'s lists. The second half holds the result types the
inspectors build from a loaded document.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from .enums import (
    AlphaMode,
    BufferViewTarget,
    ComponentType,
    Filter,
    PrimitiveMode,
    WrapMode,
)
from .utils import Quaternion, Vector3, debug_trim_string

Color4 = Tuple[float, float, float, float]


@dataclass(frozen=True)
class Asset:
    version: str
    generator: Optional[str] = None
    copyright: Optional[str] = None
    min_version: Optional[str] = None


@dataclass(frozen=True)
class Buffer:
    byte_length: int
    uri: Optional[str] = None
    name: Optional[str] = None

    def __repr__(self) -> str:
        return (
            f"Buffer(uri={debug_trim_string(self.uri)!r}, "
            f"byte_length={self.byte_length!r}, name={self.name!r})"
        )


@dataclass(frozen=True)
class BufferView:
    buffer: int
    byte_length: int
    byte_offset: int = 0
    stride: Optional[int] = None
    target: Optional[BufferViewTarget] = None
    name: Optional[str] = None


@dataclass(frozen=True)
class SparseIndices:
    buffer_view: int
    component_type: ComponentType
    byte_offset: int = 0


@dataclass(frozen=True)
class SparseValues:
    buffer_view: int
    byte_offset: int = 0


@dataclass(frozen=True)
class Sparse:
    """Shape of a sparse override; recognised but never applied."""

    count: int
    indices: SparseIndices
    values: SparseValues


@dataclass(frozen=True)
class Accessor:
    component_type: ComponentType
    count: int
    type: Optional[str] = None
    buffer_view: Optional[int] = None
    byte_offset: int = 0
    normalized: bool = False
    max: Optional[List[float]] = None
    min: Optional[List[float]] = None
    sparse: Optional[Sparse] = None
    name: Optional[str] = None


@dataclass(frozen=True)
class Image:
    uri: Optional[str] = None
    mime_type: Optional[str] = None
    buffer_view: Optional[int] = None
    name: Optional[str] = None

    def __repr__(self) -> str:
        return (
            f"Image(uri={debug_trim_string(self.uri)!r}, mime_type={self.mime_type!r}, "
            f"buffer_view={self.buffer_view!r}, name={self.name!r})"
        )


@dataclass(frozen=True)
class Sampler:
    mag_filter: Optional[Filter] = None
    min_filter: Optional[Filter] = None
    wrap_s: WrapMode = WrapMode.REPEAT
    wrap_t: WrapMode = WrapMode.REPEAT
    name: Optional[str] = None


@dataclass(frozen=True)
class Texture:
    sampler: Optional[int] = None
    source: Optional[int] = None
    name: Optional[str] = None


@dataclass(frozen=True)
class TextureInfo:
    """Texture reference used by base colour, emissive and metallic-roughness slots."""

    index: int
    tex_coord: int = 0


@dataclass(frozen=True)
class NormalTextureInfo(TextureInfo):
    scale: float = 1.0


@dataclass(frozen=True)
class OcclusionTextureInfo(TextureInfo):
    strength: float = 1.0


@dataclass(frozen=True)
class PBRMetallicRoughness:
    base_color_factor: List[float] = field(default_factory=lambda: [1.0, 1.0, 1.0, 1.0])
    base_color_texture: Optional[TextureInfo] = None
    metallic_factor: float = 1.0
    roughness_factor: float = 1.0
    metallic_roughness_texture: Optional[TextureInfo] = None


@dataclass(frozen=True)
class Material:
    name: Optional[str] = None
    pbr_metallic_roughness: PBRMetallicRoughness = field(default_factory=PBRMetallicRoughness)
    normal_texture: Optional[NormalTextureInfo] = None
    occlusion_texture: Optional[OcclusionTextureInfo] = None
    emissive_texture: Optional[TextureInfo] = None
    emissive_factor: List[float] = field(default_factory=lambda: [0.0, 0.0, 0.0])
    alpha_mode: AlphaMode = AlphaMode.OPAQUE
    alpha_cutoff: float = 0.5
    double_sided: bool = False


@dataclass(frozen=True)
class Primitive:
    attributes: Dict[str, int] = field(default_factory=dict)
    indices: Optional[int] = None
    material: Optional[int] = None
    mode: PrimitiveMode = PrimitiveMode.TRIANGLES
    targets: Optional[List[Dict[str, int]]] = None


@dataclass(frozen=True)
class Mesh:
    primitives: List[Primitive] = field(default_factory=list)
    weights: Optional[List[float]] = None
    name: Optional[str] = None


@dataclass(frozen=True)
class Node:
    camera: Optional[int] = None
    children: List[int] = field(default_factory=list)
    skin: Optional[int] = None
    matrix: Optional[List[float]] = None
    mesh: Optional[int] = None
    rotation: Optional[List[float]] = None
    scale: Optional[List[float]] = None
    translation: Optional[List[float]] = None
    weights: Optional[List[float]] = None
    name: Optional[str] = None


@dataclass(frozen=True)
class Scene:
    nodes: List[int] = field(default_factory=list)
    name: Optional[str] = None


@dataclass(frozen=True)
class Document:
    """Root of a loaded document; read-only once constructed."""

    asset: Optional[Asset] = None
    accessors: List[Accessor] = field(default_factory=list)
    buffers: List[Buffer] = field(default_factory=list)
    buffer_views: List[BufferView] = field(default_factory=list)
    images: List[Image] = field(default_factory=list)
    samplers: List[Sampler] = field(default_factory=list)
    textures: List[Texture] = field(default_factory=list)
    scenes: List[Scene] = field(default_factory=list)
    scene: Optional[int] = None
    materials: List[Material] = field(default_factory=list)
    meshes: List[Mesh] = field(default_factory=list)
    nodes: List[Node] = field(default_factory=list)


# ---------------------------------------------------------------------------
# Inspection results


@dataclass
class SceneNode:
    name: str
    index: int
    translation: Vector3
    rotation: Quaternion
    scale: Vector3
    mesh: Optional[int] = None
    matrix: Optional[Tuple[float, ...]] = None
    children: List["SceneNode"] = field(default_factory=list)

    def walk(self):
        """Yield this node and its descendants in depth-first pre-order."""

        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    @property
    def node_count(self) -> int:
        return sum(1 for _ in self.walk())


@dataclass
class PrimitiveSummary:
    mesh_index: int
    primitive_index: int
    mode: PrimitiveMode
    mesh_name: Optional[str] = None
    material: Optional[int] = None
    base_color: Optional[Color4] = None
    attributes: Dict[str, Tuple[int, int, int]] = field(default_factory=dict)
    indices: Optional[Tuple[int, int, int]] = None
    errors: Dict[str, str] = field(default_factory=dict)


@dataclass
class ImageSummary:
    index: int
    source_kind: Optional[str]
    name: Optional[str] = None
    mime_type: Optional[str] = None
    byte_length: Optional[int] = None
    location: Optional[str] = None
    error: Optional[str] = None


@dataclass
class AnalyzedDocument:
    path: str
    scene_graph: List[SceneNode]
    top_level_nodes: List[Dict[str, Any]]
    primitives: List[PrimitiveSummary] = field(default_factory=list)
    images: List[ImageSummary] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-ready dict.

        The scene graph is flattened to a pre-order list of nodes that refer to
        their parent and children by node index, so arbitrarily deep
        hierarchies serialise without nesting.
        """

        primitives = [asdict(primitive) for primitive in self.primitives]
        for primitive in primitives:
            primitive["mode"] = PrimitiveMode(primitive["mode"]).name
        return {
            "path": self.path,
            "scene_graph": [
                _flat_node(node, parent)
                for root in self.scene_graph
                for node, parent in _with_parents(root)
            ],
            "top_level_nodes": [dict(entry) for entry in self.top_level_nodes],
            "primitives": primitives,
            "images": [asdict(image) for image in self.images],
        }


def _with_parents(root: SceneNode):
    stack = [(root, None)]
    while stack:
        node, parent = stack.pop()
        yield node, parent
        stack.extend((child, node.index) for child in reversed(node.children))


def _flat_node(node: SceneNode, parent: Optional[int]) -> Dict[str, Any]:
    return {
        "index": node.index,
        "name": node.name,
        "parent": parent,
        "children": [child.index for child in node.children],
        "translation": list(node.translation),
        "rotation": list(node.rotation),
        "scale": list(node.scale),
        "mesh": node.mesh,
        "matrix": list(node.matrix) if node.matrix is not None else None,
    }
