"""Turn JSON text into a validated :class:`~gltf_lite.models.Document`.

Loading happens in two explicit steps: ``json.loads`` produces a plain value
tree, then the ``_build_*`` functions below map that tree onto the schema
dataclasses. Key renames, defaults and enum decoding all live in this mapping
code. Errors carry the JSON path of the offending field, e.g.
``accessors[2].componentType``.
"""

from __future__ import annotations

import json
from typing import Any, Callable, Dict, List, Optional, TypeVar, Union

from ..enums import (
    AlphaMode,
    BufferViewTarget,
    ComponentType,
    Filter,
    PrimitiveMode,
    WrapMode,
)
from ..exceptions import MalformedDocument
from ..models import (
    Accessor,
    Asset,
    Buffer,
    BufferView,
    Document,
    Image,
    Material,
    Mesh,
    Node,
    NormalTextureInfo,
    OcclusionTextureInfo,
    PBRMetallicRoughness,
    Primitive,
    Sampler,
    Scene,
    Sparse,
    SparseIndices,
    SparseValues,
    Texture,
    TextureInfo,
)

T = TypeVar("T")
Json = Dict[str, Any]

_MISSING = object()


def load(json_text: Union[str, bytes]) -> Document:
    """Parse ``json_text`` into a :class:`Document`.

    Raises :class:`MalformedDocument` for structural problems and
    :class:`~gltf_lite.exceptions.InvalidEnumCode` for out-of-range codes.
    """

    if isinstance(json_text, (bytes, bytearray)):
        try:
            json_text = bytes(json_text).decode("utf-8")
        except UnicodeDecodeError as exc:
            raise MalformedDocument("<root>", f"document is not UTF-8: {exc}") from exc

    try:
        tree = json.loads(json_text)
    except json.JSONDecodeError as exc:
        raise MalformedDocument("<root>", f"invalid JSON: {exc}") from exc

    root = _as_object(tree, "<root>")
    asset = root.get("asset")
    return Document(
        asset=_build_asset(asset, "asset") if asset is not None else None,
        accessors=_collection(root, "accessors", _build_accessor),
        buffers=_collection(root, "buffers", _build_buffer),
        buffer_views=_collection(root, "bufferViews", _build_buffer_view),
        images=_collection(root, "images", _build_image),
        samplers=_collection(root, "samplers", _build_sampler),
        textures=_collection(root, "textures", _build_texture),
        scenes=_collection(root, "scenes", _build_scene),
        scene=_optional(root, "scene", "", _as_index),
        materials=_collection(root, "materials", _build_material),
        meshes=_collection(root, "meshes", _build_mesh),
        nodes=_collection(root, "nodes", _build_node),
    )


# ---------------------------------------------------------------------------
# Value conversion


def _join(path: str, key: str) -> str:
    return f"{path}.{key}" if path else key


def _as_object(value: Any, path: str) -> Json:
    if not isinstance(value, dict):
        raise MalformedDocument(path, f"expected an object, got {type(value).__name__}")
    return value


def _as_list(value: Any, path: str) -> List[Any]:
    if not isinstance(value, list):
        raise MalformedDocument(path, f"expected an array, got {type(value).__name__}")
    return value


def _as_index(value: Any, path: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise MalformedDocument(path, f"expected a non-negative integer, got {value!r}")
    if value < 0:
        raise MalformedDocument(path, f"expected a non-negative integer, got {value!r}")
    return value


def _as_code(value: Any, path: str) -> Any:
    # Range checking is left to the enum's from_code; only the JSON type is checked here.
    if isinstance(value, bool) or not isinstance(value, (int, str)):
        raise MalformedDocument(path, f"expected an enum code, got {value!r}")
    return value


def _as_number(value: Any, path: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise MalformedDocument(path, f"expected a number, got {value!r}")
    return float(value)


def _as_bool(value: Any, path: str) -> bool:
    if not isinstance(value, bool):
        raise MalformedDocument(path, f"expected a boolean, got {value!r}")
    return value


def _as_str(value: Any, path: str) -> str:
    if not isinstance(value, str):
        raise MalformedDocument(path, f"expected a string, got {value!r}")
    return value


def _numbers(size: Optional[int] = None) -> Callable[[Any, str], List[float]]:
    def convert(value: Any, path: str) -> List[float]:
        items = _as_list(value, path)
        if size is not None and len(items) != size:
            raise MalformedDocument(path, f"expected {size} numbers, got {len(items)}")
        return [_as_number(item, f"{path}[{idx}]") for idx, item in enumerate(items)]

    return convert


def _indices(value: Any, path: str) -> List[int]:
    items = _as_list(value, path)
    return [_as_index(item, f"{path}[{idx}]") for idx, item in enumerate(items)]


def _index_map(value: Any, path: str) -> Dict[str, int]:
    mapping = _as_object(value, path)
    return {name: _as_index(idx, _join(path, name)) for name, idx in mapping.items()}


def _required(obj: Json, key: str, path: str, convert: Callable[[Any, str], T]) -> T:
    value = obj.get(key, _MISSING)
    if value is _MISSING:
        raise MalformedDocument(_join(path, key), "missing required field")
    return convert(value, _join(path, key))


def _optional(obj: Json, key: str, path: str, convert: Callable[[Any, str], T], default: Any = None) -> Any:
    value = obj.get(key)
    if value is None:
        return default() if callable(default) else default
    return convert(value, _join(path, key))


def _collection(root: Json, key: str, build: Callable[[Json, str], T]) -> List[T]:
    items = _optional(root, key, "", _as_list, default=list)
    return [build(_as_object(item, f"{key}[{idx}]"), f"{key}[{idx}]") for idx, item in enumerate(items)]


def _enum(obj: Json, key: str, path: str, enum_cls, default: Any = None, *, required: bool = False):
    if required:
        return enum_cls.from_code(_required(obj, key, path, _as_code))
    code = _optional(obj, key, path, _as_code)
    return default if code is None else enum_cls.from_code(code)


def _nested(build: Callable[[Json, str], T]) -> Callable[[Any, str], T]:
    return lambda value, path: build(_as_object(value, path), path)


# ---------------------------------------------------------------------------
# Schema builders


def _build_asset(value: Any, path: str) -> Asset:
    obj = _as_object(value, path)
    return Asset(
        version=_required(obj, "version", path, _as_str),
        generator=_optional(obj, "generator", path, _as_str),
        copyright=_optional(obj, "copyright", path, _as_str),
        min_version=_optional(obj, "minVersion", path, _as_str),
    )


def _build_buffer(obj: Json, path: str) -> Buffer:
    return Buffer(
        uri=_optional(obj, "uri", path, _as_str),
        byte_length=_required(obj, "byteLength", path, _as_index),
        name=_optional(obj, "name", path, _as_str),
    )


def _build_buffer_view(obj: Json, path: str) -> BufferView:
    stride_key = "byteStride" if "byteStride" in obj else "stride"
    return BufferView(
        buffer=_required(obj, "buffer", path, _as_index),
        byte_offset=_optional(obj, "byteOffset", path, _as_index, default=0),
        byte_length=_required(obj, "byteLength", path, _as_index),
        stride=_optional(obj, stride_key, path, _as_index),
        target=_enum(obj, "target", path, BufferViewTarget),
        name=_optional(obj, "name", path, _as_str),
    )


def _build_sparse(obj: Json, path: str) -> Sparse:
    indices_path = _join(path, "indices")
    values_path = _join(path, "values")
    indices = _required(obj, "indices", path, _as_object)
    values = _required(obj, "values", path, _as_object)
    return Sparse(
        count=_required(obj, "count", path, _as_index),
        indices=SparseIndices(
            buffer_view=_required(indices, "bufferView", indices_path, _as_index),
            byte_offset=_optional(indices, "byteOffset", indices_path, _as_index, default=0),
            component_type=_enum(indices, "componentType", indices_path, ComponentType, required=True),
        ),
        values=SparseValues(
            buffer_view=_required(values, "bufferView", values_path, _as_index),
            byte_offset=_optional(values, "byteOffset", values_path, _as_index, default=0),
        ),
    )


def _build_accessor(obj: Json, path: str) -> Accessor:
    return Accessor(
        buffer_view=_optional(obj, "bufferView", path, _as_index),
        byte_offset=_optional(obj, "byteOffset", path, _as_index, default=0),
        component_type=_enum(obj, "componentType", path, ComponentType, required=True),
        normalized=_optional(obj, "normalized", path, _as_bool, default=False),
        count=_required(obj, "count", path, _as_index),
        type=_optional(obj, "type", path, _as_str),
        max=_optional(obj, "max", path, _numbers()),
        min=_optional(obj, "min", path, _numbers()),
        sparse=_optional(obj, "sparse", path, _nested(_build_sparse)),
        name=_optional(obj, "name", path, _as_str),
    )


def _build_image(obj: Json, path: str) -> Image:
    return Image(
        uri=_optional(obj, "uri", path, _as_str),
        mime_type=_optional(obj, "mimeType", path, _as_str),
        buffer_view=_optional(obj, "bufferView", path, _as_index),
        name=_optional(obj, "name", path, _as_str),
    )


def _build_sampler(obj: Json, path: str) -> Sampler:
    return Sampler(
        mag_filter=_enum(obj, "magFilter", path, Filter),
        min_filter=_enum(obj, "minFilter", path, Filter),
        wrap_s=_enum(obj, "wrapS", path, WrapMode, default=WrapMode.REPEAT),
        wrap_t=_enum(obj, "wrapT", path, WrapMode, default=WrapMode.REPEAT),
        name=_optional(obj, "name", path, _as_str),
    )


def _build_texture(obj: Json, path: str) -> Texture:
    return Texture(
        sampler=_optional(obj, "sampler", path, _as_index),
        source=_optional(obj, "source", path, _as_index),
        name=_optional(obj, "name", path, _as_str),
    )


def _build_texture_info(obj: Json, path: str) -> TextureInfo:
    return TextureInfo(
        index=_required(obj, "index", path, _as_index),
        tex_coord=_optional(obj, "texCoord", path, _as_index, default=0),
    )


def _build_normal_texture(obj: Json, path: str) -> NormalTextureInfo:
    return NormalTextureInfo(
        index=_required(obj, "index", path, _as_index),
        tex_coord=_optional(obj, "texCoord", path, _as_index, default=0),
        scale=_optional(obj, "scale", path, _as_number, default=1.0),
    )


def _build_occlusion_texture(obj: Json, path: str) -> OcclusionTextureInfo:
    return OcclusionTextureInfo(
        index=_required(obj, "index", path, _as_index),
        tex_coord=_optional(obj, "texCoord", path, _as_index, default=0),
        strength=_optional(obj, "strength", path, _as_number, default=1.0),
    )


def _build_pbr(obj: Json, path: str) -> PBRMetallicRoughness:
    return PBRMetallicRoughness(
        base_color_factor=_optional(
            obj, "baseColorFactor", path, _numbers(4), default=lambda: [1.0, 1.0, 1.0, 1.0]
        ),
        base_color_texture=_optional(obj, "baseColorTexture", path, _nested(_build_texture_info)),
        metallic_factor=_optional(obj, "metallicFactor", path, _as_number, default=1.0),
        roughness_factor=_optional(obj, "roughnessFactor", path, _as_number, default=1.0),
        metallic_roughness_texture=_optional(
            obj, "metallicRoughnessTexture", path, _nested(_build_texture_info)
        ),
    )


def _build_material(obj: Json, path: str) -> Material:
    pbr_path = _join(path, "pbrMetallicRoughness")
    pbr = _optional(obj, "pbrMetallicRoughness", path, _as_object, default=dict)
    return Material(
        name=_optional(obj, "name", path, _as_str),
        pbr_metallic_roughness=_build_pbr(pbr, pbr_path),
        normal_texture=_optional(obj, "normalTexture", path, _nested(_build_normal_texture)),
        occlusion_texture=_optional(obj, "occlusionTexture", path, _nested(_build_occlusion_texture)),
        emissive_texture=_optional(obj, "emissiveTexture", path, _nested(_build_texture_info)),
        emissive_factor=_optional(obj, "emissiveFactor", path, _numbers(3), default=lambda: [0.0, 0.0, 0.0]),
        alpha_mode=_enum(obj, "alphaMode", path, AlphaMode, default=AlphaMode.OPAQUE),
        alpha_cutoff=_optional(obj, "alphaCutoff", path, _as_number, default=0.5),
        double_sided=_optional(obj, "doubleSided", path, _as_bool, default=False),
    )


def _build_primitive(obj: Json, path: str) -> Primitive:
    targets = _optional(obj, "targets", path, _as_list)
    if targets is not None:
        targets_path = _join(path, "targets")
        targets = [_index_map(item, f"{targets_path}[{idx}]") for idx, item in enumerate(targets)]
    return Primitive(
        attributes=_optional(obj, "attributes", path, _index_map, default=dict),
        indices=_optional(obj, "indices", path, _as_index),
        material=_optional(obj, "material", path, _as_index),
        mode=_enum(obj, "mode", path, PrimitiveMode, default=PrimitiveMode.TRIANGLES),
        targets=targets,
    )


def _build_mesh(obj: Json, path: str) -> Mesh:
    primitives = _optional(obj, "primitives", path, _as_list, default=list)
    primitives_path = _join(path, "primitives")
    return Mesh(
        primitives=[
            _build_primitive(_as_object(item, f"{primitives_path}[{idx}]"), f"{primitives_path}[{idx}]")
            for idx, item in enumerate(primitives)
        ],
        weights=_optional(obj, "weights", path, _numbers()),
        name=_optional(obj, "name", path, _as_str),
    )


def _build_node(obj: Json, path: str) -> Node:
    return Node(
        camera=_optional(obj, "camera", path, _as_index),
        children=_optional(obj, "children", path, _indices, default=list),
        skin=_optional(obj, "skin", path, _as_index),
        matrix=_optional(obj, "matrix", path, _numbers(16)),
        mesh=_optional(obj, "mesh", path, _as_index),
        rotation=_optional(obj, "rotation", path, _numbers(4)),
        scale=_optional(obj, "scale", path, _numbers(3)),
        translation=_optional(obj, "translation", path, _numbers(3)),
        weights=_optional(obj, "weights", path, _numbers()),
        name=_optional(obj, "name", path, _as_str),
    )


def _build_scene(obj: Json, path: str) -> Scene:
    return Scene(
        nodes=_optional(obj, "nodes", path, _indices, default=list),
        name=_optional(obj, "name", path, _as_str),
    )
