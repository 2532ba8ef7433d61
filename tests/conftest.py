import base64
import json
import struct

import pytest

POSITIONS = [(0.0, 0.0, 0.0), (1.0, 0.0, 0.0), (0.0, 1.0, 0.0)]
INDICES = [0, 1, 2]


def _triangle_bytes() -> bytes:
    data = b"".join(struct.pack("<3f", *position) for position in POSITIONS)
    # three u16 indices plus two bytes of padding to keep the buffer 4-byte aligned
    data += struct.pack("<3H", *INDICES) + b"\x00\x00"
    return data


def _triangle_gltf(uri: str) -> dict:
    return {
        "asset": {"version": "2.0", "generator": "tests"},
        "scene": 0,
        "scenes": [{"nodes": [0]}],
        "nodes": [{"name": "Triangle", "mesh": 0, "translation": [1, 2, 3]}],
        "meshes": [
            {
                "name": "TriangleMesh",
                "primitives": [{"attributes": {"POSITION": 0}, "indices": 1, "material": 0}],
            }
        ],
        "materials": [{"pbrMetallicRoughness": {"baseColorFactor": [1.0, 0.0, 0.0, 1.0]}}],
        "buffers": [{"uri": uri, "byteLength": 44}],
        "bufferViews": [
            {"buffer": 0, "byteOffset": 0, "byteLength": 36, "target": 34962},
            {"buffer": 0, "byteOffset": 36, "byteLength": 6, "target": 34963},
        ],
        "accessors": [
            {
                "bufferView": 0,
                "componentType": 5126,
                "count": 3,
                "type": "VEC3",
                "max": [1, 1, 0],
                "min": [0, 0, 0],
            },
            {"bufferView": 1, "componentType": 5123, "count": 3, "type": "SCALAR"},
        ],
    }


@pytest.fixture
def triangle_bytes() -> bytes:
    return _triangle_bytes()


@pytest.fixture
def triangle_gltf():
    """Factory for the triangle document; pass a uri, default is an inline data URI."""

    def build(uri=None) -> dict:
        if uri is None:
            uri = "data:application/octet-stream;base64," + base64.b64encode(_triangle_bytes()).decode()
        return _triangle_gltf(uri)

    return build


@pytest.fixture
def write_triangle(tmp_path, triangle_gltf, triangle_bytes):
    """Write the triangle as ``scene.gltf`` plus ``tri.bin`` and return the gltf path."""

    def write(with_bin: bool = True):
        if with_bin:
            (tmp_path / "tri.bin").write_bytes(triangle_bytes)
        path = tmp_path / "scene.gltf"
        path.write_text(json.dumps(triangle_gltf("tri.bin")), encoding="utf-8")
        return path

    return write
