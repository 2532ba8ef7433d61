"""Command-line interface for gltf_lite."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, Iterable, Optional

from .core import DocumentAnalyzer
from .exceptions import DocumentLoadError, GltfError
from .inspectors import ImageInspector, PrimitiveInspector, SceneGraphInspector, TopLevelInspector
from .models import AnalyzedDocument, PrimitiveSummary


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Inspect a glTF JSON document and resolve the byte ranges of its meshes and images."
    )
    parser.add_argument("path", type=Path, help="Path to the .gltf file to analyze.")
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the full analysis as JSON instead of a text summary.",
    )
    parser.add_argument(
        "--no-buffers",
        action="store_true",
        help="Do not read external buffer files; inline data URIs are still decoded.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging.",
    )
    return parser


def main(argv: Optional[Iterable[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s - %(message)s",
    )

    path = args.path
    if not path.exists():
        parser.error(f"File not found: {path}")

    top_level_inspector = TopLevelInspector()
    scene_graph_inspector = SceneGraphInspector()
    primitive_inspector = PrimitiveInspector()
    image_inspector = ImageInspector()

    try:
        with DocumentAnalyzer(str(path), load_buffers=not args.no_buffers) as analyzer:
            results = analyzer.run(
                [top_level_inspector, scene_graph_inspector, primitive_inspector, image_inspector]
            )
    except DocumentLoadError as exc:
        parser.error(str(exc))
    except GltfError as exc:
        parser.error(f"Invalid document: {exc}")

    document = AnalyzedDocument(
        path=str(path),
        scene_graph=results.get(scene_graph_inspector.id, []),
        top_level_nodes=results.get(top_level_inspector.id, []),
        primitives=results.get(primitive_inspector.id, []),
        images=results.get(image_inspector.id, []),
    )

    if args.json:
        print(json.dumps(document.to_dict(), indent=2))
        return 0

    _print_top_level_summary(document.top_level_nodes, title=Path(document.path).name)

    for root in document.scene_graph:
        print(f"Scene root {root.name}: {root.node_count} node(s)")

    if not document.primitives:
        print("No mesh primitives found.")
    for primitive in document.primitives:
        _print_primitive(primitive)

    for image in document.images:
        if image.error:
            print(f"Image {image.index}: error: {image.error}")
            continue
        size = f", {image.byte_length} bytes" if image.byte_length is not None else ""
        location = f" at {image.location}" if image.location else ""
        print(f"Image {image.index} [{image.source_kind}{size}]{location}")

    return 0


def _print_top_level_summary(entries: Iterable[Dict[str, Any]], *, title: str) -> None:
    entries = list(entries or [])
    if not entries:
        print(f"Top-level scene nodes ({title}): <none>")
        return

    print(f"Top-level scene nodes ({title}):")
    for entry in entries:
        name = entry.get("name", "<unnamed>")
        child_count = entry.get("child_count", 0)
        extra_str = f" (mesh {entry['mesh']})" if entry.get("is_mesh") else ""
        print(f"  - {name} [children: {child_count}]{extra_str}")


def _print_primitive(primitive: PrimitiveSummary) -> None:
    label = primitive.mesh_name or f"Mesh_{primitive.mesh_index}"
    print(f"{label} primitive {primitive.primitive_index} ({primitive.mode.name}):")
    if primitive.base_color is not None:
        color = ", ".join(f"{value:.3f}" for value in primitive.base_color)
        print(f"  material {primitive.material} color ({color})")
    for name, (buffer, offset, length) in primitive.attributes.items():
        print(f"  - {name}: buffer {buffer}, offset {offset}, {length} bytes")
    if primitive.indices is not None:
        buffer, offset, length = primitive.indices
        print(f"  - indices: buffer {buffer}, offset {offset}, {length} bytes")
    for name, message in primitive.errors.items():
        print(f"  ! {name}: {message}")


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
