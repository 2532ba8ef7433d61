"""Resolve the byte ranges of every mesh primitive."""

from __future__ import annotations

from typing import List, Optional

from ..core.analyzer import DocumentContext, DocumentInspector
from ..core.resolver import AttributeRange, lookup, resolve
from ..exceptions import GltfError
from ..models import Document, Primitive, PrimitiveSummary

INDICES_KEY = "<indices>"


class PrimitiveInspector(DocumentInspector):
    """Collect attribute and index ranges for each primitive.

    Each attribute is resolved on its own; a failure is recorded against that
    attribute name in ``PrimitiveSummary.errors`` and the remaining attributes
    are still reported.
    """

    id = "primitives"

    def collect(self, context: DocumentContext) -> List[PrimitiveSummary]:
        document = context.document
        summaries: List[PrimitiveSummary] = []

        for mesh_index, mesh in enumerate(document.meshes):
            for primitive_index, primitive in enumerate(mesh.primitives):
                summary = PrimitiveSummary(
                    mesh_index=mesh_index,
                    primitive_index=primitive_index,
                    mode=primitive.mode,
                    mesh_name=mesh.name,
                    material=primitive.material,
                )
                _describe_material(document, primitive, summary)

                for name, accessor in sorted(primitive.attributes.items()):
                    resolved = _resolve_checked(context, accessor, name, summary)
                    if resolved is not None:
                        summary.attributes[name] = tuple(resolved)

                if primitive.indices is not None:
                    resolved = _resolve_checked(context, primitive.indices, INDICES_KEY, summary)
                    if resolved is not None:
                        summary.indices = tuple(resolved)

                summaries.append(summary)

        return summaries


def _describe_material(document: Document, primitive: Primitive, summary: PrimitiveSummary) -> None:
    if primitive.material is None:
        return
    try:
        material = lookup(document, "materials", primitive.material)
    except GltfError as exc:
        summary.errors["<material>"] = str(exc)
        return
    summary.base_color = tuple(material.pbr_metallic_roughness.base_color_factor)


def _resolve_checked(
    context: DocumentContext,
    accessor: int,
    key: str,
    summary: PrimitiveSummary,
) -> Optional[AttributeRange]:
    try:
        resolved = resolve(context.document, accessor)
    except GltfError as exc:
        summary.errors[key] = str(exc)
        return None

    data = context.buffers[resolved.buffer] if resolved.buffer < len(context.buffers) else None
    if data is not None and resolved.end > len(data):
        summary.errors[key] = (
            f"range {resolved.offset}..{resolved.end} exceeds buffer {resolved.buffer} "
            f"({len(data)} bytes)"
        )
        return None
    return resolved
