"""Expose summaries for the root nodes of the default scene."""

from __future__ import annotations

from typing import Any, Dict, List

from ..core.analyzer import DocumentContext, DocumentInspector
from ..core.resolver import lookup
from .scene_graph import root_node_indices


class TopLevelInspector(DocumentInspector):
    id = "top_level_nodes"

    def collect(self, context: DocumentContext) -> List[Dict[str, Any]]:
        document = context.document
        summary: List[Dict[str, Any]] = []

        for idx in root_node_indices(document):
            node = lookup(document, "nodes", idx)
            summary.append(
                {
                    "index": idx,
                    "name": node.name or f"Node_{idx}",
                    "mesh": node.mesh,
                    "child_count": len(node.children),
                    "is_mesh": node.mesh is not None,
                }
            )

        return summary
