"""Scene graph inspector."""

from __future__ import annotations

from typing import List, Optional, Set, Tuple

from ..core.analyzer import DocumentContext, DocumentInspector
from ..core.resolver import lookup
from ..exceptions import MalformedDocument
from ..models import Document, Node, SceneNode
from ..utils import to_float_tuple, vector_or


def root_node_indices(document: Document) -> List[int]:
    """Return the root nodes of the default scene.

    Falls back to the first scene, and for documents without scenes to every
    node that is nobody's child.
    """

    if document.scenes:
        scene = lookup(document, "scenes", document.scene if document.scene is not None else 0)
        return list(scene.nodes)

    children = {child for node in document.nodes for child in node.children}
    return [idx for idx in range(len(document.nodes)) if idx not in children]


def _scene_node(index: int, node: Node) -> SceneNode:
    return SceneNode(
        name=node.name or f"Node_{index}",
        index=index,
        translation=vector_or(node.translation, (0.0, 0.0, 0.0)),
        rotation=vector_or(node.rotation, (0.0, 0.0, 0.0, 1.0)),
        scale=vector_or(node.scale, (1.0, 1.0, 1.0)),
        mesh=node.mesh,
        matrix=to_float_tuple(node.matrix, 16) if node.matrix is not None else None,
    )


class SceneGraphInspector(DocumentInspector):
    """Capture the node hierarchy of the default scene as ``SceneNode`` trees.

    Every node may be reached once: a node listed under two parents, or under
    one of its own descendants, raises :class:`MalformedDocument`.
    """

    id = "scene_graph"

    def collect(self, context: DocumentContext) -> List[SceneNode]:
        document = context.document
        seen: Set[int] = set()
        return [self._build(document, index, seen) for index in root_node_indices(document)]

    @staticmethod
    def _build(document: Document, root_index: int, seen: Set[int]) -> SceneNode:
        root: Optional[SceneNode] = None
        stack: List[Tuple[int, Optional[SceneNode]]] = [(root_index, None)]
        while stack:
            index, parent = stack.pop()
            if index in seen:
                raise MalformedDocument(
                    f"nodes[{index}]", "node has more than one parent or is part of a cycle"
                )
            seen.add(index)
            node = lookup(document, "nodes", index)

            scene_node = _scene_node(index, node)
            if parent is None:
                root = scene_node
            else:
                parent.children.append(scene_node)
            stack.extend((child, scene_node) for child in reversed(node.children))
        return root
