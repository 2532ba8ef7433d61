"""High level analyzer orchestration.

This is the I/O shell around the pure core: it reads the document text and
any external buffer files from disk, then hands a :class:`DocumentContext`
to each inspector.
"""

from __future__ import annotations

import contextlib
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Protocol

from ..exceptions import DocumentLoadError, IndexOutOfRange
from ..models import Document
from . import loader
from .resolver import buffer_source, resolve
from .uri import InlineBytes

logger = logging.getLogger(__name__)


class DocumentInspector(Protocol):
    """Protocol defining how inspectors gather data from a loaded document."""

    id: str

    def collect(self, context: "DocumentContext") -> Any:
        """Return extracted information from the document."""


@dataclass
class DocumentContext:
    """Holds the parsed document and whatever buffer bytes could be loaded."""

    path: str
    document: Document
    buffers: List[Optional[bytes]] = field(default_factory=list)

    def attribute_data(self, accessor_index: int) -> bytes:
        """Slice the bytes of an accessor out of its loaded buffer."""

        buffer, offset, length = resolve(self.document, accessor_index)
        data = self.buffers[buffer] if buffer < len(self.buffers) else None
        if data is None:
            raise DocumentLoadError(f"Buffer {buffer} was not loaded")
        if offset + length > len(data):
            raise IndexOutOfRange(f"buffers[{buffer}] bytes", offset + length - 1, len(data))
        return data[offset:offset + length]


def load_buffers(document: Document, base_dir: Path, *, read_external: bool = True) -> List[Optional[bytes]]:
    """Materialise every buffer of ``document``.

    Inline data URIs are always decoded. External references are read relative
    to ``base_dir`` unless ``read_external`` is false, in which case their slot
    is ``None``. Buffers without a URI (GLB binary chunk) are left as ``None``.
    """

    buffers: List[Optional[bytes]] = []
    for index, buffer in enumerate(document.buffers):
        if buffer.uri is None:
            buffers.append(None)
            continue

        source = buffer_source(document, index)
        if isinstance(source, InlineBytes):
            buffers.append(source.data)
            continue
        if not read_external:
            buffers.append(None)
            continue

        path = base_dir / source.path
        try:
            data = path.read_bytes()
        except OSError as exc:
            raise DocumentLoadError(f"Failed to read buffer {index} from '{path}': {exc}") from exc
        if len(data) < buffer.byte_length:
            logger.warning(
                "Buffer %d ('%s') holds %d bytes, byteLength declares %d",
                index,
                source.path,
                len(data),
                buffer.byte_length,
            )
        buffers.append(data)

    return buffers


class DocumentAnalyzer(contextlib.AbstractContextManager["DocumentAnalyzer"]):
    """Loads a document file and coordinates data extraction."""

    def __init__(self, path: str, *, load_buffers: bool = True) -> None:
        self._path = path
        self._load_buffers = load_buffers
        self._document: Optional[Document] = None
        self._buffers: List[Optional[bytes]] = []

    @property
    def path(self) -> str:
        return self._path

    @property
    def context(self) -> DocumentContext:
        if self._document is None:
            raise RuntimeError("Analyzer not loaded. Call load() before accessing context.")
        return DocumentContext(path=self._path, document=self._document, buffers=list(self._buffers))

    def load(self) -> "DocumentAnalyzer":
        if self._document is not None:
            return self

        path = Path(self._path)
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise DocumentLoadError(f"Failed to read document from '{self._path}': {exc}") from exc

        document = loader.load(text)
        self._buffers = load_buffers(document, path.parent, read_external=self._load_buffers)
        self._document = document
        logger.debug(
            "Loaded '%s': %d nodes, %d meshes, %d accessors, %d buffer(s)",
            self._path,
            len(document.nodes),
            len(document.meshes),
            len(document.accessors),
            len(self._buffers),
        )
        return self

    def close(self) -> None:
        self._document = None
        self._buffers = []

    def __exit__(self, exc_type, exc, tb) -> Optional[bool]:
        self.close()
        return None

    # Allow usage as context manager via `with DocumentAnalyzer(path) as analyzer:`
    def __enter__(self) -> "DocumentAnalyzer":
        return self.load()

    def run(self, inspectors: Iterable[DocumentInspector]) -> Dict[str, Any]:
        """Execute inspectors and return their aggregated results."""

        results: Dict[str, Any] = {}
        ctx = self.context
        for inspector in inspectors:
            results[inspector.id] = inspector.collect(ctx)
        return results
