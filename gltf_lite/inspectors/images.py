"""Report where each image's encoded bytes live."""

from __future__ import annotations

from typing import List

from ..core.analyzer import DocumentContext, DocumentInspector
from ..core.resolver import ImageBytes, ImageSlice, image_source
from ..exceptions import GltfError
from ..models import ImageSummary


class ImageInspector(DocumentInspector):
    id = "images"

    def collect(self, context: DocumentContext) -> List[ImageSummary]:
        summaries: List[ImageSummary] = []
        for index, image in enumerate(context.document.images):
            summary = ImageSummary(
                index=index,
                source_kind=None,
                name=image.name,
                mime_type=image.mime_type,
            )
            try:
                source = image_source(context.document, image)
            except GltfError as exc:
                summary.error = str(exc)
                summaries.append(summary)
                continue

            if isinstance(source, ImageBytes):
                summary.source_kind = "bytes"
                summary.byte_length = len(source.data)
            elif isinstance(source, ImageSlice):
                summary.source_kind = "slice"
                summary.byte_length = source.length
                summary.location = f"buffers[{source.buffer}][{source.offset}:{source.offset + source.length}]"
            else:
                summary.source_kind = "path"
                summary.location = source.path
            summaries.append(summary)

        return summaries
