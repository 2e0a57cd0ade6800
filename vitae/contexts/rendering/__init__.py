"""
Rendering Context

Responsibilities:
- Derives the print-ready preview of a document (visible content only)
- Counts selected content per section
- Validates preview zoom levels and builds export file names

Owns: Preview derivation, export naming
Never: Modifies the document it previews
"""

from vitae.contexts.rendering.preview import (
    ALLOWED_ZOOM_PERCENTS,
    PreviewStatistics,
    build_export_file_name,
    count_selected_for_section,
    derive_preview_resume,
    ensure_valid_zoom,
    preview_statistics,
)

__all__ = [
    "ALLOWED_ZOOM_PERCENTS",
    "PreviewStatistics",
    "build_export_file_name",
    "count_selected_for_section",
    "derive_preview_resume",
    "ensure_valid_zoom",
    "preview_statistics",
]
