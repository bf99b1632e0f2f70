"""Leptos documentation registry served by the MCP server."""

from apps.leptos_docs.library import DEFAULT_CONTENT_DIR, DocLibrary, DocManifestError, DocSection
from apps.leptos_docs.tools import LeptosTools, autofix

__all__ = [
    "DEFAULT_CONTENT_DIR",
    "DocLibrary",
    "DocManifestError",
    "DocSection",
    "LeptosTools",
    "autofix",
]
