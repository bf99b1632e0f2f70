from __future__ import annotations

from typing import TextIO

from apps.leptos_docs import DocLibrary, LeptosTools
from apps.leptos_mcp.capabilities import CapabilityTable, OperationRegistry
from apps.leptos_mcp.config import ServerSettings
from apps.leptos_mcp.dispatcher import Dispatcher
from apps.leptos_mcp.session import StdioSession

__all__ = ["create_dispatcher", "create_registry", "create_session"]


def create_registry(settings: ServerSettings) -> LeptosTools:
    """Load the documentation library and wrap it in the tool registry."""

    return LeptosTools(DocLibrary.load(settings.docs_dir))


def create_dispatcher(
    settings: ServerSettings | None = None,
    *,
    registry: OperationRegistry | None = None,
) -> Dispatcher:
    settings = settings or ServerSettings()
    registry = registry if registry is not None else create_registry(settings)
    table = CapabilityTable.from_registry(registry)
    return Dispatcher(table=table, registry=registry, settings=settings)


def create_session(
    settings: ServerSettings | None = None,
    *,
    registry: OperationRegistry | None = None,
    reader: TextIO | None = None,
    writer: TextIO | None = None,
) -> StdioSession:
    """Build a ready-to-run session with the registry and capability table wired in."""

    dispatcher = create_dispatcher(settings, registry=registry)
    return StdioSession(dispatcher, reader=reader, writer=writer)
