from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping, Sequence
from typing import Any, Protocol, runtime_checkable

from apps.leptos_mcp.models import ToolDescriptor

__all__ = ["CapabilityTable", "OperationRegistry"]


@runtime_checkable
class OperationRegistry(Protocol):
    """Collaborator implementing the named operations served over MCP."""

    def describe(self) -> Sequence[ToolDescriptor]:
        """Return the operations this registry implements, in display order."""

    def __contains__(self, name: object) -> bool:
        """Return whether ``name`` is a registered operation."""

    def invoke(self, name: str, arguments: Mapping[str, Any]) -> str:
        """Run operation ``name`` and return its textual result."""


class CapabilityTable:
    """Read-only, declaration-ordered list of advertised operations."""

    __slots__ = ("_descriptors", "_index")

    def __init__(self, descriptors: Iterable[ToolDescriptor]) -> None:
        ordered = tuple(descriptors)
        index: dict[str, ToolDescriptor] = {}
        for descriptor in ordered:
            if descriptor.name in index:
                raise ValueError(f"Duplicate operation name: {descriptor.name}")
            index[descriptor.name] = descriptor
        self._descriptors = ordered
        self._index = index

    @classmethod
    def from_registry(cls, registry: OperationRegistry) -> CapabilityTable:
        return cls(registry.describe())

    def capabilities(self) -> tuple[ToolDescriptor, ...]:
        return self._descriptors

    def to_wire(self) -> dict[str, Any]:
        """Return the ``tools/list`` result payload."""

        return {"tools": [descriptor.to_wire() for descriptor in self._descriptors]}

    def __contains__(self, name: object) -> bool:
        return name in self._index

    def __iter__(self) -> Iterator[ToolDescriptor]:
        return iter(self._descriptors)

    def __len__(self) -> int:
        return len(self._descriptors)
