"""Leptos documentation tools exposed through MCP ``tools/call``."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from apps.leptos_docs.library import DocLibrary
from apps.leptos_mcp.models import ToolDescriptor
from apps.leptos_mcp.models.tools import string_arguments_schema

__all__ = ["LeptosTools", "NO_ISSUES_MESSAGE", "autofix"]

NO_ISSUES_MESSAGE = "✓ No issues found. Code looks good!"


@dataclass(frozen=True)
class _Rule:
    message: str
    check: Callable[[str], bool]


_AUTOFIX_RULES: tuple[_Rule, ...] = (
    _Rule(
        "ERROR: Found .get() in view without `move ||`. "
        "Reactive values should use `{move || value.get()}`",
        lambda code: ".get()" in code and "move ||" not in code and "view!" in code,
    ),
    _Rule(
        "WARNING: Consider using `let (getter, setter) = signal(value)` pattern for clarity",
        lambda code: "let signal =" in code or "create_signal" in code,
    ),
    _Rule(
        "WARNING: Use tracing macros (tracing::info!, tracing::debug!) instead of println!",
        lambda code: "println!" in code,
    ),
    _Rule(
        "ERROR: Functions returning `impl IntoView` should have #[component] attribute",
        lambda code: "-> impl IntoView" in code and "#[component]" not in code,
    ),
    _Rule(
        "INFO: Server functions should return Result<T, ServerFnError>",
        lambda code: "#[server" in code and "ServerFnError" not in code,
    ),
    _Rule(
        "INFO: In Leptos 0.8+, use `signal()` instead of `create_signal()`",
        lambda code: "create_signal" in code,
    ),
    _Rule(
        "WARNING: For controlled inputs, use `prop:value=` instead of `value=`",
        lambda code: "value=" in code and "prop:value=" not in code and "<input" in code,
    ),
)


def autofix(code: str) -> str:
    """Run the heuristic checks over a Leptos snippet, one finding per line."""

    findings = [rule.message for rule in _AUTOFIX_RULES if rule.check(code)]
    if not findings:
        return NO_ISSUES_MESSAGE
    return "\n".join(findings)


def _string_argument(arguments: Mapping[str, Any], name: str) -> str:
    value = arguments.get(name)
    return value if isinstance(value, str) else ""


class LeptosTools:
    """Operation registry backed by a :class:`DocLibrary`."""

    def __init__(self, library: DocLibrary) -> None:
        self._library = library
        self._descriptors: tuple[ToolDescriptor, ...] = (
            ToolDescriptor(
                name="list-sections",
                description=(
                    "List all available Leptos documentation sections with their use cases"
                ),
                inputSchema=string_arguments_schema(),
            ),
            ToolDescriptor(
                name="get-documentation",
                description=(
                    "Get Leptos documentation for a specific section. "
                    "Pass section name like 'signals', 'components', 'routing'"
                ),
                inputSchema=string_arguments_schema(
                    section="Section name or path to retrieve",
                ),
            ),
            ToolDescriptor(
                name="leptos-autofixer",
                description="Analyze Leptos code and suggest fixes for common issues",
                inputSchema=string_arguments_schema(code="Leptos code to analyze"),
            ),
        )
        self._handlers: dict[str, Callable[[Mapping[str, Any]], str]] = {
            "list-sections": lambda arguments: self.list_sections(),
            "get-documentation": lambda arguments: self.get_documentation(
                _string_argument(arguments, "section")
            ),
            "leptos-autofixer": lambda arguments: self.leptos_autofixer(
                _string_argument(arguments, "code")
            ),
        }

    def describe(self) -> tuple[ToolDescriptor, ...]:
        return self._descriptors

    def __contains__(self, name: object) -> bool:
        return name in self._handlers

    def invoke(self, name: str, arguments: Mapping[str, Any]) -> str:
        return self._handlers[name](arguments)

    def list_sections(self) -> str:
        return "\n".join(
            f"* title: {section.title}, use_cases: {section.use_cases}, path: {section.path}"
            for section in self._library
        )

    def get_documentation(self, section: str) -> str:
        doc = self._library.find(section)
        if doc is None:
            return (
                f"Section '{section}' not found. "
                "Use list-sections to see available sections."
            )
        return f"# {doc.title}\n\n{doc.content}"

    def leptos_autofixer(self, code: str) -> str:
        return autofix(code)
