from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

__all__ = ["DEFAULT_CONTENT_DIR", "DocLibrary", "DocManifestError", "DocSection"]

DEFAULT_CONTENT_DIR = Path(__file__).resolve().parent / "content"

MANIFEST_NAME = "sections.yaml"

_REQUIRED_FIELDS = ("title", "path", "use_cases", "file")


class DocManifestError(Exception):
    """Raised when the documentation manifest or its files are invalid."""


@dataclass(frozen=True)
class DocSection:
    """One documentation section served by the registry."""

    title: str
    path: str
    use_cases: str
    content: str

    def matches(self, query: str) -> bool:
        needle = query.lower()
        return needle in self.path.lower() or needle in self.title.lower()


def _require_str(entry: Mapping[str, Any], field: str, source: Path) -> str:
    value = entry[field]
    if not isinstance(value, str) or not value.strip():
        raise DocManifestError(f"Section field '{field}' in {source} must be a non-empty string")
    return value.strip()


class DocLibrary:
    """Documentation sections in manifest order, loaded once at startup."""

    def __init__(self, sections: tuple[DocSection, ...]) -> None:
        self._sections = sections

    @classmethod
    def load(cls, directory: Path | str | None = None) -> DocLibrary:
        base_dir = Path(directory or DEFAULT_CONTENT_DIR).expanduser().resolve()
        manifest = base_dir / MANIFEST_NAME
        if not manifest.is_file():
            raise DocManifestError(f"Documentation manifest not found: {manifest}")

        with manifest.open("r", encoding="utf-8") as handle:
            try:
                data = yaml.safe_load(handle)
            except yaml.YAMLError as exc:
                raise DocManifestError(f"Failed to parse YAML manifest {manifest}: {exc}") from exc

        entries = data.get("sections") if isinstance(data, Mapping) else None
        if not isinstance(entries, list) or not entries:
            raise DocManifestError(f"Manifest {manifest} must define a non-empty 'sections' list")

        sections: list[DocSection] = []
        seen: set[str] = set()
        for entry in entries:
            if not isinstance(entry, Mapping):
                raise DocManifestError(f"Section entries in {manifest} must be mappings")
            missing = [field for field in _REQUIRED_FIELDS if field not in entry]
            if missing:
                raise DocManifestError(
                    f"Section in {manifest} missing required field(s): {', '.join(missing)}"
                )
            path = _require_str(entry, "path", manifest)
            if path in seen:
                raise DocManifestError(f"Duplicate section path '{path}' in {manifest}")
            seen.add(path)

            content_path = base_dir / _require_str(entry, "file", manifest)
            try:
                content = content_path.read_text(encoding="utf-8")
            except OSError as exc:
                raise DocManifestError(
                    f"Cannot read content for section '{path}': {content_path}"
                ) from exc

            sections.append(
                DocSection(
                    title=_require_str(entry, "title", manifest),
                    path=path,
                    use_cases=_require_str(entry, "use_cases", manifest),
                    content=content,
                )
            )
        return cls(tuple(sections))

    def sections(self) -> tuple[DocSection, ...]:
        return self._sections

    def find(self, query: str) -> DocSection | None:
        """Return the first section whose path or title contains ``query``."""

        for section in self._sections:
            if section.matches(query):
                return section
        return None

    def __iter__(self) -> Iterator[DocSection]:
        return iter(self._sections)

    def __len__(self) -> int:
        return len(self._sections)
