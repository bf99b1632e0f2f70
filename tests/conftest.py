from __future__ import annotations

import io
import pathlib
import sys

import pytest

REPO_ROOT = pathlib.Path(__file__).resolve().parents[1]

if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from apps.leptos_docs import DocLibrary, LeptosTools  # noqa: E402
from apps.leptos_mcp.app import create_dispatcher  # noqa: E402
from apps.leptos_mcp.config import ServerSettings  # noqa: E402
from apps.leptos_mcp.dispatcher import Dispatcher  # noqa: E402
from apps.leptos_mcp.session import StdioSession  # noqa: E402

SCHEMA_DIR = REPO_ROOT / "apps" / "leptos_mcp" / "schemas"


@pytest.fixture(scope="session")
def repo_root() -> pathlib.Path:
    return REPO_ROOT


@pytest.fixture(scope="session")
def library() -> DocLibrary:
    return DocLibrary.load()


@pytest.fixture
def tools(library: DocLibrary) -> LeptosTools:
    return LeptosTools(library)


@pytest.fixture
def settings() -> ServerSettings:
    return ServerSettings()


@pytest.fixture
def dispatcher(settings: ServerSettings, tools: LeptosTools) -> Dispatcher:
    return create_dispatcher(settings, registry=tools)


@pytest.fixture
def run_session(dispatcher: Dispatcher):
    """Feed ``lines`` through a session and return the written output lines."""

    def _run(*lines: str) -> list[str]:
        reader = io.StringIO("".join(f"{line}\n" for line in lines))
        writer = io.StringIO()
        StdioSession(dispatcher, reader=reader, writer=writer).run()
        return writer.getvalue().split("\n")[:-1]

    return _run
