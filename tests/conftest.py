from pathlib import Path

import pytest
from PIL import Image

from docsite.utils.config import Settings
from domains.doc_ingest.collectors.doc_collector import DocCollector
from tests._fixtures.tree_builder import make_animated_gif, write

FRONTMATTER_SOURCE = b"---\r\ntitle: Prewritten\r\n---\r\n\r\nAlready formatted.\r\n"


@pytest.fixture
def project(tmp_path: Path) -> Path:
    """A small project tree with every kind of documentation source."""
    root = tmp_path / "project"

    write(root / "README.md", "# Project\n")
    write(root / "a" / "b" / "README.md", "")
    write(root / "a" / "b" / "guide.md", "# Guide\n")
    write(root / "pre" / "README.md", FRONTMATTER_SOURCE)
    write(root / "node_modules" / "pkg" / "README.md", "# Dependency\n")
    write(root / ".git" / "README.md", "# Hidden\n")

    write(root / "plugins" / "foo" / "README.md", "# Foo plugin\n")
    write(root / "plugins" / "baz" / "readme.md", "# Baz plugin\n")
    (root / "plugins" / "empty").mkdir(parents=True)
    write(root / "connectors" / "postgres" / "README.md", "# Postgres\n")

    make_animated_gif(root / "assets" / "demo.gif")
    Image.new("RGB", (2400, 1200), "white").save(root / "assets" / "wide.png")
    write(root / "a" / "assets" / "manual.pdf", b"%PDF-1.4\n\x00\x01binary\xff")

    write(root / "docs-content" / "guides" / "setup.md", "---\ntitle: Setup\n---\nSteps\n")

    return root


@pytest.fixture
def settings(project: Path) -> Settings:
    return Settings(project_root=project)


@pytest.fixture
def collector(settings: Settings) -> DocCollector:
    return DocCollector(settings)


@pytest.fixture
def docs_dir(project: Path) -> Path:
    return project / "docs" / "src" / "content" / "docs"
