from pathlib import Path

from docsite.utils.helpers import (
    has_dir_segment,
    normalize_path,
    should_exclude_path,
    walk_files,
)
from tests._fixtures.tree_builder import write


def test_normalize_path_mixed_separators():
    normalized = normalize_path("docs\\guides/setup\\README.md")

    assert normalized == "docs/guides/setup/README.md"
    assert "\\" not in normalized


def test_normalize_path_is_idempotent():
    once = normalize_path("a\\b\\c.md")

    assert normalize_path(once) == once
    assert normalize_path("already/normal.md") == "already/normal.md"
    assert normalize_path("") == ""


def test_has_dir_segment_ignores_file_name_and_case():
    assert has_dir_segment("pkg/Assets/logo.png", ["assets"])
    assert not has_dir_segment("pkg/assets", ["assets"])
    assert not has_dir_segment("my-assets/logo.png", ["assets"])


def test_should_exclude_path():
    ignore = ["node_modules", "docs"]

    assert should_exclude_path("web/node_modules/pkg/README.md", ignore)
    assert should_exclude_path("Docs/README.md", ignore)
    assert should_exclude_path(".github/README.md", ignore)
    assert not should_exclude_path("web/README.md", ignore)


def test_walk_files_prunes_ignored_and_hidden(tmp_path):
    write(tmp_path / "README.md")
    write(tmp_path / "src" / "README.md")
    write(tmp_path / "build" / "README.md")
    write(tmp_path / ".cache" / "README.md")
    write(tmp_path / ".hidden.md")

    files = walk_files(tmp_path, ["build"])

    assert files == ["README.md", "src/README.md"]


def test_walk_files_skips_directory_that_cannot_be_listed(tmp_path, monkeypatch):
    write(tmp_path / "keep" / "README.md")
    write(tmp_path / "gone" / "README.md")
    real_iterdir = Path.iterdir

    def iterdir(self):
        if self.name == "gone":
            raise FileNotFoundError(f"{self} removed during walk")
        return real_iterdir(self)

    monkeypatch.setattr(Path, "iterdir", iterdir)

    assert walk_files(tmp_path) == ["keep/README.md"]
