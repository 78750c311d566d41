"""
Helper utilities for the documentation collector.

Path handling shared by every collector step. Paths passed around between
steps are project-relative strings in forward-slash form.
"""

import os
from pathlib import Path
from typing import Iterable, List, Optional, Union

from loguru import logger

INDEX_NAMES = {"readme.md", "index.md"}


def normalize_path(path: Union[str, os.PathLike]) -> str:
    """
    Convert a path to forward-slash form.

    Idempotent: normalizing an already-normalized path returns it unchanged.

    Args:
        path: Any path string or path-like object

    Returns:
        Path string using only '/' as separator
    """
    return os.fspath(path).replace("\\", "/")


def relative_posix(path: Path, root: Path) -> Optional[str]:
    """Return ``path`` relative to ``root`` in normalized form, or None if outside."""
    try:
        return normalize_path(path.relative_to(root))
    except ValueError:
        return None


def path_segments(rel_path: str) -> List[str]:
    """Split a normalized relative path into non-empty segments."""
    return [part for part in normalize_path(rel_path).split("/") if part and part != "."]


def is_hidden(path: Path) -> bool:
    """Check if path is hidden (starts with dot)."""
    return path.name.startswith('.')


def is_index_name(name: str) -> bool:
    """True for README.md / index.md in any casing."""
    return name.lower() in INDEX_NAMES


def is_markdown(name: str) -> bool:
    """Case-insensitive check for a Markdown file name."""
    return name.lower().endswith(".md")


def has_dir_segment(rel_path: str, names: Iterable[str]) -> bool:
    """
    Check whether any directory segment of ``rel_path`` is one of ``names``.

    Comparison is case-insensitive; the file name itself is not considered.
    """
    wanted = {n.lower() for n in names}
    return any(part.lower() in wanted for part in path_segments(rel_path)[:-1])


def should_exclude_path(rel_path: str, ignore_dirs: Iterable[str]) -> bool:
    """
    Check if a relative path lies under an ignored or hidden directory.

    Args:
        rel_path: Project-relative path
        ignore_dirs: Directory names to exclude

    Returns:
        True if should exclude, False otherwise
    """
    parts = path_segments(rel_path)
    if any(part.startswith('.') for part in parts):
        return True
    return has_dir_segment(rel_path, ignore_dirs)


def walk_files(root: Path, ignore_dirs: Iterable[str] = ()) -> List[str]:
    """
    Recursively list files under ``root`` as sorted relative paths.

    Ignored directory names are pruned case-insensitively; hidden entries and
    symlinked directories are skipped. Errors listing ``root`` itself
    propagate; subdirectories that cannot be listed are logged and skipped.

    Args:
        root: Directory to walk
        ignore_dirs: Directory names to prune

    Returns:
        List of normalized project-relative file paths
    """
    ignored = {d.lower() for d in ignore_dirs}
    found: List[str] = []

    def _walk(current: Path, rel: str):
        for item in sorted(current.iterdir()):
            if is_hidden(item):
                continue

            item_rel = f"{rel}/{item.name}" if rel else item.name

            if item.is_dir():
                if item.is_symlink() or item.name.lower() in ignored:
                    continue
                try:
                    _walk(item, item_rel)
                except PermissionError:
                    logger.warning(f"Permission denied: {item}")
                except OSError as e:
                    logger.warning(f"Skipping unreadable directory {item}: {e}")
            elif item.is_file():
                found.append(item_rel)

    _walk(root, "")
    return found
