"""
Destination routing for collected documents.

Every source path is resolved to a ``Category`` once; destinations are a pure
function of (category, path) and are returned relative to the docs directory.
"""

from pathlib import PurePosixPath
from typing import Optional

from docsite.models.schemas import Category
from docsite.utils.helpers import is_index_name, path_segments

COMPONENT_CATEGORIES = (Category.CONNECTOR, Category.PLUGIN)


def resolve_category(rel_path: str) -> Category:
    """
    Classify a source path.

    A path belongs to a component category when one of its directories is
    named after the category and a component directory follows it, e.g.
    ``plugins/foo/README.md``. A README directly inside ``plugins/`` is general.
    """
    dirs = path_segments(rel_path)[:-1]

    for position, part in enumerate(dirs):
        if position + 1 >= len(dirs):
            break
        for category in COMPONENT_CATEGORIES:
            if part.lower() == category.directory:
                return category

    return Category.GENERAL


def component_name(rel_path: str) -> str:
    """Name a component document after its parent directory, or its own stem."""
    parts = path_segments(rel_path)
    if is_index_name(parts[-1]) and len(parts) > 1:
        return parts[-2]
    return PurePosixPath(parts[-1]).stem


def destination_for(category: Category, rel_path: str) -> str:
    """
    Map a source path to its destination inside the docs directory.

    General documents become an ``index.md`` inside a directory mirroring the
    source; component documents are flattened to ``<category>/<name>.md``.
    """
    if category in COMPONENT_CATEGORIES:
        return f"{category.directory}/{component_name(rel_path)}.md"

    parts = path_segments(rel_path)
    target_dirs = parts[:-1]
    if not is_index_name(parts[-1]):
        target_dirs.append(PurePosixPath(parts[-1]).stem)

    return "/".join(target_dirs + ["index.md"])


def route(rel_path: str) -> str:
    """Resolve category and destination in one step."""
    return destination_for(resolve_category(rel_path), rel_path)


def category_index_path(category: Category) -> str:
    """Destination of the generated index of a component category."""
    return f"{category.directory}/index.md"


def passthrough_destination(rel_path: str, segment: str) -> Optional[str]:
    """
    Strip the first directory named ``segment`` from ``rel_path``.

    Returns None when the path does not pass through such a directory.
    """
    parts = path_segments(rel_path)

    for position, part in enumerate(parts[:-1]):
        if part.lower() == segment.lower():
            return "/".join(parts[:position] + parts[position + 1:])

    return None
